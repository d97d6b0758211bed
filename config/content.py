# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Marketing Content Registry
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Single source of truth for:
#   • SERVICE_CARDS / SUCCESS_STORIES — home page teasers
#   • SERVICE_SECTIONS                — Soluciones accordion
#   • CASE_STUDIES                    — Casos de Éxito cards
#   • PHILOSOPHY_ARTICLES / PRINCIPLES
#   • PIONEER_TIERS / EXECUTION_GAP   — Visión 2026 landing
#   • DC_METRICS                      — ESG4DC landing
#
# This file has ZERO Streamlit and ZERO network imports.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

BRAND_NAME: str = "Smart Rem Solutions"
CONTACT_EMAIL: str = "info@smartremsolutions.com"
OFFICE_ADDRESS: str = "Calle Alcalá, 375, 1º · 28027 Madrid, España"
LINKEDIN_URL: str = "https://www.linkedin.com/company/smart-rem-solutions/"
ESG4DC_LINKEDIN_URL: str = "https://www.linkedin.com/company/esg4dc/"

TAGLINE: str = (
    "Impulsando la Sostenibilidad Esférica para transformar la incertidumbre "
    "en valor y co-crear un futuro resiliente y próspero."
)

# ─────────────────────────────────────────────────────────────────────────────
# HOME
# ─────────────────────────────────────────────────────────────────────────────

HOME_HERO = {
    "title": "Donde la Incertidumbre se Convierte en Valor.",
    "body": (
        "La sostenibilidad tradicional es una foto fija en un mundo en movimiento. "
        "En Smart Rem Solutions, hemos adoptado un nuevo paradigma: la Sostenibilidad "
        "Esférica, un modelo de gestión integral que transforma el cambio en su mayor activo."
    ),
}

SPHERICAL_SUMMARY: str = (
    "Es un modelo de gestión que ve a su organización como una esfera en constante "
    "interacción con su entorno: mercado, sociedad y planeta. En lugar de temer al "
    "cambio, lo aprovechamos para adaptar, evolucionar y fortalecer su negocio. "
    "Convierte amenazas en oportunidades y la gestión en un acto de co-creación. "
    "El pulso de este modelo es la **\"Amormonía\"**: dar valor para recibir un éxito exponencial."
)

SERVICE_CARDS: list[dict[str, str]] = [
    {"icon": "🏗️", "title": "Ingeniería de Performance Sostenible",
     "description": "Diseñamos activos que respiran eficiencia y futuro."},
    {"icon": "🛡️", "title": "Resiliencia y Transferencia de Riesgo",
     "description": "Aseguramos tu valor en un mundo impredecible."},
    {"icon": "⚡", "title": "Energía Inteligente para la Descarbonización",
     "description": "Alineamos tu consumo con los objetivos del planeta y de tu negocio."},
    {"icon": "📊", "title": "Consultoría Avanzada ESG & Riesgo",
     "description": "Transformamos el riesgo en estrategia y la estrategia en impacto."},
]

SUCCESS_STORIES: list[dict[str, str]] = [
    {"title": "Portfolio Inmobiliario Global",
     "result": "Reducción del 30% en riesgo climático.",
     "image": "https://picsum.photos/400/300?random=1"},
    {"title": "Centro Logístico Europeo",
     "result": "Aumento del 25% en la eficiencia energética.",
     "image": "https://picsum.photos/400/300?random=2"},
    {"title": "Fondo de Inversión Sostenible",
     "result": "Mejora de 10 puntos en la evaluación GRESB.",
     "image": "https://picsum.photos/400/300?random=3"},
    {"title": "Data Center Hyperscaler",
     "result": "Optimización del PUE en un 15%.",
     "image": "https://picsum.photos/400/300?random=4"},
]

AMORMONIA_MANIFESTO: str = (
    "Creemos que la estrategia empresarial más inteligente es fundamentalmente humana. "
    "Se basa en dar sin esperar, en priorizar el bien común para crear un ecosistema de "
    "confianza y reciprocidad. Al nutrir tu entorno, aseguras tu propio éxito de una "
    "manera que nunca creíste posible. Eso es amormonía."
)

# ─────────────────────────────────────────────────────────────────────────────
# PHILOSOPHY
# ─────────────────────────────────────────────────────────────────────────────

PHILOSOPHY_ARTICLES: list[dict] = [
    {
        "title": "El Fin de la Sostenibilidad Plana",
        "paragraphs": [
            "Durante décadas, la sostenibilidad ha sido tratada como una lista de tareas: "
            "obtener un sello, publicar un informe, cumplir una regulación. Este enfoque "
            "\"plano\" es reactivo, limitado y, en última instancia, frágil.",
            "Las empresas que se aferran a este modelo están construyendo sobre cimientos "
            "inestables, vulnerables a los shocks del mercado, las crisis climáticas y los "
            "cambios sociales.",
        ],
    },
    {
        "title": "Nacimiento de la Esfera",
        "paragraphs": [
            "La naturaleza nos enseña una lección fundamental: la esfera es la forma más "
            "resiliente, eficiente y perfecta. Contiene el máximo volumen con la mínima "
            "superficie. Resiste la presión desde todas las direcciones.",
            "La Sostenibilidad Esférica es un modelo de gestión integral que concibe a la "
            "empresa como un sistema vivo, en simbiosis con su entorno. Cada decisión se "
            "toma considerando su impacto y su oportunidad en 360 grados.",
        ],
    },
    {
        "title": "Vibrando con la Amormonía",
        "paragraphs": [
            "El núcleo energético de la Sostenibilidad Esférica es la **Amormonía** "
            "(Amor + Harmonía): \"dar sin esperar nada a cambio para acabar recibiendo "
            "mucho más\".",
            "En términos empresariales, esto se traduce en crear valor genuino para todos "
            "los stakeholders. Este capital relacional se convierte en su activo más valioso.",
        ],
    },
]

PRINCIPLES: list[tuple[str, str]] = [
    ("Flexibilidad Radical",
     "Adaptabilidad estructural para fluir con el cambio, no resistirlo."),
    ("Agilidad Estratégica",
     "Capacidad de pivotar y capturar oportunidades emergentes en tiempo real."),
    ("Simbiosis con el Entorno",
     "Operar como un ecosistema, donde el éxito mutuo es la única métrica."),
    ("Propósito Centrado en el Bien Común",
     "Un norte claro que va más allá del beneficio, atrayendo talento y lealtad."),
]

# ─────────────────────────────────────────────────────────────────────────────
# SERVICES (accordion)
# ─────────────────────────────────────────────────────────────────────────────

SERVICES_DEFAULT_OPEN: int = 3

SERVICE_SECTIONS: list[dict] = [
    {
        "title": "Ingeniería de Performance Sostenible",
        "body": (
            "Construimos el futuro, hoy. Nuestro enfoque va más allá del diseño inicial para "
            "centrarse en el rendimiento real y sostenido de edificios e industrias. Sus "
            "activos no solo serán sostenibles en papel, sino rentables y resilientes en la práctica."
        ),
        "bullets": [],
    },
    {
        "title": "Resiliencia y Transferencia del Riesgo",
        "body": (
            "En un mundo de incertidumbre, la resiliencia no es una opción, es el pilar del "
            "valor. A través de nuestra correduría de seguros especializada, transformamos la "
            "gestión del riesgo, desde riesgos climáticos hasta disrupciones del mercado."
        ),
        "bullets": [],
    },
    {
        "title": "Venta Inteligente de Energía",
        "body": (
            "Dejamos de vender kWh para convertirnos en su aliado estratégico en "
            "descarbonización. Diseñamos soluciones energéticas que optimizan sus costes y "
            "aseguran un suministro responsable y resiliente."
        ),
        "bullets": [],
    },
    {
        "title": "Consultoría Avanzada Impulsada por Riesgo ESG",
        "body": (
            "### Inteligencia Estratégica para el Liderazgo Sostenible.\n"
            "Esta es la pieza central de nuestra propuesta de valor. Aquí es donde el riesgo "
            "se convierte en estrategia y la estrategia genera un impacto medible."
        ),
        "bullets": [
            "**Technical Due Diligence (TDD) 360°:** integramos el estado real de los equipos, "
            "el riesgo climático y el potencial de descarbonización.",
            "**Alineación con Taxonomía y Regulaciones de la UE:** Código de Conducta de "
            "eficiencia energética, Taxonomía Verde Europea y EPBD.",
            "**Commissioning y Retro-Commissioning:** garantizamos que tus activos cumplan su "
            "promesa de rendimiento.",
            "**Auditorías Energéticas y Planes de Descarbonización:** planes accionables, "
            "financiables y rentables que nacen de su operación.",
            "**Informes ESG y Gestión de Riesgo Climático:** riesgos físicos y de transición "
            "convertidos en ventaja competitiva.",
            "**Herramientas Inteligentes para la Decisión:** CRREM y GRESB al servicio de la "
            "inversión.",
            "**Certificaciones con Propósito (BREEAM, LEED, etc.):** micro-servicios ágiles "
            "para mejorar el valor de sus activos.",
        ],
    },
]

# ─────────────────────────────────────────────────────────────────────────────
# CASE STUDIES
# ─────────────────────────────────────────────────────────────────────────────

CASE_STUDIES: list[dict[str, str]] = [
    {
        "client": "Fondo de Inversión Inmobiliaria Global",
        "challenge": "Evaluar el riesgo climático de su portfolio de oficinas en el sur de "
                     "Europa y trazar un plan de descarbonización viable.",
        "solution": "Combinamos una TDD 360° con análisis CRREM y auditorías energéticas "
                    "avanzadas. A través de nuestra correduría, identificamos nuevas "
                    "coberturas para los riesgos no mitigables.",
        "result": "Plan de descarbonización con un ROI del 15%, reducción del 40% en la prima "
                  "de seguro por riesgo climático y aumento de 10 puntos en GRESB.",
        "image": "https://picsum.photos/800/600?random=4",
    },
    {
        "client": "Operador Logístico Paneuropeo",
        "challenge": "Optimizar el consumo energético de su red de almacenes y cumplir con "
                     "las nuevas directivas de la UE sobre eficiencia de edificios.",
        "solution": "Programa de Retro-Commissioning en 15 activos clave y estrategia de "
                    "compra de energía verde a largo plazo.",
        "result": "Reducción promedio del 22% en el consumo energético y ahorros de 3M€ en "
                  "los primeros 2 años.",
        "image": "https://picsum.photos/800/600?random=5",
    },
    {
        "client": "Empresa Tecnológica en Crecimiento",
        "challenge": "Obtener certificaciones de sostenibilidad para su nueva sede "
                     "corporativa que atrajeran al mejor talento.",
        "solution": "Micro-servicios ágiles para certificaciones BREEAM, LEED y Wiredscore, "
                    "enfocados en bienestar y eficiencia.",
        "result": "Sede certificada como 'Excelente' por BREEAM y aumento del 15% en la "
                  "satisfacción de los empleados.",
        "image": "https://picsum.photos/800/600?random=6",
    },
]

# ─────────────────────────────────────────────────────────────────────────────
# VISIÓN 2026
# ─────────────────────────────────────────────────────────────────────────────

EXECUTION_GAP: list[dict[str, str]] = [
    {"figure": "46%", "title": "Temas Materiales sin Objetivos",
     "body": "Casi la mitad de los temas materiales del IBEX 35 no tienen objetivos publicados.",
     "source": "Estudio EY Ibex 35"},
    {"figure": "40%", "title": "Desconexión Financiera",
     "body": "De las empresas no conectan sus riesgos ESG con el mapa de riesgos corporativos.",
     "source": "Reporte Riesgos ESG 2024"},
]

PIONEER_TIERS: list[tuple[str, str, str]] = [
    ("🥇", "Top 3 (Nivel Oro)",
     "Informe Resiliencia (+1k€) + easyESG Pro + Diseño a Medida."),
    ("🥈", "Niveles 4-6 (Plata)",
     "Licencia easyESG Pro + Sesión de Estrategia."),
    ("🥉", "Niveles 7-9 (Bronce)",
     "Diseño de Modelo ESG a Medida + Sorpresa Especial."),
]

# ─────────────────────────────────────────────────────────────────────────────
# ESG4DC
# ─────────────────────────────────────────────────────────────────────────────

DC_METRICS: list[tuple[str, str, str]] = [
    ("PUE", "Power Usage Effectiveness",
     "Optimizamos la eficiencia energética total del activo bajo estándares EU CoC."),
    ("WUE", "Water Usage Effectiveness",
     "Reducimos el consumo hídrico alineándonos con la Taxonomía Verde Europea."),
    ("ERE", "Energy Reuse Effectiveness",
     "Diseñamos soluciones para la reutilización del calor residual y circularidad."),
]

# ─────────────────────────────────────────────────────────────────────────────
# REPORT COPY (PDF export)
# ─────────────────────────────────────────────────────────────────────────────

REPORT_PROMO: str = (
    "Transforme este insight en acción. Este brief es una visión preliminar generada "
    "con IA. Nuestro equipo de ingeniería y riesgo ESG convierte estos indicios en un "
    "plan financiable: TDD 360°, análisis CRREM, auditoría energética y transferencia "
    "de riesgo climático. Agende su sesión estratégica en info@smartremsolutions.com."
)

REPORT_DISCLAIMER: str = (
    "Aviso legal: este informe preliminar ha sido generado automáticamente mediante "
    "inteligencia artificial a partir de datos públicos y de la información facilitada "
    "por el usuario. Tiene carácter meramente orientativo y no constituye asesoramiento "
    "técnico, financiero, legal ni de seguros. Smart Rem Solutions no asume "
    "responsabilidad alguna por las decisiones adoptadas sobre la base de este documento. "
    "Consulte con un profesional cualificado antes de realizar cualquier inversión."
)
