# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Canonical Constants Registry
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Single source of truth for asset taxonomies, risk levels, AI and e-mail relay
# endpoints. All modules MUST import from here; never redefine constants locally.
#
# This file has ZERO Streamlit, ZERO network, and ZERO side-effect imports.
# It is safe to import in any context, including unit tests without a
# running Streamlit server.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# ASSET TAXONOMY
# ─────────────────────────────────────────────────────────────────────────────

DATA_CENTER: str = "Data Center"

ASSET_TYPES: list[str] = [
    "Oficinas",
    "Logística",
    "Retail",
    "Residencial",
    DATA_CENTER,
]

ANALYSIS_OPTIONS: list[str] = [
    "Plan de Descarbonización (CRREM)",
    "Análisis de Resiliencia Climática",
    "Evaluación de Riesgos ESG",
    "Análisis de Riesgo de Transición",
]

# Every analysed asset is located in Spain
COUNTRY_SUFFIX: str = "España"

# Wizard defaults: the Madrid flagship used in sales demos
DEFAULT_FORM: dict[str, str] = {
    "address":       "Paseo de la Castellana, 93",
    "postal_code":   "28046",
    "asset_type":    "Oficinas",
    "analysis_type": "Análisis de Resiliencia Climática",
    "gla":           "15000",
    "build_year":    "1995",
    "pue":           "1.5",
}


# ─────────────────────────────────────────────────────────────────────────────
# CLIMATE RISK TRAFFIC LIGHT
# ─────────────────────────────────────────────────────────────────────────────

RISK_SENTINEL: str = "SEMAFORO_RIESGOS:"

HAZARDS: list[str] = ["Olas de Calor", "Inundaciones", "Sequías"]

RISK_LEVELS: list[str] = ["Bajo", "Medio", "Alto"]

# Lower-cased level → visual state
LEVEL_STATES: dict[str, str] = {
    "bajo":  "green",
    "medio": "yellow",
    "alto":  "red",
}
DEFAULT_STATE: str = "gray"

STATE_HEX: dict[str, str] = {
    "green":  "#22C55E",
    "yellow": "#EAB308",
    "red":    "#EF4444",
    "gray":   "#D1D5DB",
}

STATE_RGB: dict[str, tuple[int, int, int]] = {
    "green":  (34, 197, 94),
    "yellow": (234, 179, 8),
    "red":    (239, 68, 68),
    "gray":   (156, 163, 175),
}


# ─────────────────────────────────────────────────────────────────────────────
# GOOGLE GEMINI
# ─────────────────────────────────────────────────────────────────────────────

GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_GEMINI_MODEL: str = "gemini-3-pro-preview"
THINKING_BUDGET: int = 2048
MAX_OUTPUT_TOKENS: int = 8192
GEMINI_TIMEOUT_S: int = 120       # thinking models routinely take > 30 s

# Narrative brief length bounds (words)
BRIEF_WORD_LIMIT: int = 200
MIN_BRIEF_WORDS: int = 100
MAX_BRIEF_WORDS: int = 200


# ─────────────────────────────────────────────────────────────────────────────
# EMAILJS RELAY
# ─────────────────────────────────────────────────────────────────────────────

EMAILJS_SEND_URL: str = "https://api.emailjs.com/api/v1.0/email/send"
EMAILJS_TIMEOUT_S: int = 15

# Date format expected by the {{time}} template variable
RELAY_TIME_FORMAT: str = "%d/%m/%Y, %H:%M:%S"


# ─────────────────────────────────────────────────────────────────────────────
# LEAD CAPTURE ENUMS
# ─────────────────────────────────────────────────────────────────────────────

LEAD_ROLES: list[str] = [
    "Dirección General / CEO",
    "Dirección Financiera / CFO",
    "Responsable de Sostenibilidad / ESG",
    "Asset / Portfolio Manager",
    "Técnico / Ingeniería",
    "Otro",
]

LEAD_INTERESTS: list[str] = [
    "Informe completo de resiliencia",
    "Plan de descarbonización",
    "Auditoría energética",
    "Certificación (BREEAM, LEED...)",
    "Solo información",
]

ACTIVITY_OPTIONS: list[str] = [
    "Promotora Inmobiliaria",
    "Fondo de Inversión / Socimi",
    "Consultoría ESG / Sostenibilidad",
    "Ingeniería / Construcción",
    "Gestión de Activos (Asset Management)",
    "Seguros / Risk Management",
    "Facility Management",
    "PropTech / Data Center Operator",
    "Otros",
]
OTHER_ACTIVITY: str = "Otros"

PRIVACY_POLICY_URL: str = "https://smartremsolutions.com/politica-privacidad/"

# Vision 2026 pioneer waitlist
PIONEER_CAPACITY: int = 250
PIONEER_INITIAL_COUNT: int = 128
