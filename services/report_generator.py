"""
Smart Rem Resilience Report Generator.

Builds the downloadable PDF for one wizard result with fpdf2 core fonts:
cover band, asset data, consultant narrative (word-wrapped to the printable
width), coloured climate-risk list, verified location sources, a fixed
promotional block and the legal disclaimer.

Public API
----------
generate_analysis_report(form, result, lead=None) -> bytes
report_filename(form) -> str
"""

from __future__ import annotations

import re
import unicodedata
from datetime import date
from typing import Any, Optional

from fpdf import FPDF

from config.content import BRAND_NAME, CONTACT_EMAIL, REPORT_DISCLAIMER, REPORT_PROMO
from core.errors import ReportGenerationError
from core.risk import normalise_level, risk_colour_rgb
from core.wizard import AnalysisResult, AssetForm, LeadData

# ── Brand colours ────────────────────────────────────────────────────────────
_DARK    = (17, 24, 39)       # #111827
_EMERALD = (5, 150, 105)      # #059669
_LIGHT   = (236, 253, 245)    # #ECFDF5
_TEXT    = (55, 65, 81)       # #374151
_MUTED   = (107, 114, 128)    # #6B7280

_TECH_LABELS = {
    "gla":        ("Superficie (GLA)", "m²"),
    "build_year": ("Año de construcción", ""),
    "pue":        ("PUE", ""),
}

# Core fonts are cp1252-only; these never survive the round trip.
_TRANSLITERATE = str.maketrans({
    "—": "-", "–": "-", "−": "-",
    "‘": "'", "’": "'", "“": '"', "”": '"',
    "…": "...", " ": " ", "•": "-", "™": "(TM)",
    "²": "2",
})


def _pdf_text(value: Any) -> str:
    """Coerce arbitrary text to something the Helvetica core font can draw."""
    text = unicodedata.normalize("NFC", str(value)).translate(_TRANSLITERATE)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def report_filename(form: AssetForm) -> str:
    """Deterministic download name derived from address and postal code."""
    slug = unicodedata.normalize("NFKD", form.address).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^A-Za-z0-9]+", "_", slug).strip("_") or "activo"
    postal = re.sub(r"[^A-Za-z0-9]+", "", form.postal_code)
    return f"Informe_Resiliencia_{slug}{'_' + postal if postal else ''}.pdf"


# ─────────────────────────────────────────────────────────────────────────────
# PDF generation
# ─────────────────────────────────────────────────────────────────────────────

class _SmartRemPDF(FPDF):
    """FPDF subclass with Smart Rem header and footer on every page."""

    def header(self) -> None:
        self.set_fill_color(*_DARK)
        self.rect(0, 0, 210, 14, "F")
        self.set_text_color(*_EMERALD)
        self.set_font("Helvetica", "B", 10)
        self.set_xy(10, 3)
        self.cell(0, 8, _pdf_text(f"{BRAND_NAME}  |  Informe Estratégico Preliminar"))
        self.set_y(18)

    def footer(self) -> None:
        self.set_y(-12)
        self.set_text_color(*_MUTED)
        self.set_font("Helvetica", "", 7)
        self.cell(
            0, 5,
            _pdf_text(f"Página {self.page_no()} - © {BRAND_NAME} {date.today().year} - {CONTACT_EMAIL}"),
            align="C",
        )

    def section_header(self, title: str) -> None:
        self.ln(2)
        self.set_fill_color(*_LIGHT)
        self.set_text_color(*_EMERALD)
        self.set_font("Helvetica", "B", 11)
        self.cell(0, 8, _pdf_text(f"  {title}"), fill=True, new_x="LMARGIN", new_y="NEXT")
        self.ln(2)

    def body_text(self, text: str, size: int = 10) -> None:
        self.set_text_color(*_TEXT)
        self.set_font("Helvetica", "", size)
        # w=0 spans the printable width; multi_cell wraps on word boundaries
        self.multi_cell(0, 5.5, _pdf_text(text), new_x="LMARGIN", new_y="NEXT")
        self.ln(1)

    def kv_row(self, key: str, value: str) -> None:
        self.set_text_color(*_MUTED)
        self.set_font("Helvetica", "", 9)
        self.cell(55, 6, _pdf_text(key))
        self.set_text_color(*_DARK)
        self.set_font("Helvetica", "B", 9)
        self.multi_cell(0, 6, _pdf_text(value), new_x="LMARGIN", new_y="NEXT")

    def risk_row(self, hazard: str, level: str) -> None:
        y = self.get_y()
        self.set_fill_color(*risk_colour_rgb(level))
        self.ellipse(self.l_margin + 1, y + 1, 4, 4, "F")
        self.set_x(self.l_margin + 8)
        self.set_text_color(*_TEXT)
        self.set_font("Helvetica", "", 10)
        self.cell(70, 6, _pdf_text(hazard))
        self.set_font("Helvetica", "B", 10)
        self.cell(0, 6, _pdf_text((normalise_level(level) or level or "N/A").upper()),
                  new_x="LMARGIN", new_y="NEXT")


def _build_pdf(form: AssetForm, result: AnalysisResult, lead: Optional[LeadData]) -> bytes:
    pdf = _SmartRemPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=True, margin=16)
    pdf.set_title(_pdf_text(f"Informe de Resiliencia - {form.address}"))
    pdf.set_author(_pdf_text(BRAND_NAME))
    pdf.add_page()

    # ── Title block ───────────────────────────────────────────────────────────
    pdf.set_text_color(*_DARK)
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, _pdf_text("Brief Estratégico de Resiliencia"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(*_MUTED)
    pdf.set_font("Helvetica", "", 9)
    prepared_for = f" · Preparado para {lead.name}" if lead and lead.name else ""
    pdf.cell(0, 6, _pdf_text(f"{date.today().strftime('%d/%m/%Y')}{prepared_for}"),
             new_x="LMARGIN", new_y="NEXT")

    # ── Asset data ────────────────────────────────────────────────────────────
    pdf.section_header("Datos del Activo")
    pdf.kv_row("Dirección:", form.full_address())
    pdf.kv_row("Tipo de activo:", form.asset_type)
    pdf.kv_row("Enfoque del estudio:", form.analysis_type)
    for name, value in form.technical_fields().items():
        label, unit = _TECH_LABELS[name]
        shown = f"{value} {unit}".strip() if str(value).strip() else "N/D"
        pdf.kv_row(f"{label}:", shown)

    # ── Narrative ─────────────────────────────────────────────────────────────
    pdf.section_header("Visión del Consultor")
    pdf.body_text(result.analysis_text or "Sin narrativa disponible.")

    # ── Traffic light ─────────────────────────────────────────────────────────
    pdf.section_header("Matriz de Riesgo Climático")
    if result.risks:
        for hazard, level in result.risks.items():
            pdf.risk_row(hazard, level)
    else:
        pdf.body_text("El modelo no devolvió una evaluación estructurada de riesgos.")

    map_sources = result.map_sources()
    if map_sources:
        pdf.section_header("Fuentes de Datos")
        pdf.set_font("Helvetica", "", 8)
        for source in map_sources:
            pdf.set_text_color(*_EMERALD)
            pdf.cell(0, 5, _pdf_text(f"- {source['title']}"), link=source["uri"],
                     new_x="LMARGIN", new_y="NEXT")

    # ── Promotional block ─────────────────────────────────────────────────────
    pdf.ln(4)
    pdf.set_fill_color(*_DARK)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(0, 9, _pdf_text("  Transforme este Insight en Acción."), fill=True,
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 9)
    pdf.multi_cell(0, 5, _pdf_text(REPORT_PROMO), fill=True, padding=3,
                   new_x="LMARGIN", new_y="NEXT")

    # ── Disclaimer ────────────────────────────────────────────────────────────
    pdf.ln(4)
    pdf.set_text_color(*_MUTED)
    pdf.set_font("Helvetica", "I", 7)
    pdf.multi_cell(0, 4, _pdf_text(REPORT_DISCLAIMER), new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def generate_analysis_report(
    form: AssetForm,
    result: AnalysisResult,
    lead: Optional[LeadData] = None,
) -> bytes:
    """
    Build the PDF report for one analysis.

    Returns
    -------
    bytes
        PDF document, compatible with st.download_button(data=...).

    Raises
    ------
    ReportGenerationError
        If fpdf2 fails for any reason (layout, encoding, I/O).
    """
    try:
        return _build_pdf(form, result, lead)
    except Exception as exc:
        raise ReportGenerationError(f"No se pudo generar el informe PDF: {exc}") from exc
