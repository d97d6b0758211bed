"""
Climate-risk traffic light for the analysis results view.

Exports one public function: render(risks)
Called from app/tabs/analysis.py on step 3.
"""

from __future__ import annotations

import html

import app.branding as branding
from core.risk import risk_colour_hex


def _rows(risks: dict[str, str]) -> list[tuple[str, str]]:
    """One row per hazard the model reported, in the order it reported them."""
    return list(risks.items())


def light_html(hazard: str, level: str) -> str:
    """One indicator row. Unknown or empty levels render gray with 'N/A'."""
    colour = risk_colour_hex(level)
    shown = level.strip() if isinstance(level, str) and level.strip() else "N/A"
    return (
        f'<div class="sr-light" role="group" aria-label="{html.escape(hazard)}: {html.escape(shown)}">'
        f'<span class="sr-light-dot" style="background:{colour};" aria-hidden="true"></span>'
        f'<span class="sr-light-label">{html.escape(hazard)}</span>'
        f'<span class="sr-light-level">{html.escape(shown)}</span>'
        f"</div>"
    )


def render(risks: dict[str, str]) -> None:
    branding.render_html("<h4>Matriz de Riesgo Climático</h4>")
    if not risks:
        branding.render_html(
            '<p style="color:#6B7280; font-size:0.9rem;">'
            "El modelo no devolvió una evaluación estructurada de riesgos.</p>"
        )
        return
    branding.render_html("".join(light_html(h, lvl) for h, lvl in _rows(risks)))
