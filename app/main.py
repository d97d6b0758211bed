# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Sostenibilidad Esférica
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Corporate site + AI resilience analysis wizard.
# Entry point: `streamlit run streamlit_app.py`
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
# Load .env from project root (parent directory of app/)
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
load_dotenv(_env_path)

import streamlit as st

import app.branding as branding
from app.session import init_session
from app.tabs import (
    analysis,
    case_studies,
    contact,
    esg4dc,
    home,
    philosophy,
    solutions,
    vision2026,
)

logger = logging.getLogger(__name__)

# key → (renderer, title, icon, url_path)
_PAGE_SPECS = {
    "home":         (home.render,         "Inicio",          "🏠", "inicio"),
    "philosophy":   (philosophy.render,   "Filosofía",       "🌐", "filosofia"),
    "solutions":    (solutions.render,    "Soluciones",      "🛠️", "soluciones"),
    "case_studies": (case_studies.render, "Casos de Éxito",  "🏆", "casos-de-exito"),
    "analysis":     (analysis.render,     "Análisis IA",     "🔎", "analisis"),
    "contact":      (contact.render,      "Contacto",        "✉️", "contacto"),
    "vision2026":   (vision2026.render,   "Visión 2026",     "🚀", "vision-2026"),
    "esg4dc":       (esg4dc.render,       "ESG4DC",          "🖥️", "esg4dc"),
}

# Landing pages with their own layout and no corporate footer
_NO_FOOTER = {"vision-2026", "esg4dc"}


def _build_pages() -> dict[str, st.Page]:
    return {
        key: st.Page(fn, title=title, icon=icon, url_path=url_path, default=(key == "home"))
        for key, (fn, title, icon, url_path) in _PAGE_SPECS.items()
    }


def run() -> None:
    st.set_page_config(**branding.PAGE_CONFIG)
    branding.inject_branding()
    init_session()

    pages = _build_pages()
    current = st.navigation(list(pages.values()), position="top")

    # CTA buttons request a page by key; honour it before rendering
    target = st.session_state.nav_target
    if target:
        st.session_state.nav_target = None
        if target in pages:
            st.switch_page(pages[target])
        else:
            logger.warning("Unknown navigation target: %s", target)

    st.session_state.current_page = current.url_path
    branding.render_header_brand()
    current.run()

    if current.url_path not in _NO_FOOTER:
        branding.render_footer()


if __name__ == "__main__":
    run()
