"""
Handles all visual branding: CSS, page configuration, the hero banner and the
corporate footer rendered on every standard page.

CSS NOTES:

1. `.block-container` keeps its top padding so content does not slide under
   Streamlit's sticky header, which would otherwise intercept clicks on the
   top navigation bar.

2. `header[data-testid="stHeader"]` has `pointer-events: none` on the
   backdrop and `auto` on its children (menu, status widget).

3. The Visión 2026 and ESG4DC landings render their own dark layouts and do
   not call render_footer().
"""
from __future__ import annotations

import html

import streamlit as st

from config.content import (
    BRAND_NAME,
    CONTACT_EMAIL,
    LINKEDIN_URL,
    OFFICE_ADDRESS,
    TAGLINE,
)

# ─────────────────────────────────────────────────────────────────────────────
# SITE CSS
# ─────────────────────────────────────────────────────────────────────────────
SMARTREM_CSS = """
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;600;700;800&display=swap');

/* ── Global Typography ─────────────────────────────────────────────────── */
html, body, [class*="css"] {
  font-family: 'Inter', sans-serif !important;
  font-size: 16px;
  line-height: 1.6;
}
h1, h2, h3, h4 { font-weight: 800 !important; color: #111827; letter-spacing: -0.3px; }

/* ── App Background ────────────────────────────────────────────────────── */
[data-testid="stAppViewContainer"] > .main { background: #FFFFFF; }

.block-container {
  padding-top: 1.5rem !important;
  max-width: 1200px !important;
  margin: 0 auto !important;
}

header[data-testid="stHeader"] {
  background: transparent !important;
  pointer-events: none !important;
}
header[data-testid="stHeader"] > * {
  pointer-events: auto !important;
}

/* ── Top Navigation Bar (st.navigation position="top") ─────────────────── */
[data-testid="stTopNavigation"] {
  background: #FFFFFF !important;
  border-bottom: 1px solid #E5E7EB !important;
  padding: 0 16px !important;
}
[data-testid="stTopNavigation"] a,
[data-testid="stTopNavigation"] button {
  font-size: 0.9rem !important;
  font-weight: 600 !important;
  color: #374151 !important;
  text-decoration: none !important;
  padding: 10px 14px !important;
  border-bottom: 3px solid transparent !important;
  pointer-events: auto !important;
  cursor: pointer !important;
}
[data-testid="stTopNavigation"] a:hover,
[data-testid="stTopNavigation"] button:hover { color: #059669 !important; }
[data-testid="stTopNavigation"] [aria-current="page"] {
  color: #059669 !important;
  border-bottom: 3px solid #059669 !important;
}

/* ── Buttons ───────────────────────────────────────────────────────────── */
.stButton button[kind="primary"],
.stFormSubmitButton button[kind="primary"],
.stDownloadButton button {
  background: #059669 !important;
  border: 1px solid #059669 !important;
  color: #FFFFFF !important;
  font-weight: 700 !important;
  border-radius: 8px !important;
}
.stButton button[kind="primary"]:hover,
.stFormSubmitButton button[kind="primary"]:hover,
.stDownloadButton button:hover { background: #047857 !important; }

/* ── Hero ──────────────────────────────────────────────────────────────── */
.sr-hero {
  background: linear-gradient(135deg, #064E3B 0%, #111827 100%);
  color: #FFFFFF;
  border-radius: 16px;
  padding: 56px 40px;
  margin-bottom: 32px;
}
.sr-hero h1 { color: #FFFFFF !important; font-size: 2.6rem !important; line-height: 1.15 !important; }
.sr-hero p  { color: #D1FAE5; font-size: 1.1rem; max-width: 760px; }
.sr-eyebrow { color: #34D399; font-size: 0.8rem; font-weight: 700; letter-spacing: 2px; text-transform: uppercase; }

/* ── Cards ─────────────────────────────────────────────────────────────── */
.sr-card {
  background: #FFFFFF;
  border: 1px solid #E5E7EB;
  border-top: 4px solid #059669;
  border-radius: 12px;
  padding: 22px;
  height: 100%;
  box-shadow: 0 4px 16px rgba(17,24,39,.06);
}
.sr-card h4 { margin: 6px 0 8px !important; font-size: 1.05rem !important; }
.sr-card p  { color: #4B5563; font-size: 0.92rem; margin: 0; }
.sr-card-icon { font-size: 1.8rem; }

.sr-dark-card {
  background: #1F2937;
  border: 1px solid #374151;
  border-radius: 12px;
  padding: 22px;
  color: #E5E7EB;
  height: 100%;
}
.sr-dark-card h4 { color: #34D399 !important; }

/* ── Wizard ────────────────────────────────────────────────────────────── */
.sr-steps { display: flex; gap: 8px; margin: 4px 0 20px; }
.sr-step  { flex: 1; text-align: center; padding: 8px; border-radius: 8px; font-size: 0.82rem;
            font-weight: 700; background: #F3F4F6; color: #6B7280; }
.sr-step.active { background: #059669; color: #FFFFFF; }
.sr-step.done   { background: #D1FAE5; color: #065F46; }

/* ── Traffic light ─────────────────────────────────────────────────────── */
.sr-light { display: flex; align-items: center; gap: 12px; padding: 12px 14px;
            border: 1px solid #E5E7EB; border-radius: 10px; margin-bottom: 8px; background: #FFFFFF; }
.sr-light-dot { width: 18px; height: 18px; border-radius: 50%; flex-shrink: 0;
                box-shadow: inset 0 0 0 2px rgba(0,0,0,.06); }
.sr-light-label { flex: 1; font-weight: 600; color: #111827; }
.sr-light-level { font-weight: 800; font-size: 0.82rem; letter-spacing: 1px; text-transform: uppercase; color: #374151; }

.sr-verified { background: #ECFDF5; border: 1px solid #A7F3D0; color: #065F46; border-radius: 8px;
               padding: 8px 14px; font-size: 0.85rem; font-weight: 600; display: inline-block; }
.sr-narrative { background: #F9FAFB; border-left: 4px solid #059669; padding: 18px 22px;
                border-radius: 0 10px 10px 0; color: #1F2937; }

/* ── Counter (Visión 2026) ─────────────────────────────────────────────── */
.sr-counter { font-size: 3rem; font-weight: 800; color: #34D399; line-height: 1; }
.sr-counter small { font-size: 1rem; color: #9CA3AF; }

/* ── Footer ────────────────────────────────────────────────────────────── */
.sr-footer {
  background: #111827;
  color: #9CA3AF;
  border-radius: 12px;
  padding: 32px 28px;
  margin-top: 48px;
  font-size: 0.85rem;
}
.sr-footer a { color: #34D399; text-decoration: none; }
.sr-footer-brand { color: #FFFFFF; font-weight: 800; font-size: 1.1rem; margin-bottom: 6px; }
"""


# ── Injection helpers ────────────────────────────────────────────────────────

def inject_branding() -> None:
    """Injects the site CSS into the current Streamlit page.
    Safe to call multiple times — Streamlit deduplicates identical markdown."""
    st.markdown(f"<style>{SMARTREM_CSS}</style>", unsafe_allow_html=True)


def render_html(html_content: str) -> None:
    """Central gateway for raw HTML rendering.

    All unsafe_allow_html=True calls outside branding.py must route through
    here. Callers must html.escape() any user-supplied or model-supplied
    values before passing them in.
    """
    st.markdown(html_content, unsafe_allow_html=True)


# ── UI component helpers ─────────────────────────────────────────────────────

def render_hero(title: str, body: str, eyebrow: str = "") -> None:
    eyebrow_html = f'<div class="sr-eyebrow">{html.escape(eyebrow)}</div>' if eyebrow else ""
    render_html(
        f'<section class="sr-hero" role="banner">{eyebrow_html}'
        f"<h1>{html.escape(title)}</h1><p>{html.escape(body)}</p></section>"
    )


def render_card(title: str, body: str, icon: str = "", dark: bool = False) -> None:
    """Renders a compact feature card."""
    css = "sr-dark-card" if dark else "sr-card"
    icon_html = f'<div class="sr-card-icon" aria-hidden="true">{icon}</div>' if icon else ""
    render_html(
        f'<div class="{css}" role="group" aria-label="{html.escape(title)}">'
        f"{icon_html}<h4>{html.escape(title)}</h4><p>{html.escape(body)}</p></div>"
    )


def render_header_brand() -> None:
    """Brand line shown above the navigation content on standard pages."""
    render_html(
        f'<div style="font-weight:800; font-size:1.3rem; color:#111827; margin-bottom:8px;">'
        f'Smart <span style="color:#059669;">Rem</span> Solutions</div>'
    )


def render_footer() -> None:
    """Renders the corporate footer at the bottom of the page.

    Called by main.py after every standard page. The special landings
    (Visión 2026, ESG4DC) are rendered without it.
    """
    render_html(
        f"""
        <div class="sr-footer" role="contentinfo">
            <div class="sr-footer-brand">{html.escape(BRAND_NAME)}</div>
            <div style="max-width:680px; margin-bottom:14px;">{html.escape(TAGLINE)}</div>
            <div>📍 {html.escape(OFFICE_ADDRESS)}</div>
            <div>✉️ <a href="mailto:{CONTACT_EMAIL}">{CONTACT_EMAIL}</a>
                 &nbsp;·&nbsp; <a href="{LINKEDIN_URL}" target="_blank">LinkedIn</a></div>
            <div style="margin-top:14px; font-size:0.75rem; color:#6B7280;">
                © 2026 {html.escape(BRAND_NAME)}. Todos los derechos reservados.
                &nbsp;·&nbsp; Los análisis generados con IA son orientativos.
            </div>
        </div>
        """
    )


# ── Streamlit page configuration ─────────────────────────────────────────────
# Imported by main.py and passed directly to st.set_page_config().
PAGE_CONFIG = {
    "page_title": "Smart Rem Solutions | Sostenibilidad Esférica",
    "page_icon": "🌿",
    "layout": "wide",
    "initial_sidebar_state": "collapsed",
    "menu_items": {
        "Get Help": f"mailto:{CONTACT_EMAIL}",
        "About": (
            "**Smart Rem Solutions — Sostenibilidad Esférica**\n\n"
            "© 2026 Smart Rem Solutions. Todos los derechos reservados.\n\n"
            "Los análisis generados con IA son orientativos y no sustituyen "
            "el asesoramiento técnico profesional."
        ),
    },
}
