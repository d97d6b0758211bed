# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Session State Management
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Single responsibility: own the complete st.session_state initialisation
# contract for the entire application.
#
# Rules:
#   • init_session() is idempotent: call it every run(), it never overwrites
#     existing values (uses setdefault exclusively).
#   • No module outside this file may write a NEW top-level session key
#     without first registering it here.
#   • Reading st.session_state keys from any module is unrestricted.
#   • _get_secret() is the sole secrets access point for the application.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import os

import streamlit as st

from config.constants import PIONEER_INITIAL_COUNT
from core.wizard import AnalysisWizard


# ─────────────────────────────────────────────────────────────────────────────
# SECRETS ACCESS POINT
# The ONLY function in the application permitted to read st.secrets or os.getenv
# for API credentials.  All callers use _get_secret(), never st.secrets directly.
# ─────────────────────────────────────────────────────────────────────────────

def _get_secret(key: str, default: str = "") -> str:
    """Read a secret from Streamlit Secrets, falling back to environment variable.

    Priority: st.secrets[key]  →  os.getenv(key, default)

    Never raises; returns ``default`` if the key is absent from both sources.
    """
    try:
        return st.secrets[key]
    except (KeyError, AttributeError, FileNotFoundError):
        return os.getenv(key, default)


# ─────────────────────────────────────────────────────────────────────────────
# SESSION STATE INITIALISATION
# ─────────────────────────────────────────────────────────────────────────────

def init_session() -> None:
    """Idempotently initialise all application session state keys.

    Session key registry (authoritative):

    Navigation
    ──────────
    current_page              str             url_path of the page being rendered
    nav_target                str | None      Page key requested by a CTA; consumed by main

    Analysis wizard
    ───────────────
    wizard                    AnalysisWizard  Step, form, result and loading flag
    gemini_key                str             Gemini API key (secrets/env or re-entered)
    analysis_error            str             Last error shown on step 2 ('' = none)
    key_reselect              bool            True after PERMISSION_DENIED; shows key input

    Location
    ────────
    user_location             dict | None     {"latitude", "longitude"} for Maps grounding
    geo_requested             bool            Browser probe already rendered this session

    Report export
    ─────────────
    report_pdf                bytes | None    Last generated PDF (released after the lead gate)
    report_filename           str             Download name for report_pdf

    Lead forms
    ──────────
    contact_status            str             "idle" | "success" | "error"
    esg4dc_status             str             "idle" | "success" | "error"
    pioneer_status            str             "idle" | "success" | "error"
    pioneer_count             int             Places taken on the Visión 2026 list
    """
    ss = st.session_state

    # ── Navigation ────────────────────────────────────────────────────────────
    ss.setdefault("current_page", "")
    ss.setdefault("nav_target",   None)

    # ── Analysis wizard ───────────────────────────────────────────────────────
    ss.setdefault("wizard",         AnalysisWizard())
    ss.setdefault("gemini_key",     _get_secret("GEMINI_API_KEY", ""))
    ss.setdefault("analysis_error", "")
    ss.setdefault("key_reselect",   False)

    # ── Location ──────────────────────────────────────────────────────────────
    ss.setdefault("user_location", None)
    ss.setdefault("geo_requested", False)

    # ── Report export ─────────────────────────────────────────────────────────
    ss.setdefault("report_pdf",      None)
    ss.setdefault("report_filename", "")

    # ── Lead forms ────────────────────────────────────────────────────────────
    ss.setdefault("contact_status", "idle")
    ss.setdefault("esg4dc_status",  "idle")
    ss.setdefault("pioneer_status", "idle")
    ss.setdefault("pioneer_count",  PIONEER_INITIAL_COUNT)
