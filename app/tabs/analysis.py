"""
🔎 Análisis Tab Renderer
========================
Three-step resilience wizard backed by core.wizard.AnalysisWizard:

1. Asset identification (address, postal code, type)
2. Analysis configuration (study focus, type-dependent technical data)
3. Results (verified location, consultant narrative, traffic light,
   sources, CTA and the PDF lead gate)

One Gemini request per submit. The submit button is disabled while the
request is in flight.
"""
from __future__ import annotations

import html
import logging

import streamlit as st

import app.branding as branding
import core.agent as agent
import services.audit as audit
from app.components import lead_gate, traffic_light
from app.utils import validate_gemini_key
from config.constants import ANALYSIS_OPTIONS, ASSET_TYPES
from core.errors import AnalysisError, InvalidTransitionError, PermissionDeniedError
from core.wizard import AnalysisWizard, WizardStep
from services.location import capture_user_location

logger = logging.getLogger(__name__)

_STEP_LABELS = ["1 · Activo", "2 · Configuración", "3 · Resultado"]


def _render_steps(step: WizardStep) -> None:
    items = []
    for i, label in enumerate(_STEP_LABELS, start=1):
        css = "active" if i == step else ("done" if i < step else "")
        items.append(f'<div class="sr-step {css}">{label}</div>')
    branding.render_html(f'<div class="sr-steps">{"".join(items)}</div>')


# ─────────────────────────────────────────────────────────────────────────────
# STEP 1 — ASSET
# ─────────────────────────────────────────────────────────────────────────────

def _render_asset_step(wizard: AnalysisWizard) -> None:
    form = wizard.form
    st.markdown("#### ¿Qué activo quiere analizar?")
    form.address = st.text_input("Dirección", value=form.address)
    c1, c2 = st.columns(2)
    with c1:
        form.postal_code = st.text_input("Código postal", value=form.postal_code)
    with c2:
        form.asset_type = st.selectbox(
            "Tipo de activo", ASSET_TYPES, index=ASSET_TYPES.index(form.asset_type)
            if form.asset_type in ASSET_TYPES else 0,
        )

    if st.button("Siguiente →", type="primary"):
        if not form.address.strip():
            st.warning("Indique la dirección del activo.")
            return
        wizard.advance()
        st.rerun()


# ─────────────────────────────────────────────────────────────────────────────
# STEP 2 — CONFIGURATION & SUBMIT
# ─────────────────────────────────────────────────────────────────────────────

def _render_key_entry() -> None:
    """Shown when no key is configured or after PERMISSION_DENIED."""
    with st.container(border=True):
        st.markdown("##### 🔑 Seleccione una API key de Gemini")
        st.caption(
            "Obtenga una clave gratuita en [aistudio.google.com](https://aistudio.google.com) "
            "con la API de Google Maps habilitada para el grounding."
        )
        new_key = st.text_input("API key", type="password", key="gemini_key_input")
        if st.button("Usar esta clave"):
            ok, message, _warn = validate_gemini_key(new_key)
            branding.render_html(message)
            if ok:
                st.session_state.gemini_key = new_key.strip()
                st.session_state.key_reselect = False
                st.session_state.analysis_error = ""
                st.rerun()


def _submit(wizard: AnalysisWizard) -> None:
    try:
        wizard.begin_request()
    except InvalidTransitionError:
        return

    try:
        audit.log_event(
            audit.ANALYSIS_REQUESTED,
            f"{wizard.form.analysis_type} for {wizard.form.asset_type} in {wizard.form.postal_code}",
        )
        with st.spinner("🧠 Nuestro consultor IA está analizando el entorno del activo…"):
            result = agent.run_strategic_analysis(
                wizard.form,
                st.session_state.gemini_key,
                location=st.session_state.user_location,
            )
    except PermissionDeniedError as exc:
        wizard.fail()
        logger.warning("Gemini rejected the configured key: %s", exc)
        st.session_state.key_reselect = True
        st.session_state.analysis_error = (
            "La API key no tiene permisos para este modelo o no es válida. "
            "Seleccione otra clave para continuar."
        )
        audit.log_event(audit.ANALYSIS_FAILED, "Permission denied")
    except AnalysisError as exc:
        wizard.fail()
        logger.error("Strategic analysis failed: %s", exc)
        st.session_state.analysis_error = (
            "Error al conectar con el consultor IA. Inténtelo de nuevo."
        )
        audit.log_event(audit.ANALYSIS_FAILED, "Model call failed")
    else:
        wizard.complete(result)
        st.session_state.analysis_error = ""
        st.session_state.report_pdf = None
        audit.log_event(
            audit.ANALYSIS_COMPLETED,
            f"{len(result.risks)} risk levels, {len(result.map_sources())} map sources",
        )
    finally:
        # Anything escaping above (including a script rerun) must not leave
        # the one-in-flight guard set for the rest of the session.
        if wizard.loading:
            wizard.fail()
    st.rerun()


def _render_config_step(wizard: AnalysisWizard) -> None:
    form = wizard.form
    st.markdown(f"#### Configuración del análisis · {html.escape(form.asset_type)}")
    st.caption(form.full_address())

    form.analysis_type = st.selectbox(
        "Enfoque del estudio", ANALYSIS_OPTIONS,
        index=ANALYSIS_OPTIONS.index(form.analysis_type)
        if form.analysis_type in ANALYSIS_OPTIONS else 0,
    )
    if form.is_data_center:
        form.pue = st.text_input("PUE actual", value=form.pue, help="Power Usage Effectiveness")
    else:
        c1, c2 = st.columns(2)
        with c1:
            form.gla = st.text_input("Superficie (GLA, m²)", value=form.gla)
        with c2:
            form.build_year = st.text_input("Año de construcción", value=form.build_year)

    if st.session_state.analysis_error:
        st.error(st.session_state.analysis_error)

    if st.session_state.key_reselect or not st.session_state.gemini_key:
        _render_key_entry()

    c_back, c_go = st.columns([1, 3])
    with c_back:
        if st.button("← Atrás", disabled=wizard.loading):
            wizard.back()
            st.rerun()
    with c_go:
        clicked = st.button(
            "Generar Brief Estratégico",
            type="primary",
            use_container_width=True,
            disabled=wizard.loading or not st.session_state.gemini_key,
        )
    if clicked:
        problems = form.validate()
        if problems:
            for problem in problems:
                st.warning(problem)
            return
        _submit(wizard)


# ─────────────────────────────────────────────────────────────────────────────
# STEP 3 — RESULTS
# ─────────────────────────────────────────────────────────────────────────────

def _render_result_step(wizard: AnalysisWizard) -> None:
    result = wizard.result
    if result is None:
        return

    map_sources = result.map_sources()
    if map_sources:
        branding.render_html(
            f'<div class="sr-verified">📍 Ubicación Verificada · {html.escape(map_sources[0]["title"])}</div>'
        )

    col_text, col_risk = st.columns([3, 2], gap="large")
    with col_text:
        st.markdown("### Visión del Consultor")
        with st.container(border=True):
            st.markdown(result.analysis_text or "_Sin narrativa disponible._")
    with col_risk:
        traffic_light.render(result.risks)
        with st.container(border=True):
            st.markdown("**¿Quiere convertir este análisis en un plan de acción?**")
            if st.button("Agendar Sesión Estratégica", type="primary", use_container_width=True):
                st.session_state.nav_target = "contact"
                st.rerun()

    if map_sources:
        with st.expander("Fuentes de Datos", expanded=False):
            for source in map_sources:
                st.markdown(f"- [{source['title']}]({source['uri']})")

    st.divider()
    lead_gate.render(wizard)

    st.divider()
    if st.button("↺ Realizar otro análisis"):
        wizard.reset()
        st.session_state.report_pdf = None
        st.session_state.report_filename = ""
        st.rerun()


def render() -> None:
    """Renders the Análisis page for the session's wizard."""
    wizard: AnalysisWizard = st.session_state.wizard

    st.markdown("# Análisis de Resiliencia con IA")
    st.caption(
        "Brief estratégico preliminar fundamentado en Google Maps. "
        "Resultados orientativos generados por IA."
    )
    capture_user_location()
    _render_steps(wizard.step)

    if wizard.step == WizardStep.COLLECT_ASSET:
        _render_asset_step(wizard)
    elif wizard.step == WizardStep.CONFIGURE_ANALYSIS:
        _render_config_step(wizard)
    else:
        _render_result_step(wizard)
