"""
🖥️ ESG4DC Landing
================
Specialised landing for data-centre operators: PUE / WUE / ERE metric cards
and a consent-gated contact form. Rendered without the corporate footer.
"""
from __future__ import annotations

import logging

import streamlit as st

import app.branding as branding
import services.audit as audit
from app.session import _get_secret
from app.utils import is_valid_email
from config.constants import PRIVACY_POLICY_URL
from config.content import DC_METRICS, ESG4DC_LINKEDIN_URL
from core.errors import MailRelayError
from services.mailer import esg4dc_params, relay_config, send_email

logger = logging.getLogger(__name__)


def _render_form() -> None:
    with st.form("esg4dc_form"):
        c1, c2 = st.columns(2)
        with c1:
            name = st.text_input("Nombre *")
        with c2:
            company = st.text_input("Empresa / Operador *")
        email = st.text_input("Email corporativo *")
        message = st.text_area("¿Qué reto tiene su data center?", height=120)
        consent = st.checkbox(
            f"He leído y acepto la [Política de Privacidad]({PRIVACY_POLICY_URL}) *"
        )
        submitted = st.form_submit_button("Solicitar diagnóstico", type="primary")

    if not submitted:
        return
    if not consent:
        st.warning("Debe aceptar la política de privacidad.")
        return
    if not name.strip() or not company.strip():
        st.warning("Complete los campos obligatorios.")
        return
    if not is_valid_email(email):
        st.warning("Introduzca un email válido.")
        return

    try:
        with st.spinner("Enviando…"):
            send_email(
                esg4dc_params(name.strip(), company.strip(), email.strip(), message.strip()),
                relay_config(_get_secret),
            )
    except MailRelayError as exc:
        logger.error("ESG4DC form relay failed: %s", exc)
        st.session_state.esg4dc_status = "error"
    else:
        st.session_state.esg4dc_status = "success"
        audit.log_event(audit.CONTACT_SENT, f"ESG4DC request from {email.strip()}")
    st.rerun()


def render() -> None:
    """Renders the ESG4DC landing page."""
    branding.render_hero(
        "ESG para Data Centers: Eficiencia que se Mide.",
        "Alineamos su infraestructura digital con el Código de Conducta Europeo, la "
        "Taxonomía Verde y la Directiva de Eficiencia Energética.",
        eyebrow="ESG4DC · Especialistas en Data Centers",
    )

    cols = st.columns(len(DC_METRICS))
    for col, (code, name, desc) in zip(cols, DC_METRICS):
        with col:
            branding.render_card(f"{code} · {name}", desc, dark=True)

    st.divider()
    col_text, col_form = st.columns([2, 3], gap="large")
    with col_text:
        st.markdown("### Hable con un especialista")
        st.markdown(
            "Diagnóstico inicial sin coste de su PUE, WUE y ERE frente a los "
            "umbrales regulatorios de la UE."
        )
        st.markdown(f"🔗 [ESG4DC en LinkedIn]({ESG4DC_LINKEDIN_URL})")
    with col_form:
        if st.session_state.esg4dc_status == "success":
            st.success("✓ Solicitud recibida. Un especialista le contactará en breve.")
            if st.button("Enviar otra solicitud"):
                st.session_state.esg4dc_status = "idle"
                st.rerun()
            return
        if st.session_state.esg4dc_status == "error":
            st.error("Hubo un error al enviar la solicitud. Inténtelo de nuevo.")
        _render_form()
