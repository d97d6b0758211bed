"""
✉️ Contacto Tab Renderer
=======================
General enquiry form relayed through EmailJS. Shows a success state with a
"send another" action, or an inline error so the visitor can retry.
"""
from __future__ import annotations

import logging

import streamlit as st

import services.audit as audit
from app.session import _get_secret
from app.utils import is_valid_email
from config.content import CONTACT_EMAIL, LINKEDIN_URL, OFFICE_ADDRESS
from core.errors import MailRelayError
from services.mailer import contact_params, relay_config, send_email

logger = logging.getLogger(__name__)


def _render_form() -> None:
    with st.form("contact_form"):
        c1, c2 = st.columns(2)
        with c1:
            name = st.text_input("Nombre *")
        with c2:
            company = st.text_input("Empresa")
        email = st.text_input("Email *")
        message = st.text_area("Mensaje *", height=150)
        submitted = st.form_submit_button("Enviar Mensaje", type="primary")

    if not submitted:
        return
    if not name.strip() or not message.strip():
        st.warning("Complete los campos obligatorios.")
        return
    if not is_valid_email(email):
        st.warning("Introduzca un email válido.")
        return

    try:
        with st.spinner("Enviando…"):
            send_email(
                contact_params(name.strip(), company.strip(), email.strip(), message.strip()),
                relay_config(_get_secret),
            )
    except MailRelayError as exc:
        logger.error("Contact form relay failed: %s", exc)
        st.session_state.contact_status = "error"
    else:
        st.session_state.contact_status = "success"
        audit.log_event(audit.CONTACT_SENT, f"Contact form from {email.strip()}")
    st.rerun()


def render() -> None:
    """Renders the Contacto page."""
    st.markdown("# Hablemos de su Estrategia")
    st.markdown(
        "Cuéntenos su reto. Nuestro equipo responderá en menos de 24 horas laborables."
    )

    col_form, col_info = st.columns([3, 2], gap="large")
    with col_info:
        with st.container(border=True):
            st.markdown("#### Información de Contacto")
            st.markdown(f"📍 {OFFICE_ADDRESS}")
            st.markdown(f"✉️ [{CONTACT_EMAIL}](mailto:{CONTACT_EMAIL})")
            st.markdown(f"🔗 [LinkedIn]({LINKEDIN_URL})")

    with col_form:
        if st.session_state.contact_status == "success":
            st.success("✓ ¡Mensaje enviado! Gracias por contactarnos. Le responderemos pronto.")
            if st.button("Enviar otro mensaje"):
                st.session_state.contact_status = "idle"
                st.rerun()
            return
        if st.session_state.contact_status == "error":
            st.error(
                "Hubo un error al enviar el mensaje. Por favor, inténtelo de nuevo "
                f"o escríbanos directamente a {CONTACT_EMAIL}."
            )
        _render_form()
