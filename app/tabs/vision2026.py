"""
🚀 Visión 2026 Landing
=====================
Pioneer waitlist for the 2026 programme. The counter starts at
PIONEER_INITIAL_COUNT and moves up by one per successful request in this
session. Rendered without the corporate footer.
"""
from __future__ import annotations

import logging

import streamlit as st

import app.branding as branding
import services.audit as audit
from app.session import _get_secret
from app.utils import is_valid_email
from config.constants import (
    ACTIVITY_OPTIONS,
    OTHER_ACTIVITY,
    PIONEER_CAPACITY,
    PRIVACY_POLICY_URL,
)
from config.content import EXECUTION_GAP, PIONEER_TIERS
from core.errors import ConsentRequiredError, MailRelayError
from services.mailer import pioneer_params, relay_config, send_email

logger = logging.getLogger(__name__)


def submit_pioneer_request(
    name: str,
    company: str,
    email: str,
    role: str,
    activity: str,
    other_activity: str,
    consent: bool,
) -> int:
    """Relay one waitlist request and return the new counter value.

    Raises ConsentRequiredError before anything is sent, MailRelayError if
    the relay fails (the counter is left unchanged).
    """
    if not consent:
        raise ConsentRequiredError("Debe aceptar la política de privacidad.")
    position = st.session_state.pioneer_count + 1
    send_email(
        pioneer_params(name, company, email, role, activity, other_activity, position),
        relay_config(_get_secret),
    )
    st.session_state.pioneer_count = position
    return position


def _render_counter() -> None:
    count = st.session_state.pioneer_count
    branding.render_html(
        f'<div class="sr-counter">{count}<small> / {PIONEER_CAPACITY} plazas</small></div>'
    )
    st.progress(min(count / PIONEER_CAPACITY, 1.0))


def _render_form() -> None:
    activity = st.selectbox("Actividad *", ACTIVITY_OPTIONS)
    other_activity = ""
    if activity == OTHER_ACTIVITY:
        other_activity = st.text_input("Especifique su actividad *")

    with st.form("pioneer_form"):
        c1, c2 = st.columns(2)
        with c1:
            name = st.text_input("Nombre *")
            email = st.text_input("Email corporativo *")
        with c2:
            company = st.text_input("Empresa *")
            role = st.text_input("Cargo *")
        consent = st.checkbox(
            f"He leído y acepto la [Política de Privacidad]({PRIVACY_POLICY_URL}) *"
        )
        submitted = st.form_submit_button("Reservar mi plaza de Pionero", type="primary")

    if not submitted:
        return
    if not all(v.strip() for v in (name, company, role)):
        st.warning("Complete los campos obligatorios.")
        return
    if activity == OTHER_ACTIVITY and not other_activity.strip():
        st.warning("Especifique su actividad.")
        return
    if not is_valid_email(email):
        st.warning("Introduzca un email válido.")
        return

    try:
        submit_pioneer_request(
            name.strip(), company.strip(), email.strip(), role.strip(),
            activity, other_activity.strip(), consent,
        )
    except ConsentRequiredError as exc:
        st.warning(str(exc))
        return
    except MailRelayError as exc:
        logger.error("Pioneer waitlist relay failed: %s", exc)
        st.session_state.pioneer_status = "error"
    else:
        st.session_state.pioneer_status = "success"
        audit.log_event(audit.CONTACT_SENT, f"Pioneer request from {email.strip()}")
    st.rerun()


def render() -> None:
    """Renders the Visión 2026 landing page."""
    branding.render_hero(
        "Lidere la Sostenibilidad Estratégica en 2026.",
        "Únase a la lista de Pioneros y cierre la brecha entre el reporte ESG y la "
        "ejecución real en su organización.",
        eyebrow="Programa Pioneros · Visión 2026",
    )

    st.markdown("### La Brecha de Ejecución")
    cols = st.columns(len(EXECUTION_GAP))
    for col, gap in zip(cols, EXECUTION_GAP):
        with col:
            branding.render_card(f"{gap['figure']} · {gap['title']}", gap["body"], dark=True)
            st.caption(f"Fuente: {gap['source']}")

    st.markdown("### Recompensas para los Primeros Pioneros")
    cols = st.columns(len(PIONEER_TIERS))
    for col, (emoji, title, desc) in zip(cols, PIONEER_TIERS):
        with col:
            branding.render_card(title, desc, icon=emoji)

    st.divider()
    col_counter, col_form = st.columns([1, 2], gap="large")
    with col_counter:
        st.markdown("#### Lista de Pioneros")
        _render_counter()
    with col_form:
        if st.session_state.pioneer_status == "success":
            st.success(
                f"✓ ¡Bienvenido a bordo! Su plaza es la nº {st.session_state.pioneer_count}. "
                "Le contactaremos muy pronto."
            )
            return
        if st.session_state.pioneer_status == "error":
            st.error("No se pudo registrar su solicitud. Inténtelo de nuevo.")
        _render_form()
