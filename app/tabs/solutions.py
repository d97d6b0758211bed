"""Soluciones page: one expander per service line, the flagship one open."""
from __future__ import annotations

import streamlit as st

import app.branding as branding
from config.content import SERVICE_SECTIONS, SERVICES_DEFAULT_OPEN


def render() -> None:
    branding.render_hero(
        "Soluciones Integrales para un Futuro Resiliente",
        "Cuatro líneas de servicio conectadas por una misma visión esférica.",
        eyebrow="Soluciones",
    )

    for index, section in enumerate(SERVICE_SECTIONS):
        with st.expander(section["title"], expanded=index == SERVICES_DEFAULT_OPEN):
            st.markdown(section["body"])
            for bullet in section["bullets"]:
                st.markdown(f"- {bullet}")

    if st.button("Solicitar una propuesta", type="primary"):
        st.session_state.nav_target = "contact"
        st.rerun()
