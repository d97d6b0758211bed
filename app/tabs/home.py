"""
🏠 Inicio Tab Renderer
=====================
Hero, Spherical Sustainability summary, service teasers, success stories
and the Amormonía manifesto.
"""
from __future__ import annotations

import streamlit as st

import app.branding as branding
from config.content import (
    AMORMONIA_MANIFESTO,
    HOME_HERO,
    SERVICE_CARDS,
    SPHERICAL_SUMMARY,
    SUCCESS_STORIES,
)


def render() -> None:
    branding.render_hero(HOME_HERO["title"], HOME_HERO["body"], eyebrow="Sostenibilidad Esférica")

    if st.button("Analice su activo con IA →", type="primary"):
        st.session_state.nav_target = "analysis"
        st.rerun()

    st.markdown("## ¿Qué es la Sostenibilidad Esférica?")
    st.markdown(SPHERICAL_SUMMARY)

    st.markdown("## Nuestras Soluciones")
    cols = st.columns(len(SERVICE_CARDS))
    for col, card in zip(cols, SERVICE_CARDS):
        with col:
            branding.render_card(card["title"], card["description"], icon=card["icon"])

    st.markdown("## Casos de Éxito")
    cols = st.columns(len(SUCCESS_STORIES))
    for col, story in zip(cols, SUCCESS_STORIES):
        with col:
            st.image(story["image"], use_container_width=True)
            st.markdown(f"**{story['title']}**")
            st.caption(story["result"])

    st.markdown("## Amormonía")
    with st.container(border=True):
        st.markdown(f"_{AMORMONIA_MANIFESTO}_")
