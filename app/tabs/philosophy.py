"""Filosofía page: long-form articles and the four guiding principles."""
from __future__ import annotations

import streamlit as st

import app.branding as branding
from config.content import PHILOSOPHY_ARTICLES, PRINCIPLES


def render() -> None:
    branding.render_hero(
        "La Filosofía de la Esfera",
        "Un nuevo paradigma para la gestión sostenible en un mundo incierto.",
        eyebrow="Filosofía",
    )

    for article in PHILOSOPHY_ARTICLES:
        st.markdown(f"## {article['title']}")
        for paragraph in article["paragraphs"]:
            st.markdown(paragraph)

    st.markdown("## Principios de la Sostenibilidad Esférica")
    cols = st.columns(2)
    for i, (title, body) in enumerate(PRINCIPLES):
        with cols[i % 2]:
            branding.render_card(title, body)
            st.write("")
