"""Casos de Éxito page: challenge / solution / result cards."""
from __future__ import annotations

import streamlit as st

import app.branding as branding
from config.content import CASE_STUDIES


def render() -> None:
    branding.render_hero(
        "Resultados que Hablan por Sí Mismos",
        "Cómo hemos transformado el riesgo en valor para nuestros clientes.",
        eyebrow="Casos de Éxito",
    )

    for case in CASE_STUDIES:
        with st.container(border=True):
            col_img, col_text = st.columns([2, 3], gap="large")
            with col_img:
                st.image(case["image"], use_container_width=True)
            with col_text:
                st.markdown(f"### {case['client']}")
                st.markdown(f"**El Reto:** {case['challenge']}")
                st.markdown(f"**Nuestra Solución:** {case['solution']}")
                st.success(f"**Resultado:** {case['result']}")
