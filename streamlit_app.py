"""
# Smart Rem Solutions

This is the main entry point for the Streamlit application.

It builds the multi-page navigation (Inicio, Filosofía, Soluciones, Casos de
Éxito, Análisis IA, Contacto, Visión 2026, ESG4DC) defined in app/main.py.

"""

from app.main import run

run()
