"""
Lead-capture gate in front of the PDF report download.

Exports one public function: render(wizard)
Called from app/tabs/analysis.py on step 3, once a result exists.
"""

from __future__ import annotations

import logging

import streamlit as st

import services.audit as audit
from app.session import _get_secret
from config.constants import LEAD_INTERESTS, LEAD_ROLES, PRIVACY_POLICY_URL
from core.errors import ConsentRequiredError, LeadValidationError, ReportGenerationError
from core.export import request_report_download
from core.wizard import AnalysisResult, AnalysisWizard, AssetForm, LeadData
from services.mailer import relay_config, report_lead_params, send_email

logger = logging.getLogger(__name__)


def _relay(lead: LeadData, form: AssetForm, result: AnalysisResult) -> None:
    send_email(report_lead_params(lead, form, result), relay_config(_get_secret))


def render(wizard: AnalysisWizard) -> None:
    if wizard.result is None:
        return

    st.markdown("### 📄 Descargue el Informe en PDF")
    st.caption("Déjenos sus datos y obtenga el brief completo con la matriz de riesgos.")

    with st.form("lead_gate_form"):
        c1, c2 = st.columns(2)
        with c1:
            name = st.text_input("Nombre *")
            email = st.text_input("Email corporativo *")
            phone = st.text_input("Teléfono")
            company = st.text_input("Empresa")
        with c2:
            role = st.selectbox("Cargo", [""] + LEAD_ROLES)
            sector = st.text_input("Sector")
            interest = st.selectbox("Interés principal", [""] + LEAD_INTERESTS)
        consent = st.checkbox(
            f"He leído y acepto la [Política de Privacidad]({PRIVACY_POLICY_URL}) *"
        )
        submitted = st.form_submit_button("Generar informe", type="primary")

    if submitted:
        lead = LeadData(
            name=name.strip(), email=email.strip(), phone=phone.strip(),
            company=company.strip(), role=role, sector=sector.strip(), interest=interest,
        )
        try:
            with st.spinner("Generando informe…"):
                outcome = request_report_download(
                    wizard.form, wizard.result, lead, consent, relay=_relay,
                )
        except ConsentRequiredError as exc:
            st.warning(str(exc))
        except LeadValidationError as exc:
            for problem in exc.problems:
                st.warning(problem)
        except ReportGenerationError as exc:
            logger.error("Report generation failed: %s", exc)
            st.error("No se ha podido generar el informe. Inténtelo de nuevo en unos minutos.")
        else:
            st.session_state.report_pdf = outcome.pdf_bytes
            st.session_state.report_filename = outcome.filename
            if outcome.lead_relayed:
                audit.log_event(audit.LEAD_RELAYED, f"Report lead from {lead.email}")
            audit.log_event(audit.REPORT_EXPORTED, f"Report for {wizard.form.postal_code}")

    if st.session_state.get("report_pdf"):
        st.success("✓ Informe listo.")
        st.download_button(
            "⬇️ Descargar informe PDF",
            data=st.session_state.report_pdf,
            file_name=st.session_state.report_filename,
            mime="application/pdf",
            use_container_width=True,
        )
