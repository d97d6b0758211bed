# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Lead-Gated Report Export
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Order is fixed: consent → lead validation → relay (best effort) → PDF.
# A relay outage never blocks the download; a PDF failure always does.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from core.errors import (
    ConsentRequiredError,
    LeadValidationError,
    MailRelayError,
    ReportGenerationError,
)
from core.wizard import AnalysisResult, AssetForm, LeadData
from services.mailer import report_lead_params, send_email
from services.report_generator import generate_analysis_report, report_filename

logger = logging.getLogger(__name__)

Relay = Callable[[LeadData, AssetForm, AnalysisResult], None]
Builder = Callable[[AssetForm, AnalysisResult, Optional[LeadData]], bytes]


@dataclass(frozen=True)
class ExportOutcome:
    pdf_bytes: bytes
    filename: str
    lead_relayed: bool


def _default_relay(lead: LeadData, form: AssetForm, result: AnalysisResult) -> None:
    send_email(report_lead_params(lead, form, result))


def _default_builder(form: AssetForm, result: AnalysisResult, lead: Optional[LeadData]) -> bytes:
    return generate_analysis_report(form, result, lead)


def request_report_download(
    form: AssetForm,
    result: AnalysisResult,
    lead: LeadData,
    consent: bool,
    *,
    relay: Optional[Relay] = None,
    builder: Optional[Builder] = None,
) -> ExportOutcome:
    """
    Release the PDF report in exchange for a validated, consenting lead.

    Raises
    ------
    ConsentRequiredError
        Privacy policy not accepted. Nothing is sent or built.
    LeadValidationError
        Name or email missing or invalid. Nothing is sent or built.
    ReportGenerationError
        The PDF could not be produced.
    """
    if not consent:
        raise ConsentRequiredError("Debe aceptar la política de privacidad para descargar el informe.")

    problems = lead.validate()
    if problems:
        raise LeadValidationError(problems)

    relayed = True
    try:
        (relay or _default_relay)(lead, form, result)
    except (MailRelayError, requests.exceptions.RequestException) as exc:
        relayed = False
        logger.warning("Report lead could not be relayed, continuing with download: %s", exc)

    try:
        pdf_bytes = (builder or _default_builder)(form, result, lead)
    except ReportGenerationError:
        raise
    except Exception as exc:
        raise ReportGenerationError(f"No se pudo generar el informe PDF: {exc}") from exc

    return ExportOutcome(pdf_bytes=pdf_bytes, filename=report_filename(form), lead_relayed=relayed)
