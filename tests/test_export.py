"""
QA Test Suite — core/export.py
=============================
Consent and lead validation gate the download; a relay outage never does.
"""
from __future__ import annotations

import os
import sys

import pytest
import requests

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

import core.export as export
from core.errors import (
    ConsentRequiredError,
    LeadValidationError,
    MailRelayError,
    ReportGenerationError,
)
from core.wizard import AnalysisResult, AssetForm, LeadData

_LEAD = LeadData(name="Ana", email="ana@acme.es")
_RESULT = AnalysisResult("Texto narrativo.", {"Olas de Calor": "Alto"})


class _Recorder:
    def __init__(self, exc: Exception | None = None, value=None):
        self.calls = []
        self.exc = exc
        self.value = value

    def __call__(self, *args):
        self.calls.append(args)
        if self.exc is not None:
            raise self.exc
        return self.value


class TestRequestReportDownload:
    def test_success_relays_and_builds(self):
        relay, builder = _Recorder(), _Recorder(value=b"%PDF-fake")
        outcome = export.request_report_download(
            AssetForm(), _RESULT, _LEAD, True, relay=relay, builder=builder,
        )
        assert outcome.pdf_bytes == b"%PDF-fake"
        assert outcome.lead_relayed is True
        assert outcome.filename.startswith("Informe_Resiliencia_")
        assert outcome.filename.endswith(".pdf")
        assert len(relay.calls) == 1 and len(builder.calls) == 1

    def test_no_consent_calls_nothing(self):
        relay, builder = _Recorder(), _Recorder(value=b"x")
        with pytest.raises(ConsentRequiredError):
            export.request_report_download(
                AssetForm(), _RESULT, _LEAD, False, relay=relay, builder=builder,
            )
        assert relay.calls == [] and builder.calls == []

    def test_consent_checked_before_lead(self):
        with pytest.raises(ConsentRequiredError):
            export.request_report_download(
                AssetForm(), _RESULT, LeadData(), False,
                relay=_Recorder(), builder=_Recorder(value=b"x"),
            )

    def test_invalid_lead_calls_nothing(self):
        relay, builder = _Recorder(), _Recorder(value=b"x")
        with pytest.raises(LeadValidationError) as exc_info:
            export.request_report_download(
                AssetForm(), _RESULT, LeadData(name="Ana", email="no-es-email"), True,
                relay=relay, builder=builder,
            )
        assert exc_info.value.problems
        assert relay.calls == [] and builder.calls == []

    @pytest.mark.parametrize("exc", [
        MailRelayError("EmailJS error 500"),
        requests.exceptions.ConnectionError("down"),
    ])
    def test_relay_failure_still_produces_document(self, exc):
        outcome = export.request_report_download(
            AssetForm(), _RESULT, _LEAD, True,
            relay=_Recorder(exc=exc), builder=_Recorder(value=b"%PDF-fake"),
        )
        assert outcome.pdf_bytes == b"%PDF-fake"
        assert outcome.lead_relayed is False

    def test_builder_failure_surfaces(self):
        with pytest.raises(ReportGenerationError):
            export.request_report_download(
                AssetForm(), _RESULT, _LEAD, True,
                relay=_Recorder(), builder=_Recorder(exc=ReportGenerationError("x")),
            )

    def test_unexpected_builder_error_is_wrapped(self):
        with pytest.raises(ReportGenerationError):
            export.request_report_download(
                AssetForm(), _RESULT, _LEAD, True,
                relay=_Recorder(), builder=_Recorder(exc=OSError("disk")),
            )

    def test_default_builder_produces_real_pdf(self, monkeypatch):
        monkeypatch.setattr(export, "send_email", lambda *a, **k: None)
        outcome = export.request_report_download(AssetForm(), _RESULT, _LEAD, True)
        assert outcome.pdf_bytes.startswith(b"%PDF")
        assert outcome.lead_relayed is True

    def test_default_relay_unconfigured_is_not_fatal(self, monkeypatch):
        for key in ("EMAILJS_SERVICE_ID", "EMAILJS_TEMPLATE_ID", "EMAILJS_PUBLIC_KEY"):
            monkeypatch.delenv(key, raising=False)
        outcome = export.request_report_download(
            AssetForm(), _RESULT, _LEAD, True, builder=_Recorder(value=b"%PDF-fake"),
        )
        assert outcome.lead_relayed is False
