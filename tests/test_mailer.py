"""
QA Test Suite — services/mailer.py
=================================
EmailJS request shape, failure mapping, and template parameter builders.
"""
from __future__ import annotations

import os
import sys

import pytest
import requests

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

from services import mailer
from core.errors import MailRelayError
from core.wizard import AnalysisResult, AssetForm, LeadData

_CFG = {"service_id": "svc", "template_id": "tpl", "public_key": "pub", "private_key": ""}
_TEMPLATE_KEYS = {"title", "name", "email", "time", "message"}


class _FakeResponse:
    def __init__(self, status_code: int, text: str = "OK"):
        self.status_code = status_code
        self.text = text


class TestRelayConfig:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("EMAILJS_SERVICE_ID", " svc ")
        monkeypatch.setenv("EMAILJS_TEMPLATE_ID", "tpl")
        monkeypatch.setenv("EMAILJS_PUBLIC_KEY", "pub")
        monkeypatch.delenv("EMAILJS_PRIVATE_KEY", raising=False)
        assert mailer.relay_config() == {
            "service_id": "svc", "template_id": "tpl", "public_key": "pub", "private_key": "",
        }

    def test_custom_lookup(self):
        cfg = mailer.relay_config(lambda key: {"EMAILJS_SERVICE_ID": "from-secrets"}.get(key, ""))
        assert cfg["service_id"] == "from-secrets"
        assert cfg["template_id"] == ""


class TestSendEmail:
    def test_posts_expected_body(self, monkeypatch):
        seen = {}

        def fake_post(url, json=None, timeout=None):
            seen.update(url=url, json=json, timeout=timeout)
            return _FakeResponse(200)

        monkeypatch.setattr(mailer.requests, "post", fake_post)
        mailer.send_email({"title": "t"}, _CFG)
        assert seen["url"] == "https://api.emailjs.com/api/v1.0/email/send"
        assert seen["json"] == {
            "service_id": "svc", "template_id": "tpl", "user_id": "pub",
            "template_params": {"title": "t"},
        }
        assert seen["timeout"] > 0

    def test_private_key_sent_as_access_token(self, monkeypatch):
        seen = {}
        monkeypatch.setattr(
            mailer.requests, "post",
            lambda url, json=None, timeout=None: seen.update(json=json) or _FakeResponse(200),
        )
        mailer.send_email({}, dict(_CFG, private_key="priv"))
        assert seen["json"]["accessToken"] == "priv"

    def test_missing_config_raises_without_network(self, monkeypatch):
        monkeypatch.setattr(mailer.requests, "post", lambda *a, **k: pytest.fail("network call made"))
        with pytest.raises(MailRelayError, match="template_id"):
            mailer.send_email({}, dict(_CFG, template_id=""))

    def test_non_200_raises(self, monkeypatch):
        monkeypatch.setattr(mailer.requests, "post", lambda *a, **k: _FakeResponse(400, "bad"))
        with pytest.raises(MailRelayError, match="400"):
            mailer.send_email({}, _CFG)

    def test_transport_error_raises_relay_error(self, monkeypatch):
        def raiser(*a, **k):
            raise requests.exceptions.ConnectionError("down")
        monkeypatch.setattr(mailer.requests, "post", raiser)
        with pytest.raises(MailRelayError):
            mailer.send_email({}, _CFG)


class TestTemplateBuilders:
    def test_contact_params(self):
        params = mailer.contact_params("Ana", "Acme", "ana@acme.es", "Hola")
        assert set(params) == _TEMPLATE_KEYS
        assert params["name"] == "Ana"
        assert "Empresa: Acme" in params["message"]
        assert params["message"].startswith("Hola")

    def test_pioneer_params_expands_other_activity(self):
        params = mailer.pioneer_params("Ana", "Acme", "ana@acme.es", "CEO", "Otros", "Hoteles", 129)
        assert "Actividad: Otros: Hoteles" in params["message"]
        assert "Puesto actual en la lista: 129" in params["message"]

    def test_pioneer_params_ignores_free_text_for_listed_activity(self):
        params = mailer.pioneer_params("Ana", "Acme", "a@b.es", "CEO", "Facility Management", "x", 1)
        assert "Actividad: Facility Management" in params["message"]

    def test_esg4dc_params(self):
        params = mailer.esg4dc_params("Ana", "DC Corp", "ana@dc.es", "PUE alto")
        assert set(params) == _TEMPLATE_KEYS
        assert "ESG4DC" in params["title"]

    def test_report_lead_params(self):
        lead = LeadData(name="Ana", email="ana@acme.es", company="Acme")
        result = AnalysisResult("Narrativa breve.", {"Olas de Calor": "Alto"})
        params = mailer.report_lead_params(lead, AssetForm(), result)
        assert set(params) == _TEMPLATE_KEYS
        assert "- Olas de Calor: Alto" in params["message"]
        assert "Paseo de la Castellana, 93, 28046, España" in params["message"]
        assert "Narrativa breve." in params["message"]

    def test_report_lead_summary_is_truncated(self):
        long_text = "palabra " * 500
        params = mailer.report_lead_params(
            LeadData(name="Ana", email="a@b.es"), AssetForm(), AnalysisResult(long_text),
        )
        assert long_text.strip() not in params["message"]
        assert "…" in params["message"]
