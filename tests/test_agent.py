"""
QA Test Suite — core/agent.py
============================
Prompt construction, request payload, and mapping of Gemini responses to
AnalysisResult or typed errors.

Uses mocked Gemini API calls to avoid network dependency.
"""
from __future__ import annotations

import os
import sys

import pytest
import requests

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

import core.agent as agent
from core.errors import AnalysisError, PermissionDeniedError
from core.risk import risk_state
from core.wizard import AssetForm

_KEY = "test-key"

_CASTELLANA_TEXT = (
    "Texto narrativo.\n"
    "SEMAFORO_RIESGOS:Olas de Calor=Alto,Inundaciones=Bajo,Sequías=Medio"
)


def _text_response(text: str, chunks=None) -> dict:
    candidate = {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
    if chunks is not None:
        candidate["groundingMetadata"] = {"groundingChunks": chunks}
    return {"candidates": [candidate]}


class _FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


# ─────────────────────────────────────────────────────────────────────────────
# Prompt & payload
# ─────────────────────────────────────────────────────────────────────────────

class TestPrompt:
    def test_prompt_contains_asset_data(self):
        prompt = agent.build_analysis_prompt(AssetForm())
        assert "Oficinas" in prompt
        assert "Paseo de la Castellana, 93, 28046, España" in prompt
        assert "Análisis de Resiliencia Climática" in prompt
        assert "15000" in prompt and "1995" in prompt

    def test_prompt_requests_exact_risk_line(self):
        prompt = agent.build_analysis_prompt(AssetForm())
        assert "SEMAFORO_RIESGOS:Olas de Calor=[NIVEL],Inundaciones=[NIVEL],Sequías=[NIVEL]" in prompt
        assert "Bajo, Medio o Alto" in prompt

    def test_data_center_prompt_uses_pue(self):
        prompt = agent.build_analysis_prompt(AssetForm(asset_type="Data Center", pue="1.3"))
        assert "PUE declarado: 1.3" in prompt
        assert "Año de construcción" not in prompt

    @pytest.mark.parametrize("limit,expected", [(50, 100), (150, 150), (900, 200)])
    def test_word_limit_is_clamped(self, limit, expected):
        prompt = agent.build_analysis_prompt(AssetForm(), word_limit=limit)
        assert f"máx {expected} palabras" in prompt


class TestPayload:
    def test_payload_enables_maps_grounding(self):
        payload = agent.build_payload("hola")
        assert payload["tools"] == [{"googleMaps": {}}]
        assert payload["contents"][0]["parts"][0]["text"] == "hola"
        assert "thinkingConfig" in payload["generationConfig"]
        assert "toolConfig" not in payload

    def test_payload_includes_location_when_known(self):
        payload = agent.build_payload("hola", {"latitude": 40.45, "longitude": -3.69})
        assert payload["toolConfig"]["retrievalConfig"]["latLng"] == {
            "latitude": 40.45,
            "longitude": -3.69,
        }


# ─────────────────────────────────────────────────────────────────────────────
# _call_gemini transport handling
# ─────────────────────────────────────────────────────────────────────────────

class TestCallGemini:
    def test_key_sent_in_header_and_model_in_url(self, monkeypatch):
        seen = {}

        def fake_post(url, timeout=None, headers=None, json=None):
            seen.update(url=url, headers=headers, timeout=timeout)
            return _FakeResponse(200, {"candidates": []})

        monkeypatch.setattr(agent.requests, "post", fake_post)
        agent._call_gemini(_KEY, {"contents": []}, "gemini-x")
        assert seen["url"].endswith("/gemini-x:generateContent")
        assert seen["headers"]["x-goog-api-key"] == _KEY
        assert seen["timeout"] > 0

    def test_http_error_is_returned_not_raised(self, monkeypatch):
        body = {"error": {"message": "denied", "status": "PERMISSION_DENIED"}}
        monkeypatch.setattr(agent.requests, "post", lambda *a, **k: _FakeResponse(403, body))
        result = agent._call_gemini(_KEY, {})
        assert result["status_code"] == 403
        assert result["status"] == "PERMISSION_DENIED"
        assert "denied" in result["error"]

    def test_timeout_is_returned_not_raised(self, monkeypatch):
        def raiser(*a, **k):
            raise requests.exceptions.Timeout()
        monkeypatch.setattr(agent.requests, "post", raiser)
        result = agent._call_gemini(_KEY, {})
        assert "error" in result
        assert result["status_code"] is None

    def test_invalid_json_is_an_error(self, monkeypatch):
        monkeypatch.setattr(agent.requests, "post", lambda *a, **k: _FakeResponse(200, None, "<html>"))
        assert "error" in agent._call_gemini(_KEY, {})


# ─────────────────────────────────────────────────────────────────────────────
# run_strategic_analysis
# ─────────────────────────────────────────────────────────────────────────────

class TestRunStrategicAnalysis:
    def test_castellana_end_to_end(self, monkeypatch):
        calls = []

        def fake_call(api_key, payload, model):
            calls.append(payload)
            return _text_response(_CASTELLANA_TEXT)

        monkeypatch.setattr(agent, "_call_gemini", fake_call)
        form = AssetForm(address="Paseo de la Castellana, 93", postal_code="28046", asset_type="Oficinas")
        result = agent.run_strategic_analysis(form, _KEY)

        assert len(calls) == 1
        assert result.analysis_text == "Texto narrativo."
        assert risk_state(result.risks["Olas de Calor"]) == "red"
        assert risk_state(result.risks["Inundaciones"]) == "green"
        assert risk_state(result.risks["Sequías"]) == "yellow"

    def test_location_is_forwarded(self, monkeypatch):
        captured = {}

        def fake_call(api_key, payload, model):
            captured["payload"] = payload
            return _text_response("x")

        monkeypatch.setattr(agent, "_call_gemini", fake_call)
        agent.run_strategic_analysis(AssetForm(), _KEY, location={"latitude": 1.0, "longitude": 2.0})
        assert captured["payload"]["toolConfig"]["retrievalConfig"]["latLng"]["longitude"] == 2.0

    def test_sources_come_from_grounding_chunks(self, monkeypatch):
        chunks = [{"maps": {"uri": "https://maps.google.com/?cid=9", "title": "Torre Europa"}}]
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: _text_response(_CASTELLANA_TEXT, chunks))
        result = agent.run_strategic_analysis(AssetForm(), _KEY)
        assert result.map_sources()[0]["title"] == "Torre Europa"

    def test_missing_risk_line_is_not_an_error(self, monkeypatch):
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: _text_response("  Solo texto.  "))
        result = agent.run_strategic_analysis(AssetForm(), _KEY)
        assert result.analysis_text == "Solo texto."
        assert result.risks == {}
        assert result.sources == ()

    def test_thought_parts_are_skipped(self, monkeypatch):
        response = {"candidates": [{"content": {"parts": [
            {"text": "razonamiento interno", "thought": True},
            {"text": _CASTELLANA_TEXT},
        ]}}]}
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: response)
        result = agent.run_strategic_analysis(AssetForm(), _KEY)
        assert "razonamiento" not in result.analysis_text

    def test_empty_key_raises_permission_denied_without_calling(self, monkeypatch):
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: pytest.fail("model called"))
        with pytest.raises(PermissionDeniedError):
            agent.run_strategic_analysis(AssetForm(), "   ")

    @pytest.mark.parametrize("response", [
        {"error": "Gemini API error 403: nope", "status_code": 403, "status": ""},
        {"error": "Gemini API error 400: x", "status_code": 400, "status": "PERMISSION_DENIED"},
        {"error": "Gemini API error 400: API_KEY_INVALID", "status_code": 400, "status": ""},
    ])
    def test_permission_errors(self, monkeypatch, response):
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: response)
        with pytest.raises(PermissionDeniedError):
            agent.run_strategic_analysis(AssetForm(), _KEY)

    def test_server_error_is_generic_failure(self, monkeypatch):
        monkeypatch.setattr(
            agent, "_call_gemini",
            lambda *a: {"error": "Gemini API error 500: boom", "status_code": 500, "status": "INTERNAL"},
        )
        with pytest.raises(AnalysisError) as exc_info:
            agent.run_strategic_analysis(AssetForm(), _KEY)
        assert not isinstance(exc_info.value, PermissionDeniedError)

    def test_no_candidates_is_failure(self, monkeypatch):
        monkeypatch.setattr(
            agent, "_call_gemini",
            lambda *a: {"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}},
        )
        with pytest.raises(AnalysisError, match="SAFETY"):
            agent.run_strategic_analysis(AssetForm(), _KEY)

    def test_empty_text_is_failure(self, monkeypatch):
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: _text_response("   "))
        with pytest.raises(AnalysisError):
            agent.run_strategic_analysis(AssetForm(), _KEY)

    @pytest.mark.parametrize("response", [
        {"candidates": [{"content": None}]},
        {"candidates": [{"content": {"parts": None}}]},
        {"candidates": [{"content": {"parts": [{"text": None}, "x", 3]}}]},
        {"candidates": [None]},
        {"candidates": "not-a-list"},
        {"promptFeedback": None},
        ["unexpected", "list"],
    ])
    def test_malformed_response_is_generic_failure(self, monkeypatch, response):
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: response)
        with pytest.raises(AnalysisError) as exc_info:
            agent.run_strategic_analysis(AssetForm(), _KEY)
        assert not isinstance(exc_info.value, PermissionDeniedError)

    def test_malformed_grounding_metadata_gives_no_sources(self, monkeypatch):
        response = _text_response(_CASTELLANA_TEXT)
        response["candidates"][0]["groundingMetadata"] = {"groundingChunks": None}
        monkeypatch.setattr(agent, "_call_gemini", lambda *a: response)
        result = agent.run_strategic_analysis(AssetForm(), _KEY)
        assert result.sources == ()
        assert result.analysis_text == "Texto narrativo."
