# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Strategic Analysis Agent
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Single-shot Gemini call grounded on Google Maps: builds the consultant prompt
# from the wizard form, posts it to the generateContent REST endpoint and turns
# the reply into an AnalysisResult (narrative + traffic light + citations).
#
# One request per submit, never retried automatically.
# Get an API key at: https://aistudio.google.com
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

import config.constants as constants
from core.errors import AnalysisError, PermissionDeniedError
from core.risk import parse_analysis_response
from core.wizard import AnalysisResult, AssetForm

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# PROMPT
# ─────────────────────────────────────────────────────────────────────────────

_RISK_LINE_TEMPLATE = (
    constants.RISK_SENTINEL
    + ",".join(f"{hazard}=[NIVEL]" for hazard in constants.HAZARDS)
)


def _technical_context(form: AssetForm) -> str:
    if form.is_data_center:
        return f"PUE declarado: {form.pue or 'N/D'}"
    return (
        f"Superficie: {form.gla or 'N/D'} m² · "
        f"Año de construcción: {form.build_year or 'N/D'}"
    )


def build_analysis_prompt(form: AssetForm, word_limit: int = constants.BRIEF_WORD_LIMIT) -> str:
    """Consultant prompt requesting a brief plus the exact SEMAFORO_RIESGOS line."""
    words = max(constants.MIN_BRIEF_WORDS, min(constants.MAX_BRIEF_WORDS, int(word_limit)))
    hazards = ", ".join(constants.HAZARDS)
    levels = ", ".join(constants.RISK_LEVELS[:-1]) + f" o {constants.RISK_LEVELS[-1]}"
    return (
        "Actúa como un Consultor Senior de Estrategia de Sostenibilidad en "
        "\"Smart Rem Solutions\". Tu tono es profesional, visionario y experto.\n\n"
        "Analiza el activo:\n"
        f"Tipo: {form.asset_type}\n"
        f"Dirección: {form.full_address()}\n"
        f"Contexto: {form.analysis_type}\n"
        f"Datos técnicos: {_technical_context(form)}\n\n"
        "Tarea:\n"
        "1. Utiliza Google Maps para entender el entorno micro-climático y urbano real.\n"
        f"2. Redacta un \"Brief Estratégico de Resiliencia\" (máx {words} palabras). "
        "NO hagas una lista aburrida. Escribe una narrativa potente que explique cómo la "
        "ubicación específica y el tipo de activo presentan desafíos que pueden "
        "transformarse en ventajas competitivas usando la filosofía de \"Sostenibilidad "
        "Esférica\". Habla de oportunidades de inversión, reputación y longevidad del activo.\n"
        f"3. Evalúa los riesgos climáticos ({hazards}) basándote en la ubicación.\n\n"
        "Formato de Salida Requerido:\n"
        "Primero, el texto narrativo del Brief.\n"
        "Al final, añade EXACTAMENTE esta línea, en una sola línea y sin formato, "
        "para parsear el semáforo:\n"
        f"{_RISK_LINE_TEMPLATE}\n"
        f"(Donde [NIVEL] es {levels}).\n"
    )


# ─────────────────────────────────────────────────────────────────────────────
# REQUEST PAYLOAD
# ─────────────────────────────────────────────────────────────────────────────

def build_payload(prompt: str, location: Optional[dict] = None) -> dict:
    """generateContent body with Maps grounding and optional lat/long context."""
    payload: dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "tools": [{"googleMaps": {}}],
        "generationConfig": {
            "maxOutputTokens": constants.MAX_OUTPUT_TOKENS,
            "thinkingConfig": {"thinkingBudget": constants.THINKING_BUDGET},
        },
    }
    if location:
        payload["toolConfig"] = {
            "retrievalConfig": {
                "latLng": {
                    "latitude": float(location["latitude"]),
                    "longitude": float(location["longitude"]),
                }
            }
        }
    return payload


# ─────────────────────────────────────────────────────────────────────────────
# GEMINI API CALL
# ─────────────────────────────────────────────────────────────────────────────

def _call_gemini(api_key: str, payload: dict, model: str = constants.DEFAULT_GEMINI_MODEL) -> dict:
    """
    Single Gemini API call. Returns the raw response dict, or
    ``{"error": str, "status_code": int | None}`` on failure. Never raises
    for transport problems.
    """
    url = f"{constants.GEMINI_BASE_URL}/{model}:generateContent"
    try:
        resp = requests.post(
            url,
            timeout=constants.GEMINI_TIMEOUT_S,
            headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
            json=payload,
        )
    except requests.exceptions.Timeout:
        return {"error": "La petición a Gemini ha superado el tiempo de espera.", "status_code": None}
    except requests.exceptions.ConnectionError:
        return {"error": "No se pudo conectar con la API de Gemini.", "status_code": None}
    except requests.exceptions.RequestException as exc:
        return {"error": f"La petición a Gemini ha fallado: {exc}", "status_code": None}

    if resp.status_code != 200:
        error_status = ""
        try:
            error_data = resp.json().get("error", {})
            error_msg = error_data.get("message", resp.text[:200])
            error_status = error_data.get("status", "")
        except (ValueError, AttributeError):
            error_msg = resp.text[:200]
        return {
            "error": f"Gemini API error {resp.status_code}: {error_msg}",
            "status_code": resp.status_code,
            "status": error_status,
        }

    try:
        return resp.json()
    except ValueError:
        return {"error": "Respuesta de Gemini no es JSON válido.", "status_code": resp.status_code}


def _is_permission_error(response: dict) -> bool:
    if response.get("status_code") in (401, 403):
        return True
    marker = f"{response.get('status', '')} {response.get('error', '')}"
    return "PERMISSION_DENIED" in marker or "API_KEY_INVALID" in marker


def _extract_text(candidate: dict) -> str:
    content = candidate.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    # Thought summaries are flagged with "thought": true and never shown
    return "".join(
        p["text"] for p in parts
        if isinstance(p, dict) and isinstance(p.get("text"), str) and not p.get("thought")
    )


# ─────────────────────────────────────────────────────────────────────────────
# ANALYSIS ENTRY POINT
# ─────────────────────────────────────────────────────────────────────────────

def run_strategic_analysis(
    form: AssetForm,
    api_key: str,
    location: Optional[dict] = None,
    word_limit: int = constants.BRIEF_WORD_LIMIT,
    model: str = constants.DEFAULT_GEMINI_MODEL,
) -> AnalysisResult:
    """
    Run one grounded analysis for the asset in ``form``.

    Raises PermissionDeniedError when the key is missing or rejected, and
    AnalysisError for any other failure. A response without the risk line
    is not an error: the traffic light is simply empty.
    """
    api_key = (api_key or "").strip()
    if not api_key:
        raise PermissionDeniedError("No hay ninguna API key de Gemini configurada.")

    prompt = build_analysis_prompt(form, word_limit=word_limit)
    payload = build_payload(prompt, location)
    logger.info(
        "Requesting %s analysis (model=%s, asset_type=%s, grounded_location=%s)",
        form.analysis_type, model, form.asset_type, bool(location),
    )

    response = _call_gemini(api_key, payload, model)

    if not isinstance(response, dict):
        raise AnalysisError("Respuesta de Gemini con formato inesperado.")

    if "error" in response:
        if _is_permission_error(response):
            raise PermissionDeniedError(response["error"])
        raise AnalysisError(response["error"])

    candidates = response.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        feedback = response.get("promptFeedback") or {}
        reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        raise AnalysisError(
            f"Gemini no devolvió ninguna respuesta{f' ({reason})' if reason else ''}."
        )

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise AnalysisError("Respuesta de Gemini con formato inesperado.")
    text = _extract_text(candidate)
    if not text.strip():
        raise AnalysisError("La respuesta de Gemini llegó vacía.")

    narrative, risks = parse_analysis_response(text)
    if not risks:
        logger.warning("Risk line missing or malformed in model output; traffic light left empty")

    metadata = candidate.get("groundingMetadata") or {}
    chunks = metadata.get("groundingChunks") if isinstance(metadata, dict) else None
    sources = tuple(c for c in chunks if isinstance(c, dict)) if isinstance(chunks, list) else ()

    return AnalysisResult(analysis_text=narrative, risks=risks, sources=sources)
