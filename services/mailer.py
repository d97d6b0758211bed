# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Lead Relay (EmailJS)
# © 2026 Smart Rem Solutions. All rights reserved.
#
# All lead-capture forms (contact, Visión 2026 waitlist, ESG4DC, report
# download gate) relay through one EmailJS template that expects
# {{title}}, {{name}}, {{email}}, {{time}} and {{message}}.
#
# Credentials come from the environment (see .env.example). Server-side
# sends require "Allow EmailJS API for non-browser applications" and, when
# strict mode is on, the private key as accessToken.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Callable, Optional

import requests

import config.constants as constants
from core.errors import MailRelayError
from core.wizard import AnalysisResult, AssetForm, LeadData

logger = logging.getLogger(__name__)

_ENV_KEYS = {
    "service_id":  "EMAILJS_SERVICE_ID",
    "template_id": "EMAILJS_TEMPLATE_ID",
    "public_key":  "EMAILJS_PUBLIC_KEY",
    "private_key": "EMAILJS_PRIVATE_KEY",
}

_RULE = "--------------------------------"


def relay_config(lookup: Optional[Callable[[str], str]] = None) -> dict[str, str]:
    """Read EmailJS identifiers ('' when unset).

    ``lookup`` maps an env-var name to its value; the app passes its
    secrets-then-environment reader, tests and scripts use os.getenv.
    """
    get = lookup or (lambda key: os.getenv(key, ""))
    return {name: (get(env) or "").strip() for name, env in _ENV_KEYS.items()}


def _now() -> str:
    return datetime.now().strftime(constants.RELAY_TIME_FORMAT)


def send_email(template_params: dict[str, str], config: Optional[dict[str, str]] = None) -> None:
    """
    POST one message to the EmailJS REST API.

    Raises MailRelayError when the relay is unconfigured, unreachable or
    answers with a non-200 status. The response body is not used.
    """
    cfg = config if config is not None else relay_config()
    missing = [k for k in ("service_id", "template_id", "public_key") if not cfg.get(k)]
    if missing:
        raise MailRelayError(f"EmailJS relay not configured (missing: {', '.join(missing)})")

    body = {
        "service_id": cfg["service_id"],
        "template_id": cfg["template_id"],
        "user_id": cfg["public_key"],
        "template_params": template_params,
    }
    if cfg.get("private_key"):
        body["accessToken"] = cfg["private_key"]

    try:
        resp = requests.post(constants.EMAILJS_SEND_URL, json=body, timeout=constants.EMAILJS_TIMEOUT_S)
    except requests.exceptions.RequestException as exc:
        raise MailRelayError(f"EmailJS request failed: {exc}") from exc

    if resp.status_code != 200:
        raise MailRelayError(f"EmailJS error {resp.status_code}: {resp.text[:200]}")
    logger.info("Lead relayed: %s", template_params.get("title", ""))


# ─────────────────────────────────────────────────────────────────────────────
# TEMPLATE PARAMETER BUILDERS
# ─────────────────────────────────────────────────────────────────────────────

def contact_params(name: str, company: str, email: str, message: str) -> dict[str, str]:
    """General contact form. Company and email are repeated in the body."""
    body = (
        f"{message}\n\n{_RULE}\nDATOS DE CONTACTO:\n"
        f"Empresa: {company}\nEmail: {email}"
    )
    return {
        "title": "Nuevo Lead desde Web Smart Rem",
        "name": name,
        "email": email,
        "time": _now(),
        "message": body,
    }


def pioneer_params(
    name: str,
    company: str,
    email: str,
    role: str,
    activity: str,
    other_activity: str,
    position: int,
) -> dict[str, str]:
    """Visión 2026 waitlist request; ``position`` is the place being assigned."""
    final_activity = (
        f"Otros: {other_activity}" if activity == constants.OTHER_ACTIVITY else activity
    )
    body = (
        "SOLICITUD DE ACCESO PIONERO (VISIÓN 2026)\n\n"
        "DATOS DEL PIONERO:\n"
        f"Nombre: {name}\nEmpresa: {company}\nEmail: {email}\n"
        f"Cargo: {role}\nActividad: {final_activity}\n\n"
        "POLÍTICA DE PRIVACIDAD: Aceptada (RGPD)\n"
        f"{_RULE}\nPuesto actual en la lista: {position}"
    )
    return {
        "title": "Nueva Solicitud: Lista Pioneros 2026",
        "name": name,
        "email": email,
        "time": _now(),
        "message": body,
    }


def esg4dc_params(name: str, company: str, email: str, message: str) -> dict[str, str]:
    body = (
        "SOLICITUD DE CONTACTO ESG4DC (DATA CENTERS)\n\n"
        "DATOS:\n"
        f"Nombre: {name}\nEmpresa: {company}\nEmail: {email}\nMensaje: {message}\n\n"
        "ORIGEN: ESG4DC Landing Page"
    )
    return {
        "title": "Nuevo Lead: ESG4DC Specialized",
        "name": name,
        "email": email,
        "time": _now(),
        "message": body,
    }


def report_lead_params(lead: LeadData, form: AssetForm, result: AnalysisResult) -> dict[str, str]:
    """Report download lead, with the asset and a summary of the analysis."""
    technical = "\n".join(f"{k}: {v}" for k, v in form.technical_fields().items())
    risk_lines = "\n".join(f"- {hazard}: {level}" for hazard, level in result.risks.items())
    summary = result.analysis_text
    if len(summary) > 600:
        summary = summary[:600].rsplit(" ", 1)[0] + "…"
    body = (
        "DESCARGA DE INFORME DE RESILIENCIA (IA)\n\n"
        "DATOS DEL LEAD:\n"
        f"Nombre: {lead.name}\nEmail: {lead.email}\nTeléfono: {lead.phone or '-'}\n"
        f"Empresa: {lead.company or '-'}\nCargo: {lead.role or '-'}\n"
        f"Sector: {lead.sector or '-'}\nInterés: {lead.interest or '-'}\n\n"
        "ACTIVO ANALIZADO:\n"
        f"Dirección: {form.full_address()}\nTipo: {form.asset_type}\n"
        f"Enfoque: {form.analysis_type}\n{technical}\n\n"
        f"SEMÁFORO DE RIESGOS:\n{risk_lines or '- Sin datos'}\n\n"
        f"{_RULE}\nRESUMEN:\n{summary}\n\n"
        "POLÍTICA DE PRIVACIDAD: Aceptada (RGPD)"
    )
    return {
        "title": "Nuevo Lead: Descarga Informe IA",
        "name": lead.name,
        "email": lead.email,
        "time": _now(),
        "message": body,
    }
