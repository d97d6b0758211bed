"""Utility helpers used across the Smart Rem application.

Keeping non-Streamlit logic in a separate module makes it easier to test
without spinning up a full Streamlit runtime.
"""

from __future__ import annotations

from typing import Any

import requests

from config.constants import DEFAULT_GEMINI_MODEL, GEMINI_BASE_URL
from core.wizard import EMAIL_RE


# ─────────────────────────────────────────────────────────────────────────────
# API KEY VALIDATION
# ─────────────────────────────────────────────────────────────────────────────

def validate_gemini_key(key: str, live: bool = True) -> tuple[bool, str, bool]:
    """Check formatting and optionally call the model metadata endpoint.

    Returns a tuple ``(is_valid, html_message, warn_flag)`` where:

    * ``is_valid`` indicates whether the key should be considered usable.
    * ``html_message`` is an HTML snippet suitable for display in the UI.
    * ``warn_flag`` is True if the key was accepted but could not be
      verified (e.g. network failure), so callers may re-check later.

    Security guards applied before any network call:
    • Leading/trailing whitespace is stripped.
    • Keys containing newline or carriage-return characters are rejected
      (log-injection prevention).
    • Keys containing null bytes are rejected.
    """
    # ── Security guards ───────────────────────────────────────────────────────
    key = (key or "").strip()
    if not key:
        return False, "<div class='val-err'>❌ Introduzca una API key</div>", False
    if "\n" in key or "\r" in key:
        return False, "<div class='val-err'>❌ La clave contiene saltos de línea</div>", False
    if "\x00" in key:
        return False, "<div class='val-err'>❌ La clave contiene bytes nulos</div>", False

    # ── Format check ──────────────────────────────────────────────────────────
    prefix = "AI" + "za"
    if not key.startswith(prefix):
        return False, "<div class='val-err'>❌ Formato de clave no válido</div>", False

    if not live:
        return True, "<div class='val-ok'>✓ Formato válido (se comprobará al usarla)</div>", False

    # ── Live validation ───────────────────────────────────────────────────────
    # GET on the model resource costs no tokens
    try:
        resp = requests.get(
            f"{GEMINI_BASE_URL}/{DEFAULT_GEMINI_MODEL}",
            headers={"x-goog-api-key": key},
            timeout=10,
        )
    except requests.exceptions.Timeout:
        return True, "<div class='val-warn'>⚠ Validación agotada: clave guardada, se comprobará al usarla</div>", True
    except requests.exceptions.RequestException:
        return True, "<div class='val-warn'>⚠ Sin conexión: clave guardada, se comprobará al usarla</div>", True

    if resp.status_code == 200:
        return True, "<div class='val-ok'>✓ Gemini listo para el análisis</div>", False
    if resp.status_code in (400, 401):
        return False, "<div class='val-err'>❌ API key no válida</div>", False
    if resp.status_code == 403:
        return False, "<div class='val-err'>❌ Clave bloqueada (revise los permisos en Google Cloud)</div>", False
    return True, "<div class='val-ok'>✓ Formato válido (se comprobará al usarla)</div>", False


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value.strip()))
