# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Climate Risk Traffic Light
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Extracts the machine-readable risk line the model appends to its brief:
#
#   SEMAFORO_RIESGOS:Olas de Calor=Alto,Inundaciones=Bajo,Sequías=Medio
#
# and maps each level to one of four visual states. Nothing in this module
# raises on malformed model output; it degrades to partial or empty data.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import re
from typing import Any

from config.constants import (
    DEFAULT_STATE,
    LEVEL_STATES,
    RISK_LEVELS,
    RISK_SENTINEL,
    STATE_HEX,
    STATE_RGB,
)

# First sentinel occurrence; the capture stops at the end of that line.
RISK_LINE_RE = re.compile(re.escape(RISK_SENTINEL) + r"([^\r\n]*)")

_CANONICAL_LEVELS = {level.lower(): level for level in RISK_LEVELS}


def parse_risk_pairs(raw: str) -> dict[str, str]:
    """Split ``"A=Alto, B = Bajo"`` into ``{"A": "Alto", "B": "Bajo"}``.

    Pairs without ``=`` or with an empty side after trimming are dropped.
    """
    risks: dict[str, str] = {}
    for pair in raw.split(","):
        key, sep, value = pair.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            continue
        risks[key] = value
    return risks


def parse_analysis_response(text: Any) -> tuple[str, dict[str, str]]:
    """Split a model response into ``(narrative, risks)``.

    The narrative is the response with the sentinel segment removed and
    surrounding whitespace trimmed. Without a sentinel the mapping is empty
    and the narrative is the whole (trimmed) text.
    """
    if not isinstance(text, str):
        text = ""

    match = RISK_LINE_RE.search(text)
    if match is None:
        return text.strip(), {}

    risks = parse_risk_pairs(match.group(1))
    narrative = (text[: match.start()] + text[match.end():]).strip()
    return narrative, risks


# ─────────────────────────────────────────────────────────────────────────────
# LEVEL → VISUAL STATE
# ─────────────────────────────────────────────────────────────────────────────

def normalise_level(level: Any) -> str | None:
    """Return the canonical level label ("Bajo", "Medio", "Alto") or None."""
    if not isinstance(level, str):
        return None
    return _CANONICAL_LEVELS.get(level.strip().lower())


def risk_state(level: Any) -> str:
    """Map any value to ``green``, ``yellow``, ``red`` or ``gray``."""
    if not isinstance(level, str):
        return DEFAULT_STATE
    return LEVEL_STATES.get(level.strip().lower(), DEFAULT_STATE)


def risk_colour_hex(level: Any) -> str:
    return STATE_HEX[risk_state(level)]


def risk_colour_rgb(level: Any) -> tuple[int, int, int]:
    return STATE_RGB[risk_state(level)]
