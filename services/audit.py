# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — In-Session Audit Log
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Logs analysis runs, report exports and lead relays for the current visitor.
# Storage: st.session_state ONLY, never persisted to disk or any database.
# GDPR-safe: entries contain no PII; emails and postal codes are redacted and
# the log is cleared on browser/session close.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import re
from datetime import datetime, timezone

import streamlit as st

_LOG_KEY  = "_smartrem_audit_log"
_MAX_SIZE = 50   # cap entries to prevent unbounded memory growth

ANALYSIS_REQUESTED = "ANALYSIS_REQUESTED"
ANALYSIS_COMPLETED = "ANALYSIS_COMPLETED"
ANALYSIS_FAILED    = "ANALYSIS_FAILED"
LEAD_RELAYED       = "LEAD_RELAYED"
REPORT_EXPORTED    = "REPORT_EXPORTED"
CONTACT_SENT       = "CONTACT_SENT"

# Spanish postal codes (5 digits; first two are the province)
ES_POSTAL_RE = re.compile(r"\b(\d{2})\d{3}\b")
EMAIL_RE     = re.compile(r"[^@\s]+@([^@\s]+\.[^@\s]+)")
# Regex to detect accidental API key leakage
API_KEY_PATTERN = re.compile(r'[A-Za-z0-9_\-]{30,}')
_MASK = "[redacted]"


def _ensure_log() -> None:
    if _LOG_KEY not in st.session_state:
        st.session_state[_LOG_KEY] = []


def _redact(text: str) -> str:
    """Keep the province prefix of postal codes and the domain of emails.

    Anything still shaped like key material after that is masked.
    """
    text = EMAIL_RE.sub(r"***@\1", str(text))
    text = ES_POSTAL_RE.sub(r"\1***", text)
    return API_KEY_PATTERN.sub(_MASK, text)


def _assert_no_key(value: str) -> None:
    """Raise ValueError if a string appears to contain an API key."""
    if API_KEY_PATTERN.search(value):
        raise ValueError("Audit log details must not contain API key material.")


def log_event(action: str, details: str) -> None:
    """
    Append an audit event to the in-session log.

    Parameters
    ----------
    action  : Short action label, e.g. ANALYSIS_COMPLETED, REPORT_EXPORTED.
              Must not contain key material (raises ValueError).
    details : Human-readable description. Emails and postal codes are
              redacted and key-shaped runs are masked; never raises.
    """
    _ensure_log()
    _assert_no_key(action)

    entry: dict = {
        "ts":      datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        "action":  action,
        "details": _redact(details),
    }
    st.session_state[_LOG_KEY].append(entry)
    if len(st.session_state[_LOG_KEY]) > _MAX_SIZE:
        st.session_state[_LOG_KEY] = st.session_state[_LOG_KEY][-_MAX_SIZE:]


def get_log(n: int = 10) -> list[dict]:
    """Return the last *n* audit log entries, most recent first."""
    _ensure_log()
    return list(reversed(st.session_state[_LOG_KEY][-n:]))
