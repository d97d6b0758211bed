# ═══════════════════════════════════════════════════════════════════════════════
# Smart Rem Solutions — Resilience Analysis Wizard
# © 2026 Smart Rem Solutions. All rights reserved.
#
# Data model and linear state machine behind the "Análisis" page:
#
#   COLLECT_ASSET ──advance──▶ CONFIGURE_ANALYSIS ──complete──▶ SHOW_RESULT
#         ▲                        │                                │
#         └─────────back───────────┘                                │
#         └──────────────────────────reset──────────────────────────┘
#
# Held in st.session_state for one browser session; never persisted.
# This module has ZERO Streamlit imports.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from config.constants import (
    ANALYSIS_OPTIONS,
    ASSET_TYPES,
    COUNTRY_SUFFIX,
    DATA_CENTER,
    DEFAULT_FORM,
    LEAD_INTERESTS,
    LEAD_ROLES,
)
from core.errors import InvalidTransitionError

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _is_number(value: str) -> bool:
    try:
        float(str(value).replace(",", "."))
    except (TypeError, ValueError):
        return False
    return True


# ─────────────────────────────────────────────────────────────────────────────
# DATA MODEL
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AssetForm:
    """Asset identification and analysis configuration, exactly as typed."""

    address: str = DEFAULT_FORM["address"]
    postal_code: str = DEFAULT_FORM["postal_code"]
    asset_type: str = DEFAULT_FORM["asset_type"]
    analysis_type: str = DEFAULT_FORM["analysis_type"]
    gla: str = DEFAULT_FORM["gla"]
    build_year: str = DEFAULT_FORM["build_year"]
    pue: str = DEFAULT_FORM["pue"]

    @property
    def is_data_center(self) -> bool:
        return self.asset_type == DATA_CENTER

    def full_address(self) -> str:
        parts = [p.strip() for p in (self.address, self.postal_code) if p and p.strip()]
        return ", ".join(parts + [COUNTRY_SUFFIX])

    def technical_fields(self) -> dict[str, str]:
        """Type-dependent inputs: PUE for data centres, GLA and build year otherwise."""
        if self.is_data_center:
            return {"pue": self.pue}
        return {"gla": self.gla, "build_year": self.build_year}

    def validate(self) -> list[str]:
        problems: list[str] = []
        if not self.address.strip():
            problems.append("Indique la dirección del activo.")
        if self.asset_type not in ASSET_TYPES:
            problems.append(f"Tipo de activo no reconocido: {self.asset_type!r}.")
        if self.analysis_type not in ANALYSIS_OPTIONS:
            problems.append(f"Enfoque de estudio no reconocido: {self.analysis_type!r}.")
        for name, value in self.technical_fields().items():
            if str(value).strip() and not _is_number(value):
                problems.append(f"El campo {name} debe ser numérico.")
        return problems


@dataclass(frozen=True)
class AnalysisResult:
    """One successful AI response: narrative, parsed traffic light, citations."""

    analysis_text: str
    risks: dict[str, str] = field(default_factory=dict)
    sources: tuple[dict[str, Any], ...] = ()

    def map_sources(self) -> list[dict[str, str]]:
        """Citations carrying a Google Maps reference, as ``{"uri", "title"}``."""
        found = []
        for source in self.sources:
            maps = source.get("maps") if isinstance(source, dict) else None
            if isinstance(maps, dict) and maps.get("uri"):
                found.append({
                    "uri": str(maps["uri"]),
                    "title": str(maps.get("title") or maps["uri"]),
                })
        return found


@dataclass
class LeadData:
    """Contact captured before releasing the PDF report."""

    name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    role: str = ""
    sector: str = ""
    interest: str = ""

    def validate(self) -> list[str]:
        problems: list[str] = []
        if not self.name.strip():
            problems.append("El nombre es obligatorio.")
        if not EMAIL_RE.match(self.email.strip()):
            problems.append("Introduzca un email válido.")
        if self.role and self.role not in LEAD_ROLES:
            problems.append(f"Cargo no reconocido: {self.role!r}.")
        if self.interest and self.interest not in LEAD_INTERESTS:
            problems.append(f"Interés no reconocido: {self.interest!r}.")
        return problems


# ─────────────────────────────────────────────────────────────────────────────
# STATE MACHINE
# ─────────────────────────────────────────────────────────────────────────────

class WizardStep(IntEnum):
    COLLECT_ASSET = 1
    CONFIGURE_ANALYSIS = 2
    SHOW_RESULT = 3


@dataclass
class AnalysisWizard:
    """Linear three-step wizard. Illegal transitions raise InvalidTransitionError."""

    step: WizardStep = WizardStep.COLLECT_ASSET
    form: AssetForm = field(default_factory=AssetForm)
    result: Optional[AnalysisResult] = None
    loading: bool = False

    def _require(self, expected: WizardStep, action: str) -> None:
        if self.step != expected:
            raise InvalidTransitionError(
                f"Cannot {action} from step {int(self.step)} ({self.step.name})"
            )

    def advance(self) -> None:
        self._require(WizardStep.COLLECT_ASSET, "advance")
        self.step = WizardStep.CONFIGURE_ANALYSIS

    def back(self) -> None:
        self._require(WizardStep.CONFIGURE_ANALYSIS, "go back")
        if self.loading:
            raise InvalidTransitionError("Cannot go back while an analysis is running")
        self.step = WizardStep.COLLECT_ASSET

    def begin_request(self) -> None:
        """Mark the single in-flight AI request. A second one is refused."""
        self._require(WizardStep.CONFIGURE_ANALYSIS, "submit")
        if self.loading:
            raise InvalidTransitionError("An analysis request is already in flight")
        self.loading = True
        self.result = None

    def complete(self, result: AnalysisResult) -> None:
        self._require(WizardStep.CONFIGURE_ANALYSIS, "complete")
        if not self.loading:
            raise InvalidTransitionError("No analysis request is in flight")
        self.result = result
        self.loading = False
        self.step = WizardStep.SHOW_RESULT

    def fail(self) -> None:
        """The request ended without a usable result; stay on step 2."""
        self.loading = False

    def reset(self) -> None:
        """'Realizar otro análisis' — drop the result, keep what was typed."""
        self._require(WizardStep.SHOW_RESULT, "reset")
        self.result = None
        self.loading = False
        self.step = WizardStep.COLLECT_ASSET
