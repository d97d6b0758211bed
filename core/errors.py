"""
Exception hierarchy shared by the analysis, export and relay layers.

The UI maps each class to one recovery path:

* ``PermissionDeniedError`` → ask for a new Gemini key.
* ``AnalysisError``         → blocking error, user retries manually.
* ``ReportGenerationError`` → blocking error on download.
* ``MailRelayError``        → inline error on contact forms; logged only on
  the report lead gate.
* ``ConsentRequiredError`` / ``LeadValidationError`` → form warnings.
"""

from __future__ import annotations


class AnalysisError(RuntimeError):
    """The AI completion call failed (network, HTTP status or response shape)."""


class PermissionDeniedError(AnalysisError):
    """The Gemini credential is missing, invalid or lacks model access."""


class ReportGenerationError(RuntimeError):
    """The PDF document could not be built."""


class MailRelayError(RuntimeError):
    """The EmailJS relay is unconfigured or rejected the message."""


class InvalidTransitionError(RuntimeError):
    """A wizard transition was requested from a step that does not allow it."""


class ConsentRequiredError(ValueError):
    """A lead form was submitted without the privacy consent box ticked."""


class LeadValidationError(ValueError):
    """A lead form failed validation. ``problems`` lists each issue."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems
