"""Domain errors raised by the survey engine.

The Result-returning entry points never raise for invalid input; these
exceptions back the explicit raising wrappers and are mapped to
problem+json responses by the HTTP layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from surveykit.models.parse_result import ParseFailure, ValidationIssue


class SurveyConfigError(ValueError):
    """Raised by ``parse_survey_config_or_throw`` with the failure message."""

    def __init__(self, failure: "ParseFailure") -> None:
        super().__init__(failure.error)
        self.failure = failure

    @property
    def kind(self) -> str:
        return self.failure.kind

    @property
    def issues(self) -> "List[ValidationIssue]":
        return list(self.failure.details or [])


class AnswerValidationError(ValueError):
    """Raised when a submitted answer map does not satisfy its survey."""

    def __init__(self, message: str, issues: "Optional[List[ValidationIssue]]" = None) -> None:
        super().__init__(message)
        self.issues = list(issues or [])


__all__ = ["SurveyConfigError", "AnswerValidationError"]
