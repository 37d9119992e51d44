"""Centralised construction of problem+json payloads for survey errors.

Provides helpers that return dicts with stable ``code`` tokens so route
modules and exception handlers never embed these string literals.
"""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from surveykit.models.parse_result import ParseFailure, ValidationIssue


logger = logging.getLogger(__name__)

SYNTAX_ERROR_CODE = "SURVEY_CONFIG_SYNTAX_ERROR"
SCHEMA_INVALID_CODE = "SURVEY_CONFIG_SCHEMA_INVALID"
UNEXPECTED_ERROR_CODE = "SURVEY_CONFIG_UNEXPECTED_ERROR"
TOO_LARGE_CODE = "SURVEY_CONFIG_TOO_LARGE"
ANSWERS_INVALID_CODE = "ANSWERS_INVALID"


def _issue_dicts(issues: List[ValidationIssue]) -> List[Dict[str, Any]]:
    return [{"path": list(i.path), "message": i.message} for i in issues]


def _log(problem: Dict[str, Any]) -> Dict[str, Any]:
    logger.info("error_handler.handle", extra={"code": problem.get("code"), "status": problem.get("status")})
    return problem


def problem_survey_config_failure(failure: ParseFailure) -> Dict[str, Any]:
    """Return a 422 problem for a syntax/schema failure, 500 for unexpected ones."""
    if failure.kind == "syntax":
        problem: Dict[str, Any] = {
            "title": "Invalid JSON",
            "status": 422,
            "detail": failure.error,
            "code": SYNTAX_ERROR_CODE,
            "position": failure.position,
            "line": failure.line,
            "column": failure.column,
        }
    elif failure.kind == "schema":
        problem = {
            "title": "Invalid Survey Configuration",
            "status": 422,
            "detail": failure.error,
            "code": SCHEMA_INVALID_CODE,
            "errors": _issue_dicts(failure.details or []),
        }
    else:
        problem = {
            "title": "Internal Server Error",
            "status": 500,
            "detail": failure.error,
            "code": UNEXPECTED_ERROR_CODE,
        }
    return _log(problem)


def problem_survey_config_too_large(size_bytes: int, limit_bytes: int) -> Dict[str, Any]:
    """Return a 413 problem when a configuration body exceeds the size limit."""
    return _log(
        {
            "title": "Payload Too Large",
            "status": 413,
            "detail": f"Survey configuration is {size_bytes} bytes; the limit is {limit_bytes}",
            "code": TOO_LARGE_CODE,
        }
    )


def problem_answers_invalid(message: str, issues: List[ValidationIssue]) -> Dict[str, Any]:
    """Return a 422 problem listing every invalid answer."""
    return _log(
        {
            "title": "Invalid Answers",
            "status": 422,
            "detail": message,
            "code": ANSWERS_INVALID_CODE,
            "errors": _issue_dicts(issues),
        }
    )


__all__ = [
    "SYNTAX_ERROR_CODE",
    "SCHEMA_INVALID_CODE",
    "UNEXPECTED_ERROR_CODE",
    "TOO_LARGE_CODE",
    "ANSWERS_INVALID_CODE",
    "problem_survey_config_failure",
    "problem_survey_config_too_large",
    "problem_answers_invalid",
]
