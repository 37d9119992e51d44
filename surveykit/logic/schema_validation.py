"""Schema validation for survey configuration documents.

Runs pydantic validation over an already-decoded value and converts every
reported error into a ``ValidationIssue`` whose path addresses the field in
the stored JSON document. Never raises for malformed input.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple, Union
import logging

from pydantic import ValidationError as PydanticValidationError

from surveykit.models.parse_result import ValidationIssue
from surveykit.models.question_kind import QUESTION_TYPES
from surveykit.models.survey import SurveyConfig


logger = logging.getLogger(__name__)

CONDITION_VALUE_MESSAGE = "Condition value must be a boolean, number, string or list of strings"

PathSegment = Union[str, int]


def _document_path(loc: Iterable[PathSegment]) -> List[PathSegment]:
    """Drop pydantic's union-tag segments so the path matches the document.

    Discriminated unions report ``questions.0.rating.scale``; the stored
    document has no ``rating`` key, so the tag following a list index is
    removed. Members of the untagged condition-value union are cut at
    ``value``.
    """
    out: List[PathSegment] = []
    for seg in loc:
        if isinstance(seg, str) and seg in QUESTION_TYPES and out and isinstance(out[-1], int):
            continue
        out.append(seg)
        if len(out) >= 2 and out[-2:] == ["condition", "value"]:
            break
    return out


def issues_from_pydantic(exc: PydanticValidationError) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    seen: set[Tuple[Tuple[PathSegment, ...], str]] = set()
    for err in exc.errors(include_url=False):
        path = _document_path(err.get("loc") or ())
        message = str(err.get("msg") or "Invalid value")
        if path[-2:] == ["condition", "value"]:
            message = CONDITION_VALUE_MESSAGE
        key = (tuple(path), message)
        if key in seen:
            continue
        seen.add(key)
        issues.append(ValidationIssue(path=path, message=message, code=err.get("type")))
    return issues


def reference_issues(config: SurveyConfig) -> List[ValidationIssue]:
    """Report duplicate question names and conditions with dangling targets."""
    issues: List[ValidationIssue] = []
    first_index: Dict[str, int] = {}
    for idx, question in enumerate(config.questions):
        if question.name in first_index:
            issues.append(
                ValidationIssue(
                    path=["questions", idx, "name"],
                    message=f"Duplicate question name '{question.name}' (first used at questions.{first_index[question.name]})",
                    code="duplicate_name",
                )
            )
        else:
            first_index[question.name] = idx
    for idx, question in enumerate(config.questions):
        cond = question.condition
        if cond is None:
            continue
        if cond.name == question.name:
            issues.append(
                ValidationIssue(
                    path=["questions", idx, "condition", "name"],
                    message="Condition refers to its own question",
                    code="self_reference",
                )
            )
        elif cond.name not in first_index:
            issues.append(
                ValidationIssue(
                    path=["questions", idx, "condition", "name"],
                    message=f"Condition refers to unknown question '{cond.name}'",
                    code="unknown_reference",
                )
            )
    return issues


def validate_config(
    raw: Any, *, strict_references: bool = False
) -> Union[SurveyConfig, List[ValidationIssue]]:
    """Validate a decoded value as a survey configuration.

    Returns the typed ``SurveyConfig`` on success, otherwise the list of
    issues. Referential checks (unique names, resolvable conditions) only
    run when ``strict_references`` is set and the document is structurally
    valid.
    """
    try:
        config = SurveyConfig.model_validate(raw)
    except PydanticValidationError as exc:
        issues = issues_from_pydantic(exc)
        logger.debug("survey_config.schema_invalid", extra={"issue_count": len(issues)})
        return issues
    if strict_references:
        issues = reference_issues(config)
        if issues:
            logger.debug("survey_config.references_invalid", extra={"issue_count": len(issues)})
            return issues
    return config


__all__ = [
    "CONDITION_VALUE_MESSAGE",
    "issues_from_pydantic",
    "reference_issues",
    "validate_config",
]
