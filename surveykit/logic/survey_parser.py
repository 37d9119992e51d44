"""Parse and validate survey configurations from JSON text or decoded values.

Entry points:
- ``parse_survey_config``: JSON text or decoded value -> ParseSuccess | ParseFailure
- ``validate_survey_config``: decoded value only (no JSON decoding)
- ``parse_survey_config_or_throw``: same contract, raises ``SurveyConfigError``

Failures are classified as syntax, schema or unexpected so callers can offer
a "go to line" affordance only for syntax errors and field highlighting only
for schema errors.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from surveykit.logic.schema_validation import validate_config
from surveykit.logic.validation import SurveyConfigError
from surveykit.models.parse_result import ParseFailure, ParseResult, ParseSuccess, ValidationIssue
from surveykit.models.survey import SurveyConfig


logger = logging.getLogger(__name__)

SCHEMA_FAILURE_BANNER = "Survey configuration validation failed: "
SYNTAX_FAILURE_PREFIX = "Invalid JSON: "
UNEXPECTED_FAILURE_PREFIX = "Unexpected error: "


def format_issues(issues: List[ValidationIssue]) -> str:
    return "; ".join(f"{issue.dotted_path}: {issue.message}" for issue in issues)


def syntax_location(text: str, position: int) -> Tuple[int, int]:
    """Convert a 0-based character offset into a 1-based (line, column)."""
    position = max(0, min(position, len(text)))
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def _schema_failure(issues: List[ValidationIssue]) -> ParseFailure:
    return ParseFailure(
        kind="schema",
        error=SCHEMA_FAILURE_BANNER + format_issues(issues),
        details=issues,
    )


def _validate_decoded(data: Any, strict_references: bool) -> ParseResult:
    outcome = validate_config(data, strict_references=strict_references)
    if isinstance(outcome, SurveyConfig):
        return ParseSuccess(data=outcome)
    failure = _schema_failure(outcome)
    logger.info("survey_config.parse_failed", extra={"kind": "schema", "issue_count": len(outcome)})
    return failure


class _NonStandardConstant(ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


def _reject_constant(token: str) -> Any:
    raise _NonStandardConstant(token)


def _constant_position(text: str, token: str) -> int:
    """Offset of the first ``token`` outside a string literal."""
    in_string = escaped = False
    for idx, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith(token, idx):
            return idx
    return 0


def _decode_json(text: str) -> Any:
    """Decode strict JSON; NaN and Infinity literals are syntax errors."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except _NonStandardConstant as exc:
        raise json.JSONDecodeError(
            f"Expecting value, found non-standard literal {exc.token}",
            text,
            _constant_position(text, exc.token),
        ) from None


def parse_survey_config(source: Any, *, strict_references: bool = False) -> ParseResult:
    """Parse JSON text (``str``/``bytes``) or validate an already-decoded value."""
    try:
        text = bytes(source).decode("utf-8") if isinstance(source, (bytes, bytearray)) else source
        if isinstance(text, str):
            try:
                data = _decode_json(text)
            except json.JSONDecodeError as exc:
                logger.info(
                    "survey_config.parse_failed",
                    extra={"kind": "syntax", "position": exc.pos, "line": exc.lineno, "column": exc.colno},
                )
                return ParseFailure(
                    kind="syntax",
                    error=SYNTAX_FAILURE_PREFIX + str(exc),
                    position=exc.pos,
                    line=exc.lineno,
                    column=exc.colno,
                )
        else:
            data = text
        return _validate_decoded(data, strict_references)
    except UnicodeDecodeError as exc:
        logger.info("survey_config.parse_failed", extra={"kind": "syntax", "position": exc.start})
        return ParseFailure(kind="syntax", error=SYNTAX_FAILURE_PREFIX + str(exc), position=exc.start)
    except Exception as exc:
        logger.error("survey_config.parse_unexpected_error", exc_info=True)
        return ParseFailure(kind="unexpected", error=UNEXPECTED_FAILURE_PREFIX + str(exc))


def validate_survey_config(config: Any, *, strict_references: bool = False) -> ParseResult:
    """Validate a decoded value without attempting JSON decoding."""
    try:
        return _validate_decoded(config, strict_references)
    except Exception as exc:
        logger.error("survey_config.validate_unexpected_error", exc_info=True)
        return ParseFailure(kind="unexpected", error=UNEXPECTED_FAILURE_PREFIX + str(exc))


def parse_survey_config_or_throw(source: Any, *, strict_references: bool = False) -> SurveyConfig:
    result = parse_survey_config(source, strict_references=strict_references)
    if isinstance(result, ParseFailure):
        raise SurveyConfigError(result)
    return result.data


def dump_survey_config(config: SurveyConfig) -> Dict[str, Any]:
    """Return the stored (wire) form: camelCase keys, absent optionals omitted."""
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_survey_config(config: SurveyConfig, *, indent: Optional[int] = None) -> str:
    return json.dumps(dump_survey_config(config), ensure_ascii=False, indent=indent)


__all__ = [
    "SCHEMA_FAILURE_BANNER",
    "SYNTAX_FAILURE_PREFIX",
    "UNEXPECTED_FAILURE_PREFIX",
    "format_issues",
    "syntax_location",
    "parse_survey_config",
    "validate_survey_config",
    "parse_survey_config_or_throw",
    "dump_survey_config",
    "serialize_survey_config",
]
