"""Type-aware validation of respondent answers against a survey configuration.

Only currently visible questions are checked: an answer to a hidden
question is neither required nor validated, and is dropped by
``prepare_submission``. Each question kind has its own checker, looked up
by the question's ``type`` tag.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional
import logging

from surveykit.logic.answer_values import (
    choice_count,
    is_empty_answer,
    selected_options,
    OTHER_TEXT_KEY,
)
from surveykit.logic.survey_parser import format_issues
from surveykit.logic.validation import AnswerValidationError
from surveykit.logic.visibility_rules import get_visible_questions
from surveykit.models.parse_result import ValidationIssue
from surveykit.models.question_kind import QuestionKind
from surveykit.models.survey import BaseQuestion, SurveyConfig


logger = logging.getLogger(__name__)

ANSWER_FAILURE_BANNER = "Response validation failed: "
EMPTY_RESPONSE_MESSAGE = "Response must contain answers"
YES_NO_TOKENS = ("yes", "no")

Checker = Callable[[Any, Any], List[str]]


def _plural(n: int) -> str:
    return "s" if n > 1 else ""


def _length_messages(question: BaseQuestion, value: str) -> List[str]:
    rules = question.validation
    if rules is None:
        return []
    out: List[str] = []
    if rules.min_length and len(value) < rules.min_length:
        out.append(f"Minimum length is {rules.min_length}")
    if rules.max_length and len(value) > rules.max_length:
        out.append(f"Maximum length is {rules.max_length}")
    return out


def _choice_count_messages(question: BaseQuestion, count: int) -> List[str]:
    rules = question.validation
    if rules is None:
        return []
    out: List[str] = []
    if rules.min_choices and count < rules.min_choices:
        out.append(f"Please select at least {rules.min_choices} option{_plural(rules.min_choices)}")
    if rules.max_choices and count > rules.max_choices:
        out.append(f"Please select at most {rules.max_choices} option{_plural(rules.max_choices)}")
    return out


def _unknown_options(options: List[str], chosen: List[Any]) -> List[str]:
    return [f"'{item}' is not one of the available options" for item in chosen if item not in options]


def _check_text(question: Any, value: Any) -> List[str]:
    if not isinstance(value, str):
        return ["Answer must be text"]
    return _length_messages(question, value)


def _check_multiple_choice(question: Any, value: Any) -> List[str]:
    if not isinstance(value, str):
        return ["Answer must be a single option"]
    return _unknown_options(question.options, [value])


def _check_multiple_select(question: Any, value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return ["Answer must be a list of options"]
    return _unknown_options(question.options, value) + _choice_count_messages(question, len(value))


def _check_multiple_select_with_other(question: Any, value: Any) -> List[str]:
    if not isinstance(value, Mapping):
        return ["Answer must be an object with 'selected' options and optional 'otherText'"]
    selected = selected_options(value)
    if not all(isinstance(v, str) for v in selected):
        return ["Selected options must be text"]
    text = value.get(OTHER_TEXT_KEY)
    if text is not None and not isinstance(text, str):
        return ["Other text must be text"]
    return _unknown_options(question.options, selected) + _choice_count_messages(question, choice_count(value))


def _check_rating(question: Any, value: Any) -> List[str]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ["Rating must be a whole number"]
    if isinstance(value, float) and not value.is_integer():
        return ["Rating must be a whole number"]
    if not 1 <= value <= question.scale:
        return [f"Rating must be between 1 and {question.scale}"]
    return []


def _check_yes_no(question: Any, value: Any) -> List[str]:
    if isinstance(value, bool):
        return []
    if isinstance(value, str) and value.lower() in YES_NO_TOKENS:
        return []
    return ["Answer must be 'yes' or 'no'"]


ANSWER_CHECKERS: Dict[str, Checker] = {
    QuestionKind.TEXT: _check_text,
    QuestionKind.TEXTAREA: _check_text,
    QuestionKind.MULTIPLE_CHOICE: _check_multiple_choice,
    QuestionKind.MULTIPLE_SELECT: _check_multiple_select,
    QuestionKind.MULTIPLE_SELECT_WITH_OTHER: _check_multiple_select_with_other,
    QuestionKind.RATING: _check_rating,
    QuestionKind.YES_NO: _check_yes_no,
}


def validate_answer(question: BaseQuestion, value: Any) -> List[ValidationIssue]:
    """Validate a single answer; an empty answer only fails when required."""
    if is_empty_answer(value):
        if question.is_required:
            return [ValidationIssue(path=[question.name], message=f"{question.label} is required", code="required")]
        return []
    checker = ANSWER_CHECKERS[question.type]
    return [ValidationIssue(path=[question.name], message=msg, code="invalid_answer") for msg in checker(question, value)]


def validate_answers(config: SurveyConfig, answers: Optional[Mapping[str, Any]]) -> List[ValidationIssue]:
    """Validate every visible question's answer, in question order."""
    answers = answers or {}
    issues: List[ValidationIssue] = []
    for question in get_visible_questions(config.questions, answers):
        issues.extend(validate_answer(question, answers.get(question.name)))
    return issues


def prepare_submission(config: SurveyConfig, answers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Validate and return the answers of visible questions, in question order.

    Raises AnswerValidationError when any visible answer is invalid or when
    no visible question has been answered.
    """
    answers = answers or {}
    issues = validate_answers(config, answers)
    if issues:
        logger.info("answers.validation_failed", extra={"issue_count": len(issues)})
        raise AnswerValidationError(ANSWER_FAILURE_BANNER + format_issues(issues), issues)
    submission: Dict[str, Any] = {}
    for question in get_visible_questions(config.questions, answers):
        value = answers.get(question.name)
        if not is_empty_answer(value):
            submission[question.name] = value
    if not submission:
        raise AnswerValidationError(EMPTY_RESPONSE_MESSAGE)
    dropped = [name for name in answers if name not in submission]
    if dropped:
        logger.debug("answers.dropped_hidden_or_empty", extra={"names": dropped})
    return submission


__all__ = [
    "ANSWER_FAILURE_BANNER",
    "EMPTY_RESPONSE_MESSAGE",
    "ANSWER_CHECKERS",
    "validate_answer",
    "validate_answers",
    "prepare_submission",
]
