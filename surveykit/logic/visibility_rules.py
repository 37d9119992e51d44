"""Visibility rule evaluation for conditional survey questions.

A question with a ``condition`` is visible only while the answer to the
referenced question matches the condition value. Matching tolerates the
different shapes an answer can take (``"no"``, ``False``, ``0``) and
multi-select lists. Evaluation is pure and never raises; a missing or
dangling reference simply hides the question.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from surveykit.models.survey import Condition


_TRUE_TOKENS = frozenset({"true", "yes"})
_FALSE_TOKENS = frozenset({"false", "no"})


def normalise_boolean(value: Any) -> Optional[bool]:
    """Map boolean-like values to True/False; None when not boolean-like.

    Accepts real booleans, the strings true/yes/false/no (any case) and the
    numbers 1 and 0.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        return None
    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False
    return None


def _strict_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass; keep True from equalling 1 here
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right


def _contains(items: Iterable[Any], needle: Any) -> bool:
    return any(_strict_equal(item, needle) for item in items)


def values_match(actual: Any, expected: Any) -> bool:
    """Compare an answer against a condition value.

    Order of checks:
    1. a missing answer never matches;
    2. when both sides are boolean-like, compare as booleans;
    3. a list answer matches a list value on any shared element, or a scalar
       value by membership;
    4. otherwise strict equality.
    """
    if actual is None:
        return False

    actual_bool = normalise_boolean(actual)
    expected_bool = normalise_boolean(expected)
    if actual_bool is not None and expected_bool is not None:
        return actual_bool is expected_bool

    if isinstance(actual, (list, tuple)):
        if isinstance(expected, (list, tuple)):
            return any(_contains(actual, value) for value in expected)
        return _contains(actual, expected)

    return _strict_equal(actual, expected)


def _condition_parts(question: Any) -> Optional[Tuple[Any, Any]]:
    """Return (name, value) of a question's condition, None when unconditional.

    Accepts validated question models and plain decoded mappings.
    """
    if isinstance(question, Mapping):
        raw = question.get("condition")
    else:
        raw = getattr(question, "condition", None)
    if raw is None:
        return None
    if isinstance(raw, Condition):
        return raw.name, raw.value
    if isinstance(raw, Mapping):
        return raw.get("name"), raw.get("value")
    return None, None


def evaluate_condition(question: Any, answers: Optional[Mapping[str, Any]]) -> bool:
    """Return True if ``question`` is visible for the given answer map."""
    parts = _condition_parts(question)
    if parts is None:
        return True
    name, expected = parts
    if not isinstance(name, str):
        return False
    return values_match((answers or {}).get(name), expected)


def get_visible_questions(questions: Iterable[Any], answers: Optional[Mapping[str, Any]]) -> List[Any]:
    """Return the visible questions, preserving their original order."""
    return [q for q in questions if evaluate_condition(q, answers)]


def visible_question_names(questions: Iterable[Any], answers: Optional[Mapping[str, Any]]) -> List[str]:
    names: List[str] = []
    for q in get_visible_questions(questions, answers):
        names.append(q.get("name") if isinstance(q, Mapping) else q.name)
    return names


__all__ = [
    "normalise_boolean",
    "values_match",
    "evaluate_condition",
    "get_visible_questions",
    "visible_question_names",
]
