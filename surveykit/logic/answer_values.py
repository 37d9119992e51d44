"""Shape helpers for respondent answer values.

Answers arrive as decoded JSON: strings, numbers, booleans, lists of
strings, or ``{"selected": [...], "otherText": "..."}`` for multi-select
questions with a free-text "other" choice.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union


AnswerValue = Union[str, int, float, bool, List[str], Mapping[str, Any]]

OTHER_SELECTED_KEY = "selected"
OTHER_TEXT_KEY = "otherText"


def is_empty_answer(value: Any) -> bool:
    """Return True when a value counts as "not answered".

    - None, empty strings and empty lists are empty
    - an other-selection is empty when nothing is selected and no text given
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    if isinstance(value, Mapping):
        return not selected_options(value) and not other_text(value)
    return False


def selected_options(value: Mapping[str, Any]) -> List[Any]:
    selected = value.get(OTHER_SELECTED_KEY)
    return list(selected) if isinstance(selected, (list, tuple)) else []


def other_text(value: Mapping[str, Any]) -> Optional[str]:
    text = value.get(OTHER_TEXT_KEY)
    if isinstance(text, str) and text:
        return text
    return None


def choice_count(value: Any) -> int:
    """Number of choices an answer represents; a non-empty otherText counts once."""
    if isinstance(value, (list, tuple)):
        return len(value)
    if isinstance(value, Mapping):
        return len(selected_options(value)) + (1 if other_text(value) else 0)
    return 0


__all__ = [
    "AnswerValue",
    "OTHER_SELECTED_KEY",
    "OTHER_TEXT_KEY",
    "is_empty_answer",
    "selected_options",
    "other_text",
    "choice_count",
]
