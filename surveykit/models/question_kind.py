"""QuestionKind constants for the closed set of survey question types.

Provides a simple constants container instead of an Enum so the tags stay
plain strings on the wire and in pydantic Literal discriminators.
"""

from __future__ import annotations


class QuestionKind:
    TEXT = "text"
    TEXTAREA = "textarea"
    MULTIPLE_CHOICE = "multiple_choice"
    MULTIPLE_SELECT = "multiple_select"
    MULTIPLE_SELECT_WITH_OTHER = "multiple_select_with_other"
    RATING = "rating"
    YES_NO = "yes_no"


QUESTION_TYPES: tuple[str, ...] = (
    QuestionKind.TEXT,
    QuestionKind.TEXTAREA,
    QuestionKind.MULTIPLE_CHOICE,
    QuestionKind.MULTIPLE_SELECT,
    QuestionKind.MULTIPLE_SELECT_WITH_OTHER,
    QuestionKind.RATING,
    QuestionKind.YES_NO,
)


__all__ = [
    "QuestionKind",
    "QUESTION_TYPES",
]
