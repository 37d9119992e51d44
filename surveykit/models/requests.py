"""Pydantic models for survey engine request and response bodies.

Declared apart from the route module so the payload structure can be reused
without importing the route implementation. ``config`` is accepted as a
plain object and validated by the survey parser, so schema failures surface
as survey-config problems rather than generic request validation errors.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from surveykit.models.visibility import VisibilityDelta


class VisibleQuestionsRequest(BaseModel):
    config: Dict[str, Any]
    answers: Dict[str, Any] = Field(default_factory=dict)


class VisibilityDeltaRequest(BaseModel):
    config: Dict[str, Any]
    before: Dict[str, Any] = Field(default_factory=dict)
    after: Dict[str, Any] = Field(default_factory=dict)


class AnswersRequest(BaseModel):
    config: Dict[str, Any]
    answers: Dict[str, Any] = Field(default_factory=dict)


class ValidatedConfig(BaseModel):
    config: Dict[str, Any]
    questions: int


class VisibleQuestions(BaseModel):
    questions: List[Dict[str, Any]]
    names: List[str]


class AcceptedAnswers(BaseModel):
    answers: Dict[str, Any]


__all__ = [
    "VisibleQuestionsRequest",
    "VisibilityDeltaRequest",
    "AnswersRequest",
    "ValidatedConfig",
    "VisibleQuestions",
    "AcceptedAnswers",
    "VisibilityDelta",
]
