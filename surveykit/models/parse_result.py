"""Result types returned by survey configuration parsing."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from surveykit.models.survey import SurveyConfig


FailureKind = Literal["syntax", "schema", "unexpected"]


class ValidationIssue(BaseModel):
    path: List[Union[str, int]] = Field(default_factory=list)
    message: str
    code: Optional[str] = None

    @property
    def dotted_path(self) -> str:
        """Path as dot-joined segments, or ``root`` for the document itself."""
        return ".".join(str(p) for p in self.path) if self.path else "root"


class ParseSuccess(BaseModel):
    success: Literal[True] = True
    data: SurveyConfig


class ParseFailure(BaseModel):
    """Failed parse with enough shape for callers to pick a UI affordance.

    - kind == "syntax": `position` (0-based character offset) and 1-based
      `line`/`column` are populated when the decoder reports them.
    - kind == "schema": `details` lists every issue found.
    - kind == "unexpected": only `error` is meaningful.
    """

    success: Literal[False] = False
    kind: FailureKind
    error: str
    details: Optional[List[ValidationIssue]] = None
    position: Optional[int] = None
    line: Optional[int] = None
    column: Optional[int] = None


ParseResult = Union[ParseSuccess, ParseFailure]


__all__ = [
    "FailureKind",
    "ValidationIssue",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
]
