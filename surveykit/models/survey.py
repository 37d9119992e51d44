"""Pydantic models for survey configuration documents.

A survey configuration is a title plus an ordered list of questions. Each
question is one variant of a discriminated union keyed by ``type``; the
variant decides which extra fields (``options``, ``scale``) are required.

Wire names are camelCase (``minLength``); attributes are snake_case. Use
``dump_survey_config`` in ``surveykit.logic.survey_parser`` to get the stored form.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from surveykit.models.question_kind import QuestionKind


DEFAULT_RATING_SCALE = 5
MIN_RATING_SCALE = 1
MAX_RATING_SCALE = 10

# Unknown keys are dropped; stored documents keep only recognised fields.
_WIRE_CONFIG = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

# NaN and infinities have no JSON representation
FiniteStrictFloat = Annotated[StrictFloat, AllowInfNan(False)]

ConditionValue = Union[StrictBool, StrictInt, FiniteStrictFloat, StrictStr, List[StrictStr]]


class QuestionValidation(BaseModel):
    model_config = _WIRE_CONFIG

    required: Optional[StrictBool] = None
    min_length: Optional[StrictInt] = Field(default=None, alias="minLength", ge=0)
    max_length: Optional[StrictInt] = Field(default=None, alias="maxLength", ge=0)
    min_choices: Optional[StrictInt] = Field(default=None, alias="minChoices", ge=0)
    max_choices: Optional[StrictInt] = Field(default=None, alias="maxChoices", ge=0)


class Condition(BaseModel):
    """Single equality condition on another question's answer."""

    model_config = _WIRE_CONFIG

    name: StrictStr
    value: ConditionValue


class BaseQuestion(BaseModel):
    model_config = _WIRE_CONFIG

    name: StrictStr
    label: StrictStr
    validation: Optional[QuestionValidation] = None
    condition: Optional[Condition] = None

    @property
    def is_required(self) -> bool:
        return bool(self.validation and self.validation.required)


class TextQuestion(BaseQuestion):
    type: Literal["text"]


class TextareaQuestion(BaseQuestion):
    type: Literal["textarea"]


class MultipleChoiceQuestion(BaseQuestion):
    type: Literal["multiple_choice"]
    options: List[StrictStr] = Field(min_length=1)


class MultipleSelectQuestion(BaseQuestion):
    type: Literal["multiple_select"]
    options: List[StrictStr] = Field(min_length=1)


class MultipleSelectWithOtherQuestion(BaseQuestion):
    type: Literal["multiple_select_with_other"]
    options: List[StrictStr] = Field(min_length=1)


class RatingQuestion(BaseQuestion):
    type: Literal["rating"]
    scale: StrictInt = Field(default=DEFAULT_RATING_SCALE, ge=MIN_RATING_SCALE, le=MAX_RATING_SCALE)


class YesNoQuestion(BaseQuestion):
    type: Literal["yes_no"]


Question = Annotated[
    Union[
        TextQuestion,
        TextareaQuestion,
        MultipleChoiceQuestion,
        MultipleSelectQuestion,
        MultipleSelectWithOtherQuestion,
        RatingQuestion,
        YesNoQuestion,
    ],
    Field(discriminator="type"),
]

# Tag -> variant model; every QuestionKind must appear here
QUESTION_MODELS: dict[str, type[BaseQuestion]] = {
    QuestionKind.TEXT: TextQuestion,
    QuestionKind.TEXTAREA: TextareaQuestion,
    QuestionKind.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionKind.MULTIPLE_SELECT: MultipleSelectQuestion,
    QuestionKind.MULTIPLE_SELECT_WITH_OTHER: MultipleSelectWithOtherQuestion,
    QuestionKind.RATING: RatingQuestion,
    QuestionKind.YES_NO: YesNoQuestion,
}


class SurveyConfig(BaseModel):
    model_config = _WIRE_CONFIG

    title: StrictStr = Field(min_length=1)
    questions: List[Question]

    def get_question(self, name: str) -> Optional[BaseQuestion]:
        for question in self.questions:
            if question.name == name:
                return question
        return None


__all__ = [
    "DEFAULT_RATING_SCALE",
    "MIN_RATING_SCALE",
    "MAX_RATING_SCALE",
    "ConditionValue",
    "QuestionValidation",
    "Condition",
    "BaseQuestion",
    "TextQuestion",
    "TextareaQuestion",
    "MultipleChoiceQuestion",
    "MultipleSelectQuestion",
    "MultipleSelectWithOtherQuestion",
    "RatingQuestion",
    "YesNoQuestion",
    "Question",
    "QUESTION_MODELS",
    "SurveyConfig",
]
