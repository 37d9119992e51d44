"""Survey configuration endpoints.

Implements:
- POST /survey-configs/validate
  - Body is the raw JSON text of a configuration; returns the stored form
- POST /survey-configs/visible-questions
  - Returns the questions visible for an answer map, in survey order
- POST /survey-configs/visibility-delta
  - Compares visibility before and after an answer change
- POST /survey-configs/answers/validate
  - Validates a submission and returns the answers that would be stored
"""

from __future__ import annotations

from typing import Any, Dict
import logging

from fastapi import APIRouter, HTTPException, Request

from surveykit.config import AppConfig
from surveykit.logic.answer_validation import prepare_submission
from surveykit.logic.problem_factory import problem_survey_config_too_large
from surveykit.logic.survey_parser import (
    dump_survey_config,
    parse_survey_config,
    parse_survey_config_or_throw,
)
from surveykit.logic.validation import SurveyConfigError
from surveykit.logic.visibility_delta import compute_visibility_delta
from surveykit.logic.visibility_rules import get_visible_questions
from surveykit.models.parse_result import ParseFailure
from surveykit.models.requests import (
    AcceptedAnswers,
    AnswersRequest,
    ValidatedConfig,
    VisibilityDeltaRequest,
    VisibleQuestions,
    VisibleQuestionsRequest,
)
from surveykit.models.survey import SurveyConfig
from surveykit.models.visibility import VisibilityDelta


router = APIRouter()
logger = logging.getLogger(__name__)


def _app_config(request: Request) -> AppConfig:
    cfg = getattr(request.app.state, "config", None)
    return cfg if isinstance(cfg, AppConfig) else AppConfig()


def _load_config(request: Request, raw: Dict[str, Any]) -> SurveyConfig:
    strict = _app_config(request).survey.strict_references
    return parse_survey_config_or_throw(raw, strict_references=strict)


@router.post(
    "/survey-configs/validate",
    summary="Validate a survey configuration document",
    operation_id="validateSurveyConfig",
    response_model=ValidatedConfig,
)
async def validate_survey_config_document(request: Request) -> ValidatedConfig:
    cfg = _app_config(request)
    body = await request.body()
    if len(body) > cfg.survey.max_config_bytes:
        raise HTTPException(
            status_code=413,
            detail=problem_survey_config_too_large(len(body), cfg.survey.max_config_bytes),
        )
    result = parse_survey_config(body, strict_references=cfg.survey.strict_references)
    if isinstance(result, ParseFailure):
        raise SurveyConfigError(result)
    logger.info(
        "survey_config.validated",
        extra={"title": result.data.title, "question_count": len(result.data.questions)},
    )
    return ValidatedConfig(config=dump_survey_config(result.data), questions=len(result.data.questions))


@router.post(
    "/survey-configs/visible-questions",
    summary="List the questions visible for an answer map",
    operation_id="getVisibleQuestions",
    response_model=VisibleQuestions,
)
def visible_questions(request: Request, payload: VisibleQuestionsRequest) -> VisibleQuestions:
    config = _load_config(request, payload.config)
    visible = get_visible_questions(config.questions, payload.answers)
    return VisibleQuestions(
        questions=[q.model_dump(mode="json", by_alias=True, exclude_none=True) for q in visible],
        names=[q.name for q in visible],
    )


@router.post(
    "/survey-configs/visibility-delta",
    summary="Compare question visibility before and after an answer change",
    operation_id="getVisibilityDelta",
    response_model=VisibilityDelta,
)
def visibility_delta(request: Request, payload: VisibilityDeltaRequest) -> VisibilityDelta:
    config = _load_config(request, payload.config)
    return compute_visibility_delta(config.questions, payload.before, payload.after)


@router.post(
    "/survey-configs/answers/validate",
    summary="Validate a response submission against its survey",
    operation_id="validateAnswers",
    response_model=AcceptedAnswers,
)
def validate_answers(request: Request, payload: AnswersRequest) -> AcceptedAnswers:
    config = _load_config(request, payload.config)
    accepted = prepare_submission(config, payload.answers)
    logger.info("answers.accepted", extra={"title": config.title, "answer_count": len(accepted)})
    return AcceptedAnswers(answers=accepted)


__all__ = ["router"]
