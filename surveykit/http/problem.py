"""Problem+JSON utilities and global exception handlers.

Defines the RFC7807 media type and handler callables that produce
application/problem+json responses for framework and domain errors.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from surveykit.logic.problem_factory import problem_answers_invalid, problem_survey_config_failure
from surveykit.logic.validation import AnswerValidationError, SurveyConfigError

PROBLEM_MEDIA_TYPE = "application/problem+json"

logger = logging.getLogger(__name__)


def problem_response(problem: dict, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        jsonable_encoder(problem),
        status_code=int(problem.get("status", 500)),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    status_code = int(exc.status_code or 500)
    if isinstance(exc.detail, dict):
        problem = {"status": status_code, **exc.detail}
    else:
        problem = {"title": "Error", "status": status_code, "detail": str(exc.detail or "")}
    headers = {str(k): str(v) for k, v in (exc.headers or {}).items()} or None
    return problem_response(problem, headers=headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    problem = {
        "title": "Invalid Request",
        "status": 422,
        "detail": "Request validation failed",
        "errors": list(exc.errors()),
    }
    return problem_response(problem)


async def handle_survey_config_error(request: Request, exc: SurveyConfigError) -> JSONResponse:  # noqa: D401
    return problem_response(problem_survey_config_failure(exc.failure))


async def handle_answer_validation_error(request: Request, exc: AnswerValidationError) -> JSONResponse:  # noqa: D401
    return problem_response(problem_answers_invalid(str(exc), exc.issues))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error", extra={"path": request.url.path}, exc_info=exc)
    return problem_response({"title": "Internal Server Error", "status": 500})


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "problem_response",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_survey_config_error",
    "handle_answer_validation_error",
    "handle_unexpected_error",
]
