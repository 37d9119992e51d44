from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from surveykit.config import AppConfig, load_config
from surveykit.http.problem import (
    handle_answer_validation_error,
    handle_http_exception,
    handle_request_validation_error,
    handle_survey_config_error,
    handle_unexpected_error,
)
from surveykit.http.request_id import RequestIdMiddleware
from surveykit.logging_setup import configure_logging
from surveykit.logic.validation import AnswerValidationError, SurveyConfigError
from surveykit.routes import api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    Configuration is loaded from the environment unless given explicitly;
    tests pass an ``AppConfig`` to avoid depending on process state.
    """
    config = config or load_config()
    configure_logging(config.logging.level)

    app = FastAPI(title="surveykit", version="0.1.0")
    app.state.config = config

    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SurveyConfigError, handle_survey_config_error)
    app.add_exception_handler(AnswerValidationError, handle_answer_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health() -> dict:  # pragma: no cover - trivial
        return {"status": "ok"}

    logger.info(
        "app.created",
        extra={
            "strict_references": config.survey.strict_references,
            "max_config_bytes": config.survey.max_config_bytes,
        },
    )
    return app


# Intentionally do not instantiate the app at import time to prevent side effects.
