"""Behave environment hooks for survey service integration tests.

The application is created in-process with FastAPI's TestClient, so no
running server, network port or external service is required. Set
``TEST_API_PREFIX`` to exercise a differently mounted router.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi.testclient import TestClient

from surveykit.config import AppConfig
from surveykit.main import create_app


logger = logging.getLogger(__name__)


def before_all(context: Any) -> None:
    context.api_prefix = os.getenv("TEST_API_PREFIX", "/api/v1")
    context.client = TestClient(create_app(AppConfig()))
    context.client.__enter__()
    logger.info("integration.client.ready", extra={"api_prefix": context.api_prefix})


def after_all(context: Any) -> None:
    client = getattr(context, "client", None)
    if client is not None:
        client.__exit__(None, None, None)
        context.client = None


def before_scenario(context: Any, scenario: Any) -> None:
    context.response = None
    context.survey = None
    context.scenario = scenario


def after_step(context: Any, step: Any) -> None:
    if step.status == "failed" and getattr(context, "response", None) is not None:
        resp = context.response
        logger.error(
            "integration.step.failed",
            extra={"step": step.name, "status": resp.status_code, "body": resp.text[:2000]},
        )
