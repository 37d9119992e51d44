"""Functional test fixtures for the survey engine.

Builds the FastAPI app with an explicit ``AppConfig`` so tests never depend
on environment variables or config files of the machine running them.
"""

from __future__ import annotations

import json
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from surveykit.config import AppConfig, SurveyEngineConfig
from surveykit.main import create_app


RECOMMEND_SURVEY: Dict[str, Any] = {
    "title": "T",
    "questions": [
        {"type": "yes_no", "name": "r", "label": "Recommend?"},
        {
            "type": "textarea",
            "name": "why",
            "label": "Why not?",
            "condition": {"name": "r", "value": False},
        },
    ],
}


FULL_SURVEY: Dict[str, Any] = {
    "title": "Team feedback",
    "questions": [
        {
            "type": "text",
            "name": "nickname",
            "label": "Nickname",
            "validation": {"required": True, "minLength": 2, "maxLength": 12},
        },
        {"type": "textarea", "name": "bio", "label": "About you", "validation": {"maxLength": 40}},
        {
            "type": "multiple_choice",
            "name": "team",
            "label": "Team",
            "options": ["Platform", "Product", "Data"],
            "validation": {"required": True},
        },
        {
            "type": "multiple_select",
            "name": "tools",
            "label": "Tools you use",
            "options": ["Python", "Go", "Rust", "SQL"],
            "validation": {"minChoices": 1, "maxChoices": 2},
        },
        {
            "type": "multiple_select_with_other",
            "name": "perks",
            "label": "Favourite perks",
            "options": ["Remote", "Lunch", "Gym"],
            "validation": {"maxChoices": 2},
        },
        {"type": "rating", "name": "happiness", "label": "Happiness", "scale": 10},
        {"type": "rating", "name": "onboarding", "label": "Onboarding"},
        {"type": "yes_no", "name": "stay", "label": "Would you stay?", "validation": {"required": True}},
        {
            "type": "textarea",
            "name": "leave_reason",
            "label": "What would make you leave?",
            "validation": {"required": True, "minLength": 5},
            "condition": {"name": "stay", "value": False},
        },
        {
            "type": "text",
            "name": "data_stack",
            "label": "Which warehouse?",
            "condition": {"name": "tools", "value": ["SQL", "Python"]},
        },
    ],
}


@pytest.fixture()
def recommend_survey() -> Dict[str, Any]:
    return json.loads(json.dumps(RECOMMEND_SURVEY))


@pytest.fixture()
def full_survey() -> Dict[str, Any]:
    return json.loads(json.dumps(FULL_SURVEY))


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(survey=SurveyEngineConfig())


@pytest.fixture()
def client(app_config: AppConfig) -> TestClient:
    with TestClient(create_app(app_config)) as c:
        yield c
