"""APIRouter registration for the survey engine service."""

from __future__ import annotations

from fastapi import APIRouter

from surveykit.routes.survey_configs import router as survey_configs_router

api_router = APIRouter()
api_router.include_router(survey_configs_router, tags=["SurveyConfigs"])

__all__ = ["api_router"]
