"""Configuration utilities for the survey engine service.

This module loads application configuration with the following rules:
- Primary source: `surveykit_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("surveykit_config.json")
DEFAULT_MAX_CONFIG_BYTES = 1024 * 1024
logger = logging.getLogger(__name__)


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


def _truthy(text: object) -> bool:
    return str(text).strip().lower() in {"1", "true", "yes", "on"}


class SurveyEngineConfig(BaseModel):
    strict_references: bool = Field(default=False)
    max_config_bytes: int = Field(default=DEFAULT_MAX_CONFIG_BYTES, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        level = (v or "").strip().upper()
        if level not in allowed:
            raise ValueError(f"logging.level must be one of {sorted(allowed)}")
        return level


class AppConfig(BaseModel):
    survey: SurveyEngineConfig = Field(default_factory=SurveyEngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:  # pragma: no cover - defensive
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) surveykit_config.json at project root (primary base)
    4) Safe defaults for development
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    strict_text = (
        _env("SURVEY_STRICT_REFERENCES")
        or _read_config_file("survey.strict_references")
        or _base("survey.strict_references", "false")
    )
    max_bytes_text = (
        _env("SURVEY_MAX_CONFIG_BYTES")
        or _read_config_file("survey.max_config_bytes")
        or _base("survey.max_config_bytes", str(DEFAULT_MAX_CONFIG_BYTES))
    )
    log_level = _env("LOG_LEVEL") or _read_config_file("logging.level") or _base("logging.level", "INFO")

    try:
        return AppConfig(
            survey=SurveyEngineConfig(
                strict_references=_truthy(strict_text),
                max_config_bytes=max_bytes_text,
            ),
            logging=LoggingConfig(level=log_level),
        )
    except PydanticValidationError as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "SurveyEngineConfig",
    "LoggingConfig",
    "load_config",
]
