"""Functional tests for configuration loading precedence and validation."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from surveykit.config import DEFAULT_MAX_CONFIG_BYTES, load_config
from surveykit.logging_setup import build_logging_config


_ENV_KEYS = ("SURVEY_STRICT_REFERENCES", "SURVEY_MAX_CONFIG_BYTES", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults_without_any_source():
    cfg = load_config()
    assert cfg.survey.strict_references is False
    assert cfg.survey.max_config_bytes == DEFAULT_MAX_CONFIG_BYTES
    assert cfg.logging.level == "INFO"


def test_json_base_file_is_read(isolated_cwd):
    (isolated_cwd / "surveykit_config.json").write_text(
        json.dumps({"survey": {"strict_references": True, "max_config_bytes": 2048}, "logging": {"level": "debug"}}),
        encoding="utf-8",
    )
    cfg = load_config()
    assert cfg.survey.strict_references is True
    assert cfg.survey.max_config_bytes == 2048
    assert cfg.logging.level == "DEBUG"


def test_text_override_beats_json_and_env_beats_text(isolated_cwd, monkeypatch):
    (isolated_cwd / "surveykit_config.json").write_text(
        json.dumps({"survey": {"max_config_bytes": 2048}}), encoding="utf-8"
    )
    (isolated_cwd / "config").mkdir()
    (isolated_cwd / "config" / "survey.max_config_bytes").write_text("4096\n", encoding="utf-8")
    assert load_config().survey.max_config_bytes == 4096

    monkeypatch.setenv("SURVEY_MAX_CONFIG_BYTES", "8192")
    assert load_config().survey.max_config_bytes == 8192


@pytest.mark.parametrize("token, expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("off", False)])
def test_strict_references_env_tokens(monkeypatch, token, expected):
    monkeypatch.setenv("SURVEY_STRICT_REFERENCES", token)
    assert load_config().survey.strict_references is expected


def test_invalid_values_raise(monkeypatch, caplog):
    monkeypatch.setenv("SURVEY_MAX_CONFIG_BYTES", "0")
    with caplog.at_level(logging.ERROR, logger="surveykit.config"):
        with pytest.raises(ValidationError):
            load_config()
    assert "Invalid application configuration" in caplog.text

    monkeypatch.setenv("SURVEY_MAX_CONFIG_BYTES", "1024")
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        load_config()


def test_logging_config_sets_package_level():
    cfg = build_logging_config("debug")
    assert cfg["loggers"]["surveykit"]["level"] == "DEBUG"
    assert build_logging_config()["loggers"]["surveykit"]["level"] == "INFO"
