"""Central logging configuration for the survey engine service.

Applies a root stdout handler so all module loggers emit at the configured
level without per-module setup. Keeps uvicorn loggers on the same handler
and avoids duplicate handlers on reloads.
"""
from __future__ import annotations
import copy
import logging
from logging.config import dictConfig

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "surveykit": {"level": "INFO"},
        "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "uvicorn.error": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "uvicorn.access": {"level": "INFO", "handlers": ["console"], "propagate": False},
    },
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return the dictConfig payload with the package logger set to ``level``."""
    cfg = copy.deepcopy(_DICT_CONFIG)
    cfg["loggers"]["surveykit"]["level"] = level.upper()
    return cfg


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once.

    If the root logger already has handlers, only adjust the package level to
    prevent duplicate output (important under reloaders and test runners).
    """
    root = logging.getLogger()
    if root.handlers:
        logging.getLogger("surveykit").setLevel(level.upper())
        return
    dictConfig(build_logging_config(level))
