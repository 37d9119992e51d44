"""Survey configuration engine.

Validates survey configuration documents, evaluates per-question visibility
conditions against an answer map, and validates submitted answers. The pure
engine lives in `surveykit/logic/` and `surveykit/models/`; a small FastAPI
application factory exposes it over HTTP from `surveykit/routes/`.
"""

from __future__ import annotations

from surveykit.main import create_app

__all__ = ["create_app"]
