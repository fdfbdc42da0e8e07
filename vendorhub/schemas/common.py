"""Shared Pydantic schema bases."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """API schemas accept snake_case or camelCase keys and read ORM rows directly.

    Unknown keys in request bodies are dropped.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
        "extra": "ignore",
    }


class HealthResponse(BaseModel):
    status: str = "ok"
    app: str
    env: str
    version: str
