"""Shared Pydantic schema base with camelCase aliases, plus health / error bodies."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """All API schemas inherit from this to auto-generate camelCase aliases.

    ``from_attributes`` lets response models validate straight from ORM rows;
    only declared fields are read, so relationship collections never leak out.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every AppException response: `{ error: { code, message } }`"""
    error: ErrorDetail
