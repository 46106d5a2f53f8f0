"""Shared schemas used across all entity schemas."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    environment: str


class ValidationFailedResponse(BaseModel):
    """Body returned when a submitted draft fails validation."""

    detail: str = "Validation failed"
    errors: dict[str, str]
