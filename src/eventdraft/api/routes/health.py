"""Health check route."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from eventdraft.api.schemas.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> dict[str, Any]:
    """Application health check endpoint."""
    settings = getattr(request.app.state, "settings", None)
    env = settings.app_env if settings else "unknown"
    return {"status": "ok", "environment": env}
