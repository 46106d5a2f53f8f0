"""Dependency injection for FastAPI routes."""

from __future__ import annotations

from fastapi import HTTPException, Request

from eventdraft.services.workspace import EventWorkspace


def get_workspace(request: Request) -> EventWorkspace:
    """Dependency that provides the app's event workspace."""
    workspace = getattr(request.app.state, "workspace", None)
    if workspace is None:
        raise HTTPException(status_code=503, detail="Workspace not initialised")
    return workspace
