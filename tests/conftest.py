"""Shared pytest fixtures and test configuration."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from eventdraft.core.config import Settings
from eventdraft.services.workspace import EventWorkspace


class RecordingCollaborator:
    """Stands in for the editor's ``on_save``/``on_close`` collaborators."""

    def __init__(self) -> None:
        self.saved: list[dict[str, Any]] = []
        self.closed = 0

    def save(self, draft: dict[str, Any]) -> None:
        self.saved.append(draft)

    def close(self) -> None:
        self.closed += 1


@pytest.fixture
def collaborator() -> RecordingCollaborator:
    return RecordingCollaborator()


@pytest.fixture
def workspace() -> EventWorkspace:
    """A workspace pre-loaded with the sample tickets and discount codes."""
    return EventWorkspace.with_sample_data()


@pytest.fixture
def app(workspace: EventWorkspace):  # type: ignore[no-untyped-def]
    """Create a FastAPI test app over the sample workspace."""
    from eventdraft.main import create_app

    settings = Settings(app_env="testing", _env_file=None)
    return create_app(settings=settings, workspace=workspace)


@pytest.fixture
def client(app):  # type: ignore[no-untyped-def]
    """Create a test client."""
    return TestClient(app)
