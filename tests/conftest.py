"""
Pytest fixtures for exercise-tracker-api tests.

Provides a FastAPI app wired to in-memory fakes:
- ``user_repo``: FakeUserRepository (fresh per test)
- ``clock``: FixedClock pinned to 2024-03-15T09:30:00Z
- ``client``: TestClient with repository and clock overridden
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_clock, get_user_repo
from backend.main import create_app
from backend.settings import Settings, get_settings
from tests.fakes import FakeUserRepository, FixedClock


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def user_repo() -> FakeUserRepository:
    """Fresh fake user repository."""
    return FakeUserRepository()


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to a known instant."""
    return FixedClock()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, user_repo, clock) -> Generator[FastAPI, None, None]:
    """Create a test application wired to the fakes."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_clock] = lambda: clock
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)
