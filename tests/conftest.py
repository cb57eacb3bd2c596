"""Shared fixtures: in-memory stores and an API client wired to them."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from topscorers.config import app_config
from topscorers.main import app
from topscorers.routes.score import get_score_service
from topscorers.services import ScoreService

from fakes import FailingStore, RecordingStore

API_KEY = "test-key"


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def service(store):
    return ScoreService(store)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(app_config, "api_key", API_KEY)
    return API_KEY


@pytest.fixture
def client(store, api_key):
    app.dependency_overrides[get_score_service] = lambda: ScoreService(store)
    yield TestClient(app, headers={"x-api-key": api_key})
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(api_key):
    app.dependency_overrides[get_score_service] = lambda: ScoreService(FailingStore())
    yield TestClient(app, headers={"x-api-key": api_key})
    app.dependency_overrides.clear()
