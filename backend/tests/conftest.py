from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.services import llm_service
from tests.fakes import FakeCompletion


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.setattr(settings, "cors_origins", "")
    llm_service.reset_client()
    yield
    llm_service.reset_client()


@pytest.fixture
def fake_llm(monkeypatch) -> FakeCompletion:
    fake = FakeCompletion()
    monkeypatch.setattr(llm_service, "acompletion", fake)
    return fake


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
