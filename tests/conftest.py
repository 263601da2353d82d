"""Shared fixtures: a configured key, a short model list, and real tiny images."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from snaplens.core.settings import settings

from .helpers import GEMINI_BASE, MODELS, VISION_URL, encode_image


@pytest.fixture(autouse=True)
def configured(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point both providers at fake hosts and give them a key."""
    monkeypatch.setattr(settings, "google_api_key", "test-key")
    monkeypatch.setattr(settings, "gemini_endpoint", GEMINI_BASE)
    monkeypatch.setattr(settings, "gemini_models", list(MODELS))
    monkeypatch.setattr(settings, "vision_endpoint", VISION_URL)


@pytest.fixture
def jpeg_b64() -> str:
    return encode_image("JPEG")


@pytest.fixture
def png_b64() -> str:
    return encode_image("PNG")


@pytest.fixture
def client() -> TestClient:
    from snaplens.main import app

    return TestClient(app)
