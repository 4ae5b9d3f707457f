"""Shared fixtures for the chat app tests."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.dependencies import get_gemini_client
from app.main import app
from app.services.gemini_client import GeminiClient


class FakeGeminiClient:
    """Stands in for GeminiClient; records calls and returns a canned reply."""

    def __init__(self, reply="**Hello** there", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def send_message(self, message, history=None):
        self.calls.append((message, history))
        if self.error:
            raise self.error
        return self.reply


class FakeModels:
    """Mimics genai.Client().models, replaying queued responses or errors."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def _model_response(text=None, block_reason=None):
    prompt_feedback = SimpleNamespace(block_reason=block_reason) if block_reason else None
    return SimpleNamespace(text=text, prompt_feedback=prompt_feedback)


@pytest.fixture
def make_response():
    """Builds a generate_content response with optional text and block reason."""
    return _model_response


@pytest.fixture
def make_client():
    """Builds a GeminiClient over FakeModels replaying the given results."""

    def build(*results):
        models = FakeModels(*results)
        return GeminiClient(api_key="test-key", client=SimpleNamespace(models=models)), models

    return build


@pytest.fixture
def fake_gemini():
    fake = FakeGeminiClient()
    app.dependency_overrides[get_gemini_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_gemini_client, None)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    with TestClient(app) as test_client:
        yield test_client
