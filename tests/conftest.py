"""Pytest configuration for Brunel Engine API tests.

The Anthropic client is replaced by an in-memory fake, so no network access
or API key is needed.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from llm.client import get_client
from main import app


class FakeModelClient:
    """Stands in for ModelClient: records calls, replies with a canned text."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, *, system: str, messages: list[dict], max_tokens: int) -> str:
        self.calls.append({"system": system, "messages": messages, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_model():
    return FakeModelClient()


@pytest.fixture
def client(fake_model, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    app.dependency_overrides[get_client] = lambda: fake_model
    yield TestClient(app)
    app.dependency_overrides.clear()
