"""Shared test fixtures and a stubbed Gemini transport."""

import pytest
import requests
from fastapi.testclient import TestClient

from app.api.http_api import create_app
from app.llm.provider_config import Settings


INVALID_JSON = object()


class FakeResponse:
    """Minimal stand-in for `requests.Response`."""

    def __init__(self, payload=None, status_code: int = 200, text: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self._payload is INVALID_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


class FakePost:
    """Records `requests.post` calls and replays one canned outcome."""

    def __init__(self):
        self.calls: list[dict] = []
        self.response = FakeResponse(payload=gemini_reply("1. Wear gloves\n2. Remove leaves"))
        self.error: Exception | None = None

    def __call__(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def reply_with(self, *texts: str) -> None:
        self.response = FakeResponse(payload=gemini_reply(*texts))


def gemini_reply(*texts: str) -> dict:
    """Build a one-candidate `generateContent` body with one part per text."""
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        model="gemini-test",
        allowed_origin="https://crops.example",
        timeout_seconds=20,
    )


@pytest.fixture
def fake_post(monkeypatch) -> FakePost:
    fake = FakePost()
    monkeypatch.setattr("app.llm.client.requests.post", fake)
    return fake


@pytest.fixture
def client(settings, fake_post) -> TestClient:
    return TestClient(create_app(settings))
