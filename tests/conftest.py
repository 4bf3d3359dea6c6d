"""
Pytest configuration for news_query tests.

Provides fake HTTP responses and sample API payloads; no test touches the network.
"""
import json

import pytest
import requests


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload if payload is not None else {})
        self.text = text

    def json(self):
        return json.loads(self.text)


class RecordingGet:
    """Replaces requests.get; records calls and returns a canned response."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls = []

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    monkeypatch.delenv("NEWS_API_KEY", raising=False)


@pytest.fixture
def fake_get(monkeypatch):
    """Install a RecordingGet in place of requests.get and return it."""
    getter = RecordingGet()
    monkeypatch.setattr(requests, "get", getter)
    return getter


@pytest.fixture
def articles_payload():
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {
                "source": {"id": "bbc-news", "name": "BBC News"},
                "author": "BBC News",
                "title": "Markets rally as inflation cools",
                "description": "Shares rose on Tuesday.",
                "url": "https://www.bbc.co.uk/news/business-1",
                "urlToImage": "https://ichef.bbci.co.uk/img.jpg",
                "publishedAt": "2024-01-02T09:30:00Z",
                "content": "Shares rose on Tuesday after... [+1200 chars]",
            },
            {
                "source": {"id": None, "name": "Example Times"},
                "author": None,
                "title": "Local team wins final",
                "description": None,
                "url": "https://example.com/sport/final",
                "urlToImage": None,
                "publishedAt": "2024-01-02T08:00:00Z",
            },
        ],
    }


@pytest.fixture
def sources_payload():
    return {
        "status": "ok",
        "sources": [
            {
                "id": "bbc-news",
                "name": "BBC News",
                "description": "Use BBC News for up-to-the-minute news.",
                "url": "http://www.bbc.co.uk/news",
                "category": "general",
                "language": "en",
                "country": "gb",
            },
        ],
    }


@pytest.fixture
def error_payload():
    return {
        "status": "error",
        "code": "apiKeyInvalid",
        "message": "Your API key is invalid or incorrect.",
    }


@pytest.fixture
def make_response():
    return FakeResponse
