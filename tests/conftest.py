from __future__ import annotations

import os
from unittest.mock import Mock

import pytest

from supercast.api_requestor import APIRequestor, set_default_requestor
from supercast.context import RequestContext


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment fixture to isolate tests."""
    env_keys = [
        "SUPERCAST_API_KEY",
        "SUPERCAST_PROFILE",
        "SUPERCAST_API_BASE",
        "SUPERCAST_TIMEOUT",
        "SUPERCAST_MAX_RETRIES",
        "CUSTOM_KEY",
    ]
    for key in env_keys:
        if key in os.environ:
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def context():
    return RequestContext(api_key="sk_test_123")


@pytest.fixture
def requestor(context):
    """Install a mock requestor as the process default and remove it afterwards.

    ``requestor.responses`` is a list of payloads returned in order by
    ``execute``; each call echoes back the context it was given.
    """
    mock = Mock(spec=APIRequestor)
    mock.responses = []

    def _execute(verb, url, params, ctx):
        return mock.responses.pop(0), ctx

    mock.execute.side_effect = _execute
    set_default_requestor(mock)
    yield mock
    set_default_requestor(None)


def _make_page(page, per_page, total, count=None, url="/episodes", start=None):
    if count is None:
        count = min(per_page, max(total - (page - 1) * per_page, 0))
    first = start if start is not None else (page - 1) * per_page + 1
    return {
        "object": "list",
        "url": url,
        "page": page,
        "per_page": per_page,
        "total": total,
        "data": [
            {"object": "episode", "id": n, "title": f"Episode {n}"}
            for n in range(first, first + count)
        ],
    }


@pytest.fixture
def make_page():
    """Factory for raw list payloads holding episodes for a given page."""
    return _make_page


@pytest.fixture
def sample_episode_data():
    """Sample episode payload matching the Supercast API structure."""
    return {
        "object": "episode",
        "id": 42,
        "title": "Pilot",
        "status": "published",
        "published_at": "2024-01-15T09:00:00Z",
        "duration": 1834,
        "tags": ["intro", "season-1"],
        "channel": {"object": "channel", "id": 7, "name": "Main Feed"},
        "audio": {"url": "https://cdn.example.com/42.mp3", "bytes": 29311488},
        "chapters": [
            {"title": "Cold open", "start": 0},
            {"title": "Interview", "start": 312},
        ],
    }
