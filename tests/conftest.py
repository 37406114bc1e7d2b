from __future__ import annotations

import threading
from datetime import datetime, timezone
from urllib.parse import urlsplit

import pytest

from src.smart_attendance.smart_attendance.container import build_container
from src.smart_attendance.smart_attendance.main import create_app


FIXED_NOW = datetime(2024, 9, 2, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def app(fixed_now):
    container = build_container(clock=lambda: fixed_now)
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


class FlaskResponseAdapter:
    """requests.Response look-alike over a Flask test response."""

    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code
        self.ok = resp.status_code < 400

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("no JSON body")
        return data


class FlaskTestSession:
    """Routes ApiClient calls into a Flask test client instead of the network."""

    def __init__(self, test_client):
        self._client = test_client
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append((method, path))
        with self._lock:
            return FlaskResponseAdapter(self._client.open(path, method=method, json=json, headers=headers))


@pytest.fixture
def api_session(client):
    return FlaskTestSession(client)


@pytest.fixture
def session_over():
    """Build an ApiClient session over any Flask test client."""
    return FlaskTestSession
