"""Pytest configuration and fixtures for ibutsu-client tests."""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from ibutsu_client.configuration import Configuration


# ============================================================================
# Recording Transport
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that keeps every request it receives.

    ``responder`` builds the response for a request (sync or async); by
    default every request is answered with ``200 {}``.
    """

    def __init__(self, responder: Optional[Callable[[httpx.Request], Any]] = None):
        self.requests: List[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json={}))
        super().__init__(self._record)

    def _record(self, request: httpx.Request):
        self.requests.append(request)
        return self.responder(request)

    def respond_with(self, status_code: int = 200, **kwargs: Any) -> None:
        """Answer every following request with the same response."""
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_path():
    """Default base path for testing."""
    return "http://localhost/api"


@pytest.fixture
def transport():
    """A transport that records requests and answers 200 {}."""
    return RecordingTransport()


@pytest.fixture
def make_configuration(base_path, transport):
    """Factory for configurations that send through the recording transport."""

    def _make(**kwargs: Any) -> Configuration:
        kwargs.setdefault("base_path", base_path)
        kwargs.setdefault("transport", transport)
        return Configuration(**kwargs)

    return _make


@pytest.fixture
def configuration(make_configuration):
    """Configuration with a static bearer token."""
    return make_configuration(access_token="tok")


@pytest.fixture
def mock_project_data():
    """Mock project data."""
    return {
        "id": "p1",
        "name": "my-project",
        "title": "My Project",
        "owner_id": "u1",
        "group_id": None,
    }


@pytest.fixture
def mock_result_data():
    """Mock result data, including a key the client does not know."""
    return {
        "id": "r1",
        "test_id": "test_login",
        "start_time": "2024-05-01T10:00:00",
        "duration": 1.5,
        "result": "passed",
        "component": "frontend",
        "env": "ci",
        "run_id": "run-1",
        "project_id": None,
        "metadata": {"jenkins": {"build_number": 42}},
        "params": {},
        "unknown_key": "dropped",
    }
