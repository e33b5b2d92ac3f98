"""
Networking Test Configuration and Fixtures

This file contains pytest fixtures shared across networking tests.
Mirrors the pattern from tests/core/conftest.py.

To use pytest:
    pip install -e ".[test]"
    pytest tests/networking/
"""

import json

import httpx
import pytest

from config.settings import CLIENT_ENV_OVERRIDES
from networking.auth.session import Session
from networking.implementations.http_api_service import HttpRemoteApiService
from networking.implementations.mock_api_service import MockRemoteApiService
from networking.models import UserDataRequest
from networking.remote_api import RemoteApi

BASE_URL = "https://taskie.test"


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_client_env(monkeypatch):
    """Unset TASKIE_* overrides so the host environment can't leak into ClientConfig"""
    for name in CLIENT_ENV_OVERRIDES.values():
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# HTTP FIXTURES
# =============================================================================


class RecordingHandler:
    """
    httpx.MockTransport handler that answers from a route table.

    Routes map (method, path) to (status, body). Body may be a dict/list
    (sent as JSON) or a str/bytes (sent raw). Every request is recorded.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def route(self, method, path, body=None, status=200):
        self.routes[(method, path)] = (status, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            (request.method, request.url.path),
            (404, {"message": "Not found"}),
        )
        if isinstance(body, (dict, list)):
            content = json.dumps(body).encode()
        elif isinstance(body, str):
            content = body.encode()
        else:
            content = body or b""
        return httpx.Response(status, content=content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler():
    """Provide a fresh route table for each test"""
    return RecordingHandler()


@pytest.fixture
def http_service(handler):
    """
    Provide an HttpRemoteApiService wired to the route table.

    Usage:
        def test_something(handler, http_service):
            handler.route("POST", "/api/login", {"token": "abc"})
    """
    service = HttpRemoteApiService(BASE_URL, transport=httpx.MockTransport(handler))
    yield service
    service.close()


@pytest.fixture
def http_api(http_service):
    """RemoteApi over HTTP with an authenticated session"""
    return RemoteApi(http_service, Session("secret-token"))


# =============================================================================
# MOCK BACKEND FIXTURES
# =============================================================================


@pytest.fixture
def credentials():
    return UserDataRequest(name="Alice", email="alice@example.com", password="hunter2")


@pytest.fixture
def mock_service():
    """Provide a fresh in-memory backend for each test"""
    return MockRemoteApiService()


@pytest.fixture
def mock_api(mock_service):
    """RemoteApi over the mock backend, logged out"""
    return RemoteApi(mock_service, Session())


@pytest.fixture
def logged_in_api(mock_api, credentials):
    """RemoteApi over the mock backend with a registered, logged-in user"""
    assert mock_api.register_user(credentials).is_success
    assert mock_api.login_user(credentials).is_success
    return mock_api


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as core tests for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
