"""
Shared pytest fixtures for Sessionkit tests.

This module provides common fixtures including:
- A callback transport mock whose calls return real request emitters
- Helpers that make the mock answer like a live session service
- httpx mock transports for end-to-end tests of the httpx adapter
"""

from typing import Any, Callable, Dict, List
from unittest.mock import MagicMock

import httpx
import pytest

from sessionkit.modules.transport import RequestEmitter

STAGING_ENDPOINT = "https://staging.example"


def mock_response(payload: Any, raw: Any = None) -> Callable[..., RequestEmitter]:
    """
    Build a ``side_effect`` that answers a transport call immediately.

    The callback receives ``payload`` as the parsed response, exactly like a
    successful HTTP call.
    """
    def respond(url, params, callback, **kwargs):
        callback(payload, raw)
        return RequestEmitter()

    return respond


def deferred_response(emitters: List[RequestEmitter]) -> Callable[..., RequestEmitter]:
    """Build a ``side_effect`` that never answers by itself; each call's emitter is recorded."""
    def respond(url, params, callback, **kwargs):
        emitter = RequestEmitter()
        emitters.append(emitter)
        return emitter

    return respond


@pytest.fixture
def staging_endpoint() -> str:
    return STAGING_ENDPOINT


@pytest.fixture
def mock_client():
    """Create a mock callback transport."""
    client = MagicMock()
    client.post = MagicMock(side_effect=deferred_response([]))
    client.get = MagicMock(side_effect=deferred_response([]))
    return client


@pytest.fixture
def expected_response() -> Dict[str, str]:
    return {"sessionId": "some-session-id", "userId": "some-user-id"}


@pytest.fixture
def session_service_handler():
    """
    Create an httpx handler that emulates the session service.

    Requests are recorded on ``handler.requests`` for later inspection.
    """
    requests: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        path = request.url.path
        if request.method == "POST" and path == "/v1/sessions":
            return httpx.Response(201, json={"sessionId": "s1", "userId": "u1"})
        if request.method == "GET" and path.startswith("/v1/sessions/"):
            session_id = path.rsplit("/", 1)[-1]
            return httpx.Response(200, json={"sessionId": session_id, "userId": "u1"})
        return httpx.Response(404, json={"error": "not found"})

    handler.requests = requests
    return handler
