"""
Session Retrieval Service following Black Box Design principles.

This module provides:
- Dispatch of a session request to the credentials or session id path
- Adaptation of a callback/event based transport into a single asyncio future
- Unmodified propagation of transport failures
"""

import asyncio
import logging
from typing import Any, Mapping, Union

from ...config.provider import sessions_url
from .exceptions import TransportError
from .interfaces import HttpTransport
from .models import (
    CredentialSessionRequest,
    SessionIdSessionRequest,
    SessionRequest,
    parse_session_request,
)

STARTING_TO_RETRIEVE_MESSAGE = "Retrieving session"
FATAL_ERROR_MESSAGE = "FATAL ERROR making restful request to retrieve: "

logger = logging.getLogger(__name__)


class SessionRetrievalService:
    """
    Retrieves sessions from the session service through an injected transport.

    The service holds no per-call state. Every call owns its own future and its
    own callback and error listener, so concurrent retrievals on one instance
    never interfere with each other.
    """

    def __init__(self, client: HttpTransport, endpoint: str):
        """
        Initialize with a callback based transport.

        Args:
            client: Transport with ``post``/``get`` returning an event emitting handle
            endpoint: Base address of the session service
        """
        self._client = client
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def retrieve_session(
        self, session_request: Union[SessionRequest, Mapping[str, Any]]
    ) -> "asyncio.Future[Any]":
        """
        Retrieve a session by session id or by credentials.

        Must be called with a running event loop. The returned future settles
        exactly once: with the response delivered to the transport callback, or
        with the error emitted by the request handle.

        Args:
            session_request: A request model or a mapping with either
                ``sessionId`` or ``email`` and ``password``

        Returns:
            Future resolving with the transport's response, unmodified

        Raises:
            InvalidSessionRequestError: If the request matches neither variant
        """
        session_request = parse_session_request(session_request)

        if isinstance(session_request, SessionIdSessionRequest):
            return self._retrieve_session_by_session_id(session_request)

        return self._retrieve_session_by_credentials(session_request)

    def _retrieve_session_by_credentials(
        self, session_request: CredentialSessionRequest
    ) -> "asyncio.Future[Any]":
        request_url = sessions_url(self._endpoint)
        return self._send("post", request_url, data=session_request.to_payload())

    def _retrieve_session_by_session_id(
        self, session_request: SessionIdSessionRequest
    ) -> "asyncio.Future[Any]":
        request_url = sessions_url(self._endpoint, session_request.session_id)
        return self._send("get", request_url)

    def _send(self, method: str, request_url: str, **kwargs: Any) -> "asyncio.Future[Any]":
        """Issue one transport call and bind its outcome to a fresh future."""
        logger.info(STARTING_TO_RETRIEVE_MESSAGE)
        future = asyncio.get_running_loop().create_future()

        def on_response(response: Any, data: Any) -> None:
            # First outcome wins; later signals for this call are dropped
            if not future.done():
                future.set_result(response)

        def on_error(error: Any) -> None:
            logger.critical(f"{FATAL_ERROR_MESSAGE}{error}")
            if not future.done():
                future.set_exception(_as_exception(error))

        logger.debug(f"HTTP Request: {method.upper()} {request_url}")
        request = getattr(self._client, method)(request_url, [], on_response, **kwargs)
        request.on("error", on_error)
        return future


def _as_exception(error: Any) -> BaseException:
    """Futures only accept exceptions; wrap anything else without altering it."""
    if isinstance(error, BaseException):
        return error
    return TransportError(error)
