"""
Callback transport backed by httpx.

Each call is scheduled on the running event loop and returns a
``RequestEmitter`` straight away. The response is handed to the callback as
``callback(parsed_body, httpx_response)``; failures that prevent a response
(invalid URLs, connection errors, timeouts, TLS) are emitted as ``'error'``.
A callback that raises is logged; it never produces a second outcome.

HTTP error statuses still count as responses and go to the callback.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional, Set, Tuple

import httpx

from .emitter import RequestEmitter

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0


class HttpxCallbackTransport:
    """
    Adapts ``httpx.AsyncClient`` to the ``post``/``get`` callback contract.

    The transport keeps a reference to in-flight tasks only so they are not
    garbage collected before they finish.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize the transport.

        Args:
            client: Optional preconfigured client (not closed by ``aclose``)
            timeout: Request timeout in seconds for the owned client
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )
        self._in_flight: Set[asyncio.Task] = set()

    def post(self, url: str, params: Iterable[Tuple[str, str]], callback, data: Any = None) -> RequestEmitter:
        return self._request("POST", url, params, callback, data)

    def get(self, url: str, params: Iterable[Tuple[str, str]], callback, data: Any = None) -> RequestEmitter:
        return self._request("GET", url, params, callback, data)

    def _request(self, method: str, url: str, params, callback, data: Any) -> RequestEmitter:
        emitter = RequestEmitter()
        task = asyncio.get_running_loop().create_task(
            self._perform(emitter, method, url, list(params), callback, data)
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return emitter

    async def _perform(self, emitter: RequestEmitter, method: str, url: str, params, callback, data: Any) -> None:
        request_kwargs = {}
        if params:
            request_kwargs["params"] = params
        if data is not None:
            request_kwargs["json"] = data

        try:
            response = await self._client.request(method, url, **request_kwargs)
        except Exception as e:
            # Anything preventing a response (bad URL, connection, TLS) is an error event
            if not emitter.emit("error", e):
                logger.warning(f"Unhandled transport error for {method} {url}: {e}")
            return

        logger.debug(f"HTTP Response: {response.status_code} {method} {url}")
        try:
            callback(_decode_body(response), response)
        except Exception:
            logger.exception(f"Response callback failed for {method} {url}")

    async def aclose(self) -> None:
        """Wait for in-flight requests, then close the client if this transport created it."""
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxCallbackTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _decode_body(response: httpx.Response) -> Any:
    """Parse a JSON body, falling back to text."""
    try:
        return response.json()
    except ValueError:
        return response.text
