"""Session retrieval interfaces following Black Box Design principles."""
from typing import Any, Awaitable, Callable, List, Protocol, Tuple

ResponseCallback = Callable[[Any, Any], None]


class RequestHandle(Protocol):
    """Handle returned by a transport call; reports failures as events."""

    def on(self, event: str, listener: Callable[..., Any]) -> Any:
        """
        Register a listener for an event.

        Transports emit ``'error'`` with a single error value when the call
        fails before a response is delivered.
        """
        ...


class HttpTransport(Protocol):
    """Protocol for callback based HTTP clients - allows swappable implementations."""

    def post(
        self,
        url: str,
        params: List[Tuple[str, str]],
        callback: ResponseCallback,
        **kwargs: Any,
    ) -> RequestHandle:
        """
        Issue a POST request.

        Args:
            url: Absolute request URL
            params: Query parameters as name/value pairs
            callback: Invoked as ``callback(parsed_response, raw_response)`` on success
            **kwargs: Transport specific options such as the request body

        Returns:
            RequestHandle emitting ``'error'`` on transport failure
        """
        ...

    def get(
        self,
        url: str,
        params: List[Tuple[str, str]],
        callback: ResponseCallback,
        **kwargs: Any,
    ) -> RequestHandle:
        """Issue a GET request. Same contract as ``post``."""
        ...


class SessionRetrieval(Protocol):
    """Protocol for session retrieval services."""

    def retrieve_session(self, request: Any) -> Awaitable[Any]:
        """
        Retrieve a session.

        Returns:
            Awaitable resolving with the session payload
        """
        ...
