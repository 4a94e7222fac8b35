"""
Exceptions raised by the session retrieval module.

Transport failures are surfaced to callers unmodified whenever the transport
already reports them as exceptions. ``TransportError`` only exists to carry
error values that are not exceptions (an asyncio future can only be rejected
with an exception).
"""

from typing import Any


class SessionRetrievalError(Exception):
    """Base class for session retrieval failures."""


class TransportError(SessionRetrievalError):
    """
    Raised when the transport emits a non-exception error value.

    The emitted value is kept untouched on ``error``.
    """

    def __init__(self, error: Any):
        self.error = error
        super().__init__(f"Transport error: {error}")


class InvalidSessionRequestError(SessionRetrievalError, ValueError):
    """Raised when a request carries neither a session id nor a full set of credentials."""

    def __init__(self, fields):
        self.fields = sorted(fields)
        present = ", ".join(self.fields) if self.fields else "none"
        super().__init__(
            "Session request must contain either 'sessionId' or both 'email' and "
            f"'password' (fields present: {present})"
        )
