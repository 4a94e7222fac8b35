"""
Authentication Module - Black Box Interface

Purpose: Retrieve sessions from the session service
Interface: retrieve_session()
Hidden: Variant dispatch, URL construction, callback to future adaptation

The transport is injected, so this module can be driven by any HTTP client
that honours the callback contract in ``interfaces``.
"""

from .exceptions import InvalidSessionRequestError, SessionRetrievalError, TransportError
from .factory import SessionServiceFactory
from .models import (
    CredentialSessionRequest,
    SessionIdSessionRequest,
    SessionRequest,
    SessionResponse,
    parse_session_request,
)
from .service import SessionRetrievalService

__all__ = [
    "CredentialSessionRequest",
    "InvalidSessionRequestError",
    "SessionIdSessionRequest",
    "SessionRequest",
    "SessionResponse",
    "SessionRetrievalError",
    "SessionRetrievalService",
    "SessionServiceFactory",
    "TransportError",
    "parse_session_request",
]
