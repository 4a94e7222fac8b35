"""
Transport Module - Black Box Interface

Purpose: Perform HTTP calls for the session service
Interface: post(), get() returning an event emitting request handle
Hidden: HTTP client, connection handling, body decoding

Replaceable with any client honouring the callback contract.
"""

from .emitter import RequestEmitter
from .httpx_transport import HttpxCallbackTransport

__all__ = ["HttpxCallbackTransport", "RequestEmitter"]
