"""
Sessionkit - Session Retrieval Client

Retrieves authentication sessions from a remote session service, either by
presenting credentials or by re-fetching an existing session identifier.

Architecture:
- Each module is self-contained with clear interfaces
- The HTTP transport is injected, never constructed by the core
- All communication through defined interfaces

Modules:
- auth: Session request models and the retrieval service
- transport: Callback/event based HTTP transport over httpx
"""

__version__ = "1.0.0"
