"""
Session Service Factory following Black Box Design principles.

This factory:
- Reads the endpoint from configuration
- Wires the transport into the retrieval service
- Returns only the service (hiding the transport choice)
"""

import logging
from typing import Optional

from ...config.provider import ConfigProvider, Environment
from ..transport import HttpxCallbackTransport
from .interfaces import HttpTransport, SessionRetrieval
from .service import SessionRetrievalService

logger = logging.getLogger(__name__)


class SessionServiceFactory:
    """
    Factory for building the session retrieval stack.

    This is the composition root that:
    - Creates the default transport when none is injected
    - Wires it together with the configured endpoint
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        client: Optional[HttpTransport] = None
    ) -> SessionRetrieval:
        """
        Build the session retrieval service.

        Args:
            config_provider: Configuration provider
            client: Optional transport; an httpx backed one is created otherwise

        Returns:
            SessionRetrieval service bound to the configured endpoint
        """
        api_config = config_provider.get_session_api_config()

        if client is None:
            logger.info("Building session retrieval with httpx transport")
            client = HttpxCallbackTransport(timeout=api_config.timeout_seconds)
        else:
            logger.info("Building session retrieval with injected transport")

        return SessionRetrievalService(client, api_config.endpoint)

    @staticmethod
    def build_for_testing(
        mock_client: HttpTransport,
        endpoint: str = Environment.STAGING.value
    ) -> SessionRetrievalService:
        """
        Build the service for testing with a mock transport.

        Args:
            mock_client: Mock transport
            endpoint: Base address, staging by default

        Returns:
            SessionRetrievalService for testing
        """
        return SessionRetrievalService(mock_client, endpoint)
