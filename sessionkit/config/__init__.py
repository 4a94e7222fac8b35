"""Static configuration: endpoint constants, environments and providers."""

from .provider import (
    ConfigProvider,
    Endpoint,
    EnvConfigProvider,
    Environment,
    SessionApiConfig,
    StaticConfigProvider,
    Version,
    sessions_url,
)

__all__ = [
    "ConfigProvider",
    "Endpoint",
    "EnvConfigProvider",
    "Environment",
    "SessionApiConfig",
    "StaticConfigProvider",
    "Version",
    "sessions_url",
]
