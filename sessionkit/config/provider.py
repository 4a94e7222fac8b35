"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class Version(str, Enum):
    """API versions understood by the session service."""

    V1 = "v1"


class Endpoint(str, Enum):
    """Resource paths appended after the API version."""

    SESSIONS = "/sessions"


class Environment(str, Enum):
    """Known deployments of the session service."""

    STAGING = "https://staging.example"
    PRODUCTION = "https://api.example"

    @classmethod
    def from_name(cls, name: str) -> "Environment":
        """Resolve an environment by its case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(member.name.lower() for member in cls)
            raise ValueError(
                f"Unknown session API environment '{name}'. Expected one of: {valid}"
            ) from None


def sessions_url(endpoint: str, session_id: Optional[str] = None) -> str:
    """
    Build the sessions resource URL for a base address.

    Args:
        endpoint: Base address of the session service
        session_id: Optional identifier appended as the last path segment

    Returns:
        ``{endpoint}/v1/sessions`` or ``{endpoint}/v1/sessions/{session_id}``
    """
    url = f"{endpoint}/{Version.V1.value}{Endpoint.SESSIONS.value}"
    if session_id is not None:
        url = f"{url}/{session_id}"
    return url


@dataclass
class SessionApiConfig:
    """Session API configuration."""
    endpoint: str
    timeout_seconds: float
    log_level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_session_api_config(self) -> SessionApiConfig:
        """Get session API configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, endpoint: Optional[str] = None, environment: Optional[str] = None):
        """
        Initialize with optional overrides that win over environment variables.

        Args:
            endpoint: Explicit base address; the environment is not consulted
            environment: Known deployment name used when no endpoint is set
        """
        self._endpoint = endpoint
        self._environment = environment

    def get_session_api_config(self) -> SessionApiConfig:
        """Get session API configuration from environment variables."""
        endpoint = self._endpoint or os.getenv("SESSION_API_ENDPOINT")
        if not endpoint:
            environment = Environment.from_name(
                self._environment or os.getenv("SESSION_API_ENVIRONMENT", "staging")
            )
            endpoint = environment.value

        timeout_raw = os.getenv("SESSION_API_TIMEOUT", "15")
        try:
            timeout_seconds = float(timeout_raw)
        except ValueError:
            raise ValueError(
                f"SESSION_API_TIMEOUT must be a number of seconds, got '{timeout_raw}'"
            ) from None
        if timeout_seconds <= 0:
            raise ValueError("SESSION_API_TIMEOUT must be greater than zero")

        return SessionApiConfig(
            endpoint=endpoint.rstrip("/"),
            timeout_seconds=timeout_seconds,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


class StaticConfigProvider:
    """Configuration provider backed by fixed values (CLI overrides, tests)."""

    def __init__(self, config: SessionApiConfig):
        self._config = config

    def get_session_api_config(self) -> SessionApiConfig:
        """Return the configuration this provider was built with."""
        return self._config
