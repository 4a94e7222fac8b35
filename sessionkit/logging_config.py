"""
Logging configuration with credential redaction
"""

import logging
import logging.config
import re
from typing import Dict, Any

_PASSWORD_PATTERN = re.compile(r"""(['"]?password['"]?\s*[:=]\s*['"]?)([^'",\s}]+)""", re.IGNORECASE)


class RedactCredentialsFilter(logging.Filter):
    """Filter to mask passwords that end up in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with password values masked."""
        message = record.getMessage()
        redacted = _PASSWORD_PATTERN.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only mask them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact_credentials": {
                "()": RedactCredentialsFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["redact_credentials"]
            }
        },
        "loggers": {
            "sessionkit": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level.upper()))
