"""
Logging configuration that keeps bearer tokens out of the logs
"""

import logging
import logging.config
import re
from typing import Dict, Any

BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s\"']+")


class SecretMaskingFilter(logging.Filter):
    """Filter to redact bearer tokens from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with tokens masked."""
        message = record.getMessage()
        if "Bearer" in message:
            record.msg = BEARER_PATTERN.sub(r"\1***", message)
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with token masking.

    Everything goes to stderr; stdout is reserved for the exported document.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "secret_masking_filter": {
                "()": SecretMaskingFilter
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
                "filters": ["secret_masking_filter"]
            }
        },
        "loggers": {
            "suitecrm_vardefs": {
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
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
