"""
Logging configuration for the SessionBox server
"""

import logging
import logging.config
from typing import Any, Dict, Iterable


class QuietPathFilter(logging.Filter):
    """Filter to suppress access logs for probe endpoints."""

    def __init__(self, paths: Iterable[str] = ("/health",)):
        super().__init__()
        self.paths = tuple(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        """Drop uvicorn access log lines for GET requests to quiet paths."""
        if record.name != "uvicorn.access":
            return True
        message = record.getMessage()
        if "GET" not in message:
            return True
        return not any(f"{path} " in message for path in self.paths)


def get_logging_config(log_level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with probe log suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "quiet_path_filter": {
                "()": QuietPathFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "access": {
                "format": "%(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["quiet_path_filter"]
            }
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["default"],
                "level": "INFO",
                "propagate": False
            },
            "uvicorn.error": {
                "handlers": ["default"],
                "level": "INFO",
                "propagate": False
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False
            },
            "sessionbox": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["default"]
        }
    }


def configure_logging(log_level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(log_level))
