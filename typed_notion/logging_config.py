"""
Logging setup for applications using the typed Notion SDK.

The SDK itself only emits records through module loggers under the
``typed_notion`` namespace; calling ``setup_logging`` is optional.
"""

import logging
import logging.config
import sys
from typing import Any, Dict, Optional

from .config import NotionSettings

FORMATS = {
    "standard": "%(asctime)s [%(levelname)8s] %(name)s:%(lineno)d:%(funcName)s - %(message)s",
    "simple": "[%(levelname)s] %(message)s",
    "json": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d %(funcName)s",
}


def get_logging_config(log_level: int, log_format: str = "standard") -> Dict[str, Any]:
    """Build a ``logging.config.dictConfig`` configuration."""
    formatter: Dict[str, Any] = {"format": FORMATS[log_format]}
    if log_format == "json":
        formatter["()"] = "pythonjsonlogger.jsonlogger.JsonFormatter"
    elif log_format == "standard":
        formatter["datefmt"] = "%Y-%m-%d %H:%M:%S"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {log_format: formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": log_format,
                "stream": sys.stdout,
            }
        },
        "loggers": {
            "typed_notion": {"level": log_level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": log_level, "handlers": ["console"]},
    }


def configure_third_party_loggers() -> None:
    for logger_name in ("httpx", "httpcore"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def setup_logging(settings: Optional[NotionSettings] = None,
                  level: Optional[str] = None,
                  log_format: Optional[str] = None) -> None:
    """
    Configure console logging.

    Args:
        settings: Source of LOG_LEVEL and LOG_FORMAT defaults
        level: Overrides the settings' log level
        log_format: Overrides the settings' log format
    """
    level_name = (level or (settings.LOG_LEVEL if settings else "INFO")).upper()
    fmt = log_format or (settings.LOG_FORMAT if settings else "standard")
    if fmt not in FORMATS:
        raise ValueError(f"log_format must be one of: {list(FORMATS)}")

    log_level = getattr(logging, level_name, logging.INFO)
    logging.config.dictConfig(get_logging_config(log_level, fmt))
    configure_third_party_loggers()

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured: level={level_name}, format={fmt}")
