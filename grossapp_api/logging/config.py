# grossapp_api/logging/config.py

"""
Logging setup for the GrossApp admin API.

Configures structlog to emit structured JSON logs (production) or
human-readable console logs (development), and routes the standard library
``logging`` module (uvicorn, SQLAlchemy) to the same stream and level.

Typical usage in the API entrypoint (``grossapp_api/main.py``)::

    from grossapp_api.logging.config import configure_logging

    log = configure_logging()
    log.info("app_startup")
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from grossapp_api.config import Settings, get_config

from . import DEFAULT_LOGGER_NAME, get_logger


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Unknown or empty values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    service_name: str = DEFAULT_LOGGER_NAME,
) -> Any:
    """
    Initialize structlog and stdlib logging, and return the service logger.

    Safe to call more than once; later calls reapply the configuration.
    """
    settings = settings or get_config()
    level = _parse_level(settings.LOG_LEVEL)

    # 1. Processor chain
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if settings.LOG_FORMAT.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # 4. Standard library logging (uvicorn, SQLAlchemy, ...)
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    return get_logger(service_name)


__all__ = ["configure_logging"]
