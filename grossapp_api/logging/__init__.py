# grossapp_api/logging/__init__.py

"""
Logging helpers for the GrossApp admin API.

API code should simply do::

    from grossapp_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("product_created", product_id=str(product.product_id))

and stay decoupled from how structlog is wired up (see ``config.py``).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

DEFAULT_LOGGER_NAME = "grossapp_api"


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Get a structlog logger for the service.

    If ``name`` is omitted, the service-level default name is used.
    Extra keyword arguments are bound to the returned logger.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME, **initial_values)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
