"""
grossapp_api
------------

HTTP API for the GrossApp store administration backend.

The ASGI application lives in ``grossapp_api.main`` (``create_app()`` and a
module-level ``app`` for ``uvicorn grossapp_api.main:app``).
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("grossapp-admin-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
