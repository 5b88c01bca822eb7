"""
grossapp_api.db
===============

Database package for the GrossApp admin API.

Centralizes the public DB primitives so the rest of the service can import
them from a single place, e.g.:

    from grossapp_api.db import Base, get_db, init_db
"""

from .models import Admin, Base, Login, Product
from .session import (
    build_engine,
    build_session_factory,
    get_db,
    get_engine,
    get_session_factory,
    init_db,
)

__all__ = [
    "Admin",
    "Base",
    "Login",
    "Product",
    "build_engine",
    "build_session_factory",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_db",
]
