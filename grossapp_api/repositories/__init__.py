# grossapp_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files, e.g.:

    from grossapp_api.repositories import ProductsRepository
"""

from .admins import AdminsRepository
from .logins import LoginsRepository
from .products import ProductsRepository

__all__ = [
    "AdminsRepository",
    "LoginsRepository",
    "ProductsRepository",
]
