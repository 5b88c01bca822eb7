"""
grossapp_api.services
---------------------

Service layer aggregation for the GrossApp admin API.

Routers should import service classes from this package instead of
depending directly on repositories.

Example:

    from grossapp_api.services import AdminsService, ProductsService
"""

from .admins_service import AdminsService
from .logins_service import LoginsService
from .products_service import ProductsService

__all__ = [
    "AdminsService",
    "LoginsService",
    "ProductsService",
]
