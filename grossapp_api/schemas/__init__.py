"""
Top-level export module for HTTP API schemas.
"""

from .admins import AdminCreate, AdminRead, AdminUpdate
from .common import APIModel, ErrorDetail, ErrorResponse
from .logins import LoginCreate, LoginRead, LoginUpdate
from .products import ProductCreate, ProductRead, ProductUpdate

__all__ = [
    # Common
    "APIModel", "ErrorDetail", "ErrorResponse",

    # Admins
    "AdminCreate", "AdminRead", "AdminUpdate",

    # Products
    "ProductCreate", "ProductRead", "ProductUpdate",

    # Logins
    "LoginCreate", "LoginRead", "LoginUpdate",
]
