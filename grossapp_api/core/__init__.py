"""
Domain primitives shared by services and the HTTP layer.
"""

from .deadline import check_deadline, request_deadline
from .exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    RequestTimeoutError,
    UnknownReferenceError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "RequestTimeoutError",
    "UnknownReferenceError",
    "ValidationError",
    "check_deadline",
    "request_deadline",
]
