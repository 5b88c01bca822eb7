# grossapp_api/core/exceptions.py
from __future__ import annotations

from typing import Any, Mapping, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""

    code = "domain_error"
    status_code = 400

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        self.message = message
        self.details = dict(details) if details else None
        super().__init__(self.message)


# --- Not Found ---

class NotFoundError(DomainError):
    """Raised when the requested identifier does not exist."""

    code = "not_found"
    status_code = 404

    def __init__(self, entity: str, identifier: Any):
        super().__init__(
            f"{entity} '{identifier}' not found.",
            {"entity": entity, "id": str(identifier)},
        )


# --- Validation ---

class ValidationError(DomainError):
    """Raised for missing/invalid fields and unknown foreign keys."""

    code = "validation_error"
    status_code = 400


class UnknownReferenceError(ValidationError):
    """Raised when a foreign key points at a record that does not exist."""

    def __init__(self, field: str, entity: str, identifier: Any):
        super().__init__(
            f"{field} references unknown {entity} '{identifier}'.",
            {"field": field, "entity": entity, "id": str(identifier)},
        )


# --- Conflicts ---

class ConflictError(DomainError):
    """Raised on uniqueness violations and restricted deletes."""

    code = "conflict"
    status_code = 409


# --- Timeouts ---

class RequestTimeoutError(DomainError):
    """Raised when a request's deadline passes before its work is committed."""

    code = "timeout"
    status_code = 504

    def __init__(self, timeout_seconds: float):
        super().__init__(
            f"Request exceeded {timeout_seconds:g}s.",
            {"timeout_seconds": timeout_seconds},
        )
