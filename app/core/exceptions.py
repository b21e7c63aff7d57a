"""
Service-level exceptions.

Services raise these; endpoints translate them into HTTP responses through
``app.api.v1.errors.http_error``.
"""
from typing import Optional


class DomainError(Exception):
    """Base class for errors raised by the service layer."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(DomainError):
    """Target entity does not exist or is soft-deleted."""

    code = "NOT_FOUND"


class ForbiddenError(DomainError):
    """Authenticated user is not allowed to modify the entity."""

    code = "FORBIDDEN"


class ConflictError(DomainError):
    """A row with the same unique key already exists."""

    code = "CONFLICT"


class ReadModelIntegrityError(DomainError):
    """A target validated upstream is missing from a batched read-model."""

    code = "READ_MODEL_INTEGRITY"


class UserExistsError(ConflictError):
    """Login or email is already taken."""

    code = "USER_EXISTS"
