from fastapi import HTTPException, status

from app.core.exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    ReadModelIntegrityError,
    UserExistsError,
    ConflictError,
)

STATUS_BY_ERROR = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (UserExistsError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ReadModelIntegrityError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def http_error(exc: DomainError) -> HTTPException:
    """Translate a service-layer error into the HTTPException an endpoint raises."""
    status_code = next(
        (code for error_type, code in STATUS_BY_ERROR if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    detail = {"error": exc.code, "message": exc.message}
    if exc.field:
        detail["field"] = exc.field
    return HTTPException(status_code=status_code, detail=detail)
