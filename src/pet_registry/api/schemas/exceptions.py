"""
Exception classes for API error handling.
"""

from pet_registry.core.models import ErrorKind, RegistryResult


class APIException(Exception):
    """
    Base exception for API errors.

    All API exceptions should inherit from this class to ensure
    consistent error response formatting.
    """

    status_code: int = 500
    error_type: str = "api_error"
    message: str = "An error occurred"
    detail: str | None = None

    def __init__(
        self,
        message: str | None = None,
        detail: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message or self.message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInputAPIError(APIException):
    """Exception raised when pet data is rejected by the registry."""

    status_code = 400
    error_type = "invalid_input"
    message = "Invalid pet data"


class CallerRequiredError(APIException):
    """Exception raised when a request carries no caller identity."""

    status_code = 401
    error_type = "caller_required"
    message = "Caller identity required"


class ForbiddenError(APIException):
    """Exception raised when the caller may not perform the operation."""

    status_code = 403
    error_type = "unauthorized"
    message = "Operation not permitted for this caller"


class NotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    status_code = 404
    error_type = "not_found"
    message = "Resource not found"


class ConflictError(APIException):
    """Exception raised when a request conflicts with existing state."""

    status_code = 409
    error_type = "conflict"
    message = "Resource already exists or state conflict"


_ERROR_KIND_EXCEPTIONS: dict[ErrorKind, type[APIException]] = {
    ErrorKind.INVALID_INPUT: InvalidInputAPIError,
    ErrorKind.DUPLICATE_RECORD: ConflictError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.UNAUTHORIZED: ForbiddenError,
}


def raise_for_result(result: RegistryResult) -> RegistryResult:
    """
    Raise the API exception matching a failed registry result.

    Returns:
        The result unchanged when it succeeded
    """
    if result.ok:
        return result
    exc_class = _ERROR_KIND_EXCEPTIONS.get(result.error, APIException)
    raise exc_class(message=result.message, detail=result.error.value if result.error else None)
