"""API exception hierarchy for consistent error handling.

All API exceptions inherit from CustomerAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses. Store errors are
mapped onto this hierarchy by ``from_store_error``.
"""

from customer_api.api.models.errors import ErrorCode
from customer_api.db.errors import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)


class CustomerAPIError(Exception):
    """Base exception for all API errors.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(CustomerAPIError):
    """Raised when request validation fails."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class CustomerNotFoundError(CustomerAPIError):
    """Raised when a customer id is unknown or soft-deleted."""

    status_code = 404
    error_code = ErrorCode.CUSTOMER_NOT_FOUND


class EmailConflictError(CustomerAPIError):
    """Raised when the email belongs to another active customer."""

    status_code = 409
    error_code = ErrorCode.EMAIL_CONFLICT


class StoreUnavailableError(CustomerAPIError):
    """Raised when the store cannot serve the request."""

    status_code = 503
    error_code = ErrorCode.STORE_UNAVAILABLE


def from_store_error(exc: StoreError) -> CustomerAPIError:
    """Map a store error onto the API error with the matching status."""
    if isinstance(exc, ValidationError):
        return InvalidRequestError(exc.message)
    if isinstance(exc, NotFoundError):
        return CustomerNotFoundError(exc.message)
    if isinstance(exc, ConflictError):
        return EmailConflictError(exc.message)
    return StoreUnavailableError("Customer store is unavailable")
