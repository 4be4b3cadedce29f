"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, out-of-range values)."""

    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    """The customer does not exist or has been deleted."""

    EMAIL_CONFLICT = "EMAIL_CONFLICT"
    """Another active customer already uses the email."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    """The customer store could not be reached."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level detail for validation failures."""

    field: str | None = None
    """The field that caused the error, if applicable."""

    message: str
    """Human-readable error description."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    details: list[ErrorDetail] | None = None
    """Additional error details for validation failures."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "EMAIL_CONFLICT",
                "message": "Email 'ada@example.com' is already in use",
                "details": null
            }
        }
    """

    error: ErrorBody
