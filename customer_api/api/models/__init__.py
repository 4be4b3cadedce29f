"""API request and response models."""

from customer_api.api.models.customers import (
    BulkCreateErrorItem,
    BulkCreateRequest,
    BulkCreateResponse,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from customer_api.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from customer_api.api.models.health import ComponentHealth, HealthResponse
from customer_api.api.models.pagination import PaginatedResponse

__all__ = [
    "BulkCreateErrorItem",
    "BulkCreateRequest",
    "BulkCreateResponse",
    "ComponentHealth",
    "CustomerCreate",
    "CustomerResponse",
    "CustomerUpdate",
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "PaginatedResponse",
]
