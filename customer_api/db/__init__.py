"""Database utilities for the customer API.

This module contains:
- Connection pool management
- Store error hierarchy
- Alembic migrations
"""

from customer_api.db.errors import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "StoreError",
    "ConnectionError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
]
