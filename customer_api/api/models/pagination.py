"""Paginated list response model."""

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results with page-based navigation fields."""

    items: list[T] = Field(default_factory=list)
    total_count: int = Field(..., ge=0, description="Matching items across all pages")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(
        cls,
        items: Sequence[T],
        total_count: int,
        page: int,
        page_size: int,
    ) -> "PaginatedResponse[T]":
        """Derive navigation fields from the total count and page position."""
        total_pages = math.ceil(total_count / page_size)
        return cls(
            items=list(items),
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )
