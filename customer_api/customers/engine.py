"""Paginated customer listing."""

import time
from datetime import datetime

from customer_api.customers.models import Customer
from customer_api.customers.query import FilterPipeline, SortResolver
from customer_api.customers.store import CustomerStore
from customer_api.db.errors import ValidationError
from customer_api.observability.logging import get_logger
from customer_api.observability.metrics import QUERY_LATENCY

logger = get_logger(__name__)


class QueryEngine:
    """Filters, sorts and windows active customers.

    Filtering always excludes soft-deleted records before the optional
    search, email and date filters. The total count is taken after
    filtering and before the window is applied.
    """

    def __init__(
        self,
        store: CustomerStore,
        max_page_size: int = 100,
        filters: FilterPipeline | None = None,
        sorter: SortResolver | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            store: Backend to read customers from
            max_page_size: Upper bound for ``take``; larger values are clamped
            filters: Predicate builder (default FilterPipeline)
            sorter: Sort parameter resolver (default SortResolver)
        """
        self._store = store
        self._max_page_size = max_page_size
        self._filters = filters or FilterPipeline()
        self._sorter = sorter or SortResolver()

    async def list(
        self,
        skip: int,
        take: int,
        search_term: str | None = None,
        email_filter: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Customer], int]:
        """List one page of active customers.

        Returns:
            Tuple of (customers on the page, total matching customers)

        Raises:
            ValidationError: If take is zero or negative
        """
        if take <= 0:
            raise ValidationError(f"take must be positive, got {take}")

        skip = max(skip, 0)
        take = min(take, self._max_page_size)

        predicate = self._filters.build(
            search_term=search_term,
            email_filter=email_filter,
            date_from=date_from,
            date_to=date_to,
        )
        order = self._sorter.resolve(sort_by, sort_order)

        start = time.perf_counter()
        items, total = await self._store.query(predicate, order, skip, take)
        QUERY_LATENCY.observe(time.perf_counter() - start)

        logger.debug(
            "customers_listed",
            skip=skip,
            take=take,
            sort_field=order.field.value,
            descending=order.descending,
            clauses=len(predicate.clauses),
            returned=len(items),
            total_count=total,
        )
        return items, total
