"""In-memory implementation of CustomerStore."""

import asyncio
from uuid import UUID

from customer_api.customers.models import Customer
from customer_api.customers.query import CustomerPredicate, SortOrder
from customer_api.customers.store import CustomerStore
from customer_api.db.errors import ConflictError, NotFoundError


class InMemoryCustomerStore(CustomerStore):
    """In-memory implementation of CustomerStore for testing and development.

    Uses dict storage with linear scan for queries. Writes are
    serialized by a lock so the email check and the write happen as one
    step. Stored records are copies, so callers cannot mutate them
    behind the store's back.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._customers: dict[UUID, Customer] = {}
        self._lock = asyncio.Lock()

    def _active_holder(self, email: str, exclude_id: UUID | None = None) -> Customer | None:
        for customer in self._customers.values():
            if customer.is_deleted or customer.id == exclude_id:
                continue
            if customer.email == email:
                return customer
        return None

    async def insert(self, customer: Customer) -> Customer:
        """Persist a new customer.

        An id already in the store is rejected, deleted or not.
        """
        async with self._lock:
            if customer.id in self._customers:
                raise ConflictError(f"Customer {customer.id} already exists")
            if not customer.is_deleted and self._active_holder(customer.email):
                raise ConflictError(
                    f"Email '{customer.email}' is already in use",
                    email=customer.email,
                )
            self._customers[customer.id] = customer.model_copy(deep=True)
        return customer

    async def update(self, customer: Customer) -> Customer:
        """Replace a stored customer with the given state."""
        async with self._lock:
            if customer.id not in self._customers:
                raise NotFoundError(f"Customer {customer.id} not found")
            if not customer.is_deleted and self._active_holder(customer.email, customer.id):
                raise ConflictError(
                    f"Email '{customer.email}' is already in use",
                    email=customer.email,
                )
            self._customers[customer.id] = customer.model_copy(deep=True)
        return customer

    async def find_by_id(
        self,
        customer_id: UUID,
        *,
        include_deleted: bool = False,
    ) -> Customer | None:
        """Get a customer by id."""
        customer = self._customers.get(customer_id)
        if customer is None:
            return None
        if customer.is_deleted and not include_deleted:
            return None
        return customer.model_copy(deep=True)

    async def find_by_email(
        self,
        email: str,
        *,
        active_only: bool = True,
    ) -> Customer | None:
        """Get a customer by exact email."""
        for customer in self._customers.values():
            if active_only and customer.is_deleted:
                continue
            if customer.email == email:
                return customer.model_copy(deep=True)
        return None

    async def query(
        self,
        predicate: CustomerPredicate,
        order: SortOrder,
        skip: int,
        take: int,
    ) -> tuple[list[Customer], int]:
        """Return one ordered page of matching customers and the total match count."""
        results = [c for c in self._customers.values() if predicate.matches(c)]
        results.sort(key=order.key, reverse=order.descending)
        page = results[skip : skip + take]
        return [c.model_copy(deep=True) for c in page], len(results)

    async def health_check(self) -> bool:
        """Always healthy."""
        return True
