"""CustomerStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from customer_api.customers.models import Customer
from customer_api.customers.query import CustomerPredicate, SortOrder


class CustomerStore(ABC):
    """Abstract interface for customer storage.

    Implementations enforce that no two active customers share an email
    and raise errors from ``customer_api.db.errors`` only.
    """

    @abstractmethod
    async def insert(self, customer: Customer) -> Customer:
        """Persist a new customer.

        Raises:
            ConflictError: If an active customer already has the email,
                or the id is already stored.
            ValidationError: If a field does not fit the backing storage.
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """Replace a stored customer with the given state.

        Raises:
            NotFoundError: If no customer has this id.
            ConflictError: If another active customer has the email.
        """
        pass

    @abstractmethod
    async def find_by_id(
        self,
        customer_id: UUID,
        *,
        include_deleted: bool = False,
    ) -> Customer | None:
        """Get a customer by id."""
        pass

    @abstractmethod
    async def find_by_email(
        self,
        email: str,
        *,
        active_only: bool = True,
    ) -> Customer | None:
        """Get a customer by exact email."""
        pass

    @abstractmethod
    async def query(
        self,
        predicate: CustomerPredicate,
        order: SortOrder,
        skip: int,
        take: int,
    ) -> tuple[list[Customer], int]:
        """Return one ordered page of matching customers and the total match count."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check whether the store is reachable."""
        pass
