"""Customer lifecycle operations."""

from uuid import UUID

from customer_api.customers.guard import UniquenessGuard
from customer_api.customers.models import Customer, CustomerChanges, CustomerDraft
from customer_api.customers.soft_delete import SoftDeleteManager
from customer_api.customers.store import CustomerStore
from customer_api.db.errors import ConflictError, NotFoundError
from customer_api.observability.logging import get_logger
from customer_api.observability.metrics import CUSTOMERS_CREATED, EMAIL_CONFLICTS

logger = get_logger(__name__)


class CustomerService:
    """Create, read, update and soft-delete single customers.

    Soft-deleted customers behave as absent for every operation here.
    """

    def __init__(
        self,
        store: CustomerStore,
        guard: UniquenessGuard | None = None,
        soft_delete: SoftDeleteManager | None = None,
    ) -> None:
        self._store = store
        self._guard = guard or UniquenessGuard(store)
        self._soft_delete = soft_delete or SoftDeleteManager(store)

    async def create(self, draft: CustomerDraft, *, source: str = "api") -> Customer:
        """Create a customer from a validated draft.

        Args:
            draft: Customer fields
            source: Metrics label for where the create came from

        Raises:
            ConflictError: If an active customer already has the email
            ValidationError: If the store rejects a field value
        """
        customer = Customer.from_draft(draft)

        try:
            await self._guard.ensure_email_available(customer.email)
            await self._store.insert(customer)
        except ConflictError:
            EMAIL_CONFLICTS.labels(operation="create").inc()
            raise

        CUSTOMERS_CREATED.labels(source=source).inc()
        logger.info("customer_created", customer_id=str(customer.id), source=source)
        return customer

    async def get(self, customer_id: UUID) -> Customer:
        """Get an active customer.

        Raises:
            NotFoundError: If the customer does not exist or is deleted
        """
        customer = await self._store.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer {customer_id} not found")
        return customer

    async def update(self, customer_id: UUID, changes: CustomerChanges) -> Customer:
        """Replace the mutable fields of an active customer.

        Raises:
            NotFoundError: If the customer does not exist or is deleted
            ConflictError: If the new email belongs to another active customer
        """
        customer = await self.get(customer_id)

        try:
            if changes.email != customer.email:
                await self._guard.ensure_email_available(changes.email, exclude_id=customer.id)
            customer.apply(changes)
            await self._store.update(customer)
        except ConflictError:
            EMAIL_CONFLICTS.labels(operation="update").inc()
            raise

        logger.info("customer_updated", customer_id=str(customer.id))
        return customer

    async def delete(self, customer_id: UUID, actor: str | None = None) -> None:
        """Soft-delete an active customer.

        Raises:
            NotFoundError: If the customer does not exist or is already deleted
        """
        customer = await self.get(customer_id)
        await self._soft_delete.soft_delete(customer, actor)
