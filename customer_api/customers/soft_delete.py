"""Soft deletion of customers."""

from customer_api.customers.models import Customer
from customer_api.customers.store import CustomerStore
from customer_api.observability.logging import get_logger
from customer_api.observability.metrics import CUSTOMERS_DELETED

logger = get_logger(__name__)


class SoftDeleteManager:
    """Marks customers deleted without removing their rows."""

    def __init__(self, store: CustomerStore) -> None:
        self._store = store

    async def soft_delete(self, customer: Customer, actor: str | None = None) -> Customer:
        """Flag the customer as deleted and persist it.

        An already-deleted customer is returned as is, without a write.
        """
        if customer.is_deleted:
            return customer

        customer.soft_delete(actor)
        await self._store.update(customer)
        CUSTOMERS_DELETED.inc()
        logger.info("customer_soft_deleted", customer_id=str(customer.id))
        return customer
