"""Email uniqueness check among active customers."""

from uuid import UUID

from customer_api.customers.store import CustomerStore
from customer_api.db.errors import ConflictError
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)


class UniquenessGuard:
    """Rejects an email already held by another active customer.

    The check reads the store at write time. It is not a lock: the
    store's own uniqueness constraint still decides concurrent races.
    """

    def __init__(self, store: CustomerStore) -> None:
        self._store = store

    async def ensure_email_available(
        self,
        email: str,
        exclude_id: UUID | None = None,
    ) -> None:
        """Raise ConflictError if an active customer other than exclude_id has the email."""
        holder = await self._store.find_by_email(email, active_only=True)
        if holder is None or holder.id == exclude_id:
            return

        logger.info(
            "email_conflict",
            email=email,
            holder_id=str(holder.id),
        )
        raise ConflictError(f"Email '{email}' is already in use", email=email)
