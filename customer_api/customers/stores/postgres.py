"""PostgreSQL implementation of CustomerStore.

Uses asyncpg for async database access. Email uniqueness among active
customers is enforced by the partial unique index
``ix_customers_email_active``; a violation surfaces as ConflictError.
"""

from typing import Any
from uuid import UUID

import asyncpg

from customer_api.customers.models import Customer
from customer_api.customers.query import (
    ActiveOnly,
    CreatedFrom,
    CreatedTo,
    CustomerPredicate,
    EmailEquals,
    SearchTerm,
    SortField,
    SortOrder,
)
from customer_api.customers.store import CustomerStore
from customer_api.db.errors import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    ValidationError,
)
from customer_api.db.pool import TRANSIENT_ERRORS, PostgresPool
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = """
    id, name, email, phone, address, is_deleted,
    created_at, updated_at, created_by, updated_by
"""

_SORT_EXPRESSIONS = {
    SortField.NAME: "lower(name)",
    SortField.EMAIL: "lower(email)",
    SortField.CREATED_AT: "created_at",
}

EMAIL_INDEX = "ix_customers_email_active"


def render_predicate(predicate: CustomerPredicate, params: list[Any]) -> str:
    """Render a predicate as a WHERE condition, appending bind values to params."""
    conditions: list[str] = []
    for clause in predicate.clauses:
        match clause:
            case ActiveOnly():
                conditions.append("is_deleted = false")
            case SearchTerm(term=term):
                params.append(term)
                n = len(params)
                conditions.append(
                    f"(strpos(lower(name), lower(${n})) > 0"
                    f" OR strpos(lower(email), lower(${n})) > 0)"
                )
            case EmailEquals(email=email):
                params.append(email)
                conditions.append(f"email = ${len(params)}")
            case CreatedFrom(at=at):
                params.append(at)
                conditions.append(f"created_at >= ${len(params)}")
            case CreatedTo(at=at):
                params.append(at)
                conditions.append(f"created_at <= ${len(params)}")
            case _:
                raise TypeError(f"Unsupported filter clause: {clause!r}")
    return " AND ".join(conditions) if conditions else "true"


def render_order(order: SortOrder) -> str:
    """Render a sort order as an ORDER BY list with an id tie-break."""
    direction = "DESC" if order.descending else "ASC"
    return f"{_SORT_EXPRESSIONS[order.field]} {direction}, id {direction}"


class PostgresCustomerStore(CustomerStore):
    """PostgreSQL implementation of CustomerStore.

    Uses asyncpg connection pool for efficient database access.
    Rows are never deleted; soft deletion is an update of ``is_deleted``.
    """

    def __init__(self, pool: PostgresPool) -> None:
        """Initialize with connection pool.

        Args:
            pool: PostgreSQL connection pool
        """
        self._pool = pool

    async def insert(self, customer: Customer) -> Customer:
        """Persist a new customer."""
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    f"""
                    INSERT INTO customers ({_COLUMNS})
                    VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
                    """,
                    customer.id,
                    customer.name,
                    customer.email,
                    customer.phone,
                    customer.address,
                    customer.is_deleted,
                    customer.created_at,
                    customer.updated_at,
                    customer.created_by,
                    customer.updated_by,
                )
                logger.debug("customer_inserted", customer_id=str(customer.id))
                return customer
        except asyncpg.UniqueViolationError as e:
            raise self._conflict(customer, e) from e
        except asyncpg.DataError as e:
            raise ValidationError(f"Invalid customer data: {e}", cause=e) from e
        except TRANSIENT_ERRORS as e:
            logger.error(
                "postgres_insert_customer_error",
                customer_id=str(customer.id),
                error=str(e),
            )
            raise ConnectionError(f"Failed to insert customer: {e}", cause=e) from e

    async def update(self, customer: Customer) -> Customer:
        """Replace a stored customer with the given state."""
        try:
            async with self._pool.acquire() as conn:
                updated_id = await conn.fetchval(
                    """
                    UPDATE customers
                    SET name = $2, email = $3, phone = $4, address = $5,
                        is_deleted = $6, updated_at = $7, updated_by = $8
                    WHERE id = $1
                    RETURNING id
                    """,
                    customer.id,
                    customer.name,
                    customer.email,
                    customer.phone,
                    customer.address,
                    customer.is_deleted,
                    customer.updated_at,
                    customer.updated_by,
                )
        except asyncpg.UniqueViolationError as e:
            raise self._conflict(customer, e) from e
        except asyncpg.DataError as e:
            raise ValidationError(f"Invalid customer data: {e}", cause=e) from e
        except TRANSIENT_ERRORS as e:
            logger.error(
                "postgres_update_customer_error",
                customer_id=str(customer.id),
                error=str(e),
            )
            raise ConnectionError(f"Failed to update customer: {e}", cause=e) from e

        if updated_id is None:
            raise NotFoundError(f"Customer {customer.id} not found")
        logger.debug("customer_updated", customer_id=str(customer.id))
        return customer

    async def find_by_id(
        self,
        customer_id: UUID,
        *,
        include_deleted: bool = False,
    ) -> Customer | None:
        """Get a customer by id."""
        query = f"SELECT {_COLUMNS} FROM customers WHERE id = $1"
        if not include_deleted:
            query += " AND is_deleted = false"

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(query, customer_id)
        except TRANSIENT_ERRORS as e:
            logger.error(
                "postgres_get_customer_error",
                customer_id=str(customer_id),
                error=str(e),
            )
            raise ConnectionError(f"Failed to get customer: {e}", cause=e) from e

        return self._row_to_customer(row) if row else None

    async def find_by_email(
        self,
        email: str,
        *,
        active_only: bool = True,
    ) -> Customer | None:
        """Get a customer by exact email.

        With ``active_only=False`` the active holder is preferred, then
        the most recently created record.
        """
        query = f"SELECT {_COLUMNS} FROM customers WHERE email = $1"
        if active_only:
            query += " AND is_deleted = false"
        query += " ORDER BY is_deleted ASC, created_at DESC LIMIT 1"

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(query, email)
        except TRANSIENT_ERRORS as e:
            logger.error("postgres_get_customer_by_email_error", error=str(e))
            raise ConnectionError(f"Failed to get customer by email: {e}", cause=e) from e

        return self._row_to_customer(row) if row else None

    async def query(
        self,
        predicate: CustomerPredicate,
        order: SortOrder,
        skip: int,
        take: int,
    ) -> tuple[list[Customer], int]:
        """Return one ordered page of matching customers and the total match count.

        The count and the page are read in one repeatable-read snapshot.
        """
        params: list[Any] = []
        where = render_predicate(predicate, params)
        count_query = f"SELECT count(*) FROM customers WHERE {where}"
        page_query = (
            f"SELECT {_COLUMNS} FROM customers WHERE {where}"
            f" ORDER BY {render_order(order)}"
            f" LIMIT ${len(params) + 1} OFFSET ${len(params) + 2}"
        )

        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction(isolation="repeatable_read", readonly=True):
                    total = await conn.fetchval(count_query, *params)
                    rows = await conn.fetch(page_query, *params, take, skip)
        except TRANSIENT_ERRORS as e:
            logger.error("postgres_query_customers_error", error=str(e))
            raise ConnectionError(f"Failed to query customers: {e}", cause=e) from e

        return [self._row_to_customer(row) for row in rows], total

    async def health_check(self) -> bool:
        """Check whether the database answers."""
        return await self._pool.health_check()

    def _conflict(
        self, customer: Customer, error: asyncpg.UniqueViolationError
    ) -> ConflictError:
        """Map a unique violation to the constraint that caused it."""
        if error.constraint_name == EMAIL_INDEX:
            return ConflictError(
                f"Email '{customer.email}' is already in use",
                email=customer.email,
                cause=error,
            )
        return ConflictError(f"Customer {customer.id} already exists", cause=error)

    def _row_to_customer(self, row: asyncpg.Record) -> Customer:
        """Convert database row to Customer model."""
        return Customer(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
            is_deleted=row["is_deleted"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            created_by=row["created_by"],
            updated_by=row["updated_by"],
        )
