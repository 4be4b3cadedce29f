"""Dependency injection for API routes.

Provides FastAPI dependencies for the customer store and the services
built on it. The backend is chosen by ``storage.customers.backend``;
instances are created once and reused, and every dependency can be
overridden for testing.
"""

from typing import Annotated

from fastapi import Depends

from customer_api.config import Settings, get_settings
from customer_api.customers.bulk import BulkCreateCoordinator
from customer_api.customers.engine import QueryEngine
from customer_api.customers.service import CustomerService
from customer_api.customers.store import CustomerStore
from customer_api.customers.stores.inmemory import InMemoryCustomerStore
from customer_api.customers.stores.postgres import PostgresCustomerStore
from customer_api.db.pool import PostgresPool
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)

# Connection pool - shared by the PostgreSQL store
_postgres_pool: PostgresPool | None = None

# Store instance - created once and reused
_customer_store: CustomerStore | None = None


async def get_postgres_pool(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PostgresPool:
    """Get the shared PostgreSQL connection pool.

    Creates and connects the pool on first access.

    Returns:
        Connected PostgresPool instance
    """
    global _postgres_pool
    if _postgres_pool is None:
        config = settings.storage.customers
        pool = PostgresPool(
            dsn=config.connection_url,
            min_size=config.min_pool_size,
            max_size=config.max_pool_size,
            max_inactive_connection_lifetime=config.max_inactive_connection_lifetime,
            command_timeout=config.command_timeout,
        )
        await pool.connect()
        _postgres_pool = pool
    return _postgres_pool


async def get_customer_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CustomerStore:
    """Get the CustomerStore instance for the configured backend.

    Raises:
        ConnectionError: If the PostgreSQL backend is selected and unreachable
    """
    global _customer_store
    if _customer_store is None:
        backend = settings.storage.customers.backend
        if backend == "postgres":
            pool = await get_postgres_pool(settings)
            _customer_store = PostgresCustomerStore(pool)
        else:
            _customer_store = InMemoryCustomerStore()
        logger.info("customer_store_initialized", store_type=backend)
    return _customer_store


def get_customer_service(
    store: Annotated[CustomerStore, Depends(get_customer_store)],
) -> CustomerService:
    """Get a CustomerService bound to the store."""
    return CustomerService(store)


def get_query_engine(
    store: Annotated[CustomerStore, Depends(get_customer_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> QueryEngine:
    """Get a QueryEngine bound to the store."""
    return QueryEngine(store, max_page_size=settings.customers.max_page_size)


def get_bulk_coordinator(
    service: Annotated[CustomerService, Depends(get_customer_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BulkCreateCoordinator:
    """Get a BulkCreateCoordinator using the configured limits."""
    return BulkCreateCoordinator(
        service,
        max_bulk_count=settings.customers.max_bulk_count,
        concurrency=settings.customers.bulk_concurrency,
    )


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
CustomerStoreDep = Annotated[CustomerStore, Depends(get_customer_store)]
CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
QueryEngineDep = Annotated[QueryEngine, Depends(get_query_engine)]
BulkCreateCoordinatorDep = Annotated[BulkCreateCoordinator, Depends(get_bulk_coordinator)]


async def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing and on shutdown. Closes the pool before resetting.
    """
    global _postgres_pool, _customer_store

    if _postgres_pool is not None:
        await _postgres_pool.close()
        _postgres_pool = None

    _customer_store = None
    get_settings.cache_clear()
