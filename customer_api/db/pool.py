"""PostgreSQL connection pool management.

Provides the connection pool shared by the PostgreSQL customer store.
"""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import asyncpg

from customer_api.db.errors import ConnectionError
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)

# Failures that mean the database could not serve the request
TRANSIENT_ERRORS = (OSError, asyncpg.PostgresError, asyncpg.InterfaceError)


def database_url_from_env() -> str:
    """Resolve the database DSN from the environment.

    CUSTOMER_API_DATABASE_URL wins over DATABASE_URL; without either the
    DSN is assembled from POSTGRES_* parts with local defaults.
    """
    dsn = os.environ.get("CUSTOMER_API_DATABASE_URL") or os.environ.get("DATABASE_URL")
    if dsn:
        return dsn

    host = os.environ.get("POSTGRES_HOST", "localhost")
    port = os.environ.get("POSTGRES_PORT", "5432")
    user = os.environ.get("POSTGRES_USER", "customers")
    password = os.environ.get("POSTGRES_PASSWORD", "customers")
    database = os.environ.get("POSTGRES_DB", "customers")

    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


def async_driver_url(dsn: str) -> str:
    """Point a plain postgresql:// DSN at SQLAlchemy's asyncpg dialect."""
    for scheme in ("postgresql://", "postgres://"):
        if dsn.startswith(scheme):
            return "postgresql+asyncpg://" + dsn[len(scheme):]
    return dsn


class PostgresPool:
    """Manages an asyncpg connection pool with health checks.

    Usage:
        pool = PostgresPool(dsn="postgresql://...")
        await pool.connect()
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch("SELECT * FROM customers")
        finally:
            await pool.close()
    """

    def __init__(
        self,
        dsn: str | None = None,
        min_size: int = 2,
        max_size: int = 10,
        max_inactive_connection_lifetime: float = 300.0,
        command_timeout: float = 30.0,
    ) -> None:
        """Initialize pool configuration.

        Args:
            dsn: Database connection string. Falls back to environment variables.
            min_size: Minimum number of connections to keep open.
            max_size: Maximum number of connections in the pool.
            max_inactive_connection_lifetime: Close connections idle longer than this (seconds).
            command_timeout: Default timeout for queries (seconds).
        """
        self._dsn = dsn or database_url_from_env()
        self._min_size = min_size
        self._max_size = max_size
        self._max_inactive_connection_lifetime = max_inactive_connection_lifetime
        self._command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        """Initialize the connection pool."""
        if self._pool is not None:
            return

        try:
            self._pool = await asyncpg.create_pool(
                dsn=self._dsn,
                min_size=self._min_size,
                max_size=self._max_size,
                max_inactive_connection_lifetime=self._max_inactive_connection_lifetime,
                command_timeout=self._command_timeout,
            )
            logger.info(
                "postgres_pool_connected",
                min_size=self._min_size,
                max_size=self._max_size,
            )
        except TRANSIENT_ERRORS as e:
            logger.error("postgres_pool_connection_failed", error=str(e))
            raise ConnectionError(f"Failed to connect to PostgreSQL: {e}", cause=e) from e

    async def close(self) -> None:
        """Close the connection pool gracefully."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("postgres_pool_closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a connection from the pool.

        Connects lazily on first use. Errors raised inside the block are
        left to the caller, which maps constraint violations itself.
        """
        if self._pool is None:
            await self.connect()

        try:
            connection = await self._pool.acquire()
        except TRANSIENT_ERRORS as e:
            logger.error("postgres_acquire_failed", error=str(e))
            raise ConnectionError(f"PostgreSQL unavailable: {e}", cause=e) from e

        try:
            yield connection
        finally:
            await self._pool.release(connection)

    async def health_check(self) -> bool:
        """Check if the pool is healthy.

        Returns:
            True if pool is connected and responsive.
        """
        if self._pool is None:
            return False

        try:
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except TRANSIENT_ERRORS as e:
            logger.warning("postgres_health_check_failed", error=str(e))
            return False

    @property
    def is_connected(self) -> bool:
        """Check if pool is initialized."""
        return self._pool is not None
