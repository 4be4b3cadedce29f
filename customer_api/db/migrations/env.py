"""Alembic environment for the customers schema.

Migrations target the same database the application would connect to:
``storage.customers.connection_url`` from settings when set, otherwise
the DSN resolved from the environment by the connection pool.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from customer_api.config import get_settings
from customer_api.db.pool import async_driver_url, database_url_from_env

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Revisions use explicit op calls; there is no model metadata to diff
target_metadata = None


def customers_database_url() -> str:
    """Database URL for the customer store, on the asyncpg dialect."""
    dsn = get_settings().storage.customers.connection_url or database_url_from_env()
    return async_driver_url(dsn)


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=customers_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations over a single asyncpg connection."""
    engine = create_async_engine(customers_database_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
