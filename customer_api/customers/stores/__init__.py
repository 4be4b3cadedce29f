"""Customer store implementations."""

from customer_api.customers.store import CustomerStore
from customer_api.customers.stores.inmemory import InMemoryCustomerStore
from customer_api.customers.stores.postgres import PostgresCustomerStore

__all__ = [
    "CustomerStore",
    "InMemoryCustomerStore",
    "PostgresCustomerStore",
]
