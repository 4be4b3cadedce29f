"""Customer records: models, stores, listing, and lifecycle operations.

Usage:
    from customer_api.customers import CustomerService, InMemoryCustomerStore

    store = InMemoryCustomerStore()
    service = CustomerService(store)
    customer = await service.create(CustomerDraft(name="Ada", email="ada@example.com"))
"""

from customer_api.customers.bulk import (
    BulkCreateCoordinator,
    BulkCreateError,
    BulkCreateResult,
    CreateFailed,
    CreateOutcome,
    CreateSucceeded,
)
from customer_api.customers.engine import QueryEngine
from customer_api.customers.generator import RandomCustomerGenerator
from customer_api.customers.guard import UniquenessGuard
from customer_api.customers.models import Customer, CustomerChanges, CustomerDraft
from customer_api.customers.query import (
    CustomerPredicate,
    FilterPipeline,
    SortField,
    SortOrder,
    SortResolver,
)
from customer_api.customers.service import CustomerService
from customer_api.customers.soft_delete import SoftDeleteManager
from customer_api.customers.store import CustomerStore
from customer_api.customers.stores import InMemoryCustomerStore, PostgresCustomerStore

__all__ = [
    "BulkCreateCoordinator",
    "BulkCreateError",
    "BulkCreateResult",
    "CreateFailed",
    "CreateOutcome",
    "CreateSucceeded",
    "Customer",
    "CustomerChanges",
    "CustomerDraft",
    "CustomerPredicate",
    "CustomerService",
    "CustomerStore",
    "FilterPipeline",
    "InMemoryCustomerStore",
    "PostgresCustomerStore",
    "QueryEngine",
    "RandomCustomerGenerator",
    "SoftDeleteManager",
    "SortField",
    "SortOrder",
    "SortResolver",
    "UniquenessGuard",
]
