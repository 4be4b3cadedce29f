"""Unit tests for SoftDeleteManager."""

from unittest.mock import AsyncMock

import pytest

from customer_api.customers.engine import QueryEngine
from customer_api.customers.guard import UniquenessGuard
from customer_api.customers.soft_delete import SoftDeleteManager
from customer_api.customers.stores.inmemory import InMemoryCustomerStore
from tests.factories import CustomerFactory


@pytest.fixture
def manager(store: InMemoryCustomerStore) -> SoftDeleteManager:
    return SoftDeleteManager(store)


class TestSoftDelete:
    """Tests for soft_delete."""

    @pytest.mark.asyncio
    async def test_marks_deleted_and_persists(
        self, manager: SoftDeleteManager, store: InMemoryCustomerStore
    ) -> None:
        """Should mark the customer deleted and persist it."""
        customer = CustomerFactory.create()
        await store.insert(customer)
        before = customer.updated_at

        result = await manager.soft_delete(customer)

        assert result.is_deleted is True
        assert result.updated_at >= before
        stored = await store.find_by_id(customer.id, include_deleted=True)
        assert stored.is_deleted is True

    @pytest.mark.asyncio
    async def test_deleted_customer_drops_out_of_reads(
        self, manager: SoftDeleteManager, store: InMemoryCustomerStore
    ) -> None:
        """Should hide the customer from subsequent reads."""
        customer = CustomerFactory.create(email="bye@example.com")
        await store.insert(customer)

        await manager.soft_delete(customer)

        assert await store.find_by_id(customer.id) is None
        assert await store.find_by_email("bye@example.com") is None
        _, total = await QueryEngine(store).list(skip=0, take=10)
        assert total == 0
        await UniquenessGuard(store).ensure_email_available("bye@example.com")

    @pytest.mark.asyncio
    async def test_already_deleted_is_not_written(self) -> None:
        """Should not write an already deleted customer again."""
        store = AsyncMock()
        customer = CustomerFactory.create(is_deleted=True)

        result = await SoftDeleteManager(store).soft_delete(customer)

        assert result is customer
        store.update.assert_not_called()
