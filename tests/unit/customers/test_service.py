"""Unit tests for CustomerService."""

from uuid import uuid4

import pytest

from customer_api.customers.models import CustomerChanges, CustomerDraft
from customer_api.customers.query import FilterPipeline, SortOrder
from customer_api.customers.service import CustomerService
from customer_api.customers.stores.inmemory import InMemoryCustomerStore
from customer_api.db.errors import ConflictError, NotFoundError
from tests.factories import DraftFactory

EVERYTHING = (FilterPipeline().build(), SortOrder(), 0, 100)


@pytest.fixture
def service(store: InMemoryCustomerStore) -> CustomerService:
    return CustomerService(store)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_persists(
        self, service: CustomerService, store: InMemoryCustomerStore
    ) -> None:
        """Should persist a created customer."""
        customer = await service.create(DraftFactory.create(email="new@example.com"))

        stored = await store.find_by_id(customer.id)
        assert stored is not None
        assert stored.email == "new@example.com"
        assert stored.is_deleted is False

    @pytest.mark.asyncio
    async def test_duplicate_active_email_leaves_store_unchanged(
        self, service: CustomerService, store: InMemoryCustomerStore
    ) -> None:
        """Should leave the store unchanged after an email conflict."""
        await service.create(DraftFactory.create(email="john@x.com"))
        _, before = await store.query(*EVERYTHING)

        with pytest.raises(ConflictError):
            await service.create(DraftFactory.create(email="john@x.com"))

        _, after = await store.query(*EVERYTHING)
        assert before == after == 1

    @pytest.mark.asyncio
    async def test_email_reusable_after_delete(
        self, service: CustomerService, store: InMemoryCustomerStore
    ) -> None:
        """Should accept an email released by a delete."""
        deleted = await service.create(DraftFactory.create(email="john@x.com"))
        await service.delete(deleted.id)
        active = await service.create(DraftFactory.create(email="john@x.com"))

        with pytest.raises(ConflictError):
            await service.create(DraftFactory.create(email="john@x.com"))

        await service.delete(active.id)
        replacement = await service.create(DraftFactory.create(email="john@x.com"))

        holder = await store.find_by_email("john@x.com")
        assert holder.id == replacement.id
        items, total = await store.query(*EVERYTHING)
        assert total == 1
        assert [c.email for c in items] == ["john@x.com"]


class TestGet:
    """Tests for get."""

    @pytest.mark.asyncio
    async def test_unknown_id(self, service: CustomerService) -> None:
        """Should raise NotFoundError for an unknown id."""
        with pytest.raises(NotFoundError):
            await service.get(uuid4())

    @pytest.mark.asyncio
    async def test_deleted_is_not_found(self, service: CustomerService) -> None:
        """Should treat a deleted customer as not found."""
        customer = await service.create(DraftFactory.create())
        await service.delete(customer.id)

        with pytest.raises(NotFoundError):
            await service.get(customer.id)


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, service: CustomerService) -> None:
        """Should replace fields on update."""
        customer = await service.create(DraftFactory.create(address="Somewhere"))

        updated = await service.update(
            customer.id,
            CustomerChanges(name="Renamed", email=customer.email),
        )

        assert updated.name == "Renamed"
        assert updated.address is None
        assert updated.updated_at >= updated.created_at
        assert (await service.get(customer.id)).name == "Renamed"

    @pytest.mark.asyncio
    async def test_update_to_taken_email_conflicts(self, service: CustomerService) -> None:
        """Should raise ConflictError when updating onto a taken email."""
        await service.create(DraftFactory.create(email="taken@example.com"))
        other = await service.create(DraftFactory.create(email="mine@example.com"))

        with pytest.raises(ConflictError):
            await service.update(
                other.id,
                CustomerChanges(name="Other", email="taken@example.com"),
            )

        assert (await service.get(other.id)).email == "mine@example.com"

    @pytest.mark.asyncio
    async def test_update_deleted_is_not_found(self, service: CustomerService) -> None:
        """Should refuse to update a deleted customer."""
        customer = await service.create(DraftFactory.create())
        await service.delete(customer.id)

        with pytest.raises(NotFoundError):
            await service.update(customer.id, CustomerChanges(name="X", email="x@example.com"))


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_twice_is_not_found(self, service: CustomerService) -> None:
        """Should raise NotFoundError on a second delete."""
        customer = await service.create(CustomerDraft(name="Once", email="once@example.com"))
        await service.delete(customer.id)

        with pytest.raises(NotFoundError):
            await service.delete(customer.id)
