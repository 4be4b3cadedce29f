"""Unit tests for QueryEngine."""

from datetime import UTC, datetime, timedelta

import pytest

from customer_api.customers.engine import QueryEngine
from customer_api.customers.stores.inmemory import InMemoryCustomerStore
from customer_api.db.errors import ValidationError
from tests.factories import CustomerFactory


@pytest.fixture
def engine(store: InMemoryCustomerStore) -> QueryEngine:
    return QueryEngine(store, max_page_size=100)


async def _seed(store: InMemoryCustomerStore, names: list[str]) -> list:
    customers = CustomerFactory.create_series(names)
    for customer in customers:
        await store.insert(customer)
    return customers


class TestFiltering:
    """Tests for filter semantics."""

    @pytest.mark.asyncio
    async def test_search_counts_before_pagination(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should count all matches before windowing."""
        names = [f"Person {i}" for i in range(12)]
        names += ["John Smith", "Anna Smithson", "Blacksmith Joe"]
        await _seed(store, names)

        items, total = await engine.list(skip=0, take=10, search_term="smith")

        assert total == 3
        assert len(items) <= 10
        assert {c.name for c in items} == {"John Smith", "Anna Smithson", "Blacksmith Joe"}

    @pytest.mark.asyncio
    async def test_total_independent_of_window(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should report the same total for every window."""
        await _seed(store, [f"Person {i}" for i in range(7)])

        _, first_total = await engine.list(skip=0, take=2)
        page, last_total = await engine.list(skip=6, take=2)

        assert first_total == last_total == 7
        assert len(page) == 1

    @pytest.mark.asyncio
    async def test_deleted_customers_never_listed(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should never list deleted customers."""
        await _seed(store, ["Alive"])
        await store.insert(CustomerFactory.create(name="Gone", is_deleted=True))

        items, total = await engine.list(skip=0, take=10)

        assert total == 1
        assert [c.name for c in items] == ["Alive"]

    @pytest.mark.asyncio
    async def test_email_filter_exact(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should match the email filter exactly."""
        target = CustomerFactory.create(email="exact@example.com")
        await store.insert(target)
        await store.insert(CustomerFactory.create(email="exact@example.com.au"))

        items, total = await engine.list(skip=0, take=10, email_filter="exact@example.com")

        assert total == 1
        assert items[0].id == target.id

    @pytest.mark.asyncio
    async def test_date_range(self, engine: QueryEngine, store: InMemoryCustomerStore) -> None:
        """Should keep only customers created inside the range."""
        base = datetime(2025, 3, 1, tzinfo=UTC)
        for offset in range(5):
            await store.insert(CustomerFactory.create(created_at=base + timedelta(days=offset)))

        _, total = await engine.list(
            skip=0,
            take=10,
            date_from=base + timedelta(days=1),
            date_to=base + timedelta(days=3),
        )

        assert total == 3


class TestSorting:
    """Tests for sort semantics."""

    @pytest.mark.asyncio
    async def test_default_is_newest_first(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should list newest customers first by default."""
        customers = await _seed(store, ["First", "Second", "Third"])

        items, _ = await engine.list(skip=0, take=10)

        assert [c.id for c in items] == [c.id for c in reversed(customers)]

    @pytest.mark.asyncio
    async def test_unknown_sort_key_is_not_an_error(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should fall back to the default order for an unknown key."""
        customers = await _seed(store, ["First", "Second"])

        items, _ = await engine.list(skip=0, take=10, sort_by="favourite_colour", sort_order="asc")

        assert [c.id for c in items] == [customers[1].id, customers[0].id]

    @pytest.mark.asyncio
    async def test_sort_by_email_ascending(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should sort by email ascending."""
        for email in ["c@example.com", "A@example.com", "b@example.com"]:
            await store.insert(CustomerFactory.create(email=email))

        items, _ = await engine.list(skip=0, take=10, sort_by="email", sort_order="asc")

        assert [c.email for c in items] == ["A@example.com", "b@example.com", "c@example.com"]

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap_on_ties(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should keep pages disjoint when timestamps tie."""
        moment = datetime(2025, 1, 1, tzinfo=UTC)
        for _ in range(6):
            await store.insert(CustomerFactory.create(name="Same", created_at=moment))

        seen = []
        for skip in range(0, 6, 2):
            page, _ = await engine.list(skip=skip, take=2, sort_by="name")
            seen.extend(c.id for c in page)

        assert len(seen) == len(set(seen)) == 6


class TestWindowPolicy:
    """Tests for skip/take edge policy."""

    @pytest.mark.asyncio
    async def test_negative_skip_is_clamped(
        self, engine: QueryEngine, store: InMemoryCustomerStore
    ) -> None:
        """Should treat a negative skip as zero."""
        await _seed(store, ["A", "B"])

        items, _ = await engine.list(skip=-5, take=10)

        assert len(items) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("take", [0, -1])
    async def test_non_positive_take_rejected(self, engine: QueryEngine, take: int) -> None:
        """Should reject a take of zero or less."""
        with pytest.raises(ValidationError):
            await engine.list(skip=0, take=take)

    @pytest.mark.asyncio
    async def test_take_clamped_to_max(self, store: InMemoryCustomerStore) -> None:
        """Should clamp take to the maximum page size."""
        engine = QueryEngine(store, max_page_size=3)
        await _seed(store, [f"P{i}" for i in range(5)])

        items, total = await engine.list(skip=0, take=50)

        assert len(items) == 3
        assert total == 5
