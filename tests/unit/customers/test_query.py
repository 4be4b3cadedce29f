"""Unit tests for filter predicates and sort resolution."""

from datetime import UTC, datetime, timedelta

import pytest

from customer_api.customers.query import (
    DEFAULT_SORT,
    ActiveOnly,
    CreatedFrom,
    CreatedTo,
    EmailEquals,
    FilterPipeline,
    SearchTerm,
    SortField,
    SortOrder,
    SortResolver,
)
from tests.factories import CustomerFactory


class TestFilterPipeline:
    """Tests for FilterPipeline.build."""

    def test_always_excludes_deleted_first(self) -> None:
        """Should put the deleted-exclusion clause first."""
        predicate = FilterPipeline().build()
        assert predicate.clauses == (ActiveOnly(),)

    def test_clause_order_is_fixed(self) -> None:
        """Should emit clauses in a fixed order."""
        start = datetime(2025, 1, 1, tzinfo=UTC)
        end = datetime(2025, 2, 1, tzinfo=UTC)

        predicate = FilterPipeline().build(
            search_term="smith",
            email_filter="a@example.com",
            date_from=start,
            date_to=end,
        )

        assert predicate.clauses == (
            ActiveOnly(),
            SearchTerm("smith"),
            EmailEquals("a@example.com"),
            CreatedFrom(start),
            CreatedTo(end),
        )

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_strings_are_ignored(self, blank: str) -> None:
        """Should skip blank filter values."""
        predicate = FilterPipeline().build(search_term=blank, email_filter=blank)
        assert predicate.clauses == (ActiveOnly(),)

    def test_naive_dates_are_utc(self) -> None:
        """Should read naive date bounds as UTC."""
        predicate = FilterPipeline().build(date_from=datetime(2025, 1, 1))
        assert predicate.clauses[1] == CreatedFrom(datetime(2025, 1, 1, tzinfo=UTC))


class TestClauses:
    """Tests for individual clause matching."""

    def test_active_only(self) -> None:
        """Should match active customers only."""
        assert ActiveOnly().matches(CustomerFactory.create())
        assert not ActiveOnly().matches(CustomerFactory.create(is_deleted=True))

    def test_search_term_matches_name_or_email_ignoring_case(self) -> None:
        """Should match the term in name or email ignoring case."""
        by_name = CustomerFactory.create(name="John SMITH", email="jj@example.com")
        by_email = CustomerFactory.create(name="Jane Doe", email="Smithers@example.com")
        neither = CustomerFactory.create(name="Jane Doe", email="jd@example.com")

        clause = SearchTerm("smith")
        assert clause.matches(by_name)
        assert clause.matches(by_email)
        assert not clause.matches(neither)

    def test_email_equals_is_exact(self) -> None:
        """Should match the email clause exactly."""
        customer = CustomerFactory.create(email="Ada@example.com")
        assert EmailEquals("Ada@example.com").matches(customer)
        assert not EmailEquals("ada@example.com").matches(customer)
        assert not EmailEquals("Ada@example").matches(customer)

    def test_date_bounds_are_inclusive(self) -> None:
        """Should include customers created exactly on a bound."""
        moment = datetime(2025, 6, 1, 12, tzinfo=UTC)
        customer = CustomerFactory.create(created_at=moment)

        assert CreatedFrom(moment).matches(customer)
        assert CreatedTo(moment).matches(customer)
        assert not CreatedFrom(moment + timedelta(seconds=1)).matches(customer)
        assert not CreatedTo(moment - timedelta(seconds=1)).matches(customer)

    def test_predicate_is_conjunction(self) -> None:
        """Should require every clause to match."""
        predicate = FilterPipeline().build(search_term="smith")
        assert predicate.matches(CustomerFactory.create(name="Will Smith"))
        assert not predicate.matches(CustomerFactory.create(name="Will Smith", is_deleted=True))
        assert not predicate.matches(CustomerFactory.create(name="Will Jones"))


class TestSortResolver:
    """Tests for SortResolver.resolve."""

    @pytest.fixture
    def resolver(self) -> SortResolver:
        return SortResolver()

    def test_blank_defaults_to_created_at_desc(self, resolver: SortResolver) -> None:
        """Should sort newest first when key and order are blank."""
        assert resolver.resolve(None, None) == DEFAULT_SORT
        assert resolver.resolve("", "  ") == SortOrder(SortField.CREATED_AT, descending=True)

    def test_unknown_key_falls_back_to_created_at_desc(self, resolver: SortResolver) -> None:
        """Should fall back to createdAt descending for an unknown key."""
        assert resolver.resolve("phone", "asc") == DEFAULT_SORT

    @pytest.mark.parametrize(
        ("sort_by", "field"),
        [
            ("name", SortField.NAME),
            ("NAME", SortField.NAME),
            ("Email", SortField.EMAIL),
            ("createdAt", SortField.CREATED_AT),
            ("created_at", SortField.CREATED_AT),
        ],
    )
    def test_keys_match_case_insensitively(
        self, resolver: SortResolver, sort_by: str, field: SortField
    ) -> None:
        """Should resolve sort keys ignoring case."""
        assert resolver.resolve(sort_by, "asc").field is field

    @pytest.mark.parametrize(
        ("sort_order", "descending"),
        [("desc", True), ("DESC", True), ("asc", False), ("", False), ("sideways", False)],
    )
    def test_direction(self, resolver: SortResolver, sort_order: str, descending: bool) -> None:
        """Should read asc and desc ignoring case."""
        assert resolver.resolve("name", sort_order).descending is descending

    def test_order_without_key_sorts_by_created_at(self, resolver: SortResolver) -> None:
        """Should sort by createdAt in the requested direction when no key is given."""
        assert resolver.resolve(None, "asc") == SortOrder(SortField.CREATED_AT, descending=False)

    @pytest.mark.parametrize("sort_by", ["", "   "])
    def test_blank_key_with_order_is_unrecognized(
        self, resolver: SortResolver, sort_by: str
    ) -> None:
        """Should treat a present but blank key as unknown, ignoring the order."""
        assert resolver.resolve(sort_by, "asc") == DEFAULT_SORT


class TestSortOrderKey:
    """Tests for in-memory sort keys."""

    def test_name_key_ignores_case(self) -> None:
        """Should compare names ignoring case."""
        customers = [
            CustomerFactory.create(name="bob"),
            CustomerFactory.create(name="Alice"),
            CustomerFactory.create(name="carol"),
        ]
        order = SortOrder(SortField.NAME, descending=False)
        ordered = sorted(customers, key=order.key)
        assert [c.name for c in ordered] == ["Alice", "bob", "carol"]

    def test_ties_break_on_id(self) -> None:
        """Should order equal keys by id."""
        moment = datetime(2025, 1, 1, tzinfo=UTC)
        customers = [CustomerFactory.create(created_at=moment) for _ in range(5)]
        order = SortOrder(SortField.CREATED_AT, descending=True)

        ordered = sorted(customers, key=order.key, reverse=True)
        assert [c.id for c in ordered] == sorted((c.id for c in customers), reverse=True)
