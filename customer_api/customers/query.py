"""Composable filter predicates and sort orders for customer queries.

FilterPipeline and SortResolver turn raw list parameters into plain
values that every store understands: the in-memory store evaluates
them directly, the PostgreSQL store renders them to SQL.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from customer_api.customers.models import Customer, ensure_utc


@dataclass(frozen=True)
class ActiveOnly:
    """Keep customers that are not soft-deleted."""

    def matches(self, customer: Customer) -> bool:
        return not customer.is_deleted


@dataclass(frozen=True)
class SearchTerm:
    """Keep customers whose name or email contains the term, ignoring case."""

    term: str

    def matches(self, customer: Customer) -> bool:
        needle = self.term.lower()
        return needle in customer.name.lower() or needle in customer.email.lower()


@dataclass(frozen=True)
class EmailEquals:
    """Keep customers whose email equals the value exactly, as stored."""

    email: str

    def matches(self, customer: Customer) -> bool:
        return customer.email == self.email


@dataclass(frozen=True)
class CreatedFrom:
    """Keep customers created at or after a moment."""

    at: datetime

    def matches(self, customer: Customer) -> bool:
        return customer.created_at >= self.at


@dataclass(frozen=True)
class CreatedTo:
    """Keep customers created at or before a moment."""

    at: datetime

    def matches(self, customer: Customer) -> bool:
        return customer.created_at <= self.at


FilterClause = ActiveOnly | SearchTerm | EmailEquals | CreatedFrom | CreatedTo


@dataclass(frozen=True)
class CustomerPredicate:
    """Conjunction of filter clauses, evaluated in order."""

    clauses: tuple[FilterClause, ...] = ()

    def and_(self, clause: FilterClause) -> "CustomerPredicate":
        """Return a new predicate with one more clause appended."""
        return CustomerPredicate(self.clauses + (clause,))

    def matches(self, customer: Customer) -> bool:
        return all(clause.matches(customer) for clause in self.clauses)


class FilterPipeline:
    """Builds the list predicate from optional query parameters.

    The order is fixed: soft-deleted customers are excluded first, then
    the search term, exact email, and created-at bounds are applied.
    Blank strings count as absent.
    """

    def build(
        self,
        search_term: str | None = None,
        email_filter: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> CustomerPredicate:
        predicate = CustomerPredicate().and_(ActiveOnly())

        if search_term is not None and search_term.strip():
            predicate = predicate.and_(SearchTerm(search_term))

        if email_filter is not None and email_filter.strip():
            predicate = predicate.and_(EmailEquals(email_filter))

        if date_from is not None:
            predicate = predicate.and_(CreatedFrom(ensure_utc(date_from)))

        if date_to is not None:
            predicate = predicate.and_(CreatedTo(ensure_utc(date_to)))

        return predicate


class SortField(str, Enum):
    """Fields a customer list can be ordered by."""

    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "createdAt"


@dataclass(frozen=True)
class SortOrder:
    """A resolved ordering.

    Ties on the primary field are broken by id in the same direction so
    that consecutive pages never overlap or skip records.
    """

    field: SortField = SortField.CREATED_AT
    descending: bool = True

    def key(self, customer: Customer) -> tuple[Any, UUID]:
        """Sort key for in-memory ordering."""
        if self.field is SortField.NAME:
            return (customer.name.lower(), customer.id)
        if self.field is SortField.EMAIL:
            return (customer.email.lower(), customer.id)
        return (customer.created_at, customer.id)


DEFAULT_SORT = SortOrder(SortField.CREATED_AT, descending=True)


class SortResolver:
    """Maps requested sort parameters to a deterministic SortOrder.

    - Keys match case-insensitively; ``created_at`` is accepted for ``createdAt``.
    - An unrecognized key falls back to created-at descending. A key that
      is present but blank counts as unrecognized.
    - A missing key sorts by created-at in the requested direction.
    - Descending when sort_order is "desc" (any case), or when both
      parameters are blank; ascending otherwise.
    """

    def __init__(self) -> None:
        self._fields = {
            "name": SortField.NAME,
            "email": SortField.EMAIL,
            "createdat": SortField.CREATED_AT,
            "created_at": SortField.CREATED_AT,
        }

    def resolve(self, sort_by: str | None = None, sort_order: str | None = None) -> SortOrder:
        key = (sort_by or "").strip()
        sort_order = (sort_order or "").strip()

        if not key and not sort_order:
            return DEFAULT_SORT

        descending = sort_order.lower() == "desc"

        if sort_by is None:
            return SortOrder(SortField.CREATED_AT, descending=descending)

        resolved = self._fields.get(key.lower())
        if resolved is None:
            return DEFAULT_SORT

        return SortOrder(resolved, descending=descending)
