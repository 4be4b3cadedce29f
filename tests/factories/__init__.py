"""Test factories for creating test data."""

from tests.factories.customers import CustomerFactory, DraftFactory, StaticDraftGenerator

__all__ = [
    "CustomerFactory",
    "DraftFactory",
    "StaticDraftGenerator",
]
