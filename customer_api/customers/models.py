"""Customer domain models."""

import re
from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 500

# Simplified RFC 5322
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^[\d\s\-\(\)\+]+$")
PHONE_MIN_DIGITS = 7


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format")
    return value


def _check_phone(value: str) -> str | None:
    if not value:
        return None
    if not PHONE_PATTERN.match(value):
        raise ValueError("Invalid phone format")
    if len(re.sub(r"\D", "", value)) < PHONE_MIN_DIGITS:
        raise ValueError(f"Phone number must have at least {PHONE_MIN_DIGITS} digits")
    return value


def _blank_to_none(value: str) -> str | None:
    return value or None


CustomerName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH),
]
CustomerEmail = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=EMAIL_MAX_LENGTH),
    AfterValidator(_check_email),
]
CustomerPhone = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=PHONE_MAX_LENGTH),
    AfterValidator(_check_phone),
]
CustomerAddress = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=ADDRESS_MAX_LENGTH),
    AfterValidator(_blank_to_none),
]


class CustomerDraft(BaseModel):
    """Validated input for creating a customer.

    Immutable so that a batch of drafts can be handed to concurrent
    create attempts without shared mutable state.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: CustomerName
    email: CustomerEmail
    phone: CustomerPhone | None = None
    address: CustomerAddress | None = None
    created_by: str | None = None


class CustomerChanges(BaseModel):
    """Validated input for updating a customer.

    An update replaces every mutable field; omitted optional fields are
    cleared.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: CustomerName
    email: CustomerEmail
    phone: CustomerPhone | None = None
    address: CustomerAddress | None = None
    updated_by: str | None = None


class Customer(BaseModel):
    """A customer record.

    Records are never physically removed. Deletion flips ``is_deleted``
    and the record drops out of every normal read and out of email
    uniqueness checks.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, description="Customer identifier")
    name: CustomerName
    email: CustomerEmail
    phone: CustomerPhone | None = None
    address: CustomerAddress | None = None
    is_deleted: bool = Field(default=False, description="Soft delete marker")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last modification timestamp")
    created_by: str | None = None
    updated_by: str | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        return ensure_utc(value)

    @classmethod
    def from_draft(cls, draft: CustomerDraft) -> "Customer":
        """Build a new active customer with a fresh id and timestamps."""
        now = utc_now()
        return cls(
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
            address=draft.address,
            created_by=draft.created_by,
            updated_by=draft.created_by,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        """Check if the customer is not soft-deleted."""
        return not self.is_deleted

    def touch(self) -> None:
        """Update the updated_at timestamp, never moving it before created_at."""
        self.updated_at = max(utc_now(), self.created_at)

    def apply(self, changes: CustomerChanges) -> None:
        """Replace mutable fields from an update and refresh updated_at."""
        self.name = changes.name
        self.email = changes.email
        self.phone = changes.phone
        self.address = changes.address
        self.updated_by = changes.updated_by
        self.touch()

    def soft_delete(self, actor: str | None = None) -> None:
        """Mark the customer as deleted."""
        self.is_deleted = True
        if actor is not None:
            self.updated_by = actor
        self.touch()
