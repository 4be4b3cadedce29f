"""Request and response models for customer endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from customer_api.customers.bulk import BulkCreateResult
from customer_api.customers.models import (
    Customer,
    CustomerAddress,
    CustomerChanges,
    CustomerDraft,
    CustomerEmail,
    CustomerName,
    CustomerPhone,
)


class CustomerCreate(BaseModel):
    """Request model for creating a customer."""

    name: CustomerName = Field(..., description="Full name")
    email: CustomerEmail = Field(..., description="Email, unique among active customers")
    phone: CustomerPhone | None = Field(default=None, description="Phone number")
    address: CustomerAddress | None = Field(default=None, description="Postal address")

    def to_draft(self, created_by: str | None = None) -> CustomerDraft:
        return CustomerDraft(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            created_by=created_by,
        )


class CustomerUpdate(BaseModel):
    """Request model for updating a customer.

    Every field is replaced; an omitted phone or address is cleared.
    """

    name: CustomerName
    email: CustomerEmail
    phone: CustomerPhone | None = None
    address: CustomerAddress | None = None

    def to_changes(self, updated_by: str | None = None) -> CustomerChanges:
        return CustomerChanges(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            updated_by=updated_by,
        )


class CustomerResponse(BaseModel):
    """Response model for customer operations."""

    id: UUID
    name: str
    email: str
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime
    created_by: str | None = None
    updated_by: str | None = None

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
            created_by=customer.created_by,
            updated_by=customer.updated_by,
        )


class BulkCreateRequest(BaseModel):
    """Request model for generating random customers."""

    count: int = Field(..., ge=1, description="Number of customers to generate")


class BulkCreateErrorItem(BaseModel):
    """A batch position that could not be created."""

    index: int
    message: str


class BulkCreateResponse(BaseModel):
    """Response model for bulk creation."""

    success_count: int
    failure_count: int
    created_customers: list[CustomerResponse] = Field(default_factory=list)
    errors: list[BulkCreateErrorItem] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: BulkCreateResult) -> "BulkCreateResponse":
        return cls(
            success_count=result.success_count,
            failure_count=result.failure_count,
            created_customers=[CustomerResponse.from_customer(c) for c in result.created_customers],
            errors=[BulkCreateErrorItem(index=e.index, message=e.message) for e in result.errors],
        )
