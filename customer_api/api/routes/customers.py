"""Customer endpoints."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Query, Response

from customer_api.api.dependencies import (
    BulkCreateCoordinatorDep,
    CustomerServiceDep,
    QueryEngineDep,
    SettingsDep,
)
from customer_api.api.exceptions import InvalidRequestError
from customer_api.api.models.customers import (
    BulkCreateRequest,
    BulkCreateResponse,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from customer_api.api.models.pagination import PaginatedResponse
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/customers")


@router.get("", response_model=PaginatedResponse[CustomerResponse])
async def list_customers(
    engine: QueryEngineDep,
    settings: SettingsDep,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    page_size: int | None = Query(default=None, ge=1, description="Items per page"),
    search: str | None = Query(default=None, description="Substring of name or email"),
    email: str | None = Query(default=None, description="Exact email"),
    date_from: datetime | None = Query(default=None, description="Created at or after"),
    date_to: datetime | None = Query(default=None, description="Created at or before"),
    sort_by: str | None = Query(default=None, description="name, email or createdAt"),
    sort_order: str | None = Query(default=None, description="asc or desc"),
) -> PaginatedResponse[CustomerResponse]:
    """List active customers.

    Filters combine with AND. Without sort parameters the newest
    customers come first; an unknown sort field falls back to the same
    order.

    Returns:
        One page of customers with navigation fields
    """
    if page_size is None:
        page_size = settings.customers.default_page_size
    if page_size > settings.customers.max_page_size:
        raise InvalidRequestError(
            f"page_size must be between 1 and {settings.customers.max_page_size}"
        )

    logger.debug(
        "list_customers_request",
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
    )

    customers, total_count = await engine.list(
        skip=(page - 1) * page_size,
        take=page_size,
        search_term=search,
        email_filter=email,
        date_from=date_from,
        date_to=date_to,
        sort_by=sort_by,
        sort_order=sort_order,
    )

    return PaginatedResponse[CustomerResponse].build(
        items=[CustomerResponse.from_customer(c) for c in customers],
        total_count=total_count,
        page=page,
        page_size=page_size,
    )


@router.post("/bulk", response_model=BulkCreateResponse)
async def bulk_create_customers(
    request: BulkCreateRequest,
    coordinator: BulkCreateCoordinatorDep,
) -> BulkCreateResponse:
    """Generate and create random customers.

    Responds 200 even when some items failed; failures are listed in
    ``errors`` by batch index.
    """
    logger.info("bulk_create_request", count=request.count)

    result = await coordinator.bulk_create(request.count)
    return BulkCreateResponse.from_result(result)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    service: CustomerServiceDep,
) -> CustomerResponse:
    """Get an active customer by id."""
    customer = await service.get(customer_id)
    return CustomerResponse.from_customer(customer)


@router.post("", response_model=CustomerResponse, status_code=201)
async def create_customer(
    request: CustomerCreate,
    service: CustomerServiceDep,
) -> CustomerResponse:
    """Create a customer.

    Returns 409 when another active customer already uses the email.
    """
    customer = await service.create(request.to_draft())
    return CustomerResponse.from_customer(customer)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: UUID,
    request: CustomerUpdate,
    service: CustomerServiceDep,
) -> CustomerResponse:
    """Replace a customer's fields."""
    customer = await service.update(customer_id, request.to_changes())
    return CustomerResponse.from_customer(customer)


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(
    customer_id: UUID,
    service: CustomerServiceDep,
) -> Response:
    """Soft-delete a customer.

    The record is kept but disappears from every read, and its email
    becomes available again.
    """
    await service.delete(customer_id)
    return Response(status_code=204)
