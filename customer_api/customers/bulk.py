"""Bulk creation of random customers with per-item outcomes."""

import asyncio
import time

from pydantic import BaseModel, ConfigDict, Field

from customer_api.customers.generator import RandomCustomerGenerator
from customer_api.customers.models import Customer, CustomerDraft
from customer_api.customers.service import CustomerService
from customer_api.db.errors import ConflictError, ValidationError
from customer_api.observability.logging import get_logger
from customer_api.observability.metrics import BULK_CREATE_ITEMS, BULK_CREATE_LATENCY

logger = get_logger(__name__)


class CreateSucceeded(BaseModel):
    """A draft that was persisted."""

    model_config = ConfigDict(frozen=True)

    index: int
    customer: Customer


class CreateFailed(BaseModel):
    """A draft that was rejected."""

    model_config = ConfigDict(frozen=True)

    index: int
    message: str
    code: str


CreateOutcome = CreateSucceeded | CreateFailed


class BulkCreateError(BaseModel):
    """Failure entry reported for one batch position."""

    index: int
    message: str


class BulkCreateResult(BaseModel):
    """Summary of a bulk create.

    Counts are derived from the lists so they always agree.
    """

    created_customers: list[Customer] = Field(default_factory=list)
    errors: list[BulkCreateError] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.created_customers)

    @property
    def failure_count(self) -> int:
        return len(self.errors)

    @classmethod
    def from_outcomes(cls, outcomes: list[CreateOutcome]) -> "BulkCreateResult":
        """Fold outcomes into a result, ordered by batch index."""
        result = cls()
        for outcome in sorted(outcomes, key=lambda o: o.index):
            match outcome:
                case CreateSucceeded(customer=customer):
                    result.created_customers.append(customer)
                case CreateFailed(index=index, message=message):
                    result.errors.append(BulkCreateError(index=index, message=message))
        return result


class BulkCreateCoordinator:
    """Generates a batch of drafts and creates each one independently.

    A rejected draft becomes a CreateFailed outcome and the batch goes
    on; earlier successes are kept. Store connection failures are not
    per-item outcomes and abort the whole call.
    """

    def __init__(
        self,
        service: CustomerService,
        generator: RandomCustomerGenerator | None = None,
        max_bulk_count: int = 1000,
        concurrency: int = 1,
    ) -> None:
        """Initialize the coordinator.

        Args:
            service: Service used for each create
            generator: Draft generator (default unseeded RandomCustomerGenerator)
            max_bulk_count: Largest accepted batch size
            concurrency: Number of creates in flight; 1 runs them in order
        """
        self._service = service
        self._generator = generator or RandomCustomerGenerator()
        self._max_bulk_count = max_bulk_count
        self._concurrency = max(concurrency, 1)

    async def bulk_create(self, count: int, created_by: str | None = None) -> BulkCreateResult:
        """Create ``count`` random customers.

        Raises:
            ValidationError: If count is outside 1..max_bulk_count
            ConnectionError: If the store becomes unreachable mid-batch
        """
        if count < 1 or count > self._max_bulk_count:
            raise ValidationError(
                f"count must be between 1 and {self._max_bulk_count}, got {count}"
            )

        drafts = self._generator.generate(count, created_by=created_by)

        start = time.perf_counter()
        if self._concurrency == 1:
            outcomes = [await self._attempt(i, draft) for i, draft in enumerate(drafts)]
        else:
            outcomes = await self._attempt_concurrently(drafts)
        BULK_CREATE_LATENCY.observe(time.perf_counter() - start)

        result = BulkCreateResult.from_outcomes(outcomes)
        logger.info(
            "bulk_create_completed",
            requested=count,
            success_count=result.success_count,
            failure_count=result.failure_count,
            concurrency=self._concurrency,
        )
        return result

    async def _attempt_concurrently(self, drafts: list[CustomerDraft]) -> list[CreateOutcome]:
        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(index: int, draft: CustomerDraft) -> CreateOutcome:
            async with semaphore:
                return await self._attempt(index, draft)

        tasks = [asyncio.create_task(bounded(i, draft)) for i, draft in enumerate(drafts)]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _attempt(self, index: int, draft: CustomerDraft) -> CreateOutcome:
        try:
            customer = await self._service.create(draft, source="bulk")
        except ConflictError as e:
            BULK_CREATE_ITEMS.labels(outcome="failed").inc()
            logger.info("bulk_create_item_conflict", index=index)
            return CreateFailed(index=index, message=e.message, code="EMAIL_CONFLICT")
        except ValidationError as e:
            BULK_CREATE_ITEMS.labels(outcome="failed").inc()
            logger.info("bulk_create_item_invalid", index=index, error=e.message)
            return CreateFailed(index=index, message=e.message, code="INVALID_REQUEST")

        BULK_CREATE_ITEMS.labels(outcome="succeeded").inc()
        return CreateSucceeded(index=index, customer=customer)
