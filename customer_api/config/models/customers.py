"""Customer query and bulk-create limits."""

from pydantic import BaseModel, Field, model_validator


class CustomersConfig(BaseModel):
    """Limits applied by the query engine and the bulk-create coordinator."""

    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when the caller does not specify one",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Upper bound on items returned by a single list call",
    )
    max_bulk_count: int = Field(
        default=1000,
        ge=1,
        description="Largest count accepted by a bulk-create call",
    )
    bulk_concurrency: int = Field(
        default=1,
        ge=1,
        description="Concurrent create attempts per bulk call (1 = sequential)",
    )

    @model_validator(mode="after")
    def check_page_sizes(self) -> "CustomersConfig":
        """Default page size must fit under the maximum."""
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size cannot exceed max_page_size")
        return self
