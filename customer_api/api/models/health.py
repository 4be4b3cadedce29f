"""Health check response models."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from customer_api.config.models.storage import BackendType

HealthStatus = Literal["healthy", "unhealthy"]


class ComponentHealth(BaseModel):
    """Outcome of checking one dependency the service needs to answer requests."""

    name: str
    status: HealthStatus
    latency_ms: float | None = None
    message: str | None = None

    @classmethod
    def from_check(cls, name: str, healthy: bool, latency_ms: float) -> "ComponentHealth":
        """Build the entry for a finished check."""
        return cls(
            name=name,
            status="healthy" if healthy else "unhealthy",
            latency_ms=round(latency_ms, 3),
            message=None if healthy else f"{name} did not respond",
        )


class HealthResponse(BaseModel):
    """Body of GET /health.

    The service is healthy only when every component is. ``backend`` names
    the configured customer store so operators can tell an in-memory
    deployment from a PostgreSQL one at a glance.
    """

    status: HealthStatus
    version: str
    backend: BackendType
    components: list[ComponentHealth] = Field(default_factory=list)
    checked_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_components(
        cls,
        components: list[ComponentHealth],
        *,
        version: str,
        backend: BackendType,
    ) -> "HealthResponse":
        """Roll component results up into the overall status."""
        healthy = all(c.status == "healthy" for c in components)
        return cls(
            status="healthy" if healthy else "unhealthy",
            version=version,
            backend=backend,
            components=components,
        )

    @property
    def is_healthy(self) -> bool:
        return self.status == "healthy"
