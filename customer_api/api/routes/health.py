"""Health check and metrics endpoints."""

import time

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from customer_api import __version__
from customer_api.api.dependencies import CustomerStoreDep, SettingsDep
from customer_api.api.models.health import ComponentHealth, HealthResponse
from customer_api.customers.store import CustomerStore
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def _check_customer_store(store: CustomerStore) -> ComponentHealth:
    start = time.perf_counter()
    healthy = await store.health_check()
    return ComponentHealth.from_check(
        "customer_store", healthy, (time.perf_counter() - start) * 1000
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: CustomerStoreDep,
    settings: SettingsDep,
    response: Response,
) -> HealthResponse:
    """Check service health status.

    Responds 503 when the customer store does not answer.
    """
    result = HealthResponse.from_components(
        [await _check_customer_store(store)],
        version=__version__,
        backend=settings.storage.customers.backend,
    )

    if not result.is_healthy:
        response.status_code = 503
        logger.warning("health_check_failed", backend=result.backend)
    else:
        logger.debug("health_check_completed", backend=result.backend)

    return result


async def get_metrics() -> Response:
    """Get Prometheus metrics.

    Returns:
        Prometheus metrics as text/plain
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
