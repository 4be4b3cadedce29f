"""API route registration."""

from fastapi import FastAPI

from customer_api.config import Settings
from customer_api.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding whether and where metrics are exposed
    """
    from customer_api.api.routes.customers import router as customers_router
    from customer_api.api.routes.health import get_metrics
    from customer_api.api.routes.health import router as health_router

    app.include_router(customers_router, tags=["Customers"])
    app.include_router(health_router, tags=["Health"])

    metrics = settings.observability.metrics
    if metrics.enabled:
        app.add_api_route(metrics.path, get_metrics, methods=["GET"], tags=["Health"])

    logger.info("routes_registered", metrics_enabled=metrics.enabled)
