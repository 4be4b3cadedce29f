"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from customer_api import __version__
from customer_api.api.dependencies import reset_dependencies
from customer_api.api.exceptions import CustomerAPIError, from_store_error
from customer_api.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from customer_api.api.routes import register_routes
from customer_api.config import get_settings
from customer_api.db.errors import StoreError
from customer_api.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Release the database pool on shutdown."""
    yield
    await reset_dependencies()
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a fully configured FastAPI app with:
    - Logging configured from settings
    - CORS middleware
    - Global exception handlers
    - All API routes registered

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    app = FastAPI(
        title="Customer API",
        description="Customer records with soft deletion, search and bulk generation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    register_routes(app, settings)

    logger.info(
        "app_created",
        debug=settings.debug,
        backend=settings.storage.customers.backend,
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> JSONResponse:
    response = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def _validation_details(errors: list[dict]) -> list[ErrorDetail]:
    details = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"])
        details.append(ErrorDetail(field=field, message=error["msg"]))
    return details


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(CustomerAPIError)
    async def customer_api_error_handler(request: Request, exc: CustomerAPIError) -> JSONResponse:
        """Handle CustomerAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        """Map store errors onto API errors."""
        api_error = from_store_error(exc)
        if api_error.status_code >= 500:
            logger.error(
                "store_error",
                error=exc.message,
                error_type=type(exc).__name__,
                path=request.url.path,
            )
        else:
            logger.info(
                "store_rejected_request",
                error_code=api_error.error_code.value,
                message=exc.message,
                path=request.url.path,
            )
        return _error_response(api_error.status_code, api_error.error_code, api_error.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors."""
        logger.warning(
            "validation_error",
            error_count=len(exc.errors()),
            path=request.url.path,
        )
        return _error_response(
            400,
            ErrorCode.INVALID_REQUEST,
            "Request validation failed",
            _validation_details(exc.errors()),
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        logger.warning(
            "pydantic_validation_error",
            error_count=exc.error_count(),
            path=request.url.path,
        )
        return _error_response(
            400,
            ErrorCode.INVALID_REQUEST,
            "Data validation failed",
            _validation_details(exc.errors()),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(500, ErrorCode.INTERNAL_ERROR, "An unexpected error occurred")

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
