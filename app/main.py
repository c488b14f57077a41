"""
Application entry point.

Creates the FastAPI application and wires together:
- The error registry (built once, shared through app.state)
- Routers
- Error handlers (descriptors filtered by the external-safe policy)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.domain.error_codes.catalog import build_registry
from app.domain.error_codes.registry import ErrorRegistry
from app.interfaces.error_codes.router import router as errors_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[ErrorRegistry] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Builds the error registry, registers routers, error handlers and
    security middleware. This is the composition root of the application.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        registry: Registry to serve instead of the standard catalog.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        DuplicateErrorCodeError: The catalog reuses a code and
            ``strict_unique_codes`` is set.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    if registry is None:
        registry = build_registry(
            internal_error_limit=settings.internal_error_limit,
            strict=settings.strict_unique_codes,
        )
    logger.info(
        "Error registry ready: %d codes, internal limit %d",
        len(registry),
        registry.internal_error_limit,
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.error_registry = registry

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings.rate_limit_default)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(errors_router, prefix="/api/v1")

    return app


app = create_app()
