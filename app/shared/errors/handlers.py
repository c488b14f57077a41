"""
Centralized error handlers for FastAPI.

Maps raised errors to HTTP responses carrying an error descriptor.
Descriptors go through the registry's external-safe lookup, so
internal codes never reach clients verbatim.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.error_codes.catalog import PARAM_WRONG
from app.domain.error_codes.entities import (
    ErrnoException,
    ErrorDescriptor,
    HTTPErrnoException,
)
from app.domain.error_codes.registry import ErrorRegistry

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_422 = 422
HTTP_500 = 500


def _registry(request: Request) -> ErrorRegistry:
    return request.app.state.error_registry


def _error_response(
    status_code: int, errno: ErrorDescriptor, detail: str | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, int | str | None] = errno.to_dict()
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    The application must expose its ErrorRegistry as
    ``app.state.error_registry``.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ErrnoException)
    async def handle_errno(request: Request, exc: ErrnoException) -> JSONResponse:
        """Report a raised descriptor through the external-safe policy."""
        if isinstance(exc, HTTPErrnoException):
            logger.info("HTTP error: %s", exc.errno)
            return _error_response(exc.status_code or HTTP_400, exc.errno)

        registry = _registry(request)
        public = registry.lookup_external_safe(exc.errno.code)
        if public is None:
            # success code raised as an error
            public = registry.fallback
        if (
            exc.errno.code > registry.internal_error_limit
            and public.code == exc.errno.code
        ):
            # keeps a prompt set through with_prompt
            public = exc.errno
        else:
            logger.warning("Masked internal error: %s", exc.errno)
        return _error_response(exc.status_code or HTTP_400, public)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request parameters."""
        logger.info("Rejected request parameters: %d error(s)", len(exc.errors()))
        errno = _registry(request).lookup(PARAM_WRONG.code)
        return _error_response(HTTP_422, errno)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, _registry(request).classify(exc))
