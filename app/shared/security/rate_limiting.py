"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Rejections are reported as an error descriptor like any other failure.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.domain.error_codes.catalog import ERR_CODE_TOO_MANY_REQUEST

DEFAULT_RATE_LIMIT = "60/minute"
RATE_LIMITED_MESSAGE = "Rate limit exceeded"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a limiter keyed by client address.

    Each application gets its own limiter so counters never leak
    between app instances.
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it directly.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response carrying the too-many-requests code.
    """
    return JSONResponse(
        status_code=429,
        content={
            "code": ERR_CODE_TOO_MANY_REQUEST,
            "message": RATE_LIMITED_MESSAGE,
            "detail": str(exc.detail),
        },
    )
