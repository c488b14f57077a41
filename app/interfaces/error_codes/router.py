"""
FastAPI router for the error codes bounded context.

Lets API clients resolve a numeric code they received into its
message. Only the external-safe view is public; the internal view
is available in debug mode.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Response

from app.application.error_codes.describe_error import DescribeErrorUseCase
from app.application.error_codes.dtos import DescribeErrorQuery
from app.core.config import Settings
from app.domain.error_codes.catalog import NO_PERMISSION
from app.domain.error_codes.entities import ErrnoException
from app.domain.error_codes.registry import ErrorRegistry
from app.interfaces.error_codes.dependencies import (
    get_describe_error_use_case,
    get_error_registry,
    get_settings,
)
from app.interfaces.error_codes.schemas import (
    ErrorCatalogResponse,
    ErrorDescriptorResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/errors", tags=["errors"])


@router.get(
    "",
    response_model=ErrorCatalogResponse,
    summary="List public error codes",
    description="Every registered code a client may receive verbatim.",
)
def list_errors(
    registry: ErrorRegistry = Depends(get_error_registry),
) -> ErrorCatalogResponse:
    """List descriptors above the internal error boundary."""
    return ErrorCatalogResponse(
        internal_error_limit=registry.internal_error_limit,
        errors=[
            ErrorDescriptorResponse(code=d.code, message=d.message)
            for d in registry.descriptors()
            if d.code > registry.internal_error_limit
        ],
    )


@router.get(
    "/{code}",
    response_model=ErrorDescriptorResponse,
    responses={
        204: {"description": "Success code, nothing to report"},
        403: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Describe an error code",
    description="Resolve a code into the descriptor an API client may see.",
)
def describe_error(
    code: int,
    internal: bool = Query(False, description="Skip masking (debug mode only)"),
    use_case: DescribeErrorUseCase = Depends(get_describe_error_use_case),
    settings: Settings = Depends(get_settings),
):
    """Resolve ``code`` through the external-safe policy."""
    if internal and not settings.debug:
        raise ErrnoException(NO_PERMISSION, status_code=403)

    result = use_case.execute(DescribeErrorQuery(code=code, external=not internal))
    if result is None:
        return Response(status_code=204)
    return ErrorDescriptorResponse(code=result.code, message=result.message)
