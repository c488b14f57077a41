"""
Dependency injection for the error codes bounded context.

The registry is built once by the application factory and stored on
``app.state``; request handlers reach it only through these functions.
"""

from fastapi import Depends, Request

from app.application.error_codes.describe_error import DescribeErrorUseCase
from app.core.config import Settings
from app.domain.error_codes.registry import ErrorRegistry


def get_error_registry(request: Request) -> ErrorRegistry:
    """Return the registry owned by the running application."""
    return request.app.state.error_registry


def get_describe_error_use_case(
    registry: ErrorRegistry = Depends(get_error_registry),
) -> DescribeErrorUseCase:
    """Build DescribeErrorUseCase around the application's registry."""
    return DescribeErrorUseCase(registry=registry)


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
