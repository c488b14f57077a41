"""
Use case: Resolve an error code into the descriptor a caller may see.

Input: DescribeErrorQuery (code, external)
Output: DescribeErrorResult, or None when there is no error to report.
Side effects: None.
Failure cases: None. Unknown codes resolve to the fallback descriptor.
"""

import logging
from typing import Optional

from app.application.error_codes.dtos import DescribeErrorQuery, DescribeErrorResult
from app.domain.error_codes.registry import ErrorRegistry

logger = logging.getLogger(__name__)


class DescribeErrorUseCase:
    """Looks a code up in the registry for an internal or external audience."""

    def __init__(self, registry: ErrorRegistry) -> None:
        self._registry = registry

    def execute(self, query: DescribeErrorQuery) -> Optional[DescribeErrorResult]:
        """Run the describe use case.

        Args:
            query: The code to resolve and the audience it is resolved for.

        Returns:
            The resolved descriptor as a DTO. None only for the success
            code seen by an external audience.
        """
        if query.external:
            descriptor = self._registry.lookup_external_safe(query.code)
            if descriptor is None:
                return None
        else:
            descriptor = self._registry.lookup(query.code)

        if descriptor.code != query.code:
            logger.debug("Error code %d reported as %d", query.code, descriptor.code)

        return DescribeErrorResult(
            code=descriptor.code,
            message=descriptor.message,
        )
