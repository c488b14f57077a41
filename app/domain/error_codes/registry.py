"""
Error registry: maps numeric codes to error descriptors.

The registry is built once at startup and then read concurrently by
request handlers. It is an explicit object handed to request code,
never a module-level global, so tests can substitute their own.

Lookups are total: an unknown code resolves to the fallback descriptor.
"""

import logging
import threading
from typing import Any, Iterable, Optional

from app.domain.error_codes.entities import ErrnoException, ErrorDescriptor
from app.domain.error_codes.errors import DuplicateErrorCodeError

logger = logging.getLogger(__name__)

SUCCESS_CODE = 0
DEFAULT_INTERNAL_ERROR_LIMIT = 10007

DEFAULT_SUCCESS = ErrorDescriptor(code=SUCCESS_CODE, message="success")
DEFAULT_FALLBACK = ErrorDescriptor(code=10000, message="Server Internal Error")


class ErrorRegistry:
    """Process-wide table of error descriptors keyed by code.

    Args:
        internal_error_limit: Codes at or below this value are never
            exposed verbatim to external callers.
        fallback: Descriptor returned when no specific match exists.
        success: Descriptor representing "no error".
        strict: Raise DuplicateErrorCodeError instead of overwriting
            when a code is registered again with a different message.
    """

    def __init__(
        self,
        internal_error_limit: int = DEFAULT_INTERNAL_ERROR_LIMIT,
        fallback: ErrorDescriptor = DEFAULT_FALLBACK,
        success: ErrorDescriptor = DEFAULT_SUCCESS,
        strict: bool = False,
    ) -> None:
        self.internal_error_limit = internal_error_limit
        self.fallback = fallback
        self.success = success
        self.strict = strict
        self._entries: dict[int, ErrorDescriptor] = {}
        self._collisions: dict[int, list[str]] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._entries

    def register(self, code: int, message: str) -> ErrorDescriptor:
        """Create a descriptor and store it under ``code``.

        The last registration for a code wins. A collision with a
        different message is logged, or raised when the registry is strict.

        Returns:
            The newly created descriptor, ready to bind to a constant.

        Raises:
            DuplicateErrorCodeError: Strict registry and ``code`` is taken.
        """
        return self.add(ErrorDescriptor(code=code, message=message))

    def add(self, descriptor: ErrorDescriptor) -> ErrorDescriptor:
        """Store an existing descriptor under its own code."""
        with self._lock:
            existing = self._entries.get(descriptor.code)
            if existing is not None and existing.message != descriptor.message:
                if self.strict:
                    raise DuplicateErrorCodeError(
                        descriptor.code, existing.message, descriptor.message
                    )
                logger.warning(
                    "Error code %d re-registered: %r shadows %r",
                    descriptor.code,
                    descriptor.message,
                    existing.message,
                )
                seen = self._collisions.setdefault(descriptor.code, [existing.message])
                seen.append(descriptor.message)
            self._entries[descriptor.code] = descriptor
        return descriptor

    def register_all(self, descriptors: Iterable[ErrorDescriptor]) -> None:
        for descriptor in descriptors:
            self.add(descriptor)

    def lookup(self, code: int) -> ErrorDescriptor:
        """Return the descriptor registered for ``code``, or the fallback."""
        with self._lock:
            return self._entries.get(code, self.fallback)

    def lookup_external_safe(self, code: int) -> Optional[ErrorDescriptor]:
        """Resolve ``code`` for a response going to an external caller.

        Returns:
            None for the success code, the fallback for any code at or
            below the internal error limit, otherwise the same result
            as ``lookup``.
        """
        if code == SUCCESS_CODE:
            return None
        if code <= self.internal_error_limit:
            return self.fallback
        return self.lookup(code)

    def classify(self, value: Any) -> ErrorDescriptor:
        """Normalize an arbitrary error-like value into a descriptor.

        None means success, descriptors pass through unchanged and
        ErrnoException yields the descriptor it carries. Anything else
        is reported as the fallback.
        """
        if value is None:
            return self.success
        if isinstance(value, ErrorDescriptor):
            return value
        if isinstance(value, ErrnoException):
            return value.errno
        return self.fallback

    def descriptors(self) -> list[ErrorDescriptor]:
        """All registered descriptors, ordered by code."""
        with self._lock:
            return [self._entries[code] for code in sorted(self._entries)]

    def duplicates(self) -> dict[int, list[str]]:
        """Codes registered more than once with differing messages.

        Maps each such code to every message seen for it, in
        registration order.
        """
        with self._lock:
            return {code: list(messages) for code, messages in self._collisions.items()}
