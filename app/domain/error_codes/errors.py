"""
Domain-specific errors for the error codes bounded context.

All errors raised from the domain layer must be defined here.
No framework imports allowed.
"""


class ErrorCodesDomainError(Exception):
    """Base error for all error codes domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class DuplicateErrorCodeError(ErrorCodesDomainError):
    """Raised by a strict registry when a code is registered twice."""

    def __init__(self, code: int, existing: str, incoming: str) -> None:
        super().__init__(
            f"Error code {code} already registered as {existing!r}, "
            f"refusing {incoming!r}"
        )
        self.code = code
        self.existing = existing
        self.incoming = incoming
