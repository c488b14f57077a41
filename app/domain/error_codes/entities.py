"""
Domain entities for the error codes bounded context.

An ErrorDescriptor is the value every service boundary agrees on:
a numeric status code and the message that goes with it.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorDescriptor:
    """An immutable {code, message} pair describing one error condition.

    Attributes:
        code: Numeric status code. 0 means success.
        message: Human-readable message safe to pass on to callers.
    """

    code: int
    message: str

    def __str__(self) -> str:
        return f"StatusCode: {self.code}, StatusMessage: {self.message}"

    def with_prompt(self, prompt: str) -> "ErrorDescriptor":
        """Return a copy carrying ``prompt`` as its message."""
        if not prompt:
            return self
        return ErrorDescriptor(code=self.code, message=prompt)

    def to_dict(self) -> dict[str, int | str]:
        return {"code": self.code, "message": self.message}


class ErrnoException(Exception):
    """Raisable wrapper around an ErrorDescriptor.

    Request code raises this; the centralized error handlers turn it
    into a response using the external-safe lookup.

    Attributes:
        errno: The descriptor being reported.
        status_code: HTTP status to answer with.
    """

    def __init__(self, errno: ErrorDescriptor, status_code: Optional[int] = None) -> None:
        super().__init__(str(errno))
        self.errno = errno
        self.status_code = status_code


class HTTPErrnoException(ErrnoException):
    """An HTTP-level descriptor, reported verbatim.

    HTTP descriptors are never registered; their code doubles as the
    HTTP status of the response.
    """

    def __init__(self, errno: ErrorDescriptor) -> None:
        super().__init__(errno, status_code=errno.code)
