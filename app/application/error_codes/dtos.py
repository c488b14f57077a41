"""
Data Transfer Objects for the error codes application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DescribeErrorQuery:
    """Input DTO for resolving an error code.

    Attributes:
        code: Numeric status code to resolve.
        external: Apply the external-safe policy (mask internal codes).
    """

    code: int
    external: bool = True


@dataclass(frozen=True)
class DescribeErrorResult:
    """Output DTO for a resolved error code.

    Attributes:
        code: Code actually reported (the fallback code when masked).
        message: Message to show the caller.
    """

    code: int
    message: str
