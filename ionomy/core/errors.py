"""
Error Taxonomy

Every error the client raises falls in one of three groups:

    ArgumentError  - bad input, raised synchronously before any I/O
    ApiError       - the remote envelope reported success: false
    TransportError - network/HTTP failure from aiohttp, propagated unchanged

Nothing is retried or logged-and-swallowed inside the library; recovery
policy belongs to the caller.

Example:
    >>> try:
    ...     await client.balance("hive")
    ... except ApiError as e:
    ...     print(e.endpoint, e.message)
    ... except TransportError as e:
    ...     print("network problem", e)
"""

from typing import Optional

import aiohttp


class IonomyError(Exception):
    """Base exception for errors raised by this library"""


class ArgumentError(IonomyError, ValueError):
    """A required argument is missing or outside its allowed values"""


class ApiError(IonomyError):
    """
    The API answered with an unsuccessful envelope.

    Attributes:
        message: Message from the envelope (or a generic fallback)
        endpoint: Endpoint path the request was sent to
        status: HTTP status of the response, when known
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.status = status

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, endpoint={self.endpoint!r}, status={self.status!r})"


# Transport failures are aiohttp's own exceptions; the alias only gives
# callers a name to catch.
TransportError = aiohttp.ClientError
