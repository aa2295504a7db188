"""
Provider failure taxonomy.

All three kinds are handled the same way at the adapter boundary (logged and
turned into an empty, failed FetchResult); the split exists so logs say what
went wrong.
"""
from typing import Optional


class ProviderError(Exception):
    """Base class for anything that stops a provider call from yielding data."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class NetworkFailure(ProviderError):
    """Connection or transport error before a response arrived."""


class UpstreamError(ProviderError):
    """Provider answered with a non-success status, or did not answer in time."""

    def __init__(self, source: str, message: str, status_code: Optional[int] = None):
        super().__init__(source, message)
        self.status_code = status_code


class ParseFailure(ProviderError):
    """Response body is not JSON or does not have the expected shape."""
