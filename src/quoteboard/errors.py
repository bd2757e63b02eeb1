"""Failure taxonomy for quote fetching.

Callers that only care whether a fetch worked catch :class:`FetchFailed`;
the subclasses keep the underlying cause apart for logging.
"""

from __future__ import annotations


class FetchFailed(Exception):
    """A quote could not be fetched."""


class NetworkError(FetchFailed):
    """Endpoint unreachable, timed out, or answered with an error status."""


class DecodeError(FetchFailed):
    """Response body is not JSON or does not have the expected shape."""


class EmptyResultError(FetchFailed):
    """Response contained an empty ``quotes`` list."""
