"""Error taxonomy for loading the portfolio collections.

An empty but valid response is not an error; it is reported through
`ViewState.EMPTY` instead.
"""

from __future__ import annotations


class PortfolioLoadError(Exception):
    """Base class for failures while fetching the collections payload."""

    kind = "error"


class NetworkFailure(PortfolioLoadError):
    """Request was rejected, timed out, or returned a non-success status."""

    kind = "network"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseFailure(PortfolioLoadError):
    """Response body was not valid JSON or not a JSON array."""

    kind = "parse"
