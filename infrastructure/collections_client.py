"""HTTP client for the remote collections endpoint.

Performs a single GET returning the raw JSON array of collection records.
Transport problems surface as `NetworkFailure`; an unusable body surfaces as
`ParseFailure`.
"""

from __future__ import annotations

from typing import Any

from loguru import logger
import requests

from core.errors import NetworkFailure, ParseFailure


class CollectionsClient:
    """Fetch raw collection records from `url`."""

    def __init__(
        self,
        url: str,
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> list[Any]:
        """Return the decoded JSON array.

        Raises:
            NetworkFailure: connection error, timeout or non-2xx status.
            ParseFailure: body is not JSON or not a JSON array.
        """
        logger.info("Fetching collections from {}", self._url)
        try:
            response = self._session.get(
                self._url, timeout=self._timeout, headers={"Accept": "application/json"}
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as ex:
            raise NetworkFailure("Request timed out") from ex
        except requests.exceptions.ConnectionError as ex:
            raise NetworkFailure("Connection error") from ex
        except requests.exceptions.HTTPError as ex:
            status = ex.response.status_code if ex.response is not None else None
            raise NetworkFailure(f"HTTP error {status}", status_code=status) from ex
        except requests.exceptions.RequestException as ex:
            raise NetworkFailure(f"Request error: {ex}") from ex

        try:
            data = response.json()
        except ValueError as ex:
            raise ParseFailure("Response body is not valid JSON") from ex

        if not isinstance(data, list):
            raise ParseFailure(f"Expected a JSON array, got {type(data).__name__}")

        logger.info("Fetched {} collection records", len(data))
        return data

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
