"""
Async HTTP Transport for repofolio.

Single-attempt GET requests using the httpx async client. Response handling
is shared with the sync transport.
"""

import time
from typing import Any

import httpx

from repofolio.exceptions import NetworkError
from repofolio.logging import log_http_request
from repofolio.transport import client_options, handle_response


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for unauthenticated API reads.

    Handles:
    - Exactly one request per call, no retries
    - Redirects for renamed accounts
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Request timeout in seconds (None keeps the httpx default)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(**client_options(base_url, timeout))

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a GET request and decode the JSON body.

        Args:
            path: API path (e.g., "/users/octocat/repos")
            params: Query parameters

        Returns:
            Decoded JSON body of any shape

        Raises:
            NetworkError: If no response was obtained
            HttpStatusError: On a non-success status
            MalformedResponseError: If the body is not JSON
        """
        log_http_request("GET", f"{self.base_url}{path}", params)
        started = time.monotonic()

        try:
            response = await self._client.request("GET", path, params=params)
        except httpx.RequestError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        elapsed_ms = (time.monotonic() - started) * 1000
        return handle_response(response, f"{self.base_url}{path}", elapsed_ms)
