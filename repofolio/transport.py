"""
HTTP Transport for repofolio.

Issues single-attempt GET requests against the GitHub REST API and turns
failures into typed exceptions.
"""

import time
from typing import Any

import httpx

from repofolio.exceptions import (
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
)
from repofolio.logging import log_http_request, log_http_response

DEFAULT_HEADERS = {
    "Accept": "application/vnd.github+json",
    "User-Agent": "repofolio",
}


def client_options(base_url: str, timeout: float | None) -> dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients."""
    options: dict[str, Any] = {
        "base_url": base_url.rstrip("/"),
        "headers": DEFAULT_HEADERS,
        "follow_redirects": True,
    }
    # Without an explicit timeout httpx applies its own default
    if timeout is not None:
        options["timeout"] = timeout
    return options


class HTTPTransport:
    """
    HTTP transport layer for unauthenticated API reads.

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
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Request timeout in seconds (None keeps the httpx default)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(**client_options(base_url, timeout))

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_json(
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
            response = self._client.request("GET", path, params=params)
        except httpx.RequestError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        elapsed_ms = (time.monotonic() - started) * 1000
        return handle_response(response, f"{self.base_url}{path}", elapsed_ms)


def handle_response(
    response: httpx.Response, url: str, elapsed_ms: float | None = None
) -> Any:
    """
    Validate a response and return its decoded body.

    Args:
        response: Response obtained from the API
        url: Requested URL, for logging
        elapsed_ms: Request duration for logging (optional)

    Returns:
        Decoded JSON body

    Raises:
        HttpStatusError: On a non-success status
        MalformedResponseError: If the body is not JSON
    """
    if not response.is_success:
        log_http_response(response.status_code, url, elapsed_ms=elapsed_ms)
        raise parse_error_response(response)

    try:
        body = response.json()
    except (ValueError, RecursionError) as e:
        log_http_response(response.status_code, url, elapsed_ms=elapsed_ms)
        raise MalformedResponseError(
            "Response body is not valid JSON",
            response.headers.get("X-GitHub-Request-Id"),
        ) from e

    log_http_response(response.status_code, url, body, elapsed_ms)
    return body


def parse_error_response(response: httpx.Response) -> HttpStatusError:
    """
    Parse an error response into a typed exception.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate HttpStatusError subclass
    """
    try:
        data = response.json()
    except ValueError:
        data = {}

    if not isinstance(data, dict):
        data = {}

    message = data.get("message") or f"HTTP {response.status_code}"
    request_id = response.headers.get("X-GitHub-Request-Id")
    status_code = response.status_code

    if status_code == 404:
        return NotFoundError("NOT_FOUND", message, status_code, request_id)

    if status_code in (403, 429) and response.headers.get("X-RateLimit-Remaining") == "0":
        reset_str = response.headers.get("X-RateLimit-Reset")
        try:
            reset_at = int(reset_str) if reset_str else None
        except ValueError:
            reset_at = None
        return RateLimitedError("RATE_LIMITED", message, status_code, reset_at, request_id)

    return HttpStatusError("HTTP_ERROR", message, status_code, request_id)
