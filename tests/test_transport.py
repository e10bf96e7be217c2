"""
Tests for the HTTP transports.

Feature: repofolio
"""

import asyncio
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from repofolio.async_transport import AsyncHTTPTransport
from repofolio.exceptions import (
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
)
from repofolio.transport import HTTPTransport, client_options, parse_error_response

BASE_URL = "https://api.github.com"


def make_transport() -> HTTPTransport:
    return HTTPTransport(base_url=BASE_URL)


@given(status_code=st.sampled_from([400, 401, 403, 404, 409, 422, 429, 500, 502, 503]))
@settings(max_examples=50, deadline=None)
def test_non_success_status_raises_http_status_error(status_code: int) -> None:
    """
    Property: every non-2xx status maps to an HttpStatusError carrying the code

    Exactly one request is made; nothing is retried.
    """
    transport = make_transport()
    response = httpx.Response(status_code, json={"message": "nope"})

    with patch.object(transport._client, "request", return_value=response) as request:
        with pytest.raises(HttpStatusError) as exc_info:
            transport.get_json("/users/octocat/repos")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "nope"
    assert request.call_count == 1


@given(body=st.lists(
    st.dictionaries(st.text(alphabet="abcdef_", max_size=5), st.integers(), max_size=3),
    max_size=5,
))
@settings(max_examples=50, deadline=None)
def test_success_returns_decoded_body(body: list) -> None:
    """Property: a 2xx JSON body is returned unmodified."""
    transport = make_transport()
    response = httpx.Response(200, json=body)

    with patch.object(transport._client, "request", return_value=response):
        assert transport.get_json("/users/octocat/repos") == body


class TestHTTPTransport:
    """Tests for failure mapping of the sync transport."""

    def test_network_failure(self) -> None:
        transport = make_transport()
        error = httpx.ConnectError("connection refused")

        with patch.object(transport._client, "request", side_effect=error) as request:
            with pytest.raises(NetworkError) as exc_info:
                transport.get_json("/users/octocat/repos")

        assert exc_info.value.code == "NETWORK_ERROR"
        assert exc_info.value.__cause__ is error
        assert request.call_count == 1

    def test_transport_timeout_is_network_failure(self) -> None:
        transport = make_transport()

        with patch.object(
            transport._client, "request", side_effect=httpx.ReadTimeout("timed out")
        ):
            with pytest.raises(NetworkError):
                transport.get_json("/users/octocat/repos")

    def test_invalid_json_is_malformed(self) -> None:
        transport = make_transport()
        response = httpx.Response(
            200,
            content=b"<html>maintenance</html>",
            headers={"X-GitHub-Request-Id": "ABCD:1"},
        )

        with patch.object(transport._client, "request", return_value=response):
            with pytest.raises(MalformedResponseError) as exc_info:
                transport.get_json("/users/octocat/repos")

        assert exc_info.value.request_id == "ABCD:1"

    def test_deeply_nested_json_is_malformed(self) -> None:
        transport = make_transport()
        response = httpx.Response(200, content=b"[" * 200000 + b"]" * 200000)

        with patch.object(transport._client, "request", return_value=response):
            with pytest.raises(MalformedResponseError) as exc_info:
                transport.get_json("/users/octocat/repos")

        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_object_body_is_returned_as_is(self) -> None:
        transport = make_transport()
        response = httpx.Response(200, json={"message": "rate limit exceeded"})

        with patch.object(transport._client, "request", return_value=response):
            assert transport.get_json("/users/octocat/repos") == {
                "message": "rate limit exceeded"
            }

    def test_request_uses_get_and_path(self) -> None:
        transport = make_transport()

        with patch.object(
            transport._client, "request", return_value=httpx.Response(200, json=[])
        ) as request:
            transport.get_json("/users/octocat/repos")

        request.assert_called_once_with("GET", "/users/octocat/repos", params=None)

    def test_context_manager_closes_client(self) -> None:
        with make_transport() as transport:
            client = transport._client
        assert client.is_closed


class TestErrorParsing:
    """Tests for parse_error_response."""

    def test_not_found(self) -> None:
        response = httpx.Response(
            404,
            json={"message": "Not Found"},
            headers={"X-GitHub-Request-Id": "REQ:42"},
        )

        error = parse_error_response(response)

        assert isinstance(error, NotFoundError)
        assert error.status_code == 404
        assert error.request_id == "REQ:42"

    def test_rate_limited(self) -> None:
        response = httpx.Response(
            403,
            json={"message": "API rate limit exceeded"},
            headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )

        error = parse_error_response(response)

        assert isinstance(error, RateLimitedError)
        assert error.reset_at == 1700000000
        assert error.status_code == 403

    def test_forbidden_with_quota_left_is_plain_status_error(self) -> None:
        response = httpx.Response(403, json={"message": "Forbidden"},
                                  headers={"X-RateLimit-Remaining": "12"})

        error = parse_error_response(response)

        assert type(error) is HttpStatusError
        assert error.code == "HTTP_ERROR"

    def test_non_json_error_body(self) -> None:
        error = parse_error_response(httpx.Response(502, content=b"Bad Gateway"))

        assert error.message == "HTTP 502"
        assert error.status_code == 502

    def test_bad_reset_header(self) -> None:
        response = httpx.Response(
            429, headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "soon"}
        )

        error = parse_error_response(response)

        assert isinstance(error, RateLimitedError)
        assert error.reset_at is None


class TestClientOptions:
    """Tests for shared httpx client options."""

    def test_timeout_left_to_httpx_by_default(self) -> None:
        options = client_options("https://api.github.com/", None)

        assert "timeout" not in options
        assert options["base_url"] == "https://api.github.com"
        assert options["follow_redirects"] is True
        assert options["headers"]["Accept"] == "application/vnd.github+json"

    def test_explicit_timeout(self) -> None:
        assert client_options(BASE_URL, 2.5)["timeout"] == 2.5


class TestAsyncHTTPTransport:
    """Tests for the async transport."""

    def test_success(self) -> None:
        async def run() -> object:
            async with AsyncHTTPTransport(base_url=BASE_URL) as transport:
                with patch.object(
                    transport._client,
                    "request",
                    new=AsyncMock(return_value=httpx.Response(200, json=[{"id": 1}])),
                ):
                    return await transport.get_json("/users/octocat/repos")

        assert asyncio.run(run()) == [{"id": 1}]

    def test_network_failure(self) -> None:
        async def run() -> None:
            async with AsyncHTTPTransport(base_url=BASE_URL) as transport:
                with patch.object(
                    transport._client,
                    "request",
                    new=AsyncMock(side_effect=httpx.ConnectError("unreachable")),
                ):
                    await transport.get_json("/users/octocat/repos")

        with pytest.raises(NetworkError):
            asyncio.run(run())

    def test_status_failure(self) -> None:
        async def run() -> None:
            async with AsyncHTTPTransport(base_url=BASE_URL) as transport:
                with patch.object(
                    transport._client,
                    "request",
                    new=AsyncMock(return_value=httpx.Response(404, json={"message": "Not Found"})),
                ):
                    await transport.get_json("/users/ghost/repos")

        with pytest.raises(NotFoundError):
            asyncio.run(run())
