"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from repofolio.clients.repos import parse_repositories, user_repos_path
from repofolio.types.repos import RawRepository

if TYPE_CHECKING:
    from repofolio.async_transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository listing."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def fetch(self, username: str) -> list[RawRepository]:
        """
        List the public repositories of a user.

        Args:
            username: GitHub login

        Returns:
            List of RawRepository objects, forks included

        Raises:
            FetchError: On network, status or decoding failures
        """
        response = await self.transport.get_json(user_repos_path(username))
        return parse_repositories(response)
