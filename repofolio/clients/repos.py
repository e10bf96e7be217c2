"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from repofolio.exceptions import MalformedResponseError
from repofolio.types.repos import RawRepository

if TYPE_CHECKING:
    from repofolio.transport import HTTPTransport


def user_repos_path(username: str) -> str:
    """API path listing the public repositories of a user."""
    return f"/users/{quote(username, safe='')}/repos"


def parse_repositories(data: Any) -> list[RawRepository]:
    """
    Decode a repository listing without filtering it.

    Args:
        data: Decoded JSON body

    Returns:
        Records in the order the API returned them

    Raises:
        MalformedResponseError: If the body is not a list of repository objects
    """
    if not isinstance(data, list):
        detail = ""
        if isinstance(data, dict) and data.get("message"):
            detail = f": {data['message']}"
        raise MalformedResponseError(
            f"Expected a list of repositories, got {type(data).__name__}{detail}"
        )

    repos: list[RawRepository] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise MalformedResponseError(
                f"Repository at index {index} is {type(item).__name__}, not an object"
            )
        try:
            repos.append(RawRepository.from_dict(item))
        except KeyError as e:
            raise MalformedResponseError(
                f"Repository at index {index} is missing field {e.args[0]!r}"
            ) from e
    return repos


class ReposClient:
    """Client for repository listing."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def fetch(self, username: str) -> list[RawRepository]:
        """
        List the public repositories of a user.

        Makes exactly one request; the first page of results is all that is
        returned.

        Args:
            username: GitHub login

        Returns:
            List of RawRepository objects, forks included

        Raises:
            NetworkError: If the API could not be reached
            HttpStatusError: On a non-success status
            MalformedResponseError: If the body is not a repository list
        """
        response = self.transport.get_json(user_repos_path(username))
        return parse_repositories(response)
