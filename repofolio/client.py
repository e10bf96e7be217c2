"""
repofolio main client.

Provides the synchronous interface to the project pipeline.
"""

from typing import Any

from repofolio.clients import ReposClient
from repofolio.config import PortfolioConfig
from repofolio.exceptions import FetchError
from repofolio.projector import DateFormatter, make_date_formatter, project
from repofolio.transport import HTTPTransport
from repofolio.types.repos import RawRepository
from repofolio.types.state import Loaded


class PortfolioClient:
    """
    Synchronous client for the project pipeline.

    Example:
        ```python
        from repofolio import PortfolioClient, PortfolioConfig

        with PortfolioClient(PortfolioConfig(username="octocat")) as client:
            state = client.load_projects()
            for item in state.projects:
                print(item.title, item.stars)

        # Or configure from REPOFOLIO_* environment variables
        client = PortfolioClient.from_env()
        ```
    """

    def __init__(self, config: PortfolioConfig) -> None:
        """
        Initialize the client.

        Args:
            config: Portfolio configuration
        """
        self.config = config

        self._transport = HTTPTransport(
            base_url=config.api_base_url,
            timeout=config.timeout,
        )

        self.repos = ReposClient(self._transport)

    @classmethod
    def from_env(cls) -> "PortfolioClient":
        """
        Create a client from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(PortfolioConfig.from_env())

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    @property
    def date_formatter(self) -> DateFormatter:
        """Update date formatter built from the configuration."""
        return make_date_formatter(self.config.tzinfo, self.config.date_format)

    def load_projects(self) -> Loaded:
        """
        Fetch the configured user's repositories once and project them.

        Never raises for fetch failures; they yield an empty Loaded state
        with the error kept on ``Loaded.failure``.
        """
        outcome: list[RawRepository] | FetchError
        try:
            outcome = self.repos.fetch(self.config.username)
        except FetchError as e:
            outcome = e
        return project(outcome, date_formatter=self.date_formatter)

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "PortfolioClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
