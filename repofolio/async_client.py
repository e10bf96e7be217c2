"""
repofolio async client.

Provides the async interface to the project pipeline and creates the views
that own a page's load state.
"""

from typing import Any

from repofolio.async_clients import AsyncReposClient
from repofolio.async_transport import AsyncHTTPTransport
from repofolio.config import PortfolioConfig
from repofolio.projector import DateFormatter, make_date_formatter
from repofolio.view import ProjectsView


class AsyncPortfolioClient:
    """
    Async client for the project pipeline.

    Example:
        ```python
        import asyncio
        from repofolio import AsyncPortfolioClient, PortfolioConfig

        async def main():
            config = PortfolioConfig(username="octocat")
            async with AsyncPortfolioClient(config) as client:
                view = client.projects_view()
                view.activate()
                state = await view.wait()
                print(len(state.projects))

        asyncio.run(main())
        ```
    """

    def __init__(self, config: PortfolioConfig) -> None:
        """
        Initialize the async client.

        Args:
            config: Portfolio configuration
        """
        self.config = config

        self._transport = AsyncHTTPTransport(
            base_url=config.api_base_url,
            timeout=config.timeout,
        )

        self.repos = AsyncReposClient(self._transport)

    @classmethod
    def from_env(cls) -> "AsyncPortfolioClient":
        """
        Create an async client from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(PortfolioConfig.from_env())

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    @property
    def date_formatter(self) -> DateFormatter:
        """Update date formatter built from the configuration."""
        return make_date_formatter(self.config.tzinfo, self.config.date_format)

    def projects_view(self) -> ProjectsView:
        """Create a fresh, inactive view for the configured user."""
        return ProjectsView(
            self.repos,
            self.config.username,
            date_formatter=self.date_formatter,
        )

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncPortfolioClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
