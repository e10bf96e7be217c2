"""
Pytest fixtures for repofolio testing.

Provides factories and fixtures for tests of code built on the pipeline.
"""

from typing import Any, Generator

import pytest

from repofolio.config import PortfolioConfig
from repofolio.testing.mock import MockAsyncReposClient, MockReposClient
from repofolio.types.repos import Project, RawRepository


# ============================================================================
# Factory Helpers
# ============================================================================


def create_mock_repository_data(**overrides: Any) -> dict[str, Any]:
    """
    Create an API-shaped repository record.

    Example:
        ```python
        data = create_mock_repository_data(name="alpha", fork=True)
        ```
    """
    data: dict[str, Any] = {
        "id": 1,
        "name": "sample-repo",
        "description": "A sample repository for testing",
        "html_url": "https://github.com/octocat/sample-repo",
        "language": "Python",
        "stargazers_count": 42,
        "forks_count": 7,
        "updated_at": "2024-01-15T10:30:00Z",
        "fork": False,
    }
    data.update(overrides)
    if "html_url" not in overrides:
        data["html_url"] = f"https://github.com/octocat/{data['name']}"
    return data


def create_mock_raw_repository(**overrides: Any) -> RawRepository:
    """Create a RawRepository with sensible defaults."""
    return RawRepository.from_dict(create_mock_repository_data(**overrides))


def create_mock_project(**overrides: Any) -> Project:
    """Create a Project with sensible defaults."""
    values: dict[str, Any] = {
        "id": 1,
        "title": "sample-repo",
        "description": "A sample repository for testing",
        "github_url": "https://github.com/octocat/sample-repo",
        "language": "Python",
        "stars": 42,
        "forks": 7,
        "updated_at": "1/15/2024",
    }
    values.update(overrides)
    return Project(**values)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_repos_client() -> Generator[MockReposClient, None, None]:
    """
    Provide a MockReposClient for testing.

    Example:
        ```python
        def test_my_feature(mock_repos_client):
            mock_repos_client.configure_fetch(response=[...])
            result = my_function(mock_repos_client)
            assert mock_repos_client.was_called("repos.fetch")
        ```
    """
    client = MockReposClient()
    yield client
    client.reset()


@pytest.fixture
def mock_async_repos_client() -> Generator[MockAsyncReposClient, None, None]:
    """Provide a MockAsyncReposClient for testing views."""
    client = MockAsyncReposClient()
    yield client
    client.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_config() -> PortfolioConfig:
    """Provide a sample PortfolioConfig."""
    return PortfolioConfig(
        username="octocat",
        contact_email="octocat@example.com",
        social_links={
            "GitHub": "https://github.com/octocat",
            "LinkedIn": "https://www.linkedin.com/in/octocat/",
        },
    )


@pytest.fixture
def sample_raw_repository() -> RawRepository:
    """Provide a sample non-fork RawRepository."""
    return create_mock_raw_repository()


@pytest.fixture
def sample_forked_repository() -> RawRepository:
    """Provide a sample forked RawRepository."""
    return create_mock_raw_repository(id=2, name="forked-repo", fork=True)


@pytest.fixture
def sample_project() -> Project:
    """Provide a sample Project."""
    return create_mock_project()
