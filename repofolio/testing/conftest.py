"""
Pytest plugin for repofolio testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
collected by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["repofolio.testing.conftest"]

Or import the fixtures directly:

    from repofolio.testing.fixtures import mock_repos_client, sample_config
"""

# Re-export all fixtures for pytest discovery
from repofolio.testing.fixtures import (
    mock_async_repos_client,
    mock_repos_client,
    sample_config,
    sample_forked_repository,
    sample_project,
    sample_raw_repository,
)

__all__ = [
    "mock_repos_client",
    "mock_async_repos_client",
    "sample_config",
    "sample_raw_repository",
    "sample_forked_repository",
    "sample_project",
]
