"""repofolio testing utilities.

Provides mock clients and fixtures for testing code built on the pipeline.
"""

from repofolio.testing.fixtures import (
    create_mock_project,
    create_mock_raw_repository,
    create_mock_repository_data,
)
from repofolio.testing.mock import (
    MockAsyncReposClient,
    MockCall,
    MockReposClient,
    MockResponse,
)

__all__ = [
    # Mock clients
    "MockReposClient",
    "MockAsyncReposClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository_data",
    "create_mock_raw_repository",
    "create_mock_project",
]
