from repofolio.testing.conftest import (  # noqa: F401
    mock_async_repos_client,
    mock_repos_client,
    sample_config,
    sample_forked_repository,
    sample_project,
    sample_raw_repository,
)
