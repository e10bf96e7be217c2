"""repofolio async resource clients."""

from repofolio.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
