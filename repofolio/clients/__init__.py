"""repofolio resource clients."""

from repofolio.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
