"""repofolio - GitHub project pipeline for portfolio pages."""

from repofolio.async_client import AsyncPortfolioClient
from repofolio.client import PortfolioClient
from repofolio.config import PortfolioConfig
from repofolio.exceptions import (
    ConfigurationError,
    FetchError,
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    RepofolioError,
    ViewLifecycleError,
)
from repofolio.logging import configure_logging, get_logger
from repofolio.projector import make_date_formatter, project, to_project
from repofolio.types import LOADING, Loaded, Loading, LoadState, Project, RawRepository
from repofolio.view import ProjectsView, Renderer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "PortfolioClient",
    "AsyncPortfolioClient",
    "PortfolioConfig",
    # Pipeline
    "project",
    "to_project",
    "make_date_formatter",
    "ProjectsView",
    "Renderer",
    # Types
    "RawRepository",
    "Project",
    "LoadState",
    "Loading",
    "Loaded",
    "LOADING",
    # Exceptions
    "RepofolioError",
    "ConfigurationError",
    "ViewLifecycleError",
    "FetchError",
    "NetworkError",
    "HttpStatusError",
    "NotFoundError",
    "RateLimitedError",
    "MalformedResponseError",
    # Logging
    "configure_logging",
    "get_logger",
]
