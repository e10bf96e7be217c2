"""repofolio type definitions.

This module exports all data model types used by the pipeline.
"""

from repofolio.types.repos import NO_DESCRIPTION, Project, RawRepository
from repofolio.types.state import LOADING, Loaded, Loading, LoadState

__all__ = [
    # Repository types
    "RawRepository",
    "Project",
    "NO_DESCRIPTION",
    # Load state
    "LoadState",
    "Loading",
    "Loaded",
    "LOADING",
]
