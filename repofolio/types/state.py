"""Load state of the projects section."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from repofolio.types.repos import Project

if TYPE_CHECKING:
    from repofolio.exceptions import FetchError


@dataclass(frozen=True)
class Loading:
    """No project data is available yet."""

    @property
    def is_loaded(self) -> bool:
        return False


@dataclass(frozen=True)
class Loaded:
    """Terminal state: the projects to display, possibly none."""

    projects: tuple[Project, ...] = ()
    # Diagnostic only; renderers treat a failed load as an empty one
    failure: "FetchError | Exception | None" = field(default=None, compare=False)

    @property
    def is_loaded(self) -> bool:
        return True

    @property
    def degraded(self) -> bool:
        """True when the empty list stands in for a failed fetch."""
        return self.failure is not None


LoadState = Loading | Loaded

LOADING = Loading()
