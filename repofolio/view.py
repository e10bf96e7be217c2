"""
Projects view lifecycle.

A ProjectsView owns the load state of one projects section. Activating it
starts exactly one fetch; the settled outcome is projected and stored once.
Deactivating it cancels an in-flight fetch and discards anything that
settles afterwards.
"""

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from repofolio.exceptions import FetchError, ViewLifecycleError
from repofolio.logging import get_logger
from repofolio.projector import DateFormatter, project
from repofolio.types.repos import RawRepository
from repofolio.types.state import LOADING, Loaded, LoadState

if TYPE_CHECKING:
    from repofolio.async_clients.repos import AsyncReposClient

logger = get_logger("pipeline")

StateListener = Callable[[LoadState], None]


class Renderer(Protocol):
    """Anything that can draw the projects section from a load state."""

    def render(self, state: LoadState) -> None: ...


class ProjectsView:
    """
    Load state owner for the projects section of one page view.

    Example:
        ```python
        async with AsyncPortfolioClient(config) as client:
            view = client.projects_view()
            view.activate()
            view.render(renderer)  # draws the loading state
            await view.wait()
            view.render(renderer)  # draws the projects
            view.deactivate()
        ```
    """

    def __init__(
        self,
        repos: "AsyncReposClient",
        username: str,
        date_formatter: DateFormatter | None = None,
    ) -> None:
        """
        Initialize the view.

        Args:
            repos: Async repos client used for the single fetch
            username: GitHub login whose repositories are shown
            date_formatter: Formatter for update dates (optional)
        """
        self.repos = repos
        self.username = username
        self.date_formatter = date_formatter

        self._state: LoadState = LOADING
        self._task: asyncio.Task[None] | None = None
        self._active = False
        self._closed = False
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LoadState:
        """Current load state; safe to read on every render pass."""
        return self._state

    @property
    def active(self) -> bool:
        return self._active

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for the Loading to Loaded transition.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def activate(self) -> None:
        """
        Start the one fetch of this view.

        Must be called from a running event loop. Calling it again while the
        view is active does nothing.

        Raises:
            ViewLifecycleError: If the view was already deactivated
        """
        if self._closed:
            raise ViewLifecycleError(
                "View was deactivated; create a new view to fetch again"
            )
        if self._active:
            return

        loop = asyncio.get_running_loop()
        self._active = True
        self._task = loop.create_task(self._load())
        logger.debug("Projects view activated for %s", self.username)

    def deactivate(self) -> None:
        """Tear the view down, cancelling any in-flight fetch."""
        if self._closed:
            return

        self._closed = True
        self._active = False
        self._listeners.clear()

        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.debug("Cancelled in-flight fetch for %s", self.username)

    async def wait(self) -> LoadState:
        """
        Wait for the fetch to settle.

        Returns:
            The current state; Loading if the view was torn down first

        Raises:
            ViewLifecycleError: If the view was never activated
        """
        if self._task is None:
            raise ViewLifecycleError("View has not been activated")

        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        return self._state

    def render(self, renderer: Renderer) -> None:
        """Hand the current state to a renderer."""
        renderer.render(self._state)

    async def _load(self) -> None:
        outcome: list[RawRepository] | FetchError
        try:
            outcome = await self.repos.fetch(self.username)
        except FetchError as e:
            outcome = e
        except Exception as e:
            if self._closed:
                return
            # The section must still leave Loading
            logger.exception("Unexpected error loading projects for %s", self.username)
            self._settle(Loaded((), failure=e))
            return

        if self._closed:
            logger.debug("Discarding fetch result for torn down view of %s", self.username)
            return

        self._settle(project(outcome, date_formatter=self.date_formatter))

    def _settle(self, state: Loaded) -> None:
        if self._state.is_loaded:
            return

        self._state = state
        logger.info(
            "Loaded %d projects for %s", len(state.projects), self.username
        )
        for listener in list(self._listeners):
            listener(state)
