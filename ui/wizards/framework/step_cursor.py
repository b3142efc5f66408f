# -*- coding: utf-8 -*-
"""
Step Cursor - the current step index.

Two interchangeable backings, chosen once from the navigation mode:
- RouteStepCursor: the index is derived from the route's ``step``
  indicator; moving means navigating
- LocalStepCursor: the index lives in memory; the route only mirrors it

Callers never need to know which one they hold.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.router import Route, Router, path_under, resource_route
from ui.wizards.framework.navigation_mode import NavigationMode
from utils.logger import get_logger

logger = get_logger(__name__)


class StepCursor(QObject):
    """
    Base cursor. Invariant: 0 <= index < step_count (index 0 when empty).

    Signals:
        changed(old_index, new_index)
    """

    changed = pyqtSignal(int, int)

    def __init__(self, router: Optional[Router], route_prefix: str,
                 step_count: int, initial_index: int = 0, parent=None):
        super().__init__(parent)
        self.router = router
        self.route_prefix = route_prefix
        self._step_count = max(step_count, 0)
        self._index = self._clamp(initial_index)

    @property
    def index(self) -> int:
        return self._index

    @property
    def step_count(self) -> int:
        return self._step_count

    def _clamp(self, index: int) -> int:
        if self._step_count == 0:
            return 0
        return max(0, min(index, self._step_count - 1))

    def _set_index(self, index: int):
        new_index = self._clamp(index)
        if new_index == self._index:
            return
        old_index = self._index
        self._index = new_index
        logger.debug(f"{self.__class__.__name__}: {old_index} -> {new_index}")
        self.changed.emit(old_index, new_index)

    def set_step_count(self, count: int):
        """Update the number of visible steps, clamping the index if needed."""
        self._step_count = max(count, 0)
        self._set_index(self._index)

    def route_for(self, index: int, resource_id: Optional[str]) -> Route:
        return resource_route(self.route_prefix, resource_id, index)

    def move_to(self, index: int, resource_id: Optional[str] = None, push: bool = False):
        """
        Make ``index`` current.

        Args:
            index: Target visible index (clamped)
            resource_id: Id carried by the resulting route
            push: Push a new history entry instead of replacing the current one
        """
        raise NotImplementedError

    def _navigate(self, route: Route, push: bool):
        if self.router is None:
            return
        if push:
            self.router.push(route)
        else:
            self.router.replace(route)


class RouteStepCursor(StepCursor):
    """Cursor derived from the router's current route."""

    def __init__(self, router: Router, route_prefix: str, step_count: int, parent=None):
        super().__init__(router, route_prefix, step_count, router.current.step, parent)
        router.route_changed.connect(self._on_route_changed)

    def move_to(self, index: int, resource_id: Optional[str] = None, push: bool = False):
        self._navigate(self.route_for(self._clamp(index), resource_id), push)

    def _on_route_changed(self, route: Route):
        if not path_under(route.path, self.route_prefix):
            # Leaving the flow (e.g. back to the listing) does not move the cursor
            return
        self._set_index(route.step)


class LocalStepCursor(StepCursor):
    """Cursor kept in memory; the route is updated to mirror it."""

    def move_to(self, index: int, resource_id: Optional[str] = None, push: bool = False):
        self._set_index(index)
        self._navigate(self.route_for(self._index, resource_id), push)


def create_step_cursor(mode: NavigationMode, router: Router, route_prefix: str,
                       step_count: int, parent=None) -> StepCursor:
    """Pick the cursor backing for ``mode``."""
    if mode is NavigationMode.WIZARD:
        return RouteStepCursor(router, route_prefix, step_count, parent)
    return LocalStepCursor(router, route_prefix, step_count, router.current.step, parent)
