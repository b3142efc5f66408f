# -*- coding: utf-8 -*-
"""
Addressable routes for the access console.

A route is a path plus query string, e.g. ``/access/create/b_demo?step=2``.
The Router keeps the navigation history and notifies listeners whenever
the current route changes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Route:
    """Immutable route: path and query parameters."""
    path: str
    query: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, url: str) -> 'Route':
        parts = urlsplit(url)
        path = parts.path or "/"
        if len(path) > 1:
            path = path.rstrip("/")
        return cls(path=path, query=dict(parse_qsl(parts.query)))

    @property
    def step(self) -> int:
        """Step indicator; absent, negative or non-numeric values map to 0."""
        raw = self.query.get(Config.STEP_QUERY_PARAM)
        if raw is None:
            return 0
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return 0
        return value if value >= 0 else 0

    def segments(self) -> List[str]:
        return [part for part in self.path.split("/") if part]

    def with_step(self, step: int) -> 'Route':
        query = dict(self.query)
        query[Config.STEP_QUERY_PARAM] = str(step)
        return Route(path=self.path, query=query)

    def to_url(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"

    def __str__(self):
        return self.to_url()


def path_under(path: str, prefix: str) -> bool:
    """True if ``path`` equals ``prefix`` or is nested below it."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def resource_route(prefix: str, resource_id: Optional[str], step: int) -> Route:
    """Build ``{prefix}/{resource_id}?step=N`` (id segment omitted while unknown)."""
    path = prefix.rstrip("/")
    if resource_id:
        path = f"{path}/{resource_id}"
    return Route(path=path, query={Config.STEP_QUERY_PARAM: str(step)})


def resource_id_from(route: Route, prefix: str) -> Optional[str]:
    """Extract the id segment that directly follows ``prefix``."""
    if not path_under(route.path, prefix):
        return None
    remainder = route.path[len(prefix.rstrip("/")):].strip("/")
    if not remainder:
        return None
    return remainder.split("/")[0]


class Router(QObject):
    """
    In-process navigation history.

    Signals:
        route_changed(Route): emitted after every push/replace/go_back
    """

    route_changed = pyqtSignal(object)

    def __init__(self, initial: str = "/", parent=None):
        super().__init__(parent)
        self._history: List[Route] = [Route.parse(initial)]

    @property
    def current(self) -> Route:
        return self._history[-1]

    @property
    def history(self) -> List[Route]:
        return list(self._history)

    def push(self, route) -> Route:
        """Navigate to a new route (Route or URL string)."""
        if isinstance(route, str):
            route = Route.parse(route)
        logger.info(f"Navigate: {self.current} -> {route}")
        self._history.append(route)
        self.route_changed.emit(route)
        return route

    def replace(self, route) -> Route:
        """Swap the current route without growing the history."""
        if isinstance(route, str):
            route = Route.parse(route)
        logger.debug(f"Replace route: {self.current} -> {route}")
        self._history[-1] = route
        self.route_changed.emit(route)
        return route

    def go_back(self) -> bool:
        if len(self._history) < 2:
            return False
        self._history.pop()
        logger.info(f"Navigate back to {self.current}")
        self.route_changed.emit(self.current)
        return True
