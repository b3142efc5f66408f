# -*- coding: utf-8 -*-
"""
Lazy mount cache - mount a step the first time it is opened, never unmount.

Two hosts satisfy the same policy:
- wizard: opened step widgets stay in a stacked container; only the
  current one is visible
- tab view: the tab widget retains all of its pages, so everything is
  mounted up front
"""

from typing import FrozenSet, Iterable, Iterator, Set

from utils.logger import get_logger

logger = get_logger(__name__)


class OpenedSet:
    """Grow-only set of step indices that have been current at least once."""

    def __init__(self, initial: Iterable[int] = ()):
        self._indices: Set[int] = set(initial)

    def add(self, index: int) -> bool:
        """Add ``index``; returns True if it was not opened before."""
        if index in self._indices:
            return False
        self._indices.add(index)
        return True

    def snapshot(self) -> FrozenSet[int]:
        return frozenset(self._indices)

    def __contains__(self, index) -> bool:
        return index in self._indices

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._indices))

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self):
        return f"OpenedSet({sorted(self._indices)})"


class LazyMountCache:
    """Decides which step contents belong in the widget tree."""

    def __init__(self, host_keeps_alive: bool, initial_index: int = 0):
        self.host_keeps_alive = host_keeps_alive
        self._opened = OpenedSet([initial_index])

    @property
    def opened(self) -> FrozenSet[int]:
        return self._opened.snapshot()

    def should_mount(self, index: int) -> bool:
        return self.host_keeps_alive or index in self._opened

    def mark_opened(self, index: int) -> bool:
        added = self._opened.add(index)
        if added:
            logger.debug(f"Step {index} opened; opened set is now {sorted(self._opened)}")
        return added

    def is_opened(self, index: int) -> bool:
        return index in self._opened
