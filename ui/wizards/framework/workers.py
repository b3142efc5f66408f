# -*- coding: utf-8 -*-
"""
Background workers for the flow's suspension points (commit, submit,
enrichment fetch).

Results are always delivered back on the GUI thread.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Dict, Set

from PyQt5.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from utils.logger import get_logger

logger = get_logger(__name__)

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[Exception], None]


class OperationWorker(QThread):
    """Runs one blocking callable off the GUI thread."""

    succeeded = pyqtSignal(object)  # result
    failed = pyqtSignal(object)  # exception

    def __init__(self, name: str, func: Callable[[], Any]):
        super().__init__()
        self.name = name
        self._func = func

    def run(self):
        """Run the operation in background."""
        try:
            result = self._func()
        except Exception as e:
            logger.debug(f"Worker '{self.name}' failed: {e}")
            self.failed.emit(e)
            return
        self.succeeded.emit(result)


class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class TaskRunner(QObject, metaclass=ABCQObjectMeta):
    """Schedules blocking operations and reports their outcome."""

    @abstractmethod
    def submit(self, name: str, func: Callable[[], Any],
               on_success: SuccessCallback, on_failure: FailureCallback):
        """Run ``func``; exactly one of the callbacks fires later."""
        pass

    @abstractmethod
    def shutdown(self):
        """Drop callbacks of outstanding operations."""
        pass


# Workers outlive their runner until the thread finishes
_live_workers: Set[OperationWorker] = set()


def _release_worker(worker: OperationWorker):
    _live_workers.discard(worker)
    worker.deleteLater()


class ThreadTaskRunner(TaskRunner):
    """TaskRunner backed by one QThread per operation."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._callbacks: Dict[OperationWorker, tuple] = {}
        self._is_shut_down = False

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def submit(self, name: str, func: Callable[[], Any],
               on_success: SuccessCallback, on_failure: FailureCallback):
        if self._is_shut_down:
            logger.warning(f"Runner shut down; ignoring '{name}'")
            return
        worker = OperationWorker(name, func)
        self._callbacks[worker] = (on_success, on_failure)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(lambda w=worker: _release_worker(w))
        _live_workers.add(worker)
        logger.debug(f"Starting worker '{name}'")
        worker.start()

    def shutdown(self):
        self._is_shut_down = True
        if self._callbacks:
            logger.info(f"Abandoning {len(self._callbacks)} outstanding operation(s)")
        self._callbacks.clear()

    @pyqtSlot(object)
    def _on_succeeded(self, result):
        callbacks = self._callbacks.pop(self.sender(), None)
        if callbacks is None:
            return
        callbacks[0](result)

    @pyqtSlot(object)
    def _on_failed(self, error):
        callbacks = self._callbacks.pop(self.sender(), None)
        if callbacks is None:
            return
        callbacks[1](error)
