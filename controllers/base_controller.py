# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers that call the backend off the GUI thread.
"""

from typing import Any, Callable, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from ui.wizards.framework.workers import TaskRunner
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation lifecycle signals
    - Loading / last-error state
    - run_async(): background execution that drops results after dispose()
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, object)  # operation name, exception
    loading_changed = pyqtSignal(bool)

    def __init__(self, task_runner: TaskRunner, parent=None):
        super().__init__(parent)
        self.task_runner = task_runner
        self._is_loading = False
        self._last_error = ""
        self._disposed = False

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _set_loading(self, loading: bool):
        """Set loading state and emit signal."""
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _emit_started(self, operation: str):
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        self._set_loading(False)

    def _emit_error(self, operation: str, error: Exception):
        self._set_error(str(error))
        self.operation_error.emit(operation, error)
        self._emit_completed(operation, False)

    def run_async(
        self,
        operation: str,
        func: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Optional[Callable[[Exception], None]] = None
    ):
        """
        Run ``func`` in the background.

        ``on_success``/``on_failure`` run on the GUI thread and are skipped
        once the controller is disposed.
        """
        if self._disposed:
            logger.debug(f"{self.__class__.__name__}.{operation} skipped: disposed")
            return
        logger.info(f"{self.__class__.__name__}.{operation}")
        self._emit_started(operation)

        def succeeded(result):
            if self._disposed:
                logger.debug(f"Discarding late result of {operation}")
                return
            try:
                on_success(result)
            finally:
                self._emit_completed(operation, True)

        def failed(error):
            if self._disposed:
                logger.debug(f"Discarding late failure of {operation}: {error}")
                return
            try:
                if on_failure is not None:
                    on_failure(error)
            finally:
                self._emit_error(operation, error)

        self.task_runner.submit(operation, func, succeeded, failed)

    def dispose(self):
        self._disposed = True
