# -*- coding: utf-8 -*-
"""
Transition Controller - moves the flow between steps.

Handles:
- advance: commit the current step, then move forward (or submit on the last step)
- back: move to the previous step without committing
- select: jump to a step directly (tab view: any; wizard: opened steps only)
- submit: start processing the resource, then leave for the listing

A single busy flag serializes commit and submit. Only this class sets or
clears it.
"""

from typing import Any, Callable, FrozenSet, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from app.router import Router
from services.error_mapper import map_exception
from services.exceptions import ValidationException
from ui.wizards.framework.base_step import CommitResult, run_commit
from ui.wizards.framework.lazy_mount import LazyMountCache
from ui.wizards.framework.step_cursor import StepCursor
from ui.wizards.framework.step_registry import StepDefinition, StepRegistry
from ui.wizards.framework.wizard_context import ResourceContext
from ui.wizards.framework.workers import TaskRunner
from utils.logger import get_logger

logger = get_logger(__name__)

VALIDATION_FAILURE = "validation"
OPERATION_FAILURE = "operation"


class TransitionController(QObject):
    """
    Orchestrates commit -> context update -> navigation.

    Signals:
        busy_changed(bool)
        step_changed(int, int): old_index, new_index
        transition_failed(str, str): failure kind, user message
        submitted(str): resource id that was submitted
    """

    busy_changed = pyqtSignal(bool)
    step_changed = pyqtSignal(int, int)
    transition_failed = pyqtSignal(str, str)
    submitted = pyqtSignal(str)

    def __init__(
        self,
        context: ResourceContext,
        registry: StepRegistry,
        cursor: StepCursor,
        mount_cache: LazyMountCache,
        task_runner: TaskRunner,
        content_at: Callable[[int], Any],
        submit_action: Callable[[str], Any],
        router: Optional[Router] = None,
        listing_path: Optional[str] = None,
        forward_jumps_require_open: bool = True,
        parent=None
    ):
        """
        Initialize the controller.

        Args:
            context: Shared resource context
            registry: Step definitions
            cursor: Current step (route-backed or local)
            mount_cache: Opened-step memo
            task_runner: Runs commit/submit off the GUI thread
            content_at: Returns the mounted content for a visible index
            submit_action: Blocking backend call taking the resource id
            router: Used to leave for the listing after submit
            listing_path: Route of the resource listing
            forward_jumps_require_open: Refuse select() of unopened steps
        """
        super().__init__(parent)
        self.context = context
        self.registry = registry
        self.cursor = cursor
        self.mount_cache = mount_cache
        self.task_runner = task_runner
        self._content_at = content_at
        self._submit_action = submit_action
        self.router = router
        self.listing_path = listing_path or Config.ACCESS_LIST_PATH
        self.forward_jumps_require_open = forward_jumps_require_open

        self._busy = False
        self._active_operation: Optional[int] = None
        self._operation_counter = 0
        self._disposed = False

        self.cursor.changed.connect(self._on_cursor_changed)
        self.context.readonly_changed.connect(self._on_visibility_inputs_changed)

        self.cursor.set_step_count(len(self.visible_steps()))

    # =========================================================================
    # State
    # =========================================================================

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def current_index(self) -> int:
        return self.cursor.index

    @property
    def opened(self) -> FrozenSet[int]:
        return self.mount_cache.opened

    def visible_steps(self) -> List[StepDefinition]:
        return self.registry.visible_steps(self.context.readonly, self.context.is_create)

    def step_count(self) -> int:
        return len(self.visible_steps())

    def is_last(self, index: int) -> bool:
        return index == self.step_count() - 1

    def can_go_previous(self) -> bool:
        return self.cursor.index > 0

    def can_select(self, index: int) -> bool:
        if not 0 <= index < self.step_count():
            return False
        if self.forward_jumps_require_open:
            return self.mount_cache.is_opened(index)
        return True

    # =========================================================================
    # Busy flag
    # =========================================================================

    def _begin(self, name: str) -> Optional[int]:
        if self._busy:
            logger.info(f"Ignoring {name}: another transition is in progress")
            return None
        self._operation_counter += 1
        self._active_operation = self._operation_counter
        self._busy = True
        logger.debug(f"Busy: {name} (operation {self._active_operation})")
        self.busy_changed.emit(True)
        return self._active_operation

    def _end(self, operation: int):
        if operation != self._active_operation:
            logger.warning(f"Operation {operation} already released")
            return
        self._active_operation = None
        self._busy = False
        self.busy_changed.emit(False)

    def _is_live(self, operation: int, name: str) -> bool:
        if self._disposed:
            logger.debug(f"Discarding late result of {name}: controller disposed")
            return False
        return operation == self._active_operation

    # =========================================================================
    # Transitions
    # =========================================================================

    def advance(self, index: Optional[int] = None) -> bool:
        """
        Commit step ``index`` (default: current) and move to the next one.

        On the last visible step this submits instead.

        Returns:
            True if an operation was started
        """
        if self._disposed:
            return False
        if index is None:
            index = self.cursor.index
        if not 0 <= index < self.step_count():
            logger.error(f"Invalid step index: {index} (valid range: 0-{self.step_count() - 1})")
            return False
        if self.is_last(index):
            return self.submit()

        operation = self._begin(f"advance({index})")
        if operation is None:
            return False

        content = self._content_at(index)
        logger.info(f"Committing step {index} before moving to {index + 1}")
        self.task_runner.submit(
            f"commit step {index}",
            lambda: run_commit(content),
            lambda result: self._on_commit_succeeded(operation, index, result),
            lambda error: self._on_commit_failed(operation, index, error),
        )
        return True

    def _on_commit_succeeded(self, operation: int, index: int, result: CommitResult):
        if not self._is_live(operation, f"commit step {index}"):
            return
        try:
            if index == 0 and self.context.is_create:
                self.context.capture_commit(result)
            target = index + 1
            self.cursor.move_to(target, self.context.id, push=True)
            self.mount_cache.mark_opened(target)
            logger.info(f"Step {index} committed; now at step {self.cursor.index}")
        finally:
            self._end(operation)

    def _on_commit_failed(self, operation: int, index: int, error: Exception):
        if not self._is_live(operation, f"commit step {index}"):
            return
        try:
            self._report_failure(f"commit step {index}", error)
        finally:
            self._end(operation)

    def back(self, index: Optional[int] = None) -> bool:
        """Move to the step before ``index`` (default: current); no commit."""
        if self._disposed or self._busy:
            return False
        if index is None:
            index = self.cursor.index
        if index <= 0 or index >= self.step_count():
            logger.debug(f"Cannot go back from step {index}")
            return False
        logger.info(f"Navigating back: Step {index} → {index - 1}")
        self.cursor.move_to(index - 1, self.context.id)
        return True

    def select(self, index: int) -> bool:
        """Make ``index`` current without committing."""
        if self._disposed or self._busy:
            return False
        if not self.can_select(index):
            logger.info(f"Refusing jump to step {index}: not opened yet")
            return False
        if index != self.cursor.index:
            self.cursor.move_to(index, self.context.id)
        self.mount_cache.mark_opened(index)
        return True

    def submit(self) -> bool:
        """Start processing the resource (last step only)."""
        if self._disposed:
            return False
        if not self.is_last(self.cursor.index):
            logger.info(f"Ignoring submit: step {self.cursor.index} is not the last step")
            return False
        operation = self._begin("submit")
        if operation is None:
            return False

        resource_id = self.context.id
        logger.info(f"Submitting resource {resource_id}")
        self.task_runner.submit(
            "submit",
            lambda: self._submit_action(resource_id),
            lambda result: self._on_submit_succeeded(operation, resource_id),
            lambda error: self._on_submit_failed(operation, error),
        )
        return True

    def _on_submit_succeeded(self, operation: int, resource_id: str):
        if not self._is_live(operation, "submit"):
            return
        try:
            self.submitted.emit(resource_id or "")
        finally:
            self._end(operation)
        self.leave()

    def _on_submit_failed(self, operation: int, error: Exception):
        if not self._is_live(operation, "submit"):
            return
        try:
            self._report_failure("submit", error)
        finally:
            self._end(operation)

    def leave(self):
        """
        Go to the listing without committing.

        An operation still in flight is abandoned; its result is discarded.
        """
        if self._active_operation is not None:
            logger.info(f"Leaving the flow; abandoning operation {self._active_operation}")
            self._end(self._active_operation)
        if self.router is not None:
            self.router.push(self.listing_path)

    def dispose(self):
        """Tear down; results that arrive later are discarded."""
        if self._disposed:
            return
        self._disposed = True
        self.task_runner.shutdown()
        logger.debug("Transition controller disposed")

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _report_failure(self, name: str, error: Exception):
        if isinstance(error, ValidationException) and error.has_invalid_fields():
            kind = VALIDATION_FAILURE
            logger.warning(f"{name} rejected, invalid fields: {error.invalid_fields}")
        else:
            kind = OPERATION_FAILURE
            logger.error(f"{name} failed: {error}", exc_info=error)
        self.transition_failed.emit(kind, map_exception(error, name))

    def _on_cursor_changed(self, old_index: int, new_index: int):
        self.mount_cache.mark_opened(new_index)
        self.step_changed.emit(old_index, new_index)

    def _on_visibility_inputs_changed(self, *_):
        self.cursor.set_step_count(self.step_count())
