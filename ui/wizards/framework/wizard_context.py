# -*- coding: utf-8 -*-
"""
Resource Context - state shared read-only into every step.

Tracks the resource id, its sub-type (middleware type), its backend
status and whether the flow creates a new resource. ``readonly`` is
derived from the status.
"""

from typing import Any, Dict, Iterable, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from ui.wizards.framework.base_step import CommitResult
from utils.logger import get_logger

logger = get_logger(__name__)


class ResourceContext(QObject):
    """
    Signals:
        changed(dict): any field changed; carries as_step_input()
        id_changed(str): the id went from empty to populated
        readonly_changed(bool)
    """

    changed = pyqtSignal(dict)
    id_changed = pyqtSignal(str)
    readonly_changed = pyqtSignal(bool)

    def __init__(self, resource_id: Optional[str] = None, is_create: bool = False,
                 readonly_statuses: Iterable[int] = (), parent=None):
        super().__init__(parent)
        self._id: Optional[str] = resource_id or None
        self.is_create = is_create
        self._middleware_type: Optional[str] = None
        self._status: Optional[int] = None
        self._readonly_statuses = frozenset(readonly_statuses)

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def middleware_type(self) -> Optional[str]:
        return self._middleware_type

    @property
    def status(self) -> Optional[int]:
        return self._status

    @property
    def readonly(self) -> bool:
        return self._status is not None and self._status in self._readonly_statuses

    def as_step_input(self) -> Dict[str, Any]:
        """The read-only view handed to step content."""
        return {
            "resource_id": self._id,
            "readonly": self.readonly,
            "middleware_type": self._middleware_type,
            "is_create": self.is_create,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.as_step_input()
        data["status"] = self._status
        return data

    # =========================================================================
    # Mutations
    # =========================================================================

    def set_id(self, resource_id: Optional[str]) -> bool:
        """Populate the id once; later attempts are ignored."""
        if not resource_id:
            return False
        if self._id:
            if resource_id != self._id:
                logger.warning(f"Ignoring id {resource_id!r}: context already bound to {self._id!r}")
            return False
        self._id = resource_id
        logger.info(f"Resource id set to {resource_id}")
        self.id_changed.emit(resource_id)
        self.changed.emit(self.as_step_input())
        return True

    def set_middleware_type(self, middleware_type: Optional[str]) -> bool:
        if not middleware_type or middleware_type == self._middleware_type:
            return False
        self._middleware_type = middleware_type
        self.changed.emit(self.as_step_input())
        return True

    def set_status(self, status: Optional[int]):
        was_readonly = self.readonly
        self._status = status
        if self.readonly != was_readonly:
            logger.info(f"Readonly is now {self.readonly} (status={status})")
            self.readonly_changed.emit(self.readonly)
        self.changed.emit(self.as_step_input())

    def capture_commit(self, result: CommitResult):
        """Apply ids returned by a create-mode commit of the first step."""
        if result.middleware_type:
            self.set_middleware_type(result.middleware_type)
        if result.id:
            self.set_id(result.id)

    def apply_resource(self, resource: Dict[str, Any]):
        """Apply a fetched resource (enrichment)."""
        middleware_type = resource.get("middlewareType")
        if middleware_type:
            self.set_middleware_type(middleware_type)
        self.set_status(resource.get("status"))

    def needs_enrichment(self) -> bool:
        return bool(self._id) and not self._middleware_type
