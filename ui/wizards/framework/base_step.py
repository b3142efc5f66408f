# -*- coding: utf-8 -*-
"""
Base Step - step content and the optional commit capability.

A step's content is any QWidget. It may expose ``commit()``; when it does,
the flow runs it before moving forward. Content without ``commit()``
advances unconditionally.

commit() contract:
- runs on a worker thread, so it must only use values the content already
  snapshotted on the GUI thread (see ``BaseStep.save_value``)
- returns None, a CommitResult, or a dict carrying the ids the backend
  generated (``id``/``inlongGroupId`` and ``middleware_type``/``middlewareType``)
  or a string id; any other value is a success carrying no ids
- raises ValidationException with ``invalid_fields`` when the form is
  incomplete, or any other exception when persisting failed
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommitResult:
    """Identifiers produced by a successful commit."""
    id: Optional[str] = None
    middleware_type: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> 'CommitResult':
        """Normalize whatever commit() returned."""
        if value is None:
            return cls()
        if isinstance(value, CommitResult):
            return value
        if isinstance(value, dict):
            return cls(
                id=value.get("id") or value.get("inlongGroupId"),
                middleware_type=value.get("middleware_type") or value.get("middlewareType"),
            )
        if isinstance(value, str):
            return cls(id=value or None)
        logger.debug(f"Ignoring commit result of type {type(value).__name__}")
        return cls()

    def is_empty(self) -> bool:
        return self.id is None and self.middleware_type is None


@runtime_checkable
class CommittableStep(Protocol):
    """Step content that persists itself before the flow moves on."""

    def commit(self) -> Any:
        ...


def supports_commit(content: Any) -> bool:
    """True if the content exposes a callable commit()."""
    return content is not None and callable(getattr(content, "commit", None))


def run_commit(content: Any) -> CommitResult:
    """
    Run the content's commit, treating a missing capability as success.

    Exceptions raised by commit() propagate to the caller.
    """
    if not supports_commit(content):
        return CommitResult()
    return CommitResult.from_value(content.commit())


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Convenience base class for step content.

    Subclasses implement setup_ui() and may add commit(). The shared
    resource context arrives read-only through on_context_changed().
    """

    # Signals
    step_data_changed = pyqtSignal(dict)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._is_initialized = False
        self._values: Dict[str, Any] = {}
        self.context: Dict[str, Any] = {}

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Build the UI (called once, the first time the step is shown)."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the current one."""
        if not self._is_initialized:
            self.initialize()

    def on_hide(self):
        """Called when another step becomes current."""
        pass

    def on_context_changed(self, context: Dict[str, Any]):
        """
        Receive the shared context.

        Keys: resource_id, readonly, middleware_type, is_create.
        """
        self.context = dict(context)

    @abstractmethod
    def setup_ui(self):
        """Create the step's widgets."""
        pass

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def save_value(self, key: str, value: Any):
        """Snapshot a form value on the GUI thread for use by commit()."""
        self._values[key] = value
        self.step_data_changed.emit({key: value})

    def get_value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def resource_id(self) -> Optional[str]:
        return self.context.get("resource_id")

    @property
    def readonly(self) -> bool:
        return bool(self.context.get("readonly", False))
