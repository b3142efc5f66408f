# -*- coding: utf-8 -*-
"""
Base Step Flow - host widget for a multi-step resource flow.

Provides unified UI for both navigation modes:
- Wizard: header, step indicator, stacked step container, footer
- Tab view: header and a tab widget holding every visible step

Step content is mounted lazily and never unmounted: in wizard mode each
opened step stays in the stacked container and is merely hidden; in tab
view the tab widget keeps all of its pages.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QStackedWidget, QTabWidget
from PyQt5.QtGui import QFont

from app.config import Config
from app.router import Router, resource_id_from
from services.translation_manager import tr
from ui.components.step_indicator import StepIndicator
from ui.components.wizard_footer import WizardFooter
from ui.error_handler import ErrorHandler
from ui.wizards.framework.base_step import ABCQWidgetMeta
from ui.wizards.framework.lazy_mount import LazyMountCache
from ui.wizards.framework.navigation_mode import NavigationMode, resolve_navigation_mode
from ui.wizards.framework.step_cursor import create_step_cursor
from ui.wizards.framework.step_registry import StepDefinition, StepRegistry
from ui.wizards.framework.transition_controller import TransitionController, VALIDATION_FAILURE
from ui.wizards.framework.wizard_context import ResourceContext
from ui.wizards.framework.workers import TaskRunner, ThreadTaskRunner
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseStepFlow(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for step flows.

    Subclasses must implement:
    - create_context(): build the shared resource context
    - create_steps(): return the ordered step definitions
    - submit_action(): blocking backend call run on the last step
    - get_title(): breadcrumb title
    """

    def __init__(self, router: Router, create_prefix: str, detail_prefix: str,
                 task_runner: Optional[TaskRunner] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.router = router

        # Fixed for the lifetime of the flow
        self.mode = resolve_navigation_mode(router.current.path, create_prefix)
        self.route_prefix = create_prefix if self.mode is NavigationMode.WIZARD else detail_prefix
        logger.info(f"Opening {router.current} in {self.mode.value} mode")

        self.task_runner = task_runner or ThreadTaskRunner(self)
        self.context = self.create_context()
        self.registry = StepRegistry(self.create_steps())

        visible = self.registry.visible_steps(self.context.readonly, self.context.is_create)
        self.cursor = create_step_cursor(self.mode, router, self.route_prefix, len(visible), self)
        self.mount_cache = LazyMountCache(self.mode.host_keeps_alive, self.cursor.index)
        self.controller = TransitionController(
            context=self.context,
            registry=self.registry,
            cursor=self.cursor,
            mount_cache=self.mount_cache,
            task_runner=self.task_runner,
            content_at=self.content_at,
            submit_action=self.submit_action,
            router=router,
            forward_jumps_require_open=self.is_wizard,
            parent=self,
        )

        self._mounted: Dict[str, QWidget] = {}
        self._shown_key: Optional[str] = None
        self._tab_keys: List[str] = []
        self._syncing_tabs = False

        self._setup_ui()

        self.controller.step_changed.connect(lambda old, new: self.refresh())
        self.controller.busy_changed.connect(lambda busy: self._update_footer())
        self.controller.transition_failed.connect(self._on_transition_failed)
        self.controller.submitted.connect(self._on_submitted)
        self.context.changed.connect(self._on_context_changed)
        self.context.readonly_changed.connect(lambda readonly: self.refresh())

        self.refresh()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> ResourceContext:
        pass

    @abstractmethod
    def create_steps(self) -> List[StepDefinition]:
        pass

    @abstractmethod
    def submit_action(self, resource_id: str) -> Any:
        """Blocking backend call; runs on a worker thread."""
        pass

    @abstractmethod
    def get_title(self) -> str:
        pass

    # =========================================================================
    # Helpers for subclasses
    # =========================================================================

    @property
    def is_wizard(self) -> bool:
        return self.mode is NavigationMode.WIZARD

    def initial_resource_id(self) -> Optional[str]:
        """Id carried by the route the flow was opened with."""
        return resource_id_from(self.router.current, self.route_prefix)

    def visible_steps(self) -> List[StepDefinition]:
        return self.controller.visible_steps()

    def content_at(self, index: int) -> Optional[QWidget]:
        """Mounted content of visible step ``index`` (None if not mounted)."""
        visible = self.visible_steps()
        if not 0 <= index < len(visible):
            return None
        return self._mounted.get(visible[index].key)

    def is_mounted(self, key: str) -> bool:
        return key in self._mounted

    def mounted_keys(self) -> List[str]:
        return list(self._mounted)

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.title_label = QLabel(self.get_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.title_label.setContentsMargins(20, 16, 20, 16)
        main_layout.addWidget(self.title_label)

        self.step_indicator: Optional[StepIndicator] = None
        self.step_container: Optional[QStackedWidget] = None
        self.tabs: Optional[QTabWidget] = None
        self.footer: Optional[WizardFooter] = None

        if self.is_wizard:
            self.step_indicator = StepIndicator(max_width=Config.STEP_INDICATOR_WIDTH)
            self.step_indicator.step_clicked.connect(self.controller.select)
            main_layout.addWidget(self.step_indicator)

            self.step_container = QStackedWidget()
            main_layout.addWidget(self.step_container, 1)

            self.footer = WizardFooter()
            self.footer.previous_clicked.connect(lambda: self.controller.back())
            self.footer.next_clicked.connect(lambda: self.controller.advance())
            self.footer.submit_clicked.connect(self.controller.submit)
            self.footer.back_clicked.connect(self.controller.leave)
            main_layout.addWidget(self.footer)
        else:
            self.tabs = QTabWidget()
            self.tabs.currentChanged.connect(self._on_tab_changed)
            main_layout.addWidget(self.tabs, 1)

    # =========================================================================
    # Mounting
    # =========================================================================

    def _mount(self, definition: StepDefinition) -> QWidget:
        content = self._mounted.get(definition.key)
        if content is not None:
            return content
        content = definition.content()
        self._mounted[definition.key] = content
        logger.debug(f"Mounted step content '{definition.key}'")
        if hasattr(content, "on_context_changed"):
            content.on_context_changed(self.context.as_step_input())
        if self.step_container is not None:
            self.step_container.addWidget(content)
        return content

    def refresh(self):
        """Re-derive visible steps and bring the UI in line with the cursor."""
        visible = self.visible_steps()
        current = self.cursor.index

        for index, definition in enumerate(visible):
            if self.mount_cache.should_mount(index):
                self._mount(definition)

        if self.is_wizard:
            self._sync_wizard(visible, current)
        else:
            self._sync_tabs(visible, current)

        if visible:
            self._switch_shown(visible[current].key)
        self._update_footer()

    def _sync_wizard(self, visible: List[StepDefinition], current: int):
        self.step_indicator.set_steps([definition.label for definition in visible])
        self.step_indicator.set_current(current)
        self.step_indicator.set_reachable(i for i in range(len(visible)) if self.controller.can_select(i))
        if visible:
            self.step_container.setCurrentWidget(self._mounted[visible[current].key])

    def _sync_tabs(self, visible: List[StepDefinition], current: int):
        self._syncing_tabs = True
        try:
            keys = [definition.key for definition in visible]
            if keys != self._tab_keys:
                # removeTab keeps the page widget alive
                while self.tabs.count():
                    self.tabs.removeTab(0)
                for definition in visible:
                    self.tabs.addTab(self._mounted[definition.key], definition.label)
                self._tab_keys = keys
            self.tabs.setCurrentIndex(current)
        finally:
            self._syncing_tabs = False

    def _switch_shown(self, key: str):
        if key == self._shown_key:
            return
        previous = self._mounted.get(self._shown_key) if self._shown_key else None
        if previous is not None and hasattr(previous, "on_hide"):
            previous.on_hide()
        self._shown_key = key
        content = self._mounted.get(key)
        if content is not None and hasattr(content, "on_show"):
            content.on_show()

    def _update_footer(self):
        if self.footer is not None:
            self.footer.update_state(self.cursor.index, len(self.visible_steps()), self.controller.busy)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_tab_changed(self, index: int):
        if self._syncing_tabs or index < 0:
            return
        if not self.controller.select(index):
            self._syncing_tabs = True
            try:
                self.tabs.setCurrentIndex(self.cursor.index)
            finally:
                self._syncing_tabs = False

    def _on_context_changed(self, step_input: Dict[str, Any]):
        for content in self._mounted.values():
            if hasattr(content, "on_context_changed"):
                content.on_context_changed(step_input)
        self.title_label.setText(self.get_title())

    def _on_transition_failed(self, kind: str, message: str):
        if kind == VALIDATION_FAILURE:
            ErrorHandler.show_warning(self, message)
        else:
            ErrorHandler.show_error(self, message)

    def _on_submitted(self, resource_id: str):
        ErrorHandler.show_success(self, tr("access.submitted_successfully"))

    def retranslate(self):
        """Re-read every label after a language switch."""
        self.title_label.setText(self.get_title())
        if self.footer is not None:
            self.footer.retranslate()
        if self.tabs is not None:
            for index, definition in enumerate(self.visible_steps()):
                self.tabs.setTabText(index, definition.label)
        self.refresh()

    def dispose(self):
        """Abandon outstanding operations."""
        self.controller.dispose()

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)
