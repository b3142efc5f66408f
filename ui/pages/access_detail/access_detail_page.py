# -*- coding: utf-8 -*-
"""
Access Detail Page.

Creation (``/access/create``) runs the steps as a wizard:
1. Business information
2. Data streams
3. Data sources
4. Data storages
then submits the group for approval.

An existing group (``/access/detail/{id}``) shows the same steps as tabs,
plus the approval information while the group is editable.
"""

from typing import Any, Callable, Dict, List, Optional

from PyQt5.QtWidgets import QWidget

from app.config import Config
from app.router import Router
from controllers.access_group_controller import AccessGroupController
from services.api_client import InlongApiClient, get_api_client
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.pages.access_detail.access_context import AccessContext
from ui.pages.access_detail.steps import build_step_definitions
from ui.wizards.framework.base_flow import BaseStepFlow
from ui.wizards.framework.step_registry import StepDefinition
from ui.wizards.framework.workers import TaskRunner
from utils.logger import get_logger

logger = get_logger(__name__)


class AccessDetailPage(BaseStepFlow):
    """Create, view or edit an access group."""

    def __init__(
        self,
        router: Router,
        content_factories: Dict[str, Callable[[], QWidget]],
        api_client: Optional[InlongApiClient] = None,
        task_runner: Optional[TaskRunner] = None,
        parent: Optional[QWidget] = None
    ):
        self.content_factories = content_factories
        self.api_client = api_client or get_api_client()
        super().__init__(
            router,
            create_prefix=Config.ACCESS_CREATE_PREFIX,
            detail_prefix=Config.ACCESS_DETAIL_PREFIX,
            task_runner=task_runner,
            parent=parent,
        )

        self.group_controller = AccessGroupController(self.api_client, self.task_runner, self)
        self.group_controller.operation_error.connect(self._on_group_error)
        self.group_controller.watch(self.context)

    def create_context(self) -> AccessContext:
        return AccessContext(group_id=self.initial_resource_id(), is_create=self.is_wizard)

    def create_steps(self) -> List[StepDefinition]:
        return build_step_definitions(self.content_factories)

    def submit_action(self, resource_id: str) -> Any:
        return self.group_controller.start_process(resource_id)

    def get_title(self) -> str:
        if self.context.is_create:
            return tr("access.new_access")
        return tr("access.business_detail", id=self.context.group_id or "")

    def _on_group_error(self, operation: str, error: Exception):
        ErrorHandler.handle(error, self, context=operation)

    def dispose(self):
        self.group_controller.dispose()
        super().dispose()
