# -*- coding: utf-8 -*-
"""
Access Group Controller
=======================
Backend operations of the access detail page: the one-shot enrichment
fetch of the group and the start-processing submit.
"""

from typing import Any, Dict, Optional

from controllers.base_controller import BaseController
from services.api_client import InlongApiClient
from ui.wizards.framework.wizard_context import ResourceContext
from ui.wizards.framework.workers import TaskRunner
from utils.logger import get_logger

logger = get_logger(__name__)


class AccessGroupController(BaseController):
    """
    Enriches the resource context from ``GET /group/get/{id}``.

    The fetch runs at most once successfully: it needs an id, an unset
    middleware type and no fetch already in flight.
    """

    def __init__(self, api_client: InlongApiClient, task_runner: TaskRunner, parent=None):
        super().__init__(task_runner, parent)
        self.api_client = api_client
        self._context: Optional[ResourceContext] = None
        self._in_flight = False
        self._enriched = False

    def watch(self, context: ResourceContext):
        """Enrich ``context`` now and whenever its id becomes known."""
        self._context = context
        context.id_changed.connect(lambda _id: self.enrich())
        self.enrich()

    def enrich(self) -> bool:
        """
        Start the enrichment fetch if it is still needed.

        Returns:
            True if a fetch was started
        """
        context = self._context
        if context is None or self.disposed:
            return False
        if self._enriched or self._in_flight or not context.needs_enrichment():
            return False

        group_id = context.id
        self._in_flight = True
        self.run_async(
            "fetch_group",
            lambda: self.api_client.get_group(group_id),
            lambda group: self._on_group_loaded(group_id, group),
            lambda error: self._on_group_failed(group_id, error),
        )
        return True

    def _on_group_loaded(self, group_id: str, group: Dict[str, Any]):
        self._in_flight = False
        self._enriched = True
        logger.info(
            f"Group {group_id} loaded: status={group.get('status')}, "
            f"middlewareType={group.get('middlewareType')}"
        )
        self._context.apply_resource(group)

    def _on_group_failed(self, group_id: str, error: Exception):
        self._in_flight = False
        logger.warning(f"Loading group {group_id} failed: {error}")

    def start_process(self, group_id: str) -> Any:
        """Blocking submit; executed by the transition controller's runner."""
        return self.api_client.start_process(group_id)
