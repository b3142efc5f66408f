# -*- coding: utf-8 -*-
"""
Steps of the access detail flow, in display order.
"""

from typing import Callable, Dict, List

from PyQt5.QtWidgets import QWidget

from ui.wizards.framework.step_registry import StepDefinition

STEP_INFO = "groupInfo"
STEP_DATA_STREAM = "dataStream"
STEP_DATA_SOURCES = "dataSources"
STEP_DATA_STORAGE = "streamSink"
STEP_AUDIT = "audit"

STEP_ORDER = (STEP_INFO, STEP_DATA_STREAM, STEP_DATA_SOURCES, STEP_DATA_STORAGE, STEP_AUDIT)

STEP_TITLE_KEYS = {
    STEP_INFO: "access.step.business",
    STEP_DATA_STREAM: "access.step.data_streams",
    STEP_DATA_SOURCES: "access.step.data_sources",
    STEP_DATA_STORAGE: "access.step.data_storages",
    STEP_AUDIT: "access.step.audit",
}


def audit_hidden(readonly: bool, is_create: bool) -> bool:
    """Approval information only exists for editable, already created groups."""
    return readonly or is_create


def build_step_definitions(content_factories: Dict[str, Callable[[], QWidget]]) -> List[StepDefinition]:
    """
    Build the five step definitions.

    Args:
        content_factories: Content widget factory per step key (all of STEP_ORDER)
    """
    missing = [key for key in STEP_ORDER if key not in content_factories]
    if missing:
        raise KeyError(f"No content registered for steps: {missing}")

    return [
        StepDefinition(
            key=key,
            title_key=STEP_TITLE_KEYS[key],
            content=content_factories[key],
            hidden=audit_hidden if key == STEP_AUDIT else None,
        )
        for key in STEP_ORDER
    ]
