# -*- coding: utf-8 -*-
"""Access detail page: create, view and edit access groups."""

from .access_context import AccessContext
from .access_detail_page import AccessDetailPage
from .steps import (
    STEP_AUDIT,
    STEP_DATA_SOURCES,
    STEP_DATA_STORAGE,
    STEP_DATA_STREAM,
    STEP_INFO,
    STEP_ORDER,
    build_step_definitions,
)

__all__ = [
    "AccessContext",
    "AccessDetailPage",
    "STEP_AUDIT",
    "STEP_DATA_SOURCES",
    "STEP_DATA_STORAGE",
    "STEP_DATA_STREAM",
    "STEP_INFO",
    "STEP_ORDER",
    "build_step_definitions",
]
