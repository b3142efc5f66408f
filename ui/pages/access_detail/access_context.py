# -*- coding: utf-8 -*-
"""
Access Context - resource context of an InLong access group.
"""

from typing import Any, Dict, Optional

from app.config import Config
from ui.wizards.framework.wizard_context import ResourceContext


class AccessContext(ResourceContext):
    """Context of one access group (``inlongGroupId``)."""

    def __init__(self, group_id: Optional[str] = None, is_create: bool = False, parent=None):
        super().__init__(
            resource_id=group_id,
            is_create=is_create,
            readonly_statuses=Config.READONLY_STATUSES,
            parent=parent,
        )

    @property
    def group_id(self) -> Optional[str]:
        return self.id

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["inlongGroupId"] = self.id
        data["middlewareType"] = self.middleware_type
        return data
