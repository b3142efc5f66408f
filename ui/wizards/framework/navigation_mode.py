# -*- coding: utf-8 -*-
"""
Navigation mode - wizard (creation) vs tab view (existing resource).
"""

from enum import Enum
from typing import Optional

from app.config import Config
from app.router import path_under


class NavigationMode(Enum):
    """How the user moves between steps."""
    WIZARD = "wizard"      # sequential, forward-gated by commit
    TAB_VIEW = "tab_view"  # any visible step selectable

    @property
    def host_keeps_alive(self) -> bool:
        """True when the host container retains every page itself."""
        return self is NavigationMode.TAB_VIEW


def resolve_navigation_mode(path: str, create_prefix: Optional[str] = None) -> NavigationMode:
    """WIZARD iff ``path`` falls under the creation prefix."""
    prefix = create_prefix or Config.ACCESS_CREATE_PREFIX
    if path_under(path, prefix):
        return NavigationMode.WIZARD
    return NavigationMode.TAB_VIEW
