# -*- coding: utf-8 -*-
"""
Step Registry - ordered step definitions and their visibility rules.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from PyQt5.QtWidgets import QWidget

from services.translation_manager import tr

# (readonly, is_create) -> hidden
HiddenRule = Callable[[bool, bool], bool]


@dataclass(frozen=True)
class StepDefinition:
    """
    One step of the flow.

    Attributes:
        key: Stable identifier (also the tab key)
        title_key: Translation key of the label
        content: Factory building the step's content widget
        hidden: Optional rule; the step is dropped when it returns True
    """
    key: str
    title_key: str
    content: Callable[[], QWidget]
    hidden: Optional[HiddenRule] = None

    @property
    def label(self) -> str:
        return tr(self.title_key)

    def is_visible(self, readonly: bool, is_create: bool) -> bool:
        if self.hidden is None:
            return True
        return not self.hidden(readonly, is_create)


class StepRegistry:
    """
    Pure derivation of the visible steps.

    Nothing here is cached: callers ask again whenever readonly or
    is_create change.
    """

    def __init__(self, definitions: Sequence[StepDefinition]):
        keys = [definition.key for definition in definitions]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate step keys: {keys}")
        self._definitions = tuple(definitions)

    @property
    def definitions(self) -> List[StepDefinition]:
        return list(self._definitions)

    def visible_steps(self, readonly: bool, is_create: bool) -> List[StepDefinition]:
        return [
            definition for definition in self._definitions
            if definition.is_visible(readonly, is_create)
        ]

    def index_of(self, key: str, readonly: bool, is_create: bool) -> int:
        """Visible index of ``key``, or -1 when hidden or unknown."""
        for index, definition in enumerate(self.visible_steps(readonly, is_create)):
            if definition.key == key:
                return index
        return -1
