# -*- coding: utf-8 -*-
"""
Step Indicator Component - clickable step titles above the wizard content.
"""

from typing import Iterable, List, Sequence

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import pyqtSignal

_ACTIVE_STYLE = """
    QPushButton {
        background-color: #ffffff;
        color: #1677ff;
        border: 1px solid #1677ff;
        border-radius: 14px;
        padding: 6px 16px;
        font-weight: 600;
    }
"""

_INACTIVE_STYLE = """
    QPushButton {
        background-color: #ffffff;
        color: rgba(0, 0, 0, 0.65);
        border: none;
        border-radius: 14px;
        padding: 6px 16px;
    }
    QPushButton:disabled {
        color: rgba(0, 0, 0, 0.25);
    }
"""


class StepIndicator(QWidget):
    """
    Row of step titles.

    Steps that are not reachable are disabled; clicking a reachable one
    emits step_clicked(index).
    """

    step_clicked = pyqtSignal(int)

    def __init__(self, max_width: int = 600, parent=None):
        super().__init__(parent)
        self.setMaximumWidth(max_width)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 2, 0, 4)
        self._layout.setSpacing(12)
        self.buttons: List[QPushButton] = []
        self._labels: List[str] = []
        self._current = 0

    def set_steps(self, labels: Sequence[str]):
        if list(labels) == self._labels:
            return
        self._labels = list(labels)
        for button in self.buttons:
            self._layout.removeWidget(button)
            button.deleteLater()
        self.buttons = []

        for index, label in enumerate(labels):
            button = QPushButton(label)
            button.setFlat(True)
            button.clicked.connect(lambda _checked=False, i=index: self.step_clicked.emit(i))
            self._layout.addWidget(button)
            self.buttons.append(button)
        self._apply_styles()

    def set_current(self, index: int):
        self._current = index
        self._apply_styles()

    def set_reachable(self, indices: Iterable[int]):
        reachable = set(indices)
        for index, button in enumerate(self.buttons):
            button.setEnabled(index in reachable)

    def _apply_styles(self):
        for index, button in enumerate(self.buttons):
            button.setStyleSheet(_ACTIVE_STYLE if index == self._current else _INACTIVE_STYLE)
