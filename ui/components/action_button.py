# -*- coding: utf-8 -*-
"""
Action Button Component - footer button with a loading state.

Variants:
- primary: blue solid, for Next/Submit
- default: white with border, for Previous/Back
"""

from PyQt5.QtWidgets import QPushButton

_STYLES = {
    "primary": """
        QPushButton {
            background-color: #1677ff;
            color: white;
            border: none;
            padding: 6px 15px;
            border-radius: 6px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #4096ff;
        }
        QPushButton:disabled {
            background-color: #91caff;
        }
    """,
    "default": """
        QPushButton {
            background-color: white;
            color: rgba(0, 0, 0, 0.88);
            border: 1px solid #d9d9d9;
            padding: 6px 15px;
            border-radius: 6px;
            font-size: 13px;
        }
        QPushButton:hover {
            color: #4096ff;
            border-color: #4096ff;
        }
        QPushButton:disabled {
            color: rgba(0, 0, 0, 0.25);
            background-color: #f5f5f5;
        }
    """,
}


class ActionButton(QPushButton):
    """
    Button with consistent styling and a loading state.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn.set_loading(True)   # disabled, text suffixed with an ellipsis
    """

    def __init__(self, text: str, variant: str = "primary", min_width: int = 88, parent=None):
        super().__init__(text, parent)
        if variant not in _STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {sorted(_STYLES)}")
        self.variant = variant
        self._text = text
        self._loading = False
        self.setMinimumWidth(min_width)
        self.setStyleSheet(_STYLES[variant])

    @property
    def loading(self) -> bool:
        return self._loading

    def set_loading(self, loading: bool):
        self._loading = loading
        self.setEnabled(not loading)
        super().setText(f"{self._text}…" if loading else self._text)

    def setText(self, text: str):
        self._text = text
        super().setText(f"{text}…" if self._loading else text)
