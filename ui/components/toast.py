# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation


class Toast(QLabel):
    """Non-blocking notification shown at the bottom of its parent."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    _COLORS = {
        SUCCESS: "#52c41a",
        ERROR: "#ff4d4f",
        WARNING: "#faad14",
        INFO: "#1677ff",
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self.toast_type = self.INFO
        self._setup_ui()

    def _setup_ui(self):
        """Setup toast UI."""
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(500)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO, duration: int = 3000):
        """
        Show a toast message.

        Args:
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        self.toast_type = toast_type
        self.setText(message)

        color = self._COLORS.get(toast_type, "#333")
        text_color = "#333" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast, QLabel#toast-notification {{
                background-color: {color};
                color: {text_color};
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 11pt;
            }}
        """)

        # Position at bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            y = parent_rect.height() - self.height() - 50
            self.move(x, y)

        self.setVisible(True)
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        QTimer.singleShot(duration, self._fade_out)

    def _fade_out(self):
        """Fade out and hide."""
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, message: str, toast_type: str = INFO, duration: int = 3000) -> 'Toast':
        """Show a toast on ``parent``, reusing the existing one."""
        toast = parent.findChild(Toast, "toast-notification")
        if not toast:
            toast = Toast(parent)
            toast.setObjectName("toast-notification")

        toast.show_message(message, toast_type, duration)
        return toast
