# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Previous / Next / Submit / Back buttons.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from ui.components.action_button import ActionButton
from services.translation_manager import tr


class WizardFooter(QWidget):
    """
    Footer of the creation wizard.

    Signals:
        previous_clicked: Previous button clicked
        next_clicked: Next button clicked
        submit_clicked: Submit button clicked (last step only)
        back_clicked: Back-to-listing button clicked
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    submit_clicked = pyqtSignal()
    back_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet("""
            QWidget {
                background-color: #ffffff;
                border-top: 1px solid #f0f0f0;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 12, 20, 12)
        layout.setSpacing(8)
        layout.addStretch()

        self.btn_previous = ActionButton(tr("access.previous"), variant="default")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(tr("access.next_step"), variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

        self.btn_submit = ActionButton(tr("access.submit"), variant="primary")
        self.btn_submit.clicked.connect(self.submit_clicked.emit)
        layout.addWidget(self.btn_submit)

        self.btn_back = ActionButton(tr("access.back"), variant="default")
        self.btn_back.clicked.connect(self.back_clicked.emit)
        layout.addWidget(self.btn_back)

        layout.addStretch()

    def update_state(self, current: int, step_count: int, busy: bool):
        """
        Show the buttons that apply to ``current``.

        Previous only after the first step; Next on every step but the
        last; Submit on the last one.
        """
        is_last = current == step_count - 1

        self.btn_previous.setVisible(current > 0)
        self.btn_previous.setEnabled(not busy)

        self.btn_next.setVisible(not is_last)
        self.btn_next.set_loading(busy and not is_last)

        self.btn_submit.setVisible(is_last)
        self.btn_submit.set_loading(busy and is_last)

    def retranslate(self):
        self.btn_previous.setText(tr("access.previous"))
        self.btn_next.setText(tr("access.next_step"))
        self.btn_submit.setText(tr("access.submit"))
        self.btn_back.setText(tr("access.back"))
