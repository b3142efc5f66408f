#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
InLong Access Console
Main entry point for the application

Usage:
    python main.py                       # new access (wizard)
    python main.py /access/detail/b_demo # existing group (tab view)
"""

import sys

from PyQt5.QtWidgets import QApplication, QLabel
from PyQt5.QtCore import Qt

from app.config import Config
from app.router import Router
from services.translation_manager import on_language_changed, tr
from ui.pages.access_detail import STEP_ORDER, AccessDetailPage
from ui.pages.access_detail.steps import STEP_TITLE_KEYS
from ui.wizards.framework.base_step import BaseStep
from utils.logger import setup_logger


class PlaceholderStep(BaseStep):
    """Stands in for a step form that is not bundled with the console."""

    def __init__(self, title_key: str, parent=None):
        self.title_key = title_key
        super().__init__(parent)

    def setup_ui(self):
        self.label = QLabel(tr(self.title_key))
        self.label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.label)

    def on_context_changed(self, context):
        super().on_context_changed(context)
        if self._is_initialized:
            self.label.setText(f"{tr(self.title_key)} ({self.resource_id or '-'})")


def _placeholder_factories():
    return {key: (lambda k=key: PlaceholderStep(STEP_TITLE_KEYS[k])) for key in STEP_ORDER}


def main():
    """Main application entry point."""

    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)  # type: ignore
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)  # type: ignore

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        initial = sys.argv[1] if len(sys.argv) > 1 else Config.ACCESS_CREATE_PREFIX
        router = Router(initial)

        page = AccessDetailPage(router, _placeholder_factories())
        page.setWindowTitle(Config.APP_NAME)
        page.resize(960, 640)

        def on_route_changed(route):
            if route.path == Config.ACCESS_LIST_PATH:
                logger.info("Returned to the access listing; closing")
                page.close()

        router.route_changed.connect(on_route_changed)
        on_language_changed(lambda _lang: page.retranslate())
        page.show()

        logger.info("Application started successfully")
        return app.exec_()

    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
