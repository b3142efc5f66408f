# -*- coding: utf-8 -*-
"""Centralized notice handler for the UI layer."""

from PyQt5.QtWidgets import QWidget

from app.config import Config
from services.error_mapper import map_exception
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions to messages and shows them as non-blocking toasts."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_notice: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show it.

        Args:
            error: The exception to handle
            parent: Widget hosting the toast
            context: Context for error mapping (e.g. "submit")
            show_notice: Whether to show the message to the user

        Returns:
            User-facing message
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=error)

        message = map_exception(error, context)

        if show_notice and parent is not None:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str) -> Toast:
        return Toast.notify(parent, message, Toast.ERROR, Config.TOAST_DURATION_MS)

    @staticmethod
    def show_warning(parent: QWidget, message: str) -> Toast:
        return Toast.notify(parent, message, Toast.WARNING, Config.TOAST_DURATION_MS)

    @staticmethod
    def show_success(parent: QWidget, message: str) -> Toast:
        return Toast.notify(parent, message, Toast.SUCCESS, Config.TOAST_DURATION_MS)
