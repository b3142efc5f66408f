# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to the backend's own message when it sent one."""
    status = error.status_code
    if status:
        logger.warning(f"API error ({status}): {error.message}")

    backend_message = error.response_data.get("errMsg") if error.response_data else None
    if backend_message:
        return backend_message
    if error.message:
        return error.message
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """
    Map any exception to the message shown to the user.

    Field-level validation failures collapse into the generic
    form-integrity notice; everything else keeps its own message.
    """
    if isinstance(error, ValidationException):
        if error.invalid_fields:
            logger.warning(f"Validation failed for fields: {error.invalid_fields}")
            return tr("access.check_form_integrity")
        return error.message or tr("access.check_form_integrity")

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return str(error) or tr("error.unexpected")
