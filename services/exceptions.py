# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors (HTTP failure or unsuccessful envelope)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """
    Raised by a step's commit when its form is incomplete.

    ``invalid_fields`` lists the names of the offending fields and is never
    empty for a field-level rejection.
    """

    def __init__(self, message: str = "", invalid_fields: list = None,
                 context: str = None):
        super().__init__(message or "form validation failed")
        self.message = message
        self.invalid_fields = list(invalid_fields or [])
        self.context = context

    def has_invalid_fields(self) -> bool:
        return len(self.invalid_fields) > 0


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
