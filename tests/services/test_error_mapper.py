# -*- coding: utf-8 -*-
"""
Tests for mapping exceptions to user-facing messages.
"""
import requests

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, ValidationException


def test_field_validation_collapses_to_form_notice():
    error = ValidationException("name is required", invalid_fields=["name"])
    assert map_exception(error) == "Please check the integrity of the form"


def test_validation_without_fields_keeps_message():
    assert map_exception(ValidationException("duplicate group")) == "duplicate group"


def test_backend_message_preferred():
    error = ApiException("500 Server Error", status_code=500, response_data={"errMsg": "quota exceeded"})
    assert map_exception(error, "submit") == "quota exceeded"
    assert error.context == "submit"


def test_api_message_used_without_backend_message():
    assert map_exception(ApiException("group not found")) == "group not found"


def test_network_errors():
    timeout = NetworkException("x", original_error=requests.exceptions.Timeout("Read timed out"))
    refused = NetworkException("x", original_error=requests.exceptions.ConnectionError("refused"))
    assert map_exception(timeout) == "The server took too long to respond. Please try again."
    assert map_exception(refused) == "Unable to reach the server. Please try again."


def test_unexpected_errors():
    assert map_exception(RuntimeError("disk full")) == "disk full"
    assert map_exception(RuntimeError()) == "An unexpected error occurred."
