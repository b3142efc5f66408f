# -*- coding: utf-8 -*-
"""
Tests for the optional commit capability of step content.
"""
import pytest

from services.exceptions import ValidationException
from ui.wizards.framework.base_step import (
    CommitResult,
    CommittableStep,
    run_commit,
    supports_commit,
)


class WithCommit:
    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    def commit(self):
        if self.error:
            raise self.error
        return self.value


class WithoutCommit:
    commit = None


@pytest.mark.parametrize("value,expected", [
    (None, CommitResult()),
    ("abc", CommitResult(id="abc")),
    ({"inlongGroupId": "abc", "middlewareType": "KAFKA"}, CommitResult("abc", "KAFKA")),
    ({"id": "abc", "middleware_type": "PULSAR"}, CommitResult("abc", "PULSAR")),
    (CommitResult(id="x"), CommitResult(id="x")),
])
def test_commit_result_normalization(value, expected):
    assert CommitResult.from_value(value) == expected


@pytest.mark.parametrize("value", [42, True, 3.5, ["abc"]])
def test_other_results_count_as_success_without_ids(value):
    assert CommitResult.from_value(value).is_empty()


def test_capability_detection():
    assert supports_commit(WithCommit())
    assert isinstance(WithCommit(), CommittableStep)
    assert not supports_commit(WithoutCommit())
    assert not supports_commit(object())
    assert not supports_commit(None)


def test_missing_commit_succeeds_empty():
    result = run_commit(object())
    assert result.is_empty()


def test_commit_value_is_normalized():
    assert run_commit(WithCommit({"inlongGroupId": "abc"})).id == "abc"


def test_commit_errors_propagate():
    with pytest.raises(ValidationException) as excinfo:
        run_commit(WithCommit(error=ValidationException(invalid_fields=["name"])))
    assert excinfo.value.invalid_fields == ["name"]
