# -*- coding: utf-8 -*-
"""
Shared fixtures for the access console tests.

Background operations run through DeferredTaskRunner: submitted work is
queued and only executed when a test says so, which makes the
"in flight" window of commit, submit and enrichment observable.
"""
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Keep test runs out of the log directory and in English
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("UI_LANGUAGE", "en")
# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from PyQt5.QtWidgets import QWidget

from app.router import Router
from services.api_client import InlongApiClient
from ui.pages.access_detail import STEP_ORDER, AccessDetailPage
from ui.wizards.framework.workers import TaskRunner


class PendingTask:
    """One queued operation."""

    def __init__(self, name, func, on_success, on_failure):
        self.name = name
        self.func = func
        self.on_success = on_success
        self.on_failure = on_failure


class DeferredTaskRunner(TaskRunner):
    """
    TaskRunner that runs nothing until told to.

    shutdown() only records the fact; queued tasks can still be run
    afterwards to simulate results arriving late.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.pending = []
        self.shut_down = False

    def submit(self, name, func, on_success, on_failure):
        self.pending.append(PendingTask(name, func, on_success, on_failure))

    def shutdown(self):
        self.shut_down = True

    def names(self):
        return [task.name for task in self.pending]

    def _take(self, name=None):
        for position, task in enumerate(self.pending):
            if name is None or task.name == name:
                return self.pending.pop(position)
        raise AssertionError(f"No pending task named {name!r}; pending: {self.names()}")

    def run(self, name=None):
        """Execute a queued task (the first one, or the first with ``name``)."""
        task = self._take(name)
        try:
            result = task.func()
        except Exception as error:
            task.on_failure(error)
            return None
        task.on_success(result)
        return result

    def resolve(self, name, value):
        """Complete a task with ``value`` without running its function."""
        self._take(name).on_success(value)

    def reject(self, name, error):
        """Fail a task with ``error`` without running its function."""
        self._take(name).on_failure(error)

    def run_all(self):
        while self.pending:
            self.run()


class FakeStep(QWidget):
    """Step content recording what the flow does to it."""

    def __init__(self, key, parent=None):
        super().__init__(parent)
        self.key = key
        self.contexts = []
        self.shown = 0
        self.hidden = 0

    def on_context_changed(self, context):
        self.contexts.append(dict(context))

    def on_show(self):
        self.shown += 1

    def on_hide(self):
        self.hidden += 1

    @property
    def last_context(self):
        return self.contexts[-1] if self.contexts else {}


class CommittingStep(FakeStep):
    """Step content with a commit() returning ``result`` or raising ``error``."""

    def __init__(self, key, result=None, error=None, parent=None):
        super().__init__(key, parent)
        self.result = result
        self.error = error
        self.commit_calls = 0

    def commit(self):
        self.commit_calls += 1
        if self.error is not None:
            raise self.error
        return self.result


class StepFactories:
    """
    Content factories for every access step.

    Steps listed in ``committing`` get a commit(); the rest advance
    unconditionally. Every built instance is kept in ``instances`` and
    each factory call is counted in ``builds``.
    """

    def __init__(self, committing=STEP_ORDER):
        self.committing = set(committing)
        self.instances = {}
        self.builds = {key: 0 for key in STEP_ORDER}
        self.results = {}
        self.errors = {}

    def _build(self, key):
        self.builds[key] += 1
        if key in self.committing:
            step = CommittingStep(key, self.results.get(key), self.errors.get(key))
        else:
            step = FakeStep(key)
        self.instances[key] = step
        return step

    def as_dict(self):
        return {key: (lambda k=key: self._build(k)) for key in STEP_ORDER}


@pytest.fixture
def runner(qtbot):
    return DeferredTaskRunner()


@pytest.fixture
def api_client():
    client = MagicMock(spec=InlongApiClient)
    client.get_group.return_value = {"inlongGroupId": "abc", "status": 150, "middlewareType": "PULSAR"}
    client.start_process.return_value = True
    return client


@pytest.fixture
def factories():
    return StepFactories()


@pytest.fixture
def make_page(qtbot, runner, api_client, factories):
    """Build an AccessDetailPage opened at ``url``."""
    pages = []

    def build(url):
        router = Router(url)
        page = AccessDetailPage(router, factories.as_dict(), api_client=api_client, task_runner=runner)
        qtbot.addWidget(page)
        pages.append(page)
        return page

    yield build

    for page in pages:
        page.dispose()

