# -*- coding: utf-8 -*-
"""
Tests for the QThread-backed task runner.
"""
import threading
import time

from ui.wizards.framework import workers
from ui.wizards.framework.workers import ThreadTaskRunner


def test_result_delivered_on_gui_thread(qtbot):
    runner = ThreadTaskRunner()
    results = []
    errors = []
    gui_thread = threading.get_ident()

    def record(value):
        results.append((value, threading.get_ident()))

    runner.submit("add", lambda: 1 + 1, record, errors.append)

    qtbot.waitUntil(lambda: len(results) == 1, timeout=3000)
    assert results == [(2, gui_thread)]
    assert errors == []
    assert runner.pending_count == 0


def test_exception_delivered_to_failure_callback(qtbot):
    runner = ThreadTaskRunner()
    errors = []

    def fail():
        raise ValueError("bad input")

    runner.submit("fail", fail, lambda result: None, errors.append)

    qtbot.waitUntil(lambda: len(errors) == 1, timeout=3000)
    assert isinstance(errors[0], ValueError)


def test_shutdown_drops_outstanding_results(qtbot):
    runner = ThreadTaskRunner()
    results = []

    def slow():
        time.sleep(0.1)
        return "late"

    runner.submit("slow", slow, results.append, results.append)
    runner.shutdown()

    qtbot.waitUntil(lambda: not workers._live_workers, timeout=3000)
    assert results == []


def test_submit_after_shutdown_is_ignored(qtbot):
    runner = ThreadTaskRunner()
    runner.shutdown()
    runner.submit("noop", lambda: None, lambda result: None, lambda error: None)
    assert runner.pending_count == 0
