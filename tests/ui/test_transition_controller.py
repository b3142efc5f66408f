# -*- coding: utf-8 -*-
"""
Tests for the transition controller.

Tests cover:
- Busy flag and serialization of transitions
- Commit-gated advance and failure kinds
- Back / select rules per navigation mode
- Submit and leaving for the listing
- Disposal discarding late results
"""
import random

import pytest

from app.router import Router
from conftest import DeferredTaskRunner
from services.exceptions import ApiException, ValidationException
from ui.pages.access_detail.steps import STEP_ORDER, build_step_definitions
from ui.wizards.framework.lazy_mount import LazyMountCache
from ui.wizards.framework.navigation_mode import NavigationMode, resolve_navigation_mode
from ui.wizards.framework.step_cursor import create_step_cursor
from ui.wizards.framework.step_registry import StepRegistry
from ui.wizards.framework.transition_controller import (
    OPERATION_FAILURE,
    VALIDATION_FAILURE,
    TransitionController,
)
from ui.wizards.framework.wizard_context import ResourceContext


class Content:
    """Minimal step content; commit() is optional."""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error
        self.commits = 0

    def commit(self):
        self.commits += 1
        if self.error is not None:
            raise self.error
        return self.value


class Flow:
    """A controller wired the way a page wires it, without widgets."""

    def __init__(self, url, resource_id=None, contents=None):
        self.router = Router(url)
        self.mode = resolve_navigation_mode(self.router.current.path)
        prefix = "/access/create" if self.mode is NavigationMode.WIZARD else "/access/detail"
        self.context = ResourceContext(
            resource_id=resource_id,
            is_create=self.mode is NavigationMode.WIZARD,
            readonly_statuses=(0, 101, 102),
        )
        self.registry = StepRegistry(build_step_definitions({key: (lambda: None) for key in STEP_ORDER}))
        self.contents = contents or {}
        self.runner = DeferredTaskRunner()
        self.submitted_ids = []

        visible = self.registry.visible_steps(self.context.readonly, self.context.is_create)
        self.cursor = create_step_cursor(self.mode, self.router, prefix, len(visible))
        self.mount_cache = LazyMountCache(self.mode.host_keeps_alive, self.cursor.index)
        self.controller = TransitionController(
            context=self.context,
            registry=self.registry,
            cursor=self.cursor,
            mount_cache=self.mount_cache,
            task_runner=self.runner,
            content_at=lambda index: self.contents.get(index),
            submit_action=self._submit,
            router=self.router,
            forward_jumps_require_open=self.mode is NavigationMode.WIZARD,
        )

    def _submit(self, resource_id):
        self.submitted_ids.append(resource_id)
        return True


@pytest.fixture
def wizard(qtbot):
    return Flow("/access/create")


@pytest.fixture
def tab_view(qtbot):
    return Flow("/access/detail/abc", resource_id="abc")


class TestBusyFlag:
    """Only one commit or submit runs at a time."""

    def test_advance_sets_and_clears_busy(self, qtbot, wizard):
        states = []
        wizard.controller.busy_changed.connect(states.append)

        assert wizard.controller.advance() is True
        assert wizard.controller.busy is True

        wizard.runner.run()
        assert wizard.controller.busy is False
        assert states == [True, False]

    def test_second_advance_while_busy_is_refused(self, qtbot, wizard):
        wizard.controller.advance()
        assert wizard.controller.advance() is False
        assert wizard.runner.names() == ["commit step 0"]

    def test_back_and_select_refused_while_busy(self, qtbot, tab_view):
        tab_view.controller.select(2)
        tab_view.controller.advance()
        assert tab_view.controller.back() is False
        assert tab_view.controller.select(0) is False
        assert tab_view.cursor.index == 2

    def test_busy_released_after_failure(self, qtbot, wizard):
        wizard.contents[0] = Content(error=ApiException("boom"))
        wizard.controller.advance()
        wizard.runner.run()
        assert wizard.controller.busy is False


class TestAdvance:
    """Commit-gated forward movement."""

    def test_create_commit_binds_id_and_moves(self, qtbot, wizard):
        wizard.contents[0] = Content({"inlongGroupId": "abc", "middlewareType": "KAFKA"})

        wizard.controller.advance()
        wizard.runner.run()

        assert wizard.context.id == "abc"
        assert wizard.context.middleware_type == "KAFKA"
        assert wizard.router.current.to_url() == "/access/create/abc?step=1"
        assert wizard.controller.opened == frozenset({0, 1})
        assert wizard.cursor.index == 1

    def test_advance_pushes_history(self, qtbot, wizard):
        wizard.controller.advance()
        wizard.runner.run()
        assert len(wizard.router.history) == 2

    def test_content_without_commit_advances(self, qtbot, wizard):
        wizard.controller.advance()
        wizard.runner.run()
        assert wizard.cursor.index == 1

    def test_later_commit_results_do_not_rebind_id(self, qtbot, wizard):
        wizard.contents[0] = Content({"inlongGroupId": "abc"})
        wizard.contents[1] = Content({"inlongGroupId": "other"})

        wizard.controller.advance()
        wizard.runner.run()
        wizard.controller.advance()
        wizard.runner.run()

        assert wizard.context.id == "abc"
        assert wizard.router.current.to_url() == "/access/create/abc?step=2"

    def test_validation_failure_keeps_state(self, qtbot, wizard):
        wizard.contents[0] = Content(error=ValidationException(invalid_fields=["inlongGroupId"]))

        wizard.controller.advance()
        with qtbot.waitSignal(wizard.controller.transition_failed, timeout=1000) as blocker:
            wizard.runner.run()

        assert blocker.args == [VALIDATION_FAILURE, "Please check the integrity of the form"]
        assert wizard.cursor.index == 0
        assert wizard.router.current.to_url() == "/access/create"
        assert wizard.controller.opened == frozenset({0})
        assert wizard.context.id is None

    def test_operation_failure_carries_message(self, qtbot, wizard):
        wizard.contents[0] = Content(error=ApiException("group exists"))

        wizard.controller.advance()
        with qtbot.waitSignal(wizard.controller.transition_failed, timeout=1000) as blocker:
            wizard.runner.run()

        assert blocker.args == [OPERATION_FAILURE, "group exists"]
        assert wizard.cursor.index == 0

    def test_advance_on_last_step_submits(self, qtbot):
        flow = Flow("/access/create/abc?step=3", resource_id="abc")

        assert flow.controller.advance() is True
        assert flow.runner.names() == ["submit"]

        with qtbot.waitSignal(flow.controller.submitted, timeout=1000):
            flow.runner.run()

        assert flow.submitted_ids == ["abc"]
        assert flow.router.current.path == "/access"

    def test_invalid_index_rejected(self, qtbot, wizard):
        assert wizard.controller.advance(7) is False
        assert wizard.runner.pending == []

    def test_commit_returning_plain_value_advances(self, qtbot, wizard):
        wizard.contents[0] = Content(42)
        failures = []
        wizard.controller.transition_failed.connect(lambda kind, message: failures.append(kind))

        wizard.controller.advance()
        wizard.runner.run()

        assert failures == []
        assert wizard.cursor.index == 1
        assert wizard.context.id is None

    def test_submit_refused_before_last_step(self, qtbot):
        flow = Flow("/access/create/abc", resource_id="abc")

        assert flow.controller.submit() is False
        assert flow.runner.pending == []
        assert flow.controller.busy is False


class TestBackAndSelect:
    """Movement without commit."""

    def test_back_replaces_route(self, qtbot, wizard):
        wizard.controller.advance()
        wizard.runner.run()

        assert wizard.controller.back() is True
        assert wizard.cursor.index == 0
        assert len(wizard.router.history) == 2

    def test_back_on_first_step_is_noop(self, qtbot, wizard):
        assert wizard.controller.back() is False

    def test_wizard_refuses_unopened_steps(self, qtbot, wizard):
        assert wizard.controller.select(2) is False
        assert wizard.cursor.index == 0

    def test_wizard_allows_opened_steps(self, qtbot, wizard):
        wizard.controller.advance()
        wizard.runner.run()
        assert wizard.controller.select(0) is True
        assert wizard.controller.select(1) is True
        assert wizard.cursor.index == 1

    def test_tab_view_selects_any_visible_step_without_commit(self, qtbot, tab_view):
        audit = Content()
        tab_view.contents[4] = audit

        assert tab_view.controller.select(4) is True

        assert tab_view.cursor.index == 4
        assert 4 in tab_view.controller.opened
        assert audit.commits == 0
        assert tab_view.runner.pending == []
        assert tab_view.router.current.to_url() == "/access/detail/abc?step=4"

    def test_readonly_hides_audit_and_clamps(self, qtbot, tab_view):
        tab_view.controller.select(4)
        tab_view.context.set_status(101)

        assert tab_view.controller.step_count() == 4
        assert tab_view.cursor.index == 3
        assert tab_view.controller.select(4) is False


class TestDispose:
    """Results arriving after disposal are dropped."""

    def test_late_commit_result_is_discarded(self, qtbot, wizard):
        wizard.contents[0] = Content({"inlongGroupId": "abc"})
        wizard.controller.advance()
        wizard.controller.dispose()

        with qtbot.assertNotEmitted(wizard.controller.step_changed):
            wizard.runner.run()

        assert wizard.runner.shut_down is True
        assert wizard.context.id is None
        assert wizard.router.current.to_url() == "/access/create"

    def test_disposed_controller_refuses_transitions(self, qtbot, tab_view):
        tab_view.controller.dispose()
        assert tab_view.controller.advance() is False
        assert tab_view.controller.select(1) is False
        assert tab_view.controller.back(1) is False


@pytest.mark.parametrize("url,resource_id", [
    ("/access/create", None),
    ("/access/detail/abc", "abc"),
])
def test_index_stays_in_bounds(qtbot, url, resource_id):
    """Random transitions never leave 0 <= index < step_count."""
    flow = Flow(url, resource_id=resource_id)
    rng = random.Random(1234)

    for _ in range(200):
        action = rng.choice(["advance", "back", "select", "status"])
        if action == "advance":
            flow.controller.advance()
        elif action == "back":
            flow.controller.back()
        elif action == "select":
            flow.controller.select(rng.randint(-2, 6))
        else:
            flow.context.set_status(rng.choice([None, 0, 101, 150]))

        if flow.runner.pending and rng.random() < 0.7:
            flow.runner.run()

        assert 0 <= flow.cursor.index < flow.controller.step_count()


class TestLeave:
    """Leaving for the listing abandons work in flight."""

    def test_leave_goes_to_listing(self, qtbot, wizard):
        wizard.controller.leave()
        assert wizard.router.current.path == "/access"

    def test_late_commit_after_leave_is_discarded(self, qtbot, wizard):
        wizard.contents[0] = Content({"inlongGroupId": "abc", "middlewareType": "KAFKA"})
        wizard.controller.advance()

        with qtbot.waitSignal(wizard.controller.busy_changed, timeout=1000) as blocker:
            wizard.controller.leave()
        assert blocker.args == [False]

        with qtbot.assertNotEmitted(wizard.controller.step_changed):
            wizard.runner.run()

        assert wizard.router.current.to_url() == "/access"
        assert wizard.cursor.index == 0
        assert wizard.context.id is None
        assert wizard.controller.busy is False

    def test_late_failure_after_leave_is_silent(self, qtbot, wizard):
        wizard.contents[0] = Content(error=ApiException("boom"))
        wizard.controller.advance()
        wizard.controller.leave()

        with qtbot.assertNotEmitted(wizard.controller.transition_failed):
            wizard.runner.run()
        assert wizard.controller.busy is False

    def test_submit_success_releases_busy_before_leaving(self, qtbot):
        flow = Flow("/access/create/abc?step=3", resource_id="abc")
        states = []
        flow.controller.busy_changed.connect(states.append)

        flow.controller.submit()
        flow.runner.run()

        assert states == [True, False]
        assert flow.router.current.path == "/access"
