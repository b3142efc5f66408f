# -*- coding: utf-8 -*-
"""
Step Flow Framework - multi-step resource flows.

Provides the pieces shared by wizard (creation) and tab view
(existing resource) flows: navigation mode, step registry, lazy mounting,
step cursor, commit protocol and the transition controller.
"""

from .base_step import BaseStep, CommitResult, CommittableStep, run_commit, supports_commit
from .base_flow import BaseStepFlow
from .lazy_mount import LazyMountCache, OpenedSet
from .navigation_mode import NavigationMode, resolve_navigation_mode
from .step_cursor import LocalStepCursor, RouteStepCursor, StepCursor, create_step_cursor
from .step_registry import StepDefinition, StepRegistry
from .transition_controller import OPERATION_FAILURE, VALIDATION_FAILURE, TransitionController
from .wizard_context import ResourceContext
from .workers import OperationWorker, TaskRunner, ThreadTaskRunner

__all__ = [
    'BaseStep',
    'BaseStepFlow',
    'CommitResult',
    'CommittableStep',
    'LazyMountCache',
    'LocalStepCursor',
    'NavigationMode',
    'OPERATION_FAILURE',
    'OpenedSet',
    'OperationWorker',
    'ResourceContext',
    'RouteStepCursor',
    'StepCursor',
    'StepDefinition',
    'StepRegistry',
    'TaskRunner',
    'ThreadTaskRunner',
    'TransitionController',
    'VALIDATION_FAILURE',
    'create_step_cursor',
    'resolve_navigation_mode',
    'run_commit',
    'supports_commit',
]
