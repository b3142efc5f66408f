# -*- coding: utf-8 -*-
"""
Access Console Controllers
==========================
Controller layer between the UI (pages) and the backend API.

Controllers provide:
- Background execution of blocking API calls
- Qt signals for UI updates
- Loading and error state

Usage:
    from controllers import AccessGroupController

    controller = AccessGroupController(api_client, task_runner)
    controller.watch(context)
"""

from controllers.base_controller import BaseController
from controllers.access_group_controller import AccessGroupController

__all__ = [
    'BaseController',
    'AccessGroupController',
]
