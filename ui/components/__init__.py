# -*- coding: utf-8 -*-
"""
Access Console UI Components
"""

from .action_button import ActionButton
from .step_indicator import StepIndicator
from .toast import Toast
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "StepIndicator",
    "Toast",
    "WizardFooter",
]
