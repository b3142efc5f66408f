# -*- coding: utf-8 -*-
"""
Access Console Application Core Module
"""

from .config import Config
from .router import Route, Router

__all__ = ["Config", "Route", "Router"]
