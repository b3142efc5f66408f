# -*- coding: utf-8 -*-
"""
Access Console UI Pages
"""

from .access_detail import AccessDetailPage

__all__ = [
    "AccessDetailPage",
]
