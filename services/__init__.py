# -*- coding: utf-8 -*-
"""
Access Console Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "InlongApiClient",
    "get_api_client",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "InlongApiClient":
        from .api_client import InlongApiClient
        return InlongApiClient
    elif name == "get_api_client":
        from .api_client import get_api_client
        return get_api_client
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
