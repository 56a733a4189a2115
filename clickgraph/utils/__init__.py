# ==============================================================================
# Clickgraph Utilities
# ==============================================================================
"""
Shared utilities for clickgraph.

This module exports the configuration models and the cached settings accessor.
"""

from clickgraph.utils.config import (
    GraphSettings,
    InputSettings,
    RenderSettings,
    Settings,
    get_settings,
)

__all__ = [
    "GraphSettings",
    "InputSettings",
    "RenderSettings",
    "Settings",
    "get_settings",
]
