# ==============================================================================
# Infrastructure Adapters
# ==============================================================================
"""
Adapters for external inputs.

This module contains:
- log_reader.py - Clickstream log file reader and its error types
"""

from clickgraph.infrastructure.log_reader import (
    ClickgraphError,
    LogParseError,
    LogReadError,
    read_visit_events,
)

__all__ = [
    "ClickgraphError",
    "LogParseError",
    "LogReadError",
    "read_visit_events",
]
