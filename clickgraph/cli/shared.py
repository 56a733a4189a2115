# ==============================================================================
# Shared Utilities for CLI Commands
# ==============================================================================
"""
Shared utilities, constants, and helper functions used across CLI command modules.

This module provides:
- ANSI color codes and status icons
- Diagnostic stream output helpers
- The read -> sessions -> build -> reduce pipeline shared by commands
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from clickgraph.core import Graph, VisitEvent, build_graph, build_sessions
from clickgraph.core.models import RESERVED_SCREENS
from clickgraph.infrastructure import ClickgraphError, read_visit_events
from clickgraph.render import GraphSummary
from clickgraph.utils.config import Settings

logger = logging.getLogger(__name__)


# ==============================================================================
# ANSI Colors
# ==============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BRIGHT_RED = "\033[91m"


class Icons:
    """Status icons using Unicode symbols."""

    CROSS = "✗"


# Module-level aliases for convenience
C, I = Colors, Icons


# ==============================================================================
# Diagnostic Output
# ==============================================================================


def diag(message: str = "") -> None:
    """Write a line to the diagnostic stream (stderr)."""
    print(message, file=sys.stderr)


def fail(message: str) -> None:
    """Report a fatal error on stderr and exit with status 1."""
    diag(f"{C.BRIGHT_RED}{I.CROSS} {message}{C.RESET}")
    raise typer.Exit(1)


# ==============================================================================
# Pipeline
# ==============================================================================


@dataclass(frozen=True)
class PipelineResult:
    """Everything a command needs after the graph has been built and reduced."""

    events: list[VisitEvent]
    sessions: dict[str, list[VisitEvent]]
    graph: Graph
    reduced: Graph

    @property
    def summary(self) -> GraphSummary:
        return GraphSummary.from_run(len(self.events), len(self.sessions), self.graph, self.reduced)


def run_pipeline(
    settings: Settings,
    input_filename: Optional[Path] = None,
    limit: Optional[int] = None,
) -> PipelineResult:
    """
    Read the log, rebuild sessions, build the graph and reduce it.

    Args:
        settings: Application settings supplying defaults
        input_filename: Overrides settings.input.data_file
        limit: Screens to keep (start/end are added on top);
            overrides settings.graph.limit

    Returns:
        PipelineResult with the full and the reduced graph

    Raises:
        typer.Exit: On any fatal input error
    """
    path = input_filename or settings.input.data_file
    screens = settings.graph.limit if limit is None else limit

    try:
        events = read_visit_events(
            path,
            separator=settings.input.separator,
            comment_prefix=settings.input.comment_prefix,
            screen_prefix=settings.input.screen_prefix,
        )
    except ClickgraphError as e:
        logger.debug("Aborting run: %s", e)
        fail(str(e))

    sessions = build_sessions(events)
    graph = build_graph(sessions)
    reduced = graph.reduce_to(screens + len(RESERVED_SCREENS))
    return PipelineResult(events=events, sessions=sessions, graph=graph, reduced=reduced)
