# ==============================================================================
# Core Domain Logic
# ==============================================================================
"""
Pure domain logic with no I/O.

This module contains:
- Domain models (VisitEvent, Node, Edge, Graph)
- Session reconstruction (grouping, ordering, start/end bracketing)
- Graph building, ranking and top-N reduction

All code here is framework-agnostic and easily unit-testable.
"""

from clickgraph.core.graph_builder import GraphBuilder, build_graph
from clickgraph.core.models import (
    END,
    RESERVED_SCREENS,
    START,
    Edge,
    EdgeKey,
    Graph,
    Node,
    VisitEvent,
)
from clickgraph.core.ranker import click_count, rank_graph, ratio
from clickgraph.core.reducer import edges_within, fraction_represented, reduce_graph
from clickgraph.core.sessions import average_session_length, bracket_session, build_sessions

__all__ = [
    # Models
    "END",
    "RESERVED_SCREENS",
    "START",
    "Edge",
    "EdgeKey",
    "Graph",
    "Node",
    "VisitEvent",
    # Sessions
    "average_session_length",
    "bracket_session",
    "build_sessions",
    # Graph
    "GraphBuilder",
    "build_graph",
    "click_count",
    "rank_graph",
    "ratio",
    # Reduction
    "edges_within",
    "fraction_represented",
    "reduce_graph",
]
