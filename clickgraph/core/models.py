# ==============================================================================
# Clickgraph Domain Models
# ==============================================================================
"""
Models for visit events and the screen-transition graph.

These models are used for:
- Validating records read from the log file (VisitEvent)
- Representing the ranked, immutable transition graph (Node, Edge, Graph)

This module is part of the core domain layer and has no external dependencies
beyond Pydantic.
"""

from dataclasses import dataclass, field
from typing import Mapping, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# Synthetic screens bracketing every session
START = "start"
END = "end"
RESERVED_SCREENS = frozenset({START, END})


class VisitEvent(BaseModel):
    """
    A single screen visit read from the clickstream log.

    Attributes:
        timestamp: Time of the visit, truncated to an integer
        session_id: Identifier of the session the visit belongs to
        screen_name: Screen that was visited
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Visit time (integer units)")
    session_id: str = Field(..., description="Session identifier")
    screen_name: str = Field(..., description="Visited screen name")

    def __str__(self) -> str:
        return f"{self.timestamp}, {self.session_id}, {self.screen_name}"


class EdgeKey(NamedTuple):
    """Composite key of an edge: the (origin, destination) screen pair."""

    origin: str
    destination: str


@dataclass(frozen=True)
class Edge:
    """
    An observed transition between two screens.

    Rank is relative to the total click count of the graph the edge was
    ranked in; local rank is relative to the origin node's visit count.
    """

    origin: str
    """Screen the transition starts from."""

    destination: str
    """Screen the transition leads to."""

    visit_count: int
    """Number of times the transition was observed."""

    rank: float = 0.0
    """visit_count / total click count."""

    local_rank: float = 0.0
    """visit_count / origin node visit count."""

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(self.origin, self.destination)

    def __str__(self) -> str:
        return f"edge: {self.origin} -> {self.destination} ({self.local_rank * 100:.0f}%)"


@dataclass(frozen=True)
class Node:
    """A distinct screen with its aggregate visit statistics."""

    name: str
    """Screen name (unique within a graph)."""

    visit_count: int
    """Number of visits across all sessions."""

    rank: float = 0.0
    """visit_count / total click count."""

    outgoing_edges: tuple[Edge, ...] = ()
    """Edges leaving this node, descending by visit count."""

    @property
    def is_reserved(self) -> bool:
        """True for the synthetic start/end markers."""
        return self.name in RESERVED_SCREENS

    def __str__(self) -> str:
        return f"node: {self.name} ({self.rank * 100:.0f}%)"


@dataclass(frozen=True)
class Graph:
    """
    Ranked screen-transition graph.

    Instances are produced by the ranking pass (see clickgraph.core.ranker)
    and never change afterwards. Reduction derives a new Graph.

    Invariant: every edge's origin and destination are keys of ``nodes``.
    """

    total_click_count: int
    """Sum of visit counts of all edges not leading to the end marker."""

    nodes: Mapping[str, Node] = field(default_factory=dict)
    """Nodes keyed by screen name."""

    edges: Mapping[EdgeKey, Edge] = field(default_factory=dict)
    """Edges keyed by (origin, destination)."""

    nodes_by_visit_desc: tuple[Node, ...] = ()
    """All nodes ordered by visit count descending (ties: start/end, then name)."""

    @property
    def node_count(self) -> int:
        return len(self.nodes_by_visit_desc)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def reduce_to(self, limit: int) -> "Graph":
        """Return a new graph restricted to the ``limit`` busiest nodes."""
        from clickgraph.core.reducer import reduce_graph

        return reduce_graph(self, limit)

    def __str__(self) -> str:
        return f"node-count:{self.node_count} - total-click-count: {self.total_click_count}"
