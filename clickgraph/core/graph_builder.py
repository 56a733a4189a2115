# ==============================================================================
# Graph Builder - Pure Domain Logic
# ==============================================================================
"""
Builds the screen-transition graph from reconstructed sessions.

The build runs in two phases:
1. Accumulate visit counts per screen and per transition
2. Hand the finished counts to the ranking pass, which returns an
   immutable Graph

A partially-counted graph is never exposed.
"""

import logging
from collections import Counter
from typing import Iterable, Mapping, Sequence

from clickgraph.core.models import EdgeKey, Graph, VisitEvent
from clickgraph.core.ranker import rank_graph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Accumulates visit counts from sessions.

    Each session must already be ordered by timestamp (and usually bracketed
    with start/end markers, see clickgraph.core.sessions).
    """

    def __init__(self):
        self._node_counts: Counter[str] = Counter()
        self._edge_counts: Counter[EdgeKey] = Counter()
        self._session_count = 0

    @property
    def session_count(self) -> int:
        return self._session_count

    def add_session(self, events: Sequence[VisitEvent]) -> None:
        """
        Count the screens and transitions of one session.

        Every event counts as a visit of its screen. Every consecutive pair
        (previous, current) counts as one transition; the first event has no
        predecessor.

        Args:
            events: Session events ordered by timestamp
        """
        previous: VisitEvent | None = None
        for event in events:
            self._node_counts[event.screen_name] += 1
            if previous is not None:
                self._edge_counts[EdgeKey(previous.screen_name, event.screen_name)] += 1
            previous = event
        self._session_count += 1

    def add_sessions(self, sessions: Iterable[Sequence[VisitEvent]]) -> None:
        for events in sessions:
            self.add_session(events)

    def build(self) -> Graph:
        """Run the ranking pass over everything counted so far."""
        graph = rank_graph(dict(self._node_counts), dict(self._edge_counts))
        logger.debug(
            "Built graph from %d sessions: %d nodes, %d edges, %d clicks",
            self._session_count,
            graph.node_count,
            graph.edge_count,
            graph.total_click_count,
        )
        return graph


def build_graph(sessions: Mapping[str, Sequence[VisitEvent]]) -> Graph:
    """
    Build a ranked graph from a session mapping.

    Args:
        sessions: Session id -> events ordered by timestamp

    Returns:
        Immutable ranked Graph (empty when there are no sessions)
    """
    builder = GraphBuilder()
    builder.add_sessions(sessions.values())
    return builder.build()
