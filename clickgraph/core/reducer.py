# ==============================================================================
# Reducer - Top-N Graph Reduction
# ==============================================================================
"""
Derives a smaller graph holding only the busiest screens.

Ranks and local ranks are carried over from the full graph unchanged, so
percentages in the reduced view stay comparable to the whole data set.
Only the total click count is recomputed, which lets callers report how
much of the original traffic the reduced graph still represents.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable

from clickgraph.core.models import Edge, Graph
from clickgraph.core.ranker import click_count, node_sort_key, ratio

logger = logging.getLogger(__name__)

# Slack for float drift when cumulative local ranks add up to a whole
_EPSILON = 1e-9


def reduce_graph(graph: Graph, limit: int) -> Graph:
    """
    Keep the ``limit`` busiest nodes and the edges between them.

    ``limit`` counts the start/end markers as nodes; callers wanting N real
    screens pass N + 2. A limit at or above the node count keeps every node.

    Args:
        graph: Ranked graph to reduce (left untouched)
        limit: Maximum number of nodes in the result

    Returns:
        New Graph with recomputed total click count and filtered edges

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    selected = graph.nodes_by_visit_desc[: min(limit, graph.node_count)]
    names = {node.name for node in selected}

    edges = {
        key: edge
        for key, edge in graph.edges.items()
        if key.origin in names and key.destination in names
    }

    nodes = {
        node.name: replace(
            node,
            outgoing_edges=tuple(e for e in node.outgoing_edges if e.key in edges),
        )
        for node in selected
    }

    reduced = Graph(
        total_click_count=click_count((key, edge.visit_count) for key, edge in edges.items()),
        nodes=MappingProxyType(nodes),
        edges=MappingProxyType(edges),
        nodes_by_visit_desc=tuple(sorted(nodes.values(), key=node_sort_key)),
    )
    logger.debug(
        "Reduced graph from %d to %d nodes (%d of %d clicks kept)",
        graph.node_count,
        reduced.node_count,
        reduced.total_click_count,
        graph.total_click_count,
    )
    return reduced


def fraction_represented(reduced_click_count: int, original_click_count: int) -> float:
    """Share of the original clicks still present after reduction."""
    return ratio(reduced_click_count, original_click_count)


def edges_within(edges: Iterable[Edge], fraction: float) -> list[Edge]:
    """
    Return the leading edges whose cumulative local rank stays within ``fraction``.

    Args:
        edges: A node's outgoing edges, descending by visit count
        fraction: Cumulative local-rank ceiling (inclusive)

    Returns:
        The prefix of edges inside the represented mass
    """
    kept = []
    so_far = 0.0
    for edge in edges:
        so_far += edge.local_rank
        if so_far > fraction + _EPSILON:
            break
        kept.append(edge)
    return kept
