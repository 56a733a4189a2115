# ==============================================================================
# Ranker - Frequency Normalization
# ==============================================================================
"""
Ranking pass that turns raw visit counts into an immutable Graph.

The ranking pass is the second phase of the graph build:
- Node rank: node visits / total click count
- Edge rank: edge visits / total click count
- Edge local rank: edge visits / origin node visits
- Outgoing edges and the node list are put in a fixed order

A zero denominator yields a rank of 0.0 instead of raising.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from clickgraph.core.models import END, Edge, EdgeKey, Graph, Node


def ratio(numerator: int, denominator: int) -> float:
    """Divide two counts, returning 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def click_count(edge_counts: Iterable[tuple[EdgeKey, int]]) -> int:
    """
    Sum the visit counts of all transitions that are real clicks.

    Transitions into the end marker are not clicks and are excluded.

    Args:
        edge_counts: (EdgeKey, visit_count) pairs

    Returns:
        The total click count used as the ranking denominator
    """
    return sum(count for key, count in edge_counts if key.destination != END)


def node_sort_key(node: Node) -> tuple[int, bool, str]:
    """Visit count descending; on ties start/end first, then by name."""
    return (-node.visit_count, not node.is_reserved, node.name)


def edge_sort_key(edge: Edge) -> tuple[int, str]:
    """Visit count descending, then destination."""
    return (-edge.visit_count, edge.destination)


def rank_graph(node_counts: Mapping[str, int], edge_counts: Mapping[EdgeKey, int]) -> Graph:
    """
    Rank accumulated counts and freeze them into a Graph.

    Args:
        node_counts: Visit count per screen name
        edge_counts: Visit count per (origin, destination) pair. Every origin
            and destination must be present in node_counts.

    Returns:
        Fully ranked Graph

    Raises:
        ValueError: If an edge refers to a screen missing from node_counts
    """
    total = click_count(edge_counts.items())

    edges: dict[EdgeKey, Edge] = {}
    outgoing: dict[str, list[Edge]] = {name: [] for name in node_counts}
    for key, count in edge_counts.items():
        if key.origin not in node_counts or key.destination not in node_counts:
            raise ValueError(f"Edge {key.origin} -> {key.destination} refers to an unknown screen")
        edge = Edge(
            origin=key.origin,
            destination=key.destination,
            visit_count=count,
            rank=ratio(count, total),
            local_rank=ratio(count, node_counts[key.origin]),
        )
        edges[key] = edge
        outgoing[key.origin].append(edge)

    nodes = {
        name: Node(
            name=name,
            visit_count=count,
            rank=ratio(count, total),
            outgoing_edges=tuple(sorted(outgoing[name], key=edge_sort_key)),
        )
        for name, count in node_counts.items()
    }

    return Graph(
        total_click_count=total,
        nodes=MappingProxyType(nodes),
        edges=MappingProxyType(edges),
        nodes_by_visit_desc=tuple(sorted(nodes.values(), key=node_sort_key)),
    )
