# ==============================================================================
# Tests for Graph Reduction
# ==============================================================================
"""
Unit tests for reduce_graph(), edges_within() and fraction_represented().

Tests cover:
- Top-N node selection including the start/end markers
- Edge filtering and recomputed total click count
- Ranks carried over unchanged from the full graph
- Idempotence and size bounds
- Cumulative local-rank cutoff for display filtering
"""

import pytest

from clickgraph.core import (
    END,
    START,
    EdgeKey,
    GraphBuilder,
    VisitEvent,
    edges_within,
    fraction_represented,
    reduce_graph,
)
from clickgraph.core.models import Edge
from conftest import make_sessions


# ==============================================================================
# Node selection
# ==============================================================================


class TestNodeSelection:
    """Tests for choosing the busiest nodes."""

    def test_keeps_top_nodes(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        assert [n.name for n in reduced.nodes_by_visit_desc] == [END, START, "A", "B"]
        assert set(reduced.nodes) == {END, START, "A", "B"}

    def test_limit_two_keeps_only_markers(self, two_session_graph):
        reduced = reduce_graph(two_session_graph, 2)
        assert set(reduced.nodes) == {START, END}
        assert reduced.edge_count == 0
        assert reduced.total_click_count == 0

    def test_limit_two_keeps_start_end_edge(self):
        builder = GraphBuilder()
        builder.add_sessions(make_sessions({"s1": ["A"], "s2": ["B"]}).values())
        builder.add_session(
            [
                VisitEvent(timestamp=1, session_id="s3", screen_name=START),
                VisitEvent(timestamp=2, session_id="s3", screen_name=END),
            ]
        )
        g = builder.build()
        reduced = reduce_graph(g, 2)
        assert list(reduced.edges) == [EdgeKey(START, END)]
        # start -> end leads to the end marker, so it is not a click
        assert reduced.total_click_count == 0

    def test_limit_above_node_count_keeps_everything(self, busy_graph):
        reduced = reduce_graph(busy_graph, 100)
        assert reduced == busy_graph

    def test_limit_zero(self, busy_graph):
        reduced = reduce_graph(busy_graph, 0)
        assert reduced.node_count == 0
        assert reduced.edge_count == 0

    def test_negative_limit_rejected(self, busy_graph):
        with pytest.raises(ValueError, match="must not be negative"):
            reduce_graph(busy_graph, -1)

    def test_graph_method_delegates(self, busy_graph):
        assert busy_graph.reduce_to(4) == reduce_graph(busy_graph, 4)


# ==============================================================================
# Edges and counts
# ==============================================================================


class TestEdgeFiltering:
    """Tests for retained edges and the recomputed click count."""

    def test_only_edges_between_kept_nodes(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        assert set(reduced.edges) == {
            EdgeKey(START, "A"),
            EdgeKey(START, "B"),
            EdgeKey("A", "B"),
            EdgeKey("A", END),
            EdgeKey("B", END),
        }

    def test_total_click_count_recomputed(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        # start->A (4) + start->B (1) + A->B (2)
        assert reduced.total_click_count == 7
        assert busy_graph.total_click_count == 11

    def test_total_click_count_from_edge_visits(self, two_session_graph):
        reduced = reduce_graph(two_session_graph, 3)
        assert set(reduced.edges) == {EdgeKey(START, "A")}
        assert reduced.total_click_count == 2

    def test_outgoing_edges_filtered_in_order(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        assert [e.destination for e in reduced.nodes["A"].outgoing_edges] == ["B", END]
        assert [e.destination for e in reduced.nodes[START].outgoing_edges] == ["A", "B"]

    def test_ranks_carried_over(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        assert reduced.nodes["A"].rank == busy_graph.nodes["A"].rank
        edge = reduced.edges[EdgeKey("A", "B")]
        assert edge.rank == pytest.approx(2 / 11)
        assert edge.local_rank == pytest.approx(2 / 5)

    def test_input_not_mutated(self, busy_graph):
        before = busy_graph.nodes["A"].outgoing_edges
        reduce_graph(busy_graph, 3)
        assert busy_graph.nodes["A"].outgoing_edges == before
        assert busy_graph.node_count == 6


# ==============================================================================
# Properties
# ==============================================================================


class TestReductionProperties:
    """Invariants of reduction."""

    @pytest.mark.parametrize("limit", [0, 1, 2, 3, 4, 5, 6, 10])
    def test_idempotent(self, busy_graph, limit):
        once = reduce_graph(busy_graph, limit)
        assert reduce_graph(once, limit) == once

    @pytest.mark.parametrize("limit", [0, 2, 3, 5, 10])
    def test_never_grows(self, busy_graph, limit):
        reduced = reduce_graph(busy_graph, limit)
        assert reduced.node_count <= min(limit, busy_graph.node_count)
        assert reduced.edge_count <= busy_graph.edge_count

    @pytest.mark.parametrize("limit", [2, 3, 4])
    def test_referential_integrity(self, busy_graph, limit):
        reduced = reduce_graph(busy_graph, limit)
        for key in reduced.edges:
            assert key.origin in reduced.nodes
            assert key.destination in reduced.nodes


# ==============================================================================
# Fraction represented and cumulative cutoff
# ==============================================================================


def _edge(destination: str, local_rank: float) -> Edge:
    return Edge(origin="X", destination=destination, visit_count=1, local_rank=local_rank)


class TestEdgesWithin:
    """Tests for the cumulative local-rank prefix."""

    def test_prefix_within_fraction(self):
        edges = [_edge("a", 0.5), _edge("b", 0.25), _edge("c", 0.25)]
        assert [e.destination for e in edges_within(edges, 0.75)] == ["a", "b"]

    def test_full_fraction_keeps_all(self):
        edges = [_edge("a", 0.5), _edge("b", 0.5)]
        assert len(edges_within(edges, 1.0)) == 2

    def test_float_drift_keeps_last_edge(self):
        # 18/28 + 9/28 + 1/28 sums to slightly more than 1.0
        edges = [_edge("a", 18 / 28), _edge("b", 9 / 28), _edge("c", 1 / 28)]
        assert [e.destination for e in edges_within(edges, 1.0)] == ["a", "b", "c"]

    def test_first_edge_over_fraction(self):
        assert edges_within([_edge("a", 0.9), _edge("b", 0.1)], 0.5) == []

    def test_empty(self):
        assert edges_within([], 0.5) == []

    def test_on_reduced_graph(self, busy_graph):
        reduced = reduce_graph(busy_graph, 4)
        fraction = fraction_represented(reduced.total_click_count, busy_graph.total_click_count)
        # A->B is 0.4 of A's traffic, A->end brings it to 0.8 > 7/11
        kept = edges_within(reduced.nodes["A"].outgoing_edges, fraction)
        assert [e.destination for e in kept] == ["B"]


class TestFractionRepresented:
    """Tests for the reduced/original click ratio."""

    def test_ratio(self):
        assert fraction_represented(7, 11) == pytest.approx(7 / 11)

    def test_zero_original(self):
        assert fraction_represented(0, 0) == 0.0
