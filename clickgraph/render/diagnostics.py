# ==============================================================================
# Diagnostics
# ==============================================================================
"""
Human-readable statistics about a run, written to the diagnostic stream.

Provides:
- GraphSummary: counts and click totals for the full and reduced graph
- Progress lines (events/sessions, full vs reduced size)
- A per-node/per-edge dump with cumulative-mass annotations and a
  sanity-check sum of node ranks (should be close to 100%)
"""

from pydantic import BaseModel, Field

from clickgraph.core.models import Graph
from clickgraph.core.reducer import edges_within, fraction_represented
from clickgraph.core.sessions import average_session_length


class GraphSummary(BaseModel):
    """Statistics of one pipeline run."""

    event_count: int = Field(..., description="Visit events read from the log")
    session_count: int = Field(..., description="Reconstructed sessions")
    average_session_length: float = Field(..., description="Visits per session")
    node_count: int = Field(..., description="Nodes in the full graph")
    reduced_node_count: int = Field(..., description="Nodes kept after reduction")
    screens_shown: int = Field(..., description="Kept nodes excluding start/end")
    total_click_count: int = Field(..., description="Clicks in the full graph")
    reduced_click_count: int = Field(..., description="Clicks in the reduced graph")
    fraction_represented: float = Field(..., description="Reduced / full clicks")

    @classmethod
    def from_run(
        cls, event_count: int, session_count: int, graph: Graph, reduced: Graph
    ) -> "GraphSummary":
        return cls(
            event_count=event_count,
            session_count=session_count,
            average_session_length=average_session_length(event_count, session_count),
            node_count=graph.node_count,
            reduced_node_count=reduced.node_count,
            screens_shown=sum(1 for n in reduced.nodes_by_visit_desc if not n.is_reserved),
            total_click_count=graph.total_click_count,
            reduced_click_count=reduced.total_click_count,
            fraction_represented=fraction_represented(
                reduced.total_click_count, graph.total_click_count
            ),
        )

    @property
    def percent_represented(self) -> float:
        return self.fraction_represented * 100


def load_line(summary: GraphSummary) -> str:
    return (
        f"Found {summary.event_count} visits, "
        f"divided over {summary.session_count} sessions, "
        f"so on average {summary.average_session_length:.0f} clicks per session."
    )


def reduction_line(summary: GraphSummary) -> str:
    return (
        f"Entire data-set contains {summary.node_count} nodes. "
        f"After reducing to top {summary.screens_shown}, "
        f"{summary.percent_represented:.0f} % of all clicks is still represented"
    )


def node_rank_sum(graph: Graph) -> float:
    """Sum of the ranks of all real (non start/end) nodes."""
    return sum(node.rank for node in graph.nodes_by_visit_desc if not node.is_reserved)


def graph_dump(graph: Graph, fraction: float) -> list[str]:
    """
    Dump every node with its outgoing edges.

    Each edge line carries the cumulative local rank so far. Edges beyond
    ``fraction`` are wrapped in parentheses.

    Args:
        graph: Graph to dump
        fraction: Share of clicks the graph represents

    Returns:
        Dump lines, ending with the node rank sanity check
    """
    lines = []
    for node in graph.nodes_by_visit_desc:
        lines.append(str(node))
        shown = len(edges_within(node.outgoing_edges, fraction))
        so_far = 0.0
        for i, edge in enumerate(node.outgoing_edges):
            so_far += edge.local_rank
            if i < shown:
                lines.append(f"\t{edge} ({so_far * 100:.0f})")
            else:
                lines.append(f"\t({edge} ({so_far * 100:.0f}))")
    lines.append(f"***Node sum: {graph.total_click_count} {node_rank_sum(graph) * 100:.0f}")
    return lines
