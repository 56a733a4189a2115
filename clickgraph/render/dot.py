# ==============================================================================
# DOT Renderer
# ==============================================================================
"""
Formats a (reduced) graph as a Graphviz directed-graph description.

Layout of the output:
- Header with top-down rank direction
- For each node in visit order: the node statement, followed by the node's
  edges that fall within the fraction of clicks the graph represents
- Title summarizing how many screens are shown and what share of the
  original clicks they cover
- Closing brace

Node percentages are relative to the original (unreduced) click count.
"""

from typing import TextIO

from clickgraph.core.models import Edge, Graph, Node
from clickgraph.core.ranker import ratio
from clickgraph.core.reducer import edges_within, fraction_represented
from clickgraph.render.theme import Theme

_MARKER_STYLE = "shape=circle, style=filled, color=black, fontcolor=white"


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _quote(value: str) -> str:
    """Quote a DOT identifier."""
    return f'"{_escape(value)}"'


class DotRenderer:
    """Renders graphs as DOT text using a Theme for colors, widths and links."""

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or Theme.default()

    def node_statement(self, node: Node, original_click_count: int) -> str:
        if node.is_reserved:
            return f"\n\t{_quote(node.name)} [{_MARKER_STYLE}];\n"

        share = ratio(node.visit_count, original_click_count)
        scale = self.theme.node_scale
        # \n is a DOT line break inside the label, so it must not be escaped again
        label = f'"{_escape(node.name)}\\n{share * 100:.0f}% ({node.visit_count})"'
        return (
            f"\n\t{_quote(node.name)} [label={label}, "
            f"penwidth={scale.penwidth(share):.0f}, color={scale.color(share)}, "
            f"href={_quote(self.theme.url_for(node.name))}];\n"
        )

    def edge_statement(self, edge: Edge) -> str:
        scale = self.theme.edge_scale
        label = f"{edge.local_rank * 100:.0f}% ({edge.visit_count})"
        return (
            f"\t{_quote(edge.origin)} -> {_quote(edge.destination)} [label={_quote(label)}, "
            f"penwidth={scale.penwidth(edge.rank):.0f}, color={scale.color(edge.rank)}];\n"
        )

    def title(self, graph: Graph, fraction: float) -> str:
        screens = sum(1 for node in graph.nodes_by_visit_desc if not node.is_reserved)
        label = self.theme.title(screens, fraction)
        return (
            f'\n\tfontsize = "{self.theme.title_fontsize}"\n'
            f"\tlabel={_quote(label)}\n"
            f'\tlabelloc="t"\n\n'
        )

    def render(self, graph: Graph, original_click_count: int) -> str:
        """
        Render a graph as DOT text.

        Args:
            graph: Graph to draw, usually the reduced graph
            original_click_count: Total click count of the full graph

        Returns:
            Complete DOT document
        """
        fraction = fraction_represented(graph.total_click_count, original_click_count)

        parts = ["\n\ndigraph mygraph {\n", '\trankdir = "TD"']
        for node in graph.nodes_by_visit_desc:
            parts.append(self.node_statement(node, original_click_count))
            for edge in edges_within(node.outgoing_edges, fraction):
                parts.append(self.edge_statement(edge))
        parts.append(self.title(graph, fraction))
        parts.append("}\n")
        return "".join(parts)

    def write(self, graph: Graph, original_click_count: int, stream: TextIO) -> None:
        stream.write(self.render(graph, original_click_count))
