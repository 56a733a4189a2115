# ==============================================================================
# Rendering
# ==============================================================================
"""
Output formatting for ranked graphs.

This module contains:
- theme.py - Threshold bands, link and title templates
- dot.py - Graphviz DOT renderer
- diagnostics.py - Run statistics and the node/edge dump
"""

from clickgraph.render.diagnostics import GraphSummary, graph_dump, node_rank_sum
from clickgraph.render.dot import DotRenderer
from clickgraph.render.theme import Band, BandScale, Theme

__all__ = [
    "Band",
    "BandScale",
    "DotRenderer",
    "GraphSummary",
    "Theme",
    "graph_dump",
    "node_rank_sum",
]
