# ==============================================================================
# Render Command
# ==============================================================================
"""
Render command for the clickgraph CLI.

Reads the clickstream log, builds and reduces the screen graph and writes
it to stdout as a Graphviz DOT document. Progress and validation output
go to stderr so stdout can be piped straight into `dot`.
"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from clickgraph.cli.shared import diag, run_pipeline
from clickgraph.render import DotRenderer, Theme, graph_dump
from clickgraph.render.diagnostics import load_line, reduction_line
from clickgraph.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def render_graph(
    input_filename: Annotated[
        Optional[Path],
        typer.Option("--input-filename", "-i", help="CSV file to read [default: logs.csv]"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=0, help="Amount of screens to display [default: 10]"),
    ] = None,
    dump: Annotated[
        bool, typer.Option("--dump/--no-dump", help="Write the node/edge dump to stderr")
    ] = True,
) -> None:
    """Render the top screens of a clickstream log as a DOT graph.

    Examples:
        clickgraph render > graph.dot
        clickgraph render -i logs.csv -l 20 | dot -Tsvg > graph.svg
    """
    settings = get_settings()
    result = run_pipeline(settings, input_filename=input_filename, limit=limit)
    summary = result.summary

    diag(load_line(summary))
    diag(reduction_line(summary))

    renderer = DotRenderer(Theme.from_settings(settings.render))
    renderer.write(result.reduced, result.graph.total_click_count, sys.stdout)

    if dump:
        for line in graph_dump(result.reduced, summary.fraction_represented):
            diag(line)
