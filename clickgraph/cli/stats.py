# ==============================================================================
# Stats Command
# ==============================================================================
"""
Stats command for the clickgraph CLI.

Runs the same pipeline as `render` but, instead of DOT output, shows the run
summary and the ranking of the kept screens.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from clickgraph.cli.shared import run_pipeline
from clickgraph.render import node_rank_sum
from clickgraph.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def show_stats(
    input_filename: Annotated[
        Optional[Path],
        typer.Option("--input-filename", "-i", help="CSV file to read [default: logs.csv]"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=0, help="Amount of screens to keep [default: 10]"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show session and screen ranking statistics.

    Examples:
        clickgraph stats
        clickgraph stats -l 5 --json
    """
    settings = get_settings()
    result = run_pipeline(settings, input_filename=input_filename, limit=limit)
    summary = result.summary
    reduced = result.reduced

    if json_output:
        payload = summary.model_dump()
        payload["screens"] = [
            {
                "name": node.name,
                "visit_count": node.visit_count,
                "rank": node.rank,
                "edges": [
                    {
                        "destination": edge.destination,
                        "visit_count": edge.visit_count,
                        "rank": edge.rank,
                        "local_rank": edge.local_rank,
                    }
                    for edge in node.outgoing_edges
                ],
            }
            for node in reduced.nodes_by_visit_desc
        ]
        print(json.dumps(payload, indent=2))
        return

    console = Console()
    table = Table(title="Screen Ranking", show_header=True, header_style="bold")
    table.add_column("Screen", justify="left")
    table.add_column("Visits", justify="right")
    table.add_column("Rank", justify="right")
    table.add_column("Edges", justify="right")

    for node in reduced.nodes_by_visit_desc:
        table.add_row(
            node.name,
            f"{node.visit_count:,}",
            f"{node.rank * 100:.1f}%",
            str(len(node.outgoing_edges)),
        )

    summary_table = Table(title="Summary", show_header=False)
    summary_table.add_column("Metric", justify="left", style="bold")
    summary_table.add_column("Value", justify="right")
    summary_table.add_row("Visits", f"{summary.event_count:,}")
    summary_table.add_row("Sessions", f"{summary.session_count:,}")
    summary_table.add_row("Avg length", f"{summary.average_session_length:.1f}")
    summary_table.add_row("Nodes", f"{summary.reduced_node_count} of {summary.node_count}")
    summary_table.add_row("Clicks", f"{summary.reduced_click_count:,} of {summary.total_click_count:,}")
    summary_table.add_row("Represented", f"{summary.percent_represented:.0f}% of clicks")
    summary_table.add_row("Node rank sum", f"{node_rank_sum(result.graph) * 100:.0f}%")

    print()
    console.print(table)
    console.print(summary_table)
    print()
