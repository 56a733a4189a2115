# ==============================================================================
# Clickgraph CLI
# ==============================================================================
"""
Command-line interface for the clickstream screen-flow graph.

Usage:
    clickgraph --help
    clickgraph render --input-filename logs.csv --limit 10 > graph.dot
    clickgraph stats --json
    clickgraph config show
"""

import logging
import sys
from importlib import metadata
from typing import Annotated, Optional

# ==============================================================================
# App Configuration
# ==============================================================================
# Set consistent terminal width for help output formatting
import os

import typer

if "COLUMNS" not in os.environ:
    os.environ["COLUMNS"] = "115"

app = typer.Typer(
    name="clickgraph",
    help="Clickstream screen-flow graph CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        try:
            installed = metadata.version("clickgraph")
        except metadata.PackageNotFoundError:
            installed = "unknown"
        print(f"clickgraph {installed}")
        raise typer.Exit()


@app.callback()
def root(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level [default: from LOG_LEVEL or WARNING]"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
) -> None:
    """Clickstream screen-flow graph CLI."""
    from clickgraph.utils.config import get_settings

    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


# Render command is imported from clickgraph.cli.render
from clickgraph.cli.render import render_graph

app.command("render")(render_graph)

# Stats command is imported from clickgraph.cli.stats
from clickgraph.cli.stats import show_stats

app.command("stats")(show_stats)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# Register config commands from cli.config module
from clickgraph.cli.config import config_show

config_app.command("show")(config_show)


# ==============================================================================
# Entry Point
# ==============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
