# ==============================================================================
# Config Commands
# ==============================================================================
"""
Configuration commands for the clickgraph CLI.

Shows the effective configuration (environment, .env file and defaults).
"""

import json
from typing import Annotated

import typer

from clickgraph.cli.shared import C
from clickgraph.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def config_show(
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output configuration as JSON")
    ] = False,
) -> None:
    """Display current configuration."""
    settings = get_settings()

    if json_output:
        print(json.dumps(settings.model_dump(mode="json"), indent=2))
        return

    print()
    print(f"  {C.BOLD}Input{C.RESET}")
    print(f"    Data file:       {settings.input.data_file}")
    print(f"    Separator:       {settings.input.separator!r}")
    print(f"    Comment prefix:  {settings.input.comment_prefix!r}")
    print(f"    Screen prefix:   {settings.input.screen_prefix!r}")
    print()
    print(f"  {C.BOLD}Graph{C.RESET}")
    print(f"    Limit:           {settings.graph.limit}")
    print()
    print(f"  {C.BOLD}Render{C.RESET}")
    print(f"    URL template:    {settings.render.url_template}")
    print(f"    Title template:  {settings.render.title_template}")
    print(f"    Node bands:      {len(settings.render.node_bands)}")
    print(f"    Edge bands:      {len(settings.render.edge_bands)}")
    print()
    print(f"  {C.DIM}Log level: {settings.log_level}{C.RESET}")
    print()
