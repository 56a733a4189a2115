# ==============================================================================
# CLI Commands Module
# ==============================================================================
"""
CLI commands for clickgraph.

Commands are organized into separate modules for maintainability:
- shared.py: Common utilities, output helpers and the graph pipeline
- render.py: DOT rendering of the reduced screen graph
- stats.py: Run statistics and screen ranking
- config.py: Configuration display
"""

from clickgraph.cli.shared import (
    # Classes
    Colors,
    Icons,
    PipelineResult,
    # Aliases
    C,
    I,
    # Output helpers
    diag,
    fail,
    # Pipeline
    run_pipeline,
)

__all__ = [
    # Classes
    "Colors",
    "Icons",
    "PipelineResult",
    # Aliases
    "C",
    "I",
    # Output helpers
    "diag",
    "fail",
    # Pipeline
    "run_pipeline",
]
