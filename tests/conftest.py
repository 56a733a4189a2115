# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- Session factories built from plain screen sequences
- A small ranked graph and its reduced counterpart
- Log file writer for reader/CLI tests
- Fresh settings per test (cache cleared)
"""

import pytest

from clickgraph.core import VisitEvent, build_graph, build_sessions
from clickgraph.utils.config import get_settings


def make_events(session_id: str, screens: list[str], start: int = 100) -> list[VisitEvent]:
    """Create one session's raw events, one time unit apart."""
    return [
        VisitEvent(timestamp=start + i, session_id=session_id, screen_name=screen)
        for i, screen in enumerate(screens)
    ]


def make_sessions(paths: dict[str, list[str]]) -> dict[str, list[VisitEvent]]:
    """Build bracketed sessions from {session_id: [screen, ...]}."""
    events = []
    for session_id, screens in paths.items():
        events.extend(make_events(session_id, screens))
    return build_sessions(events)


@pytest.fixture()
def two_session_graph():
    """Graph of s1=[A, B] and s2=[A, C]."""
    return build_graph(make_sessions({"s1": ["A", "B"], "s2": ["A", "C"]}))


@pytest.fixture()
def busy_graph():
    """Graph with uneven traffic: A busiest, then B, C, D."""
    return build_graph(
        make_sessions(
            {
                "s1": ["A", "B", "C"],
                "s2": ["A", "B"],
                "s3": ["A", "C", "A"],
                "s4": ["B", "D"],
                "s5": ["A"],
            }
        )
    )


@pytest.fixture()
def write_log(tmp_path):
    """Write log lines to a temporary file and return its path."""

    def _write(lines: list[str], name: str = "logs.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear the cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
