# ==============================================================================
# Session Builder - Pure Domain Logic
# ==============================================================================
"""
Reconstructs sessions from an unordered collection of visit events.

Each session is:
- All events sharing a session id
- Ordered by timestamp (stable, so equal timestamps keep log order)
- Bracketed with a synthetic start event one time unit before the first
  visit and a synthetic end event one time unit after the last visit
"""

from typing import Iterable

from clickgraph.core.models import END, START, VisitEvent


def bracket_session(session_id: str, events: list[VisitEvent]) -> list[VisitEvent]:
    """
    Surround an ordered, non-empty session with start/end markers.

    Args:
        session_id: Identifier stamped on the marker events
        events: Session events ordered by timestamp

    Returns:
        New list: [start, *events, end]
    """
    start = VisitEvent(
        timestamp=events[0].timestamp - 1, session_id=session_id, screen_name=START
    )
    end = VisitEvent(timestamp=events[-1].timestamp + 1, session_id=session_id, screen_name=END)
    return [start, *events, end]


def build_sessions(events: Iterable[VisitEvent]) -> dict[str, list[VisitEvent]]:
    """
    Group events into timestamp-ordered, bracketed sessions.

    Args:
        events: Visit events in any order

    Returns:
        Dict mapping session id to its bracketed event list, in order of
        first appearance of each session id
    """
    grouped: dict[str, list[VisitEvent]] = {}
    for event in events:
        grouped.setdefault(event.session_id, []).append(event)

    return {
        session_id: bracket_session(session_id, sorted(session, key=lambda e: e.timestamp))
        for session_id, session in grouped.items()
    }


def average_session_length(event_count: int, session_count: int) -> float:
    """Average number of real visits per session (0.0 without sessions)."""
    if session_count == 0:
        return 0.0
    return event_count / session_count
