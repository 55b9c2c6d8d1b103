"""Session sequencing: which session follows a completed one."""

from __future__ import annotations

from .state import TimerState
from .techniques import SessionType, TechniqueCatalog

SESSIONS_BEFORE_LONG_BREAK = 4


def next_session_type(
    current_type: SessionType, completed_work_count: int
) -> SessionType:
    """Determine the session that follows *current_type*.

    ``completed_work_count`` is the session counter as it was before the
    session that just finished was counted. Every fourth work session is
    followed by a long break.
    """
    if current_type == "work":
        if completed_work_count % SESSIONS_BEFORE_LONG_BREAK == (
            SESSIONS_BEFORE_LONG_BREAK - 1
        ):
            return "long_break"
        return "short_break"

    # After any break, back to work
    return "work"


def apply_transition(
    state: TimerState, next_type: SessionType, catalog: TechniqueCatalog
) -> None:
    """Load *next_type* into the state, paused at full duration."""
    state.session_type = next_type
    state.remaining_seconds = catalog.duration_seconds(state.technique, next_type)
    state.running = False


def get_emoji(session_type: SessionType) -> str:
    """Get emoji for a session type."""
    if session_type == "work":
        return "🍅"
    elif session_type == "short_break":
        return "☕"
    else:
        return "🌴"


def get_progress_dots(total_sessions: int, session_type: SessionType) -> str:
    """Get progress dots showing the position in the long-break cycle."""
    position = total_sessions % SESSIONS_BEFORE_LONG_BREAK
    dots = []
    for i in range(SESSIONS_BEFORE_LONG_BREAK):
        if i < position:
            dots.append("⬤")  # Completed
        elif i == position and session_type == "work":
            dots.append("◉")  # Current
        else:
            dots.append("○")  # Upcoming

    return " ".join(dots)
