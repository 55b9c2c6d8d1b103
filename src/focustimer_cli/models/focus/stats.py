"""Session counters derived from completed sessions."""

from .state import TimerState
from .techniques import SessionType


def record_completion(state: TimerState, session_type: SessionType) -> None:
    """Count a completed session.

    Every session counts towards ``total_sessions``; only work sessions grow
    the streak. Neither counter is ever decremented.
    """
    state.total_sessions += 1
    if session_type == "work":
        state.streak += 1
