"""Timer state for a focus session."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .techniques import SessionType, Technique


@dataclass
class TimerState:
    """Mutable state of the focus timer.

    Only FocusTimer mutates this; everyone else reads a TimerSnapshot.
    """

    remaining_seconds: int
    running: bool = False
    session_type: SessionType = "work"
    technique: Technique = "classic"
    total_sessions: int = 0
    streak: int = 0
    flow_skipped_breaks: int = 0

    @property
    def minutes(self) -> int:
        return self.remaining_seconds // 60

    @property
    def seconds(self) -> int:
        return self.remaining_seconds % 60

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only copy of the timer state handed to hosts."""

    remaining_seconds: int
    running: bool
    session_type: SessionType
    technique: Technique
    total_sessions: int
    streak: int
    flow_skipped_breaks: int
    awaiting_flow_choice: bool
    progress: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class SessionCompleted:
    """Event fired once each time a countdown reaches zero."""

    session_type: SessionType
    technique: Technique
