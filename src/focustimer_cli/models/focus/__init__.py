"""Focus mode - session timer state machine for the focus timer CLI."""

from .cycling import apply_transition, next_session_type
from .errors import ConfigurationError, FocusTimerError, InvalidTransitionError
from .progress import format_time, progress_fraction
from .state import SessionCompleted, TimerSnapshot, TimerState
from .stats import record_completion
from .techniques import (
    DEFAULT_CATALOG,
    SESSION_TYPES,
    TECHNIQUES,
    SessionType,
    Technique,
    TechniqueCatalog,
    duration_minutes,
)
from .ticker import Ticker
from .timer import FocusTimer

__all__ = [
    "ConfigurationError",
    "DEFAULT_CATALOG",
    "FocusTimer",
    "FocusTimerError",
    "InvalidTransitionError",
    "SESSION_TYPES",
    "SessionCompleted",
    "SessionType",
    "TECHNIQUES",
    "Technique",
    "TechniqueCatalog",
    "Ticker",
    "TimerSnapshot",
    "TimerState",
    "apply_transition",
    "duration_minutes",
    "format_time",
    "next_session_type",
    "progress_fraction",
    "record_completion",
]
