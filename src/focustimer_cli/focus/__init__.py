"""Focus mode - session timer for the focus timer CLI.

This package re-exports from focustimer_cli.models.focus for clean import paths.
"""

from focustimer_cli.models.focus import (
    FocusTimer,
    SessionCompleted,
    TechniqueCatalog,
    Ticker,
    TimerSnapshot,
)
from focustimer_cli.models.focus.ui import TimerDisplay, show_summary

__all__ = [
    "FocusTimer",
    "SessionCompleted",
    "TechniqueCatalog",
    "Ticker",
    "TimerDisplay",
    "TimerSnapshot",
    "show_summary",
]
