"""Progress helpers for the running session."""

from __future__ import annotations

from .techniques import DEFAULT_CATALOG, TechniqueCatalog


def progress_fraction(
    technique: str,
    session_type: str,
    remaining_seconds: int,
    catalog: TechniqueCatalog = DEFAULT_CATALOG,
) -> float:
    """Fraction of the session already elapsed, in ``[0, 1]``.

    Returns exactly 0.0 with the full duration remaining and exactly 1.0 at
    zero. Catalog durations are validated positive, so the division is safe.
    """
    total_seconds = catalog.duration_seconds(technique, session_type)
    if remaining_seconds <= 0:
        return 1.0
    if remaining_seconds >= total_seconds:
        return 0.0
    return 1.0 - remaining_seconds / total_seconds


def format_time(remaining_seconds: int) -> str:
    """Format seconds as ``MM:SS``."""
    mins, secs = divmod(max(0, remaining_seconds), 60)
    return f"{mins:02d}:{secs:02d}"
