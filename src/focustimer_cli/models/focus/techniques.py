"""Focus techniques and their session durations."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal, get_args

from .errors import ConfigurationError

SessionType = Literal["work", "short_break", "long_break"]
Technique = Literal["classic", "52_17", "flow", "90_30"]

SESSION_TYPES: tuple[SessionType, ...] = get_args(SessionType)
TECHNIQUES: tuple[Technique, ...] = get_args(Technique)

FLOW_TECHNIQUE: Technique = "flow"

SESSION_LABELS: dict[SessionType, str] = {
    "work": "Focus Time",
    "short_break": "Short Break",
    "long_break": "Long Break",
}

TECHNIQUE_LABELS: dict[Technique, str] = {
    "classic": "Classic Pomodoro",
    "52_17": "52/17 Rule",
    "flow": "Flow Mode",
    "90_30": "90/30 Ultradian",
}

# Minutes per session type. "flow" shares the classic table.
DEFAULT_DURATIONS: dict[Technique, dict[SessionType, int]] = {
    "classic": {"work": 25, "short_break": 5, "long_break": 15},
    "52_17": {"work": 52, "short_break": 17, "long_break": 30},
    "flow": {"work": 25, "short_break": 5, "long_break": 15},
    "90_30": {"work": 90, "short_break": 30, "long_break": 45},
}


def validate_session_type(value: str) -> SessionType:
    """Return *value* as a SessionType or raise ConfigurationError."""
    if value not in SESSION_TYPES:
        raise ConfigurationError(
            f"Unknown session type: {value!r}. Must be one of {list(SESSION_TYPES)}"
        )
    return value  # type: ignore[return-value]


def validate_technique(value: str) -> Technique:
    """Return *value* as a Technique or raise ConfigurationError."""
    if value not in TECHNIQUES:
        raise ConfigurationError(
            f"Unknown technique: {value!r}. Must be one of {list(TECHNIQUES)}"
        )
    return value  # type: ignore[return-value]


class TechniqueCatalog:
    """Immutable technique -> session type -> minutes table.

    The table is checked on construction: every technique must define a
    positive integer duration for every session type. A catalog that passes
    construction can never produce a zero division or a missing key later.
    """

    def __init__(
        self, durations: Mapping[str, Mapping[str, int]] | None = None
    ) -> None:
        if durations is None:
            durations = DEFAULT_DURATIONS

        table: dict[Technique, Mapping[SessionType, int]] = {}
        for technique in TECHNIQUES:
            if technique not in durations:
                raise ConfigurationError(f"Technique {technique!r} has no durations")
            entry = durations[technique]
            row: dict[SessionType, int] = {}
            for session_type in SESSION_TYPES:
                if session_type not in entry:
                    raise ConfigurationError(
                        f"Technique {technique!r} is missing a "
                        f"{session_type!r} duration"
                    )
                minutes = entry[session_type]
                if isinstance(minutes, bool) or not isinstance(minutes, int):
                    raise ConfigurationError(
                        f"Duration for {technique}/{session_type} must be an "
                        f"integer, got {minutes!r}"
                    )
                if minutes <= 0:
                    raise ConfigurationError(
                        f"Duration for {technique}/{session_type} must be "
                        f"positive, got {minutes}"
                    )
                row[session_type] = minutes
            table[technique] = MappingProxyType(row)

        unknown = set(durations) - set(TECHNIQUES)
        if unknown:
            raise ConfigurationError(f"Unknown techniques in catalog: {sorted(unknown)}")

        self._table = MappingProxyType(table)

    def duration_minutes(self, technique: str, session_type: str) -> int:
        """Get the length of a session in minutes."""
        technique = validate_technique(technique)
        session_type = validate_session_type(session_type)
        return self._table[technique][session_type]

    def duration_seconds(self, technique: str, session_type: str) -> int:
        """Get the length of a session in seconds."""
        return self.duration_minutes(technique, session_type) * 60

    def durations_for(self, technique: str) -> Mapping[SessionType, int]:
        """Get the read-only duration row for a technique."""
        return self._table[validate_technique(technique)]

    def techniques(self) -> tuple[Technique, ...]:
        return TECHNIQUES

    def __contains__(self, technique: object) -> bool:
        return technique in self._table


DEFAULT_CATALOG = TechniqueCatalog()


def duration_minutes(technique: str, session_type: str) -> int:
    """Look up a duration in the default catalog."""
    return DEFAULT_CATALOG.duration_minutes(technique, session_type)
