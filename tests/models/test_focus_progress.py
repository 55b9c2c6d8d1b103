"""Unit tests for progress helpers."""

from __future__ import annotations

import pytest

from focustimer_cli.models.focus.progress import format_time, progress_fraction
from focustimer_cli.models.focus.techniques import (
    DEFAULT_CATALOG,
    SESSION_TYPES,
    TECHNIQUES,
)


class TestProgressFraction:
    @pytest.mark.parametrize("technique", TECHNIQUES)
    @pytest.mark.parametrize("session_type", SESSION_TYPES)
    def test_boundaries(self, technique, session_type):
        total = DEFAULT_CATALOG.duration_seconds(technique, session_type)

        assert progress_fraction(technique, session_type, total) == 0.0
        assert progress_fraction(technique, session_type, 0) == 1.0

    def test_halfway(self):
        assert progress_fraction("classic", "work", 750) == pytest.approx(0.5)

    def test_one_second_left(self):
        assert progress_fraction("classic", "short_break", 1) == pytest.approx(
            1 - 1 / 300
        )


class TestFormatTime:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(1500, "25:00"), (299, "04:59"), (0, "00:00"), (5400, "90:00")],
    )
    def test_format(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_negative_clamped(self):
        assert format_time(-3) == "00:00"
