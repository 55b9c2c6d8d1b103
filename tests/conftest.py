"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log dirs.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from focustimer_cli.models.focus.timer import FocusTimer


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Send config and log files to *tmp_path* and drop cached managers."""
    import focustimer_cli.config as config_mod

    config_mod._config_manager = None
    with patch(
        "focustimer_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        with patch(
            "focustimer_cli.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ):
            yield tmp_path
    config_mod._config_manager = None


@pytest.fixture()
def classic_timer() -> FocusTimer:
    return FocusTimer()


@pytest.fixture()
def flow_timer() -> FocusTimer:
    return FocusTimer(technique="flow")
