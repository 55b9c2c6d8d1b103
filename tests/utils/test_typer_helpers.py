"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock

import click
import pytest
import typer

from focustimer_cli.utils.typer_helpers import SuggestingGroup


def _make_group(*names):
    group = SuggestingGroup(name="focustimer")
    for name in names:
        group.add_command(click.Command(name, callback=lambda: None))
    return group


def _ctx(group):
    return click.Context(group, info_name="focustimer")


def test_valid_command_passes_through():
    group = _make_group("timer", "config")

    name, cmd, args = group.resolve_command(_ctx(group), ["timer"])

    assert name == "timer"
    assert cmd is group.commands["timer"]


def test_typo_with_suggestion_exits():
    group = _make_group("timer", "config")

    with pytest.raises(typer.Exit) as exc_info:
        group.resolve_command(_ctx(group), ["timr"])

    assert exc_info.value.exit_code == 1


def test_unrelated_command_reraises_usage_error():
    group = _make_group("timer", "config")

    with pytest.raises(click.UsageError):
        group.resolve_command(_ctx(group), ["zzzzzz"])


def test_no_args_reraises():
    group = _make_group("timer")
    ctx = MagicMock()
    ctx.info_name = "focustimer"

    with pytest.raises(Exception):
        group.resolve_command(ctx, [])
