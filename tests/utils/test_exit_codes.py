"""Unit tests for focustimer_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from focustimer_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_INVALID_STATE,
    SUCCESS,
    get_exit_code_name,
)

ALL_CODES = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_CONFIG, ERROR_INVALID_STATE]


def test_codes_are_distinct():
    assert len(set(ALL_CODES)) == len(ALL_CODES)


def test_success_is_zero():
    assert SUCCESS == 0


@pytest.mark.parametrize("code", ALL_CODES)
def test_every_code_has_a_name(code):
    assert not get_exit_code_name(code).startswith("UNKNOWN")


def test_names():
    assert get_exit_code_name(ERROR_INVALID_ARGS) == "ERROR_INVALID_ARGS"
    assert get_exit_code_name(ERROR_CONFIG) == "ERROR_CONFIG"
    assert get_exit_code_name(ERROR_INVALID_STATE) == "ERROR_INVALID_STATE"


def test_unknown_code():
    assert get_exit_code_name(99) == "UNKNOWN(99)"
