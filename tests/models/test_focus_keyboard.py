"""Unit tests for the keyboard handler."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from focustimer_cli.models.focus import keyboard as keyboard_mod
from focustimer_cli.models.focus.keyboard import (
    KEY_BINDINGS,
    KeyboardHandler,
    key_to_command,
)


class TestKeyToCommand:
    @pytest.mark.parametrize(
        ("key", "command"),
        [
            (" ", "toggle"),
            ("p", "toggle"),
            ("P", "toggle"),
            ("r", "reset"),
            ("1", "work"),
            ("2", "short_break"),
            ("3", "long_break"),
            ("t", "technique"),
            ("q", "quit"),
        ],
    )
    def test_bound_keys(self, key, command):
        assert key_to_command(key) == command

    def test_unbound_key(self):
        assert key_to_command("x") is None

    def test_no_key(self):
        assert key_to_command(None) is None

    def test_all_bindings_lowercase(self):
        assert all(k == k.lower() for k in KEY_BINDINGS)


class TestKeyboardHandler:
    def test_not_a_terminal_reads_nothing(self):
        with patch.object(keyboard_mod.sys, "stdin") as stdin:
            stdin.isatty.return_value = False
            handler = KeyboardHandler()

            assert handler.get_key() is None
            assert handler.get_command() is None
            handler.stop()  # nothing to restore

    def test_terminal_setup_and_restore(self):
        termios = MagicMock()
        tty = MagicMock()
        termios.tcgetattr.return_value = ["saved"]

        with patch.object(keyboard_mod, "termios", termios), patch.object(
            keyboard_mod, "tty", tty
        ), patch.object(keyboard_mod.sys, "stdin") as stdin:
            stdin.isatty.return_value = True
            stdin.fileno.return_value = 7

            handler = KeyboardHandler()
            tty.setcbreak.assert_called_once_with(7)

            handler.stop()
            termios.tcsetattr.assert_called_once_with(7, termios.TCSADRAIN, ["saved"])

            handler.stop()
            assert termios.tcsetattr.call_count == 1

    def test_reads_pending_key(self):
        termios = MagicMock()
        with patch.object(keyboard_mod, "termios", termios), patch.object(
            keyboard_mod, "tty", MagicMock()
        ), patch.object(keyboard_mod.sys, "stdin") as stdin, patch.object(
            keyboard_mod.select, "select", return_value=([stdin], [], [])
        ):
            stdin.isatty.return_value = True
            stdin.fileno.return_value = 7
            stdin.read.return_value = "r"

            handler = KeyboardHandler()

            assert handler.get_command() == "reset"

    def test_no_pending_key(self):
        with patch.object(keyboard_mod, "termios", MagicMock()), patch.object(
            keyboard_mod, "tty", MagicMock()
        ), patch.object(keyboard_mod.sys, "stdin") as stdin, patch.object(
            keyboard_mod.select, "select", return_value=([], [], [])
        ):
            stdin.isatty.return_value = True
            stdin.fileno.return_value = 7

            assert KeyboardHandler().get_key() is None
