"""Keyboard input handler for timer controls."""

import select
import sys
from typing import Optional

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

# Key -> timer command understood by TimerDisplay.run_timer
KEY_BINDINGS = {
    " ": "toggle",
    "p": "toggle",
    "r": "reset",
    "1": "work",
    "2": "short_break",
    "3": "long_break",
    "t": "technique",
    "q": "quit",
}


def key_to_command(key: Optional[str]) -> Optional[str]:
    """Map a pressed key to a timer command, or None if unbound."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key.lower())


class KeyboardHandler:
    """Non-blocking keyboard input handler."""

    def __init__(self):
        self.fd = None
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode when stdin is a terminal."""
        if termios is None or not sys.stdin.isatty():
            return
        self.fd = sys.stdin.fileno()
        self.old_settings = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key character or None if no key pressed.
        """
        if self.fd is None:
            return None
        if select.select([sys.stdin], [], [], 0)[0]:
            return sys.stdin.read(1)
        return None

    def get_command(self) -> Optional[str]:
        """Get the timer command for the pending keypress, if any."""
        return key_to_command(self.get_key())

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
