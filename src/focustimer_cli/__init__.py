"""Focus timer CLI: Pomodoro-style work/break countdowns in the terminal."""

__version__ = "0.1.0"
