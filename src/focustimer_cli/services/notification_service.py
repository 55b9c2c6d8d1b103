"""Completion notifications for the focus timer.

NotificationDispatcher subscribes to FocusTimer's SessionCompleted event and
tells the user a session ended: a terminal bell and a short message. It never
raises into the timer; failures are logged and the session carries on.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel

from focustimer_cli.models.focus.cycling import get_emoji
from focustimer_cli.models.focus.state import SessionCompleted
from focustimer_cli.models.focus.techniques import SESSION_LABELS
from focustimer_cli.utils.logger import get_logger


def completion_message(event: SessionCompleted) -> str:
    """Build the message shown when a session completes."""
    label = SESSION_LABELS[event.session_type]
    if event.session_type == "work":
        return f"{get_emoji(event.session_type)} {label} finished. Great work!"
    return f"{get_emoji(event.session_type)} {label} finished. Back to focus!"


class NotificationDispatcher:
    """Notify the user about completed sessions."""

    def __init__(
        self,
        console: Console | None = None,
        sound: bool = True,
        desktop: bool = True,
        on_message: Callable[[str], None] | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            console: Console used for the bell and printed messages.
            sound: Ring the terminal bell on completion.
            desktop: Show the completion message.
            on_message: Receives the message instead of printing it, e.g.
                to show it inside a live display.
        """
        self.console = console or Console()
        self.sound = sound
        self.desktop = desktop
        self.on_message = on_message

    def notify(self, event: SessionCompleted) -> None:
        """Deliver the notification for *event*."""
        message = completion_message(event)
        logger = get_logger()

        if self.sound:
            try:
                self.console.bell()
            except Exception:
                logger.exception("could not ring the bell")

        if self.desktop:
            try:
                if self.on_message is not None:
                    self.on_message(message)
                else:
                    self.console.print(
                        Panel(message, title="Session Complete!", border_style="green")
                    )
            except Exception:
                logger.exception("could not show completion message")

        logger.info("notified: %s", message)

    __call__ = notify
