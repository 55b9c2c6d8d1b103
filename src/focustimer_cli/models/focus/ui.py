"""Full-screen timer UI for focus mode."""

import time

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from focustimer_cli.utils.logger import get_logger

from .cycling import get_emoji, get_progress_dots
from .errors import InvalidTransitionError
from .keyboard import KeyboardHandler
from .progress import format_time
from .state import TimerSnapshot
from .techniques import SESSION_LABELS, TECHNIQUE_LABELS, TECHNIQUES
from .ticker import Ticker
from .timer import FocusTimer

# Accent color per display theme
THEMES = {
    "seoul-sunrise": "magenta",
    "ocean-breeze": "cyan",
    "sunset-vibes": "dark_orange",
    "forest-dream": "green",
    "midnight-aurora": "medium_purple",
    "cherry-blossom": "pink1",
    "arctic-glow": "bright_cyan",
    "golden-hour": "gold1",
}
DEFAULT_THEME = "seoul-sunrise"

POLL_SECONDS = 0.25


def next_technique(current: str) -> str:
    """Get the technique after *current* in catalog order."""
    index = TECHNIQUES.index(current)
    return TECHNIQUES[(index + 1) % len(TECHNIQUES)]


class TimerDisplay:
    """Manages the fullscreen timer display."""

    def __init__(self, console: Console | None = None, theme: str = DEFAULT_THEME):
        self.console = console or Console()
        self.accent = THEMES.get(theme, THEMES[DEFAULT_THEME])
        self.notice: str | None = None

    def show_notice(self, message: str) -> None:
        """Show *message* under the timer until the next one arrives."""
        self.notice = message

    def create_layout(self, snapshot: TimerSnapshot) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if snapshot.awaiting_flow_choice:
            title = "FLOW - keep going?"
            color = "green"
        elif snapshot.running:
            title = SESSION_LABELS[snapshot.session_type]
            color = self.accent
        else:
            title = f"{SESSION_LABELS[snapshot.session_type]} (paused)"
            color = "yellow"

        emoji = get_emoji(snapshot.session_type)
        header_text = Text(f"{emoji}  {title}", style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))

        layout["body"].update(
            Align.center(self._create_body_content(snapshot), vertical="middle")
        )
        layout["footer"].update(
            Align.center(self._create_footer_text(snapshot), vertical="middle")
        )

        return layout

    def _create_body_content(self, snapshot: TimerSnapshot) -> Group:
        """Create the main body content."""
        components = []

        remaining = snapshot.remaining_seconds
        if not snapshot.running:
            timer_color = "yellow"
        elif remaining < 60:
            timer_color = "red"
        else:
            timer_color = self.accent

        components.append(
            Text(format_time(remaining), style=f"bold {timer_color}", justify="center")
        )
        components.append(Text(""))  # Spacer

        # Progress bar
        progress_pct = int(snapshot.progress * 100)
        bar_width = 40
        filled = int(bar_width * snapshot.progress)
        progress_bar = "▓" * filled + "░" * (bar_width - filled)
        components.append(
            Text(progress_bar + f"  {progress_pct}%", style="dim", justify="center")
        )
        components.append(
            Text(
                get_progress_dots(snapshot.total_sessions, snapshot.session_type),
                justify="center",
            )
        )
        components.append(Text(""))  # Spacer

        stats = Text(justify="center")
        stats.append(f"{TECHNIQUE_LABELS[snapshot.technique]}", style=self.accent)
        stats.append(f"  •  Sessions: {snapshot.total_sessions}")
        stats.append(f"  •  Streak: {snapshot.streak}")
        if snapshot.technique == "flow":
            stats.append(f"  •  Breaks skipped: {snapshot.flow_skipped_breaks}")
        components.append(stats)

        if self.notice:
            components.append(Text(""))  # Spacer
            components.append(Text(self.notice, style="bold green", justify="center"))

        return Group(*components)

    def _create_footer_text(self, snapshot: TimerSnapshot) -> Text:
        """Create footer with keyboard hints."""
        action = "pause" if snapshot.running else "start"
        hints = (
            f"'space' {action}  •  'r' reset  •  '1/2/3' work/short/long  "
            "•  't' technique  •  'q' quit"
        )
        return Text(hints, style="dim", justify="center")

    def handle_command(self, timer: FocusTimer, command: str) -> None:
        """Apply a keyboard command to the timer."""
        if command == "toggle":
            timer.toggle_running()
        elif command == "reset":
            timer.reset()
        elif command in SESSION_LABELS:
            timer.switch_session_type(command)
        elif command == "technique":
            timer.switch_technique(next_technique(timer.technique))

    def run_timer(
        self,
        timer: FocusTimer,
        ticker: Ticker | None = None,
        keyboard: KeyboardHandler | None = None,
        auto_start_breaks: bool = False,
    ) -> str:
        """
        Run the fullscreen timer.

        Returns why the loop ended: 'quit', 'flow_choice' (the timer waits
        for resolve_flow_choice) or 'interrupted'.
        """
        ticker = ticker or Ticker()
        keyboard = keyboard or KeyboardHandler()

        try:
            with Live(
                self.create_layout(timer.snapshot()),
                console=self.console,
                refresh_per_second=4,
                screen=True,
            ) as live:
                while True:
                    command = keyboard.get_command()
                    if command == "quit":
                        return "quit"
                    if command is not None:
                        try:
                            self.handle_command(timer, command)
                        except InvalidTransitionError as e:
                            get_logger().debug("ignored %r: %s", command, e)

                    # Keep exactly one armed tick source while running
                    if timer.running:
                        ticker.start()
                    else:
                        ticker.stop()

                    if ticker.due():
                        event = timer.tick()
                        if event is not None:
                            ticker.stop()
                            if timer.awaiting_flow_choice:
                                live.update(self.create_layout(timer.snapshot()))
                                return "flow_choice"
                            if auto_start_breaks and timer.session_type != "work":
                                timer.start()

                    live.update(self.create_layout(timer.snapshot()))
                    time.sleep(POLL_SECONDS)

        except KeyboardInterrupt:
            return "interrupted"
        finally:
            ticker.stop()
            keyboard.stop()


def show_summary(snapshot: TimerSnapshot, console: Console | None = None):
    """Show the session counters when the timer exits."""
    console = console or Console()

    lines = [
        "[bold green]Focus summary[/bold green]",
        "",
        f"Technique: {TECHNIQUE_LABELS[snapshot.technique]}",
        f"Sessions completed: {snapshot.total_sessions}",
        f"Streak: {snapshot.streak}",
    ]
    if snapshot.technique == "flow":
        lines.append(f"Breaks skipped in flow: {snapshot.flow_skipped_breaks}")

    console.print(Panel("\n".join(lines), border_style="green", padding=(1, 2)))
