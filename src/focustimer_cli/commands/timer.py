"""Focus timer commands with fullscreen countdown."""

import typer
from rich.prompt import Confirm

from focustimer_cli.config import get_config_manager
from focustimer_cli.models.focus.cycling import get_emoji
from focustimer_cli.models.focus.errors import ConfigurationError
from focustimer_cli.models.focus.techniques import (
    DEFAULT_CATALOG,
    SESSION_LABELS,
    TECHNIQUE_LABELS,
    validate_session_type,
    validate_technique,
)
from focustimer_cli.models.focus.timer import FocusTimer
from focustimer_cli.models.focus.ui import TimerDisplay, show_summary
from focustimer_cli.services.notification_service import NotificationDispatcher
from focustimer_cli.utils.ui.console import get_console
from focustimer_cli.utils.ui.formatters import format_dict_table, format_warning

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Focus timer with Pomodoro-style techniques")


@app.command("start")
@command_wrapper
def start_timer(
    technique: str | None = typer.Option(
        None,
        "--technique",
        "-t",
        help="Technique: classic, 52_17, flow or 90_30 (default from config)",
    ),
    session_type: str = typer.Option(
        "work", "--type", "-s", help="Session type: work, short_break or long_break"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
):
    """Start the fullscreen focus timer."""
    config = get_config_manager(profile).config
    try:
        technique = validate_technique(technique or config.timer.technique)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e), param_hint="'--technique'") from e
    try:
        session_type = validate_session_type(session_type)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e), param_hint="'--type'") from e

    timer = FocusTimer(technique=technique, session_type=session_type)

    display = TimerDisplay(console, theme=config.ui.theme)
    dispatcher = NotificationDispatcher(
        console,
        sound=config.notifications.sound,
        desktop=config.notifications.desktop,
        on_message=display.show_notice,
    )
    timer.subscribe(dispatcher)

    minutes = timer.duration_seconds // 60
    console.print(
        f"\n[bold green]{get_emoji(timer.session_type)} "
        f"{TECHNIQUE_LABELS[timer.technique]}[/bold green]"
    )
    console.print(f"{SESSION_LABELS[timer.session_type]}: {minutes} minutes")
    console.print("\nPress space to start. Starting fullscreen timer...\n")

    auto_start_breaks = config.timer.auto_start_breaks
    while True:
        result = display.run_timer(timer, auto_start_breaks=auto_start_breaks)
        if result != "flow_choice":
            break

        try:
            keep_going = Confirm.ask(
                "\nYou're in the flow. Skip the break and keep working?",
                default=True,
                console=console,
            )
        except KeyboardInterrupt:
            result = "interrupted"
            break
        timer.resolve_flow_choice(keep_going)
        if not keep_going and auto_start_breaks:
            timer.start()

    if result == "interrupted":
        console.print()
        format_warning("Timer interrupted.")
    show_summary(timer.snapshot(), console)


@app.command("techniques")
@command_wrapper
def list_techniques():
    """List the available techniques and their session lengths."""
    rows = []
    for technique in DEFAULT_CATALOG.techniques():
        durations = DEFAULT_CATALOG.durations_for(technique)
        rows.append(
            {
                "technique": technique,
                "name": TECHNIQUE_LABELS[technique],
                "work": f"{durations['work']}m",
                "short_break": f"{durations['short_break']}m",
                "long_break": f"{durations['long_break']}m",
                "skip_breaks": technique == "flow",
            }
        )
    format_dict_table(rows, title="Focus Techniques")
