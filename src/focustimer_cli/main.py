"""Main entry point for the focus timer CLI."""

import typer

from focustimer_cli import __version__
from focustimer_cli.commands import config, timer
from focustimer_cli.utils.typer_helpers import SuggestingGroup
from focustimer_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="focustimer",
    cls=SuggestingGroup,
    help="A focus timer for Pomodoro-style work and break sessions",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(timer.app, name="timer", help="Focus timer sessions")
app.add_typer(config.app, name="config", help="Configuration management")


# Add top-level commands
@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Focus Timer CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def start(
    technique: str | None = typer.Option(
        None, "--technique", "-t", help="Technique: classic, 52_17, flow or 90_30"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Start the focus timer (shortcut for 'timer start')."""
    timer.start_timer(technique=technique, session_type="work", profile=profile)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
