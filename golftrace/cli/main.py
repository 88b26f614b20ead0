"""Main CLI entry point for GolfTrace."""

import logging

import typer
from rich.console import Console

from golftrace.cli.commands.overlay import overlay as overlay_command
from golftrace.cli.commands.trace import trace as trace_command

app = typer.Typer(
    name="golftrace",
    help="Golf swing analysis CLI - club head trajectory from detections",
    no_args_is_help=True,
)

console = Console()

# Register commands
app.command(name="trace")(trace_command)
app.command(name="overlay")(overlay_command)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """GolfTrace - Golf club head tracing CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(name)s: %(message)s",
    )
    if verbose:
        console.print("[dim]Verbose mode enabled[/dim]")


if __name__ == "__main__":
    app()
