"""
SyxIdent - Identify MIDI System Exclusive messages.

A CLI tool that breaks SysEx dumps down into labeled byte regions.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from syxident import __version__
from cli.commands.identify import identify
from cli.commands.messages import messages

console = Console()
err_console = Console(stderr=True)

# Main app
app = typer.Typer(
    name="syxident",
    help="Identify and annotate MIDI System Exclusive messages.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="identify")(identify)
app.command(name="messages")(messages)


def configure_logging(verbose: bool) -> None:
    """Route library log records through rich; DEBUG with --verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]syxident[/bold] version {__version__}")
    console.print("[dim]MIDI System Exclusive message identifier[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show decoding diagnostics"),
) -> None:
    """
    SyxIdent - Identify MIDI System Exclusive messages.

    Decodes manufacturer-specific messages for:

    - [cyan]Kawai[/cyan] K4/K4r (K5/K5m and K1 II identified)
    - [cyan]Korg[/cyan] Wavestation, 05R/W, 'logue family

    [bold]Commands:[/bold]

        syxident identify dump.syx           # Region breakdown per message
        syxident identify dump.syx --plain   # One line per region
        syxident messages dump.syx           # Message overview

    Use --help with any command for more details.
    """
    configure_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
