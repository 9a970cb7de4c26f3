"""
Identify command - annotated breakdown of every message in a SysEx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from syxident.dispatch import analyze_messages
from syxident.formats.reader import read_syx_file
from syxident.utils.validation import InvalidMessage
from cli.display.tables import display_message_regions

console = Console()
app = typer.Typer()


@app.command()
def identify(
    file: Path = typer.Argument(..., help="SysEx file (.syx) to identify"),
    length: int = typer.Option(
        8, "--bytes", "-b", min=1, help="Bytes to show per region before '...'"
    ),
    plain: bool = typer.Option(
        False, "--plain", "-p", help="One line per region instead of a table"
    ),
) -> None:
    """
    Break every SysEx message in a file down into labeled byte regions.

    Kawai (K4) and Korg (Wavestation, 05R/W, 'logue family) messages are
    decoded field by field; other manufacturers are reported as not handled.

    Examples:

        syxident identify k4-patch.syx

        syxident identify wavestation.syx --plain --bytes 16
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        messages = read_syx_file(file)
    except InvalidMessage as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not messages:
        console.print(f"[yellow]No System Exclusive messages found in {file}[/yellow]")
        return

    if len(messages) > 1:
        console.print(f"Found {len(messages)} System Exclusive messages in the same file")
        console.print()

    for analysis in analyze_messages(messages):
        display_message_regions(analysis, length=length, plain=plain)
        console.print()


if __name__ == "__main__":
    app()
