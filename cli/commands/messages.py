"""
Messages command - overview of the messages in a SysEx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from syxident.dispatch import analyze_messages
from syxident.formats.reader import read_syx_file
from syxident.utils.validation import InvalidMessage
from cli.display.tables import display_message_list

console = Console()
app = typer.Typer()


@app.command()
def messages(
    file: Path = typer.Argument(..., help="SysEx file (.syx) to list"),
) -> None:
    """
    List the System Exclusive messages in a file.

    Examples:

        syxident messages bank.syx
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        raw_messages = read_syx_file(file)
    except InvalidMessage as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]File:[/bold] {file} ({file.stat().st_size} bytes)")
    display_message_list(analyze_messages(raw_messages))


if __name__ == "__main__":
    app()
