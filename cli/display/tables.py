"""
Rich table displays for decoded SysEx messages.
"""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from syxident.models.result import MessageAnalysis, MessageStatus
from cli.display.formatters import checksum_status, message_kind, region_line


console = Console()


def display_message_regions(
    analysis: MessageAnalysis, length: int = 8, plain: bool = False
) -> None:
    """Display the regions of one message, followed by its checksum and error status."""

    console.print(f"[bold]Message #{analysis.index}:[/bold]")

    if analysis.status == MessageStatus.UNSUPPORTED:
        console.print(f"[yellow]Can't handle SysEx for {analysis.manufacturer_name} yet[/yellow]")
        return

    if analysis.status == MessageStatus.INVALID:
        console.print(f"[red]Error: {analysis.error}[/red]")
        return

    if plain:
        for region in analysis.regions:
            console.print(Text(region_line(region, length)), soft_wrap=True)
    else:
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold magenta")
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_column("Bytes", style="dim")

        for region in analysis.regions:
            table.add_row(
                f"{region.start:06X}",
                Text(region.key),
                Text(region.value),
                region.dump(length),
            )

        console.print(table)

    status = checksum_status(analysis)
    if status:
        console.print(status)

    if analysis.error is not None:
        console.print(f"[red]Error: {analysis.error}[/red]")


def display_message_list(analyses: List[MessageAnalysis]) -> None:
    """Display a one-row-per-message overview."""

    table = Table(title="Messages", box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", style="dim", width=4)
    table.add_column("Size", justify="right")
    table.add_column("Kind")
    table.add_column("Manufacturer", style="cyan")
    table.add_column("Status")

    for analysis in analyses:
        if analysis.status == MessageStatus.DECODED and analysis.error is None:
            status = "[green]Decoded[/green]"
        elif analysis.status == MessageStatus.DECODED:
            status = "[red]Error[/red]"
        elif analysis.status == MessageStatus.UNSUPPORTED:
            status = "[yellow]Unsupported[/yellow]"
        elif analysis.status == MessageStatus.UNIVERSAL:
            status = "[blue]Universal[/blue]"
        else:
            status = "[red]Invalid[/red]"

        table.add_row(
            str(analysis.index),
            f"{analysis.size} bytes",
            message_kind(analysis),
            analysis.manufacturer_name or "-",
            status,
        )

    console.print(table)
