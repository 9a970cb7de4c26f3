"""
Display formatting utilities for CLI output.

Plain-text renderings of regions and messages, shared by the rich
tables and the --plain output mode.
"""

from syxident.models.region import Region
from syxident.models.result import MessageAnalysis, MessageStatus


def region_line(region: Region, length: int = 8) -> str:
    """
    Format a region as a single line.

    Returns:
        String like "000003: Machine ID no.: K4/K4r [04]"
    """
    return f"{region.start:06X}: {region.key}: {region.value} [{region.dump(length)}]"


def checksum_status(analysis: MessageAnalysis) -> str:
    """Rich markup for the checksum verdict, empty if none was checked."""
    if analysis.checksum_valid is None:
        return ""
    if analysis.checksum_valid:
        return "[green]Checksums match[/green]"
    return "[red]Checksums don't match[/red]"


def message_kind(analysis: MessageAnalysis) -> str:
    """Short description of what kind of message this is."""
    if analysis.status == MessageStatus.UNIVERSAL:
        return "Universal"
    if analysis.status == MessageStatus.INVALID:
        return "Invalid"
    return "Manufacturer"
