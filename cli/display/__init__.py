"""
CLI display modules.
"""

from cli.display.tables import (
    display_message_regions,
    display_message_list,
)
from cli.display.formatters import region_line

__all__ = [
    "display_message_regions",
    "display_message_list",
    "region_line",
]
