"""
SyxIdent - Identify and annotate MIDI System Exclusive messages.

This library provides tools to:
- Read .syx files and split them into individual messages
- Classify messages as manufacturer-specific or universal
- Break Kawai and Korg payloads down into labeled byte regions

Example usage:
    from syxident import analyze_file

    for analysis in analyze_file("k4.syx"):
        for region in analysis.regions:
            print(f"{region.start:06X}: {region.key}: {region.value}")
"""

__version__ = "0.1.0"
__author__ = "SyxIdent Contributors"

from syxident.dispatch import analyze_file, analyze_message, analyze_messages, decode_payload
from syxident.models.region import Region
from syxident.models.result import DecodeResult, MessageAnalysis, MessageStatus

__all__ = [
    "analyze_file",
    "analyze_message",
    "analyze_messages",
    "decode_payload",
    "Region",
    "DecodeResult",
    "MessageAnalysis",
    "MessageStatus",
]
