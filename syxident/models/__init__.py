"""Data models for decoded SysEx messages."""

from syxident.models.region import Region
from syxident.models.result import DecodeResult, MessageAnalysis, MessageStatus

__all__ = [
    "Region",
    "DecodeResult",
    "MessageAnalysis",
    "MessageStatus",
]
