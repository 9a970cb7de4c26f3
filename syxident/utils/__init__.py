"""Utility functions for SyxIdent."""

from syxident.utils.checksum import calculate_checksum, verify_checksum
from syxident.utils.nybble import denybblify, nybblify
from syxident.utils.validation import (
    DecodeError,
    InvalidMessage,
    OddNybbleCount,
    PayloadReader,
    PayloadTooShort,
)

__all__ = [
    "calculate_checksum",
    "verify_checksum",
    "denybblify",
    "nybblify",
    "DecodeError",
    "InvalidMessage",
    "OddNybbleCount",
    "PayloadReader",
    "PayloadTooShort",
]
