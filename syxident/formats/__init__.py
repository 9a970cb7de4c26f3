"""SysEx file reading and envelope classification."""

from syxident.formats.envelope import (
    KAWAI,
    KORG,
    Manufacturer,
    ManufacturerMessage,
    UniversalKind,
    UniversalMessage,
    classify,
)
from syxident.formats.reader import read_syx_file, split_messages

__all__ = [
    "KAWAI",
    "KORG",
    "Manufacturer",
    "ManufacturerMessage",
    "UniversalKind",
    "UniversalMessage",
    "classify",
    "read_syx_file",
    "split_messages",
]
