"""
SysEx envelope classification.

Every System Exclusive message has the shape:

    F0 [id] [body...] F7

Where [id] is one of:
    - 0x01-0x7C: Standard 1-byte manufacturer ID
    - 0x00 xx xx: Extended 3-byte manufacturer ID
    - 0x7D: Non-commercial / development
    - 0x7E: Universal Non-Real-time  (F0 7E dd s1 s2 [data...] F7)
    - 0x7F: Universal Real-time      (F0 7F dd s1 s2 [data...] F7)
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

SYSEX_START = 0xF0
SYSEX_END = 0xF7

EXTENDED_PREFIX = 0x00
DEVELOPMENT_ID = 0x7D


class IdentifierKind(Enum):
    STANDARD = "standard"
    EXTENDED = "extended"
    DEVELOPMENT = "development"


MANUFACTURER_NAMES = {
    b"\x01": "Sequential Circuits",
    b"\x04": "Moog",
    b"\x06": "Lexicon",
    b"\x07": "Kurzweil",
    b"\x0F": "Ensoniq",
    b"\x10": "Oberheim",
    b"\x18": "E-mu",
    b"\x3E": "Waldorf",
    b"\x40": "Kawai",
    b"\x41": "Roland",
    b"\x42": "Korg",
    b"\x43": "Yamaha",
    b"\x44": "Casio",
    b"\x47": "Akai",
    b"\x7D": "Development",
    b"\x00\x00\x0E": "Alesis",
    b"\x00\x20\x29": "Focusrite/Novation",
    b"\x00\x20\x32": "Behringer",
    b"\x00\x20\x33": "Access Music",
    b"\x00\x20\x3C": "Elektron",
}


@dataclass(frozen=True)
class Manufacturer:
    """
    Manufacturer identifier as found after the F0 status byte.

    Example:
        Manufacturer(b"\\x42").display_name            # "Korg"
        Manufacturer(b"\\x00\\x20\\x29").length         # 3
    """

    identifier: bytes

    @property
    def kind(self) -> IdentifierKind:
        if self.identifier[0] == EXTENDED_PREFIX:
            return IdentifierKind.EXTENDED
        if self.identifier[0] == DEVELOPMENT_ID:
            return IdentifierKind.DEVELOPMENT
        return IdentifierKind.STANDARD

    @property
    def length(self) -> int:
        return len(self.identifier)

    @property
    def hex(self) -> str:
        return " ".join(f"{b:02X}" for b in self.identifier)

    @property
    def display_name(self) -> str:
        return MANUFACTURER_NAMES.get(self.identifier, f"Unknown ({self.hex})")

    def __str__(self) -> str:
        return self.display_name


KAWAI = Manufacturer(b"\x40")
KORG = Manufacturer(b"\x42")


class UniversalKind(IntEnum):
    NON_REAL_TIME = 0x7E
    REAL_TIME = 0x7F

    @property
    def description(self) -> str:
        return "Non-Real-time" if self == UniversalKind.NON_REAL_TIME else "Real-time"


@dataclass(frozen=True)
class UniversalHeader:
    device_id: int
    sub_id1: int
    sub_id2: int

    # Sub IDs of a General Information / Identity Reply
    IDENTITY_REPLY = (0x06, 0x02)

    @property
    def is_identity_reply(self) -> bool:
        return (self.sub_id1, self.sub_id2) == self.IDENTITY_REPLY


@dataclass(frozen=True)
class ManufacturerMessage:
    """Manufacturer-specific message; payload excludes F0, the ID and F7."""

    manufacturer: Manufacturer
    payload: bytes


@dataclass(frozen=True)
class UniversalMessage:
    """Universal message; payload is everything after the sub IDs, before F7."""

    kind: UniversalKind
    header: UniversalHeader
    payload: bytes


Message = Union[ManufacturerMessage, UniversalMessage]

# F0 7E dd s1 s2 F7
UNIVERSAL_MIN_SIZE = 6


def classify(message: Union[bytes, bytearray]) -> Optional[Message]:
    """
    Classify one complete SysEx message.

    Args:
        message: Raw message bytes including F0 and F7

    Returns:
        ManufacturerMessage or UniversalMessage, or None if the bytes are
        not a well-framed System Exclusive message
    """
    message = bytes(message)

    if len(message) < 3:
        return None

    if message[0] != SYSEX_START or message[-1] != SYSEX_END:
        return None

    first = message[1]

    if first in (UniversalKind.NON_REAL_TIME, UniversalKind.REAL_TIME):
        if len(message) < UNIVERSAL_MIN_SIZE:
            return None
        header = UniversalHeader(message[2], message[3], message[4])
        return UniversalMessage(UniversalKind(first), header, message[5:-1])

    if first == EXTENDED_PREFIX:
        if len(message) < 5:
            return None
        identifier = message[1:4]
    else:
        identifier = message[1:2]

    manufacturer = Manufacturer(identifier)
    return ManufacturerMessage(manufacturer, message[1 + manufacturer.length : -1])
