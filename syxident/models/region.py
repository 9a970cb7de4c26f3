"""
Region data model.

A Region labels a byte range of a decoded SysEx message:

    000003: Machine ID no.: K4/K4r [04]
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Region:
    """
    Labeled, byte-addressed annotation over part of a message.

    Attributes:
        key: Field label (e.g. "Channel no.")
        value: Human readable meaning of the bytes
        start: Offset of the first byte
        data: The bytes covered by this region
    """

    key: str
    value: str
    start: int
    data: bytes = field(default=b"")

    def __post_init__(self):
        # Callers may pass any byte sequence; keep an owned immutable copy
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def end(self) -> int:
        """Offset of the last byte (equal to start for empty regions)."""
        return self.start + max(len(self.data) - 1, 0)

    @property
    def offset_range(self) -> str:
        return f"{self.start:06X}...{self.end:06X}"

    def shifted(self, adjustment: int) -> "Region":
        """Return a copy moved ``adjustment`` bytes further into the message."""
        return replace(self, start=self.start + adjustment)

    def dump(self, length: int = 8) -> str:
        """
        Hex dump of at most ``length`` bytes.

        Example:
            Region("Data", "3 bytes", 6, bytes([1, 2, 3])).dump(2) -> "01 02..."
        """
        shown = " ".join(f"{b:02X}" for b in self.data[:length])
        if len(self.data) > length:
            shown += "..."
        return shown

    def __str__(self) -> str:
        return f"{self.key}: {self.value} {self.offset_range} ({len(self.data)})"
