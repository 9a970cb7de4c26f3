"""
Decoding errors and bounds-checked payload access.
"""

from typing import Sequence, Union


class DecodeError(Exception):
    """Raised when a message cannot be decoded any further."""

    def __init__(self, message: str, offset: int = 0):
        super().__init__(message)
        self.offset = offset


class PayloadTooShort(DecodeError):
    """Raised when a fixed-offset read falls outside the payload."""

    def __init__(self, offset: int, length: int):
        super().__init__(
            f"Payload too short: need byte at offset {offset}, have {length} bytes", offset
        )
        self.length = length


class OddNybbleCount(DecodeError):
    """Raised when nybble-packed data has an odd number of bytes."""

    def __init__(self, count: int, offset: int = 0):
        super().__init__(f"Nybble-packed data byte count should be even, got {count}", offset)
        self.count = count


class InvalidMessage(DecodeError):
    """Raised when input bytes do not form System Exclusive messages."""

    pass


class PayloadReader:
    """
    Length-checked view over a payload.

    Every fixed-offset read goes through ``byte_at`` or ``slice`` so that
    truncated input raises PayloadTooShort instead of IndexError.

    Example:
        reader = PayloadReader(bytes([0x30, 0x28, 0x40]))
        reader.byte_at(1)   # 0x28
        reader.byte_at(5)   # raises PayloadTooShort
    """

    def __init__(self, payload: Union[bytes, bytearray, Sequence[int]]):
        self.payload = bytes(payload)

    def __len__(self) -> int:
        return len(self.payload)

    def require(self, count: int) -> None:
        """Check that at least ``count`` bytes are present."""
        if len(self.payload) < count:
            raise PayloadTooShort(count - 1, len(self.payload))

    def byte_at(self, offset: int) -> int:
        if not 0 <= offset < len(self.payload):
            raise PayloadTooShort(offset, len(self.payload))
        return self.payload[offset]

    def slice(self, start: int, end: int) -> bytes:
        """Return payload[start:end], which must lie inside the payload."""
        if end > len(self.payload):
            raise PayloadTooShort(end - 1, len(self.payload))
        return self.payload[start:end]

    def rest(self, start: int) -> bytes:
        """Return everything from ``start`` on (possibly empty)."""
        if start > len(self.payload):
            raise PayloadTooShort(start, len(self.payload))
        return self.payload[start:]

    def word_le(self, offset: int) -> int:
        """Read a 2-byte little-endian value (low byte first)."""
        low, high = self.slice(offset, offset + 2)
        return low | (high << 8)
