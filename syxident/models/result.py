"""
Decode result models.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, List, Optional

from syxident.models.region import Region
from syxident.utils.validation import DecodeError


@dataclass
class DecodeResult:
    """
    Outcome of decoding one manufacturer payload.

    Behaves as a sequence of regions, so ``result[0].value`` is the
    value of the first region.

    Attributes:
        regions: Regions in increasing offset order
        supported: False when no decoder handles the manufacturer
        error: Terminal error that stopped decoding, if any
        checksum_valid: Checksum verdict, None if no checksum was checked
        unpacked: Data rebuilt from nybble-packed bytes, if any
    """

    regions: List[Region] = field(default_factory=list)
    supported: bool = True
    error: Optional[DecodeError] = None
    checksum_valid: Optional[bool] = None
    unpacked: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return self.supported and self.error is None

    def add(self, key: str, value: str, start: int, data: bytes = b"") -> Region:
        region = Region(key, value, start, data)
        self.regions.append(region)
        return region

    def shifted(self, adjustment: int) -> "DecodeResult":
        return replace(self, regions=[r.shifted(adjustment) for r in self.regions])

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    def __getitem__(self, index):
        return self.regions[index]


class MessageStatus(Enum):
    """How far a single message could be decoded."""

    DECODED = "decoded"
    UNSUPPORTED = "unsupported"
    UNIVERSAL = "universal"
    INVALID = "invalid"


@dataclass
class MessageAnalysis:
    """
    Analysis of one complete SysEx message (F0 ... F7).

    Region offsets are relative to the status byte (F0 = offset 0).
    """

    index: int
    raw: bytes
    status: MessageStatus
    manufacturer_name: str = ""
    regions: List[Region] = field(default_factory=list)
    error: Optional[DecodeError] = None
    checksum_valid: Optional[bool] = None

    @property
    def size(self) -> int:
        return len(self.raw)
