"""
SysEx checksum calculation utilities.

Several manufacturers append a checksum byte computed as:
1. Sum all bytes of the covered range (never the message header)
2. Take the lower 7 bits of the sum

The Korg Wavestation uses this scheme over the data that follows its
three-byte header (channel, model, command).
"""

from typing import Union, List


def calculate_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate the 7-bit running sum checksum.

    Args:
        data: Bytes to calculate checksum over

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_checksum(bytes([0x40, 0x50]))
        16
    """
    if isinstance(data, list):
        data = bytes(data)

    return sum(data) & 0x7F


def verify_checksum(data: Union[bytes, List[int]], expected_checksum: int) -> bool:
    """
    Verify a checksum byte.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_checksum(data) == expected_checksum
