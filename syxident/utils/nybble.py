"""
Nybble packing utilities.

Some manufacturers transmit each 8-bit data byte as two SysEx bytes,
each carrying one 4-bit half, so that every transmitted byte stays
below 0x80.

Encoding scheme (low nybble first):
    Raw byte:     0xA7
    Transmitted:  [0x07, 0x0A]

With ``high_first=True`` the order of the two halves is reversed:
    Transmitted:  [0x0A, 0x07]
"""

from typing import List, Union

from syxident.utils.validation import OddNybbleCount


def denybblify(packed: Union[bytes, List[int]], high_first: bool = False) -> bytes:
    """
    Rebuild full bytes from nybble-packed data.

    Args:
        packed: Nybble-packed data, two bytes per output byte
        high_first: True if the high nybble is transmitted first

    Returns:
        Unpacked data, half the length of the input

    Raises:
        OddNybbleCount: If the input has an odd number of bytes

    Example:
        >>> denybblify(bytes([0x07, 0x0A]))
        b'\\xa7'
    """
    if isinstance(packed, list):
        packed = bytes(packed)

    if len(packed) % 2 != 0:
        raise OddNybbleCount(len(packed))

    result = bytearray()

    for i in range(0, len(packed), 2):
        first = packed[i] & 0x0F
        second = packed[i + 1] & 0x0F
        if high_first:
            result.append((first << 4) | second)
        else:
            result.append((second << 4) | first)

    return bytes(result)


def nybblify(data: Union[bytes, List[int]], high_first: bool = False) -> bytes:
    """
    Split each byte into two nybbles.

    Args:
        data: Raw 8-bit data
        high_first: True to transmit the high nybble first

    Returns:
        Nybble-packed data, twice the length of the input

    Example:
        >>> nybblify(b'\\xa7')
        b'\\x07\\n'
    """
    if isinstance(data, list):
        data = bytes(data)

    result = bytearray()

    for byte in data:
        high = (byte >> 4) & 0x0F
        low = byte & 0x0F
        if high_first:
            result.extend((high, low))
        else:
            result.extend((low, high))

    return bytes(result)
