"""
SysEx file reader.

Reads .syx files (binary, or the hex text variant) and splits them into
individual System Exclusive messages using mido's parser.
"""

import logging
from pathlib import Path
from typing import List, Union

import mido

from syxident.utils.validation import InvalidMessage

logger = logging.getLogger(__name__)


def _sysex_bytes(messages) -> List[bytes]:
    return [bytes(msg.bytes()) for msg in messages if msg.type == "sysex"]


def split_messages(data: Union[bytes, bytearray]) -> List[bytes]:
    """
    Split raw bytes into complete SysEx messages.

    Bytes outside F0 ... F7 are ignored and an unterminated trailing
    message is dropped.

    Args:
        data: Raw byte stream

    Returns:
        Messages including their F0 and F7 bytes
    """
    messages = _sysex_bytes(mido.parse_all(bytes(data)))
    logger.debug("Found %d SysEx messages in %d bytes", len(messages), len(data))
    return messages


def read_syx_file(filepath: Union[str, Path]) -> List[bytes]:
    """
    Read all SysEx messages from a file.

    Args:
        filepath: Path to .syx file

    Returns:
        Messages including their F0 and F7 bytes

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidMessage: If the file is a hex text file that cannot be parsed
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    try:
        messages = mido.read_syx_file(str(filepath))
    except ValueError as e:
        raise InvalidMessage(f"Can't read SysEx from {filepath}: {e}") from e

    logger.debug("Read %d SysEx messages from %s", len(messages), filepath)
    return _sysex_bytes(messages)
