"""
Message dispatch.

Classifies complete SysEx messages and routes manufacturer payloads to
the matching decoder. Payload regions come back relative to the payload
and are shifted here so that every region offset counts from the F0
status byte.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Type, Union

from syxident.formats.envelope import (
    KAWAI,
    KORG,
    Manufacturer,
    ManufacturerMessage,
    UniversalMessage,
    classify,
)
from syxident.formats.reader import read_syx_file
from syxident.manufacturers.kawai import KawaiDecoder
from syxident.manufacturers.korg import KorgDecoder, LogueDeviceInformation
from syxident.models.region import Region
from syxident.models.result import DecodeResult, MessageAnalysis, MessageStatus
from syxident.utils.validation import DecodeError, InvalidMessage

logger = logging.getLogger(__name__)

DECODERS: Dict[Manufacturer, Type] = {
    KAWAI: KawaiDecoder,
    KORG: KorgDecoder,
}

START_REGION = Region("Status", "System Exclusive start", 0, b"\xf0")


def _end_region(raw: bytes) -> Region:
    return Region("Status", "System Exclusive end", len(raw) - 1, raw[-1:])


def decode_payload(manufacturer: Manufacturer, payload: Union[bytes, bytearray]) -> DecodeResult:
    """
    Decode a manufacturer payload with the matching decoder.

    Returns:
        DecodeResult with payload-relative offsets; ``supported`` is False
        when no decoder exists for the manufacturer
    """
    decoder_class = DECODERS.get(manufacturer)
    if decoder_class is None:
        logger.info("Can't handle SysEx for %s yet", manufacturer.display_name)
        return DecodeResult(supported=False)

    return decoder_class().identify(payload)


def _analyze_manufacturer(
    index: int, raw: bytes, message: ManufacturerMessage
) -> MessageAnalysis:
    manufacturer = message.manufacturer
    regions = [
        START_REGION,
        Region("Manufacturer", manufacturer.display_name, 1, manufacturer.identifier),
    ]

    result = decode_payload(manufacturer, message.payload)
    status = MessageStatus.DECODED if result.supported else MessageStatus.UNSUPPORTED

    regions.extend(result.shifted(1 + manufacturer.length).regions)
    regions.append(_end_region(raw))

    return MessageAnalysis(
        index=index,
        raw=raw,
        status=status,
        manufacturer_name=manufacturer.display_name,
        regions=regions,
        error=result.error,
        checksum_valid=result.checksum_valid,
    )


def _analyze_universal(index: int, raw: bytes, message: UniversalMessage) -> MessageAnalysis:
    """
    Universal message layout:
        F0 7E/7F dd s1 s2 [payload...] F7
    """
    header = message.header
    regions = [
        START_REGION,
        Region("Universal", message.kind.description, 1, raw[1:2]),
        Region("Device ID", f"{header.device_id:02X}h", 2, raw[2:3]),
        Region("Sub ID #1", f"{header.sub_id1:02X}h", 3, raw[3:4]),
        Region("Sub ID #2", f"{header.sub_id2:02X}h", 4, raw[4:5]),
    ]
    analysis = MessageAnalysis(index=index, raw=raw, status=MessageStatus.UNIVERSAL)

    payload = message.payload
    if header.is_identity_reply and payload[:1] == KORG.identifier:
        try:
            # F7 is not part of the reply body
            info = LogueDeviceInformation.from_bytes(raw[:-1])
        except DecodeError as e:
            logger.warning("Identity reply decoding stopped: %s", e)
            analysis.error = e
            regions.append(Region("Payload", f"{len(payload)} bytes", 5, payload))
        else:
            analysis.manufacturer_name = KORG.display_name
            regions.append(Region("Manufacturer", KORG.display_name, 5, payload[:1]))
            regions.append(
                Region(
                    "Device",
                    f"{info.family_name} (family {info.family:04X}, member {info.member:04X}), "
                    f"version {info.version}",
                    6,
                    raw[6:14],
                )
            )
    else:
        regions.append(Region("Payload", f"{len(payload)} bytes", 5, payload))

    regions.append(_end_region(raw))
    analysis.regions = regions
    return analysis


def analyze_message(message: Union[bytes, bytearray], index: int = 1) -> MessageAnalysis:
    """
    Decode one complete SysEx message (F0 ... F7) into regions.

    Args:
        message: Raw message bytes
        index: 1-based position of the message in its file

    Returns:
        MessageAnalysis with regions counted from the F0 status byte
    """
    raw = bytes(message)
    parsed = classify(raw)

    if parsed is None:
        logger.warning("Message #%d is not a valid System Exclusive message", index)
        return MessageAnalysis(
            index=index,
            raw=raw,
            status=MessageStatus.INVALID,
            error=InvalidMessage("Not a valid System Exclusive message"),
        )

    if isinstance(parsed, UniversalMessage):
        return _analyze_universal(index, raw, parsed)

    return _analyze_manufacturer(index, raw, parsed)


def analyze_messages(messages: Iterable[Union[bytes, bytearray]]) -> List[MessageAnalysis]:
    """Decode every message independently; numbering starts at 1."""
    return [analyze_message(message, index) for index, message in enumerate(messages, start=1)]


def analyze_file(filepath: Union[str, Path]) -> List[MessageAnalysis]:
    """Read a .syx file and decode all of its messages."""
    return analyze_messages(read_syx_file(filepath))
