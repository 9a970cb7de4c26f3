"""Helpers shared by the manufacturer decoders."""


def channel_value(status: int) -> str:
    """MIDI channel (1-16) carried in the low nybble of the first payload byte."""
    return str((status & 0x0F) + 1)


def unrecognized(kind: str, code: int) -> str:
    """Label for a code missing from a closed table, e.g. "Unrecognized function (7Fh)"."""
    return f"Unrecognized {kind} ({code:02X}h)"
