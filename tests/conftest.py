"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from syxident.utils.checksum import calculate_checksum
from syxident.utils.nybble import nybblify


def build_wavestation_payload(command, params, data, channel=0, checksum=None):
    """
    Build a Korg Wavestation payload (after F0 42, before F7).

    Format: 3n 28 cc [params...] [nybble data...] CS
    """
    raw = bytes(params) + nybblify(data)
    if checksum is None:
        checksum = calculate_checksum(raw)
    return bytes([0x30 | channel, 0x28, command]) + raw + bytes([checksum])


def build_message(manufacturer_id, payload):
    """Wrap a payload into a complete F0 ... F7 message."""
    return bytes([0xF0]) + bytes(manufacturer_id) + bytes(payload) + bytes([0xF7])


@pytest.fixture
def k4_one_patch_payload():
    """K4 One Patch Data Dump, channel 4, INT SINGLE 11, 8 data bytes."""
    return bytes([0x03, 0x20, 0x00, 0x04, 0x00, 0x0A]) + bytes(range(8))


@pytest.fixture
def wavestation_patch_payload():
    """Wavestation Single Patch Dump for bank 1, patch 5."""
    return build_wavestation_payload(0x40, [0x01, 0x05], bytes([0x12, 0xA7, 0xFF, 0x00]))


@pytest.fixture
def k4_message(k4_one_patch_payload):
    return build_message([0x40], k4_one_patch_payload)


@pytest.fixture
def wavestation_message(wavestation_patch_payload):
    return build_message([0x42], wavestation_patch_payload)


@pytest.fixture
def roland_message():
    return bytes([0xF0, 0x41, 0x10, 0x42, 0x12, 0x40, 0x00, 0x7F, 0x00, 0x41, 0xF7])


@pytest.fixture
def syx_file(tmp_path, k4_message, wavestation_message, roland_message):
    """Binary .syx file holding a Kawai, a Korg and a Roland message."""
    path = tmp_path / "mixed.syx"
    path.write_bytes(k4_message + wavestation_message + roland_message)
    return path
