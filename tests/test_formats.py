"""Tests for SysEx file reading and envelope classification."""

import pytest

from syxident.formats.envelope import (
    KAWAI,
    KORG,
    IdentifierKind,
    Manufacturer,
    ManufacturerMessage,
    UniversalKind,
    UniversalMessage,
    classify,
)
from syxident.formats.reader import read_syx_file, split_messages
from syxident.utils.validation import InvalidMessage


class TestManufacturer:
    """Test cases for manufacturer identifiers."""

    def test_standard(self):
        assert KORG.kind == IdentifierKind.STANDARD
        assert KORG.length == 1
        assert KORG.display_name == "Korg"
        assert KAWAI.display_name == "Kawai"

    def test_extended(self):
        manufacturer = Manufacturer(b"\x00\x20\x29")
        assert manufacturer.kind == IdentifierKind.EXTENDED
        assert manufacturer.length == 3
        assert manufacturer.display_name == "Focusrite/Novation"

    def test_development(self):
        assert Manufacturer(b"\x7D").kind == IdentifierKind.DEVELOPMENT

    def test_unknown_name(self):
        assert Manufacturer(b"\x21").display_name == "Unknown (21)"

    def test_equality(self):
        assert Manufacturer(b"\x42") == KORG
        assert Manufacturer(b"\x42") != KAWAI


class TestClassify:
    """Test cases for envelope classification."""

    def test_manufacturer_message(self, wavestation_message, wavestation_patch_payload):
        message = classify(wavestation_message)

        assert isinstance(message, ManufacturerMessage)
        assert message.manufacturer == KORG
        assert message.payload == wavestation_patch_payload

    def test_extended_manufacturer(self):
        message = classify(bytes([0xF0, 0x00, 0x20, 0x29, 0x01, 0x02, 0xF7]))

        assert message.manufacturer.identifier == b"\x00\x20\x29"
        assert message.payload == bytes([0x01, 0x02])

    def test_universal_non_real_time(self):
        data = bytes([0xF0, 0x7E, 0x7F, 0x06, 0x01, 0xF7])
        message = classify(data)

        assert isinstance(message, UniversalMessage)
        assert message.kind == UniversalKind.NON_REAL_TIME
        assert message.header.device_id == 0x7F
        assert message.header.sub_id1 == 0x06
        assert message.header.sub_id2 == 0x01
        assert message.payload == b""

    def test_universal_real_time(self):
        message = classify(bytes([0xF0, 0x7F, 0x7F, 0x04, 0x01, 0x00, 0x40, 0xF7]))

        assert message.kind == UniversalKind.REAL_TIME
        assert message.kind.description == "Real-time"
        assert message.payload == bytes([0x00, 0x40])

    def test_identity_reply_header(self):
        message = classify(bytes([0xF0, 0x7E, 0x00, 0x06, 0x02, 0x42, 0xF7]))
        assert message.header.is_identity_reply

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            bytes([0xF0, 0xF7]),
            bytes([0xF0, 0x42, 0x30]),
            bytes([0x42, 0x30, 0xF7]),
            bytes([0xF0, 0x00, 0x20, 0xF7]),
            bytes([0xF0, 0x7E, 0x00, 0x06, 0xF7]),
        ],
    )
    def test_invalid(self, data):
        assert classify(data) is None


class TestReader:
    """Test cases for reading and splitting SysEx data."""

    def test_split_messages(self, k4_message, wavestation_message):
        messages = split_messages(k4_message + wavestation_message)
        assert messages == [k4_message, wavestation_message]

    def test_split_ignores_stray_bytes(self, k4_message):
        messages = split_messages(bytes([0x01, 0x02]) + k4_message)
        assert messages == [k4_message]

    def test_split_drops_unterminated_message(self, k4_message):
        messages = split_messages(k4_message + bytes([0xF0, 0x42, 0x30]))
        assert messages == [k4_message]

    def test_split_empty(self):
        assert split_messages(b"") == []

    def test_read_binary_file(self, syx_file, k4_message, roland_message):
        messages = read_syx_file(syx_file)

        assert len(messages) == 3
        assert messages[0] == k4_message
        assert messages[2] == roland_message

    def test_read_hex_text_file(self, tmp_path):
        path = tmp_path / "text.syx"
        path.write_text("F0 42 30 36 51 F7\n")

        assert read_syx_file(path) == [bytes([0xF0, 0x42, 0x30, 0x36, 0x51, 0xF7])]

    def test_read_invalid_text_file(self, tmp_path):
        path = tmp_path / "bad.syx"
        path.write_text("not a sysex file")

        with pytest.raises(InvalidMessage):
            read_syx_file(path)

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_syx_file(tmp_path / "missing.syx")
