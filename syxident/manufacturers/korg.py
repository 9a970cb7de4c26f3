"""
Korg SysEx payload decoder.

Korg Format (payload after manufacturer ID 0x42):
    3n mm [cc ...]                 Single byte model ID
    3n 00 ff ff [...]              'logue family, 2-byte little-endian family code

Wavestation Format:
    3n 28 cc [bank] [index] [nybble data...] CS

Where:
    - 3n: MIDI channel (n = channel - 1)
    - cc: Command
    - bank/index: Present depending on the command
    - nybble data: Two bytes per data byte, low nybble first
    - CS: Checksum (sum of everything after the header, lower 7 bits)
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from syxident.manufacturers.common import channel_value, unrecognized
from syxident.manufacturers.registry import ModelRegistry
from syxident.models.result import DecodeResult
from syxident.utils.checksum import calculate_checksum, verify_checksum
from syxident.utils.nybble import denybblify
from syxident.utils.validation import DecodeError, OddNybbleCount, PayloadReader

logger = logging.getLogger(__name__)


class KorgModel(IntEnum):
    LOGUE = 0x00  # escape byte, family code follows
    WAVESTATION = 0x28
    X05RW = 0x36


LOGUE_FAMILIES = {
    0x012C: "minilogue",
    0x0144: "monologue",
    0x014B: "prologue",
    0x0151: "minilogue xd",
    0x0157: "nu:tekt NTS-1",
}

KORG_MODELS = ModelRegistry(
    "Korg",
    {
        KorgModel.WAVESTATION: "Wavestation",
        KorgModel.X05RW: "05R/W",
        **LOGUE_FAMILIES,
    },
)


class WavestationCommand(IntEnum):
    """Wavestation System Exclusive commands."""

    SINGLE_PATCH_DUMP = 0x40
    SINGLE_PERFORMANCE_DUMP = 0x49
    ALL_PATCH_DUMP = 0x4C
    ALL_PERFORMANCE_DUMP = 0x4D
    ALL_DATA_DUMP = 0x50
    SYSTEM_SETUP_DUMP = 0x51
    WAVE_SEQUENCE_DUMP = 0x54
    MULTI_MODE_SETUP_DUMP = 0x55
    MICRO_TUNE_SCALE_DUMP = 0x5A
    SYSTEM_SETUP_EXPANDED_DUMP = 0x5C
    PERFORMANCE_MAP_DUMP = 0x5D
    MULTI_MODE_SETUP_EXPANDED_DUMP = 0x5E
    PERFORMANCE_MAP_EXPANDED_DUMP = 0x5F

    @property
    def description(self) -> str:
        return WAVESTATION_COMMAND_NAMES[self]

    @property
    def index_name(self) -> Optional[str]:
        """Name of the byte that follows the bank, for single item dumps."""
        return WAVESTATION_INDEX_NAMES.get(self)

    @property
    def shows_bank(self) -> bool:
        return self in WAVESTATION_BANK_COMMANDS


WAVESTATION_COMMAND_NAMES = {
    WavestationCommand.SINGLE_PATCH_DUMP: "Single Patch Dump",
    WavestationCommand.SINGLE_PERFORMANCE_DUMP: "Single Performance Dump",
    WavestationCommand.ALL_PATCH_DUMP: "All Patch Dump",
    WavestationCommand.ALL_PERFORMANCE_DUMP: "All Performance Dump",
    WavestationCommand.ALL_DATA_DUMP: "All Data Dump",
    WavestationCommand.SYSTEM_SETUP_DUMP: "System Setup Dump",
    WavestationCommand.WAVE_SEQUENCE_DUMP: "Wave Sequence Dump",
    WavestationCommand.MULTI_MODE_SETUP_DUMP: "Multi Mode Setup Dump",
    WavestationCommand.MICRO_TUNE_SCALE_DUMP: "Micro Tune Scale Dump",
    WavestationCommand.SYSTEM_SETUP_EXPANDED_DUMP: "System Setup Expanded Dump",
    WavestationCommand.PERFORMANCE_MAP_DUMP: "Performance Map Dump",
    WavestationCommand.MULTI_MODE_SETUP_EXPANDED_DUMP: "Multi Mode Setup Expanded Dump",
    WavestationCommand.PERFORMANCE_MAP_EXPANDED_DUMP: "Performance Map Expanded Dump",
}

WAVESTATION_INDEX_NAMES = {
    WavestationCommand.SINGLE_PATCH_DUMP: "Patch",
    WavestationCommand.SINGLE_PERFORMANCE_DUMP: "Performance",
}

# Commands whose bank number is worth showing in the command label
WAVESTATION_BANK_COMMANDS = frozenset(
    [
        WavestationCommand.SINGLE_PATCH_DUMP,
        WavestationCommand.SINGLE_PERFORMANCE_DUMP,
        WavestationCommand.ALL_PATCH_DUMP,
        WavestationCommand.ALL_PERFORMANCE_DUMP,
        WavestationCommand.WAVE_SEQUENCE_DUMP,
    ]
)


class X05RWFunction(IntEnum):
    """05R/W data dump function codes."""

    PROGRAM_PARAMETER_DUMP = 0x40
    COMBINATION_PARAMETER_DUMP = 0x49
    ALL_PROGRAM_PARAMETER_DUMP = 0x4C
    ALL_COMBINATION_PARAMETER_DUMP = 0x4D
    ALL_DATA_DUMP = 0x50
    GLOBAL_DATA_DUMP = 0x51
    DRUMS_DATA_DUMP = 0x52
    MULTI_SETUP_DATA_DUMP = 0x55

    @property
    def description(self) -> str:
        return X05RW_FUNCTION_NAMES[self]


X05RW_FUNCTION_NAMES = {
    X05RWFunction.PROGRAM_PARAMETER_DUMP: "Program Parameter Dump",
    X05RWFunction.COMBINATION_PARAMETER_DUMP: "Combination Parameter Dump",
    X05RWFunction.ALL_PROGRAM_PARAMETER_DUMP: "All Program Parameter Dump",
    X05RWFunction.ALL_COMBINATION_PARAMETER_DUMP: "All Combination Parameter Dump",
    X05RWFunction.ALL_DATA_DUMP: "All Data (Global, Drums, Combi, Prog, Multi) Dump",
    X05RWFunction.GLOBAL_DATA_DUMP: "Global Data Dump",
    X05RWFunction.DRUMS_DATA_DUMP: "Drums Data Dump",
    X05RWFunction.MULTI_SETUP_DATA_DUMP: "Multi Setup Data Dump",
}


class KorgDecoder:
    """
    Decoder for Korg manufacturer payloads.

    Example:
        result = KorgDecoder().identify(payload)
        if result.checksum_valid is False:
            print("Checksum mismatch")
    """

    CHANNEL = 0
    MODEL = 1
    FAMILY = 2
    COMMAND = 2
    WAVESTATION_HEADER_SIZE = 3

    def identify(self, payload: Union[bytes, bytearray]) -> DecodeResult:
        result = DecodeResult()
        reader = PayloadReader(payload)

        try:
            self._decode(reader, result)
        except DecodeError as e:
            logger.warning("Korg payload decoding stopped: %s", e)
            result.error = e

        return result

    def _decode(self, reader: PayloadReader, result: DecodeResult) -> None:
        status = reader.byte_at(self.CHANNEL)
        result.add("Channel", channel_value(status), self.CHANNEL, bytes([status]))

        model_id = reader.byte_at(self.MODEL)
        if model_id == KorgModel.LOGUE:
            result.add("Model escape", "'logue family follows", self.MODEL, bytes([model_id]))
            family = reader.word_le(self.FAMILY)
            result.add(
                "Model",
                KORG_MODELS.name(family),
                self.FAMILY,
                reader.slice(self.FAMILY, self.FAMILY + 2),
            )
            # Device information and programs are decoded by the helpers below
            logger.debug("'logue family %04Xh", family)
            return

        result.add("Model", KORG_MODELS.name(model_id), self.MODEL, bytes([model_id]))

        if model_id == KorgModel.WAVESTATION:
            self._decode_wavestation(reader, result)
        elif model_id == KorgModel.X05RW:
            self._decode_05rw(reader, result)
        else:
            logger.debug("Can't identify Korg model %02Xh", model_id)

    def _decode_05rw(self, reader: PayloadReader, result: DecodeResult) -> None:
        code = reader.byte_at(self.COMMAND)
        try:
            value = X05RWFunction(code).description
        except ValueError:
            logger.debug("Unrecognized 05R/W function %02Xh", code)
            value = unrecognized("function", code)
        result.add("Function", value, self.COMMAND, bytes([code]))

    def _decode_wavestation(self, reader: PayloadReader, result: DecodeResult) -> None:
        """
        Header -> command -> bank/index -> checksum -> nybble data.

        Raw data is everything but the three header bytes and the
        trailing checksum byte; the checksum covers all of the raw data.
        """
        header_size = self.WAVESTATION_HEADER_SIZE
        command_byte = reader.byte_at(self.COMMAND)
        reader.require(header_size + 1)

        checksum_offset = len(reader) - 1
        checksum_byte = reader.byte_at(checksum_offset)
        body = PayloadReader(reader.slice(0, checksum_offset))

        data_start = header_size
        try:
            command = WavestationCommand(command_byte)
        except ValueError:
            logger.debug("Unrecognized Wavestation command %02Xh", command_byte)
            command = None

        if command is not None:
            bank = body.byte_at(header_size)
            data_start += 1
            command_value = command.description
            if command.shows_bank:
                command_value += f": bank {bank}"

            index = None
            if command.index_name is not None:
                index = body.byte_at(header_size + 1)
                data_start += 1
                command_value += f", {command.index_name.lower()} {index}"

            result.add("Command", command_value, self.COMMAND, bytes([command_byte]))
            result.add("Bank", str(bank), header_size, bytes([bank]))
            if index is not None:
                result.add(command.index_name, str(index), header_size + 1, bytes([index]))

        covered = body.rest(header_size)
        calculated = calculate_checksum(covered)
        result.checksum_valid = verify_checksum(covered, checksum_byte)
        if result.checksum_valid:
            checksum_value = f"{checksum_byte:02X}h (match)"
        else:
            logger.warning(
                "Wavestation checksum mismatch: original %02Xh, calculated %02Xh",
                checksum_byte,
                calculated,
            )
            checksum_value = f"{checksum_byte:02X}h (mismatch, calculated {calculated:02X}h)"

        packed = body.rest(data_start)
        try:
            unpacked = denybblify(packed, high_first=False)
        except OddNybbleCount as e:
            e.offset = data_start
            result.add("Checksum", checksum_value, checksum_offset, bytes([checksum_byte]))
            raise

        result.unpacked = unpacked
        result.add(
            "Data", f"{len(packed)} bytes, {len(unpacked)} bytes unpacked", data_start, packed
        )
        result.add("Checksum", checksum_value, checksum_offset, bytes([checksum_byte]))


def identify(payload: Union[bytes, bytearray]) -> DecodeResult:
    """Decode a Korg payload into regions."""
    return KorgDecoder().identify(payload)


# ---------------------------------------------------------------------------
# 'logue family helpers
# ---------------------------------------------------------------------------


@dataclass
class LogueDeviceInformation:
    """
    Device information from a 'logue identity reply.

    Message Format:
        F0 7E 0g 06 02 42 [family] [member] [major] [minor] F7

    All four values are 2-byte little-endian words.
    """

    family: int
    member: int
    major_version: int
    minor_version: int

    FAMILY_OFFSET = 6

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "LogueDeviceInformation":
        reader = PayloadReader(data)
        offset = cls.FAMILY_OFFSET
        return cls(
            family=reader.word_le(offset),
            member=reader.word_le(offset + 2),
            major_version=reader.word_le(offset + 4),
            minor_version=reader.word_le(offset + 6),
        )

    @property
    def family_name(self) -> str:
        return LOGUE_FAMILIES.get(self.family, "(unknown)")

    @property
    def version(self) -> str:
        return f"{self.major_version}.{self.minor_version:02d}"

    def __str__(self) -> str:
        return (
            f"Family : {self.family:04X} / {self.family_name}\n"
            f"Member : {self.member:04X}\n"
            f"Version: {self.version}"
        )


@dataclass
class LogueProgram:
    """
    Program header of unpacked 'logue program data.

    Layout:
        0-3:   "PROG"
        4-15:  Program name (12 characters)
        16:    Octave (0-4, shown as -2..+2)
    """

    name: str
    octave: int

    NAME_START = 4
    NAME_END = 16
    OCTAVE = 16

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "LogueProgram":
        reader = PayloadReader(data)
        name_bytes = reader.slice(cls.NAME_START, cls.NAME_END)
        try:
            name = name_bytes.decode("utf-8").rstrip("\x00")
        except UnicodeDecodeError:
            name = "(unknown)"
        return cls(name=name, octave=reader.byte_at(cls.OCTAVE) - 2)

    def __str__(self) -> str:
        return self.name
