"""
Kawai SysEx payload decoder.

Kawai Format (payload after manufacturer ID 0x40):
    0n ff 00 mm s1 s2 [data...]

Where:
    - 0n: MIDI channel (n = channel - 1)
    - ff: Function number
    - 00: Group number (synthesizer group)
    - mm: Machine ID (0x02 = K5, 0x03 = K1 II, 0x04 = K4)
    - s1/s2: Sub status bytes, meaning depends on the function

Only the K4 functions are decoded; for the other known machines the
channel and machine ID are identified and decoding stops.
"""

import logging
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from syxident.manufacturers.common import channel_value, unrecognized
from syxident.manufacturers.registry import ModelRegistry
from syxident.models.result import DecodeResult
from syxident.utils.validation import DecodeError, PayloadReader

logger = logging.getLogger(__name__)


class KawaiModel(IntEnum):
    K5 = 0x02
    K1II = 0x03
    K4 = 0x04


KAWAI_MODELS = ModelRegistry(
    "Kawai",
    {
        KawaiModel.K5: "K5/K5m",
        KawaiModel.K1II: "K1 II",
        KawaiModel.K4: "K4/K4r",
    },
)


class Cardinality(Enum):
    """How many patches a dump or request covers."""

    ONE = "one"
    BLOCK = "block"
    ALL = "all"


class Locality(Enum):
    """Where the patches live."""

    INT = "INT"
    EXT = "EXT"


class K4Function(IntEnum):
    """K4 function numbers."""

    ONE_PATCH_DATA_REQUEST = 0x00
    BLOCK_PATCH_DATA_REQUEST = 0x01
    ALL_PATCH_DATA_REQUEST = 0x02
    ONE_PATCH_DATA_DUMP = 0x20
    BLOCK_PATCH_DATA_DUMP = 0x21
    ALL_PATCH_DATA_DUMP = 0x22
    PROGRAM_CHANGE = 0x30
    WRITE_COMPLETE = 0x40
    WRITE_ERROR = 0x41
    WRITE_ERROR_PROTECT = 0x42
    WRITE_ERROR_NO_CARD = 0x43

    @property
    def description(self) -> str:
        return K4_FUNCTION_NAMES[self]

    @property
    def cardinality(self) -> Optional[Cardinality]:
        """Cardinality for dumps and requests, None for other functions."""
        return K4_CARDINALITY.get(self)


K4_FUNCTION_NAMES = {
    K4Function.ONE_PATCH_DATA_REQUEST: "One Patch Data Request",
    K4Function.BLOCK_PATCH_DATA_REQUEST: "Block Patch Data Request",
    K4Function.ALL_PATCH_DATA_REQUEST: "All Patch Data Request",
    K4Function.ONE_PATCH_DATA_DUMP: "One Patch Data Dump",
    K4Function.BLOCK_PATCH_DATA_DUMP: "Block Patch Data Dump",
    K4Function.ALL_PATCH_DATA_DUMP: "All Data Dump",
    K4Function.PROGRAM_CHANGE: "Program Change",
    K4Function.WRITE_COMPLETE: "Write Complete",
    K4Function.WRITE_ERROR: "Write Error",
    K4Function.WRITE_ERROR_PROTECT: "Write Error (Protect)",
    K4Function.WRITE_ERROR_NO_CARD: "Write Error (No Card)",
}

K4_CARDINALITY = {
    K4Function.ONE_PATCH_DATA_REQUEST: Cardinality.ONE,
    K4Function.ONE_PATCH_DATA_DUMP: Cardinality.ONE,
    K4Function.BLOCK_PATCH_DATA_REQUEST: Cardinality.BLOCK,
    K4Function.BLOCK_PATCH_DATA_DUMP: Cardinality.BLOCK,
    K4Function.ALL_PATCH_DATA_REQUEST: Cardinality.ALL,
    K4Function.ALL_PATCH_DATA_DUMP: Cardinality.ALL,
}

NOT_APPLICABLE = "N/A"


def _locality(substatus1: int) -> Optional[Locality]:
    """Sub status 1 values 0x00/0x01 are internal, 0x02/0x03 external."""
    if substatus1 in (0x00, 0x01):
        return Locality.INT
    if substatus1 in (0x02, 0x03):
        return Locality.EXT
    return None


class K4Substatus:
    """
    Interpretation of the K4 sub status bytes for one function.

    Attributes:
        function_value: Function label, extended with what the message addresses
        substatus1_value: Meaning of sub status 1
        substatus2_value: Meaning of sub status 2
        locality: INT/EXT where the function carries one
    """

    def __init__(self, function: K4Function, substatus1: int, substatus2: int):
        self.function = function
        self.substatus1 = substatus1
        self.substatus2 = substatus2
        self.function_value = function.description
        self.substatus1_value = NOT_APPLICABLE
        self.substatus2_value = NOT_APPLICABLE
        self.locality: Optional[Locality] = None

        cardinality = function.cardinality
        if cardinality == Cardinality.ONE:
            self._one()
        elif cardinality == Cardinality.BLOCK:
            self._block()
        elif cardinality == Cardinality.ALL:
            self._all()
        elif function == K4Function.PROGRAM_CHANGE:
            self._program_change()

    def _one(self) -> None:
        """s1: 00 INT single/multi, 01 INT drum/effect, 02/03 the same on EXT."""
        self.locality = _locality(self.substatus1)
        if self.locality is None:
            self.substatus1_value = unrecognized("value", self.substatus1)
            return

        index = self.substatus2
        if self.substatus1 % 2 == 0:
            category = "single/multi"
            if index <= 63:
                item = f"SINGLE {index + 1}"
            else:
                item = f"MULTI {index - 63}"
        else:
            category = "drum/effect"
            if index <= 31:
                item = f"EFFECT {index + 1}"
            else:
                item = "DRUM"

        self.substatus1_value = f"{self.locality.value}, {category}"
        self.substatus2_value = item
        self.function_value = f"{self.function.description}: {self.locality.value} {item}"

    def _block(self) -> None:
        """s1: 00/02 singles or multis, 01/03 effects; s2 picks the kind."""
        self.locality = _locality(self.substatus1)
        if self.locality is None:
            self.substatus1_value = unrecognized("value", self.substatus1)
            return

        self.substatus1_value = self.locality.value
        kind = self.substatus2
        item = None
        if self.substatus1 % 2 == 0:
            if kind == 0x00:
                item = "All singles"
            elif kind == 0x40:
                item = "All multis"
        elif kind == 0x00:
            item = "All effects"

        if item is None:
            self.substatus2_value = unrecognized("value", kind)
            return

        self.substatus2_value = item
        self.function_value = f"{self.function.description}: {self.locality.value} {item}"

    def _all(self) -> None:
        self._int_or_ext()

    def _program_change(self) -> None:
        self._int_or_ext()

    def _int_or_ext(self) -> None:
        """s1: 00 INT, 02 EXT."""
        if self.substatus1 == 0x00:
            self.locality = Locality.INT
        elif self.substatus1 == 0x02:
            self.locality = Locality.EXT
        else:
            self.substatus1_value = unrecognized("value", self.substatus1)
            return

        self.substatus1_value = self.locality.value
        self.function_value = f"{self.function.description}: {self.locality.value}"


class KawaiDecoder:
    """
    Decoder for Kawai manufacturer payloads.

    Example:
        result = KawaiDecoder().identify(bytes([0x00, 0x20, 0x00, 0x04, 0x00, 0x0A]))
        for region in result:
            print(region)
    """

    # Fixed payload offsets
    CHANNEL = 0
    FUNCTION = 1
    GROUP = 2
    MACHINE_ID = 3
    SUBSTATUS1 = 4
    SUBSTATUS2 = 5
    HEADER_SIZE = 6

    def identify(self, payload: Union[bytes, bytearray]) -> DecodeResult:
        result = DecodeResult()
        reader = PayloadReader(payload)

        try:
            self._decode(reader, result)
        except DecodeError as e:
            logger.warning("Kawai payload decoding stopped: %s", e)
            result.error = e

        return result

    def _decode(self, reader: PayloadReader, result: DecodeResult) -> None:
        status = reader.byte_at(self.CHANNEL)
        result.add("Channel no.", channel_value(status), self.CHANNEL, bytes([status]))

        machine_id = reader.byte_at(self.MACHINE_ID)
        if machine_id not in KAWAI_MODELS:
            logger.debug("Unknown Kawai model %02Xh", machine_id)
            return

        model_name = KAWAI_MODELS.name(machine_id)

        if machine_id != KawaiModel.K4:
            logger.debug("No function layout for Kawai %s", model_name)
            result.add("Machine ID no.", model_name, self.MACHINE_ID, bytes([machine_id]))
            return

        self._decode_k4(reader, result, model_name)

    def _decode_k4(self, reader: PayloadReader, result: DecodeResult, model_name: str) -> None:
        function_byte = reader.byte_at(self.FUNCTION)
        group = reader.byte_at(self.GROUP)
        machine_id = reader.byte_at(self.MACHINE_ID)
        substatus1 = reader.byte_at(self.SUBSTATUS1)
        substatus2 = reader.byte_at(self.SUBSTATUS2)

        function_value, substatus1_value, substatus2_value = self._interpret(
            function_byte, substatus1, substatus2
        )

        result.add("Function no.", function_value, self.FUNCTION, bytes([function_byte]))
        result.add("Group no.", "Synthesizer group", self.GROUP, bytes([group]))
        result.add("Machine ID no.", model_name, self.MACHINE_ID, bytes([machine_id]))
        result.add("Sub status 1", substatus1_value, self.SUBSTATUS1, bytes([substatus1]))
        result.add("Sub status 2", substatus2_value, self.SUBSTATUS2, bytes([substatus2]))

        data = reader.rest(self.HEADER_SIZE)
        result.add("Data", f"{len(data)} bytes", self.HEADER_SIZE, data)

    @staticmethod
    def _interpret(function_byte: int, substatus1: int, substatus2: int) -> Tuple[str, str, str]:
        try:
            function = K4Function(function_byte)
        except ValueError:
            logger.debug("Unrecognized K4 function %02Xh", function_byte)
            return unrecognized("function", function_byte), NOT_APPLICABLE, NOT_APPLICABLE

        substatus = K4Substatus(function, substatus1, substatus2)
        return substatus.function_value, substatus.substatus1_value, substatus.substatus2_value


def identify(payload: Union[bytes, bytearray]) -> DecodeResult:
    """Decode a Kawai payload into regions."""
    return KawaiDecoder().identify(payload)
