"""Manufacturer-specific payload decoders."""

from syxident.manufacturers.kawai import KAWAI_MODELS, KawaiDecoder, K4Function
from syxident.manufacturers.korg import (
    KORG_MODELS,
    KorgDecoder,
    LogueDeviceInformation,
    LogueProgram,
    WavestationCommand,
)
from syxident.manufacturers.registry import UNKNOWN, ModelRegistry

__all__ = [
    "KAWAI_MODELS",
    "KawaiDecoder",
    "K4Function",
    "KORG_MODELS",
    "KorgDecoder",
    "LogueDeviceInformation",
    "LogueProgram",
    "WavestationCommand",
    "UNKNOWN",
    "ModelRegistry",
]
