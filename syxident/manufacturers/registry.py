"""
Model lookup tables.

Each manufacturer decoder owns one registry mapping numeric model or
family identifiers to display names.
"""

from typing import Dict, Mapping

UNKNOWN = "Unknown"


class ModelRegistry:
    """
    Read-only identifier to display name table.

    Example:
        KORG_MODELS = ModelRegistry("Korg", {0x28: "Wavestation"})
        KORG_MODELS.name(0x28)   # "Wavestation"
        KORG_MODELS.name(0x7F)   # "Unknown"
    """

    def __init__(self, manufacturer: str, models: Mapping[int, str]):
        self.manufacturer = manufacturer
        self._models: Dict[int, str] = dict(models)

    def __contains__(self, identifier: int) -> bool:
        return identifier in self._models

    def name(self, identifier: int) -> str:
        """Display name for ``identifier``, or "Unknown" if not registered."""
        return self._models.get(identifier, UNKNOWN)
