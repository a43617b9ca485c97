"""
Grow zone catalogue.

Zones are coded climate bands ("3" … "11") matching a garden to the planting
schedule rows for its climate. Codes are compared as exact strings.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GrowZone:
    code: str
    temperature_range: str

    @property
    def label(self) -> str:
        return f"Zone {self.code} ({self.temperature_range})"


GROW_ZONES: list[GrowZone] = [
    GrowZone("3", "-40°F to -30°F"),
    GrowZone("4", "-30°F to -20°F"),
    GrowZone("5", "-20°F to -10°F"),
    GrowZone("6", "-10°F to 0°F"),
    GrowZone("7", "0°F to 10°F"),
    GrowZone("8", "10°F to 20°F"),
    GrowZone("9", "20°F to 30°F"),
    GrowZone("10", "30°F to 40°F"),
    GrowZone("11", "40°F to 50°F"),
]

_BY_CODE = {z.code: z for z in GROW_ZONES}


def get_zone(code: Optional[str]) -> Optional[GrowZone]:
    if code is None:
        return None
    return _BY_CODE.get(code.strip())


def is_known_zone(code: Optional[str]) -> bool:
    return get_zone(code) is not None
