"""Value objects shared by the core services.

All models are **frozen** dataclasses with no behaviour beyond data
access and a couple of convenience dunders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Area aggregation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AreaReport:
    """Per-shape areas (in iteration order) and their sum."""

    areas: tuple[float, ...]
    total: float

    def __len__(self) -> int:
        return len(self.areas)


# ---------------------------------------------------------------------------
# File sizes
# ---------------------------------------------------------------------------

class SizeUnit(Enum):
    """Supported units, decimal scale (1 KB = 1000 bytes).

    The value is the unit's power of 1000 relative to bytes.
    """

    BYTES = 0
    KILOBYTES = 1
    MEGABYTES = 2
    GIGABYTES = 3

    @property
    def token(self) -> str:
        """Lower-case token accepted on the command line."""
        return _UNIT_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> SizeUnit | None:
        """Look up a unit by its case-insensitive token, or ``None``."""
        lowered = token.lower()
        for unit, unit_token in _UNIT_TOKENS.items():
            if unit_token == lowered:
                return unit
        return None


_UNIT_TOKENS: dict[SizeUnit, str] = {
    SizeUnit.BYTES: "bytes",
    SizeUnit.KILOBYTES: "kb",
    SizeUnit.MEGABYTES: "mb",
    SizeUnit.GIGABYTES: "gb",
}


@dataclass(frozen=True, slots=True)
class FileSize:
    """A parsed size: a non-negative finite *value* in *unit*."""

    unit: SizeUnit
    value: float


@dataclass(frozen=True, slots=True)
class Sizes:
    """The same size rendered in every supported unit."""

    bytes: str
    """Whole number of bytes, e.g. ``"300000 bytes"``."""

    kilobytes: str
    """Two decimals, e.g. ``"300.00 KB"``."""

    megabytes: str
    """Two decimals, e.g. ``"0.30 MB"``."""

    gigabytes: str
    """Two decimals, e.g. ``"0.00 GB"``."""
