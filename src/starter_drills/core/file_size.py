"""Parsing and conversion of ``"<number> <unit>"`` file sizes.

Pipeline:

1. **Parse** — :func:`parse_file_size` validates the text and returns a
   :class:`~starter_drills.core.models.FileSize`.
2. **Convert** — :func:`convert_file_size` renders that size in every
   supported unit.

Both steps are pure and raise only
:class:`~starter_drills.exceptions.InvalidSizeInputError` subclasses.
"""

from __future__ import annotations

import math

from starter_drills.core.models import FileSize, Sizes, SizeUnit
from starter_drills.exceptions import (
    InvalidSizeFormatError,
    InvalidSizeValueError,
    NegativeSizeError,
    UnknownUnitError,
)

SCALE: float = 1000.0
"""Decimal step between two adjacent units."""

MAX_BYTES: int = 2**64 - 1
"""Largest byte count rendered; bigger (or infinite) counts saturate to it."""


def _display_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    return str(int(value)) if value.is_integer() else str(value)


# ---------------------------------------------------------------------------
# 1. Parse
# ---------------------------------------------------------------------------

def parse_file_size(text: str) -> FileSize:
    """Parse input such as ``"300 kb"`` or ``"12 MB"``.

    A ``bytes`` value is truncated toward zero to a whole number.

    Raises
    ------
    InvalidSizeFormatError
        If *text* is not exactly two whitespace-separated tokens.
    InvalidSizeValueError
        If the first token is not a finite number.
    NegativeSizeError
        If the number is below zero.
    UnknownUnitError
        If the unit is not one of ``bytes``, ``kb``, ``mb``, ``gb``.
    """
    parts = text.split()
    if len(parts) != 2:
        raise InvalidSizeFormatError(
            "Invalid input format",
            hint='Expected "<size> <unit>", e.g. "300 kb".',
        )
    raw_size, raw_unit = parts

    try:
        size = float(raw_size)
    except ValueError:
        raise InvalidSizeValueError(f"Invalid size value: {raw_size}") from None
    if not math.isfinite(size):
        raise InvalidSizeValueError(f"Invalid size value: {raw_size}")

    if size < 0:
        raise NegativeSizeError(f"Size cannot be negative: {_display_number(size)}")

    unit = SizeUnit.from_token(raw_unit)
    if unit is None:
        supported = ", ".join(u.token for u in SizeUnit)
        raise UnknownUnitError(
            f"Unknown unit: {raw_unit.lower()}",
            hint=f"Supported units: {supported}",
        )

    if unit is SizeUnit.BYTES:
        size = float(math.trunc(size))
    return FileSize(unit=unit, value=size)


# ---------------------------------------------------------------------------
# 2. Convert
# ---------------------------------------------------------------------------

def _rescale(value: float, source: SizeUnit, target: SizeUnit) -> float:
    """Express *value* given in *source* units in *target* units.

    Converting toward a larger unit divides, toward a smaller unit
    multiplies, by ``1000 ** distance``.
    """
    distance = target.value - source.value
    if distance > 0:
        return value / SCALE**distance
    if distance < 0:
        return value * SCALE ** (-distance)
    return value


def _byte_count(value: float) -> int:
    """Truncate *value* to whole bytes, saturating at :data:`MAX_BYTES`."""
    if value >= MAX_BYTES:
        return MAX_BYTES
    return math.trunc(value)


def convert_file_size(file_size: FileSize) -> Sizes:
    """Render *file_size* in bytes, KB, MB and GB.

    Large sizes render as ``inf`` in the decimal units when they pass the
    float range.
    """

    def render(target: SizeUnit) -> float:
        return _rescale(file_size.value, file_size.unit, target)

    return Sizes(
        bytes=f"{_byte_count(render(SizeUnit.BYTES))} bytes",
        kilobytes=f"{render(SizeUnit.KILOBYTES):.2f} KB",
        megabytes=f"{render(SizeUnit.MEGABYTES):.2f} MB",
        gigabytes=f"{render(SizeUnit.GIGABYTES):.2f} GB",
    )


def format_file_size(text: str) -> Sizes:
    """Run the full parse → convert pipeline."""
    return convert_file_size(parse_file_size(text))
