"""Shape variants and their area capability.

The variant set is closed: :data:`Shape` is exactly ``Circle | Square``.
Each variant is a frozen dataclass that satisfies the
:class:`~starter_drills.core.protocols.Measurable` protocol structurally.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeAlias

from starter_drills.exceptions import InvalidMeasurementError, InvalidShapeSpecError

INVALID_RADIUS: str = "Invalid radius size"
INVALID_LENGTH: str = "Invalid length size"


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle described by its radius."""

    radius: float

    def area(self) -> float:
        """Return ``pi * radius**2``.

        Raises
        ------
        InvalidMeasurementError
            If ``radius`` is not strictly greater than zero.
        """
        if self.radius > 0:
            return math.pi * self.radius * self.radius
        raise InvalidMeasurementError(INVALID_RADIUS)


@dataclass(frozen=True, slots=True)
class Square:
    """A square described by its side length."""

    length: float

    def area(self) -> float:
        """Return ``length**2``.

        Raises
        ------
        InvalidMeasurementError
            If ``length`` is not strictly greater than zero.
        """
        if self.length > 0:
            return self.length * self.length
        raise InvalidMeasurementError(INVALID_LENGTH)


Shape: TypeAlias = Circle | Square

DEFAULT_SHAPES: tuple[Shape, ...] = (
    Circle(radius=5.0),
    Square(length=3.0),
    Circle(radius=2.0),
)
"""Shape list used by ``starter-drills area`` when no ``--shape`` is given."""


# ---------------------------------------------------------------------------
# Token parsing for ``--shape KIND=VALUE``
# ---------------------------------------------------------------------------

_SHAPE_KINDS: dict[str, type[Circle] | type[Square]] = {
    "circle": Circle,
    "square": Square,
}


def parse_shape(token: str) -> Shape:
    """Build a shape from a ``kind=value`` token (e.g. ``circle=5``).

    The measurement itself is not validated here; an out-of-range value
    surfaces later through :meth:`area`.
    """
    kind, sep, raw_value = token.partition("=")
    kind = kind.strip().lower()
    if not sep or kind not in _SHAPE_KINDS:
        raise InvalidShapeSpecError(
            f"Invalid shape: {token!r}",
            hint="Use circle=<radius> or square=<length>.",
        )
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise InvalidShapeSpecError(
            f"Invalid shape measurement: {raw_value.strip()!r}",
            hint="The measurement must be a number, e.g. circle=2.5",
        ) from exc
    return _SHAPE_KINDS[kind](value)
