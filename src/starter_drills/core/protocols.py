"""Protocols (interfaces) consumed by the core layer.

Aggregation code depends only on these contracts, never on the concrete
shape classes.
"""

from __future__ import annotations

from typing import Protocol


class Measurable(Protocol):
    """Anything with a computable, possibly invalid, area.

    Implementations satisfy this protocol structurally (no explicit
    inheritance required).
    """

    def area(self) -> float:
        """Return the non-negative area of the shape.

        Raises
        ------
        InvalidMeasurementError
            When the shape's linear measurement is not strictly positive.
        """
        ...  # pragma: no cover
