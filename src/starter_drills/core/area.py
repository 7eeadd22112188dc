"""Fail-fast area aggregation over an ordered sequence of shapes.

Every function here is pure: the result depends only on the input
sequence, so repeated calls on the same shapes yield identical results.
"""

from __future__ import annotations

from collections.abc import Iterable

from starter_drills.core.models import AreaReport
from starter_drills.core.protocols import Measurable


def collect_areas(shapes: Iterable[Measurable]) -> list[float]:
    """Compute each shape's area in iteration order.

    The first :class:`~starter_drills.exceptions.InvalidMeasurementError`
    aborts the walk; shapes after the failing one are never evaluated.
    """
    return [shape.area() for shape in shapes]


def summarize_areas(shapes: Iterable[Measurable]) -> AreaReport:
    """Return the per-shape areas and their total.

    An empty input yields a report with no areas and a total of ``0.0``.
    A total past the float range is ``inf``.
    """
    areas = collect_areas(shapes)
    return AreaReport(areas=tuple(areas), total=sum(areas, 0.0))


def total_area(shapes: Iterable[Measurable]) -> float:
    """Sum the areas of *shapes*, failing on the first invalid one."""
    return summarize_areas(shapes).total
