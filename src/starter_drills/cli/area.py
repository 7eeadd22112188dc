"""``starter-drills area`` — total area of a list of shapes.

Rendering only; the aggregation lives in :mod:`starter_drills.core.area`.
"""

from __future__ import annotations

from collections.abc import Sequence

from starter_drills.cli import exit_codes
from starter_drills.cli.console import console, output
from starter_drills.core.area import summarize_areas
from starter_drills.core.shapes import Circle, Shape
from starter_drills.exceptions import InvalidMeasurementError


def _describe(shape: Shape) -> str:
    """Short label such as ``"circle r=5.0"``."""
    if isinstance(shape, Circle):
        return f"circle r={shape.radius}"
    return f"square l={shape.length}"


def run_area(shapes: Sequence[Shape], *, verbose: bool = False) -> int:
    """Print the total area of *shapes* or the first measurement error.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`, or :data:`exit_codes.GENERAL_ERROR`
        when a shape has an invalid measurement.
    """
    try:
        report = summarize_areas(shapes)
    except InvalidMeasurementError as exc:
        console.print(f"Error calculating area: {exc.reason}", markup=False)
        return exit_codes.GENERAL_ERROR

    if verbose:
        for shape, area in zip(shapes, report.areas):
            console.print(f"[dim]{_describe(shape)}: {area:.2f} sq. units[/dim]")

    output.print(f"Total area: {report.total:.2f} sq. units", markup=False)
    return exit_codes.SUCCESS
