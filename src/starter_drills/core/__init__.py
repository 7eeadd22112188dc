"""Core layer — pure domain logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or terminal I/O.
* No imports from ``cli``.
"""

from starter_drills.core.area import collect_areas, summarize_areas, total_area
from starter_drills.core.file_size import convert_file_size, parse_file_size
from starter_drills.core.models import AreaReport, FileSize, Sizes, SizeUnit
from starter_drills.core.protocols import Measurable
from starter_drills.core.shapes import DEFAULT_SHAPES, Circle, Shape, Square

__all__: list[str] = [
    "DEFAULT_SHAPES",
    "AreaReport",
    "Circle",
    "FileSize",
    "Measurable",
    "Shape",
    "SizeUnit",
    "Sizes",
    "Square",
    "collect_areas",
    "convert_file_size",
    "parse_file_size",
    "summarize_areas",
    "total_area",
]
