"""starter-drills — three small command-line exercises.

Shape-area summation, a file-size unit converter, and an echo loop,
all behind one console script with a shared error boundary.
"""

from starter_drills.version import __version__

__all__: list[str] = ["__version__"]
