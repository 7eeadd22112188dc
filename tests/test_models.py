"""Tests for value objects (core/models.py and the shape dataclasses).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and the small amount of behaviour they carry.
"""

from __future__ import annotations

import pytest

from starter_drills.core.models import AreaReport, FileSize, Sizes, SizeUnit
from starter_drills.core.shapes import DEFAULT_SHAPES, Circle, Square


def _make_sizes(**overrides: str) -> Sizes:
    defaults: dict[str, str] = {
        "bytes": "300000 bytes",
        "kilobytes": "300.00 KB",
        "megabytes": "0.30 MB",
        "gigabytes": "0.00 GB",
    }
    defaults.update(overrides)
    return Sizes(**defaults)


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

class TestShapes:
    def test_circle_frozen(self) -> None:
        c = Circle(radius=1.0)
        with pytest.raises(AttributeError):
            c.radius = 2.0  # type: ignore[misc]

    def test_square_frozen(self) -> None:
        s = Square(length=1.0)
        with pytest.raises(AttributeError):
            s.length = 2.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Circle(radius=2.0) == Circle(radius=2.0)
        assert Circle(radius=2.0) != Square(length=2.0)

    def test_default_shapes_order(self) -> None:
        assert DEFAULT_SHAPES == (
            Circle(radius=5.0),
            Square(length=3.0),
            Circle(radius=2.0),
        )


# ---------------------------------------------------------------------------
# AreaReport
# ---------------------------------------------------------------------------

class TestAreaReport:
    def test_len_counts_areas(self) -> None:
        report = AreaReport(areas=(1.0, 4.0), total=5.0)
        assert len(report) == 2

    def test_empty(self) -> None:
        report = AreaReport(areas=(), total=0.0)
        assert len(report) == 0
        assert report.total == 0.0

    def test_frozen(self) -> None:
        report = AreaReport(areas=(), total=0.0)
        with pytest.raises(AttributeError):
            report.total = 1.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# SizeUnit
# ---------------------------------------------------------------------------

class TestSizeUnit:
    @pytest.mark.parametrize(
        ("token", "unit"),
        [
            ("bytes", SizeUnit.BYTES),
            ("kb", SizeUnit.KILOBYTES),
            ("MB", SizeUnit.MEGABYTES),
            ("Gb", SizeUnit.GIGABYTES),
        ],
    )
    def test_from_token(self, token: str, unit: SizeUnit) -> None:
        assert SizeUnit.from_token(token) is unit

    def test_unknown_token(self) -> None:
        assert SizeUnit.from_token("tb") is None

    def test_token_round_trip(self) -> None:
        for unit in SizeUnit:
            assert SizeUnit.from_token(unit.token) is unit

    def test_units_ordered_by_magnitude(self) -> None:
        values = [unit.value for unit in SizeUnit]
        assert values == sorted(values)


# ---------------------------------------------------------------------------
# FileSize / Sizes
# ---------------------------------------------------------------------------

class TestFileSize:
    def test_fields_accessible(self) -> None:
        fs = FileSize(unit=SizeUnit.KILOBYTES, value=300.0)
        assert fs.unit is SizeUnit.KILOBYTES
        assert fs.value == 300.0

    def test_frozen(self) -> None:
        fs = FileSize(unit=SizeUnit.KILOBYTES, value=300.0)
        with pytest.raises(AttributeError):
            fs.value = 1.0  # type: ignore[misc]


class TestSizes:
    def test_repr_lists_every_field(self) -> None:
        text = repr(_make_sizes())
        assert text.startswith("Sizes(")
        for value in ("300000 bytes", "300.00 KB", "0.30 MB", "0.00 GB"):
            assert value in text

    def test_equality(self) -> None:
        assert _make_sizes() == _make_sizes()
        assert _make_sizes(bytes="1 bytes") != _make_sizes()
