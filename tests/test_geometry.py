"""Tests for coordinate specs and their per-page resolution."""
import pytest
from pydantic import ValidationError

from conftest import FakePage
from tabula_cli.models.geometry import (
    AreaSpec,
    ColumnSpec,
    CoordinateMode,
    Rectangle,
    Ruling,
    resolve_area,
    resolve_columns,
)


class TestRectangle:
    def test_from_bounds(self) -> None:
        r = Rectangle.from_bounds(top=150.56, left=58.9, bottom=654.7, right=536.12)
        assert r.top == 150.56
        assert r.left == 58.9
        assert r.width == pytest.approx(477.22)
        assert r.height == pytest.approx(504.14)
        assert r.bottom == pytest.approx(654.7)
        assert r.right == pytest.approx(536.12)

    def test_inverted_bounds_keep_negative_size(self) -> None:
        r = Rectangle.from_bounds(top=100, left=200, bottom=50, right=150)
        assert r.width == -50
        assert r.height == -50
        assert r.is_inverted

    def test_frozen(self) -> None:
        r = Rectangle(top=0, left=0, width=1, height=1)
        with pytest.raises(ValidationError):
            r.top = 5


class TestResolveArea:
    def test_relative_half_page(self) -> None:
        spec = AreaSpec(mode=CoordinateMode.RELATIVE, rect=Rectangle.from_bounds(0, 0, 100, 50))
        page = FakePage(width=612, height=792)
        assert resolve_area(spec, page) == Rectangle(top=0, left=0, width=306, height=792)

    def test_relative_scales_each_axis(self) -> None:
        spec = AreaSpec(mode=CoordinateMode.RELATIVE, rect=Rectangle.from_bounds(10, 20, 60, 70))
        r = resolve_area(spec, FakePage(width=200, height=400))
        assert r.top == pytest.approx(40)
        assert r.left == pytest.approx(40)
        assert r.width == pytest.approx(100)
        assert r.height == pytest.approx(200)

    def test_absolute_unchanged_regardless_of_page(self) -> None:
        rect = Rectangle.from_bounds(0, 0, 451, 212)
        spec = AreaSpec(mode=CoordinateMode.ABSOLUTE, rect=rect)
        for page in (FakePage(width=612, height=792), FakePage(width=100, height=100)):
            resolved = resolve_area(spec, page)
            assert resolved == Rectangle(top=0, left=0, width=212, height=451)

    def test_relative_is_not_clamped(self) -> None:
        spec = AreaSpec(mode=CoordinateMode.RELATIVE, rect=Rectangle.from_bounds(-10, 0, 150, 100))
        r = resolve_area(spec, FakePage(width=100, height=200))
        assert r.top == pytest.approx(-20)
        assert r.height == pytest.approx(320)

    def test_depends_on_page_size(self) -> None:
        spec = AreaSpec(mode=CoordinateMode.RELATIVE, rect=Rectangle.from_bounds(0, 0, 100, 100))
        a = resolve_area(spec, FakePage(width=612, height=792))
        b = resolve_area(spec, FakePage(width=842, height=595))
        assert (a.width, a.height) == (612, 792)
        assert (b.width, b.height) == (842, 595)


class TestResolveColumns:
    def test_absolute(self) -> None:
        spec = ColumnSpec(positions=(59, 218, 331))
        assert resolve_columns(spec, FakePage(width=1000)) == [59, 218, 331]

    def test_relative_scales_by_width(self) -> None:
        spec = ColumnSpec(mode=CoordinateMode.RELATIVE, positions=(25, 50, 80))
        assert resolve_columns(spec, FakePage(width=200, height=999)) == pytest.approx([50, 100, 160])

    def test_requires_a_position(self) -> None:
        with pytest.raises(ValidationError):
            ColumnSpec(positions=())


class TestRuling:
    def test_vertical_endpoints(self) -> None:
        r = Ruling.vertical(100.0, top=0.0, height=792.0)
        assert r.endpoints == ((100.0, 0.0), (100.0, 792.0))
