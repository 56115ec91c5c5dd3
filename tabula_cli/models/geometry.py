"""Page geometry: rectangles, rulings and page-relative coordinate specs."""
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class CoordinateMode(str, Enum):
    """How the numbers of an area or column spec are interpreted."""

    ABSOLUTE = "absolute"  # page-space points
    RELATIVE = "relative"  # 0-100 percent of page width/height


class Rectangle(BaseModel):
    """Axis-aligned rectangle in page points, top-left origin.

    Width and height are not sign-checked: a rectangle built from bounds with
    ``bottom < top`` or ``right < left`` keeps its negative size.
    """

    model_config = ConfigDict(frozen=True)

    top: float
    left: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, top: float, left: float, bottom: float, right: float) -> "Rectangle":
        return cls(top=top, left=left, width=right - left, height=bottom - top)

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def is_inverted(self) -> bool:
        return self.width < 0 or self.height < 0


class Ruling(BaseModel):
    """A ruling line segment; vertical rulings have zero width."""

    model_config = ConfigDict(frozen=True)

    top: float
    left: float
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def vertical(cls, x: float, top: float, height: float) -> "Ruling":
        return cls(top=top, left=x, width=0.0, height=height)

    @property
    def endpoints(self) -> tuple[tuple[float, float], tuple[float, float]]:
        return (self.left, self.top), (self.left + self.width, self.top + self.height)


class AreaSpec(BaseModel):
    """An area as typed by the user, kept unresolved until a page is known."""

    model_config = ConfigDict(frozen=True)

    mode: CoordinateMode = CoordinateMode.ABSOLUTE
    rect: Rectangle


class ColumnSpec(BaseModel):
    """Column boundary x-positions as typed by the user."""

    model_config = ConfigDict(frozen=True)

    mode: CoordinateMode = CoordinateMode.ABSOLUTE
    positions: tuple[float, ...] = Field(..., min_length=1)


class PageSize(Protocol):
    width: float
    height: float


def _scale(value: float, extent: float, mode: CoordinateMode) -> float:
    if mode is CoordinateMode.RELATIVE:
        return value / 100 * extent
    return value


def resolve_area(spec: AreaSpec, page: PageSize) -> Rectangle:
    """Resolve *spec* to page points against this page's dimensions.

    Relative specs scale top/height by the page height and left/width by the
    page width. Nothing is clamped, so percentages outside 0-100 land outside
    the page. Call once per page: page sizes can differ within a document.
    """
    if spec.mode is CoordinateMode.ABSOLUTE:
        return spec.rect
    rect = spec.rect
    return Rectangle(
        top=_scale(rect.top, page.height, spec.mode),
        left=_scale(rect.left, page.width, spec.mode),
        width=_scale(rect.width, page.width, spec.mode),
        height=_scale(rect.height, page.height, spec.mode),
    )


def resolve_columns(spec: ColumnSpec, page: PageSize) -> list[float]:
    """Resolve column x-positions against the page width."""
    return [_scale(x, page.width, spec.mode) for x in spec.positions]
