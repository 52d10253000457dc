"""Geometry primitives and helpers for page layout calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

from reportlab.lib.pagesizes import A4, LETTER

from ..exceptions import GeometryError


DEFAULT_MARGIN = 50.0

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "LETTER": LETTER,
    "A4": A4,
}

# A freshly added page without an explicit size is US Letter.
DEFAULT_PAGE_SIZE = "LETTER"


@dataclass(slots=True)
class Point:
    x: float
    y: float


@dataclass(slots=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Size":
        width, height = value
        return cls(float(width), float(height))


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page canvas dimensions in points with a uniform margin.

    Coordinates follow PDF conventions: origin in the lower left corner,
    y growing upwards.
    """

    width: float
    height: float
    margin: float = DEFAULT_MARGIN

    def __post_init__(self):
        for name in ("width", "height", "margin"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise GeometryError(f"Page {name} must be a finite number", repr(value))
        if self.width <= 0 or self.height <= 0:
            raise GeometryError(
                "Page dimensions must be positive",
                f"width={self.width}, height={self.height}",
            )
        if self.margin < 0 or self.margin >= min(self.width, self.height) / 2:
            raise GeometryError(
                "Margin must be non-negative and smaller than half the shorter page side",
                f"margin={self.margin}, page={self.width}x{self.height}",
            )

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def content_width(self) -> float:
        """Width available between the left and right margins."""
        return self.width - 2 * self.margin

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


def ensure_page_size(page_size: Union[str, Size, Iterable[float]]) -> Tuple[float, float]:
    if isinstance(page_size, Size):
        return float(page_size.width), float(page_size.height)

    if isinstance(page_size, str):
        preset = PAGE_SIZES.get(page_size.upper())
        if preset:
            return float(preset[0]), float(preset[1])
        raise GeometryError(f"Unsupported page size preset: {page_size}")

    values = list(page_size)
    if len(values) != 2:
        raise GeometryError("Page size iterable must contain exactly two values")
    return float(values[0]), float(values[1])


def page_geometry(
    page_size: Union[str, Size, Iterable[float]] = DEFAULT_PAGE_SIZE,
    margin: float = DEFAULT_MARGIN,
) -> PageGeometry:
    """Create the geometry of a blank page.

    Args:
        page_size: Preset name (``"LETTER"``, ``"A4"``), ``Size`` or a
            ``(width, height)`` pair in points
        margin: Uniform margin in points

    Returns:
        PageGeometry for the new page
    """
    width, height = ensure_page_size(page_size)
    return PageGeometry(width=width, height=height, margin=float(margin))
