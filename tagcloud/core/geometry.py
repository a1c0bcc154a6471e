"""Immutable 2-D geometry primitives used by the layouter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width and height of a tag's bounding box.

    A Size can hold any numbers; the layouter rejects non-positive ones.
    """

    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box anchored at its top-left corner.

    The y axis points down (screen coordinates), so ``bottom > top``.
    """

    location: Point
    size: Size

    @classmethod
    def from_center(cls, center: Point, size: Size) -> Rectangle:
        """Build the rectangle whose ``center`` property equals ``center``."""
        location = Point(center.x - size.width // 2, center.y - size.height // 2)
        return cls(location, size)

    @property
    def left(self) -> float:
        return self.location.x

    @property
    def top(self) -> float:
        return self.location.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def right(self) -> float:
        return self.location.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.location.y + self.size.height

    @property
    def center(self) -> Point:
        # Floor division keeps integer rectangles on the integer grid.
        return Point(self.left + self.width // 2, self.top + self.height // 2)

    def moved(self, dx: float, dy: float) -> Rectangle:
        return Rectangle(self.location.offset(dx, dy), self.size)
