"""Stateless intersection and distance helpers over rectangles."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from tagcloud.core.geometry import Point, Rectangle, Size


def intersects(a: Rectangle, b: Rectangle) -> bool:
    """Return True if the rectangles share an area of positive size.

    Rectangles that only touch along an edge or a corner do not intersect.
    """
    return (
        a.left < b.right
        and b.left < a.right
        and a.top < b.bottom
        and b.top < a.bottom
    )


def intersects_any(rect: Rectangle, others: Iterable[Rectangle]) -> bool:
    return any(intersects(rect, other) for other in others)


def distance_from_center(rect: Rectangle, center: Point) -> float:
    """Euclidean distance from the rectangle's center to ``center``."""
    rect_center = rect.center
    return math.hypot(rect_center.x - center.x, rect_center.y - center.y)


def bounding_box(rects: Sequence[Rectangle]) -> Optional[Rectangle]:
    """Smallest rectangle enclosing every rectangle in ``rects``.

    Returns None for an empty sequence.
    """
    if not rects:
        return None

    left = min(r.left for r in rects)
    top = min(r.top for r in rects)
    right = max(r.right for r in rects)
    bottom = max(r.bottom for r in rects)
    return Rectangle(Point(left, top), Size(right - left, bottom - top))
