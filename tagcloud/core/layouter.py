"""Circular cloud layouter.

Places rectangles one at a time around a fixed center so that together they
form a dense, roughly circular cluster:

1. Candidate centers are drawn from an outward spiral until one yields a
   rectangle that intersects nothing placed so far.
2. The accepted rectangle is then compacted: it is shifted toward the center
   one axis at a time, by at most ``compaction_step`` per move, and each move
   is kept only if it introduces no intersection. Moves never overshoot the
   center on either axis, so every kept move strictly reduces the distance to
   the center. Compaction stops when neither axis can move.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from tagcloud.core.exceptions import InvalidArgumentError, LayoutError
from tagcloud.core.geometry import Point, Rectangle, Size
from tagcloud.core.overlap import intersects_any
from tagcloud.core.spiral import Spiral
from tagcloud.interfaces.layouter import CloudLayouter
from tagcloud.interfaces.point_generator import PointGenerator, PointGeneratorFactory
from tagcloud.utils.consts import LayoutDefaults, max_spiral_radius

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: float) -> None:
    if not value > 0 or not math.isfinite(value):
        raise InvalidArgumentError(name, value, f"{name} must be positive and finite")


class CircularCloudLayouter(CloudLayouter):
    """One layout session.

    Not thread-safe: ``put_next_rectangle`` must be called serially.
    """

    def __init__(
        self,
        center: Point,
        *,
        angle_step: float = LayoutDefaults.ANGLE_STEP,
        radius_step: float = LayoutDefaults.RADIUS_STEP,
        compact: bool = True,
        compaction_step: float = LayoutDefaults.COMPACTION_STEP,
        max_candidates: int = LayoutDefaults.MAX_CANDIDATES,
        point_generator_factory: Optional[PointGeneratorFactory] = None,
    ):
        _require_positive("angle_step", angle_step)
        _require_positive("radius_step", radius_step)
        _require_positive("compaction_step", compaction_step)
        _require_positive("max_candidates", max_candidates)

        self._center = center
        self._angle_step = angle_step
        self._radius_step = radius_step
        self._compact = compact
        self._compaction_step = compaction_step
        self._max_candidates = max_candidates
        self._point_generator_factory = point_generator_factory or self._make_spiral
        self._rectangles: list[Rectangle] = []

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        return tuple(self._rectangles)

    def _make_spiral(self, center: Point) -> PointGenerator:
        return Spiral(center, self._angle_step, self._radius_step)

    def put_next_rectangle(self, size: Size) -> Rectangle:
        if not size.is_valid:
            raise InvalidArgumentError(
                "size",
                size,
                f"Rectangle size must be positive, got {size.width}x{size.height}",
            )

        rect, examined = self._find_free_rectangle(size)
        shifts = 0
        if self._compact:
            rect, shifts = self._compact_toward_center(rect)

        self._rectangles.append(rect)
        logger.debug(
            f"Placed #{len(self._rectangles)} {size.width}x{size.height} at "
            f"({rect.left}, {rect.top}) after {examined} candidates, {shifts} shifts"
        )
        return rect

    def _snap(self, point: Point) -> Point:
        # Round the offset, not the point, so step 0 lands exactly on center.
        return self._center.offset(
            round(point.x - self._center.x), round(point.y - self._center.y)
        )

    def _find_free_rectangle(self, size: Size) -> tuple[Rectangle, int]:
        generator = self._point_generator_factory(self._center)
        for examined in range(1, self._max_candidates + 1):
            candidate = Rectangle.from_center(self._snap(generator.next_point()), size)
            if not intersects_any(candidate, self._rectangles):
                return candidate, examined

        logger.warning(
            f"No free position for {size.width}x{size.height} within "
            f"{self._max_candidates} candidates "
            f"(spiral radius {max_spiral_radius(self._radius_step, self._max_candidates)})"
        )
        raise LayoutError(
            f"Could not place {size.width}x{size.height} rectangle",
            candidates=self._max_candidates,
            details={"placed": len(self._rectangles)},
        )

    def _shift_toward_center(self, rect: Rectangle, axis: str) -> Rectangle:
        if axis == "x":
            delta = self._center.x - rect.center.x
        else:
            delta = self._center.y - rect.center.y
        step = min(self._compaction_step, abs(delta))
        if delta < 0:
            step = -step
        if axis == "x":
            return rect.moved(step, 0)
        return rect.moved(0, step)

    def _compact_toward_center(self, rect: Rectangle) -> tuple[Rectangle, int]:
        start = rect.center
        distance = abs(self._center.x - start.x) + abs(self._center.y - start.y)
        # Each kept move covers compaction_step, or closes an axis entirely.
        max_shifts = math.ceil(distance / self._compaction_step) + 2

        shifts = 0
        moved = True
        while moved and shifts < max_shifts:
            moved = False
            for axis in ("x", "y"):
                shifted = self._shift_toward_center(rect, axis)
                if shifted == rect or intersects_any(shifted, self._rectangles):
                    continue
                rect = shifted
                shifts += 1
                moved = True

        return rect, shifts

    def __repr__(self) -> str:
        return (
            f"CircularCloudLayouter(center={self._center!r}, "
            f"placed={len(self._rectangles)})"
        )
