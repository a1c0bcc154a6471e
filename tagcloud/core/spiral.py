"""Archimedean spiral producing candidate centers for the layouter."""

from __future__ import annotations

import math

from tagcloud.core.exceptions import InvalidArgumentError
from tagcloud.core.geometry import Point
from tagcloud.interfaces.point_generator import PointGenerator


class Spiral(PointGenerator):
    """Infinite sequence of points spiraling outward from ``center``.

    At step ``i`` the angle is ``i * angle_step`` and the radius is
    ``i * radius_step``, so the first point is the center itself and the
    radius grows on every step.
    """

    def __init__(self, center: Point, angle_step: float, radius_step: float):
        # "not x > 0" also rejects NaN
        if not angle_step > 0 or not math.isfinite(angle_step):
            raise InvalidArgumentError(
                "angle_step", angle_step, "Spiral angle step must be positive and finite"
            )
        if not radius_step > 0 or not math.isfinite(radius_step):
            raise InvalidArgumentError(
                "radius_step", radius_step, "Spiral radius step must be positive and finite"
            )

        self._center = center
        self._angle_step = angle_step
        self._radius_step = radius_step
        self._steps = 0

    @property
    def center(self) -> Point:
        return self._center

    @property
    def angle_step(self) -> float:
        return self._angle_step

    @property
    def radius_step(self) -> float:
        return self._radius_step

    @property
    def steps(self) -> int:
        """Number of points produced so far."""
        return self._steps

    @property
    def angle(self) -> float:
        """Angle of the next point, in radians."""
        return self._steps * self._angle_step

    @property
    def radius(self) -> float:
        """Distance of the next point from the center."""
        return self._steps * self._radius_step

    def next_point(self) -> Point:
        angle = self.angle
        radius = self.radius
        self._steps += 1
        return Point(
            self._center.x + radius * math.cos(angle),
            self._center.y + radius * math.sin(angle),
        )

    def __repr__(self) -> str:
        return (
            f"Spiral(center={self._center!r}, angle_step={self._angle_step}, "
            f"radius_step={self._radius_step}, steps={self._steps})"
        )
