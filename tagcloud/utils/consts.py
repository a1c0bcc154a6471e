"""Default tuning values for the layouter."""


class LayoutDefaults:
    """Defaults used when no configuration overrides them."""

    ANGLE_STEP = 0.1
    """Radians the spiral turns per candidate."""

    RADIUS_STEP = 0.1
    """Distance the spiral moves outward per candidate."""

    COMPACTION_STEP = 1
    """Largest distance a rectangle is shifted per compaction move."""

    MAX_CANDIDATES = 1_000_000
    """Candidates examined per placement before giving up with LayoutError.
    With the default steps this covers a spiral radius of 100 000 units."""


def max_spiral_radius(radius_step: float, max_candidates: int) -> float:
    """Radius reached by the last candidate a capped search examines."""
    return radius_step * (max_candidates - 1)
