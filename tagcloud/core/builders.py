"""Utilities for building layouters from configuration.

These factories wire a CircularCloudLayouter from a LayoutConfig so callers
do not repeat the mapping between config sections and constructor arguments.
"""

from __future__ import annotations

from typing import Iterable, Optional

from tagcloud.core.geometry import Point, Rectangle, Size
from tagcloud.core.layouter import CircularCloudLayouter
from tagcloud.utils.config_loader import LayoutConfig, get_config


def create_layouter_from_config(
    config: LayoutConfig, center: Optional[Point] = None
) -> CircularCloudLayouter:
    """Create a layouter from a layout configuration.

    Args:
        config: Validated layout configuration
        center: Overrides ``config.center`` when given

    Returns:
        A fresh layout session
    """
    return CircularCloudLayouter(
        center if center is not None else config.center,
        angle_step=config.spiral.angle_step,
        radius_step=config.spiral.radius_step,
        compact=config.compaction.enabled,
        compaction_step=config.compaction.step,
        max_candidates=config.search.max_candidates,
    )


def create_layouter(
    center: Optional[Point] = None, config_path: Optional[str] = None
) -> CircularCloudLayouter:
    """Create a layouter from the YAML config at config_path (or the bundled one)."""
    return create_layouter_from_config(get_config(config_path), center=center)


def layout_sizes(
    sizes: Iterable[Size],
    center: Optional[Point] = None,
    config: Optional[LayoutConfig] = None,
) -> tuple[Rectangle, ...]:
    """Lay out a whole sequence of sizes in a fresh session."""
    if config is None:
        layouter = create_layouter(center)
    else:
        layouter = create_layouter_from_config(config, center=center)

    layouter.put_rectangles(list(sizes))
    return layouter.rectangles
