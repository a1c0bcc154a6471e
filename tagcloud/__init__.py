"""Circular tag cloud layouter.

Places tag bounding boxes one at a time into a dense, non-overlapping,
roughly circular cluster around a fixed center.

Getting started:
    from tagcloud import CircularCloudLayouter, Point, Size

    layouter = CircularCloudLayouter(Point(720, 720))
    first = layouter.put_next_rectangle(Size(80, 20))
    second = layouter.put_next_rectangle(Size(40, 16))
    layouter.rectangles  # both, in placement order
"""

from tagcloud.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    LayoutError,
    RenderError,
    TagCloudError,
)
from tagcloud.core.geometry import Point, Rectangle, Size
from tagcloud.core.spiral import Spiral
from tagcloud.core.layouter import CircularCloudLayouter
from tagcloud.core.builders import create_layouter, create_layouter_from_config, layout_sizes
from tagcloud.interfaces.layouter import CloudLayouter
from tagcloud.interfaces.point_generator import PointGenerator
from tagcloud.utils.config_loader import LayoutConfig, get_config, load_config

__all__ = [
    "TagCloudError",
    "InvalidArgumentError",
    "ConfigurationError",
    "LayoutError",
    "RenderError",
    "Point",
    "Size",
    "Rectangle",
    "Spiral",
    "CloudLayouter",
    "PointGenerator",
    "CircularCloudLayouter",
    "create_layouter",
    "create_layouter_from_config",
    "layout_sizes",
    "LayoutConfig",
    "load_config",
    "get_config",
]
