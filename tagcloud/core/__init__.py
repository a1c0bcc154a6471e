"""Core modules for the tag cloud layouter.

- geometry: Point, Size and Rectangle value types
- overlap: stateless intersection and distance helpers
- spiral: Archimedean spiral candidate generator
- layouter: CircularCloudLayouter, the placement session
- builders: factories wiring a layouter from configuration
"""

from tagcloud.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    LayoutError,
    RenderError,
    TagCloudError,
)
from tagcloud.core.geometry import Point, Rectangle, Size
from tagcloud.core.overlap import (
    bounding_box,
    distance_from_center,
    intersects,
    intersects_any,
)
from tagcloud.core.spiral import Spiral
from tagcloud.core.layouter import CircularCloudLayouter
from tagcloud.core.builders import (
    create_layouter,
    create_layouter_from_config,
    layout_sizes,
)

__all__ = [
    # Exceptions
    "TagCloudError",
    "InvalidArgumentError",
    "ConfigurationError",
    "LayoutError",
    "RenderError",
    # Geometry
    "Point",
    "Size",
    "Rectangle",
    "intersects",
    "intersects_any",
    "distance_from_center",
    "bounding_box",
    # Placement
    "Spiral",
    "CircularCloudLayouter",
    # Builders
    "create_layouter",
    "create_layouter_from_config",
    "layout_sizes",
]
