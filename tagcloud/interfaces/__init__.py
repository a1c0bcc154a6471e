"""Interface abstractions for the tag cloud layouter.

Defines behavioral contracts that implementations must satisfy:
- CloudLayouter: a layout session placing rectangles one at a time
- PointGenerator: an infinite source of candidate centers (e.g. a spiral)
"""

from tagcloud.interfaces.layouter import CloudLayouter
from tagcloud.interfaces.point_generator import PointGenerator, PointGeneratorFactory

__all__ = [
    "CloudLayouter",
    "PointGenerator",
    "PointGeneratorFactory",
]
