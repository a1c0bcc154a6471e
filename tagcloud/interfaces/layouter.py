"""Cloud layouter abstraction - behavioral contract.

A layouter is one layout session: it accepts tag sizes one at a time and
returns where each tag's bounding box was placed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagcloud.core.geometry import Point, Rectangle, Size


class CloudLayouter(ABC):
    """Base class for tag cloud layouters.

    Implementations must keep every placed rectangle disjoint from every
    other one and must return rectangles of exactly the requested size.
    """

    @property
    @abstractmethod
    def center(self) -> Point:
        """The fixed point the cloud is built around."""
        ...

    @property
    @abstractmethod
    def rectangles(self) -> tuple[Rectangle, ...]:
        """Placed rectangles in placement order (read-only snapshot)."""
        ...

    @abstractmethod
    def put_next_rectangle(self, size: Size) -> Rectangle:
        """Place a rectangle of the given size and return it."""
        ...

    def put_rectangles(self, sizes: list[Size]) -> list[Rectangle]:
        """Place every size in order.

        Each placement is atomic on its own; if a size is rejected the
        rectangles placed before it stay in the session.
        """
        return [self.put_next_rectangle(size) for size in sizes]

    def __len__(self) -> int:
        return len(self.rectangles)
