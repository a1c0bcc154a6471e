"""Candidate point generator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from tagcloud.core.geometry import Point


class PointGenerator(ABC):
    """Infinite source of candidate rectangle centers.

    Generators are single-use: once a point has been produced it cannot be
    produced again by the same instance. Build a new generator to replay the
    sequence.
    """

    @property
    @abstractmethod
    def center(self) -> Point:
        """The point the sequence radiates from."""
        ...

    @abstractmethod
    def next_point(self) -> Point:
        """Return the next candidate and advance the internal state."""
        ...

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        return self.next_point()


# Builds a fresh generator rooted at the given center.
PointGeneratorFactory = Callable[["Point"], PointGenerator]
