"""Six-dimensional poses and the hyperboxes used by the DIRECT search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Iterator


class Direction(IntEnum):
    """One of the six degrees of freedom of a pose."""

    X = 0
    Y = 1
    Z = 2
    XA = 3
    YA = 4
    ZA = 5

    @property
    def attribute(self) -> str:
        """Name of the matching :class:`Point6D` field."""
        return self.name.lower()


@dataclass(frozen=True)
class Point6D:
    """A pose: translation (x, y, z) and rotation angles (xa, ya, za)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    xa: float = 0.0
    ya: float = 0.0
    za: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, direction.attribute) for direction in Direction)

    def distance_from(self, other: Point6D) -> float:
        """Euclidean distance to ``other`` over all six components."""
        return math.dist(tuple(self), tuple(other))

    def largest_direction(self) -> Direction:
        """Direction holding the largest component; ties go to the first."""
        return max(Direction, key=self.get)

    def get(self, direction: Direction) -> float:
        """Component along ``direction``."""
        return getattr(self, Direction(direction).attribute)

    def with_direction(self, direction: Direction, value: float) -> Point6D:
        """Copy of this point with one component replaced."""
        return replace(self, **{Direction(direction).attribute: float(value)})


@dataclass
class HyperBox6D:
    """A box of the DIRECT search: sampled value, centre and side lengths."""

    value: float = 0.0
    center: Point6D = field(default_factory=Point6D)
    sides: Point6D = field(default_factory=Point6D)

    @property
    def size(self) -> float:
        """Distance from the centre to a vertex."""
        return 0.5 * math.sqrt(sum(side * side for side in self.sides))

    def contains_point(self, point: Point6D) -> bool:
        """True if ``point`` lies inside the box or on its boundary."""
        return all(
            abs(coordinate - centre) <= side / 2
            for coordinate, centre, side in zip(point, self.center, self.sides)
        )

    def trisect_side(self, direction: Direction) -> None:
        """Divide the side along ``direction`` into thirds, keeping the centre."""
        self.sides = self.sides.with_direction(direction, self.sides.get(direction) / 3)