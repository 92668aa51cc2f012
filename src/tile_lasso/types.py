"""Type definitions for lasso selection geometry."""

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple


class GridPoint(NamedTuple):
    """A single point of a lasso path in tile coordinates."""

    x: int
    y: int

    def distance_to(self, other: "GridPoint") -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: "GridPoint") -> float:
        """Squared distance to another point (no square root)."""
        dx = float(self.x - other.x)
        dy = float(self.y - other.y)
        return dx * dx + dy * dy


class TilePosition(NamedTuple):
    """A selected tile on a given floor."""

    x: int
    y: int
    z: int


@dataclass
class BoundingBox:
    """Axis-aligned bounds of every point added so far.

    Bounds are only meaningful once ``has_points`` is set. They are kept
    up to date one point at a time by :meth:`expand`.
    """

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0
    has_points: bool = False

    @classmethod
    def from_points(cls, points: Iterable[tuple[int, int]]) -> "BoundingBox":
        """Build a bounding box covering the given points."""
        bbox = cls()
        for x, y in points:
            bbox.expand(x, y)
        return bbox

    def reset(self) -> None:
        """Return to the empty state."""
        self.min_x = self.min_y = 0
        self.max_x = self.max_y = 0
        self.has_points = False

    def expand(self, x: int, y: int) -> None:
        """Grow the box to include (x, y)."""
        if not self.has_points:
            # First point initialises all four bounds
            self.min_x = self.max_x = x
            self.min_y = self.max_y = y
            self.has_points = True
            return

        if x < self.min_x:
            self.min_x = x
        elif x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        elif y > self.max_y:
            self.max_y = y

    def contains(self, x: float, y: float) -> bool:
        """Inclusive containment test. Always False for an empty box."""
        if not self.has_points:
            return False
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def is_valid(self) -> bool:
        return self.has_points and self.min_x <= self.max_x and self.min_y <= self.max_y

    @property
    def width(self) -> int:
        return self.max_x - self.min_x if self.has_points else 0

    @property
    def height(self) -> int:
        return self.max_y - self.min_y if self.has_points else 0


@dataclass
class Edge:
    """A polygon edge in the active edge table.

    ``x`` is the intersection with the current scanline and advances by
    ``inv_slope`` (dx/dy) for each row. The edge stops contributing on
    row ``y_max``.
    """

    y_max: int
    x: float
    inv_slope: float

    def step(self) -> None:
        self.x += self.inv_slope
