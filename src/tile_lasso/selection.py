"""Lasso capture session: from pointer samples to selected tiles.

A session is created empty, receives points while the user drags, is closed
once when the gesture ends, and can then be filled or hit-tested any number
of times until it is cleared.

The simplified path is a cache derived from the raw path. Adding a point
marks it stale; only :meth:`LassoSelection.simplify_path` (run by
:meth:`LassoSelection.close_path`) refreshes it. While stale, drawing code
should use :attr:`LassoSelection.render_path`, which falls back to the raw
path.
"""

import logging

from tile_lasso.config import settings
from tile_lasso.containment import point_in_polygon
from tile_lasso.diagnostics import log_outline_warnings
from tile_lasso.raster import scanline_fill
from tile_lasso.simplify import simplify_path
from tile_lasso.types import BoundingBox, GridPoint, TilePosition

logger = logging.getLogger(__name__)


class LassoSelection:
    """Collects a free-hand outline and converts it to a set of tiles."""

    def __init__(
        self,
        min_point_distance: float | None = None,
        simplify_tolerance: float | None = None,
    ) -> None:
        self._path: list[GridPoint] = []
        self._simplified_path: list[GridPoint] = []
        self._simplified_dirty = False
        self._bounding_box = BoundingBox()
        self._active = False
        self._closed = False

        self._min_point_distance = 0.0
        self._min_point_distance_sq = 0.0
        self._simplify_tolerance = 0.0
        self.set_min_point_distance(
            settings.min_point_distance if min_point_distance is None else min_point_distance
        )
        self.set_simplify_tolerance(
            settings.simplify_tolerance if simplify_tolerance is None else simplify_tolerance
        )

    # --- Configuration ---

    @property
    def min_point_distance(self) -> float:
        return self._min_point_distance

    def set_min_point_distance(self, distance: float) -> None:
        """Set the minimum spacing between accepted points (in tiles)."""
        if distance < 0:
            raise ValueError(f"min_point_distance must be >= 0, got {distance}")
        self._min_point_distance = distance
        self._min_point_distance_sq = distance * distance

    @property
    def simplify_tolerance(self) -> float:
        return self._simplify_tolerance

    def set_simplify_tolerance(self, tolerance: float) -> None:
        """Set the RDP epsilon used when the path is closed (in tiles)."""
        if tolerance < 0:
            raise ValueError(f"simplify_tolerance must be >= 0, got {tolerance}")
        self._simplify_tolerance = tolerance

    # --- Session state ---

    @property
    def active(self) -> bool:
        """Whether a gesture is in progress. Set by the input layer."""
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def path(self) -> list[GridPoint]:
        """Raw accepted points, in drawing order."""
        return self._path

    @property
    def simplified_path(self) -> list[GridPoint]:
        """Last computed simplified path. Only authoritative when ``is_simplified``."""
        return self._simplified_path

    @property
    def is_simplified(self) -> bool:
        return bool(self._simplified_path) and not self._simplified_dirty

    @property
    def render_path(self) -> list[GridPoint]:
        """Path to draw: the simplified path when current, else the raw path."""
        return self._simplified_path if self.is_simplified else self._path

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bounding_box

    def _polygon(self) -> list[GridPoint]:
        return self._simplified_path if self.is_simplified else self._path

    # --- Path management ---

    def clear(self) -> None:
        """Discard the session: empty paths and bounds, inactive and open."""
        self._path.clear()
        self._simplified_path.clear()
        self._simplified_dirty = False
        self._bounding_box.reset()
        self._active = False
        self._closed = False

    def add_point(self, x: int, y: int) -> None:
        """Append a sample unless it is too close to the last accepted point.

        A closed lasso is frozen; samples are ignored until :meth:`clear`.
        """
        if self._closed:
            return

        point = GridPoint(x, y)

        if self._path and self._path[-1].distance_squared_to(point) < self._min_point_distance_sq:
            return

        self._path.append(point)
        self._bounding_box.expand(x, y)
        self._simplified_dirty = True

    def close_path(self) -> None:
        """Finish the gesture.

        Paths with fewer than 3 points carry no selection and reset the
        session. Otherwise the first point is repeated at the end (unless it
        already is the last point) and the path is simplified once.
        """
        if len(self._path) < 3:
            logger.debug("Discarding lasso with %d points", len(self._path))
            self.clear()
            return

        if self._path[0] != self._path[-1]:
            self._path.append(self._path[0])

        self._closed = True
        self.simplify_path()

        logger.debug(
            "Closed lasso: %d raw points, %d after simplification",
            len(self._path),
            len(self._simplified_path),
        )
        log_outline_warnings(self._simplified_path)

    def simplify_path(self) -> None:
        """Recompute the simplified path from the raw path."""
        self._simplified_path = simplify_path(self._path, self._simplify_tolerance)
        self._simplified_dirty = False

    # --- Queries ---

    def get_tiles_in_polygon(self, floor: int) -> set[TilePosition]:
        """Tiles enclosed by the closed lasso on ``floor``.

        Returns an empty set unless the path has been closed.
        """
        if not self._closed or len(self._path) < 3:
            return set()
        if not self._bounding_box.is_valid():
            return set()

        return scanline_fill(self._polygon(), floor, self._bounding_box)

    def contains(self, x: float, y: float) -> bool:
        """Hit-test a single coordinate without filling the polygon."""
        # Nothing outside the bounds can have odd crossing parity
        if not self._bounding_box.contains(x, y):
            return False
        return point_in_polygon(x, y, self._polygon())
