"""Scanline fill of closed lasso polygons using an active edge table.

Each polygon edge is bucketed by the row it starts on. Sweeping down the
rows, edges enter the active list from their bucket, leave it on their
``y_max`` row, and have their x intersection advanced incrementally, so the
sweep never re-intersects every edge with every row.

Rows are half-open per edge (``[y_min, y_max)``) and spans use even-odd
pairing with ``ceil`` for the left intersection and ``floor`` for the right.
"""

import logging
import math
from typing import Sequence

from tile_lasso.types import BoundingBox, Edge, GridPoint, TilePosition

logger = logging.getLogger(__name__)


def build_edge_table(
    polygon: Sequence[GridPoint],
    min_y: int,
    height: int,
) -> list[list[Edge]]:
    """Bucket the polygon's non-horizontal edges by their starting row.

    Args:
        polygon: Closed polygon (last point repeats the first).
        min_y: Row of bucket 0.
        height: Number of buckets.

    Returns:
        ``height`` buckets; bucket ``i`` holds the edges whose lower y is
        ``min_y + i``. Edges starting outside the table are dropped.
    """
    table: list[list[Edge]] = [[] for _ in range(height)]

    for p1, p2 in zip(polygon, polygon[1:]):
        # Horizontal edges never cross a scanline at a single point
        if p1.y == p2.y:
            continue

        if p1.y < p2.y:
            y_min, y_max, x_at_y_min = p1.y, p2.y, float(p1.x)
        else:
            y_min, y_max, x_at_y_min = p2.y, p1.y, float(p2.x)

        inv_slope = (p2.x - p1.x) / (p2.y - p1.y)

        bucket = y_min - min_y
        if 0 <= bucket < height:
            table[bucket].append(Edge(y_max=y_max, x=x_at_y_min, inv_slope=inv_slope))

    return table


def scanline_fill(
    polygon: Sequence[GridPoint],
    floor: int,
    bounds: BoundingBox | None = None,
) -> set[TilePosition]:
    """Return every tile enclosed by a closed polygon, tagged with ``floor``.

    Args:
        polygon: Closed polygon (last point repeats the first).
        floor: Floor index attached to every produced tile. Not interpreted.
        bounds: Rows to sweep. Defaults to the polygon's own bounding box.

    Returns:
        The enclosed tiles. Empty for polygons with fewer than 3 points,
        polygons whose last point does not repeat the first, or an invalid
        bounding box.
    """
    if len(polygon) < 3 or polygon[0] != polygon[-1]:
        return set()

    if bounds is None:
        bounds = BoundingBox.from_points(polygon)
    if not bounds.is_valid():
        return set()

    min_y = bounds.min_y
    max_y = bounds.max_y
    edge_table = build_edge_table(polygon, min_y, max_y - min_y + 1)

    tiles: set[TilePosition] = set()
    active: list[Edge] = []

    for y in range(min_y, max_y + 1):
        active.extend(edge_table[y - min_y])

        # An edge covers [y_min, y_max); drop it on its end row
        active = [edge for edge in active if edge.y_max != y]
        if not active:
            continue

        active.sort(key=lambda edge: edge.x)

        for left, right in zip(active[::2], active[1::2]):
            x_start = math.ceil(left.x)
            x_end = math.floor(right.x)
            for x in range(x_start, x_end + 1):
                tiles.add(TilePosition(x, y, floor))

        for edge in active:
            edge.step()

    logger.debug(
        "Filled %d tiles over rows %d..%d on floor %d", len(tiles), min_y, max_y, floor
    )
    return tiles
