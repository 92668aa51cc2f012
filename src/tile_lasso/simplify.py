"""Ramer-Douglas-Peucker simplification of lasso paths.

The simplified path is the polygon used both for drawing the closed lasso
and for filling it, so it is computed once per closed gesture rather than
on every pointer sample.
"""

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from tile_lasso.types import GridPoint


def perpendicular_distance(
    point: GridPoint,
    line_start: GridPoint,
    line_end: GridPoint,
) -> float:
    """Distance from ``point`` to the infinite line through the chord.

    A zero-length chord falls back to the distance between ``point`` and
    ``line_start``.
    """
    dx = float(line_end.x - line_start.x)
    dy = float(line_end.y - line_start.y)

    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return point.distance_to(line_start)

    cross = abs((point.x - line_start.x) * dy - (point.y - line_start.y) * dx)
    return cross / math.sqrt(length_sq)


def _farthest_interior_point(
    coords: NDArray[np.float64],
    start: int,
    end: int,
) -> tuple[int, float]:
    """Index and distance of the interior point farthest from chord (start, end).

    Vectorised form of :func:`perpendicular_distance` over ``start+1 .. end-1``.
    Ties resolve to the lowest index.
    """
    sx, sy = coords[start]
    ex, ey = coords[end]
    interior = coords[start + 1 : end]
    px = interior[:, 0] - sx
    py = interior[:, 1] - sy

    dx = ex - sx
    dy = ey - sy
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        distances = np.sqrt(px * px + py * py)
    else:
        distances = np.abs(px * dy - py * dx) / math.sqrt(length_sq)

    offset = int(np.argmax(distances))
    return start + 1 + offset, float(distances[offset])


def rdp_keep_mask(points: Sequence[GridPoint], epsilon: float) -> list[bool]:
    """Mark the points an RDP pass over ``points`` retains.

    First and last points are always kept. A range whose farthest interior
    point lies strictly more than ``epsilon`` from its chord is split at that
    point; otherwise all its interior points are dropped. Ranges are handled
    from an explicit stack so very long paths cannot exhaust the recursion
    limit.
    """
    n = len(points)
    keep = [False] * n
    if n == 0:
        return keep

    keep[0] = True
    keep[n - 1] = True
    if n < 3:
        return keep

    coords = np.asarray(points, dtype=np.float64)
    stack: list[tuple[int, int]] = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        index, max_dist = _farthest_interior_point(coords, start, end)
        if max_dist > epsilon:
            keep[index] = True
            stack.append((index, end))
            stack.append((start, index))

    return keep


def simplify_path(points: Sequence[GridPoint], epsilon: float = 0.5) -> list[GridPoint]:
    """Simplify a path, preserving order and both endpoints.

    Paths with fewer than 3 points are returned unchanged (as a new list).
    """
    if len(points) < 3:
        return list(points)

    keep = rdp_keep_mask(points, epsilon)
    return [p for p, kept in zip(points, keep) if kept]
