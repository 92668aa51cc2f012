"""Point-in-polygon test for lasso outlines."""

from typing import Sequence

from tile_lasso.types import GridPoint


def point_in_polygon(x: float, y: float, polygon: Sequence[GridPoint]) -> bool:
    """Even-odd ray-casting test.

    The polygon is treated as closed whether or not its last point repeats
    the first. Polygons with fewer than 3 points contain nothing.
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside
