"""Pytest configuration and fixtures for lasso tests."""

import pytest

from tile_lasso import GridPoint, LassoSelection


def _make_polygon(*coords: tuple[int, int]) -> list[GridPoint]:
    """Build a closed polygon from (x, y) pairs."""
    points = [GridPoint(x, y) for x, y in coords]
    if points and points[0] != points[-1]:
        points.append(points[0])
    return points


@pytest.fixture
def square_polygon():
    """Closed 3x3 square with corners (0,0) and (3,3)."""
    return _make_polygon((0, 0), (0, 3), (3, 3), (3, 0))


@pytest.fixture
def closed_square():
    """Session traced around the 3x3 square one tile at a time, then closed."""
    lasso = LassoSelection(min_point_distance=0.5, simplify_tolerance=0.5)
    lasso.active = True
    outline = (
        [(0, y) for y in range(0, 4)]
        + [(x, 3) for x in range(1, 4)]
        + [(3, y) for y in range(2, -1, -1)]
        + [(x, 0) for x in range(2, 0, -1)]
    )
    for x, y in outline:
        lasso.add_point(x, y)
    lasso.close_path()
    return lasso
