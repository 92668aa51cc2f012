"""Advisory shape checks for closed lasso outlines.

A self-intersecting outline still fills deterministically under the even-odd
rule, but the result (alternating inside/outside lobes) is rarely what the
user drew on purpose. These checks only report; they never alter a path.
"""

import logging
from typing import Sequence

from shapely.errors import GEOSException
from shapely.geometry import LinearRing

from tile_lasso.types import GridPoint

logger = logging.getLogger(__name__)


def ring_simplicity(points: Sequence[GridPoint]) -> bool | None:
    """Classify the closed ring through ``points``.

    Returns:
        True for a simple ring, False for a self-intersecting one, and None
        when no ring can be built (fewer than 3 distinct vertices, or a
        GEOS failure).
    """
    if len(set(points)) < 3:
        return None
    try:
        return LinearRing(points).is_simple
    except (GEOSException, ValueError) as e:
        logger.warning("Failed to build lasso ring from %d points: %s", len(points), e)
        return None


def log_outline_warnings(points: Sequence[GridPoint]) -> None:
    """Log a debug note when a closed outline crosses itself."""
    simple = ring_simplicity(points)
    if simple is False:
        logger.debug(
            "Lasso outline with %d points self-intersects; even-odd fill applies",
            len(points),
        )
