"""Lasso selection of map tiles: path capture, simplification and fill."""

from tile_lasso.containment import point_in_polygon
from tile_lasso.raster import build_edge_table, scanline_fill
from tile_lasso.selection import LassoSelection
from tile_lasso.simplify import perpendicular_distance, rdp_keep_mask, simplify_path
from tile_lasso.types import BoundingBox, Edge, GridPoint, TilePosition

__version__ = "0.1.0"
__all__ = [
    "BoundingBox",
    "Edge",
    "GridPoint",
    "LassoSelection",
    "TilePosition",
    "build_edge_table",
    "perpendicular_distance",
    "point_in_polygon",
    "rdp_keep_mask",
    "scanline_fill",
    "simplify_path",
]
