"""
Rectangular decomposition of simple polygons.

Approximates a polygon with a small set of axis-aligned rectangles:
convex hull -> largest inscribed rectangle -> 3x3 grid clipped to the
polygon -> optional recursive refinement.  Planar area operations use
Shapely.
"""

from .decomposer import (
    RectangleDecomposer,
    construct,
    get_convex_hull,
    get_inscribed_rectangle,
    get_overlapping_rectangles,
    get_polygon,
)
from .errors import InvalidPolygon, InvalidPolygonError
from .geometry import Rectangle
from .hull import IncrementalHull, convex_hull
from .inscribed import largest_inscribed_rectangle
from .grid import build_grid, clip_to_polygon
from .subdivision import approximate, divide_rectangles

__all__ = [
    "RectangleDecomposer",
    "Rectangle",
    "IncrementalHull",
    "InvalidPolygon",
    "InvalidPolygonError",
    "approximate",
    "build_grid",
    "clip_to_polygon",
    "construct",
    "convex_hull",
    "divide_rectangles",
    "get_convex_hull",
    "get_inscribed_rectangle",
    "get_overlapping_rectangles",
    "get_polygon",
    "largest_inscribed_rectangle",
]
