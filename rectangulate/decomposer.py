"""
Rectangular decomposition of a single polygon.

A ``RectangleDecomposer`` is built once per polygon.  The convex hull is
computed eagerly; the edge model, inscribed rectangle, grid candidates
and clipped rectangles are computed on first access and cached for the
lifetime of the instance.
"""

import logging
from functools import cached_property
from typing import List

from shapely.geometry.base import BaseGeometry

from .config import MIN_ASPECT_RATIO
from .errors import InvalidPolygonError
from .geometry import (
    Polygon,
    Rectangle,
    as_points,
    bounding_box,
    round_half_up,
    to_shapely,
)
from .grid import build_grid, clip_to_polygon
from .hull import IncrementalHull, convex_hull
from .inscribed import largest_inscribed_rectangle

logger = logging.getLogger(__name__)


class RectangleDecomposer:
    """
    Approximates a polygon with up to nine axis-aligned rectangles.

    Parameters
    ----------
    polygon : sequence of (x, y) pairs, numpy array or shapely Polygon
        Simple polygon, closed implicitly.  Kept as given.
    min_aspect_ratio : float
        Threshold below which thin border cells of the grid are merged.

    Raises
    ------
    InvalidPolygonError
        If the polygon has no vertices or a vertex is not a numeric pair.
    """

    def __init__(self, polygon, min_aspect_ratio: float = MIN_ASPECT_RATIO):
        self._polygon = polygon
        self.points: Polygon = as_points(polygon)
        if not self.points:
            raise InvalidPolygonError("Cannot build a convex hull from zero points")
        self.min_aspect_ratio = min_aspect_ratio

        self._convex_hull: Polygon = [
            (round_half_up(x), round_half_up(y))
            for x, y in convex_hull(self.points)
        ]
        # Working hull re-seeded through tangent insertion.
        self._hull = IncrementalHull(self._convex_hull)
        logger.debug("Convex hull of %d vertices has %d points",
                     len(self.points), len(self._hull))

    # ---- inputs and hull ---------------------------------------------------

    @property
    def polygon(self):
        """The polygon this instance was built from, unmodified."""
        return self._polygon

    @property
    def convex_hull(self) -> Polygon:
        return list(self._convex_hull)

    @property
    def hull_points(self) -> Polygon:
        """Vertices of the incrementally built working hull."""
        return list(self._hull.points)

    @cached_property
    def shape(self) -> BaseGeometry:
        """The input polygon as a valid Shapely geometry, used for clipping."""
        return to_shapely(self.points)

    @cached_property
    def extent(self) -> Rectangle:
        """Integer bounding box of the input polygon."""
        return bounding_box(self.points)

    # ---- decomposition -----------------------------------------------------

    @cached_property
    def inscribed_rectangle(self) -> Rectangle:
        """Largest rectangle inside the hull; zero-area if none fits."""
        return largest_inscribed_rectangle(self._hull.points)

    @cached_property
    def grid_rectangles(self) -> List[Rectangle]:
        """Grid candidates around the inscribed rectangle, before clipping."""
        return build_grid(self.inscribed_rectangle, self.extent,
                          self.min_aspect_ratio)

    @cached_property
    def overlapping_rectangles(self) -> List[Rectangle]:
        """Grid candidates clipped to the polygon, as bounding boxes."""
        return clip_to_polygon(self.grid_rectangles, self.shape)

    def to_dict(self) -> dict:
        """Serialize the decomposition to a dictionary."""
        return {
            "polygon": [list(p) for p in self.points],
            "convex_hull": [list(p) for p in self._convex_hull],
            "inscribed_rectangle": self.inscribed_rectangle.to_dict(),
            "rectangles": [r.to_dict() for r in self.overlapping_rectangles],
        }

    def __repr__(self) -> str:
        return (
            f"RectangleDecomposer(vertices={len(self.points)}, "
            f"hull={len(self._convex_hull)})"
        )


# ---------------------------------------------------------------------------
# Functional interface
# ---------------------------------------------------------------------------

def construct(polygon,
              min_aspect_ratio: float = MIN_ASPECT_RATIO) -> RectangleDecomposer:
    """Build a decomposition handle for *polygon*."""
    return RectangleDecomposer(polygon, min_aspect_ratio=min_aspect_ratio)


def get_polygon(handle: RectangleDecomposer):
    return handle.polygon


def get_convex_hull(handle: RectangleDecomposer) -> Polygon:
    return handle.convex_hull


def get_inscribed_rectangle(handle: RectangleDecomposer) -> Rectangle:
    return handle.inscribed_rectangle


def get_overlapping_rectangles(handle: RectangleDecomposer) -> List[Rectangle]:
    return list(handle.overlapping_rectangles)
