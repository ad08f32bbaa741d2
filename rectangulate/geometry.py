"""
Geometry primitives shared by the decomposition pipeline.

Points are plain ``(x, y)`` tuples, polygons are ordered point lists
(closed implicitly), and rectangles are integer ``Rectangle`` tuples.
Planar area operations are delegated to Shapely.
"""

import logging
import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon, box
from shapely.geometry.base import BaseGeometry
from shapely.validation import explain_validity, make_valid

from .errors import InvalidPolygonError

logger = logging.getLogger(__name__)


Point = Tuple[float, float]
Polygon = List[Point]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def aspect_ratio(a: float, b: float) -> float:
    """Ratio of the shorter to the longer of two extents, in [0, 1]."""
    longer = max(a, b)
    if longer <= 0:
        return 0.0
    return min(a, b) / longer


class Rectangle(NamedTuple):
    """Axis-aligned integer rectangle ``(x, y, width, height)``."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Bounding box in Shapely order (minx, miny, maxx, maxy)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def polygon(self) -> ShapelyPolygon:
        """The rectangle as a Shapely box."""
        return box(*self.bounds)

    def translate(self, dx: int, dy: int) -> "Rectangle":
        return self._replace(x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_bounds(cls, minx: float, miny: float,
                    maxx: float, maxy: float) -> "Rectangle":
        """
        Smallest integer rectangle enclosing the given bounds.

        Minimums are floored and maximums ceiled, so a clipped area with
        fractional vertices is never cut short.
        """
        x0, y0 = math.floor(minx), math.floor(miny)
        x1, y1 = math.ceil(maxx), math.ceil(maxy)
        return cls(int(x0), int(y0), int(x1 - x0), int(y1 - y0))


# ---------------------------------------------------------------------------
# Polygon helpers
# ---------------------------------------------------------------------------

def as_points(polygon) -> Polygon:
    """
    Coerce a polygon into a list of float ``(x, y)`` tuples.

    Accepts a Shapely ``Polygon`` (its exterior ring, closing vertex
    dropped), a numpy ``(N, 2)`` array, or any iterable of pairs.

    Raises
    ------
    InvalidPolygonError
        If a vertex is not a pair of finite numbers.
    """
    if isinstance(polygon, ShapelyPolygon):
        if polygon.is_empty:
            return []
        coords: Iterable = [c[:2] for c in list(polygon.exterior.coords)[:-1]]
    else:
        coords = polygon

    try:
        points = [(float(x), float(y)) for x, y in coords]
    except (TypeError, ValueError) as exc:
        raise InvalidPolygonError(
            f"Polygon vertices must be (x, y) pairs: {exc}"
        ) from exc

    for x, y in points:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidPolygonError(f"Non-finite vertex ({x}, {y})")
    return points


def to_shapely(points: Sequence[Point]) -> BaseGeometry:
    """
    Shapely geometry for *points*; empty when fewer than 3 vertices.

    Self-intersecting rings are repaired with ``make_valid`` so overlay
    operations do not fail on them.  A bowtie becomes the multipolygon of
    its two lobes.
    """
    if len(points) < 3:
        return ShapelyPolygon()
    shape = ShapelyPolygon(points)
    if not shape.is_valid:
        logger.debug("Repairing invalid polygon: %s", explain_validity(shape))
        shape = make_valid(shape)
    return shape


def bounding_box(points: Sequence[Point]) -> Rectangle:
    """Integer bounding box of a point sequence."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return Rectangle.from_bounds(min(xs), min(ys), max(xs), max(ys))


def shoelace_area(points: Sequence[Point]) -> float:
    """Unsigned area enclosed by *points* (shoelace formula)."""
    if len(points) < 3:
        return 0.0
    xy = np.asarray(points, dtype=float)
    x, y = xy[:, 0], xy[:, 1]
    signed = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return abs(float(signed)) / 2.0


def polygonal_parts(geom: BaseGeometry) -> List[ShapelyPolygon]:
    """
    Polygons with positive area contained in a Shapely result.

    Intersections can degrade to lines or points where shapes only touch;
    those carry no area and are left out.
    """
    if geom.is_empty:
        return []
    if geom.geom_type == "Polygon":
        return [geom] if geom.area > 0 else []
    parts: List[ShapelyPolygon] = []
    for sub in getattr(geom, "geoms", []):
        parts.extend(polygonal_parts(sub))
    return parts
