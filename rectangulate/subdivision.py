"""
Recursive refinement of grid rectangles.

A rectangle whose overlap with the polygon is still larger than a caller
supplied area threshold is replaced by the decomposition of that
overlap, which is refined again in turn.  Refinement is best effort: a
fragment that cannot be decomposed leaves its rectangle in place.
"""

import logging
from typing import List, Sequence

from .config import MIN_ASPECT_RATIO
from .decomposer import RectangleDecomposer
from .geometry import (
    Polygon,
    Rectangle,
    as_points,
    polygonal_parts,
    shoelace_area,
    to_shapely,
)

logger = logging.getLogger(__name__)


def _fragments(parts) -> List[Polygon]:
    """Vertex lists of clipped parts, truncated to integer coordinates."""
    fragments = []
    for part in parts:
        coords = list(part.exterior.coords)[:-1]
        fragments.append([(int(c[0]), int(c[1])) for c in coords])
    return fragments


def divide_rectangles(rectangles: Sequence[Rectangle], polygon,
                      min_area: float,
                      min_aspect_ratio: float = MIN_ASPECT_RATIO
                      ) -> List[Rectangle]:
    """
    Subdivide rectangles whose overlap with *polygon* exceeds *min_area*.

    Parameters
    ----------
    rectangles : sequence of Rectangle
        Typically ``RectangleDecomposer.overlapping_rectangles``.
    polygon : sequence of (x, y) pairs or shapely Polygon
        The original, un-hulled polygon.
    min_area : float
        Overlaps at or below this area are kept as they are.
    min_aspect_ratio : float
        Grid merge threshold used by the nested decompositions.

    Returns
    -------
    list[Rectangle]
        The refined rectangles.  A single input rectangle is returned
        unchanged, as is any rectangle that does not overlap the polygon
        or whose refinement failed.
    """
    if len(rectangles) == 1:
        return [Rectangle(*rectangles[0])]

    shape = to_shapely(as_points(polygon))
    divided: List[Rectangle] = []
    for rectangle in rectangles:
        rectangle = Rectangle(*rectangle)
        parts = []
        if not rectangle.is_empty:
            parts = polygonal_parts(rectangle.polygon.intersection(shape))
        if not parts:
            divided.append(rectangle)
            continue

        fragments = _fragments(parts)
        area = sum(shoelace_area(f) for f in fragments)
        if area <= min_area:
            divided.append(rectangle)
            continue

        try:
            refined: List[Rectangle] = []
            for fragment in fragments:
                decomposer = RectangleDecomposer(
                    fragment, min_aspect_ratio=min_aspect_ratio
                )
                refined.extend(divide_rectangles(
                    decomposer.overlapping_rectangles, fragment,
                    min_area, min_aspect_ratio,
                ))
        except Exception:
            logger.debug("Could not refine %s; keeping it", tuple(rectangle),
                         exc_info=True)
            divided.append(rectangle)
            continue

        if not refined:
            logger.debug("Refining %s produced nothing; keeping it",
                         tuple(rectangle))
            divided.append(rectangle)
            continue

        logger.debug("Refined %s (overlap %.1f) into %d rectangles",
                     tuple(rectangle), area, len(refined))
        divided.extend(refined)
    return divided


def approximate(polygon, min_area: float,
                min_aspect_ratio: float = MIN_ASPECT_RATIO) -> List[Rectangle]:
    """
    Decompose *polygon* and refine the result down to *min_area*.

    Shorthand for building a ``RectangleDecomposer`` and passing its
    overlapping rectangles to ``divide_rectangles``.
    """
    decomposer = RectangleDecomposer(polygon, min_aspect_ratio=min_aspect_ratio)
    return divide_rectangles(decomposer.overlapping_rectangles,
                             decomposer.polygon, min_area, min_aspect_ratio)
