"""
Largest axis-aligned rectangle inscribed in a convex hull.

Exhaustive search: for every integer column of the hull, every pair of
rows between the top and bottom chains is tried, and the right side is
taken from a precomputed table of right-chain x-intercepts.  Runs in
O(width * height^2) with no early exit; callers needing bounded latency
must bound the polygon extent themselves.
"""

import logging
from typing import Sequence

import numpy as np

from .edges import EdgeModel
from .errors import InvalidPolygonError
from .geometry import Point, Rectangle

logger = logging.getLogger(__name__)

EMPTY_RECTANGLE = Rectangle(0, 0, 0, 0)


def largest_inscribed_rectangle(hull: Sequence[Point]) -> Rectangle:
    """
    Maximum-area integer rectangle fully contained in *hull*.

    *hull* must be an integer convex hull in the orientation produced by
    ``convex_hull``.  Returns ``Rectangle(0, 0, 0, 0)`` for hulls with
    fewer than 3 points or when no rectangle of positive area fits.
    Ties keep the first rectangle found.
    """
    if len(hull) < 3:
        return EMPTY_RECTANGLE

    # Work with the hull's minimum corner at the origin so the intercept
    # table can be indexed by row directly.
    ox = int(min(p[0] for p in hull))
    oy = int(min(p[1] for p in hull))
    model = EdgeModel([(int(p[0]) - ox, int(p[1]) - oy) for p in hull])
    if model.xmax == model.xmin or model.ymax == model.ymin:
        logger.debug("Hull has zero extent; no inscribed rectangle")
        return EMPTY_RECTANGLE

    try:
        top_edge = model.find_edge(model.xmin, True)
        bottom_edge = model.find_edge(model.xmin, False)
    except InvalidPolygonError:
        logger.debug("Hull has no chain starting at x=%d", model.xmin,
                     exc_info=True)
        return EMPTY_RECTANGLE

    x_intercepts = np.array(
        [model.x_intersect(y) for y in range(model.ymax + 1)], dtype=np.int64
    )
    np.maximum(x_intercepts, 0, out=x_intercepts)

    best = EMPTY_RECTANGLE
    best_area = 0
    for x in range(model.xmin, model.xmax):
        top = model.y_intersect(x, top_edge)
        bottom = model.y_intersect(x, bottom_edge)
        if bottom is None:
            bottom = bottom_edge.ymax

        for y in range(bottom, top - 1, -1):
            # Lower edges y1 are scanned top-down; argmax keeps the first.
            y1s = np.arange(max(top, y + 1), bottom + 1)
            if y1s.size == 0:
                continue
            rights = np.minimum(x_intercepts[y], x_intercepts[y1s])
            areas = np.where(rights > 0, (rights - x) * (y1s - y), 0)
            i = int(np.argmax(areas))
            if areas[i] > best_area:
                best_area = int(areas[i])
                best = Rectangle(x, y, int(rights[i]) - x, int(y1s[i]) - y)

        try:
            if x == top_edge.xmax:
                top_edge = model.find_edge(x, True, exclude=top_edge)
            if x == bottom_edge.xmax:
                bottom_edge = model.find_edge(x, False, exclude=bottom_edge)
        except InvalidPolygonError:
            # Broken chain; keep what the columns so far produced.
            logger.debug("Hull chain ends at x=%d", x, exc_info=True)
            break

    if best_area == 0:
        return EMPTY_RECTANGLE

    result = best.translate(ox, oy)
    logger.debug("Inscribed rectangle %s (area %d)", tuple(result), best_area)
    return result
