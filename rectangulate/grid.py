"""
3x3 rectangle grid around an inscribed rectangle.

The polygon's bounding box is cut into three rows (above, level with,
below the inscribed rectangle) and three columns (left of, across,
right of it).  Border columns and rows that are too thin are folded
into the centre cells, and every surviving cell is clipped against the
real polygon.
"""

import logging
from typing import List, Optional

from shapely.geometry.base import BaseGeometry

from .config import MIN_ASPECT_RATIO
from .geometry import Rectangle, aspect_ratio, polygonal_parts

logger = logging.getLogger(__name__)


# Cell indices, row-major: top row 0-2, middle row 3-5, bottom row 6-8.
LEFT_COLUMN = (0, 3, 6)
CENTER_COLUMN = (1, 4, 7)
RIGHT_COLUMN = (2, 5, 8)
TOP_ROW = (0, 1, 2)
MIDDLE_ROW = (3, 4, 5)
BOTTOM_ROW = (6, 7, 8)


def build_grid(inscribed: Rectangle, extent: Rectangle,
               min_aspect_ratio: float = MIN_ASPECT_RATIO) -> List[Rectangle]:
    """
    Candidate rectangles tiling *extent* around *inscribed*, before clipping.

    Parameters
    ----------
    inscribed : Rectangle
        Largest rectangle inside the polygon's hull.
    extent : Rectangle
        Integer bounding box of the polygon.
    min_aspect_ratio : float
        A border column (its width against the extent height) or row (its
        height against the extent width) below this ratio is merged into
        the centre.  Columns are checked first, then rows.

    Returns
    -------
    list[Rectangle]
        Between 1 and 9 cells in row-major order.  An empty inscribed
        rectangle yields the extent alone.
    """
    if inscribed.is_empty:
        return [extent]

    r, e = inscribed, extent
    width_left = r.x - e.x
    width_center = r.width
    width_right = e.width - (width_left + width_center)
    height_top = r.y - e.y
    height_middle = r.height
    height_bottom = e.height - (height_top + height_middle)

    cells: List[Optional[Rectangle]] = [
        Rectangle(e.x, e.y, width_left, height_top),
        Rectangle(r.x, e.y, width_center, height_top),
        Rectangle(r.x + r.width, e.y, width_right, height_top),

        Rectangle(e.x, r.y, width_left, height_middle),
        r,
        Rectangle(r.x + r.width, r.y, width_right, height_middle),

        Rectangle(e.x, r.y + r.height, width_left, height_bottom),
        Rectangle(r.x, r.y + r.height, width_center, height_bottom),
        Rectangle(r.x + r.width, r.y + r.height, width_right, height_bottom),
    ]

    if aspect_ratio(width_left, e.height) < min_aspect_ratio:
        logger.debug("Merging left column (width %d)", width_left)
        for i in LEFT_COLUMN:
            cells[i] = None
        for i in CENTER_COLUMN:
            c = cells[i]
            cells[i] = Rectangle(c.x - width_left, c.y,
                                 c.width + width_left, c.height)

    if aspect_ratio(width_right, e.height) < min_aspect_ratio:
        logger.debug("Merging right column (width %d)", width_right)
        for i in RIGHT_COLUMN:
            cells[i] = None
        for i in CENTER_COLUMN:
            c = cells[i]
            cells[i] = c._replace(width=c.width + width_right)

    if aspect_ratio(height_top, e.width) < min_aspect_ratio:
        logger.debug("Merging top row (height %d)", height_top)
        for i in TOP_ROW:
            cells[i] = None
        for i in MIDDLE_ROW:
            c = cells[i]
            if c is not None:
                cells[i] = Rectangle(c.x, c.y - height_top,
                                     c.width, c.height + height_top)

    if aspect_ratio(height_bottom, e.width) < min_aspect_ratio:
        logger.debug("Merging bottom row (height %d)", height_bottom)
        for i in BOTTOM_ROW:
            cells[i] = None
        for i in MIDDLE_ROW:
            c = cells[i]
            if c is not None:
                cells[i] = c._replace(height=c.height + height_bottom)

    return [c for c in cells if c is not None]


def clip_to_polygon(cells: List[Rectangle],
                    polygon: BaseGeometry) -> List[Rectangle]:
    """
    Intersect each cell with *polygon* and keep the bounding box of the
    overlap.  Cells sharing no area with the polygon are dropped.
    """
    clipped: List[Rectangle] = []
    for cell in cells:
        if cell.is_empty:
            continue
        parts = polygonal_parts(cell.polygon.intersection(polygon))
        if not parts:
            continue
        bounds = [p.bounds for p in parts]
        clipped.append(Rectangle.from_bounds(
            min(b[0] for b in bounds),
            min(b[1] for b in bounds),
            max(b[2] for b in bounds),
            max(b[3] for b in bounds),
        ))
    return clipped
