"""
Convex hull construction.

Two builders are provided:

  * ``convex_hull``: one-shot monotone chain over a sorted point set,
    O(n log n), collinear boundary points excluded.
  * ``IncrementalHull``: maintains a hull under point-by-point insertion,
    splicing each exterior point in between its two tangent vertices.

Both keep the orientation produced by the monotone chain: from the
lexicographically smallest vertex along the chain of larger y values,
then back along the chain of smaller y values.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .geometry import Point

logger = logging.getLogger(__name__)


def cross(o: Point, a: Point, b: Point) -> float:
    """Twice the signed area of triangle (o, a, b)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (b[0] - o[0]) * (a[1] - o[1])


def on_left(a: Point, b: Point, c: Point) -> bool:
    """True if *c* lies on the interior side of the hull edge a -> b."""
    return cross(a, b, c) < 0


# ---------------------------------------------------------------------------
# Batch hull
# ---------------------------------------------------------------------------

def _chain(points: Sequence[Point]) -> List[Point]:
    """One monotone chain; drops the last point (shared with the other chain)."""
    chain: List[Point] = []
    for p in points:
        while len(chain) >= 2:
            q = chain[-1]
            r = chain[-2]
            if (q[0] - r[0]) * (p[1] - r[1]) >= (q[1] - r[1]) * (p[0] - r[0]):
                chain.pop()
            else:
                break
        chain.append(p)
    chain.pop()
    return chain


def convex_hull(points: Sequence[Point]) -> List[Point]:
    """
    Convex hull of *points* as float tuples.

    Points are sorted by (x, y); the forward chain and the reverse chain
    are concatenated.  A set with a single distinct point yields that
    point once.
    """
    ordered = sorted((float(x), float(y)) for x, y in points)
    if len(ordered) <= 1:
        return ordered

    upper = _chain(ordered)
    lower = _chain(ordered[::-1])
    if len(upper) == 1 and upper == lower:
        return upper
    return upper + lower


# ---------------------------------------------------------------------------
# Incremental hull
# ---------------------------------------------------------------------------

class IncrementalHull:
    """
    Convex hull grown one point at a time.

    The first three points fix the rotational sense; every later point is
    tested against all edges and, when outside, replaces the vertices
    between its two tangents.
    """

    def __init__(self, points: Optional[Sequence[Point]] = None):
        self.points: List[Point] = []
        for p in points or ():
            self.add_point(p)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def add_point(self, p: Point) -> bool:
        """Insert *p*; returns False if it was rejected as an interior point."""
        if len(self.points) < 2:
            self.points.append(p)
            return True
        if len(self.points) == 2:
            if on_left(self.points[0], self.points[1], p):
                self.points.append(p)
            else:
                self.points.insert(1, p)
            return True
        return self._insert_tangent(p)

    def tangents(self, p: Point) -> Tuple[bool, int, int]:
        """
        Test *p* against every edge of the hull.

        Returns ``(outside, start, stop)`` where *start* is the edge index at
        which the scan goes from inside to outside and *stop* the index at
        which it comes back inside.
        """
        n = len(self.points)
        inside = True
        prev_in = True
        start = stop = 0
        for i in range(n):
            curr_in = on_left(self.points[i], self.points[(i + 1) % n], p)
            inside = inside and curr_in
            if prev_in and not curr_in:
                start = i
            if not prev_in and curr_in:
                stop = i
            prev_in = curr_in
        return not inside, start, stop

    def _insert_tangent(self, p: Point) -> bool:
        outside, start, stop = self.tangents(p)
        if not outside:
            logger.debug("Point %s is inside the hull; skipped", p)
            return False

        if stop > start:
            del self.points[start + 1:stop]
            self.points.insert(start + 1, p)
        else:
            # Visible edges wrap past the end of the list.
            del self.points[start + 1:]
            del self.points[:stop]
            self.points.append(p)
        return True
