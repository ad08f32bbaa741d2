"""
Directed edge list of a convex hull.

Each edge carries its bounding box, slope/intercept (``None`` for
vertical edges) and two flags locating it on the hull:

  * ``is_top``: the edge runs right to left (upper chain).
  * ``is_right``: the edge runs from larger to smaller y (right chain).

Intercepts are evaluated half a pixel either side of the requested
coordinate and rounded toward the hull interior, so rectangles built
from them stay inside the hull at integer resolution.
"""

import math
from typing import List, Optional, Sequence

from .errors import InvalidPolygonError
from .geometry import Point


class Edge:
    """Directed hull segment p -> q."""

    __slots__ = ("p", "q", "xmin", "xmax", "ymin", "ymax",
                 "m", "b", "is_top", "is_right")

    def __init__(self, p: Point, q: Point):
        self.p = p
        self.q = q
        self.xmin = min(p[0], q[0])
        self.xmax = max(p[0], q[0])
        self.ymin = min(p[1], q[1])
        self.ymax = max(p[1], q[1])

        if p[0] != q[0]:
            self.m: Optional[float] = (q[1] - p[1]) / (q[0] - p[0])
            self.b: Optional[float] = p[1] - self.m * p[0]
        else:
            self.m = None
            self.b = None

        self.is_top = p[0] > q[0]
        self.is_right = p[1] > q[1]

    @property
    def is_vertical(self) -> bool:
        return self.m is None

    def __repr__(self) -> str:
        return f"Edge({self.p} -> {self.q})"


class EdgeModel:
    """Edge list and bounding box of a hull, walked in hull order."""

    def __init__(self, points: Sequence[Point]):
        if not points:
            raise InvalidPolygonError("Cannot build edges for an empty hull")

        self.points = list(points)
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        self.xmin, self.xmax = min(xs), max(xs)
        self.ymin, self.ymax = min(ys), max(ys)

        # Start with the closing edge (last -> first).
        self.edges: List[Edge] = []
        a = self.points[-1]
        for b in self.points:
            self.edges.append(Edge(a, b))
            a = b

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def find_edge(self, x: int, is_top: bool,
                  exclude: Optional[Edge] = None) -> Edge:
        """
        Edge of the top (or bottom) chain that begins at *x*.

        A vertical edge wins over other candidates; otherwise the last
        match in walk order is used.
        """
        matches = [
            e for e in self.edges
            if e.xmin == x and e.is_top == is_top and e is not exclude
        ]
        if not matches:
            chain = "top" if is_top else "bottom"
            raise InvalidPolygonError(f"No {chain} edge starts at x={x}")
        if len(matches) == 1:
            return matches[0]
        for e in matches:
            if e.xmax == e.xmin:
                return e
        return matches[-1]

    @staticmethod
    def y_intersect(x: int, edge: Edge) -> Optional[int]:
        """Y of *edge* at column *x*, or None for a vertical edge."""
        if edge.m is None:
            return None
        y_first = edge.m * (x - 0.5) + edge.b
        y_last = edge.m * (x + 0.5) + edge.b
        if edge.is_top:
            return int(math.ceil(max(y_first, y_last)))
        return int(math.floor(min(y_first, y_last)))

    def x_intersect(self, y: int) -> int:
        """X of the right chain at row *y*; 0 if no right edge spans it."""
        x = 0
        for e in self.edges:
            if e.is_right and e.ymin <= y <= e.ymax:
                if e.m is None:
                    x = int(e.xmin)
                else:
                    x0 = (y + 0.5 - e.b) / e.m
                    x1 = (y - 0.5 - e.b) / e.m
                    x = int(math.floor(min(x0, x1)))
        return x
