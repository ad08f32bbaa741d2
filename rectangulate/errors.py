"""Exceptions raised by the decomposition pipeline."""


class InvalidPolygonError(ValueError):
    """The input polygon cannot produce a usable convex hull."""


InvalidPolygon = InvalidPolygonError
