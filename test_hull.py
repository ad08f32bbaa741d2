"""
Tests for convex hull construction (batch and incremental) and the edge
model derived from a hull.
"""
import os
import random
import sys

import pytest
from shapely.geometry import Point as ShapelyPoint, Polygon

# Add project root to path
sys.path.insert(0, os.path.dirname(__file__))

from rectangulate.edges import Edge, EdgeModel
from rectangulate.errors import InvalidPolygonError
from rectangulate.hull import IncrementalHull, convex_hull, cross


SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
L_SHAPE = [(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)]


# ============================================================================
# Batch hull
# ============================================================================

class TestConvexHull:
    def test_square_order(self):
        assert convex_hull(SQUARE) == [(0, 0), (0, 10), (10, 10), (10, 0)]

    def test_square_same_vertices_as_input(self):
        assert set(convex_hull(SQUARE)) == {(float(x), float(y)) for x, y in SQUARE}

    def test_l_shape_drops_reflex_vertex(self):
        hull = convex_hull(L_SHAPE)
        assert hull == [(0, 0), (0, 20), (10, 20), (20, 10), (20, 0)]
        assert (10.0, 10.0) not in hull

    def test_collinear_points_removed(self):
        pts = [(0, 0), (5, 0), (10, 0), (10, 10), (5, 10), (0, 10), (0, 5)]
        assert sorted(convex_hull(pts)) == [(0, 0), (0, 10), (10, 0), (10, 10)]

    def test_single_point(self):
        assert convex_hull([(3, 4)]) == [(3.0, 4.0)]

    def test_repeated_single_point_not_duplicated(self):
        assert convex_hull([(3, 4), (3, 4), (3, 4)]) == [(3.0, 4.0)]

    def test_two_points(self):
        assert convex_hull([(5, 5), (0, 0)]) == [(0.0, 0.0), (5.0, 5.0)]

    def test_empty(self):
        assert convex_hull([]) == []

    def test_random_clouds_convex_and_containing(self):
        rng = random.Random(11)
        for _ in range(25):
            pts = [(rng.randint(0, 40), rng.randint(0, 40)) for _ in range(15)]
            hull = convex_hull(pts)
            if len(hull) < 3:
                continue
            n = len(hull)
            # Strict turn at every vertex, same sense everywhere
            turns = [cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
                     for i in range(n)]
            assert all(t < 0 for t in turns)
            shape = Polygon(hull)
            for p in pts:
                assert shape.buffer(1e-9).covers(ShapelyPoint(p))


# ============================================================================
# Incremental hull
# ============================================================================

class TestIncrementalHull:
    def test_first_two_points_appended(self):
        hull = IncrementalHull()
        assert hull.add_point((0, 0)) is True
        assert hull.add_point((0, 10)) is True
        assert hull.points == [(0, 0), (0, 10)]

    def test_third_point_on_interior_side_appended(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 0)])
        assert hull.points == [(0, 0), (0, 10), (10, 0)]

    def test_third_point_on_other_side_inserted_second(self):
        hull = IncrementalHull([(0, 0), (10, 0), (0, 10)])
        assert hull.points == [(0, 0), (0, 10), (10, 0)]

    def test_interior_point_rejected(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 0)])
        assert hull.add_point((2, 2)) is False
        assert hull.points == [(0, 0), (0, 10), (10, 0)]

    def test_exterior_point_inserted_between_tangents(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 0)])
        assert hull.add_point((10, 10)) is True
        assert hull.points == [(0, 0), (0, 10), (10, 10), (10, 0)]

    def test_insertion_removes_hidden_vertex(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert hull.add_point((20, 20)) is True
        assert hull.points == [(0, 0), (0, 10), (20, 20), (10, 0)]

    def test_insertion_wrapping_past_end(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert hull.add_point((-5, -5)) is True
        assert hull.points == [(0, 10), (10, 10), (10, 0), (-5, -5)]

    def test_tangents_reported(self):
        hull = IncrementalHull([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert hull.tangents((20, 5)) == (True, 2, 3)
        outside, _, _ = hull.tangents((5, 5))
        assert outside is False

    def test_seeded_from_batch_hull_matches(self):
        batch = [(int(x), int(y)) for x, y in convex_hull(L_SHAPE)]
        assert IncrementalHull(batch).points == batch


# ============================================================================
# Edge model
# ============================================================================

class TestEdgeModel:
    def test_edges_start_with_closing_edge(self):
        model = EdgeModel([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert [(e.p, e.q) for e in model] == [
            ((10, 0), (0, 0)),
            ((0, 0), (0, 10)),
            ((0, 10), (10, 10)),
            ((10, 10), (10, 0)),
        ]

    def test_bounding_box(self):
        model = EdgeModel([(0, 0), (0, 20), (10, 20), (20, 10), (20, 0)])
        assert (model.xmin, model.xmax, model.ymin, model.ymax) == (0, 20, 0, 20)

    def test_classification(self):
        top = Edge((10, 0), (0, 0))
        assert top.is_top and not top.is_right
        right = Edge((10, 20), (20, 10))
        assert right.is_right and not right.is_top
        assert right.m == -1 and right.b == 30

    def test_vertical_edge_has_no_slope(self):
        e = Edge((0, 0), (0, 10))
        assert e.is_vertical
        assert e.m is None and e.b is None

    def test_find_edge_prefers_vertical(self):
        model = EdgeModel([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert model.find_edge(0, False).is_vertical
        assert model.find_edge(0, True).p == (10, 0)

    def test_find_edge_exclude(self):
        model = EdgeModel([(0, 0), (0, 10), (10, 10), (10, 0)])
        vertical = model.find_edge(0, False)
        nxt = model.find_edge(0, False, exclude=vertical)
        assert (nxt.p, nxt.q) == ((0, 10), (10, 10))

    def test_find_edge_missing(self):
        model = EdgeModel([(0, 0), (0, 10), (10, 10), (10, 0)])
        with pytest.raises(InvalidPolygonError):
            model.find_edge(5, True)

    def test_y_intersect_rounds_inward(self):
        bottom = Edge((0, 10), (100, 0))   # walked left to right: not top
        assert EdgeModel.y_intersect(1, bottom) == 9   # floor(min(9.95, 9.85))
        top = Edge((100, 0), (0, 10))
        assert EdgeModel.y_intersect(1, top) == 10     # ceil(max(...))
        assert EdgeModel.y_intersect(1, Edge((0, 0), (0, 10))) is None

    def test_x_intersect(self):
        model = EdgeModel([(0, 0), (0, 20), (10, 20), (20, 10), (20, 0)])
        assert model.x_intersect(5) == 20
        assert model.x_intersect(10) == 20      # vertical edge walked last
        assert model.x_intersect(14) == 15
        assert model.x_intersect(20) == 9

    def test_empty_hull_rejected(self):
        with pytest.raises(InvalidPolygonError):
            EdgeModel([])
