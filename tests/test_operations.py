"""Tests for the free functions combining rectangles, points and sizes."""

from functools import reduce

import pytest

from geom_primitives.core.numeric import INT, UINT
from geom_primitives.core.point import Point
from geom_primitives.core.size import Size
from geom_primitives.layout.operations import clamp, fit_rect, intersect, unite
from geom_primitives.layout.orientation import Orientation, orthogonal
from geom_primitives.layout.rectangle import Rectangle, rectn


class TestIntersect:
    def test_missing_first_operand(self, square):
        assert intersect(None, square) == square

    def test_missing_second_operand(self, square):
        assert intersect(square, None) == square

    def test_both_missing(self):
        assert intersect(None, None) is None

    def test_both_present(self, square, offset_square):
        assert intersect(square, offset_square) == Rectangle(5, 5, 10, 10, INT)

    def test_disjoint(self, square):
        assert intersect(square, Rectangle(20, 20, 30, 30, INT)) is None

    def test_accumulate_over_list(self):
        rects = [
            Rectangle(0, 0, 10, 10, INT),
            Rectangle(2, 2, 12, 12, INT),
            Rectangle(4, 0, 8, 20, INT),
        ]
        assert reduce(intersect, rects, None) == Rectangle(4, 2, 8, 10, INT)


class TestUnite:
    def test_missing_first_operand(self, square):
        assert unite(None, square) == square

    def test_both_present(self, square):
        far = Rectangle(20, 20, 30, 30, INT)
        assert unite(square, far) == Rectangle(0, 0, 30, 30, INT)

    def test_second_operand_required(self, square):
        with pytest.raises(TypeError, match="concrete rectangle"):
            unite(square, None)

    def test_accumulate_over_list(self):
        rects = [
            Rectangle(0, 0, 1, 1, INT),
            Rectangle(5, -3, 6, 2, INT),
            Rectangle(-2, 4, 0, 7, INT),
        ]
        assert reduce(unite, rects, None) == Rectangle(-2, -3, 6, 7, INT)


class TestClamp:
    def test_inside_unchanged(self, square):
        assert clamp(Point(3, 4, INT), square) == Point(3, 4, INT)

    def test_clamps_each_axis(self, square):
        assert clamp(Point(-5, 20, INT), square) == Point(0, 10, INT)

    def test_reaches_far_edges(self, square):
        p = clamp(Point(15, 5, INT), square)
        assert p == Point(10, 5, INT)
        # the clamped point lies on the excluded edge
        assert not square.contains_point(p)

    def test_does_not_mutate_input(self, square):
        p = Point(-1, -1, INT)
        clamp(p, square)
        assert p == Point(-1, -1, INT)


class TestFitRect:
    def test_wide_size_centered_vertically(self):
        r = fit_rect(Size(200, 100, INT), Rectangle(0, 0, 100, 100, INT))
        assert r == Rectangle(0, 25, 100, 75, INT)

    def test_tall_size_centered_horizontally(self):
        r = fit_rect(Size(100, 200, INT), Rectangle(10, 10, 110, 110, INT))
        assert r == Rectangle(35, 10, 85, 110, INT)

    def test_odd_spare_truncates(self):
        r = fit_rect(Size(3, 1, INT), Rectangle(0, 0, 10, 5, INT))
        assert r == Rectangle(0, 1, 10, 4, INT)

    def test_normalized_bounds(self):
        r = fit_rect(Size(2, 1, UINT), rectn(-10, -10, 10, 10))
        assert r == Rectangle(-10, -5, 10, 5, INT, UINT)
        assert r.size_dtype == UINT

    def test_result_within_bounds(self):
        bounds = Rectangle(3, 7, 643, 487, INT)
        r = fit_rect(Size(1920, 1080, INT), bounds)
        assert bounds.contains_rect(r)


class TestOrientation:
    def test_orthogonal(self):
        assert orthogonal(Orientation.VERT) is Orientation.HOR
        assert orthogonal(Orientation.HOR) is Orientation.VERT

    def test_orthogonal_is_involution(self):
        for o in Orientation:
            assert orthogonal(orthogonal(o)) is o
