"""Tests for geometry primitives."""

import pytest

from deathrate.geometry import Point, average_point, triangle_area


def test_triangle_area_right_triangle():
    """Test area of a 3-4-5 right triangle."""
    assert triangle_area(Point(0, 0), Point(4, 0), Point(0, 3)) == pytest.approx(6.0)


def test_triangle_area_is_unsigned():
    """Test area does not depend on winding order."""
    a, b, c = Point(0, 0), Point(1, 5), Point(4.5, 2.5)
    assert triangle_area(a, b, c) == pytest.approx(10.0)
    assert triangle_area(a, c, b) == pytest.approx(10.0)


def test_triangle_area_collinear():
    """Test collinear points have zero area."""
    assert triangle_area(Point(0, 0), Point(1, 1), Point(2, 2)) == 0.0


def test_average_point():
    """Test averaging projects through the supplied getters."""
    items = [{"x": 4.0, "y": 0.0}, {"x": 5.0, "y": 5.0}]
    avg = average_point(items, lambda p: p["x"], lambda p: p["y"])
    assert avg == Point(4.5, 2.5)


def test_average_point_single():
    """Test a singleton group averages to itself."""
    avg = average_point([(6.0, 0.0)], lambda p: p[0], lambda p: p[1])
    assert avg == Point(6.0, 0.0)


def test_average_point_empty():
    """Test an empty group is rejected."""
    with pytest.raises(ValueError):
        average_point([], lambda p: p[0], lambda p: p[1])
