"""Geometry primitives used to score LTTB candidates."""

from typing import Callable, NamedTuple, Sequence, TypeVar

T = TypeVar("T")


class Point(NamedTuple):
    """Raw (x, y) coordinate pair."""

    x: float
    y: float


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of the triangle (a, b, c)."""
    return abs((a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)) / 2)


def average_point(
    items: Sequence[T],
    x_getter: Callable[[T], float],
    y_getter: Callable[[T], float],
) -> Point:
    """
    Average a group of records into a single virtual point.

    Args:
        items: Non-empty group of records
        x_getter: Projection to the x coordinate
        y_getter: Projection to the y coordinate

    Returns:
        Point whose coordinates are the arithmetic means of the group
    """
    if not items:
        raise ValueError("Cannot average an empty group")

    count = len(items)
    avg_x = sum(x_getter(item) for item in items) / count
    avg_y = sum(y_getter(item) for item in items) / count
    return Point(avg_x, avg_y)
