"""LTTB (Largest Triangle Three Buckets) downsampling algorithm."""

import logging
from operator import itemgetter
from typing import Callable, List, Sequence, Tuple, TypeVar

from .buckets import bucket_bounds
from .geometry import Point, average_point, triangle_area

T = TypeVar("T")

logger = logging.getLogger(__name__)


def downsample(
    data: Sequence[T],
    threshold: int,
    x_getter: Callable[[T], float],
    y_getter: Callable[[T], float],
) -> List[T]:
    """
    Downsample a series using the LTTB algorithm.

    Selects points that form the largest triangles with their neighbours,
    keeping peaks, troughs and trends while bounding the output size. The
    first and last points (by x) are always kept. Output elements are the
    caller's own records, never synthesized ones.

    Args:
        data: Records to downsample, in any order
        threshold: Target number of output points
        x_getter: Projection to the x coordinate (the sort key)
        y_getter: Projection to the y coordinate

    Returns:
        At most ``threshold`` records, ordered by x
    """
    if threshold <= 0 or not data:
        return []

    ordered = sorted(data, key=x_getter)
    length = len(ordered)

    if length <= threshold:
        return ordered
    if threshold == 1:
        return [ordered[0]]
    if threshold == 2:
        return [ordered[0], ordered[-1]]

    def to_point(item: T) -> Point:
        return Point(x_getter(item), y_getter(item))

    # Interior points only; first and last are fixed
    bounds = bucket_bounds(length - 2, threshold - 2, offset=1)
    # The last bucket looks ahead at the final point on its own
    next_bounds = bounds[1:] + [(length - 1, length)]

    sampled = [ordered[0]]
    previous = to_point(ordered[0])

    for (start, stop), (next_start, next_stop) in zip(bounds, next_bounds):
        avg = average_point(ordered[next_start:next_stop], x_getter, y_getter)

        # Seeded with the first candidate; later ones must beat it strictly
        max_area_point = ordered[start]
        max_area = triangle_area(previous, to_point(max_area_point), avg)

        for item in ordered[start + 1:stop]:
            area = triangle_area(previous, to_point(item), avg)
            if area > max_area:
                max_area = area
                max_area_point = item

        sampled.append(max_area_point)
        previous = to_point(max_area_point)

    sampled.append(ordered[-1])

    logger.debug(
        "Downsampled %d points to %d (threshold=%d)", length, len(sampled), threshold
    )
    return sampled


def lttb_downsample(
    points: Sequence[Tuple[float, float]], target: int
) -> List[Tuple[float, float]]:
    """
    Downsample plain ``(x, y)`` tuples.

    Args:
        points: List of (timestamp, value) tuples
        target: Target number of points

    Returns:
        Downsampled list of points
    """
    return downsample(points, target, itemgetter(0), itemgetter(1))
