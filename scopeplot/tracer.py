"""Finding the sample nearest to a point on screen."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from itertools import islice

Point = tuple[float, float]


def nearest_point_index(
    points: Sequence[Point],
    target: Point,
    to_pixel: Callable[[float, float], Point],
    key_range: tuple[float, float] | None = None,
) -> int | None:
    """Index of the point closest to ``target`` in pixel space.

    ``to_pixel`` maps a (key, value) pair to pixel coordinates. With
    ``key_range`` the points must be sorted by key; only those within the
    range plus one neighbour on each side are searched. Returns None for no
    points, and 0 when no searched point is closer than infinity.
    """
    if not points:
        return None
    start, stop = 0, len(points)
    if key_range is not None:
        lower, upper = key_range
        keys = [key for key, _ in points]
        start = max(bisect_left(keys, lower) - 1, 0)
        stop = min(bisect_right(keys, upper) + 1, len(points))

    target_x, target_y = target
    best_index, best_distance = 0, math.inf
    for index, (key, value) in enumerate(islice(points, start, stop), start):
        x, y = to_pixel(key, value)
        distance = (x - target_x) ** 2 + (y - target_y) ** 2
        if distance < best_distance:
            best_index, best_distance = index, distance
    return best_index