"""Convex hull construction.

Graham scan over a vertex set. The pivot is the first item in input order
rather than the lowest point: fragments store their vertices sorted by
ascending x then y after every triangulation, which makes the first vertex
an extreme point of the set.
"""

from collections.abc import Sequence
from typing import TypeVar

import structlog

from meshslicer.core.geometry import HasXY, distance, orientation, signed_area
from meshslicer.domain import Orientation
from meshslicer.exceptions import DegenerateHullError

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=HasXY)


class PolarKey:
    """Sort key ordering points around a pivot.

    A point sorts before another when the pivot -> a -> b turn is
    counter-clockwise. Colinear points sort farthest first.
    """

    __slots__ = ("pivot", "point")

    def __init__(self, pivot: HasXY, point: HasXY) -> None:
        self.pivot = pivot
        self.point = point

    def __lt__(self, other: "PolarKey") -> bool:
        turn = orientation(self.pivot, self.point, other.point)
        if turn is Orientation.COLINEAR:
            return distance(self.pivot, self.point) > distance(self.pivot, other.point)
        return turn is Orientation.COUNTER_CLOCKWISE


def convex_hull(points: Sequence[T]) -> list[T]:
    """Compute the counter-clockwise convex hull of a point set.

    Args:
        points: At least 3 items with ``x``/``y``, not all colinear

    Returns:
        Hull items in counter-clockwise order, a subsequence of the input

    Raises:
        DegenerateHullError: If there are too few points or they span no area

    Examples:
        >>> square = [Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1), Point2D(0.5, 0.5)]
        >>> len(convex_hull(square))
        4
    """
    if len(points) < 3:
        raise DegenerateHullError(f"Convex hull needs at least 3 points, got {len(points)}")

    pivot = points[0]
    by_polar = sorted(points[1:], key=lambda p: PolarKey(pivot, p))

    hull: list[T] = [pivot, by_polar[0], by_polar[1]]
    for current in by_polar[2:]:
        while orientation(hull[-2], hull[-1], current) is not Orientation.COUNTER_CLOCKWISE:
            hull.pop()
            if len(hull) < 2:
                logger.error("Not enough points left in hull", point_count=len(points))
                raise DegenerateHullError("Hull collapsed below 2 points during scan")
        hull.append(current)

    if signed_area(hull) == 0.0:
        raise DegenerateHullError("All points are colinear")

    return hull
