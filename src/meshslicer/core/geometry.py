"""Geometric primitives for hull, intersection and triangulation work.

This module provides core mathematical utilities for:
- Three-point orientation (exact sign of the 2D cross product)
- Euclidean distance
- Linear interpolation of positions and texture coordinates
- Signed area calculation (shoelace formula)

Functions accept any object exposing ``x`` and ``y`` attributes, so
``Point2D`` and ``Vertex`` can be mixed freely. All functions are pure.
"""

import math
from collections.abc import Sequence
from typing import Protocol, overload

from meshslicer.domain import Orientation, Point2D, TexCoord


class HasXY(Protocol):
    """Anything with a 2D position."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def cross(o: HasXY, a: HasXY, b: HasXY) -> float:
    """2D cross product of (a - o) and (b - o).

    Positive when o -> a -> b turns counter-clockwise.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(a: HasXY, b: HasXY, c: HasXY) -> Orientation:
    """Classify the turn a -> b -> c.

    The test is exact: only a cross product of exactly zero is colinear.

    Args:
        a: First point
        b: Second point
        c: Third point

    Returns:
        Orientation of the three points

    Examples:
        >>> orientation(Point2D(0, 0), Point2D(1, 0), Point2D(1, 1))
        <Orientation.COUNTER_CLOCKWISE: 3>
    """
    value = cross(a, b, c)
    if value > 0:
        return Orientation.COUNTER_CLOCKWISE
    if value < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLINEAR


def distance(a: HasXY, b: HasXY) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


@overload
def lerp(a: TexCoord, b: TexCoord, t: float) -> TexCoord: ...


@overload
def lerp(a: HasXY, b: HasXY, t: float) -> Point2D: ...


def lerp(a, b, t):
    """Linearly interpolate between two points or two texture coordinates.

    Args:
        a: Value at t = 0
        b: Value at t = 1
        t: Interpolation parameter (not clamped)

    Returns:
        Interpolated value of the same kind as the inputs
    """
    if isinstance(a, TexCoord):
        return TexCoord(a.u + (b.u - a.u) * t, a.v + (b.v - a.v) * t)
    return Point2D(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def signed_area(points: Sequence[HasXY]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary, in order

    Returns:
        Signed area. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = [Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)]
        >>> signed_area(square)
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def triangle_area(a: HasXY, b: HasXY, c: HasXY) -> float:
    """Signed area of a triangle, positive when counter-clockwise."""
    return cross(a, b, c) / 2.0
