"""Line intersection and side classification.

The cut line is conceptually infinite; hull edges are finite. Intersections
exactly at an edge endpoint return that endpoint unchanged so that two hull
edges meeting on the cut line report the same point.
"""

from meshslicer.core.geometry import HasXY, cross
from meshslicer.domain import LineSide, Point2D

PARALLEL_EPSILON = 1e-12


def segments_intersect(
    edge_p1: HasXY,
    edge_p2: HasXY,
    line_p1: HasXY,
    line_p2: HasXY,
    *,
    bounded: bool = False,
) -> Point2D | None:
    """Intersect a finite edge with the line through two points.

    Args:
        edge_p1: First endpoint of the edge
        edge_p2: Second endpoint of the edge
        line_p1: First point on the cut line
        line_p2: Second point on the cut line
        bounded: Also require the intersection to lie between line_p1 and line_p2

    Returns:
        Intersection point, or None if the lines are parallel or the
        intersection falls outside the edge (or the line segment when bounded)

    Examples:
        >>> segments_intersect(Point2D(0, 0), Point2D(1, 0), Point2D(0.5, -1), Point2D(0.5, 2))
        Point2D(x=0.5, y=0.0)
    """
    edge_dx = edge_p2.x - edge_p1.x
    edge_dy = edge_p2.y - edge_p1.y
    line_dx = line_p2.x - line_p1.x
    line_dy = line_p2.y - line_p1.y

    denom = edge_dx * line_dy - edge_dy * line_dx
    if abs(denom) < PARALLEL_EPSILON:
        return None

    offset_x = line_p1.x - edge_p1.x
    offset_y = line_p1.y - edge_p1.y

    # Parameters along the edge (t) and along the cut line (s)
    t = (offset_x * line_dy - offset_y * line_dx) / denom
    s = (offset_x * edge_dy - offset_y * edge_dx) / denom

    if not 0.0 <= t <= 1.0:
        return None
    if bounded and not 0.0 <= s <= 1.0:
        return None

    if t == 0.0:
        return Point2D(edge_p1.x, edge_p1.y)
    if t == 1.0:
        return Point2D(edge_p2.x, edge_p2.y)
    return Point2D(edge_p1.x + t * edge_dx, edge_p1.y + t * edge_dy)


def side_of_line(point: HasXY, line_p1: HasXY, line_p2: HasXY) -> LineSide:
    """Classify which side of the directed line p1 -> p2 a point is on.

    Uses an exact zero test for points on the line.

    Args:
        point: Point to classify
        line_p1: First point of the line
        line_p2: Second point of the line

    Returns:
        LEFT for the counter-clockwise side, RIGHT for the clockwise side,
        ON when the point is exactly on the line
    """
    value = cross(line_p1, line_p2, point)
    if value > 0:
        return LineSide.LEFT
    if value < 0:
        return LineSide.RIGHT
    return LineSide.ON
