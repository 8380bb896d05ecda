"""Fragment triangulation.

Turns a fragment's vertex set into triangle indices. Three vertices form a
single triangle as given. Larger sets are first normalized to ascending x,
then ascending y, and handed to a generic strategy:

- delaunay_triangulate: Delaunay triangulation of the sorted points (scipy /
  Qhull). Covers the convex hull of the set and uses every distinct point,
  interior and boundary-colinear ones included.
- quad_fan_triangulate: two triangles for four convex corner points, falling
  back to Delaunay for anything else.

Strategies are plain functions over sorted vertices and carry no state. All
of them return counter-clockwise triangles with non-zero area.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np
from scipy.spatial import Delaunay, QhullError

from meshslicer.config import TriangulationStrategy
from meshslicer.core.geometry import cross
from meshslicer.domain import Triangle, Vertex
from meshslicer.exceptions import TriangulationError

TriangulationFn = Callable[[Sequence[Vertex]], list[Triangle]]


@dataclass
class Triangulation:
    """Triangulated vertex set.

    Attributes:
        vertices: Vertices in the order the triangle indices refer to
        triangles: Index triples into vertices
    """

    vertices: list[Vertex]
    triangles: list[Triangle]


def sort_vertices(vertices: Sequence[Vertex]) -> list[Vertex]:
    """Sort vertices left to right, bottom to top."""
    return sorted(vertices, key=lambda v: (v.x, v.y))


def _ccw(a: int, b: int, c: int, points: Sequence[Vertex]) -> Triangle:
    """Order a triangle's indices counter-clockwise."""
    if cross(points[a], points[b], points[c]) < 0:
        return (a, c, b)
    return (a, b, c)


def delaunay_triangulate(points: Sequence[Vertex]) -> list[Triangle]:
    """Delaunay-triangulate points sorted by (x, y).

    Exact duplicate positions are triangulated once, using the first index.

    Args:
        points: Vertices sorted by ascending x, then ascending y

    Returns:
        Counter-clockwise triangles with non-zero area

    Raises:
        TriangulationError: If fewer than 3 distinct points or all colinear
    """
    # Exact duplicates are adjacent after sorting
    order = [i for i in range(len(points)) if i == 0 or points[i].position != points[i - 1].position]
    if len(order) < 3:
        raise TriangulationError(f"Need at least 3 distinct points, got {len(order)}")

    first, second = points[order[0]], points[order[1]]
    if all(cross(first, second, points[i]) == 0 for i in order[2:]):
        raise TriangulationError("All points are colinear")

    coords = np.array([(points[i].x, points[i].y) for i in order], dtype=float)
    try:
        simplices = Delaunay(coords).simplices
    except QhullError as e:
        raise TriangulationError(f"Delaunay triangulation failed: {e}") from e

    triangles = []
    for a, b, c in simplices:
        a, b, c = order[int(a)], order[int(b)], order[int(c)]
        # Qhull can emit flat simplices for degenerate input
        if cross(points[a], points[b], points[c]) == 0:
            continue
        triangles.append(_ccw(a, b, c, points))

    if not triangles:
        raise TriangulationError("Delaunay triangulation produced no triangles")
    return triangles


def quad_fan_triangulate(points: Sequence[Vertex]) -> list[Triangle]:
    """Triangulate four sorted corner points as two triangles.

    With points sorted by (x, y), the walk 0 -> 1 -> 3 -> 2 traces the
    quad's boundary whenever it is convex, and the diagonal 0-3 splits it in
    two. Non-convex or other-sized inputs use Delaunay instead.

    Args:
        points: Vertices sorted by ascending x, then ascending y

    Returns:
        Counter-clockwise triangles
    """
    if len(points) != 4:
        return delaunay_triangulate(points)

    # The fan is valid only when 0 -> 1 -> 3 -> 2 walks a strictly convex quad
    cycle = (0, 1, 3, 2)
    turns = [cross(points[cycle[i]], points[cycle[(i + 1) % 4]], points[cycle[(i + 2) % 4]]) for i in range(4)]
    if not (all(t > 0 for t in turns) or all(t < 0 for t in turns)):
        return delaunay_triangulate(points)
    return [_ccw(0, 1, 3, points), _ccw(0, 3, 2, points)]


STRATEGIES: dict[TriangulationStrategy, TriangulationFn] = {
    TriangulationStrategy.DELAUNAY: delaunay_triangulate,
    TriangulationStrategy.QUAD_FAN: quad_fan_triangulate,
}


def get_strategy(strategy: TriangulationStrategy) -> TriangulationFn:
    """Look up the triangulation function for a configured strategy."""
    return STRATEGIES[strategy]


def triangulate(
    vertices: Sequence[Vertex],
    strategy: TriangulationFn | None = None,
) -> Triangulation:
    """Triangulate a fragment's vertex set.

    Args:
        vertices: At least 3 vertices, not all colinear
        strategy: Generic triangulation used for more than 3 vertices
            (defaults to delaunay_triangulate)

    Returns:
        Triangulation whose triangle indices refer to its own vertex list.
        A 3-vertex input is kept in its original order as triangle (0, 1, 2).

    Raises:
        TriangulationError: If the vertices cannot be triangulated
    """
    if len(vertices) < 3:
        raise TriangulationError(f"Need at least 3 vertices, got {len(vertices)}")

    if len(vertices) == 3:
        return Triangulation(vertices=list(vertices), triangles=[(0, 1, 2)])

    ordered = sort_vertices(vertices)
    fn = strategy or delaunay_triangulate
    return Triangulation(vertices=ordered, triangles=fn(ordered))
