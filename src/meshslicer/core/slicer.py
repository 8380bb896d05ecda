"""Fragment slicing along cut lines.

This module cuts fragments in two along a straight line:

1. Find where the cut line crosses the fragment's convex hull (exactly two
   distinct points), interpolating UVs along the crossed hull edges
2. Partition the fragment's vertices by which side of the crossing line
   they fall on; vertices on the line and both crossing points go to both sides
3. Triangulate and assemble both halves

Key components:
- find_cut_intersections: Hull/cut-line crossing with interpolated UVs
- slice_vertices: Partition a vertex set into left and right halves
- slice_fragment: Split one fragment into two new fragments
- FragmentSlicer: Arena of fragments sliced by successive cuts
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from meshslicer.config import MeshSlicerSettings, SliceConfig
from meshslicer.core.assembler import assemble_mesh
from meshslicer.core.geometry import distance, lerp
from meshslicer.core.hull import convex_hull
from meshslicer.core.intersect import segments_intersect, side_of_line
from meshslicer.core.triangulate import TriangulationFn, get_strategy, triangulate
from meshslicer.domain import CutLine, Fragment, LineSide, Vertex
from meshslicer.exceptions import (
    AmbiguousIntersectionError,
    GeometryError,
    NoIntersectionError,
    SliceError,
)
from meshslicer.utils import SliceLogger, SliceStats

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CutIntersection:
    """The two points where a cut line crosses a fragment hull.

    Attributes:
        first: First crossing found walking the hull, with interpolated UV
        second: Second crossing, with interpolated UV
    """

    first: Vertex
    second: Vertex

    def as_line(self) -> CutLine:
        """Directed line from the first crossing to the second."""
        return CutLine(self.first.position, self.second.position)


def add_unique_vertex(vertices: list[Vertex], candidate: Vertex, epsilon: float) -> bool:
    """Append a vertex unless an existing one is within epsilon of it.

    Distance is measured over position and UV together.

    Args:
        vertices: Target list, modified in place
        candidate: Vertex to add
        epsilon: Merge distance

    Returns:
        True if the vertex was added
    """
    for existing in vertices:
        gap = (
            (existing.x - candidate.x) ** 2
            + (existing.y - candidate.y) ** 2
            + (existing.uv.u - candidate.uv.u) ** 2
            + (existing.uv.v - candidate.uv.v) ** 2
        ) ** 0.5
        if gap < epsilon:
            return False
    vertices.append(candidate)
    return True


def find_cut_intersections(
    vertices: Sequence[Vertex],
    cut_line: CutLine,
    *,
    bounded: bool = False,
) -> CutIntersection:
    """Find the two points where a cut line crosses the hull of a vertex set.

    Crossings at the same exact position (the line passing through a hull
    vertex shared by two edges) count once.

    Args:
        vertices: Fragment vertices
        cut_line: Line to cut along
        bounded: Treat the cut line as a finite segment

    Returns:
        CutIntersection with both crossing vertices

    Raises:
        DegenerateHullError: If the vertices have no valid hull
        AmbiguousIntersectionError: If more than two distinct crossings exist
        NoIntersectionError: If fewer than two distinct crossings exist
    """
    hull = convex_hull(vertices)
    found: list[Vertex] = []
    n = len(hull)

    for i in range(n):
        edge_p1 = hull[i]
        edge_p2 = hull[(i + 1) % n]
        point = segments_intersect(edge_p1, edge_p2, cut_line.point1, cut_line.point2, bounded=bounded)
        if point is None:
            continue
        if any(existing.position == point for existing in found):
            continue
        if len(found) >= 2:
            logger.error(
                "Cut line crosses hull in more than 2 places",
                cut=str(cut_line),
                hull_size=n,
            )
            raise AmbiguousIntersectionError(len(found) + 1)

        edge_length = distance(edge_p2, edge_p1)
        t = distance(point, edge_p1) / edge_length if edge_length > 0 else 0.0
        found.append(Vertex(point, lerp(edge_p1.uv, edge_p2.uv, t)))

    if len(found) != 2:
        raise NoIntersectionError(len(found))

    return CutIntersection(found[0], found[1])


def partition_vertices(
    vertices: Sequence[Vertex],
    intersection: CutIntersection,
    epsilon: float,
) -> tuple[list[Vertex], list[Vertex]]:
    """Split vertices into the two sides of a crossing line.

    Args:
        vertices: Fragment vertices
        intersection: Crossing points defining the directed split line
        epsilon: Merge distance for duplicate vertices

    Returns:
        Tuple of (left, right) vertex lists. Vertices on the line and both
        crossing points appear in both.
    """
    left: list[Vertex] = []
    right: list[Vertex] = []
    line_p1 = intersection.first.position
    line_p2 = intersection.second.position

    for vertex in vertices:
        side = side_of_line(vertex, line_p1, line_p2)
        if side is LineSide.RIGHT:
            add_unique_vertex(right, vertex, epsilon)
        elif side is LineSide.LEFT:
            add_unique_vertex(left, vertex, epsilon)
        else:
            add_unique_vertex(right, vertex, epsilon)
            add_unique_vertex(left, vertex, epsilon)

    for crossing in (intersection.first, intersection.second):
        add_unique_vertex(left, crossing, epsilon)
        add_unique_vertex(right, crossing, epsilon)

    return left, right


def slice_vertices(
    vertices: Sequence[Vertex],
    cut_line: CutLine,
    config: SliceConfig | None = None,
) -> tuple[list[Vertex], list[Vertex]]:
    """Cut a vertex set in two along a line.

    If the line misses, the search is retried once with an extended copy of
    the line. The given line is never modified.

    Args:
        vertices: Fragment vertices
        cut_line: Line to cut along
        config: Slicing configuration

    Returns:
        Tuple of (left, right) vertex lists

    Raises:
        DegenerateHullError: If the vertices have no valid hull
        AmbiguousIntersectionError: If the line crosses the hull more than twice
        NoIntersectionError: If the line still misses after extension
    """
    config = config or SliceConfig()
    try:
        intersection = find_cut_intersections(vertices, cut_line, bounded=config.bounded_cut_line)
    except NoIntersectionError:
        if not config.retry_with_extension:
            raise
        logger.debug("Cut line misses fragment, extending and retrying", cut=str(cut_line))
        extended = CutLine(cut_line.point1, cut_line.point2)
        extended.extend(config.extend_multiplier)
        intersection = find_cut_intersections(vertices, extended, bounded=config.bounded_cut_line)

    return partition_vertices(vertices, intersection, config.dedup_epsilon)


def build_fragment(
    handle: int,
    vertices: Sequence[Vertex],
    strategy: TriangulationFn | None = None,
    parent: int | None = None,
) -> Fragment:
    """Triangulate a vertex set and wrap it as a fragment.

    Raises:
        TriangulationError: If the vertices cannot be triangulated
    """
    triangulation = triangulate(vertices, strategy)
    return Fragment(
        handle=handle,
        vertices=triangulation.vertices,
        triangles=triangulation.triangles,
        mesh=assemble_mesh(triangulation),
        parent=parent,
    )


def slice_fragment(
    fragment: Fragment,
    cut_line: CutLine,
    right_handle: int,
    config: SliceConfig | None = None,
    strategy: TriangulationFn | None = None,
) -> tuple[Fragment, Fragment]:
    """Split a fragment in two along a cut line.

    The input fragment is not modified.

    Args:
        fragment: Fragment to cut
        cut_line: Line to cut along
        right_handle: Handle to give the right half
        config: Slicing configuration
        strategy: Generic triangulation strategy

    Returns:
        Tuple of (left, right) fragments. The left half keeps the input's
        handle and parent; the right half's parent is the input fragment.

    Raises:
        SliceError: If the cut line does not cross the fragment cleanly
        GeometryError: If a half cannot be built
    """
    try:
        left_vertices, right_vertices = slice_vertices(fragment.vertices, cut_line, config)
    except SliceError as e:
        e.fragment_handle = fragment.handle
        raise

    left = build_fragment(fragment.handle, left_vertices, strategy, parent=fragment.parent)
    right = build_fragment(right_handle, right_vertices, strategy, parent=fragment.handle)
    return left, right


@dataclass
class FragmentOutcome:
    """Result of applying one cut to one fragment.

    Attributes:
        handle: Fragment the cut was applied to
        new_handle: Handle of the created right half (None on failure)
        error: Failure that left the fragment unchanged (None on success)
    """

    handle: int
    new_handle: int | None = None
    error: SliceError | GeometryError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class SliceReport:
    """Per-fragment results of one add_slice call."""

    cut: CutLine
    outcomes: list[FragmentOutcome] = field(default_factory=list)

    @property
    def split_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failures(self) -> list[FragmentOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def new_handles(self) -> list[int]:
        return [o.new_handle for o in self.outcomes if o.new_handle is not None]

    @property
    def missed(self) -> bool:
        """Whether the cut line missed at least one fragment."""
        return any(isinstance(o.error, NoIntersectionError) for o in self.outcomes)


class FragmentSlicer:
    """Owns the fragments of one shape and cuts them along successive lines.

    Fragments live in an arena indexed by stable integer handles. A cut
    splits every fragment that existed when the cut started; the left half
    reuses the original fragment object and the right half is appended.

    Example:
        slicer = FragmentSlicer(default_quad())
        report = slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        for fragment in slicer.fragments:
            render(fragment.mesh)
    """

    def __init__(
        self,
        initial_vertices: Sequence[Vertex],
        settings: MeshSlicerSettings | None = None,
        strategy: TriangulationFn | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Create the slicer and its first fragment.

        Args:
            initial_vertices: At least 3 vertices of the initial shape, not all colinear
            settings: Application settings (defaults if None)
            strategy: Triangulation strategy overriding the configured one
            logger: Logger for slicing diagnostics

        Raises:
            TriangulationError: If the initial shape cannot be triangulated
        """
        self.settings = settings or MeshSlicerSettings()
        self.strategy = strategy or get_strategy(self.settings.triangulation.strategy)
        self.logger = logger or structlog.get_logger("meshslicer")
        self.slice_logger = SliceLogger(self.logger)
        self._fragments: list[Fragment] = [build_fragment(0, initial_vertices, self.strategy)]
        self._history: list[CutLine] = []

    @property
    def fragments(self) -> list[Fragment]:
        """All fragments in handle order."""
        return list(self._fragments)

    @property
    def history(self) -> list[CutLine]:
        """Cuts as given that split fragments without missing any, oldest first."""
        return list(self._history)

    @property
    def stats(self) -> SliceStats:
        return self.slice_logger.stats

    def get(self, handle: int) -> Fragment:
        """Look up a fragment by handle."""
        return self._fragments[handle]

    def children_of(self, handle: int) -> list[Fragment]:
        """Fragments split off from the given fragment."""
        return [f for f in self._fragments if f.parent == handle]

    def add_slice(self, cut_line: CutLine) -> SliceReport:
        """Cut every current fragment along a line.

        Fragments created by this call are not cut again by it. A fragment
        that fails to split is left unchanged and the remaining fragments are
        still processed; splits already made are kept. If the line misses any
        fragment, or splits none, the cut is dropped from the history.

        Args:
            cut_line: Line to cut along

        Returns:
            SliceReport with one outcome per fragment processed
        """
        start_time = time.perf_counter()
        report = SliceReport(cut=cut_line)
        self._history.append(cut_line)

        snapshot = list(self._fragments)
        self.slice_logger.log_cut_start(str(cut_line), len(snapshot))

        for fragment in snapshot:
            right_handle = len(self._fragments)
            try:
                left, right = slice_fragment(
                    fragment,
                    cut_line,
                    right_handle,
                    config=self.settings.slicing,
                    strategy=self.strategy,
                )
            except (SliceError, GeometryError) as e:
                self.slice_logger.log_fragment_failure(fragment.handle, e)
                report.outcomes.append(FragmentOutcome(handle=fragment.handle, error=e))
                continue

            fragment.vertices = left.vertices
            fragment.triangles = left.triangles
            fragment.mesh = left.mesh
            self._fragments.append(right)

            self.slice_logger.log_fragment_split(
                fragment.handle, left.vertex_count, right.vertex_count, right.handle
            )
            report.outcomes.append(FragmentOutcome(handle=fragment.handle, new_handle=right.handle))

        kept = report.split_count > 0 and not report.missed
        if not kept:
            self._history.pop()

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.slice_logger.log_cut_complete(report.split_count, duration_ms, kept=kept)
        return report
