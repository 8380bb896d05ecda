"""Core geometry and slicing algorithms for meshslicer.

This module contains the core algorithms for:

- Geometry primitives (orientation, distance, interpolation, area)
- Convex hull construction (Graham scan)
- Line intersection and side classification
- Fragment slicing (hull crossing, vertex partitioning)
- Triangulation and mesh assembly

Everything except FragmentSlicer is a pure function over domain models.

Key functions:
- orientation: Three-point turn test
- convex_hull: Counter-clockwise hull of a point set
- segments_intersect: Edge/line intersection
- side_of_line: LEFT/RIGHT/ON classification
- find_cut_intersections: Where a cut crosses a fragment, with UVs
- slice_fragment: Split one fragment in two
- triangulate: Vertex set to triangle indices
- assemble_mesh: Triangulation to renderable mesh

Key classes:
- FragmentSlicer: Fragment arena cut by successive lines
"""

from meshslicer.core.assembler import assemble_mesh
from meshslicer.core.geometry import (
    cross,
    distance,
    lerp,
    orientation,
    signed_area,
    triangle_area,
)
from meshslicer.core.hull import convex_hull
from meshslicer.core.intersect import segments_intersect, side_of_line
from meshslicer.core.slicer import (
    CutIntersection,
    FragmentOutcome,
    FragmentSlicer,
    SliceReport,
    build_fragment,
    find_cut_intersections,
    partition_vertices,
    slice_fragment,
    slice_vertices,
)
from meshslicer.core.triangulate import (
    Triangulation,
    delaunay_triangulate,
    quad_fan_triangulate,
    triangulate,
)

__all__ = [
    # Slicer classes
    "CutIntersection",
    "FragmentOutcome",
    "FragmentSlicer",
    "SliceReport",
    # Triangulation
    "Triangulation",
    "assemble_mesh",
    "build_fragment",
    # Geometry functions
    "convex_hull",
    "cross",
    "delaunay_triangulate",
    "distance",
    "find_cut_intersections",
    "lerp",
    "orientation",
    "partition_vertices",
    "quad_fan_triangulate",
    "segments_intersect",
    "side_of_line",
    "signed_area",
    "slice_fragment",
    "slice_vertices",
    "triangle_area",
    "triangulate",
]
