"""Fragment and renderable mesh representation.

This module defines the fragment domain model, an independently
triangulable polygon piece produced by slicing, and the mesh payload
handed to an external renderer.
"""

from dataclasses import dataclass, field
from typing import Any

from meshslicer.domain.vertex import Vertex

Triangle = tuple[int, int, int]

DEFAULT_TANGENT: tuple[float, float, float, float] = (1.0, 0.0, 0.0, -1.0)


@dataclass
class MeshData:
    """Renderable payload for one fragment.

    Attributes:
        positions: Vertex positions as (x, y, 0)
        uvs: Texture coordinates, one per position
        tangents: Tangent per vertex
        triangles: Index triples into positions
        normals: Flat normal per triangle
    """

    positions: list[tuple[float, float, float]]
    uvs: list[tuple[float, float]]
    tangents: list[tuple[float, float, float, float]]
    triangles: list[Triangle]
    normals: list[tuple[float, float, float]]

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def indices(self) -> list[int]:
        """Triangle indices flattened into a single index buffer."""
        return [index for triangle in self.triangles for index in triangle]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the mesh
        """
        return {
            "positions": [list(p) for p in self.positions],
            "uvs": [list(uv) for uv in self.uvs],
            "tangents": [list(t) for t in self.tangents],
            "triangles": [list(t) for t in self.triangles],
            "normals": [list(n) for n in self.normals],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MeshData":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a mesh

        Returns:
            MeshData instance
        """
        return cls(
            positions=[tuple(p) for p in data["positions"]],
            uvs=[tuple(uv) for uv in data["uvs"]],
            tangents=[tuple(t) for t in data["tangents"]],
            triangles=[tuple(t) for t in data["triangles"]],
            normals=[tuple(n) for n in data["normals"]],
        )


@dataclass
class Fragment:
    """An independently triangulable piece of the sliced shape.

    The vertex list is owned by the fragment. Triangles and mesh are derived
    from it and replaced whenever the vertices change; the convex hull is
    never stored.

    Attributes:
        handle: Stable index of the fragment in its slicer
        vertices: Fragment vertices, in triangulation order
        triangles: Index triples into vertices
        mesh: Assembled renderable payload
        parent: Handle of the fragment this one was split from
    """

    handle: int
    vertices: list[Vertex]
    triangles: list[Triangle] = field(default_factory=list)
    mesh: MeshData | None = None
    parent: int | None = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def convex_hull(self) -> list[Vertex]:
        """Compute the counter-clockwise convex hull of the vertices.

        Returns:
            Hull vertices, a subsequence of this fragment's vertices

        Raises:
            DegenerateHullError: If the vertices do not span an area
        """
        from meshslicer.core.hull import convex_hull

        return convex_hull(self.vertices)

    def area(self) -> float:
        """Total area covered by the fragment's triangles."""
        from meshslicer.core.geometry import triangle_area

        return sum(
            abs(triangle_area(self.vertices[a], self.vertices[b], self.vertices[c]))
            for a, b, c in self.triangles
        )

    def uv_bounds(self) -> tuple[float, float, float, float]:
        """Bounding box of the texture coordinates.

        Returns:
            Tuple of (min_u, min_v, max_u, max_v)
        """
        us = [v.uv.u for v in self.vertices]
        vs = [v.uv.v for v in self.vertices]
        return (min(us), min(vs), max(us), max(vs))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Bounding box of the positions.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the fragment
        """
        return {
            "handle": self.handle,
            "parent": self.parent,
            "vertices": [v.to_dict() for v in self.vertices],
            "mesh": self.mesh.to_dict() if self.mesh else None,
        }
