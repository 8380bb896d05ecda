"""Mesh assembly for the external renderer.

Packs a triangulated vertex set into the buffers a renderer consumes.
"""

from meshslicer.core.geometry import triangle_area
from meshslicer.core.triangulate import Triangulation
from meshslicer.domain import DEFAULT_TANGENT, MeshData

FRONT_NORMAL = (0.0, 0.0, 1.0)
BACK_NORMAL = (0.0, 0.0, -1.0)


def assemble_mesh(triangulation: Triangulation) -> MeshData:
    """Build the renderable mesh for a triangulated fragment.

    Args:
        triangulation: Vertices and triangle indices of the fragment

    Returns:
        MeshData with z = 0 positions, UVs, the default tangent per vertex
        and one flat normal per triangle
    """
    vertices = triangulation.vertices
    normals = []
    for a, b, c in triangulation.triangles:
        # Planar mesh: the normal only depends on the triangle's winding
        if triangle_area(vertices[a], vertices[b], vertices[c]) < 0:
            normals.append(BACK_NORMAL)
        else:
            normals.append(FRONT_NORMAL)

    return MeshData(
        positions=[(v.x, v.y, 0.0) for v in vertices],
        uvs=[v.uv.to_tuple() for v in vertices],
        tangents=[DEFAULT_TANGENT] * len(vertices),
        triangles=list(triangulation.triangles),
        normals=normals,
    )
