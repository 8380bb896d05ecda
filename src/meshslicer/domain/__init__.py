"""Domain models for meshslicer.

This module contains the core domain models representing vertices, cut
lines, fragments and the renderable meshes built from them. Models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for JSON output
- Independent of any renderer

Key classes:
- Point2D: A 2D position
- TexCoord: A texture coordinate
- Vertex: A position with its texture coordinate
- CutLine: The line a fragment is bisected along
- Fragment: A triangulable polygon piece
- MeshData: Renderable payload of a fragment
"""

from meshslicer.domain.cut_line import DEFAULT_EXTEND_MULTIPLIER, CutLine
from meshslicer.domain.fragment import DEFAULT_TANGENT, Fragment, MeshData, Triangle
from meshslicer.domain.vertex import LineSide, Orientation, Point2D, TexCoord, Vertex

__all__: list[str] = [
    # Enums
    "LineSide",
    "Orientation",
    # Core types
    "Point2D",
    "TexCoord",
    "Vertex",
    "CutLine",
    "Triangle",
    "Fragment",
    "MeshData",
    # Constants
    "DEFAULT_EXTEND_MULTIPLIER",
    "DEFAULT_TANGENT",
]
