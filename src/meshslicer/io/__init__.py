"""Shape I/O layer for meshslicer.

This module reads initial shapes and cut lists from JSON documents and
writes sliced fragment meshes back out. It keeps file handling out of the
geometry core.

Key functions:
- default_quad: The 1x1 quad used when no shape is supplied
- read_shape: Load vertices and cuts from a shape document
- write_meshes: Save fragment meshes
"""

from meshslicer.io.reader import ShapeDocument, ShapeFile, default_quad, parse_cut, read_shape
from meshslicer.io.writer import get_sliced_path, write_meshes

__all__ = [
    "ShapeDocument",
    "ShapeFile",
    "default_quad",
    "get_sliced_path",
    "parse_cut",
    "read_shape",
    "write_meshes",
]
