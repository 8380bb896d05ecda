"""Meshslicer - Slice textured 2D meshes along straight cut lines.

Meshslicer takes a 2D polygon with per-vertex texture coordinates and
bisects it along arbitrary cut lines, recursively, producing renderable
fragments whose UVs stay continuous across every cut.

Example:
    $ meshslicer default --cut 0.5,-1,0.5,2

This splits the default unit quad into two 0.5 x 1 fragments.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
