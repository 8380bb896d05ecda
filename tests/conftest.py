"""Shared fixtures for meshslicer tests."""

import pytest

from meshslicer.domain import Vertex
from meshslicer.io import default_quad


@pytest.fixture
def unit_square() -> list[Vertex]:
    """Unit square with UVs equal to positions, counter-clockwise order."""
    return [
        Vertex.of(0.0, 0.0, 0.0, 0.0),
        Vertex.of(1.0, 0.0, 1.0, 0.0),
        Vertex.of(1.0, 1.0, 1.0, 1.0),
        Vertex.of(0.0, 1.0, 0.0, 1.0),
    ]


@pytest.fixture
def quad() -> list[Vertex]:
    """Default 1x1 quad in generator order."""
    return default_quad()


@pytest.fixture
def right_triangle() -> list[Vertex]:
    """Right triangle with legs of length 2 and UVs at half scale."""
    return [
        Vertex.of(0.0, 0.0, 0.0, 0.0),
        Vertex.of(2.0, 0.0, 1.0, 0.0),
        Vertex.of(0.0, 2.0, 0.0, 1.0),
    ]
