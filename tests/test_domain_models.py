"""Tests for domain models to verify they work correctly."""

import pytest

from meshslicer.domain import (
    DEFAULT_TANGENT,
    CutLine,
    Fragment,
    MeshData,
    Point2D,
    TexCoord,
    Vertex,
)


class TestPoint2D:
    """Tests for Point2D class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point2D(1.5, -2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point2D(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_equality_is_exact(self) -> None:
        """Points compare equal only on identical coordinates."""
        assert Point2D(0.1, 0.2) == Point2D(0.1, 0.2)
        assert Point2D(0.1, 0.2) != Point2D(0.1, 0.2 + 1e-15)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point2D(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Points can be used in sets."""
        assert len({Point2D(0, 0), Point2D(0, 0), Point2D(1, 0)}) == 2


class TestVertex:
    """Tests for Vertex class."""

    def test_vertex_of(self) -> None:
        """Test building a vertex from raw coordinates."""
        v = Vertex.of(1.0, 2.0, 0.25, 0.75)
        assert v.position == Point2D(1.0, 2.0)
        assert v.uv == TexCoord(0.25, 0.75)

    def test_vertex_exposes_position(self) -> None:
        """x and y come from the position."""
        v = Vertex.of(3.0, 4.0, 0.0, 1.0)
        assert (v.x, v.y) == (3.0, 4.0)

    def test_vertex_serialization(self) -> None:
        """Test vertex serialization and deserialization."""
        v1 = Vertex.of(1.0, 2.0, 0.5, 0.25)
        data = v1.to_dict()
        assert data == {"x": 1.0, "y": 2.0, "u": 0.5, "v": 0.25}
        assert Vertex.from_dict(data) == v1

    def test_vertex_from_dict_coerces_ints(self) -> None:
        """Integer coordinates in documents become floats."""
        v = Vertex.from_dict({"x": 1, "y": 0, "u": 1, "v": 0})
        assert isinstance(v.x, float)
        assert isinstance(v.uv.u, float)


class TestCutLine:
    """Tests for CutLine class."""

    def test_from_coords(self) -> None:
        """Test building a cut line from coordinates."""
        cut = CutLine.from_coords(0.0, 1.0, 2.0, 3.0)
        assert cut.point1 == Point2D(0.0, 1.0)
        assert cut.point2 == Point2D(2.0, 3.0)
        assert cut.direction == (2.0, 2.0)

    def test_extend_lengthens_both_ends(self) -> None:
        """Extension pushes each endpoint out by multiplier line lengths."""
        cut = CutLine.from_coords(0.0, 0.0, 1.0, 0.0)
        cut.extend(2.0)
        assert cut.point1 == Point2D(-2.0, 0.0)
        assert cut.point2 == Point2D(3.0, 0.0)

    def test_extend_keeps_direction(self) -> None:
        """Extension does not rotate the line."""
        cut = CutLine.from_coords(1.0, 1.0, 2.0, 3.0)
        cut.extend(10.0)
        dx, dy = cut.direction
        assert dx > 0
        assert dy == pytest.approx(2 * dx)

    def test_degenerate(self) -> None:
        """A line with coincident endpoints is degenerate."""
        assert CutLine.from_coords(1, 1, 1, 1).is_degenerate()
        assert not CutLine.from_coords(0, 0, 1, 1).is_degenerate()

    def test_serialization(self) -> None:
        """Test cut line serialization and deserialization."""
        cut = CutLine.from_coords(0.5, -1.0, 0.5, 2.0)
        assert CutLine.from_dict(cut.to_dict()) == cut
        assert cut.to_tuple() == (0.5, -1.0, 0.5, 2.0)

    def test_str(self) -> None:
        """Test human-readable rendering."""
        assert str(CutLine.from_coords(0.5, -1.0, 0.5, 2.0)) == "(0.5, -1) -> (0.5, 2)"


class TestMeshData:
    """Tests for MeshData class."""

    def test_indices_flatten_triangles(self) -> None:
        """Index buffer lists triangle corners in order."""
        mesh = MeshData(
            positions=[(0.0, 0.0, 0.0)] * 4,
            uvs=[(0.0, 0.0)] * 4,
            tangents=[DEFAULT_TANGENT] * 4,
            triangles=[(0, 2, 1), (1, 2, 3)],
            normals=[(0.0, 0.0, 1.0)] * 2,
        )
        assert mesh.indices == [0, 2, 1, 1, 2, 3]
        assert mesh.vertex_count == 4

    def test_serialization(self) -> None:
        """Test mesh serialization and deserialization."""
        mesh = MeshData(
            positions=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
            uvs=[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)],
            tangents=[DEFAULT_TANGENT] * 3,
            triangles=[(0, 1, 2)],
            normals=[(0.0, 0.0, 1.0)],
        )
        restored = MeshData.from_dict(mesh.to_dict())
        assert restored == mesh


class TestFragment:
    """Tests for Fragment class."""

    def test_fragment_bounds(self, unit_square) -> None:
        """Bounding boxes cover positions and UVs."""
        fragment = Fragment(handle=0, vertices=unit_square)
        assert fragment.bounding_box() == (0.0, 0.0, 1.0, 1.0)
        assert fragment.uv_bounds() == (0.0, 0.0, 1.0, 1.0)

    def test_fragment_area_from_triangles(self, unit_square) -> None:
        """Area sums the fragment's triangles."""
        fragment = Fragment(handle=0, vertices=unit_square, triangles=[(0, 1, 2), (0, 2, 3)])
        assert fragment.area() == pytest.approx(1.0)

    def test_fragment_without_triangles_has_no_area(self, unit_square) -> None:
        """Area is derived from triangles only."""
        assert Fragment(handle=0, vertices=unit_square).area() == 0.0

    def test_fragment_convex_hull(self, unit_square) -> None:
        """Hull is computed on demand from the vertices."""
        fragment = Fragment(handle=0, vertices=[*unit_square, Vertex.of(0.5, 0.5, 0.5, 0.5)])
        hull = fragment.convex_hull()
        assert len(hull) == 4
        assert Vertex.of(0.5, 0.5, 0.5, 0.5) not in hull

    def test_fragment_to_dict(self, unit_square) -> None:
        """Serialized fragments carry handle, parent and vertices."""
        fragment = Fragment(handle=3, vertices=unit_square, parent=1)
        data = fragment.to_dict()
        assert data["handle"] == 3
        assert data["parent"] == 1
        assert len(data["vertices"]) == 4
        assert data["mesh"] is None
