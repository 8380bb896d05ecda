"""End-to-end slicing scenarios over the fragment arena."""

import random

import pytest

from meshslicer.config import MeshSlicerSettings, SliceConfig, TriangulationConfig, TriangulationStrategy
from meshslicer.core import FragmentSlicer
from meshslicer.domain import CutLine, Vertex
from meshslicer.exceptions import NoIntersectionError, TriangulationError


def total_area(slicer: FragmentSlicer) -> float:
    return sum(f.area() for f in slicer.fragments)


def has_point(fragment, x: float, y: float) -> bool:
    return any(v.x == pytest.approx(x) and v.y == pytest.approx(y) for v in fragment.vertices)


def assert_uv_matches_position(slicer: FragmentSlicer, scale: float = 1.0) -> None:
    """UVs stay a linear function of position across every cut."""
    for fragment in slicer.fragments:
        for v in fragment.vertices:
            assert v.uv.u == pytest.approx(v.x * scale, abs=1e-12)
            assert v.uv.v == pytest.approx(v.y * scale, abs=1e-12)


class TestSingleCut:
    """A single cut across the initial shape."""

    def test_initial_fragment(self, quad):
        """The initial shape is one triangulated fragment."""
        slicer = FragmentSlicer(quad)
        assert len(slicer.fragments) == 1
        assert slicer.fragments[0].handle == 0
        assert len(slicer.fragments[0].triangles) == 2
        assert total_area(slicer) == pytest.approx(1.0)

    def test_unit_square_halves(self, unit_square):
        """Vertical cut through the unit square gives two 0.5 x 1 rectangles."""
        slicer = FragmentSlicer(unit_square)
        report = slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))

        assert report.split_count == 1
        assert report.new_handles == [1]
        left, right = slicer.fragments

        assert left.bounding_box() == (0.0, 0.0, 0.5, 1.0)
        assert right.bounding_box() == (0.5, 0.0, 1.0, 1.0)
        assert left.uv_bounds()[0] == 0.0 and left.uv_bounds()[2] == 0.5
        assert right.uv_bounds()[0] == 0.5 and right.uv_bounds()[2] == 1.0
        assert left.area() == pytest.approx(0.5)
        assert right.area() == pytest.approx(0.5)
        assert left.vertex_count == 4
        assert right.vertex_count == 4

    def test_parent_bookkeeping(self, quad):
        """The right half records the fragment it was split from."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))

        assert slicer.get(0).parent is None
        assert slicer.get(1).parent == 0
        assert slicer.children_of(0) == [slicer.get(1)]

    def test_meshes_rebuilt(self, quad):
        """Both halves carry meshes matching their vertices."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))

        for fragment in slicer.fragments:
            assert fragment.mesh is not None
            assert fragment.mesh.vertex_count == fragment.vertex_count
            assert fragment.mesh.triangles == fragment.triangles

    def test_triangle_shape(self, right_triangle):
        """A 3-vertex shape splits into a quad and a triangle."""
        slicer = FragmentSlicer(right_triangle)
        slicer.add_slice(CutLine.from_coords(1, -1, 1, 3))

        left, right = slicer.fragments
        assert left.vertex_count == 4
        assert right.vertex_count == 3
        assert left.area() == pytest.approx(1.5)
        assert right.area() == pytest.approx(0.5)
        assert_uv_matches_position(slicer, scale=0.5)


class TestMultipleCuts:
    """Successive cuts over a growing set of fragments."""

    def test_quartering(self, quad):
        """Two perpendicular cuts make four equal quarters."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        report = slicer.add_slice(CutLine.from_coords(-1, 0.5, 2, 0.5))

        assert len(report.outcomes) == 2
        assert report.new_handles == [2, 3]
        assert len(slicer.fragments) == 4
        for fragment in slicer.fragments:
            assert fragment.area() == pytest.approx(0.25)
        assert_uv_matches_position(slicer)

    def test_new_fragments_not_recut(self, quad):
        """Fragments created by a cut are not processed by the same cut."""
        slicer = FragmentSlicer(quad)
        report = slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))

        assert [o.handle for o in report.outcomes] == [0]
        assert len(slicer.fragments) == 2

    def test_area_conserved(self, quad):
        """Total area is unchanged by any sequence of cuts."""
        slicer = FragmentSlicer(quad)
        cuts = [
            CutLine.from_coords(0.5, -1, 0.5, 2),
            CutLine.from_coords(-1, 0.5, 2, 0.5),
            CutLine.from_coords(-1, -1, 2, 2),
        ]
        for cut in cuts:
            slicer.add_slice(cut)
            assert total_area(slicer) == pytest.approx(1.0)
        assert_uv_matches_position(slicer)

    def test_corner_touch_leaves_fragment(self, quad):
        """Fragments the cut only touches at a corner are not split."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        slicer.add_slice(CutLine.from_coords(-1, 0.5, 2, 0.5))
        report = slicer.add_slice(CutLine.from_coords(-1, -1, 2, 2))

        assert report.split_count == 2
        assert len(report.failures) == 2
        assert all(isinstance(o.error, NoIntersectionError) for o in report.failures)
        assert len(slicer.fragments) == 6
        assert len(slicer.history) == 2

    def test_partial_failure_keeps_earlier_splits(self, quad):
        """A miss on one fragment does not undo splits of others."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        report = slicer.add_slice(CutLine.from_coords(0.75, -1, 0.75, 2))

        assert report.failures[0].handle == 0
        assert report.new_handles == [2]
        assert len(slicer.fragments) == 3
        assert slicer.get(0).bounding_box() == (0.0, 0.0, 0.5, 1.0)
        assert len(slicer.history) == 1
        assert total_area(slicer) == pytest.approx(1.0)

    def test_narrow_strips(self, quad):
        """Repeated misses do not change the cut a later fragment sees."""
        slicer = FragmentSlicer(quad)
        for k in range(1, 16):
            slicer.add_slice(CutLine.from_coords(k / 16, -1, k / 16, 2))
        assert len(slicer.fragments) == 16

        cut = CutLine.from_coords(0.96, -1, 0.99, 2)
        report = slicer.add_slice(cut)

        assert report.split_count == 1
        assert report.new_handles == [16]
        assert len(report.failures) == 15
        assert cut.to_tuple() == (0.96, -1.0, 0.99, 2.0)
        for fragment in (slicer.get(15), slicer.get(16)):
            assert has_point(fragment, 0.97, 0.0)
            assert has_point(fragment, 0.98, 1.0)
        assert total_area(slicer) == pytest.approx(1.0)


class TestHistory:
    """Which cuts the slicer remembers."""

    def test_cut_kept_as_given(self, quad):
        """A cut that splits every fragment is recorded unchanged."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, 0.4, 0.5, 0.6))

        assert [c.to_tuple() for c in slicer.history] == [(0.5, 0.4, 0.5, 0.6)]

    def test_cut_missing_any_fragment_dropped(self, quad):
        """A cut that misses one fragment is dropped even if it split another."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        report = slicer.add_slice(CutLine.from_coords(0.75, -1, 0.75, 2))

        assert report.split_count == 1
        assert report.missed
        assert [c.to_tuple() for c in slicer.history] == [(0.5, -1.0, 0.5, 2.0)]

    def test_strip_history(self, quad):
        """Only the first of a run of parallel cuts reaches every fragment."""
        slicer = FragmentSlicer(quad)
        for k in range(1, 5):
            slicer.add_slice(CutLine.from_coords(k / 5, -1, k / 5, 2))

        assert len(slicer.fragments) == 5
        assert [c.to_tuple() for c in slicer.history] == [(0.2, -1.0, 0.2, 2.0)]


class TestRandomCuts:
    """Properties that hold for any sequence of cuts through the shape."""

    @pytest.mark.parametrize("seed", range(20))
    def test_area_and_containment(self, quad, seed):
        settings = MeshSlicerSettings(slicing=SliceConfig(dedup_epsilon=1e-9))
        slicer = FragmentSlicer(quad, settings)
        rng = random.Random(seed)

        for _ in range(5):
            x1, y1, x2, y2 = (rng.uniform(0, 1) for _ in range(4))
            slicer.add_slice(CutLine.from_coords(x1, y1, x2, y2))
            assert total_area(slicer) == pytest.approx(1.0, abs=1e-6)

        for fragment in slicer.fragments:
            for v in fragment.vertices:
                assert -1e-9 <= v.x <= 1 + 1e-9
                assert -1e-9 <= v.y <= 1 + 1e-9
                assert v.uv.u == pytest.approx(v.x, abs=1e-9)
                assert v.uv.v == pytest.approx(v.y, abs=1e-9)


class TestFailures:
    """Cuts that cannot be applied."""

    def test_cut_outside_shape(self, quad):
        """A cut beside the shape leaves every fragment unchanged."""
        slicer = FragmentSlicer(quad)
        before = [list(f.vertices) for f in slicer.fragments]

        report = slicer.add_slice(CutLine.from_coords(5, 0, 5, 1))

        assert report.split_count == 0
        assert isinstance(report.failures[0].error, NoIntersectionError)
        assert [list(f.vertices) for f in slicer.fragments] == before
        assert slicer.history == []

    def test_stats(self, quad):
        """Statistics count applied and discarded cuts."""
        slicer = FragmentSlicer(quad)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))
        slicer.add_slice(CutLine.from_coords(5, 0, 5, 1))

        stats = slicer.stats
        assert stats.cuts_applied == 1
        assert stats.cuts_discarded == 1
        assert stats.fragments_split == 1
        assert stats.failure_count == 2
        assert len(stats.slice_timings_ms) == 2

    def test_colinear_initial_shape(self):
        """An initial shape without area is rejected."""
        vertices = [Vertex.of(float(i), 0.0, 0.0, 0.0) for i in range(4)]
        with pytest.raises(TriangulationError):
            FragmentSlicer(vertices)


class TestSettings:
    """Configured behavior of the slicer."""

    def test_quad_fan_strategy(self, quad):
        """The configured strategy triangulates every fragment."""
        settings = MeshSlicerSettings(
            triangulation=TriangulationConfig(strategy=TriangulationStrategy.QUAD_FAN)
        )
        slicer = FragmentSlicer(quad, settings)
        slicer.add_slice(CutLine.from_coords(0.5, -1, 0.5, 2))

        assert [len(f.triangles) for f in slicer.fragments] == [2, 2]
        assert total_area(slicer) == pytest.approx(1.0)
