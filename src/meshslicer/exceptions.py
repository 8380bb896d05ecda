"""Exception hierarchy for Meshslicer."""


class MeshSlicerError(Exception):
    """Base exception for all Meshslicer errors."""

    pass


class ShapeError(MeshSlicerError):
    """Errors related to loading or saving shapes."""

    pass


class ShapeLoadError(ShapeError):
    """Error loading a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shape '{path}': {reason}")


class ShapeSaveError(ShapeError):
    """Error saving fragment meshes."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save meshes '{path}': {reason}")


class GeometryError(MeshSlicerError):
    """Errors in geometric calculations."""

    pass


class DegenerateHullError(GeometryError):
    """Convex hull could not be built from the given points."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TriangulationError(GeometryError):
    """Vertex set could not be triangulated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SliceError(MeshSlicerError):
    """Errors related to slicing a single fragment."""

    def __init__(self, message: str, fragment_handle: int | None = None) -> None:
        self.fragment_handle = fragment_handle
        super().__init__(message)


class AmbiguousIntersectionError(SliceError):
    """Cut line crosses the fragment hull in more than two places."""

    def __init__(self, count: int, fragment_handle: int | None = None) -> None:
        self.count = count
        super().__init__(
            f"Cut line intersects the fragment hull in {count} places, expected 2",
            fragment_handle,
        )


class NoIntersectionError(SliceError):
    """Cut line does not cross the fragment hull in exactly two places."""

    def __init__(self, count: int, fragment_handle: int | None = None) -> None:
        self.count = count
        super().__init__(
            f"Cut line intersects the fragment hull in {count} places, expected 2",
            fragment_handle,
        )
