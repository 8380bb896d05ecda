"""Cut line representation.

A cut line is the segment a user draws across the shape. Slicing treats it as
an infinite line unless configured otherwise, and can lengthen it in place
when a first attempt misses a fragment.
"""

from dataclasses import dataclass
from typing import Any

from meshslicer.domain.vertex import Point2D

DEFAULT_EXTEND_MULTIPLIER = 10.0


@dataclass
class CutLine:
    """A directed line segment used to bisect fragments.

    Attributes:
        point1: First endpoint
        point2: Second endpoint
    """

    point1: Point2D
    point2: Point2D

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "CutLine":
        """Build a cut line from raw endpoint coordinates."""
        return cls(Point2D(x1, y1), Point2D(x2, y2))

    @property
    def direction(self) -> tuple[float, float]:
        """Vector from point1 to point2."""
        return (self.point2.x - self.point1.x, self.point2.y - self.point1.y)

    def is_degenerate(self) -> bool:
        """Check if both endpoints coincide."""
        return self.point1 == self.point2

    def extend(self, multiplier: float = DEFAULT_EXTEND_MULTIPLIER) -> None:
        """Lengthen the line symmetrically along its direction.

        Each endpoint moves away from the other by ``multiplier`` times the
        current line length. The line is modified in place.

        Args:
            multiplier: Number of line lengths to add at each end
        """
        dx, dy = self.direction
        self.point1 = Point2D(self.point1.x - dx * multiplier, self.point1.y - dy * multiplier)
        self.point2 = Point2D(self.point2.x + dx * multiplier, self.point2.y + dy * multiplier)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x1, y1, x2, y2)."""
        return (self.point1.x, self.point1.y, self.point2.x, self.point2.y)

    def __str__(self) -> str:
        return (
            f"({self.point1.x:g}, {self.point1.y:g}) -> "
            f"({self.point2.x:g}, {self.point2.y:g})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"point1": list(self.point1.to_tuple()), "point2": list(self.point2.to_tuple())}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CutLine":
        """Deserialize from dictionary."""
        x1, y1 = data["point1"]
        x2, y2 = data["point2"]
        return cls.from_coords(float(x1), float(y1), float(x2), float(y2))
