"""Core geometric types for fragment vertices.

This module defines the fundamental geometric types used throughout meshslicer:
- Point2D: A 2D position
- TexCoord: A texture coordinate
- Vertex: A position paired with its texture coordinate
- Orientation: Enum for three-point turn direction
- LineSide: Enum for point-vs-line classification
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Orientation(Enum):
    """Turn direction of three ordered points."""

    COLINEAR = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class LineSide(Enum):
    """Side of a directed line a point lies on.

    LEFT is the counter-clockwise side when looking along the line from its
    first point to its second point.
    """

    LEFT = auto()
    RIGHT = auto()
    ON = auto()


@dataclass(frozen=True, slots=True)
class Point2D:
    """A point in 2D space.

    Immutable and hashable. Equality is exact.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class TexCoord:
    """A texture coordinate.

    Attributes:
        u: Horizontal texture coordinate
        v: Vertical texture coordinate
    """

    u: float
    v: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (u, v) tuple."""
        return (self.u, self.v)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A fragment vertex: a position and its texture coordinate.

    Exposes ``x`` and ``y`` of its position so geometry functions accept
    vertices and bare points interchangeably.

    Attributes:
        position: Position in shape space
        uv: Texture coordinate at the position
    """

    position: Point2D
    uv: TexCoord

    @classmethod
    def of(cls, x: float, y: float, u: float, v: float) -> "Vertex":
        """Build a vertex from raw coordinates."""
        return cls(Point2D(x, y), TexCoord(u, v))

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, u and v fields
        """
        return {
            "x": self.position.x,
            "y": self.position.y,
            "u": self.uv.u,
            "v": self.uv.v,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, u and v fields

        Returns:
            Vertex instance
        """
        return cls.of(
            float(data["x"]),
            float(data["y"]),
            float(data["u"]),
            float(data["v"]),
        )
