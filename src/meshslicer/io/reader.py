"""Shape reader for JSON shape documents.

A shape document looks like::

    {
        "vertices": [{"x": 0, "y": 0, "u": 0, "v": 0}, ...],
        "cuts": [[x1, y1, x2, y2], ...]
    }

``cuts`` is optional.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from meshslicer.domain import CutLine, Vertex
from meshslicer.exceptions import ShapeLoadError


@dataclass
class ShapeDocument:
    """Initial shape and the cuts to apply to it.

    Attributes:
        vertices: Initial shape vertices, in input order
        cuts: Cut lines, in application order
    """

    vertices: list[Vertex]
    cuts: list[CutLine] = field(default_factory=list)


def default_quad() -> list[Vertex]:
    """Build a 1x1 quad whose UVs equal its positions.

    Vertices are emitted row by row, bottom to top, left to right.
    """
    return [Vertex.of(float(x), float(y), float(x), float(y)) for y in (0, 1) for x in (0, 1)]


def parse_cut(text: str) -> CutLine:
    """Parse a cut given as ``x1,y1,x2,y2``.

    Raises:
        ValueError: If the text does not hold four numbers
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 4:
        raise ValueError(f"Expected x1,y1,x2,y2 but got '{text}'")
    x1, y1, x2, y2 = (float(p) for p in parts)
    return CutLine.from_coords(x1, y1, x2, y2)


class VertexRecord(BaseModel):
    """One vertex entry of a shape document."""

    x: float
    y: float
    u: float
    v: float

    def to_vertex(self) -> Vertex:
        return Vertex.of(self.x, self.y, self.u, self.v)


class ShapeFile(BaseModel):
    """On-disk layout of a shape document."""

    vertices: list[VertexRecord] = Field(
        min_length=3,
        description="Initial shape vertices, in input order",
    )
    cuts: list[list[float]] = Field(
        default_factory=list,
        description="Cut lines as [x1, y1, x2, y2], in application order",
    )

    @field_validator("cuts")
    @classmethod
    def check_cut_coordinates(cls, cuts: list[list[float]]) -> list[list[float]]:
        for cut in cuts:
            if len(cut) != 4:
                raise ValueError(f"Cut must have 4 coordinates, got {len(cut)}")
        return cuts

    def to_document(self) -> ShapeDocument:
        return ShapeDocument(
            vertices=[record.to_vertex() for record in self.vertices],
            cuts=[CutLine.from_coords(*cut) for cut in self.cuts],
        )


def read_shape(path: Path) -> ShapeDocument:
    """Load a shape document.

    Args:
        path: Path to the JSON shape file

    Returns:
        Parsed ShapeDocument

    Raises:
        ShapeLoadError: If the file is missing or malformed
    """
    if not path.exists():
        raise ShapeLoadError(str(path), "file not found")

    try:
        shape_file = ShapeFile.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ShapeLoadError(str(path), str(e)) from e
    except ValidationError as e:
        raise ShapeLoadError(str(path), str(e)) from e

    return shape_file.to_document()
