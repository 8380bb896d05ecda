"""Mesh writer for sliced fragments.

Writes every fragment's renderable mesh to a JSON document.
"""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from meshslicer import __version__
from meshslicer.domain import CutLine, Fragment
from meshslicer.exceptions import ShapeSaveError


def get_sliced_path(input_path: Path) -> Path:
    """Generate output path with -sliced suffix.

    Args:
        input_path: Original shape file path

    Returns:
        New path with -sliced suffix (e.g., star.json -> star-sliced.json)
    """
    return input_path.parent / f"{input_path.stem}-sliced.json"


def write_meshes(
    path: Path,
    fragments: Sequence[Fragment],
    cuts: Sequence[CutLine] = (),
) -> None:
    """Write fragment meshes to a JSON document.

    Args:
        path: Output file path
        fragments: Fragments to write
        cuts: Applied cuts, recorded for reference

    Raises:
        ShapeSaveError: If the file cannot be written
    """
    document = {
        "generator": f"meshslicer {__version__}",
        "created": datetime.now(timezone.utc).isoformat(),
        "cuts": [cut.to_dict() for cut in cuts],
        "fragments": [fragment.to_dict() for fragment in fragments],
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    except OSError as e:
        raise ShapeSaveError(str(path), str(e)) from e
