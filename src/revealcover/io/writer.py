"""JSON serialization of coverings.

The document layout is::

    {
        "kind": "Triangles",
        "width": 800.0,
        "height": 600.0,
        "polygons": [{"pnts": [{"x": 0.0, "y": 0.0}, ...]}, ...]
    }
"""

import json
from pathlib import Path
from typing import Any

from revealcover.config import CoveringKind
from revealcover.domain import Canvas, Polygon


def covering_to_dict(polygons: list[Polygon]) -> list[dict[str, Any]]:
    """Convert polygons to their wire representation."""
    return [polygon.to_dict() for polygon in polygons]


def covering_document(
    polygons: list[Polygon], kind: CoveringKind, canvas: Canvas
) -> dict[str, Any]:
    """Build the full JSON document for a covering."""
    return {
        "kind": kind.value,
        "width": canvas.width,
        "height": canvas.height,
        "polygons": covering_to_dict(polygons),
    }


class CoveringWriter:
    """Writes coverings to JSON files."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = Path(output_path)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, polygons: list[Polygon], kind: CoveringKind, canvas: Canvas) -> Path:
        """Write a covering.

        Args:
            polygons: Covering polygons
            kind: Strategy that produced them
            canvas: Covered canvas

        Returns:
            Path written to
        """
        document = covering_document(polygons, kind, canvas)
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        with self._output_path.open("w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
        return self._output_path


def read_covering(path: Path) -> tuple[list[Polygon], CoveringKind, Canvas]:
    """Load a covering written by CoveringWriter.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidInputError: If kind or canvas in the file are invalid
    """
    with Path(path).open(encoding="utf-8") as f:
        document = json.load(f)

    kind = CoveringKind.parse(document["kind"])
    canvas = Canvas(float(document["width"]), float(document["height"]))
    polygons = [Polygon.from_dict(p) for p in document["polygons"]]
    return polygons, kind, canvas
