"""Covering I/O layer for revealcover.

Coverings are exchanged with the presentation layer as JSON, each polygon
as ``{"pnts": [{"x": ..., "y": ...}, ...]}``.

Key functions:
- covering_to_dict: Convert polygons to plain data
- read_covering: Load a covering document

Key classes:
- CoveringWriter: Save a covering document
"""

from revealcover.io.writer import (
    CoveringWriter,
    covering_document,
    covering_to_dict,
    read_covering,
)

__all__ = [
    "CoveringWriter",
    "covering_document",
    "covering_to_dict",
    "read_covering",
]
