"""Domain models for revealcover.

This module contains the value types shared by all covering strategies.
All models are immutable (frozen dataclasses) and serializable to plain
dictionaries for hand-off to a presentation layer.

Key classes:
- Point: A 2D point in canvas space
- Polygon: A closed loop of points
- Canvas: The rectangle being covered
"""

from revealcover.domain.geometry import Canvas, Point, Polygon

__all__: list[str] = [
    "Canvas",
    "Point",
    "Polygon",
]
