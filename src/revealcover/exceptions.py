"""Exception hierarchy for Revealcover."""


class RevealCoverError(Exception):
    """Base exception for all Revealcover errors."""

    pass


class InvalidInputError(RevealCoverError):
    """A covering request with unusable parameters."""

    pass


class InvalidCanvasError(InvalidInputError):
    """Canvas dimensions are not positive finite numbers."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid canvas {width} x {height}: width and height must be positive"
        )


class InvalidShapeCountError(InvalidInputError):
    """Requested shape count is negative or not an integer."""

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Invalid shape count {count!r}: must be a non-negative integer")


class InvalidCoveringKindError(InvalidInputError):
    """Unknown covering kind name."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unknown covering kind '{value}': expected 'Rectangles' or 'Triangles'"
        )

