"""Input checks shared by the covering generators."""

import operator

from revealcover.exceptions import InvalidShapeCountError


def validate_count(n: int) -> int:
    """Check a requested shape count.

    Any integral number (including numpy integers) is accepted, bool is not.

    Returns:
        n as a Python int

    Raises:
        InvalidShapeCountError: If n is not a non-negative integer
    """
    if isinstance(n, bool):
        raise InvalidShapeCountError(n)
    try:
        count = operator.index(n)
    except TypeError:
        raise InvalidShapeCountError(n) from None
    if count < 0:
        raise InvalidShapeCountError(n)
    return count
