"""Covering strategy selection.

Key components:
- generate_covering: Stateless dispatch to the chosen coverer
- load_covering: Command-style entry point used by the presentation layer,
  which also shuffles the covering into a random reveal order
- CoveringService: Settings-driven wrapper owning its own random source
"""

import time

import numpy as np
import structlog

from revealcover.config import CoveringKind, RevealSettings, get_default_settings
from revealcover.core.rectangles import cover_rectangles
from revealcover.core.sampling import make_rng
from revealcover.core.triangles import cover_triangles
from revealcover.domain import Polygon
from revealcover.exceptions import InvalidInputError
from revealcover.utils import CoveringLogger, CoveringStats


def generate_covering(
    kind: CoveringKind,
    n: int,
    w: float,
    h: float,
    rng: np.random.Generator,
) -> list[Polygon]:
    """Generate a covering with the selected strategy.

    Args:
        kind: Covering strategy
        n: Approximate shape count
        w: Canvas width
        h: Canvas height
        rng: Random source, unused for rectangles

    Returns:
        Polygons tiling the canvas
    """
    if kind is CoveringKind.RECTANGLES:
        return cover_rectangles(n, w, h)
    return cover_triangles(n, w, h, rng)


def load_covering(
    width: float,
    height: float,
    n: int,
    object_type: str | CoveringKind,
    rng: np.random.Generator | None = None,
    shuffle: bool = True,
) -> list[Polygon]:
    """Generate a covering and shuffle it into reveal order.

    Args:
        width: Canvas width
        height: Canvas height
        n: Approximate shape count
        object_type: Covering kind name ("Rectangles" or "Triangles")
        rng: Random source (fresh entropy if None)
        shuffle: Whether to shuffle the resulting polygons

    Returns:
        Polygons in reveal order

    Raises:
        InvalidInputError: For an unknown kind, bad canvas or negative count
    """
    kind = CoveringKind.parse(object_type)
    if rng is None:
        rng = make_rng()

    covering = generate_covering(kind, n, width, height, rng)
    if shuffle:
        order = rng.permutation(len(covering))
        covering = [covering[i] for i in order]
    return covering


class CoveringService:
    """Produces coverings using application settings.

    Each service owns a random source seeded from the covering settings, so
    one service should not be shared between threads.

    Example:
        service = CoveringService(get_default_settings())
        polygons = service.cover(800, 600)
    """

    def __init__(
        self,
        settings: RevealSettings | None = None,
        rng: np.random.Generator | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize covering service.

        Args:
            settings: Application settings (defaults if None)
            rng: Random source (seeded from settings if None)
            logger: Logger for request reporting (module logger if None)
        """
        self.settings = settings or get_default_settings()
        self.rng = rng if rng is not None else make_rng(self.settings.covering.seed)
        self.covering_logger = CoveringLogger(logger or structlog.get_logger(__name__))

    def cover(
        self,
        width: float,
        height: float,
        kind: CoveringKind | str | None = None,
        count: int | None = None,
    ) -> list[Polygon]:
        """Generate a covering for a canvas.

        Args:
            width: Canvas width
            height: Canvas height
            kind: Override for the configured covering kind
            count: Override for the configured object count

        Returns:
            Polygons, shuffled when the settings ask for it

        Raises:
            InvalidInputError: For invalid canvas, count or kind
        """
        config = self.settings.covering
        kind = CoveringKind.parse(kind) if kind is not None else config.kind
        count = config.object_count if count is None else count

        self.covering_logger.log_request(kind.value, count, width, height)
        start_time = time.perf_counter()
        try:
            if kind is CoveringKind.TRIANGLES:
                geometry = self.settings.geometry
                covering = cover_triangles(
                    count,
                    width,
                    height,
                    self.rng,
                    dedup_tolerance=geometry.dedup_tolerance,
                    area_tolerance=geometry.area_tolerance,
                )
            else:
                covering = cover_rectangles(count, width, height)
        except InvalidInputError as e:
            self.covering_logger.log_rejected(e)
            raise

        if config.shuffle:
            order = self.rng.permutation(len(covering))
            covering = [covering[i] for i in order]

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.covering_logger.log_complete(kind.value, len(covering), duration_ms)
        return covering

    @property
    def stats(self) -> CoveringStats:
        """Statistics for requests served so far."""
        return self.covering_logger.stats
