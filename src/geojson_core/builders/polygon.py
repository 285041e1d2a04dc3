import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from geojson_core.config import config
from geojson_core.errors import InsufficientPointsError
from geojson_core.types import LinearRing, Polygon, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Options for polygon building."""

    min_points: int = 4
    """Minimum number of boundary points. This is one more than the three
    distinct vertices a ring strictly needs, so a triangle has to be supplied
    already closed."""

    @classmethod
    def from_config(cls) -> Self:
        """Build options from the global configuration."""
        return cls(min_points=config.polygon.min_points)


@dataclass(frozen=True)
class Empty:
    """Builder state before any points have been supplied."""


@dataclass(frozen=True)
class Built:
    """Builder state holding the constructed polygon."""

    polygon: Polygon


BuilderState = Empty | Built


class PolygonBuilder:
    """Build a single-ring polygon from a sequence of boundary points.

    A builder constructed without points stays empty and produces no geometry.
    A builder constructed with points validates them, closes the ring if the
    first and last points differ, and holds the resulting polygon. There is no
    way to rebuild a builder once constructed: make a new one instead.

    Attributes:
        options (Options): Options used for polygon building.
    """

    def __init__(
        self,
        points: Sequence[Position] | None = None,
        options: Options = Options(),
    ) -> None:
        self.options = options
        self._state: BuilderState = Empty()
        if points is not None:
            self._state = Built(self._build(points))

    def _build(self, points: Sequence[Position]) -> Polygon:
        if len(points) < self.options.min_points:
            raise InsufficientPointsError(
                'points', len(points), self.options.min_points
            )

        ring = LinearRing(points)
        if not ring.is_closed:
            logger.debug('Closing open ring of %d points', len(ring))
            ring = ring.close()

        return Polygon([ring])

    @property
    def state(self) -> BuilderState:
        return self._state

    def to_geometry(self) -> Polygon | None:
        """Get the built polygon, or None if the builder is empty."""
        match self._state:
            case Built(polygon):
                return polygon
            case Empty():
                return None
