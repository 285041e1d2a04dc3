# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

import numpy as np
from numpy.typing import NDArray

from geojson_core.errors import InvalidArgumentError

from .position import Position

MIN_RING_POSITIONS = 4
"""A linear ring needs at least three distinct positions plus the closing
position."""


class LinearRing(Sequence[Position]):
    """An ordered sequence of positions forming a polygon boundary.

    A ring is closed when its first and last positions are equal (using
    position tolerance equality). Closure is derived from the positions, never
    stored, and rings are immutable: `close` returns a new ring."""

    def __init__(self, positions: Iterable[Position]):
        self._positions = tuple(positions)

    @property
    def positions(self) -> tuple[Position, ...]:
        return self._positions

    @property
    def is_closed(self) -> bool:
        if len(self._positions) == 0:
            return False
        return self._positions[0] == self._positions[-1]

    @property
    def is_valid(self) -> bool:
        """Closed and long enough to enclose an area."""
        return self.is_closed and len(self._positions) >= MIN_RING_POSITIONS

    def close(self) -> LinearRing:
        """Return a closed version of this ring.

        An open ring gets its first position appended; a ring that is already
        closed is returned unchanged."""
        if self.is_closed or len(self._positions) == 0:
            return self
        return LinearRing(self._positions + (self._positions[0],))

    @property
    def coordinates(self) -> list[list[float]]:
        """GeoJSON coordinate array form of the ring."""
        return [p.coordinates for p in self._positions]

    def to_array(self) -> NDArray[np.float64]:
        """Ring coordinates as an (n, 2) array, or (n, 3) if any position has
        an altitude. Missing altitudes are NaN in the three-column form."""
        if any(p.altitude is not None for p in self._positions):
            rows = [
                (p.x, p.y, np.nan if p.altitude is None else p.altitude)
                for p in self._positions
            ]
            return np.array(rows, dtype=np.float64).reshape(-1, 3)
        rows = [(p.x, p.y) for p in self._positions]
        return np.array(rows, dtype=np.float64).reshape(-1, 2)

    @overload
    def __getitem__(self, idx: int) -> Position: ...

    @overload
    def __getitem__(self, idx: slice) -> tuple[Position, ...]: ...

    def __getitem__(self, idx):
        return self._positions[idx]

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearRing):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self):
        return hash(self._positions)

    def __repr__(self):
        return f'LinearRing({list(self._positions)!r})'


class Polygon:
    """A polygon made of one exterior ring followed by zero or more holes."""

    def __init__(self, rings: Sequence[LinearRing]):
        if len(rings) == 0:
            raise InvalidArgumentError('rings', 'a polygon needs at least one ring')
        for i, ring in enumerate(rings):
            if not ring.is_valid:
                raise InvalidArgumentError(
                    'rings',
                    f'ring {i} is not a closed linear ring of at least '
                    f'{MIN_RING_POSITIONS} positions',
                )
        self._rings = tuple(rings)

    @property
    def rings(self) -> tuple[LinearRing, ...]:
        return self._rings

    @property
    def exterior(self) -> LinearRing:
        return self._rings[0]

    @property
    def interiors(self) -> tuple[LinearRing, ...]:
        return self._rings[1:]

    @property
    def coordinates(self) -> list[list[list[float]]]:
        """GeoJSON coordinate array form of the polygon."""
        return [ring.coordinates for ring in self._rings]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._rings == other._rings

    def __hash__(self):
        return hash(self._rings)

    def __repr__(self):
        return f'Polygon({list(self._rings)!r})'
