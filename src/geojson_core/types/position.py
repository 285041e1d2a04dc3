# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, Protocol, Self

from geojson_core.constants import (
    DECIMAL_PLACES,
    LATITUDE_LIMIT,
    LONGITUDE_LIMIT,
    POSITION_CARDINALITIES,
)
from geojson_core.errors import (
    CardinalityViolationError,
    EmptyFieldError,
    InvalidArgumentError,
    NullFieldError,
    ParseFailureError,
    RangeViolationError,
)
from geojson_core.utils.helpers import parse_float

if TYPE_CHECKING:
    from .views import GeographicView, ProjectedView

Triple = tuple[float, float, float | None]
"""Underlying (x, y, altitude) representation of a position."""


class PositionLike(Protocol):
    """Anything backed by an (x, y, altitude) triple: positions and their
    geographic and projected views."""

    @property
    def triple(self) -> Triple: ...


def _round(value: float | None) -> float | None:
    return None if value is None else round(value, DECIMAL_PLACES)


def positions_equal(a: PositionLike, b: PositionLike) -> bool:
    """Compare two positions component-wise to 10 decimal places.

    All three components take part in the comparison, so an absent altitude
    is equal only to another absent altitude. Views compare by their
    underlying triple, so a geographic view and a projected view of the same
    coordinates are equal."""
    if a is b:
        return True
    return all(_round(u) == _round(v) for u, v in zip(a.triple, b.triple))


def position_hash(p: PositionLike) -> int:
    """Hash consistent with `positions_equal`."""
    return hash(tuple(_round(c) for c in p.triple))


@dataclass(frozen=True, eq=False)
class Position:
    """A GeoJSON position: an x/y coordinate pair with optional altitude.

    The same value serves both coordinate reference system flavours. Use the
    `geographic` view for latitude/longitude naming (y/x) and the `projected`
    view for easting/northing naming (x/y)."""

    x: float
    """First coordinate (longitude or easting)."""

    y: float
    """Second coordinate (latitude or northing)."""

    altitude: float | None = None
    """Altitude in meters, or None if the position is two-dimensional."""

    def __post_init__(self):
        # Store plain floats whatever numeric type we were given.
        object.__setattr__(self, 'x', _component('x', self.x))
        object.__setattr__(self, 'y', _component('y', self.y))
        if self.altitude is not None:
            altitude = _component('altitude', self.altitude)
            object.__setattr__(self, 'altitude', altitude)

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[float]) -> Self:
        """Create a position from a GeoJSON coordinate array, `[x, y]` or
        `[x, y, altitude]`."""
        if len(coordinates) not in POSITION_CARDINALITIES:
            raise CardinalityViolationError('coordinates', len(coordinates))
        altitude = coordinates[2] if len(coordinates) == 3 else None
        return cls(coordinates[0], coordinates[1], altitude)

    @classmethod
    def from_geographic(
        cls, latitude: float, longitude: float, altitude: float | None = None
    ) -> Self:
        """Create a position from numeric latitude and longitude."""
        return cls(longitude, latitude, altitude)

    @classmethod
    def from_projected(
        cls, easting: float, northing: float, altitude: float | None = None
    ) -> Self:
        """Create a position from numeric easting and northing."""
        return cls(easting, northing, altitude)

    @classmethod
    def parse_geographic(
        cls,
        latitude: str | None,
        longitude: str | None,
        altitude: str | None = None,
    ) -> Self:
        """Create a position from latitude, longitude and altitude strings.

        Validation stops at the first problem found: missing values, then
        empty values, then unparseable or out-of-range values (latitude before
        longitude), then an unparseable altitude. A missing altitude is not an
        error and gives a two-dimensional position."""
        lat, lon = _parse_fields(
            ('latitude', latitude, LATITUDE_LIMIT),
            ('longitude', longitude, LONGITUDE_LIMIT),
        )
        return cls(lon, lat, _parse_altitude(altitude))

    @classmethod
    def parse_projected(
        cls,
        easting: str | None,
        northing: str | None,
        altitude: str | None = None,
    ) -> Self:
        """Create a position from easting, northing and altitude strings.

        Validation follows the same order as `parse_geographic` (northing
        checked before easting) but any finite value is accepted."""
        north, east = _parse_fields(
            ('northing', northing, None), ('easting', easting, None)
        )
        return cls(east, north, _parse_altitude(altitude))

    @property
    def triple(self) -> Triple:
        return (self.x, self.y, self.altitude)

    @property
    def latitude(self) -> float:
        return self.y

    @property
    def longitude(self) -> float:
        return self.x

    @property
    def coordinates(self) -> list[float]:
        """GeoJSON coordinate array form of the position."""
        if self.altitude is None:
            return [self.x, self.y]
        return [self.x, self.y, self.altitude]

    @property
    def geographic(self) -> GeographicView:
        from .views import GeographicView

        return GeographicView(self)

    @property
    def projected(self) -> ProjectedView:
        from .views import ProjectedView

        return ProjectedView(self)

    def __eq__(self, other: object) -> bool:
        if not hasattr(other, 'triple'):
            return NotImplemented
        return positions_equal(self, other)

    def __hash__(self) -> int:
        return position_hash(self)

    def __str__(self) -> str:
        if self.altitude is None:
            return f'X: {self.x}, Y: {self.y}'
        return f'X: {self.x}, Y: {self.y}, Altitude: {self.altitude}'


def _component(name: str, value: Any) -> float:
    """Check a numeric coordinate component and convert it to a float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            name, f'expected a real number but received {type(value).__name__}'
        )
    result = float(value)
    if not math.isfinite(result):
        raise InvalidArgumentError(name, f'{result} is not a finite number')
    return result


def _parse_fields(
    *fields: tuple[str, str | None, float | None],
) -> list[float]:
    """Validate and parse required coordinate strings.

    Each field is given as (name, text, limit); a limit of None means no range
    restriction."""

    present: list[tuple[str, str, float | None]] = []
    for name, text, limit in fields:
        if text is None:
            raise NullFieldError(name)
        present.append((name, text, limit))
    for name, text, _ in present:
        if text.strip() == '':
            raise EmptyFieldError(name)

    values = []
    for name, text, limit in present:
        value = parse_float(text)
        if value is None:
            raise ParseFailureError(
                name, f'{text!r} is not a valid floating-point value'
            )
        if limit is not None and abs(value) > limit:
            raise RangeViolationError(
                name, f'{value} is not between -{limit:g} and {limit:g}'
            )
        values.append(value)
    return values


def _parse_altitude(text: str | None) -> float | None:
    if text is None:
        return None
    value = parse_float(text)
    if value is None:
        raise ParseFailureError(
            'altitude',
            f"{text!r} is not a valid altitude in meters, e.g. '6500'",
        )
    return value
