"""Named-axis views of a position.

A `Position` stores a single (x, y, altitude) triple. Geographic coordinate
reference systems call the axes longitude and latitude (in that order), while
projected systems call them easting and northing. The views here give those
names to the same underlying values; they carry no identity of their own, so
views and positions with tolerance-equal triples are all equal to each other.
"""

from dataclasses import dataclass

from .position import Position, Triple, position_hash, positions_equal


@dataclass(frozen=True, eq=False)
class _PositionView:
    position: Position
    """Underlying position."""

    @property
    def triple(self) -> Triple:
        return self.position.triple

    @property
    def altitude(self) -> float | None:
        return self.position.altitude

    def __eq__(self, other: object) -> bool:
        if not hasattr(other, 'triple'):
            return NotImplemented
        return positions_equal(self, other)

    def __hash__(self) -> int:
        return position_hash(self)


@dataclass(frozen=True, eq=False)
class GeographicView(_PositionView):
    """Latitude/longitude view of a position."""

    @property
    def latitude(self) -> float:
        return self.position.y

    @property
    def longitude(self) -> float:
        return self.position.x

    def __str__(self) -> str:
        if self.altitude is None:
            return f'Latitude: {self.latitude}, Longitude: {self.longitude}'
        return (
            f'Latitude: {self.latitude}, Longitude: {self.longitude}, '
            f'Altitude: {self.altitude}'
        )


@dataclass(frozen=True, eq=False)
class ProjectedView(_PositionView):
    """Easting/northing view of a position."""

    @property
    def easting(self) -> float:
        return self.position.x

    @property
    def northing(self) -> float:
        return self.position.y

    def __str__(self) -> str:
        if self.altitude is None:
            return f'Easting: {self.easting}, Northing: {self.northing}'
        return (
            f'Easting: {self.easting}, Northing: {self.northing}, '
            f'Altitude: {self.altitude}'
        )
