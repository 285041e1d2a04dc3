"""GeoJSON positions and polygon building."""

from .builders import PolygonBuilder
from .errors import (
    CardinalityViolationError,
    EmptyFieldError,
    GeoJSONCoreError,
    InsufficientPointsError,
    InvalidArgumentError,
    NullFieldError,
    OutOfRangeError,
    ParseFailureError,
    RangeViolationError,
)
from .types import (
    GeographicView,
    LinearRing,
    Polygon,
    Position,
    ProjectedView,
    position_hash,
    positions_equal,
)

__version__ = '0.1.0'

__all__ = [
    'CardinalityViolationError',
    'EmptyFieldError',
    'GeoJSONCoreError',
    'GeographicView',
    'InsufficientPointsError',
    'InvalidArgumentError',
    'LinearRing',
    'NullFieldError',
    'OutOfRangeError',
    'ParseFailureError',
    'Polygon',
    'PolygonBuilder',
    'Position',
    'ProjectedView',
    'RangeViolationError',
    'position_hash',
    'positions_equal',
]
