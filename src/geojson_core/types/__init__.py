from .geometry import LinearRing, Polygon
from .position import Position, PositionLike, position_hash, positions_equal
from .views import GeographicView, ProjectedView

__all__ = [
    'GeographicView',
    'LinearRing',
    'Polygon',
    'Position',
    'PositionLike',
    'ProjectedView',
    'position_hash',
    'positions_equal',
]
