import logging

import pytest

from geojson_core.builders import Built, Empty, Options, PolygonBuilder
from geojson_core.errors import (
    InsufficientPointsError,
    InvalidArgumentError,
)
from geojson_core.types import LinearRing, Polygon, Position


def test_empty_builder():
    builder = PolygonBuilder()
    assert isinstance(builder.state, Empty)
    assert builder.to_geometry() is None


def test_open_ring_is_closed(open_square, caplog):
    with caplog.at_level(logging.DEBUG, logger='geojson_core'):
        builder = PolygonBuilder(open_square)
    assert 'Closing open ring of 4 points' in caplog.text

    assert isinstance(builder.state, Built)
    polygon = builder.to_geometry()
    assert isinstance(polygon, Polygon)
    assert len(polygon.rings) == 1
    assert polygon.interiors == ()
    assert polygon.exterior.coordinates == [
        [0, 0],
        [0, 4],
        [4, 4],
        [4, 0],
        [0, 0],
    ]


def test_closed_ring_unchanged(closed_square):
    polygon = PolygonBuilder(closed_square).to_geometry()
    assert polygon is not None
    assert len(polygon.exterior) == 5
    assert polygon.exterior == LinearRing(closed_square)


def test_input_not_modified(open_square):
    PolygonBuilder(open_square)
    assert len(open_square) == 4


@pytest.mark.parametrize('n', [0, 1, 2, 3])
def test_insufficient_points(open_square, n):
    with pytest.raises(InsufficientPointsError) as e:
        PolygonBuilder(open_square[:n])
    assert e.value.field == 'points'
    assert e.value.received == n
    assert isinstance(e.value, InvalidArgumentError)


def test_closed_triangle():
    # Three distinct vertices are accepted once the closing point is included.
    triangle = [Position(0, 0), Position(1, 0), Position(0, 1), Position(0, 0)]
    polygon = PolygonBuilder(triangle).to_geometry()
    assert polygon is not None
    assert len(polygon.exterior) == 4


def test_geographic_points():
    points = [
        Position.parse_geographic('0', '0'),
        Position.parse_geographic('0', '1'),
        Position.parse_geographic('1', '1'),
        Position.parse_geographic('1', '0'),
    ]
    polygon = PolygonBuilder(points).to_geometry()
    assert polygon is not None
    assert polygon.exterior[-1].geographic.latitude == 0.0
    assert polygon.exterior.is_closed


def test_options_min_points(open_square):
    with pytest.raises(InsufficientPointsError, match='at least 5 points'):
        PolygonBuilder(open_square, options=Options(min_points=5))


def test_shared_closing_point(open_square):
    # The same object at both ends closes the ring without another copy.
    start = open_square[0]
    polygon = PolygonBuilder(open_square + [start]).to_geometry()
    assert polygon is not None
    assert len(polygon.exterior) == 5
    assert polygon.exterior[-1] is start


def test_options_from_default_config():
    assert Options.from_config() == Options()


@pytest.mark.config_updates(polygon__min_points=5)
def test_options_from_config(open_square):
    options = Options.from_config()
    assert options == Options(min_points=5)
    with pytest.raises(InsufficientPointsError):
        PolygonBuilder(open_square, options=options)
