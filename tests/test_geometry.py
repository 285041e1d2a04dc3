import numpy as np
import pytest

from geojson_core.errors import InvalidArgumentError
from geojson_core.types import LinearRing, Polygon, Position


def test_ring_closure(open_square, closed_square):
    ring = LinearRing(open_square)
    assert not ring.is_closed
    assert not ring.is_valid

    closed = ring.close()
    assert closed.is_closed
    assert closed.is_valid
    assert len(closed) == 5
    assert closed[-1] == closed[0]
    assert list(closed) == closed_square

    # The original ring is unchanged.
    assert len(ring) == 4


def test_close_is_idempotent(closed_square):
    ring = LinearRing(closed_square)
    assert ring.is_closed
    assert ring.close() is ring
    assert len(ring.close().close()) == 5


def test_closed_within_tolerance(open_square):
    ring = LinearRing(open_square + [Position(0.00000000001, 0.0)])
    assert ring.is_closed
    assert len(ring.close()) == 5


def test_altitude_breaks_closure(open_square):
    ring = LinearRing(open_square + [Position(0.0, 0.0, 0.0)])
    assert not ring.is_closed


def test_empty_ring():
    ring = LinearRing([])
    assert not ring.is_closed
    assert len(ring.close()) == 0


def test_short_closed_ring_is_not_valid():
    ring = LinearRing([Position(0, 0), Position(1, 1), Position(0, 0)])
    assert ring.is_closed
    assert not ring.is_valid


def test_ring_coordinates(closed_square):
    ring = LinearRing(closed_square)
    assert ring.coordinates == [[0, 0], [0, 4], [4, 4], [4, 0], [0, 0]]
    assert ring[1:3] == (Position(0, 4), Position(4, 4))


def test_ring_to_array(closed_square):
    arr = LinearRing(closed_square).to_array()
    assert arr.shape == (5, 2)
    assert np.array_equal(arr[2], [4.0, 4.0])

    ring = LinearRing([Position(0, 0, 10), Position(1, 0), Position(1, 1, 5)])
    arr = ring.to_array()
    assert arr.shape == (3, 3)
    assert arr[0, 2] == 10.0
    assert np.isnan(arr[1, 2])

    assert LinearRing([]).to_array().shape == (0, 2)


def test_polygon(closed_square):
    ring = LinearRing(closed_square)
    hole = LinearRing(
        [Position(1, 1), Position(1, 2), Position(2, 2), Position(2, 1), Position(1, 1)]
    )
    poly = Polygon([ring, hole])
    assert poly.exterior == ring
    assert poly.interiors == (hole,)
    assert len(poly.rings) == 2
    assert poly.coordinates[0] == ring.coordinates
    assert poly == Polygon([ring, hole])
    assert poly != Polygon([ring])


def test_polygon_rejects_bad_rings(open_square):
    with pytest.raises(InvalidArgumentError, match='at least one ring'):
        Polygon([])
    with pytest.raises(InvalidArgumentError, match='ring 0') as e:
        Polygon([LinearRing(open_square)])
    assert e.value.field == 'rings'
