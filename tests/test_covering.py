import numpy as np
import pytest

from geocells import (
    BoundingBox, Covering, GeoPoint, H3Cell, H3Coverer, InvalidPrecision, S2Cell,
    S2Coverer, cover_bounding_box, encode_h3, encode_s2,
)

NYC_BOX = BoundingBox(40.6, -74.1, 40.9, -73.8)
SF_BOX = BoundingBox(37.5, -122.6, 37.9, -122.2)


def _grid(box: BoundingBox, num: int = 12):
    for lat in np.linspace(box.south, box.north, num):
        for west, east in box.longitude_intervals():
            for lon in np.linspace(west, east, num):
                yield float(lat), float(lon)


def test_s2_covering_contains_box():
    covering = cover_bounding_box(NYC_BOX, 8)
    assert isinstance(covering, Covering)
    assert covering.scheme == 's2'
    assert covering.precision == 8
    assert not covering.degraded
    assert len(covering) > 0
    assert all(S2Cell.from_token(token).level == 8 for token in covering)

    for lat, lon in _grid(NYC_BOX):
        assert encode_s2(lat, lon, 8) in covering

    assert '89c25' in covering.tokens


def test_s2_covering_is_tight():
    covering = S2Coverer(level=12).cover(NYC_BOX)
    for cell in covering.cells:
        assert cell.bounds.intersects(NYC_BOX)


def test_covering_contains_finer_tokens():
    covering = cover_bounding_box(NYC_BOX, 8)
    assert encode_s2(40.7128, -74.0060, 30) in covering
    assert encode_s2(40.7128, -74.0060, 4) not in covering
    assert encode_s2(-33.8688, 151.2093, 8) not in covering
    assert 'not-a-token' not in covering


def test_s2_covering_degrades():
    coverer = S2Coverer(level=20, max_cells=50)
    covering = coverer.cover(BoundingBox(-60., -170., 60., 170.))
    assert covering.degraded
    assert covering.requested_precision == 20
    assert covering.precision < 20
    assert 0 < len(covering) <= 50


def test_degraded_covering_logs_warning(caplog):
    S2Coverer(level=20).cover(BoundingBox(-60., -170., 60., 170.), max_cells=50)
    assert 'degraded' in caplog.text
    assert any(record.name == 'geocells.covering.S2Coverer' for record in caplog.records)


def test_ranges():
    covering = S2Coverer(level=10).cover(NYC_BOX)
    ranges = covering.ranges
    assert ranges
    assert ranges[0][0] == covering.min_token
    assert ranges[-1][1] == covering.max_token

    # Runs cover every cell exactly once
    total = 0
    for first, last in ranges:
        first_cell, last_cell = S2Cell.from_token(first), S2Cell.from_token(last)
        assert first_cell <= last_cell
        total += (last_cell.id - first_cell.id) // (2 * first_cell.lsb) + 1
    assert total == len(covering)


def test_s2_antimeridian_box():
    box = BoundingBox(-10., 170., 10., -170.)
    covering = cover_bounding_box(box, 6)
    assert not covering.degraded

    for lat, lon in _grid(box):
        assert encode_s2(lat, lon, 6) in covering

    assert encode_s2(0., 175., 6) in covering
    assert encode_s2(0., -175., 6) in covering
    assert encode_s2(0., 0., 6) not in covering


def test_h3_covering_contains_box():
    covering = cover_bounding_box(SF_BOX, 5, scheme='h3')
    assert covering.scheme == 'h3'
    assert not covering.degraded
    assert all(H3Cell.from_string(token).resolution == 5 for token in covering)

    for lat, lon in _grid(SF_BOX):
        assert encode_h3(lat, lon, 5) in covering

    assert encode_h3(37.7, -122.4, 9) in covering


def test_h3_covering_degrades():
    covering = H3Coverer(resolution=7, max_cells=100).cover(BoundingBox(0., 0., 10., 10.))
    assert covering.degraded
    assert covering.precision < 7
    assert 0 < len(covering) <= 100

    for lat, lon in _grid(BoundingBox(0., 0., 10., 10.), num=5):
        assert encode_h3(lat, lon, covering.precision) in covering


def test_h3_polar_box():
    box = BoundingBox(89., -180., 90., 180.)
    covering = H3Coverer(resolution=5).cover(box)
    assert not covering.degraded
    assert 0 < len(covering) < 1000
    assert encode_h3(90., 0., 5) in covering

    for lat, lon in _grid(box):
        assert encode_h3(lat, lon, 5) in covering


def test_h3_ranges():
    covering = H3Coverer(resolution=4).cover(SF_BOX)
    ranges = covering.ranges
    assert ranges[0][0] == covering.min_token
    assert ranges[-1][1] == covering.max_token
    assert len(ranges) <= len(covering)


def test_empty_covering():
    covering = Covering('s2', [], 5, 5)
    assert len(covering) == 0
    assert covering.min_token is None
    assert covering.max_token is None
    assert covering.ranges == []
    assert repr(covering) == '<Covering s2 precision=5 requested=5 cells=0>'


def test_index_points():
    points = [
        GeoPoint(40.7128, -74.0060),
        GeoPoint(40.7128, -74.0060),
        GeoPoint(-33.8688, 151.2093),
    ]
    coverer = S2Coverer(level=10)
    assert coverer.index_points(points) == {
        encode_s2(40.7128, -74.0060, 10): 2,
        encode_s2(-33.8688, 151.2093, 10): 1,
    }

    result = H3Coverer().index_points(
        points, precision=6, agg_fn=lambda pts: [p.latitude for p in pts]
    )
    assert result == {
        encode_h3(40.7128, -74.0060, 6): [40.7128, 40.7128],
        encode_h3(-33.8688, 151.2093, 6): [-33.8688],
    }


def test_invalid_arguments():
    with pytest.raises(InvalidPrecision):
        S2Coverer().cover(NYC_BOX)

    with pytest.raises(InvalidPrecision):
        S2Coverer(level=31).cover(NYC_BOX)

    with pytest.raises(InvalidPrecision):
        H3Coverer().cover(NYC_BOX, 16)

    with pytest.raises(ValueError):
        S2Coverer(level=5, max_cells=0).cover(NYC_BOX)

    with pytest.raises(ValueError):
        cover_bounding_box(NYC_BOX, 5, scheme='geohash')
