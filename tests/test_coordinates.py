import math

import pytest

from geocells import GeoPoint, InvalidCoordinate, UnitVector
from tests.functions import assert_geopoints_equal


def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint(1, 2)
    assert isinstance(p.latitude, float)
    assert p.to_float() == (1., 2.)

    # Edges are valid
    GeoPoint(-90., -180.)
    GeoPoint(90., 180.)


@pytest.mark.parametrize('lat, lon', [
    (90.0001, 0.),
    (-91., 0.),
    (0., 180.0001),
    (0., -181.),
    (float('nan'), 0.),
    (0., float('nan')),
    ('abc', 0.),
    (None, 0.),
])
def test_geopoint_invalid(lat, lon):
    with pytest.raises(InvalidCoordinate):
        GeoPoint(lat, lon)


def test_geopoint_invalid_is_value_error():
    with pytest.raises(ValueError):
        GeoPoint(100., 0.)


def test_geopoint_pole_canonicalized():
    assert GeoPoint(90., 45.).longitude == 0.
    assert GeoPoint(-90., -123.).longitude == 0.
    assert GeoPoint(90., 45.) == GeoPoint(90., -170.)


def test_geopoint_eq_hash():
    assert GeoPoint(1., 2.) == GeoPoint(1., 2.)
    assert GeoPoint(1., 2.) != GeoPoint(2., 1.)
    assert GeoPoint(1., 2.) != (1., 2.)

    points = [GeoPoint(0., 0.), GeoPoint(0., 0.), GeoPoint(1., 1.)]
    assert len(set(points)) == 2


def test_geopoint_repr():
    assert repr(GeoPoint(1., 2.)) == '<GeoPoint(1.0, 2.0)>'


def test_geopoint_to_float():
    assert GeoPoint(1., 2.).to_float() == (1., 2.)
    assert GeoPoint(1., 2.).to_float(reverse=True) == (2., 1.)


def test_geopoint_radians():
    assert GeoPoint(90., 0.).radians == pytest.approx((math.pi / 2, 0.))
    assert GeoPoint(0., -180.).radians == pytest.approx((0., -math.pi))


def test_geopoint_xyz():
    assert GeoPoint(0., 0.).xyz == UnitVector(1., 0., 0.)

    x, y, z = GeoPoint(0., 90.).xyz
    assert (x, y, z) == pytest.approx((0., 1., 0.), abs=1e-15)

    x, y, z = GeoPoint(-90., 0.).xyz
    assert (x, y, z) == pytest.approx((0., 0., -1.), abs=1e-15)


def test_geopoint_from_radians():
    p = GeoPoint.from_radians(math.pi / 4, -math.pi / 2)
    assert_geopoints_equal(p, GeoPoint(45., -90.))
    # Radians are kept exactly as given
    assert p.radians == (math.pi / 4, -math.pi / 2)

    # Slight overshoot at the pole is clamped
    assert GeoPoint.from_radians(math.pi / 2 + 1e-15, 1.) == GeoPoint(90., 0.)


def test_geopoint_from_xyz():
    assert_geopoints_equal(GeoPoint.from_xyz((1., 1., 0.)), GeoPoint(0., 45.))
    assert_geopoints_equal(GeoPoint.from_xyz(UnitVector(0., -2., 0.)), GeoPoint(0., -90.))

    # Vector length does not matter
    assert_geopoints_equal(GeoPoint.from_xyz((3., 0., 3.)), GeoPoint(45., 0.))

    # Poles
    assert GeoPoint.from_xyz((0., 0., 2.)) == GeoPoint(90., 0.)
    assert GeoPoint.from_xyz((1e-17, 1e-17, -1.)) == GeoPoint(-90., 0.)


def test_geopoint_xyz_round_trip():
    for lat, lon in ((12.5, -45.25), (-89.9, 179.9), (0.0001, -0.0001)):
        p = GeoPoint(lat, lon)
        assert_geopoints_equal(GeoPoint.from_xyz(p.xyz), p, abs_tol=1e-10)


def test_unit_vector():
    v = UnitVector(3., 0., 4.)
    assert v.norm() == 5.
    assert v.normalized() == pytest.approx((0.6, 0., 0.8))

    assert UnitVector(0., 0., 0.).normalized() == UnitVector(0., 0., 0.)
