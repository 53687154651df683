import pytest
from pytest import approx

from geocells._h3_tables import FACE_CENTER_GEO, FACE_CENTER_POINT, NUM_ICOSA_FACES
from geocells.coordinates import GeoPoint, UnitVector
from geocells.hexgrid import CoordIJK, Vec2d
from geocells.icosahedron import *
from tests.functions import assert_geopoints_equal

test_points = [
    GeoPoint(37.775938728915946, -122.41795063018799),
    GeoPoint(0., 0.),
    GeoPoint(-33.8688, 151.2093),
    GeoPoint(64.7, 10.5),
    GeoPoint(-75., -170.),
]


@pytest.mark.parametrize('face', range(NUM_ICOSA_FACES))
def test_closest_face_of_face_centre(face):
    found, sq_distance = closest_face(UnitVector(*FACE_CENTER_POINT[face]))
    assert found == face
    assert sq_distance == approx(0., abs=1e-12)


@pytest.mark.parametrize('face', range(NUM_ICOSA_FACES))
def test_face_centre_tables_agree(face):
    lat, lon = FACE_CENTER_GEO[face]
    assert tuple(GeoPoint.from_radians(lat, lon).xyz) == approx(FACE_CENTER_POINT[face], abs=1e-9)


@pytest.mark.parametrize('face', range(NUM_ICOSA_FACES))
def test_face_centre_projects_to_origin(face):
    lat, lon = FACE_CENTER_GEO[face]
    found, vec = geo_to_hex2d(GeoPoint.from_radians(lat, lon), 3)
    assert found == face
    assert vec == approx((0., 0.), abs=1e-6)


def test_hex2d_origin_is_face_centre():
    lat, lon = FACE_CENTER_GEO[7]
    assert_geopoints_equal(
        hex2d_to_geo(Vec2d(0., 0.), 7, 5),
        GeoPoint.from_radians(lat, lon),
        abs_tol=1e-9
    )


@pytest.mark.parametrize('resolution', [0, 4, 5])
def test_projection_round_trip(resolution):
    for point in test_points:
        face, vec = geo_to_hex2d(point, resolution)
        assert_geopoints_equal(hex2d_to_geo(vec, face, resolution), point, abs_tol=1e-9)


@pytest.mark.parametrize('resolution', [2, 3])
def test_substrate_scaling(resolution):
    # A centre coordinate and its substrate equivalent land on the same point
    face, vec = geo_to_hex2d(test_points[0], resolution)
    center = CoordIJK.from_hex2d(vec)
    substrate = center.down_ap3().down_ap3r()
    substrate_res = resolution
    if resolution % 2:
        # Class III substrates are expressed on the next Class II grid
        substrate = substrate.down_ap7r()
        substrate_res += 1

    assert_geopoints_equal(
        hex2d_to_geo(center.to_hex2d(), face, resolution),
        hex2d_to_geo(substrate.to_hex2d(), face, substrate_res, substrate=True),
        abs_tol=1e-9
    )
