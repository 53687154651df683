import pytest
from pytest import approx

from geocells import (
    GeoPoint, InvalidCoordinate, InvalidPrecision, MalformedToken, S2Cell,
    decode_s2, decode_s2_bounds, encode_s2,
)
from geocells.cube import MAX_SIZE
from tests.functions import assert_bounds_contain, assert_geopoints_equal

test_points = [
    GeoPoint(0., 0.),
    GeoPoint(40.7128, -74.0060),
    GeoPoint(-33.8688, 151.2093),
    GeoPoint(51.5074, -0.1278),
    GeoPoint(0., 180.),
    GeoPoint(0., -179.9999),
    GeoPoint(45., 45.),
    GeoPoint(35.26, 45.),
    GeoPoint(89.9999, 12.),
    GeoPoint(90., 0.),
    GeoPoint(-90., 0.),
    GeoPoint(-45., -135.),
]


def test_encode_reference_tokens():
    assert encode_s2(0., 0., 1) == '14'
    assert encode_s2(0., 0., 30) == '1000000000000001'
    assert encode_s2(40.7128, -74.0060, 8) == '89c25'


@pytest.mark.parametrize('face, token', list(enumerate(['1', '3', '5', '7', '9', 'b'])))
def test_face_tokens(face, token):
    assert S2Cell.from_face(face).to_token() == token
    assert S2Cell.from_token(token).face == face
    assert S2Cell.from_token(token).level == 0
    assert S2Cell.from_token(token).is_face


def test_face_of_points():
    assert encode_s2(0., 0., 0) == '1'
    assert encode_s2(0., 90., 0) == '3'
    assert encode_s2(90., 0., 0) == '5'
    assert encode_s2(0., 180., 0) == '7'
    assert encode_s2(0., -90., 0) == '9'
    assert encode_s2(-90., 0., 0) == 'b'


def test_from_face_invalid():
    with pytest.raises(ValueError):
        S2Cell.from_face(6)


def test_encode_invalid():
    with pytest.raises(InvalidPrecision):
        encode_s2(0., 0., 31)

    with pytest.raises(InvalidPrecision):
        encode_s2(0., 0., -1)

    with pytest.raises(InvalidPrecision):
        encode_s2(0., 0., 1.5)

    with pytest.raises(InvalidCoordinate):
        encode_s2(91., 0., 10)


@pytest.mark.parametrize('token', [
    '', 'xyz', '0', 'f', '12345678901234567', '1000000000000000' + '0', 'fffffffffffffff0'
])
def test_from_token_invalid(token):
    with pytest.raises(MalformedToken):
        S2Cell.from_token(token)


def test_from_token_invalid_type():
    with pytest.raises(MalformedToken):
        S2Cell.from_token(0x14)

    with pytest.raises(MalformedToken):
        S2Cell(2 ** 64)

    with pytest.raises(MalformedToken):
        S2Cell('14')


def test_token_round_trip():
    for point in test_points:
        for level in (0, 1, 7, 15, 30):
            cell = S2Cell.from_geopoint(point, level)
            assert S2Cell.from_token(cell.to_token()) == cell
            assert cell.level == level


def test_cell_properties():
    cell = S2Cell.from_token('14')
    assert cell.id == 0x1400000000000000
    assert cell.face == 0
    assert cell.level == 1
    assert cell.lsb == 1 << 58
    assert not cell.is_leaf
    assert not cell.is_face
    assert cell.range_min == 0x1000000000000001
    assert cell.range_max == 0x17ffffffffffffff

    leaf = S2Cell.from_token('1000000000000001')
    assert leaf.is_leaf
    assert leaf.level == 30
    assert leaf.range_min == leaf.range_max == leaf.id


def test_ordering_and_hash():
    cells = [S2Cell.from_token(t) for t in ('b', '14', '1', '3')]
    assert [c.to_token() for c in sorted(cells)] == ['1', '14', '3', 'b']
    assert len({S2Cell.from_token('14'), S2Cell.from_token('14')}) == 1
    assert S2Cell.from_token('14') != '14'
    assert repr(S2Cell.from_token('14')) == '<S2Cell 14 level=1>'


def test_parent():
    cell = S2Cell.from_token('14')
    assert cell.parent().to_token() == '1'
    assert cell.parent(0).to_token() == '1'
    assert cell.parent(1) == cell

    leaf = S2Cell.from_geopoint(GeoPoint(40.7128, -74.0060))
    assert leaf.parent(8).to_token() == '89c25'

    with pytest.raises(InvalidPrecision):
        cell.parent(2)

    with pytest.raises(InvalidPrecision):
        S2Cell.from_face(0).parent()


@pytest.mark.parametrize('point', test_points)
def test_parent_of_parent(point):
    leaf = S2Cell.from_geopoint(point)
    for coarse in range(0, 31, 3):
        for middle in range(coarse, 31, 4):
            assert leaf.parent(middle).parent(coarse) == leaf.parent(coarse)


def test_children():
    children = S2Cell.from_face(0).children()
    assert [c.to_token() for c in children] == ['04', '0c', '14', '1c']
    assert all(c.parent() == S2Cell.from_face(0) for c in children)
    assert all(c.level == 1 for c in children)

    with pytest.raises(InvalidPrecision):
        S2Cell.from_token('1000000000000001').children()


def test_contains():
    face = S2Cell.from_face(0)
    assert face.contains(S2Cell.from_token('14'))
    assert S2Cell.from_token('14') in face
    assert S2Cell.from_geopoint(GeoPoint(0.1, 0.1)) in face
    assert S2Cell.from_face(1) not in face
    assert face in face


def test_center():
    assert_geopoints_equal(decode_s2('1'), GeoPoint(0., 0.))
    assert_geopoints_equal(decode_s2('5'), GeoPoint(90., 0.))
    assert_geopoints_equal(decode_s2('14'), GeoPoint(21.0375, 22.6199), abs_tol=1e-3)


def test_encode_decode_stable():
    for point in test_points:
        for level in (0, 3, 10, 20, 30):
            token = encode_s2(point.latitude, point.longitude, level)
            center = decode_s2(token)
            assert encode_s2(center.latitude, center.longitude, level) == token


def test_encoded_point_within_bounds():
    for point in test_points:
        for level in range(0, 31, 3):
            cell = S2Cell.from_geopoint(point, level)
            assert_bounds_contain(cell.bounds, point)
            assert_bounds_contain(cell.bounds, cell.center)


def test_hierarchy_containment():
    for point in test_points:
        leaf = S2Cell.from_geopoint(point)
        for level in range(0, 30):
            assert_bounds_contain(leaf.parent(level).bounds, leaf.center)


def test_pole_longitude_independent():
    for level in (0, 5, 30):
        assert encode_s2(90., 0., level) == encode_s2(90., 135., level)
        assert encode_s2(-90., 0., level) == encode_s2(-90., -45., level)


def test_bounds():
    polar = decode_s2_bounds('5')
    assert polar.south == approx(35.2643897, abs=1e-6)
    assert polar.north == 90.
    assert polar.is_full_longitude

    equatorial = decode_s2_bounds('1')
    assert equatorial.bounds == approx((-45., -45., 45., 45.), abs=1e-9)

    # The face opposite the prime meridian wraps the antimeridian
    assert decode_s2_bounds('7').crosses_antimeridian

    # Cells touching a pole span every longitude
    pole_cell = S2Cell.from_geopoint(GeoPoint(90., 0.), 5)
    assert pole_cell.bounds.is_full_longitude
    assert pole_cell.bounds.north == 90.


def test_vertices():
    vertices = S2Cell.from_face(0).vertices()
    assert len(vertices) == 4
    for vertex in vertices:
        assert abs(vertex.latitude) == approx(35.2643897, abs=1e-6)
        assert abs(vertex.longitude) == approx(45.)


def test_neighbors_interior():
    cell = S2Cell.from_geopoint(GeoPoint(10., 10.), 10)
    neighbors = cell.neighbors()
    assert len(neighbors) == 8
    assert len(set(neighbors)) == 8
    assert cell not in neighbors
    assert all(n.level == 10 and n.face == cell.face for n in neighbors)

    for neighbor in neighbors:
        assert cell in neighbor.neighbors()


def test_neighbors_face():
    neighbors = S2Cell.from_face(0).neighbors()
    assert sorted(n.face for n in neighbors) == [1, 2, 4, 5]
    assert all(n.level == 0 for n in neighbors)


@pytest.mark.parametrize('face', range(6))
def test_neighbors_across_face_edge(face):
    # A cell in the middle of each face edge takes three neighbors from the adjacent face
    for i, j in ((0, MAX_SIZE // 2), (MAX_SIZE - 1, MAX_SIZE // 2),
                 (MAX_SIZE // 2, 0), (MAX_SIZE // 2, MAX_SIZE - 1)):
        cell = S2Cell.from_face_ij(face, i, j, 6)
        neighbors = cell.neighbors()
        assert len(neighbors) == 8
        assert sum(1 for n in neighbors if n.face != face) == 3

        for neighbor in neighbors:
            assert cell in neighbor.neighbors()



@pytest.mark.parametrize('face', range(6))
def test_neighbors_cube_corner(face):
    # Only three faces meet at a cube corner
    for i, j in ((0, 0), (0, MAX_SIZE - 1), (MAX_SIZE - 1, 0), (MAX_SIZE - 1, MAX_SIZE - 1)):
        cell = S2Cell.from_face_ij(face, i, j, 5)
        neighbors = cell.neighbors()
        assert len(neighbors) == 7
        assert len({n.face for n in neighbors} | {face}) == 3
