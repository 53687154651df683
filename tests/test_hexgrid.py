import pytest
from pytest import approx

from geocells.hexgrid import *
from geocells.hexgrid import M_SQRT3_2

coords = [
    CoordIJK(0, 0, 0),
    CoordIJK(1, 0, 0),
    CoordIJK(3, 1, 0),
    CoordIJK(0, 5, 2),
    CoordIJK(7, 0, 11),
    CoordIJK(40, 13, 0),
]


def test_is_class_iii():
    assert not is_class_iii(0)
    assert is_class_iii(1)
    assert not is_class_iii(14)
    assert is_class_iii(15)


def test_normalize():
    assert CoordIJK(-1, 0, 0).normalize() == CoordIJK(0, 1, 1)
    assert CoordIJK(2, 2, 2).normalize() == CoordIJK(0, 0, 0)
    assert CoordIJK(3, 1, 2).normalize() == CoordIJK(2, 0, 1)
    assert CoordIJK(0, -2, 1).normalize() == CoordIJK(2, 0, 3)


def test_arithmetic():
    assert CoordIJK(1, 2, 0).add(CoordIJK(0, 1, 1)) == CoordIJK(1, 3, 1)
    assert CoordIJK(1, 2, 0).sub(CoordIJK(0, 1, 1)) == CoordIJK(1, 1, -1)
    assert CoordIJK(1, 2, 0).scale(3) == CoordIJK(3, 6, 0)


@pytest.mark.parametrize('coord', coords)
def test_cube_round_trip(coord):
    i, j, k = coord.to_cube()
    assert i + j + k == 0
    assert CoordIJK.from_cube(i, j, k) == coord


@pytest.mark.parametrize('coord', coords)
def test_rotations(coord):
    rotated = coord
    for _ in range(6):
        rotated = rotated.rotate60ccw()
    assert rotated == coord

    assert coord.rotate60ccw().rotate60cw() == coord
    assert coord.rotate60cw().rotate60ccw() == coord


@pytest.mark.parametrize('digit', range(1, 7))
def test_unit_vector_rotation_matches_digit_rotation(digit):
    assert UNIT_VECS[digit].rotate60ccw() == UNIT_VECS[rotate_digit_60ccw(digit)]
    assert UNIT_VECS[digit].rotate60cw() == UNIT_VECS[rotate_digit_60cw(digit)]


def test_rotate_digits():
    assert rotate_digit_60ccw(Direction.K_AXES) == Direction.IK_AXES
    assert rotate_digit_60cw(Direction.IK_AXES) == Direction.K_AXES
    assert rotate_digit_60ccw(Direction.CENTER) == Direction.CENTER
    assert rotate_digit_60cw(Direction.CENTER) == Direction.CENTER

    for digit in range(7):
        assert rotate_digit_60cw(rotate_digit_60ccw(digit)) == digit


@pytest.mark.parametrize('coord', coords)
def test_aperture_7_round_trip(coord):
    assert coord.down_ap7().up_ap7() == coord
    assert coord.down_ap7r().up_ap7r() == coord


def test_aperture_3():
    # The substrate grid is three times as fine
    assert CoordIJK(1, 0, 0).down_ap3().down_ap3r() == CoordIJK(3, 0, 0)
    assert CoordIJK(0, 0, 0).down_ap3() == CoordIJK(0, 0, 0)


def test_neighbor_and_digit():
    origin = CoordIJK(0, 0, 0)
    assert origin.neighbor(Direction.I_AXES) == CoordIJK(1, 0, 0)
    assert origin.neighbor(Direction.CENTER) == origin
    assert origin.neighbor(Direction.INVALID) == origin
    assert CoordIJK(1, 0, 0).neighbor(Direction.J_AXES) == CoordIJK(1, 1, 0)

    for digit in range(7):
        assert UNIT_VECS[digit].to_digit() == digit

    assert CoordIJK(2, 0, 0).to_digit() == Direction.INVALID
    assert CoordIJK(2, 1, 1).to_digit() == Direction.I_AXES


def test_to_hex2d():
    assert CoordIJK(0, 0, 0).to_hex2d() == (0., 0.)
    assert CoordIJK(1, 0, 0).to_hex2d() == (1., 0.)
    assert CoordIJK(0, 1, 0).to_hex2d() == approx((-0.5, M_SQRT3_2))
    assert CoordIJK(0, 0, 1).to_hex2d() == approx((-0.5, -M_SQRT3_2))


@pytest.mark.parametrize('coord', coords)
def test_hex2d_round_trip(coord):
    assert CoordIJK.from_hex2d(coord.to_hex2d()) == coord


def test_from_hex2d_rounds_to_nearest_centre():
    assert CoordIJK.from_hex2d(Vec2d(0.4, 0.1)) == CoordIJK(0, 0, 0)
    assert CoordIJK.from_hex2d(Vec2d(0.6, 0.1)) == CoordIJK(1, 0, 0)
    assert CoordIJK.from_hex2d(Vec2d(-0.6, 0.1)) == CoordIJK(0, 1, 1)
    assert CoordIJK.from_hex2d(Vec2d(-0.4, -0.8)) == CoordIJK(0, 0, 1)


def test_vec2d():
    assert Vec2d(3., 4.).magnitude == 5.
    assert v2d_intersect(
        Vec2d(0., 0.), Vec2d(2., 2.), Vec2d(0., 2.), Vec2d(2., 0.)
    ) == approx((1., 1.))
    assert v2d_almost_equals(Vec2d(1., 1.), Vec2d(1. + 1e-9, 1.))
    assert not v2d_almost_equals(Vec2d(1., 1.), Vec2d(1.001, 1.))


def test_face_ijk():
    fijk = FaceIJK(3, CoordIJK(1, 0, 0))
    face, coord = fijk
    assert face == 3
    assert coord == CoordIJK(1, 0, 0)
