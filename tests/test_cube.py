import pytest
from pytest import approx

from geocells.cube import *


def test_st_to_uv():
    assert st_to_uv(0.5) == 0.
    assert st_to_uv(1.) == approx(1.)
    assert st_to_uv(0.) == approx(-1.)

    # Monotonic
    values = [st_to_uv(s / 10) for s in range(11)]
    assert values == sorted(values)


@pytest.mark.parametrize('s', [0., 0.1, 0.25, 0.5, 0.6, 0.99, 1.])
def test_uv_to_st_inverts_st_to_uv(s):
    assert uv_to_st(st_to_uv(s)) == approx(s, abs=1e-12)


def test_st_to_ij():
    assert st_to_ij(0.) == 0
    assert st_to_ij(0.5) == MAX_SIZE // 2
    assert st_to_ij(1.) == MAX_SIZE - 1
    assert st_to_ij(-0.1) == 0
    assert st_to_ij(1.1) == MAX_SIZE - 1


def test_ij_to_st():
    assert ij_to_st(0) == 0.5 / MAX_SIZE
    assert st_to_ij(ij_to_st(12345)) == 12345


@pytest.mark.parametrize('vector, face', [
    ((1., 0., 0.), 0),
    ((0., 1., 0.), 1),
    ((0., 0., 1.), 2),
    ((-1., 0., 0.), 3),
    ((0., -1., 0.), 4),
    ((0., 0., -1.), 5),
    ((0.9, 0.5, -0.5), 0),
    ((-0.2, 0.3, -0.9), 5),
])
def test_xyz_to_face(vector, face):
    assert xyz_to_face(vector) == face


def test_xyz_to_face_ties():
    # Ties resolve towards the later axis in the comparison chain
    assert xyz_to_face((1., 1., 0.)) == 1
    assert xyz_to_face((1., 0., 1.)) == 2
    assert xyz_to_face((1., 1., 1.)) == 2
    assert xyz_to_face((-1., -1., -1.)) == 5


@pytest.mark.parametrize('face', range(6))
def test_face_uv_round_trip(face):
    u, v = 0.3, -0.2
    vector = face_uv_to_xyz(face, u, v)
    assert xyz_to_uv(face, vector) == approx((u, v))
    assert xyz_to_face_uv(vector) == approx((face, u, v))


def test_face_uv_to_xyz_face_centres():
    assert face_uv_to_xyz(0, 0., 0.) == (1., 0., 0.)
    assert face_uv_to_xyz(4, 0., 0.) == (0., -1., 0.)
    assert face_uv_to_xyz(5, 0., 0.) == (0., 0., -1.)
