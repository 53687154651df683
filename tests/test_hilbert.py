import pytest

from geocells.cube import MAX_SIZE
from geocells.hilbert import *


def test_lookup_tables_are_inverses():
    assert len(LOOKUP_POS) == len(LOOKUP_IJ) == 1 << (2 * LOOKUP_BITS + 2)

    for index, pos_entry in enumerate(LOOKUP_POS):
        orientation = index & 3
        ij_entry = LOOKUP_IJ[(pos_entry & ~3) | orientation]
        # Same window, same resulting orientation
        assert ij_entry & ~3 == index & ~3
        assert ij_entry & 3 == pos_entry & 3


def test_lookup_tables_immutable():
    assert isinstance(LOOKUP_POS, tuple)
    assert isinstance(LOOKUP_IJ, tuple)


def test_pos_to_ij_visits_every_quadrant():
    for order in POS_TO_IJ:
        assert sorted(order) == [0, 1, 2, 3]


def test_face_ij_to_id():
    assert face_ij_to_id(0, 0, 0) == 1
    assert face_ij_to_id(0, MAX_SIZE // 2, MAX_SIZE // 2) == 0x1000000000000001
    assert face_ij_to_id(5, 0, 0) >> 61 == 5

    # Leaf ids always end in the sentinel bit
    assert face_ij_to_id(3, 12345, 67890) & 1 == 1


@pytest.mark.parametrize('face, i, j', [
    (0, 0, 0),
    (1, MAX_SIZE - 1, 0),
    (2, 0, MAX_SIZE - 1),
    (3, MAX_SIZE - 1, MAX_SIZE - 1),
    (4, 123456789, 987654321),
    (5, MAX_SIZE // 2, MAX_SIZE // 3),
])
def test_id_round_trip(face, i, j):
    assert id_to_face_ij_orientation(face_ij_to_id(face, i, j))[:3] == (face, i, j)


def test_neighbouring_leaves_are_adjacent_on_curve():
    # Consecutive positions along the curve are adjacent on the grid
    cell_id = face_ij_to_id(2, 1000, 2000)
    _, i1, j1, _ = id_to_face_ij_orientation(cell_id)
    _, i2, j2, _ = id_to_face_ij_orientation(cell_id + 2)
    assert abs(i1 - i2) + abs(j1 - j2) == 1
