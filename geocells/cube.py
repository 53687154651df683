"""
Projection of the unit sphere onto the six faces of a cube.

Faces 0, 1 and 2 are centred on the +x, +y and +z axes, faces 3, 4 and 5 on their
negations. Each face carries (u, v) coordinates in [-1, 1] and, after the quadratic
area-equalising warp, (s, t) coordinates in [0, 1] which are quantized onto a
2^30 x 2^30 (i, j) grid.
"""

__all__ = [
    'MAX_SIZE', 'face_uv_to_xyz', 'ij_to_st', 'st_to_ij', 'st_to_uv', 'uv_to_st',
    'xyz_to_face', 'xyz_to_face_uv', 'xyz_to_uv',
]

import math
from typing import Sequence, Tuple

from geocells._const import S2_MAX_LEVEL
from geocells.coordinates import UnitVector

MAX_SIZE = 1 << S2_MAX_LEVEL


def st_to_uv(s: float) -> float:
    """
    Converts a face coordinate s in [0, 1] into u in [-1, 1] using the quadratic warp

    Args:
        s:
            The s (or t) value

    Returns:
        (float) the u (or v) value
    """
    if s >= 0.5:
        return (1. / 3.) * (4. * s * s - 1.)

    return (1. / 3.) * (1. - 4. * (1. - s) * (1. - s))


def uv_to_st(u: float) -> float:
    """
    Converts u in [-1, 1] into the face coordinate s in [0, 1]; the inverse of st_to_uv

    Args:
        u:
            The u (or v) value

    Returns:
        (float) the s (or t) value
    """
    if u >= 0.:
        return 0.5 * math.sqrt(1. + 3. * u)

    return 1. - 0.5 * math.sqrt(1. - 3. * u)


def st_to_ij(s: float) -> int:
    """Quantizes s onto the leaf grid, clamping to the face"""
    return max(0, min(MAX_SIZE - 1, int(math.floor(MAX_SIZE * s))))


def ij_to_st(i: int) -> float:
    """Returns the s value at the centre of leaf column i"""
    return (i + 0.5) / MAX_SIZE


def xyz_to_face(vector: Sequence[float]) -> int:
    """
    Selects the face whose axis has the largest absolute component of the vector.
    Ties resolve towards the later axis, so z wins over y and y over x.

    Args:
        vector:
            The (x, y, z) vector

    Returns:
        (int) the face, in [0, 5]
    """
    ax, ay, az = (abs(c) for c in vector)
    if ax > ay:
        axis = 0 if ax > az else 2
    else:
        axis = 1 if ay > az else 2

    if vector[axis] < 0:
        axis += 3

    return axis


def xyz_to_uv(face: int, vector: Sequence[float]) -> Tuple[float, float]:
    """
    Projects a vector onto the plane of a given face. The vector need not lie
    within the face, but must not be perpendicular to its axis.

    Args:
        face:
            The cube face

        vector:
            The (x, y, z) vector

    Returns:
        The (u, v) pair
    """
    x, y, z = vector
    if face == 0:
        return y / x, z / x
    if face == 1:
        return -x / y, z / y
    if face == 2:
        return -x / z, -y / z
    if face == 3:
        return z / x, y / x
    if face == 4:
        return z / y, -x / y

    return -y / z, -x / z


def xyz_to_face_uv(vector: Sequence[float]) -> Tuple[int, float, float]:
    """
    Projects a vector onto the cube face it points at.

    Args:
        vector:
            The (x, y, z) vector

    Returns:
        The (face, u, v) triple, where u and v are in [-1, 1]
    """
    face = xyz_to_face(vector)
    u, v = xyz_to_uv(face, vector)
    return face, u, v


def face_uv_to_xyz(face: int, u: float, v: float) -> UnitVector:
    """
    Reconstructs the (non-normalized) vector pointing at (u, v) on a face

    Args:
        face:
            The cube face

        u:
            The u coordinate

        v:
            The v coordinate

    Returns:
        UnitVector; callers needing unit length should call normalized()
    """
    if face == 0:
        return UnitVector(1., u, v)
    if face == 1:
        return UnitVector(-u, 1., v)
    if face == 2:
        return UnitVector(-u, -v, 1.)
    if face == 3:
        return UnitVector(-1., -v, -u)
    if face == 4:
        return UnitVector(v, -1., -u)

    return UnitVector(v, u, -1.)
