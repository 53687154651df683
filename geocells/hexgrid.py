"""
Hexagonal grid coordinates for the H3 system.

Hex centres on an icosahedron face are addressed by IJK coordinates: three axes 120
degrees apart, of which only two are independent. Coordinates are kept in their
normal form, where every component is non-negative and at least one is zero.
Moving between resolutions uses the aperture 7 transforms (and, for cell
vertices, the aperture 3 transforms), each of which has a counter-clockwise
variant and a clockwise "r" variant depending on the grid's Class II / Class III
orientation.
"""

__all__ = [
    'CoordIJK', 'Direction', 'FaceIJK', 'UNIT_VECS', 'Vec2d', 'is_class_iii',
    'rotate_digit_60ccw', 'rotate_digit_60cw', 'v2d_almost_equals', 'v2d_intersect',
]

from enum import IntEnum
import math
from typing import NamedTuple, Tuple

M_SQRT3_2 = 0.8660254037844386467637231707529361834714
M_SIN60 = M_SQRT3_2
M_RSIN60 = 1.1547005383792515290182975610039149112953

FLT_EPSILON = 1.1920929e-07


def _lround(value: float) -> int:
    """Rounds half away from zero"""
    if value >= 0.:
        return int(math.floor(value + 0.5))

    return -int(math.floor(-value + 0.5))


def is_class_iii(resolution: int) -> bool:
    """Odd resolutions use the Class III (rotated) grid orientation"""
    return resolution % 2 == 1


class Direction(IntEnum):
    """
    The digits of an H3 index: the direction from a parent cell's centre to the
    child's centre, named by the IJK unit vector they correspond to.
    """
    CENTER = 0
    K_AXES = 1
    J_AXES = 2
    JK_AXES = 3
    I_AXES = 4
    IK_AXES = 5
    IJ_AXES = 6
    INVALID = 7


_ROTATE_CCW = {
    Direction.CENTER: Direction.CENTER,
    Direction.K_AXES: Direction.IK_AXES,
    Direction.IK_AXES: Direction.I_AXES,
    Direction.I_AXES: Direction.IJ_AXES,
    Direction.IJ_AXES: Direction.J_AXES,
    Direction.J_AXES: Direction.JK_AXES,
    Direction.JK_AXES: Direction.K_AXES,
}

_ROTATE_CW = {v: k for k, v in _ROTATE_CCW.items()}


def rotate_digit_60ccw(digit: int) -> Direction:
    """Rotates a digit 60 degrees counter-clockwise"""
    return _ROTATE_CCW.get(Direction(digit), Direction.INVALID)


def rotate_digit_60cw(digit: int) -> Direction:
    """Rotates a digit 60 degrees clockwise"""
    return _ROTATE_CW.get(Direction(digit), Direction.INVALID)


class Vec2d(NamedTuple):
    """A point on an icosahedron face's plane"""
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


def v2d_intersect(p0: Vec2d, p1: Vec2d, p2: Vec2d, p3: Vec2d) -> Vec2d:
    """
    Finds the intersection of the line through p0 and p1 with the line through p2 and p3

    Args:
        p0, p1:
            Two points on the first line

        p2, p3:
            Two points on the second line

    Returns:
        Vec2d
    """
    s1 = Vec2d(p1.x - p0.x, p1.y - p0.y)
    s2 = Vec2d(p3.x - p2.x, p3.y - p2.y)
    t = (s2.x * (p0.y - p2.y) - s2.y * (p0.x - p2.x)) / (-s2.x * s1.y + s1.x * s2.y)
    return Vec2d(p0.x + t * s1.x, p0.y + t * s1.y)


def v2d_almost_equals(v1: Vec2d, v2: Vec2d) -> bool:
    return abs(v1.x - v2.x) < FLT_EPSILON and abs(v1.y - v2.y) < FLT_EPSILON


class CoordIJK(NamedTuple):
    """
    Hex coordinates along the i, j and k axes. Every operation returns a new
    coordinate in normal form, with the exception of the raw arithmetic helpers.
    """
    i: int
    j: int
    k: int

    def add(self, other: 'CoordIJK') -> 'CoordIJK':
        return CoordIJK(self.i + other.i, self.j + other.j, self.k + other.k)

    def sub(self, other: 'CoordIJK') -> 'CoordIJK':
        return CoordIJK(self.i - other.i, self.j - other.j, self.k - other.k)

    def scale(self, factor: int) -> 'CoordIJK':
        return CoordIJK(self.i * factor, self.j * factor, self.k * factor)

    def normalize(self) -> 'CoordIJK':
        """Removes negative components, then removes the shared minimum"""
        i, j, k = self
        if i < 0:
            j -= i
            k -= i
            i = 0

        if j < 0:
            i -= j
            k -= j
            j = 0

        if k < 0:
            i -= k
            j -= k
            k = 0

        smallest = min(i, j, k)
        if smallest > 0:
            i -= smallest
            j -= smallest
            k -= smallest

        return CoordIJK(i, j, k)

    def to_cube(self) -> Tuple[int, int, int]:
        """Converts to cube coordinates, whose components sum to zero"""
        i = -self.i + self.k
        j = self.j - self.k
        return i, j, -i - j

    @classmethod
    def from_cube(cls, i: int, j: int, k: int) -> 'CoordIJK':
        return cls(-i, j, 0).normalize()

    def _linear(
        self,
        i_vec: Tuple[int, int, int],
        j_vec: Tuple[int, int, int],
        k_vec: Tuple[int, int, int],
    ) -> 'CoordIJK':
        """Applies the linear map sending the unit axes to the given vectors"""
        return CoordIJK(
            self.i * i_vec[0] + self.j * j_vec[0] + self.k * k_vec[0],
            self.i * i_vec[1] + self.j * j_vec[1] + self.k * k_vec[1],
            self.i * i_vec[2] + self.j * j_vec[2] + self.k * k_vec[2],
        ).normalize()

    def up_ap7(self) -> 'CoordIJK':
        """The containing aperture 7 parent coordinate, counter-clockwise variant"""
        i = self.i - self.k
        j = self.j - self.k
        return CoordIJK(_lround((3 * i - j) / 7.), _lround((i + 2 * j) / 7.), 0).normalize()

    def up_ap7r(self) -> 'CoordIJK':
        """The containing aperture 7 parent coordinate, clockwise variant"""
        i = self.i - self.k
        j = self.j - self.k
        return CoordIJK(_lround((2 * i + j) / 7.), _lround((3 * j - i) / 7.), 0).normalize()

    def down_ap7(self) -> 'CoordIJK':
        """The centre child coordinate one aperture 7 resolution down, counter-clockwise"""
        return self._linear((3, 0, 1), (1, 3, 0), (0, 1, 3))

    def down_ap7r(self) -> 'CoordIJK':
        """The centre child coordinate one aperture 7 resolution down, clockwise"""
        return self._linear((3, 1, 0), (0, 3, 1), (1, 0, 3))

    def down_ap3(self) -> 'CoordIJK':
        """The centre coordinate on the aperture 3 substrate grid, counter-clockwise"""
        return self._linear((2, 0, 1), (1, 2, 0), (0, 1, 2))

    def down_ap3r(self) -> 'CoordIJK':
        """The centre coordinate on the aperture 3 substrate grid, clockwise"""
        return self._linear((2, 1, 0), (0, 2, 1), (1, 0, 2))

    def rotate60ccw(self) -> 'CoordIJK':
        return self._linear((1, 1, 0), (0, 1, 1), (1, 0, 1))

    def rotate60cw(self) -> 'CoordIJK':
        return self._linear((1, 0, 1), (1, 1, 0), (0, 1, 1))

    def neighbor(self, digit: int) -> 'CoordIJK':
        """The adjacent coordinate in the direction of a digit"""
        if Direction.CENTER < digit < Direction.INVALID:
            return self.add(UNIT_VECS[digit]).normalize()

        return self

    def to_digit(self) -> Direction:
        """The digit whose unit vector this coordinate is, or INVALID"""
        normalized = self.normalize()
        for digit, vec in enumerate(UNIT_VECS):
            if normalized == vec:
                return Direction(digit)

        return Direction.INVALID

    def to_hex2d(self) -> Vec2d:
        """The centre of this hex on the face plane, in hex units"""
        i = self.i - self.k
        j = self.j - self.k
        return Vec2d(i - 0.5 * j, j * M_SQRT3_2)

    @classmethod
    def from_hex2d(cls, vec: Vec2d) -> 'CoordIJK':
        """
        Finds the hex containing a point on the face plane

        Args:
            vec:
                The point, in hex units

        Returns:
            CoordIJK
        """
        a1 = abs(vec.x)
        a2 = abs(vec.y)

        # Reverse the ij -> x, y conversion in the first quadrant
        x2 = a2 * M_RSIN60
        x1 = a1 + x2 / 2.

        m1 = int(x1)
        m2 = int(x2)

        r1 = x1 - m1
        r2 = x2 - m2

        if r1 < 0.5:
            if r1 < 1. / 3.:
                i = m1
                j = m2 if r2 < (1. + r1) / 2. else m2 + 1
            else:
                j = m2 if r2 < 1. - r1 else m2 + 1
                i = m1 + 1 if (1. - r1) <= r2 < 2. * r1 else m1
        else:
            if r1 < 2. / 3.:
                j = m2 if r2 < 1. - r1 else m2 + 1
                i = m1 if (2. * r1 - 1.) < r2 < (1. - r1) else m1 + 1
            else:
                i = m1 + 1
                j = m2 if r2 < r1 / 2. else m2 + 1

        # Fold back across the axes into the point's actual quadrant
        if vec.x < 0.:
            if j % 2 == 0:
                i -= 2 * (i - j // 2)
            else:
                i -= 2 * (i - (j + 1) // 2) + 1

        if vec.y < 0.:
            i -= (2 * j + 1) // 2
            j = -j

        return cls(i, j, 0).normalize()


UNIT_VECS = (
    CoordIJK(0, 0, 0),  # center
    CoordIJK(0, 0, 1),  # k
    CoordIJK(0, 1, 0),  # j
    CoordIJK(0, 1, 1),  # jk
    CoordIJK(1, 0, 0),  # i
    CoordIJK(1, 0, 1),  # ik
    CoordIJK(1, 1, 0),  # ij
)


class FaceIJK(NamedTuple):
    """A hex coordinate on a specific icosahedron face"""
    face: int
    coord: CoordIJK
