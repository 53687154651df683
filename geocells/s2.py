"""
S2 cells: a quadtree over the six faces of a cube, ordered along a Hilbert curve.

A cell id is a 64-bit integer laid out as the face (3 bits), then two bits of Hilbert
position per level, then a single sentinel 1 bit, then zero padding. The sentinel's
position therefore encodes the level, and the ids of all descendants of a cell fall
in a contiguous range around the cell's own id.
"""

__all__ = [
    'S2Cell', 'decode_s2', 'decode_s2_bounds', 'encode_s2',
]

from functools import cached_property, total_ordering
import math
import string
from typing import List, Optional, Tuple

from geocells._const import S2_MAX_LEVEL
from geocells.coordinates import GeoPoint
from geocells.cube import (
    MAX_SIZE, face_uv_to_xyz, st_to_ij, st_to_uv, uv_to_st, xyz_to_face_uv
)
from geocells.exceptions import InvalidPrecision, MalformedToken
from geocells.hilbert import face_ij_to_id, id_to_face_ij_orientation
from geocells.structures import BoundingBox

_NUM_FACES = 6
_POS_BITS = 2 * S2_MAX_LEVEL + 1
_MAX_ID = (1 << 64) - 1
_DBL_EPSILON = 2.220446049250313e-16

# Cell bounds are widened by this many degrees to absorb floating point error
_BOUNDS_MARGIN = 1e-12

# asin(sqrt(1/3)); the latitude of the cube corners
_POLE_MIN_LAT = math.degrees(math.asin(math.sqrt(1. / 3.)))

_FACE_BOUNDS = (
    (-45., -45., 45., 45.),
    (-45., 45., 45., 135.),
    (_POLE_MIN_LAT, -180., 90., 180.),
    (-45., 135., 45., -135.),
    (-45., -135., 45., -45.),
    (-90., -180., -_POLE_MIN_LAT, 180.),
)


def _validate_level(level) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidPrecision(f'S2 level must be an integer, got {level!r}')

    if not 0 <= level <= S2_MAX_LEVEL:
        raise InvalidPrecision(
            f'S2 level must be between 0 and {S2_MAX_LEVEL}, got {level}'
        )

    return level


def _lsb_for_level(level: int) -> int:
    return 1 << (2 * (S2_MAX_LEVEL - level))


def _size_ij(level: int) -> int:
    return 1 << (S2_MAX_LEVEL - level)


@total_ordering
class S2Cell:

    """
    An S2 cell, wrapping its 64-bit id.

    Cells are ordered by id, which is the order of the Hilbert curve within a face
    and face by face across the sphere.

    Args:
        cell_id: (int)
            The 64-bit cell id

    """

    def __init__(self, cell_id: int):
        if isinstance(cell_id, bool) or not isinstance(cell_id, int):
            raise MalformedToken(f'S2 cell id must be an integer, got {cell_id!r}')

        if not 0 < cell_id <= _MAX_ID:
            raise MalformedToken(f'S2 cell id must be a positive 64-bit integer, got {cell_id}')

        if cell_id >> _POS_BITS >= _NUM_FACES:
            raise MalformedToken(f'S2 cell id {cell_id:#x} does not name a valid face')

        if not (cell_id & -cell_id) & 0x1555555555555555:
            raise MalformedToken(f'S2 cell id {cell_id:#x} has no valid level sentinel')

        self.id = cell_id

    def __eq__(self, other):
        if not isinstance(other, S2Cell):
            return False

        return self.id == other.id

    def __lt__(self, other):
        if not isinstance(other, S2Cell):
            return NotImplemented

        return self.id < other.id

    def __hash__(self):
        return hash(('s2', self.id))

    def __repr__(self):
        return f'<S2Cell {self.to_token()} level={self.level}>'

    @property
    def face(self) -> int:
        return self.id >> _POS_BITS

    @property
    def pos(self) -> int:
        """The Hilbert position on the face, including the sentinel bit"""
        return self.id & ((1 << _POS_BITS) - 1)

    @property
    def lsb(self) -> int:
        return self.id & -self.id

    @property
    def level(self) -> int:
        return S2_MAX_LEVEL - ((self.lsb.bit_length() - 1) >> 1)

    @property
    def is_leaf(self) -> bool:
        return bool(self.id & 1)

    @property
    def is_face(self) -> bool:
        return self.level == 0

    @property
    def range_min(self) -> int:
        """The id of the first leaf cell contained in this cell"""
        return self.id - (self.lsb - 1)

    @property
    def range_max(self) -> int:
        """The id of the last leaf cell contained in this cell"""
        return self.id + (self.lsb - 1)

    def contains(self, other: 'S2Cell') -> bool:
        """Test whether another cell is this cell or one of its descendants"""
        return self.range_min <= other.id <= self.range_max

    def __contains__(self, item):
        return self.contains(item)

    @classmethod
    def from_face_ij(cls, face: int, i: int, j: int, level: int = S2_MAX_LEVEL) -> 'S2Cell':
        """
        Creates the cell containing a leaf grid position on a face.

        Args:
            face:
                The cube face, in [0, 5]

            i:
                The leaf column

            j:
                The leaf row

            level: (int)
                (Default 30) The level of the returned cell

        Returns:
            S2Cell
        """
        cell = cls(face_ij_to_id(face, i, j))
        if level == S2_MAX_LEVEL:
            return cell

        return cell.parent(level)

    @classmethod
    def _from_face_ij_wrap(cls, face: int, i: int, j: int) -> 'S2Cell':
        """
        Creates the leaf cell at a grid position which may lie just beyond the edge of the
        face, by reprojecting the position onto whichever face it actually falls on.
        """
        i = max(-1, min(MAX_SIZE, i))
        j = max(-1, min(MAX_SIZE, j))

        # A linear (i, j) to (u, v) mapping is sufficient here, since the same mapping
        # is used in reverse on the destination face. The point is held barely outside
        # the face rectangle so reprojection lands in the adjacent leaf.
        limit = 1. + _DBL_EPSILON
        u = max(-limit, min(limit, (2 * (i - MAX_SIZE // 2) + 1) / MAX_SIZE))
        v = max(-limit, min(limit, (2 * (j - MAX_SIZE // 2) + 1) / MAX_SIZE))

        face, u, v = xyz_to_face_uv(face_uv_to_xyz(face, u, v))
        return cls.from_face_ij(face, st_to_ij(0.5 * (u + 1.)), st_to_ij(0.5 * (v + 1.)))

    @classmethod
    def _from_face_ij_same(cls, face: int, i: int, j: int, same_face: bool) -> 'S2Cell':
        if same_face:
            return cls.from_face_ij(face, i, j)

        return cls._from_face_ij_wrap(face, i, j)

    @classmethod
    def from_geopoint(cls, point: GeoPoint, level: int = S2_MAX_LEVEL) -> 'S2Cell':
        """
        Creates the cell at a given level containing a point

        Args:
            point:
                The GeoPoint

            level: (int)
                (Default 30) The cell level, in [0, 30]

        Returns:
            S2Cell
        """
        level = _validate_level(level)
        face, u, v = xyz_to_face_uv(point.xyz)
        return cls.from_face_ij(face, st_to_ij(uv_to_st(u)), st_to_ij(uv_to_st(v)), level)

    @classmethod
    def from_token(cls, token: str) -> 'S2Cell':
        """
        Parses a token (the cell id in hexadecimal, with trailing zeros removed)

        Args:
            token:
                The token string

        Returns:
            S2Cell
        """
        if not isinstance(token, str):
            raise MalformedToken(f'S2 token must be a string, got {token!r}')

        if not 0 < len(token) <= 16:
            raise MalformedToken(f'S2 token must be 1 to 16 characters long, got {token!r}')

        if any(char not in string.hexdigits for char in token):
            raise MalformedToken(f'S2 token must be hexadecimal, got {token!r}')

        return cls(int(token.ljust(16, '0'), 16))

    @classmethod
    def from_face(cls, face: int) -> 'S2Cell':
        """The level-0 cell covering an entire cube face"""
        if not 0 <= face < _NUM_FACES:
            raise ValueError(f'Cube face must be between 0 and 5, got {face}')

        return cls((face << _POS_BITS) + _lsb_for_level(0))

    def to_token(self) -> str:
        return format(self.id, '016x').rstrip('0')

    def _face_ij_orientation(self) -> Tuple[int, int, int, int]:
        return id_to_face_ij_orientation(self.id)

    def parent(self, level: Optional[int] = None) -> 'S2Cell':
        """
        Gets the ancestor of this cell at a given level.

        Args:
            level: (int)
                (Default one above this cell) The ancestor's level, in [0, self.level]

        Returns:
            S2Cell
        """
        if level is None:
            level = self.level - 1

        if isinstance(level, bool) or not isinstance(level, int) \
                or not 0 <= level <= self.level:
            raise InvalidPrecision(
                f'Parent level must be between 0 and {self.level}, got {level!r}'
            )

        lsb = _lsb_for_level(level)
        return S2Cell((self.id & -lsb) | lsb)

    def children(self) -> List['S2Cell']:
        """
        Gets the four cells one level down which exactly partition this cell,
        in Hilbert order.

        Returns:
            List of S2Cells
        """
        if self.is_leaf:
            raise InvalidPrecision(f'Leaf cells (level {S2_MAX_LEVEL}) have no children')

        new_lsb = self.lsb >> 2
        first = self.id - self.lsb + new_lsb
        return [S2Cell(first + k * 2 * new_lsb) for k in range(4)]

    def neighbors(self) -> List['S2Cell']:
        """
        Gets the cells at the same level adjacent to this cell across an edge or a corner.

        Cells on a face boundary take their neighbors from the adjacent face. A cell
        touching a cube corner has only seven distinct neighbors, since only three
        faces meet there.

        Returns:
            List of S2Cells
        """
        face, i, j, _ = self._face_ij_orientation()
        level = self.level
        size = _size_ij(level)
        i &= -size
        j &= -size

        found = []
        for k in (-size, 0, size):
            if k < 0:
                same_face = j + k >= 0
            elif k >= size:
                same_face = j + k < MAX_SIZE
            else:
                same_face = True
                found.append(
                    self._from_face_ij_same(face, i + k, j - size, j - size >= 0)
                )
                found.append(
                    self._from_face_ij_same(face, i + k, j + size, j + size < MAX_SIZE)
                )

            found.append(
                self._from_face_ij_same(face, i - size, j + k, same_face and i - size >= 0)
            )
            found.append(
                self._from_face_ij_same(
                    face, i + size, j + k, same_face and i + size < MAX_SIZE
                )
            )

        output: List[S2Cell] = []
        for cell in found:
            cell = cell.parent(level)
            if cell != self and cell not in output:
                output.append(cell)

        return output

    def _uv_bounds(self) -> Tuple[float, float, float, float]:
        _, i, j, _ = self._face_ij_orientation()
        size = _size_ij(self.level)
        i0, j0 = i & -size, j & -size
        return (
            st_to_uv(i0 / MAX_SIZE),
            st_to_uv(j0 / MAX_SIZE),
            st_to_uv((i0 + size) / MAX_SIZE),
            st_to_uv((j0 + size) / MAX_SIZE),
        )

    def vertices(self) -> List[GeoPoint]:
        """
        Gets the four corners of the cell, counter-clockwise from the lowest (u, v)

        Returns:
            List of GeoPoints
        """
        u0, v0, u1, v1 = self._uv_bounds()
        return [
            GeoPoint.from_xyz(face_uv_to_xyz(self.face, u, v))
            for u, v in ((u0, v0), (u1, v0), (u1, v1), (u0, v1))
        ]

    @cached_property
    def center(self) -> GeoPoint:
        """The point at the centre of the cell in (s, t) space"""
        face, i, j, _ = self._face_ij_orientation()
        if self.is_leaf:
            delta = 1
        elif (i ^ (self.id >> 2)) & 1:
            delta = 2
        else:
            delta = 0

        s = (2 * i + delta) / (2 * MAX_SIZE)
        t = (2 * j + delta) / (2 * MAX_SIZE)
        return GeoPoint.from_xyz(face_uv_to_xyz(face, st_to_uv(s), st_to_uv(t)))

    @cached_property
    def bounds(self) -> BoundingBox:
        """
        The latitude/longitude rectangle enclosing the cell.

        Face cells have fixed bounds. For smaller cells the extremes are attained at the
        vertices, and a cell with a pole as one of its vertices spans every longitude.
        """
        if self.level == 0:
            return BoundingBox(*_FACE_BOUNDS[self.face]).expanded(_BOUNDS_MARGIN)

        vertices = self.vertices()
        if any(abs(vertex.latitude) == 90. for vertex in vertices):
            return BoundingBox(
                min(vertex.latitude for vertex in vertices),
                -180.,
                max(vertex.latitude for vertex in vertices),
                180.,
            ).expanded(_BOUNDS_MARGIN)

        return BoundingBox.from_points(vertices).expanded(_BOUNDS_MARGIN)


def encode_s2(latitude: float, longitude: float, level: int) -> str:
    """
    Encodes a coordinate as the token of the S2 cell containing it

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

        level:
            The cell level, in [0, 30]

    Returns:
        (str) the cell token
    """
    return S2Cell.from_geopoint(GeoPoint(latitude, longitude), level).to_token()


def decode_s2(token: str) -> GeoPoint:
    """Decodes a token into the centre point of its cell"""
    return S2Cell.from_token(token).center


def decode_s2_bounds(token: str) -> BoundingBox:
    """Decodes a token into the latitude/longitude rectangle enclosing its cell"""
    return S2Cell.from_token(token).bounds
