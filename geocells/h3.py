"""
H3 cells: an aperture 7 hexagonal hierarchy on the faces of an icosahedron.

An index is a 64-bit integer. From the most significant end it holds a reserved bit
(always 0), the mode (4 bits, 1 for cells), three more reserved bits, the resolution
(4 bits), the base cell (7 bits), and fifteen 3-bit digits, one per resolution.
Digits beyond the cell's resolution hold the unused sentinel 7.

Each digit names the direction (see hexgrid.Direction) from the parent's centre to the
child's. The twelve pentagon base cells have no K direction, so a pentagon's first
non-zero digit is never K.
"""

__all__ = [
    'H3Cell', 'decode_h3', 'decode_h3_bounds', 'encode_h3', 'h3_boundary',
]

from enum import IntEnum
from functools import cached_property, lru_cache, total_ordering
import string
from typing import List, Optional, Sequence, Tuple

import numpy as np

from geocells._const import H3_MAX_RESOLUTION
from geocells._h3_tables import (
    ADJACENT_FACE_DIR, BASE_CELL_DATA, FACE_IJK_BASE_CELLS, FACE_NEIGHBORS, IJ, JK, KI,
    MAX_DIM_BY_CII_RES, NUM_BASE_CELLS, PENTAGON_BASE_CELLS, UNIT_SCALE_BY_CII_RES,
)
from geocells.calc import arc_latitude_range
from geocells.coordinates import GeoPoint
from geocells.exceptions import (
    GeoCellError, InvalidPrecision, MalformedToken, PentagonDigitViolation
)
from geocells.hexgrid import (
    M_SQRT3_2, CoordIJK, Direction, FaceIJK, Vec2d, is_class_iii, rotate_digit_60ccw,
    rotate_digit_60cw, v2d_almost_equals, v2d_intersect,
)
from geocells.icosahedron import geo_to_hex2d, hex2d_to_geo
from geocells.structures import BoundingBox
from geocells.utils.logging import LOGGER

H3_CELL_MODE = 1

_MODE_OFFSET = 59
_RESERVED_OFFSET = 56
_RES_OFFSET = 52
_BC_OFFSET = 45
_DIGIT_BITS = 3
_MAX_INDEX = (1 << 64) - 1

_MAX_FACE_COORD = 2
_NUM_HEX_VERTS = 6
_NUM_PENT_VERTS = 5

# Cell bounds are widened by this many degrees to absorb floating point error
_BOUNDS_MARGIN = 1e-10

# Resolution 0 vertices are over 0.1 radians apart, so anything closer is the same vertex
_SHARED_VERTEX_SQ_DISTANCE = 1e-12

# Vertices of an origin-centred cell on the aperture 3 substrate grid, ccw from the i axis
_VERTS_CII = (
    CoordIJK(2, 1, 0), CoordIJK(1, 2, 0), CoordIJK(0, 2, 1),
    CoordIJK(0, 1, 2), CoordIJK(1, 0, 2), CoordIJK(2, 0, 1),
)
_VERTS_CIII = (
    CoordIJK(5, 4, 0), CoordIJK(1, 5, 0), CoordIJK(0, 5, 4),
    CoordIJK(0, 1, 5), CoordIJK(4, 0, 5), CoordIJK(5, 0, 1),
)


class _Overage(IntEnum):
    NO_OVERAGE = 0
    FACE_EDGE = 1
    NEW_FACE = 2


def _validate_resolution(resolution) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise InvalidPrecision(f'H3 resolution must be an integer, got {resolution!r}')

    if not 0 <= resolution <= H3_MAX_RESOLUTION:
        raise InvalidPrecision(
            f'H3 resolution must be between 0 and {H3_MAX_RESOLUTION}, got {resolution}'
        )

    return resolution


def _leading_nonzero_digit(digits: Sequence[int]) -> int:
    for digit in digits:
        if digit != Direction.CENTER:
            return digit

    return Direction.CENTER


def _rotate_60ccw(digits: Sequence[int]) -> List[int]:
    return [rotate_digit_60ccw(digit) for digit in digits]


def _rotate_60cw(digits: Sequence[int]) -> List[int]:
    return [rotate_digit_60cw(digit) for digit in digits]


def _rotate_pent_60ccw(digits: Sequence[int]) -> List[int]:
    """
    Rotates a pentagon's digits 60 degrees counter-clockwise, rotating once more
    whenever the leading digit would land on the deleted K sub-sequence
    """
    digits = list(digits)
    found_first_nonzero = False
    for r in range(len(digits)):
        # Read from the list itself, which the K rotation below may replace
        digits[r] = rotate_digit_60ccw(digits[r])
        if not found_first_nonzero and digits[r] != Direction.CENTER:
            found_first_nonzero = True
            if _leading_nonzero_digit(digits) == Direction.K_AXES:
                digits = _rotate_60ccw(digits)

    return digits


def _pack(resolution: int, base_cell: int, digits: Sequence[int]) -> int:
    """Assembles an index from its fields"""
    index = (H3_CELL_MODE << _MODE_OFFSET) | (resolution << _RES_OFFSET) \
        | (base_cell << _BC_OFFSET)
    for r in range(1, H3_MAX_RESOLUTION + 1):
        digit = digits[r - 1] if r <= resolution else Direction.INVALID
        index |= int(digit) << (_DIGIT_BITS * (H3_MAX_RESOLUTION - r))

    return index


def _adjust_overage_class_ii(
    fijk: FaceIJK,
    resolution: int,
    pent_leading_4: bool,
    substrate: bool,
) -> Tuple[_Overage, FaceIJK]:
    """
    Moves a Class II coordinate which has run off its face onto the neighboring face.

    Args:
        fijk:
            The coordinate

        resolution:
            A Class II resolution

        pent_leading_4:
            Whether the coordinate belongs to a pentagon whose leading digit is I,
            which must be rotated before crossing into the ki quadrant

        substrate:
            Whether the coordinate is on the aperture 3 substrate grid

    Returns:
        The kind of overage found, and the (possibly moved) coordinate
    """
    face, ijk = fijk
    max_dim = MAX_DIM_BY_CII_RES[resolution]
    if substrate:
        max_dim *= 3

    total = ijk.i + ijk.j + ijk.k
    if substrate and total == max_dim:
        return _Overage.FACE_EDGE, fijk

    if total <= max_dim:
        return _Overage.NO_OVERAGE, fijk

    if ijk.k > 0:
        if ijk.j > 0:
            orient = FACE_NEIGHBORS[face][JK]
        else:
            orient = FACE_NEIGHBORS[face][KI]
            if pent_leading_4:
                # Rotate around the pentagon's vertex
                origin = CoordIJK(max_dim, 0, 0)
                ijk = ijk.sub(origin).rotate60cw().add(origin)
    else:
        orient = FACE_NEIGHBORS[face][IJ]

    for _ in range(orient.ccw_rot60):
        ijk = ijk.rotate60ccw()

    unit_scale = UNIT_SCALE_BY_CII_RES[resolution]
    if substrate:
        unit_scale *= 3

    ijk = ijk.add(orient.translate.scale(unit_scale)).normalize()

    if substrate and ijk.i + ijk.j + ijk.k == max_dim:
        return _Overage.FACE_EDGE, FaceIJK(orient.face, ijk)

    return _Overage.NEW_FACE, FaceIJK(orient.face, ijk)


def _face_ijk_to_index(fijk: FaceIJK, resolution: int) -> Optional[int]:
    """
    Encodes a hex coordinate on a face.

    The digits are read off while climbing to resolution 0, then rotated into the
    orientation of whichever base cell the climb ends on.

    Args:
        fijk:
            The coordinate, in the grid of the given resolution

        resolution:
            The resolution

    Returns:
        The index, or None if the coordinate lies too far off its face to reach
        a base cell
    """
    face, ijk = fijk
    digits = [0] * resolution
    for r in range(resolution - 1, -1, -1):
        last = ijk
        if is_class_iii(r + 1):
            ijk = ijk.up_ap7()
            center = ijk.down_ap7()
        else:
            ijk = ijk.up_ap7r()
            center = ijk.down_ap7r()

        digits[r] = last.sub(center).normalize().to_digit()

    if max(ijk) > _MAX_FACE_COORD:
        return None

    base_cell, num_rots = FACE_IJK_BASE_CELLS[face][ijk.i][ijk.j][ijk.k]
    if base_cell in PENTAGON_BASE_CELLS:
        # Steer off the deleted sub-sequence
        if _leading_nonzero_digit(digits) == Direction.K_AXES:
            if face in BASE_CELL_DATA[base_cell].cw_offset_pent:
                digits = _rotate_60cw(digits)
            else:
                digits = _rotate_60ccw(digits)

        for _ in range(num_rots):
            digits = _rotate_pent_60ccw(digits)
    else:
        for _ in range(num_rots):
            digits = _rotate_60ccw(digits)

    return _pack(resolution, base_cell, digits)


def _face_ijk_to_verts(
    fijk: FaceIJK,
    resolution: int,
    num_verts: int,
) -> Tuple[int, FaceIJK, List[FaceIJK]]:
    """
    Finds the vertices of the cell centred on a coordinate, on the Class II substrate grid

    Returns:
        The substrate grid's resolution, the centre and the vertices on that grid
    """
    verts = _VERTS_CIII if is_class_iii(resolution) else _VERTS_CII

    center = fijk.coord.down_ap3().down_ap3r()
    adj_res = resolution
    if is_class_iii(resolution):
        center = center.down_ap7r()
        adj_res += 1

    return adj_res, FaceIJK(fijk.face, center), [
        FaceIJK(fijk.face, center.add(vert).normalize()) for vert in verts[:num_verts]
    ]


def _face_edge(adj_res: int, quadrant: int) -> Tuple[Vec2d, Vec2d]:
    """The endpoints of a face's edge on the substrate grid, for the given quadrant"""
    max_dim = MAX_DIM_BY_CII_RES[adj_res]
    v0 = Vec2d(3. * max_dim, 0.)
    v1 = Vec2d(-1.5 * max_dim, 3. * M_SQRT3_2 * max_dim)
    v2 = Vec2d(-1.5 * max_dim, -3. * M_SQRT3_2 * max_dim)
    if quadrant == IJ:
        return v0, v1
    if quadrant == JK:
        return v1, v2

    return v2, v0


def _hexagon_boundary(fijk: FaceIJK, resolution: int) -> List[GeoPoint]:
    adj_res, center, verts = _face_ijk_to_verts(fijk, resolution, _NUM_HEX_VERTS)

    points = []
    last_face = -1
    last_overage = _Overage.NO_OVERAGE

    # One extra pass to catch an icosahedron edge crossing on the closing edge
    for vert in range(_NUM_HEX_VERTS + 1):
        v = vert % _NUM_HEX_VERTS
        overage, vert_fijk = _adjust_overage_class_ii(verts[v], adj_res, False, True)

        # Class III edges may cross an icosahedron edge, which needs an extra vertex
        # where they cross. Class II vertices always lie on the face edges.
        if is_class_iii(resolution) and vert > 0 and vert_fijk.face != last_face \
                and last_overage != _Overage.FACE_EDGE:
            orig0 = verts[(v + 5) % _NUM_HEX_VERTS].coord.to_hex2d()
            orig1 = verts[v].coord.to_hex2d()

            face2 = vert_fijk.face if last_face == center.face else last_face
            edge0, edge1 = _face_edge(adj_res, ADJACENT_FACE_DIR[center.face][face2])

            inter = v2d_intersect(orig0, orig1, edge0, edge1)
            if not (v2d_almost_equals(orig0, inter) or v2d_almost_equals(orig1, inter)):
                points.append(hex2d_to_geo(inter, center.face, adj_res, substrate=True))

        if vert < _NUM_HEX_VERTS:
            points.append(
                hex2d_to_geo(vert_fijk.coord.to_hex2d(), vert_fijk.face, adj_res, substrate=True)
            )

        last_face = vert_fijk.face
        last_overage = overage

    return points


def _pentagon_boundary(fijk: FaceIJK, resolution: int) -> List[GeoPoint]:
    adj_res, _, verts = _face_ijk_to_verts(fijk, resolution, _NUM_PENT_VERTS)

    points: List[GeoPoint] = []
    last_fijk = verts[0]
    for vert in range(_NUM_PENT_VERTS + 1):
        v = vert % _NUM_PENT_VERTS
        vert_fijk = verts[v]
        overage = _Overage.NEW_FACE
        while overage == _Overage.NEW_FACE:
            overage, vert_fijk = _adjust_overage_class_ii(vert_fijk, adj_res, False, True)

        # Every Class III pentagon edge crosses an icosahedron edge
        if is_class_iii(resolution) and vert > 0:
            orig0 = last_fijk.coord.to_hex2d()

            # Carry the current vertex onto the previous vertex's face
            orient = FACE_NEIGHBORS[vert_fijk.face][
                ADJACENT_FACE_DIR[vert_fijk.face][last_fijk.face]
            ]
            ijk = vert_fijk.coord
            for _ in range(orient.ccw_rot60):
                ijk = ijk.rotate60ccw()
            ijk = ijk.add(
                orient.translate.scale(UNIT_SCALE_BY_CII_RES[adj_res] * 3)
            ).normalize()
            orig1 = ijk.to_hex2d()

            edge0, edge1 = _face_edge(adj_res, ADJACENT_FACE_DIR[orient.face][vert_fijk.face])
            inter = v2d_intersect(orig0, orig1, edge0, edge1)
            points.append(hex2d_to_geo(inter, orient.face, adj_res, substrate=True))

        if vert < _NUM_PENT_VERTS:
            points.append(
                hex2d_to_geo(vert_fijk.coord.to_hex2d(), vert_fijk.face, adj_res, substrate=True)
            )

        last_fijk = vert_fijk

    return points


@total_ordering
class H3Cell:

    """
    An H3 cell, wrapping its 64-bit index.

    Args:
        index: (int)
            The 64-bit H3 index

    """

    def __init__(self, index: int):
        if isinstance(index, bool) or not isinstance(index, int):
            raise MalformedToken(f'H3 index must be an integer, got {index!r}')

        if not 0 <= index <= _MAX_INDEX or index >> 63:
            raise MalformedToken(f'H3 index must be a 63-bit integer, got {index}')

        mode = (index >> _MODE_OFFSET) & 0xf
        if mode != H3_CELL_MODE:
            raise MalformedToken(f'H3 index {index:x} has mode {mode}, expected {H3_CELL_MODE}')

        if (index >> _RESERVED_OFFSET) & 0x7:
            raise MalformedToken(f'H3 index {index:x} has reserved bits set')

        base_cell = (index >> _BC_OFFSET) & 0x7f
        if base_cell >= NUM_BASE_CELLS:
            raise MalformedToken(
                f'H3 base cell must be between 0 and {NUM_BASE_CELLS - 1}, got {base_cell}'
            )

        resolution = (index >> _RES_OFFSET) & 0xf
        digits = []
        for r in range(1, H3_MAX_RESOLUTION + 1):
            digit = (index >> (_DIGIT_BITS * (H3_MAX_RESOLUTION - r))) & 0x7
            if r <= resolution:
                if digit == Direction.INVALID:
                    raise MalformedToken(f'H3 index {index:x} has an unused digit at {r}')
                digits.append(digit)
            elif digit != Direction.INVALID:
                raise MalformedToken(
                    f'H3 index {index:x} has digit {digit} beyond its resolution {resolution}'
                )

        if base_cell in PENTAGON_BASE_CELLS \
                and _leading_nonzero_digit(digits) == Direction.K_AXES:
            raise PentagonDigitViolation(
                f'H3 index {index:x} selects the deleted K sub-sequence '
                f'of pentagon base cell {base_cell}'
            )

        self.index = index
        self._digits = tuple(digits)

    def __eq__(self, other):
        if not isinstance(other, H3Cell):
            return False

        return self.index == other.index

    def __lt__(self, other):
        if not isinstance(other, H3Cell):
            return NotImplemented

        return self.index < other.index

    def __hash__(self):
        return hash(('h3', self.index))

    def __repr__(self):
        return f'<H3Cell {self.to_string()} resolution={self.resolution}>'

    @property
    def resolution(self) -> int:
        return (self.index >> _RES_OFFSET) & 0xf

    @property
    def base_cell(self) -> int:
        return (self.index >> _BC_OFFSET) & 0x7f

    @property
    def digits(self) -> Tuple[int, ...]:
        """The digit for each resolution from 1 down to the cell's own"""
        return self._digits

    @property
    def is_class_iii(self) -> bool:
        return is_class_iii(self.resolution)

    @property
    def is_pentagon(self) -> bool:
        return self.base_cell in PENTAGON_BASE_CELLS and not any(self._digits)

    @classmethod
    def from_string(cls, value: str) -> 'H3Cell':
        """
        Parses an index from its hexadecimal string form

        Args:
            value:
                The index string, e.g. "89283082e73ffff"

        Returns:
            H3Cell
        """
        if not isinstance(value, str):
            raise MalformedToken(f'H3 index must be a string, got {value!r}')

        if not 0 < len(value) <= 16:
            raise MalformedToken(f'H3 index must be 1 to 16 characters long, got {value!r}')

        if any(char not in string.hexdigits for char in value):
            raise MalformedToken(f'H3 index must be hexadecimal, got {value!r}')

        return cls(int(value, 16))

    @classmethod
    def from_geopoint(cls, point: GeoPoint, resolution: int) -> 'H3Cell':
        """
        Creates the cell at a given resolution containing a point

        Args:
            point:
                The GeoPoint

            resolution:
                The H3 resolution, in [0, 15]

        Returns:
            H3Cell
        """
        resolution = _validate_resolution(resolution)
        face, vec = geo_to_hex2d(point, resolution)
        index = _face_ijk_to_index(FaceIJK(face, CoordIJK.from_hex2d(vec)), resolution)
        if index is None:
            raise GeoCellError(f'{point} could not be resolved to an H3 base cell')

        return cls(index)

    @classmethod
    def _locate(cls, fijk: FaceIJK, resolution: int) -> Optional['H3Cell']:
        """
        Finds the cell at a hex coordinate which may lie beyond the edge of its face
        """
        index = _face_ijk_to_index(fijk, resolution)
        if index is None:
            coord, adj_res = fijk.coord, resolution
            if is_class_iii(resolution):
                coord, adj_res = coord.down_ap7r(), resolution + 1

            overage, moved = _adjust_overage_class_ii(
                FaceIJK(fijk.face, coord), adj_res, False, False
            )
            if overage == _Overage.NO_OVERAGE:
                return None

            if adj_res != resolution:
                moved = FaceIJK(moved.face, moved.coord.up_ap7r())

            index = _face_ijk_to_index(moved, resolution)
            if index is None:
                return None

        try:
            return cls(index)
        except PentagonDigitViolation:
            return None

    def to_string(self) -> str:
        return format(self.index, 'x')

    def _to_face_ijk(self) -> FaceIJK:
        """
        Finds the cell's centre as a coordinate on an icosahedron face. Cells near a face
        edge are moved onto whichever face actually holds their centre.
        """
        base_cell = self.base_cell
        resolution = self.resolution
        digits = list(self._digits)
        is_pentagon_base = base_cell in PENTAGON_BASE_CELLS

        if is_pentagon_base and _leading_nonzero_digit(digits) == Direction.IK_AXES:
            digits = _rotate_60cw(digits)

        home = BASE_CELL_DATA[base_cell]
        ijk = home.coord
        possible_overage = is_pentagon_base or not (
            resolution == 0 or ijk == CoordIJK(0, 0, 0)
        )

        for r, digit in enumerate(digits, start=1):
            ijk = ijk.down_ap7() if is_class_iii(r) else ijk.down_ap7r()
            ijk = ijk.neighbor(digit)

        fijk = FaceIJK(home.face, ijk)
        if not possible_overage:
            return fijk

        # Overage is measured on the Class II grid
        adj_res = resolution
        adjusted = fijk
        if is_class_iii(resolution):
            adjusted = FaceIJK(home.face, ijk.down_ap7r())
            adj_res += 1

        pent_leading_4 = is_pentagon_base \
            and _leading_nonzero_digit(digits) == Direction.I_AXES
        overage, adjusted = _adjust_overage_class_ii(adjusted, adj_res, pent_leading_4, False)
        if overage == _Overage.NO_OVERAGE:
            return fijk

        if is_pentagon_base:
            while overage != _Overage.NO_OVERAGE:
                overage, adjusted = _adjust_overage_class_ii(adjusted, adj_res, False, False)

        if adj_res != resolution:
            adjusted = FaceIJK(adjusted.face, adjusted.coord.up_ap7r())

        return adjusted

    def parent(self, resolution: Optional[int] = None) -> 'H3Cell':
        """
        Gets the ancestor of this cell at a given resolution.

        Args:
            resolution: (int)
                (Default one above this cell) The ancestor's resolution,
                in [0, self.resolution]

        Returns:
            H3Cell
        """
        if resolution is None:
            resolution = self.resolution - 1

        if isinstance(resolution, bool) or not isinstance(resolution, int) \
                or not 0 <= resolution <= self.resolution:
            raise InvalidPrecision(
                f'Parent resolution must be between 0 and {self.resolution}, got {resolution!r}'
            )

        return H3Cell(_pack(resolution, self.base_cell, self._digits[:resolution]))

    def children(self) -> List['H3Cell']:
        """
        Gets the cells one resolution down whose parent is this cell: seven, or
        six for a pentagon, which has no child in the K direction.

        Returns:
            List of H3Cells, centre child first
        """
        if self.resolution == H3_MAX_RESOLUTION:
            raise InvalidPrecision(
                f'Cells at resolution {H3_MAX_RESOLUTION} have no children'
            )

        is_pentagon = self.is_pentagon
        return [
            H3Cell(_pack(self.resolution + 1, self.base_cell, self._digits + (digit,)))
            for digit in range(Direction.INVALID)
            if not (is_pentagon and digit == Direction.K_AXES)
        ]

    def neighbors(self) -> List['H3Cell']:
        """
        Gets the cells at the same resolution sharing an edge with this cell: six,
        or five for a pentagon.

        Each neighbor is found by stepping one unit along each IJK direction on the
        cell's icosahedron face, carrying the step onto the adjacent face where it
        runs off the edge.

        A unit step from a base cell can leave the range of the face tables, so
        resolution 0 neighbors come from a table of base cells sharing a vertex.

        Returns:
            List of H3Cells
        """
        resolution = self.resolution
        if resolution == 0:
            return [
                H3Cell(_pack(0, base_cell, ()))
                for base_cell in _base_cell_neighbors()[self.base_cell]
            ]

        fijk = self._to_face_ijk()
        is_pentagon = self.is_pentagon

        output: List[H3Cell] = []
        for direction in range(Direction.K_AXES, Direction.INVALID):
            if is_pentagon and direction == Direction.K_AXES:
                continue

            coord = fijk.coord.neighbor(direction)
            cell = self._locate(FaceIJK(fijk.face, coord), resolution)
            if cell is None:
                LOGGER.debug(
                    'Neighbor %s of %s is off the face grid; re-encoding its centre',
                    Direction(direction).name, self.to_string()
                )
                cell = H3Cell.from_geopoint(
                    hex2d_to_geo(coord.to_hex2d(), fijk.face, resolution), resolution
                )

            if cell != self and cell not in output:
                output.append(cell)

        return output

    @cached_property
    def center(self) -> GeoPoint:
        face, ijk = self._to_face_ijk()
        return hex2d_to_geo(ijk.to_hex2d(), face, self.resolution)

    @cached_property
    def boundary(self) -> List[GeoPoint]:
        """
        The cell's vertices, counter-clockwise. Besides the six (or five) corners this
        includes a vertex wherever a cell edge crosses an icosahedron edge.
        """
        if self.is_pentagon:
            return _pentagon_boundary(self._to_face_ijk(), self.resolution)

        return _hexagon_boundary(self._to_face_ijk(), self.resolution)

    def contains_pole(self) -> Optional[int]:
        """Returns 1 or -1 if the cell contains the north or south pole, otherwise None"""
        for sign in (1, -1):
            if H3Cell.from_geopoint(GeoPoint(90. * sign, 0.), self.resolution) == self:
                return sign

        return None

    @cached_property
    def bounds(self) -> BoundingBox:
        """
        The latitude/longitude rectangle enclosing the cell, allowing for cell edges
        bulging poleward between vertices
        """
        boundary = self.boundary
        south, north = 90., -90.
        for start, end in zip(boundary, boundary[1:] + boundary[:1]):
            lo, hi = arc_latitude_range(start, end)
            south, north = min(south, lo), max(north, hi)

        pole = self.contains_pole()
        if pole == 1:
            return BoundingBox(south, -180., 90., 180.).expanded(_BOUNDS_MARGIN)
        if pole == -1:
            return BoundingBox(-90., -180., north, 180.).expanded(_BOUNDS_MARGIN)

        envelope = BoundingBox.from_points(boundary)
        return BoundingBox(south, envelope.west, north, envelope.east).expanded(_BOUNDS_MARGIN)


@lru_cache(maxsize=None)
def _base_cell_neighbors() -> Tuple[Tuple[int, ...], ...]:
    """
    For each base cell, the base cells sharing an edge with it.

    Exactly three cells meet at every vertex of the grid, so two base cells are
    neighbors whenever their boundaries share a vertex.
    """
    owners: List[int] = []
    vectors = []
    for base_cell in range(NUM_BASE_CELLS):
        for vertex in H3Cell(_pack(0, base_cell, ())).boundary:
            owners.append(base_cell)
            vectors.append(vertex.xyz)

    vectors = np.array(vectors)
    sq_distances = ((vectors[:, None, :] - vectors[None, :, :]) ** 2).sum(axis=2)

    adjacent: List[set] = [set() for _ in range(NUM_BASE_CELLS)]
    for a, b in np.argwhere(sq_distances < _SHARED_VERTEX_SQ_DISTANCE):
        if owners[a] != owners[b]:
            adjacent[owners[a]].add(owners[b])

    return tuple(tuple(sorted(cells)) for cells in adjacent)


def encode_h3(latitude: float, longitude: float, resolution: int) -> str:
    """
    Encodes a coordinate as the index string of the H3 cell containing it

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

        resolution:
            The H3 resolution, in [0, 15]

    Returns:
        (str) the index, in hexadecimal
    """
    return H3Cell.from_geopoint(GeoPoint(latitude, longitude), resolution).to_string()


def decode_h3(index: str) -> GeoPoint:
    """Decodes an index string into the centre point of its cell"""
    return H3Cell.from_string(index).center


def decode_h3_bounds(index: str) -> BoundingBox:
    """Decodes an index string into the latitude/longitude rectangle enclosing its cell"""
    return H3Cell.from_string(index).bounds


def h3_boundary(index: str) -> List[GeoPoint]:
    """Decodes an index string into its cell's boundary vertices"""
    return H3Cell.from_string(index).boundary
