"""
Fixed tables describing the H3 icosahedron and its 122 resolution 0 base cells.

Every table is an immutable tuple built at import time.
"""

__all__ = [
    'ADJACENT_FACE_DIR', 'BASE_CELL_DATA', 'BaseCellData', 'FACE_AXES_AZ_RADS_CII',
    'FACE_CENTER_GEO', 'FACE_CENTER_POINT', 'FACE_IJK_BASE_CELLS', 'FACE_NEIGHBORS',
    'FaceOrientIJK', 'IJ', 'JK', 'KI', 'MAX_DIM_BY_CII_RES',
    'NUM_BASE_CELLS', 'NUM_ICOSA_FACES', 'PENTAGON_BASE_CELLS', 'UNIT_SCALE_BY_CII_RES',
]

from typing import NamedTuple, Tuple

from geocells.hexgrid import CoordIJK

NUM_ICOSA_FACES = 20
NUM_BASE_CELLS = 122

# Quadrants of a face, as indices into FACE_NEIGHBORS; 0 is the face itself
IJ = 1
KI = 2
JK = 3

# Marks pairs of faces which do not share an edge
_INVALID_FACE = -1

# Face centres as (latitude, longitude), in radians
FACE_CENTER_GEO: Tuple[Tuple[float, float], ...] = (
    (0.803582649718989942, 1.248397419617396099),  # face  0
    (1.307747883455638156, 2.536945009877921159),  # face  1
    (1.054751253523952054, -1.347517358900396623),  # face  2
    (0.600191595538186799, -0.450603909469755746),  # face  3
    (0.491715428198773866, 0.401988202911306943),  # face  4
    (0.172745327415618701, 1.678146885280433686),  # face  5
    (0.605929321571350690, 2.953923329812411617),  # face  6
    (0.427370518328979641, -1.888876200336285401),  # face  7
    (-0.079066118549212831, -0.733429513380867741),  # face  8
    (-0.230961644455383637, 0.506495587332349035),  # face  9
    (0.079066118549212831, 2.408163140208925497),  # face 10
    (0.230961644455383637, -2.635097066257444203),  # face 11
    (-0.172745327415618701, -1.463445768309359553),  # face 12
    (-0.605929321571350690, -0.187669323777381622),  # face 13
    (-0.427370518328979641, 1.252716453253507838),  # face 14
    (-0.600191595538186799, 2.690988744120037492),  # face 15
    (-0.491715428198773866, -2.739604450678486295),  # face 16
    (-0.803582649718989942, -1.893195233972397139),  # face 17
    (-1.307747883455638156, -0.604647643711872080),  # face 18
    (-1.054751253523952054, 1.794075294689396615),  # face 19
)

# Face centres on the unit sphere
FACE_CENTER_POINT: Tuple[Tuple[float, float, float], ...] = (
    (0.2199307791404606, 0.6583691780274996, 0.7198475378926182),  # face  0
    (-0.2139234834501421, 0.1478171829550703, 0.9656017935214205),  # face  1
    (0.1092625278784797, -0.4811951572873210, 0.8697775121287253),  # face  2
    (0.7428567301586791, -0.3593941678278028, 0.5648005936517033),  # face  3
    (0.8112534709140969, 0.3448953237639384, 0.4721387736413930),  # face  4
    (-0.1055498149613921, 0.9794457296411413, 0.1718874610009365),  # face  5
    (-0.8075407579970092, 0.1533552485898818, 0.5695261994882688),  # face  6
    (-0.2846148069787907, -0.8644080972654206, 0.4144792552473539),  # face  7
    (0.7405621473854482, -0.6673299564565524, -0.0789837646326737),  # face  8
    (0.8512303986474293, 0.4722343788582681, -0.2289137388687808),  # face  9
    (-0.7405621473854481, 0.6673299564565524, 0.0789837646326737),  # face 10
    (-0.8512303986474292, -0.4722343788582682, 0.2289137388687808),  # face 11
    (0.1055498149613919, -0.9794457296411413, -0.1718874610009365),  # face 12
    (0.8075407579970092, -0.1533552485898819, -0.5695261994882688),  # face 13
    (0.2846148069787908, 0.8644080972654204, -0.4144792552473539),  # face 14
    (-0.7428567301586791, 0.3593941678278027, -0.5648005936517033),  # face 15
    (-0.8112534709140971, -0.3448953237639382, -0.4721387736413930),  # face 16
    (-0.2199307791404607, -0.6583691780274996, -0.7198475378926182),  # face 17
    (0.2139234834501420, -0.1478171829550704, -0.9656017935214205),  # face 18
    (-0.1092625278784796, 0.4811951572873210, -0.8697775121287253),  # face 19
)

# Azimuth from each face centre to its Class II i, j and k axes, in radians
FACE_AXES_AZ_RADS_CII: Tuple[Tuple[float, float, float], ...] = (
    (5.619958268523939882, 3.525563166130744542, 1.431168063737548730),  # face  0
    (5.760339081714187279, 3.665943979320991689, 1.571548876927796127),  # face  1
    (0.780213654393430055, 4.969003859179821079, 2.874608756786625655),  # face  2
    (0.430469363979999913, 4.619259568766391033, 2.524864466373195467),  # face  3
    (6.130269123335111400, 4.035874020941915804, 1.941478918548720291),  # face  4
    (2.692877706530642877, 0.598482604137447119, 4.787272808923838195),  # face  5
    (2.982963003477243874, 0.888567901084048369, 5.077358105870439581),  # face  6
    (3.532912002790141181, 1.438516900396945656, 5.627307105183336758),  # face  7
    (3.494305004259568154, 1.399909901866372864, 5.588700106652763840),  # face  8
    (3.003214169499538391, 0.908819067106342928, 5.097609271892733906),  # face  9
    (5.930472956509811562, 3.836077854116615875, 1.741682751723420374),  # face 10
    (0.138378484090254847, 4.327168688876645809, 2.232773586483450311),  # face 11
    (0.448714947059150361, 4.637505151845541521, 2.543110049452346120),  # face 12
    (0.158629650112549365, 4.347419854898940135, 2.253024752505744869),  # face 13
    (5.891865957979238535, 3.797470855586042958, 1.703075753192847583),  # face 14
    (2.711123289609793325, 0.616728187216597771, 4.805518392002988683),  # face 15
    (3.294508837434268316, 1.200113735041072948, 5.388903939827463911),  # face 16
    (3.804819692245439833, 1.710424589852244509, 5.899214794638635174),  # face 17
    (3.664438879055192436, 1.570043776661997111, 5.758833981448388027),  # face 18
    (2.361378999196363184, 0.266983896803167583, 4.455774101589558636),  # face 19
)


class FaceOrientIJK(NamedTuple):
    """The transform carrying IJK coordinates from one face's quadrant onto a neighbor"""
    face: int
    translate: CoordIJK
    ccw_rot60: int


# For each face: itself, then the neighbors across its ij, ki and jk quadrants
FACE_NEIGHBORS: Tuple[Tuple[FaceOrientIJK, ...], ...] = (
    (  # face 0
        FaceOrientIJK(0, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(4, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(1, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(5, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 1
        FaceOrientIJK(1, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(0, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(2, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(6, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 2
        FaceOrientIJK(2, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(1, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(3, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(7, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 3
        FaceOrientIJK(3, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(2, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(4, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(8, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 4
        FaceOrientIJK(4, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(3, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(0, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(9, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 5
        FaceOrientIJK(5, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(10, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(14, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(0, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 6
        FaceOrientIJK(6, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(11, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(10, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(1, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 7
        FaceOrientIJK(7, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(12, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(11, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(2, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 8
        FaceOrientIJK(8, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(13, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(12, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(3, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 9
        FaceOrientIJK(9, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(14, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(13, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(4, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 10
        FaceOrientIJK(10, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(5, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(6, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(15, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 11
        FaceOrientIJK(11, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(6, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(7, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(16, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 12
        FaceOrientIJK(12, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(7, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(8, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(17, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 13
        FaceOrientIJK(13, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(8, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(9, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(18, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 14
        FaceOrientIJK(14, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(9, CoordIJK(2, 2, 0), 3),
        FaceOrientIJK(5, CoordIJK(2, 0, 2), 3),
        FaceOrientIJK(19, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 15
        FaceOrientIJK(15, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(16, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(19, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(10, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 16
        FaceOrientIJK(16, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(17, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(15, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(11, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 17
        FaceOrientIJK(17, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(18, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(16, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(12, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 18
        FaceOrientIJK(18, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(19, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(17, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(13, CoordIJK(0, 2, 2), 3),
    ),
    (  # face 19
        FaceOrientIJK(19, CoordIJK(0, 0, 0), 0),
        FaceOrientIJK(15, CoordIJK(2, 0, 2), 1),
        FaceOrientIJK(18, CoordIJK(2, 2, 0), 5),
        FaceOrientIJK(14, CoordIJK(0, 2, 2), 3),
    ),
)


def _adjacent_face_dir() -> Tuple[Tuple[int, ...], ...]:
    """For each pair of faces, the quadrant of the first facing the second"""
    table = []
    for face in range(NUM_ICOSA_FACES):
        row = [_INVALID_FACE] * NUM_ICOSA_FACES
        for quadrant, orient in enumerate(FACE_NEIGHBORS[face]):
            row[orient.face] = quadrant
        table.append(tuple(row))

    return tuple(table)


ADJACENT_FACE_DIR = _adjacent_face_dir()

# Class II resolutions only; Class III resolutions share the next finer Class II grid
MAX_DIM_BY_CII_RES = (
    2, -1, 14, -1, 98, -1, 686, -1, 4802, -1, 33614, -1, 235298, -1, 1647086, -1, 11529602,
)

UNIT_SCALE_BY_CII_RES = (
    1, -1, 7, -1, 49, -1, 343, -1, 2401, -1, 16807, -1, 117649, -1, 823543, -1, 5764801,
)


class BaseCellData(NamedTuple):
    """A base cell's home face and position, and for pentagons its clockwise offset faces"""
    face: int
    coord: CoordIJK
    is_pentagon: bool
    cw_offset_pent: Tuple[int, int]


BASE_CELL_DATA: Tuple[BaseCellData, ...] = (
    BaseCellData(1, CoordIJK(1, 0, 0), False, (0, 0)),  # 0
    BaseCellData(2, CoordIJK(1, 1, 0), False, (0, 0)),  # 1
    BaseCellData(1, CoordIJK(0, 0, 0), False, (0, 0)),  # 2
    BaseCellData(2, CoordIJK(1, 0, 0), False, (0, 0)),  # 3
    BaseCellData(0, CoordIJK(2, 0, 0), True, (-1, -1)),  # 4
    BaseCellData(1, CoordIJK(1, 1, 0), False, (0, 0)),  # 5
    BaseCellData(1, CoordIJK(0, 0, 1), False, (0, 0)),  # 6
    BaseCellData(2, CoordIJK(0, 0, 0), False, (0, 0)),  # 7
    BaseCellData(0, CoordIJK(1, 0, 0), False, (0, 0)),  # 8
    BaseCellData(2, CoordIJK(0, 1, 0), False, (0, 0)),  # 9
    BaseCellData(1, CoordIJK(0, 1, 0), False, (0, 0)),  # 10
    BaseCellData(1, CoordIJK(0, 1, 1), False, (0, 0)),  # 11
    BaseCellData(3, CoordIJK(1, 0, 0), False, (0, 0)),  # 12
    BaseCellData(3, CoordIJK(1, 1, 0), False, (0, 0)),  # 13
    BaseCellData(11, CoordIJK(2, 0, 0), True, (2, 6)),  # 14
    BaseCellData(4, CoordIJK(1, 0, 0), False, (0, 0)),  # 15
    BaseCellData(0, CoordIJK(0, 0, 0), False, (0, 0)),  # 16
    BaseCellData(6, CoordIJK(0, 1, 0), False, (0, 0)),  # 17
    BaseCellData(0, CoordIJK(0, 0, 1), False, (0, 0)),  # 18
    BaseCellData(2, CoordIJK(0, 1, 1), False, (0, 0)),  # 19
    BaseCellData(7, CoordIJK(0, 0, 1), False, (0, 0)),  # 20
    BaseCellData(2, CoordIJK(0, 0, 1), False, (0, 0)),  # 21
    BaseCellData(0, CoordIJK(1, 1, 0), False, (0, 0)),  # 22
    BaseCellData(6, CoordIJK(0, 0, 1), False, (0, 0)),  # 23
    BaseCellData(10, CoordIJK(2, 0, 0), True, (1, 5)),  # 24
    BaseCellData(6, CoordIJK(0, 0, 0), False, (0, 0)),  # 25
    BaseCellData(3, CoordIJK(0, 0, 0), False, (0, 0)),  # 26
    BaseCellData(11, CoordIJK(1, 0, 0), False, (0, 0)),  # 27
    BaseCellData(4, CoordIJK(1, 1, 0), False, (0, 0)),  # 28
    BaseCellData(3, CoordIJK(0, 1, 0), False, (0, 0)),  # 29
    BaseCellData(0, CoordIJK(0, 1, 1), False, (0, 0)),  # 30
    BaseCellData(4, CoordIJK(0, 0, 0), False, (0, 0)),  # 31
    BaseCellData(5, CoordIJK(0, 1, 0), False, (0, 0)),  # 32
    BaseCellData(0, CoordIJK(0, 1, 0), False, (0, 0)),  # 33
    BaseCellData(7, CoordIJK(0, 1, 0), False, (0, 0)),  # 34
    BaseCellData(11, CoordIJK(1, 1, 0), False, (0, 0)),  # 35
    BaseCellData(7, CoordIJK(0, 0, 0), False, (0, 0)),  # 36
    BaseCellData(10, CoordIJK(1, 0, 0), False, (0, 0)),  # 37
    BaseCellData(12, CoordIJK(2, 0, 0), True, (3, 7)),  # 38
    BaseCellData(6, CoordIJK(1, 0, 1), False, (0, 0)),  # 39
    BaseCellData(7, CoordIJK(1, 0, 1), False, (0, 0)),  # 40
    BaseCellData(4, CoordIJK(0, 0, 1), False, (0, 0)),  # 41
    BaseCellData(3, CoordIJK(0, 0, 1), False, (0, 0)),  # 42
    BaseCellData(3, CoordIJK(0, 1, 1), False, (0, 0)),  # 43
    BaseCellData(4, CoordIJK(0, 1, 0), False, (0, 0)),  # 44
    BaseCellData(6, CoordIJK(1, 0, 0), False, (0, 0)),  # 45
    BaseCellData(11, CoordIJK(0, 0, 0), False, (0, 0)),  # 46
    BaseCellData(8, CoordIJK(0, 0, 1), False, (0, 0)),  # 47
    BaseCellData(5, CoordIJK(0, 0, 1), False, (0, 0)),  # 48
    BaseCellData(14, CoordIJK(2, 0, 0), True, (0, 9)),  # 49
    BaseCellData(5, CoordIJK(0, 0, 0), False, (0, 0)),  # 50
    BaseCellData(12, CoordIJK(1, 0, 0), False, (0, 0)),  # 51
    BaseCellData(10, CoordIJK(1, 1, 0), False, (0, 0)),  # 52
    BaseCellData(4, CoordIJK(0, 1, 1), False, (0, 0)),  # 53
    BaseCellData(12, CoordIJK(1, 1, 0), False, (0, 0)),  # 54
    BaseCellData(7, CoordIJK(1, 0, 0), False, (0, 0)),  # 55
    BaseCellData(11, CoordIJK(0, 1, 0), False, (0, 0)),  # 56
    BaseCellData(10, CoordIJK(0, 0, 0), False, (0, 0)),  # 57
    BaseCellData(13, CoordIJK(2, 0, 0), True, (4, 8)),  # 58
    BaseCellData(10, CoordIJK(0, 0, 1), False, (0, 0)),  # 59
    BaseCellData(11, CoordIJK(0, 0, 1), False, (0, 0)),  # 60
    BaseCellData(9, CoordIJK(0, 1, 0), False, (0, 0)),  # 61
    BaseCellData(8, CoordIJK(0, 1, 0), False, (0, 0)),  # 62
    BaseCellData(6, CoordIJK(2, 0, 0), True, (11, 15)),  # 63
    BaseCellData(8, CoordIJK(0, 0, 0), False, (0, 0)),  # 64
    BaseCellData(9, CoordIJK(0, 0, 1), False, (0, 0)),  # 65
    BaseCellData(14, CoordIJK(1, 0, 0), False, (0, 0)),  # 66
    BaseCellData(5, CoordIJK(1, 0, 1), False, (0, 0)),  # 67
    BaseCellData(16, CoordIJK(0, 1, 1), False, (0, 0)),  # 68
    BaseCellData(8, CoordIJK(1, 0, 1), False, (0, 0)),  # 69
    BaseCellData(5, CoordIJK(1, 0, 0), False, (0, 0)),  # 70
    BaseCellData(12, CoordIJK(0, 0, 0), False, (0, 0)),  # 71
    BaseCellData(7, CoordIJK(2, 0, 0), True, (12, 16)),  # 72
    BaseCellData(12, CoordIJK(0, 1, 0), False, (0, 0)),  # 73
    BaseCellData(10, CoordIJK(0, 1, 0), False, (0, 0)),  # 74
    BaseCellData(9, CoordIJK(0, 0, 0), False, (0, 0)),  # 75
    BaseCellData(13, CoordIJK(1, 0, 0), False, (0, 0)),  # 76
    BaseCellData(16, CoordIJK(0, 0, 1), False, (0, 0)),  # 77
    BaseCellData(15, CoordIJK(0, 1, 1), False, (0, 0)),  # 78
    BaseCellData(15, CoordIJK(0, 1, 0), False, (0, 0)),  # 79
    BaseCellData(16, CoordIJK(0, 1, 0), False, (0, 0)),  # 80
    BaseCellData(14, CoordIJK(1, 1, 0), False, (0, 0)),  # 81
    BaseCellData(13, CoordIJK(1, 1, 0), False, (0, 0)),  # 82
    BaseCellData(5, CoordIJK(2, 0, 0), True, (10, 19)),  # 83
    BaseCellData(8, CoordIJK(1, 0, 0), False, (0, 0)),  # 84
    BaseCellData(14, CoordIJK(0, 0, 0), False, (0, 0)),  # 85
    BaseCellData(9, CoordIJK(1, 0, 1), False, (0, 0)),  # 86
    BaseCellData(14, CoordIJK(0, 0, 1), False, (0, 0)),  # 87
    BaseCellData(17, CoordIJK(0, 0, 1), False, (0, 0)),  # 88
    BaseCellData(12, CoordIJK(0, 0, 1), False, (0, 0)),  # 89
    BaseCellData(16, CoordIJK(0, 0, 0), False, (0, 0)),  # 90
    BaseCellData(17, CoordIJK(0, 1, 1), False, (0, 0)),  # 91
    BaseCellData(15, CoordIJK(0, 0, 1), False, (0, 0)),  # 92
    BaseCellData(16, CoordIJK(1, 0, 1), False, (0, 0)),  # 93
    BaseCellData(9, CoordIJK(1, 0, 0), False, (0, 0)),  # 94
    BaseCellData(15, CoordIJK(0, 0, 0), False, (0, 0)),  # 95
    BaseCellData(13, CoordIJK(0, 0, 0), False, (0, 0)),  # 96
    BaseCellData(8, CoordIJK(2, 0, 0), True, (13, 17)),  # 97
    BaseCellData(13, CoordIJK(0, 1, 0), False, (0, 0)),  # 98
    BaseCellData(17, CoordIJK(1, 0, 1), False, (0, 0)),  # 99
    BaseCellData(19, CoordIJK(0, 1, 0), False, (0, 0)),  # 100
    BaseCellData(14, CoordIJK(0, 1, 0), False, (0, 0)),  # 101
    BaseCellData(19, CoordIJK(0, 1, 1), False, (0, 0)),  # 102
    BaseCellData(17, CoordIJK(0, 1, 0), False, (0, 0)),  # 103
    BaseCellData(13, CoordIJK(0, 0, 1), False, (0, 0)),  # 104
    BaseCellData(17, CoordIJK(0, 0, 0), False, (0, 0)),  # 105
    BaseCellData(16, CoordIJK(1, 0, 0), False, (0, 0)),  # 106
    BaseCellData(9, CoordIJK(2, 0, 0), True, (14, 18)),  # 107
    BaseCellData(15, CoordIJK(1, 0, 1), False, (0, 0)),  # 108
    BaseCellData(15, CoordIJK(1, 0, 0), False, (0, 0)),  # 109
    BaseCellData(18, CoordIJK(0, 1, 1), False, (0, 0)),  # 110
    BaseCellData(18, CoordIJK(0, 0, 1), False, (0, 0)),  # 111
    BaseCellData(19, CoordIJK(0, 0, 1), False, (0, 0)),  # 112
    BaseCellData(17, CoordIJK(1, 0, 0), False, (0, 0)),  # 113
    BaseCellData(19, CoordIJK(0, 0, 0), False, (0, 0)),  # 114
    BaseCellData(18, CoordIJK(0, 1, 0), False, (0, 0)),  # 115
    BaseCellData(18, CoordIJK(1, 0, 1), False, (0, 0)),  # 116
    BaseCellData(19, CoordIJK(2, 0, 0), True, (-1, -1)),  # 117
    BaseCellData(19, CoordIJK(1, 0, 0), False, (0, 0)),  # 118
    BaseCellData(18, CoordIJK(0, 0, 0), False, (0, 0)),  # 119
    BaseCellData(19, CoordIJK(1, 0, 1), False, (0, 0)),  # 120
    BaseCellData(18, CoordIJK(1, 0, 0), False, (0, 0)),  # 121
)

PENTAGON_BASE_CELLS = frozenset(
    cell for cell, data in enumerate(BASE_CELL_DATA) if data.is_pentagon
)

# For each face and resolution 0 coordinate (i, j, k) in [0, 2], the base cell there
# and the number of 60 degree ccw rotations into that base cell's coordinate system
FACE_IJK_BASE_CELLS: Tuple = (
    (  # face 0
        (
            ((16, 0), (18, 0), (24, 0)),
            ((33, 0), (30, 0), (32, 3)),
            ((49, 1), (48, 3), (50, 3)),
        ),
        (
            ((8, 0), (5, 5), (10, 5)),
            ((22, 0), (16, 0), (18, 0)),
            ((41, 1), (33, 0), (30, 0)),
        ),
        (
            ((4, 0), (0, 5), (2, 5)),
            ((15, 1), (8, 0), (5, 5)),
            ((31, 1), (22, 0), (16, 0)),
        ),
    ),
    (  # face 1
        (
            ((2, 0), (6, 0), (14, 0)),
            ((10, 0), (11, 0), (17, 3)),
            ((24, 1), (23, 3), (25, 3)),
        ),
        (
            ((0, 0), (1, 5), (9, 5)),
            ((5, 0), (2, 0), (6, 0)),
            ((18, 1), (10, 0), (11, 0)),
        ),
        (
            ((4, 1), (3, 5), (7, 5)),
            ((8, 1), (0, 0), (1, 5)),
            ((16, 1), (5, 0), (2, 0)),
        ),
    ),
    (  # face 2
        (
            ((7, 0), (21, 0), (38, 0)),
            ((9, 0), (19, 0), (34, 3)),
            ((14, 1), (20, 3), (36, 3)),
        ),
        (
            ((3, 0), (13, 5), (29, 5)),
            ((1, 0), (7, 0), (21, 0)),
            ((6, 1), (9, 0), (19, 0)),
        ),
        (
            ((4, 2), (12, 5), (26, 5)),
            ((0, 1), (3, 0), (13, 5)),
            ((2, 1), (1, 0), (7, 0)),
        ),
    ),
    (  # face 3
        (
            ((26, 0), (42, 0), (58, 0)),
            ((29, 0), (43, 0), (62, 3)),
            ((38, 1), (47, 3), (64, 3)),
        ),
        (
            ((12, 0), (28, 5), (44, 5)),
            ((13, 0), (26, 0), (42, 0)),
            ((21, 1), (29, 0), (43, 0)),
        ),
        (
            ((4, 3), (15, 5), (31, 5)),
            ((3, 1), (12, 0), (28, 5)),
            ((7, 1), (13, 0), (26, 0)),
        ),
    ),
    (  # face 4
        (
            ((31, 0), (41, 0), (49, 0)),
            ((44, 0), (53, 0), (61, 3)),
            ((58, 1), (65, 3), (75, 3)),
        ),
        (
            ((15, 0), (22, 5), (33, 5)),
            ((28, 0), (31, 0), (41, 0)),
            ((42, 1), (44, 0), (53, 0)),
        ),
        (
            ((4, 4), (8, 5), (16, 5)),
            ((12, 1), (15, 0), (22, 5)),
            ((26, 1), (28, 0), (31, 0)),
        ),
    ),
    (  # face 5
        (
            ((50, 0), (48, 0), (49, 3)),
            ((32, 0), (30, 3), (33, 3)),
            ((24, 3), (18, 3), (16, 3)),
        ),
        (
            ((70, 0), (67, 0), (66, 3)),
            ((52, 3), (50, 0), (48, 0)),
            ((37, 3), (32, 0), (30, 3)),
        ),
        (
            ((83, 0), (87, 3), (85, 3)),
            ((74, 3), (70, 0), (67, 0)),
            ((57, 1), (52, 3), (50, 0)),
        ),
    ),
    (  # face 6
        (
            ((25, 0), (23, 0), (24, 3)),
            ((17, 0), (11, 3), (10, 3)),
            ((14, 3), (6, 3), (2, 3)),
        ),
        (
            ((45, 0), (39, 0), (37, 3)),
            ((35, 3), (25, 0), (23, 0)),
            ((27, 3), (17, 0), (11, 3)),
        ),
        (
            ((63, 0), (59, 3), (57, 3)),
            ((56, 3), (45, 0), (39, 0)),
            ((46, 3), (35, 3), (25, 0)),
        ),
    ),
    (  # face 7
        (
            ((36, 0), (20, 0), (14, 3)),
            ((34, 0), (19, 3), (9, 3)),
            ((38, 3), (21, 3), (7, 3)),
        ),
        (
            ((55, 0), (40, 0), (27, 3)),
            ((54, 3), (36, 0), (20, 0)),
            ((51, 3), (34, 0), (19, 3)),
        ),
        (
            ((72, 0), (60, 3), (46, 3)),
            ((73, 3), (55, 0), (40, 0)),
            ((71, 3), (54, 3), (36, 0)),
        ),
    ),
    (  # face 8
        (
            ((64, 0), (47, 0), (38, 3)),
            ((62, 0), (43, 3), (29, 3)),
            ((58, 3), (42, 3), (26, 3)),
        ),
        (
            ((84, 0), (69, 0), (51, 3)),
            ((82, 3), (64, 0), (47, 0)),
            ((76, 3), (62, 0), (43, 3)),
        ),
        (
            ((97, 0), (89, 3), (71, 3)),
            ((98, 3), (84, 0), (69, 0)),
            ((96, 3), (82, 3), (64, 0)),
        ),
    ),
    (  # face 9
        (
            ((75, 0), (65, 0), (58, 3)),
            ((61, 0), (53, 3), (44, 3)),
            ((49, 3), (41, 3), (31, 3)),
        ),
        (
            ((94, 0), (86, 0), (76, 3)),
            ((81, 3), (75, 0), (65, 0)),
            ((66, 3), (61, 0), (53, 3)),
        ),
        (
            ((107, 0), (104, 3), (96, 3)),
            ((101, 3), (94, 0), (86, 0)),
            ((85, 3), (81, 3), (75, 0)),
        ),
    ),
    (  # face 10
        (
            ((57, 0), (59, 0), (63, 3)),
            ((74, 0), (78, 3), (79, 3)),
            ((83, 3), (92, 3), (95, 3)),
        ),
        (
            ((37, 0), (39, 3), (45, 3)),
            ((52, 0), (57, 0), (59, 0)),
            ((70, 3), (74, 0), (78, 3)),
        ),
        (
            ((24, 0), (23, 3), (25, 3)),
            ((32, 3), (37, 0), (39, 3)),
            ((50, 3), (52, 0), (57, 0)),
        ),
    ),
    (  # face 11
        (
            ((46, 0), (60, 0), (72, 3)),
            ((56, 0), (68, 3), (80, 3)),
            ((63, 3), (77, 3), (90, 3)),
        ),
        (
            ((27, 0), (40, 3), (55, 3)),
            ((35, 0), (46, 0), (60, 0)),
            ((45, 3), (56, 0), (68, 3)),
        ),
        (
            ((14, 0), (20, 3), (36, 3)),
            ((17, 3), (27, 0), (40, 3)),
            ((25, 3), (35, 0), (46, 0)),
        ),
    ),
    (  # face 12
        (
            ((71, 0), (89, 0), (97, 3)),
            ((73, 0), (91, 3), (103, 3)),
            ((72, 3), (88, 3), (105, 3)),
        ),
        (
            ((51, 0), (69, 3), (84, 3)),
            ((54, 0), (71, 0), (89, 0)),
            ((55, 3), (73, 0), (91, 3)),
        ),
        (
            ((38, 0), (47, 3), (64, 3)),
            ((34, 3), (51, 0), (69, 3)),
            ((36, 3), (54, 0), (71, 0)),
        ),
    ),
    (  # face 13
        (
            ((96, 0), (104, 0), (107, 3)),
            ((98, 0), (110, 3), (115, 3)),
            ((97, 3), (111, 3), (119, 3)),
        ),
        (
            ((76, 0), (86, 3), (94, 3)),
            ((82, 0), (96, 0), (104, 0)),
            ((84, 3), (98, 0), (110, 3)),
        ),
        (
            ((58, 0), (65, 3), (75, 3)),
            ((62, 3), (76, 0), (86, 3)),
            ((64, 3), (82, 0), (96, 0)),
        ),
    ),
    (  # face 14
        (
            ((85, 0), (87, 0), (83, 3)),
            ((101, 0), (102, 3), (100, 3)),
            ((107, 3), (112, 3), (114, 3)),
        ),
        (
            ((66, 0), (67, 3), (70, 3)),
            ((81, 0), (85, 0), (87, 0)),
            ((94, 3), (101, 0), (102, 3)),
        ),
        (
            ((49, 0), (48, 3), (50, 3)),
            ((61, 3), (66, 0), (67, 3)),
            ((75, 3), (81, 0), (85, 0)),
        ),
    ),
    (  # face 15
        (
            ((95, 0), (92, 0), (83, 0)),
            ((79, 0), (78, 0), (74, 3)),
            ((63, 1), (59, 3), (57, 3)),
        ),
        (
            ((109, 0), (108, 0), (100, 5)),
            ((93, 1), (95, 0), (92, 0)),
            ((77, 1), (79, 0), (78, 0)),
        ),
        (
            ((117, 4), (118, 5), (114, 5)),
            ((106, 1), (109, 0), (108, 0)),
            ((90, 1), (93, 1), (95, 0)),
        ),
    ),
    (  # face 16
        (
            ((90, 0), (77, 0), (63, 0)),
            ((80, 0), (68, 0), (56, 3)),
            ((72, 1), (60, 3), (46, 3)),
        ),
        (
            ((106, 0), (93, 0), (79, 5)),
            ((99, 1), (90, 0), (77, 0)),
            ((88, 1), (80, 0), (68, 0)),
        ),
        (
            ((117, 3), (109, 5), (95, 5)),
            ((113, 1), (106, 0), (93, 0)),
            ((105, 1), (99, 1), (90, 0)),
        ),
    ),
    (  # face 17
        (
            ((105, 0), (88, 0), (72, 0)),
            ((103, 0), (91, 0), (73, 3)),
            ((97, 1), (89, 3), (71, 3)),
        ),
        (
            ((113, 0), (99, 0), (80, 5)),
            ((116, 1), (105, 0), (88, 0)),
            ((111, 1), (103, 0), (91, 0)),
        ),
        (
            ((117, 2), (106, 5), (90, 5)),
            ((121, 1), (113, 0), (99, 0)),
            ((119, 1), (116, 1), (105, 0)),
        ),
    ),
    (  # face 18
        (
            ((119, 0), (111, 0), (97, 0)),
            ((115, 0), (110, 0), (98, 3)),
            ((107, 1), (104, 3), (96, 3)),
        ),
        (
            ((121, 0), (116, 0), (103, 5)),
            ((120, 1), (119, 0), (111, 0)),
            ((112, 1), (115, 0), (110, 0)),
        ),
        (
            ((117, 1), (113, 5), (105, 5)),
            ((118, 1), (121, 0), (116, 0)),
            ((114, 1), (120, 1), (119, 0)),
        ),
    ),
    (  # face 19
        (
            ((114, 0), (112, 0), (107, 0)),
            ((100, 0), (102, 0), (101, 3)),
            ((83, 1), (87, 3), (85, 3)),
        ),
        (
            ((118, 0), (120, 0), (115, 5)),
            ((108, 1), (114, 0), (112, 0)),
            ((92, 1), (100, 0), (102, 0)),
        ),
        (
            ((117, 0), (121, 5), (119, 5)),
            ((109, 1), (118, 0), (120, 0)),
            ((95, 1), (108, 1), (114, 0)),
        ),
    ),
)
