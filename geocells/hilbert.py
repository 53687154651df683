"""
Hilbert curve codec for the S2 cube faces.

A leaf cell's (i, j) coordinates are consumed four bits at a time: each 4-bit chunk of i
and of j, together with the current curve orientation, indexes a table giving eight bits
of Hilbert position and the orientation for the next chunk. The tables are generated once
at import and stored as tuples, so they can be shared freely.
"""

__all__ = [
    'INVERT_MASK', 'LOOKUP_BITS', 'LOOKUP_IJ', 'LOOKUP_POS', 'POS_TO_IJ', 'POS_TO_ORIENTATION',
    'SWAP_MASK', 'face_ij_to_id', 'id_to_face_ij_orientation',
]

from typing import List, Tuple

from geocells._const import S2_MAX_LEVEL

LOOKUP_BITS = 4
SWAP_MASK = 0x01
INVERT_MASK = 0x02

# For each orientation, the (i, j) quadrant (as i << 1 | j) visited at each curve position
POS_TO_IJ = (
    (0, 1, 3, 2),  # canonical
    (0, 2, 3, 1),  # swapped
    (3, 2, 0, 1),  # inverted
    (3, 1, 0, 2),  # swapped & inverted
)

# The orientation change applied when descending into the quadrant at each position
POS_TO_ORIENTATION = (SWAP_MASK, 0, 0, INVERT_MASK | SWAP_MASK)

_CHUNK_MASK = (1 << LOOKUP_BITS) - 1
_TABLE_SIZE = 1 << (2 * LOOKUP_BITS + 2)


def _build_lookup_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Walks the Hilbert curve LOOKUP_BITS levels deep from each of the four orientations,
    recording for every (i, j, orientation) window its (position, orientation) and
    vice versa.

    Returns:
        The (ij -> pos, pos -> ij) tables
    """
    lookup_pos: List[int] = [0] * _TABLE_SIZE
    lookup_ij: List[int] = [0] * _TABLE_SIZE

    for orig_orientation in (0, SWAP_MASK, INVERT_MASK, SWAP_MASK | INVERT_MASK):
        stack = [(0, 0, 0, 0, orig_orientation)]
        while stack:
            level, i, j, pos, orientation = stack.pop()
            if level == LOOKUP_BITS:
                ij = (i << LOOKUP_BITS) + j
                lookup_pos[(ij << 2) + orig_orientation] = (pos << 2) + orientation
                lookup_ij[(pos << 2) + orig_orientation] = (ij << 2) + orientation
                continue

            quadrants = POS_TO_IJ[orientation]
            for index, quadrant in enumerate(quadrants):
                stack.append((
                    level + 1,
                    (i << 1) + (quadrant >> 1),
                    (j << 1) + (quadrant & 1),
                    (pos << 2) + index,
                    orientation ^ POS_TO_ORIENTATION[index],
                ))

    return tuple(lookup_pos), tuple(lookup_ij)


LOOKUP_POS, LOOKUP_IJ = _build_lookup_tables()


def face_ij_to_id(face: int, i: int, j: int) -> int:
    """
    Converts leaf grid coordinates on a face into a leaf cell id

    Args:
        face:
            The cube face, in [0, 5]

        i:
            The leaf column, in [0, 2^30)

        j:
            The leaf row, in [0, 2^30)

    Returns:
        (int) the 64-bit leaf cell id
    """
    n = face << 60
    bits = face & SWAP_MASK
    for k in range(7, -1, -1):
        bits += ((i >> (k * LOOKUP_BITS)) & _CHUNK_MASK) << (LOOKUP_BITS + 2)
        bits += ((j >> (k * LOOKUP_BITS)) & _CHUNK_MASK) << 2
        bits = LOOKUP_POS[bits]
        n |= (bits >> 2) << (k * 2 * LOOKUP_BITS)
        bits &= SWAP_MASK | INVERT_MASK

    return n * 2 + 1


def id_to_face_ij_orientation(cell_id: int) -> Tuple[int, int, int, int]:
    """
    Converts a cell id into its face, the leaf grid coordinates selected by its position
    bits (sentinel included), and the curve orientation within the cell

    Args:
        cell_id:
            A valid 64-bit cell id

    Returns:
        The (face, i, j, orientation) tuple
    """
    i = j = 0
    face = cell_id >> 61
    bits = face & SWAP_MASK

    for k in range(7, -1, -1):
        nbits = S2_MAX_LEVEL - 7 * LOOKUP_BITS if k == 7 else LOOKUP_BITS
        bits += ((cell_id >> (k * 2 * LOOKUP_BITS + 1)) & ((1 << (2 * nbits)) - 1)) << 2
        bits = LOOKUP_IJ[bits]
        i += (bits >> (LOOKUP_BITS + 2)) << (k * LOOKUP_BITS)
        j += ((bits >> 2) & _CHUNK_MASK) << (k * LOOKUP_BITS)
        bits &= SWAP_MASK | INVERT_MASK

    # The table walks two levels per lookup; cells ending half way through a pair
    # are one swap short
    lsb = cell_id & -cell_id
    if lsb & 0x1111111111111110:
        bits ^= SWAP_MASK

    return face, i, j, bits
