"""
Module for range coverers: the cells, and token ranges, which together enclose a
bounding box at a given S2 level or H3 resolution
"""

__all__ = [
    'CovererBase', 'Covering', 'H3Coverer', 'S2Coverer', 'cover_bounding_box',
]

import abc
from collections import defaultdict
import math
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

import numpy as np

from geocells._const import DEFAULT_MAX_CELLS, EARTH_RADIUS_METERS, H3_MAX_RESOLUTION, \
    S2_MAX_LEVEL
from geocells.coordinates import GeoPoint
from geocells.exceptions import InvalidPrecision, MalformedToken
from geocells.h3 import H3Cell
from geocells.s2 import S2Cell
from geocells.structures import BoundingBox
from geocells.utils.mixins import LoggingMixin

Cell = Union[S2Cell, H3Cell]

# Average H3 hexagon edge at resolution 0, in radians
_H3_RES0_EDGE_RADIANS = 1_281_256.011 / EARTH_RADIUS_METERS

# Spacing of the H3 sampling grid, in fractions of the resolution's average edge
_H3_SAMPLE_STEP = 0.25


def _to_token(cell: Cell) -> str:
    if isinstance(cell, S2Cell):
        return cell.to_token()

    return cell.to_string()


def _cell_precision(cell: Cell) -> int:
    if isinstance(cell, S2Cell):
        return cell.level

    return cell.resolution


def _is_next(previous: Cell, cell: Cell) -> bool:
    """Whether two cells of the same precision are adjacent in id order"""
    if isinstance(previous, S2Cell):
        return cell.id == previous.id + 2 * previous.lsb

    # H3 digits are three bits each; resolution 0 steps through base cells instead
    resolution = previous.resolution
    step = 1 << (45 if resolution == 0 else 3 * (H3_MAX_RESOLUTION - resolution))
    return cell.index == previous.index + step


class Covering:

    """
    The cells of a single precision which together enclose a bounding box.

    Every point inside the box is encoded, at this covering's precision, to one of
    its tokens. Cells are kept in id order, which for S2 is Hilbert curve order, so
    that `ranges` can be issued as BETWEEN queries against stored ids.

    Args:
        scheme: (str)
            Either 's2' or 'h3'

        cells:
            The covering cells, all of the same precision

        precision: (int)
            The level or resolution the cells were generated at

        requested_precision: (int)
            The level or resolution that was asked for. It is finer than `precision`
            when the cell cap forced a coarser covering.

    """

    def __init__(
        self,
        scheme: str,
        cells: Iterable[Cell],
        precision: int,
        requested_precision: int,
    ):
        self.scheme = scheme
        self.cells: List[Cell] = sorted(set(cells))
        self.precision = precision
        self.requested_precision = requested_precision

    def __contains__(self, token: str) -> bool:
        """
        Whether a token is one of this covering's cells, or (for tokens finer than the
        covering) a descendant of one of them
        """
        try:
            cell: Cell = S2Cell.from_token(token) if self.scheme == 's2' \
                else H3Cell.from_string(token)
        except MalformedToken:
            return False

        if _cell_precision(cell) < self.precision:
            return False

        if _cell_precision(cell) > self.precision:
            cell = cell.parent(self.precision)

        return cell in set(self.cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return (
            f'<Covering {self.scheme} precision={self.precision} '
            f'requested={self.requested_precision} cells={len(self.cells)}>'
        )

    @property
    def degraded(self) -> bool:
        """True when the cell cap forced a coarser precision than was requested"""
        return self.precision != self.requested_precision

    @property
    def tokens(self) -> List[str]:
        return [_to_token(cell) for cell in self.cells]

    @property
    def min_token(self) -> Optional[str]:
        return _to_token(self.cells[0]) if self.cells else None

    @property
    def max_token(self) -> Optional[str]:
        return _to_token(self.cells[-1]) if self.cells else None

    @property
    def ranges(self) -> List[Tuple[str, str]]:
        """
        The runs of consecutive cells, as (first token, last token) pairs. A box is
        rarely contiguous along the curve, so several tight ranges usually select far
        fewer false positives than the single (min_token, max_token) range.
        """
        runs: List[Tuple[Cell, Cell]] = []
        for cell in self.cells:
            if runs and _is_next(runs[-1][1], cell):
                runs[-1] = (runs[-1][0], cell)
                continue

            runs.append((cell, cell))

        return [(_to_token(first), _to_token(last)) for first, last in runs]


class CovererBase(abc.ABC, LoggingMixin):

    """
    Base class for all range coverers.

    Args:
        precision: (int)
            (Optional) The level or resolution to cover at. May instead be supplied
            on each call.

        max_cells: (int)
            (Default 1000) The most cells a covering may hold. Boxes needing more are
            covered at a coarser precision instead.

    """

    scheme: str
    max_precision: int

    def __init__(
        self,
        precision: Optional[int] = None,
        max_cells: int = DEFAULT_MAX_CELLS,
    ):
        super().__init__()
        self.precision = precision
        self.max_cells = max_cells

    def _get_precision(self, precision: Optional[int]) -> int:
        precision = self.precision if precision is None else precision
        if precision is None:
            raise InvalidPrecision(f'You must pass a {self.scheme} precision.')

        if isinstance(precision, bool) or not isinstance(precision, int) \
                or not 0 <= precision <= self.max_precision:
            raise InvalidPrecision(
                f'{self.scheme} precision must be between 0 and {self.max_precision}, '
                f'got {precision!r}'
            )

        return precision

    def _get_max_cells(self, max_cells: Optional[int]) -> int:
        max_cells = self.max_cells if max_cells is None else max_cells
        if isinstance(max_cells, bool) or not isinstance(max_cells, int) or max_cells < 1:
            raise ValueError(f'max_cells must be a positive integer, got {max_cells!r}')

        return max_cells

    @abc.abstractmethod
    def _encode(self, point: GeoPoint, precision: int) -> Cell:
        """Finds the cell containing a point"""

    @abc.abstractmethod
    def _cover(self, box: BoundingBox, precision: int, max_cells: int) -> Tuple[List[Cell], int]:
        """
        Finds the cells enclosing a box.

        Args:
            box:
                The BoundingBox

            precision:
                The finest precision to cover at

            max_cells:
                The cell cap

        Returns:
            The cells, and the precision they were actually generated at
        """

    def cover(self, box: BoundingBox, precision: Optional[int] = None, **kwargs) -> Covering:
        """
        Covers a bounding box with cells.

        Args:
            box:
                The BoundingBox to cover

            precision: (int)
                (Default the coverer's precision) The level or resolution to cover at

        Keyword Args:
            max_cells:
                Overrides the coverer's cell cap for this call

        Returns:
            Covering. Check `degraded` to find whether the cap forced a coarser precision.
        """
        precision = self._get_precision(precision)
        max_cells = self._get_max_cells(kwargs.get('max_cells'))

        cells, achieved = self._cover(box, precision, max_cells)
        covering = Covering(self.scheme, cells, achieved, precision)
        if covering.degraded:
            self.logger.warning(
                'Covering %s at %s precision %d needs more than %d cells; '
                'degraded to precision %d',
                box, self.scheme, precision, max_cells, achieved
            )

        return covering

    def index_points(self, points: Iterable[GeoPoint], **kwargs) -> Dict[str, Any]:
        """
        Groups points by the cell they fall in, and aggregates each group.

        Args:
            points:
                A collection of GeoPoints

        Keyword Args:
            precision:
                The level or resolution to apply. Defaults to the coverer's.
            agg_fn:
                A function that accepts a list of points. If not specified, this
                will be the length of the list.

        Returns:
            A dictionary of tokens mapped to the result of the aggregation function
        """
        precision = self._get_precision(kwargs.get('precision'))
        agg_fn = kwargs.get('agg_fn', len)

        token_dict: Dict[str, List[GeoPoint]] = defaultdict(list)
        for point in points:
            token_dict[_to_token(self._encode(point, precision))].append(point)

        return {token: agg_fn(point_list) for token, point_list in token_dict.items()}


class S2Coverer(CovererBase):

    """
    Covers bounding boxes with S2 cells.

    The covering descends the quadtree from the six faces, keeping at each level
    the children whose bounds meet the box. Descent stops early at the last level
    whose candidates fit under the cell cap.

    Args:
        level:
            (Optional) The S2 level to cover at, in [0, 30]

        max_cells:
            (Default 1000) The most cells a covering may hold

    """

    scheme = 's2'
    max_precision = S2_MAX_LEVEL

    def __init__(self, level: Optional[int] = None, max_cells: int = DEFAULT_MAX_CELLS):
        super().__init__(level, max_cells)

    def _encode(self, point: GeoPoint, precision: int) -> S2Cell:
        return S2Cell.from_geopoint(point, precision)

    def _cover(
        self,
        box: BoundingBox,
        precision: int,
        max_cells: int,
    ) -> Tuple[List[Cell], int]:
        cells: List[Cell] = [
            cell for cell in (S2Cell.from_face(face) for face in range(6))
            if cell.bounds.intersects(box)
        ]

        level = 0
        while level < precision:
            children = [
                child
                for cell in cells
                for child in cell.children()
                if child.bounds.intersects(box)
            ]
            self.logger.debug('%d candidate cells at level %d', len(children), level + 1)
            if len(children) > max_cells:
                break

            cells, level = children, level + 1

        return cells, level


def _estimate_h3_cells(box: BoundingBox, resolution: int) -> float:
    """The number of average sized cells it takes to tile the box's area"""
    area = (
        math.sin(math.radians(box.north)) - math.sin(math.radians(box.south))
    ) * math.radians(box.longitude_span)
    cell_area = 4. * math.pi / (2 + 120 * 7 ** resolution)
    return area / cell_area


class H3Coverer(CovererBase):

    """
    Covers bounding boxes with H3 cells.

    Aperture 7 children are not nested inside their parents, so instead of descending
    the hierarchy the box is sampled on a latitude/longitude grid finer than the cells,
    and the sampled cells are widened by their neighbors to pick up cells which only
    clip the box between samples.

    Args:
        resolution:
            (Optional) The H3 resolution to cover at, in [0, 15]

        max_cells:
            (Default 1000) The most cells a covering may hold

    """

    scheme = 'h3'
    max_precision = H3_MAX_RESOLUTION

    def __init__(self, resolution: Optional[int] = None, max_cells: int = DEFAULT_MAX_CELLS):
        super().__init__(resolution, max_cells)

    def _encode(self, point: GeoPoint, precision: int) -> H3Cell:
        return H3Cell.from_geopoint(point, precision)

    @staticmethod
    def _sample(box: BoundingBox, resolution: int) -> Set[H3Cell]:
        """
        Finds the cells meeting a box by encoding a grid of points across it

        Args:
            box:
                The BoundingBox

            resolution:
                The H3 resolution

        Returns:
            The set of cells whose bounds meet the box
        """
        step = math.degrees(_H3_RES0_EDGE_RADIANS * _H3_SAMPLE_STEP) / math.sqrt(7) ** resolution

        def _axis(start: float, end: float, spacing: float) -> np.ndarray:
            return np.linspace(start, end, max(2, math.ceil((end - start) / spacing) + 1))

        latitudes = _axis(box.south, box.north, step)
        lat_step = float(latitudes[1] - latitudes[0])

        # A degree of longitude shrinks with cos(latitude), so each row is spaced for
        # the latitude nearest the equator that its samples stand in for
        lon_steps = []
        for lat in latitudes:
            lo, hi = lat - lat_step, lat + lat_step
            nearest = 0. if lo <= 0. <= hi else min(abs(lo), abs(hi))
            lon_steps.append(min(360., step / max(math.cos(math.radians(nearest)), 1e-12)))

        sampled = set()
        for west, east in box.longitude_intervals():
            for lat, lon_step in zip(latitudes, lon_steps):
                for lon in _axis(west, east, lon_step):
                    sampled.add(
                        H3Cell.from_geopoint(GeoPoint(float(lat), float(lon)), resolution)
                    )

        candidates = set(sampled)
        for cell in sampled:
            candidates.update(cell.neighbors())

        return {cell for cell in candidates if cell.bounds.intersects(box)}

    def _cover(
        self,
        box: BoundingBox,
        precision: int,
        max_cells: int,
    ) -> Tuple[List[Cell], int]:
        resolution = precision
        while resolution > 0 and _estimate_h3_cells(box, resolution) > max_cells:
            resolution -= 1

        while True:
            cells = self._sample(box, resolution)
            self.logger.debug('%d candidate cells at resolution %d', len(cells), resolution)
            if len(cells) <= max_cells or resolution == 0:
                return list(cells), resolution

            resolution -= 1


def cover_bounding_box(
    box: BoundingBox,
    precision: int,
    scheme: str = 's2',
    max_cells: int = DEFAULT_MAX_CELLS,
) -> Covering:
    """
    Covers a bounding box with the cells of a single precision.

    Args:
        box:
            The BoundingBox to cover

        precision:
            The S2 level or H3 resolution

        scheme: (str)
            (Default 's2') One of 's2' or 'h3'

        max_cells: (int)
            (Default 1000) The most cells the covering may hold before it degrades
            to a coarser precision

    Returns:
        Covering
    """
    coverers = {'s2': S2Coverer, 'h3': H3Coverer}
    if scheme not in coverers:
        raise ValueError('Unsupported scheme, must be one of: s2, h3')

    return coverers[scheme](max_cells=max_cells).cover(box, precision)
