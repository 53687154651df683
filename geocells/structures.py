"""
Latitude/longitude rectangles used for cell bounds and range queries
"""

__all__ = ['BoundingBox']

from typing import Iterable, List, Tuple

from geocells.coordinates import GeoPoint
from geocells.exceptions import InvalidCoordinate


class BoundingBox:

    """
    A latitude/longitude rectangle, expressed by its four edges in degrees.

    The box may wrap the antimeridian, which is signalled by west > east; e.g.
    BoundingBox(-10, 170, 10, -170) spans 20 degrees of longitude across 180.
    A box spanning every longitude is expressed as west=-180, east=180.

    Args:
        south: (float)
            The southern edge (minimum latitude)

        west: (float)
            The western edge

        north: (float)
            The northern edge (maximum latitude)

        east: (float)
            The eastern edge

    """

    def __init__(self, south: float, west: float, north: float, east: float):
        south, west, north, east = float(south), float(west), float(north), float(east)
        for lat in (south, north):
            if not -90. <= lat <= 90.:
                raise InvalidCoordinate(f'Latitude must be between -90 and 90 degrees, got {lat}')

        for lon in (west, east):
            if not -180. <= lon <= 180.:
                raise InvalidCoordinate(
                    f'Longitude must be between -180 and 180 degrees, got {lon}'
                )

        if south > north:
            raise InvalidCoordinate(
                f'Southern edge ({south}) must not lie north of the northern edge ({north})'
            )

        self.south = south
        self.west = west
        self.north = north
        self.east = east

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return False

        return self.bounds == other.bounds

    def __hash__(self):
        return hash(self.bounds)

    def __repr__(self):
        return f'<BoundingBox {self.bounds}>'

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return self.south, self.west, self.north, self.east

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    @property
    def is_full_longitude(self) -> bool:
        return self.west == -180. and self.east == 180.

    @property
    def longitude_span(self) -> float:
        """The longitudinal width of the box, in degrees"""
        if self.crosses_antimeridian:
            return 360. - self.west + self.east

        return self.east - self.west

    def longitude_intervals(self) -> List[Tuple[float, float]]:
        """
        Splits the box's longitude range into non-wrapping (west, east) intervals.

        Returns:
            One interval, or two if the box crosses the antimeridian
        """
        if self.crosses_antimeridian:
            return [(self.west, 180.), (-180., self.east)]

        return [(self.west, self.east)]

    def split(self) -> List['BoundingBox']:
        """Splits a box crossing the antimeridian into two that do not"""
        return [
            BoundingBox(self.south, west, self.north, east)
            for west, east in self.longitude_intervals()
        ]

    def contains(self, point: GeoPoint) -> bool:
        """Test whether a point lies inside the box, edges included"""
        if not self.south <= point.latitude <= self.north:
            return False

        if abs(point.latitude) == 90. and (self.north == 90. or self.south == -90.):
            # Poles have no meaningful longitude
            return True

        lon = point.longitude
        for west, east in self.longitude_intervals():
            if west <= lon <= east:
                return True

            # -180 and 180 are the same meridian
            if abs(lon) == 180. and (west == -180. or east == 180.):
                return True

        return False

    def __contains__(self, item):
        return self.contains(item)

    def intersects(self, other: 'BoundingBox') -> bool:
        """Test whether two boxes share any point, edges included"""
        if self.south > other.north or other.south > self.north:
            return False

        for west1, east1 in self.longitude_intervals():
            for west2, east2 in other.longitude_intervals():
                if west1 <= east2 and west2 <= east1:
                    return True

        return False

    def expanded(self, degrees: float) -> 'BoundingBox':
        """
        Grows the box by a margin on every side. Latitudes are clamped at the poles;
        a box that would overlap itself in longitude becomes full-longitude.

        Args:
            degrees:
                The margin, in degrees

        Returns:
            BoundingBox
        """
        south = max(-90., self.south - degrees)
        north = min(90., self.north + degrees)
        if self.is_full_longitude or self.longitude_span + 2 * degrees >= 360.:
            return BoundingBox(south, -180., north, 180.)

        west = self.west - degrees
        east = self.east + degrees
        if west < -180.:
            west += 360.
        if east > 180.:
            east -= 360.

        return BoundingBox(south, west, north, east)

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        """
        Creates the smallest box enclosing both this box and another. Where the
        longitude ranges can be joined either way around the globe, the narrower
        result is chosen.

        Args:
            other:
                The other BoundingBox

        Returns:
            BoundingBox
        """
        south = min(self.south, other.south)
        north = max(self.north, other.north)
        if self.is_full_longitude or other.is_full_longitude:
            return BoundingBox(south, -180., north, 180.)

        def _encloses(west, east, box):
            # Measure everything eastward from the candidate's western edge
            span = (east - west) % 360.
            start = (box.west - west) % 360.
            return start + box.longitude_span <= span

        candidates = []
        for west, east in (
            (self.west, other.east), (other.west, self.east),
            (self.west, self.east), (other.west, other.east),
        ):
            if _encloses(west, east, self) and _encloses(west, east, other):
                candidates.append(((east - west) % 360., west, east))

        if not candidates:
            return BoundingBox(south, -180., north, 180.)

        _, west, east = min(candidates)
        return BoundingBox(south, west, north, east)

    @classmethod
    def from_points(cls, points: Iterable[GeoPoint]) -> 'BoundingBox':
        """
        Creates the smallest box enclosing a set of points. Longitudes are treated as a
        circle, so a set of points either side of 180 yields a box crossing the antimeridian.

        Args:
            points:
                An iterable of GeoPoints

        Returns:
            BoundingBox
        """
        points = list(points)
        if not points:
            raise ValueError('At least one point is required to create a BoundingBox')

        lats = [point.latitude for point in points]
        lons = sorted(point.longitude for point in points)

        # The enclosing longitude interval is the complement of the largest gap
        # between consecutive longitudes around the circle
        gap, west, east = 360. - (lons[-1] - lons[0]), lons[0], lons[-1]
        for lon_a, lon_b in zip(lons, lons[1:]):
            if lon_b - lon_a > gap:
                gap, west, east = lon_b - lon_a, lon_b, lon_a

        if west == 180.:
            west = -180.
        if east == -180. and west != -180.:
            east = 180.

        return cls(min(lats), west, max(lats), east)
