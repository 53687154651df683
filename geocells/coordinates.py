"""
Representation of a specific point on earth, and of the same point on the unit sphere
"""

__all__ = ['GeoPoint', 'UnitVector']

from functools import cached_property
import math
from typing import NamedTuple, Tuple, Union

from geocells._const import POLE_EPSILON
from geocells.exceptions import InvalidCoordinate


class UnitVector(NamedTuple):
    """A point on the unit sphere, in earth-centered cartesian coordinates"""
    x: float
    y: float
    z: float

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> 'UnitVector':
        n = self.norm()
        if n == 0.:
            return self

        return UnitVector(self.x / n, self.y / n, self.z / n)


class GeoPoint:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in degrees.

    Coordinates are validated rather than wrapped: a latitude outside [-90, 90] or a
    longitude outside [-180, 180] raises InvalidCoordinate. At either pole the longitude
    is meaningless, so it is canonicalized to 0.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        try:
            lat, lon = float(latitude), float(longitude)
        except (TypeError, ValueError) as exc:
            raise InvalidCoordinate(
                f'Coordinates must be numeric, got ({latitude!r}, {longitude!r})'
            ) from exc

        if not -90. <= lat <= 90.:
            raise InvalidCoordinate(f'Latitude must be between -90 and 90 degrees, got {lat}')

        if not -180. <= lon <= 180.:
            raise InvalidCoordinate(
                f'Longitude must be between -180 and 180 degrees, got {lon}'
            )

        if abs(lat) == 90.:
            lon = 0.

        self.latitude = lat
        self.longitude = lon

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @cached_property
    def radians(self) -> Tuple[float, float]:
        """The (latitude, longitude) pair, in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)

    @cached_property
    def xyz(self) -> UnitVector:
        """Converts lat/lon to a unit vector [x, y, z]"""
        r_lat, r_lon = self.radians
        cos_lat = math.cos(r_lat)
        return UnitVector(
            math.cos(r_lon) * cos_lat,
            math.sin(r_lon) * cos_lat,
            math.sin(r_lat)
        )

    @classmethod
    def from_radians(cls, latitude: float, longitude: float) -> 'GeoPoint':
        """
        Creates a GeoPoint from a lat/lon pair in radians. The radian values are kept as
        given, so a later trip back into radians is exact.

        Args:
            latitude:
                The latitude, in radians

            longitude:
                The longitude, in radians

        Returns:
            GeoPoint
        """
        point = cls(
            max(-90., min(90., math.degrees(latitude))),
            max(-180., min(180., math.degrees(longitude)))
        )
        if abs(point.latitude) != 90.:
            point.__dict__['radians'] = (latitude, longitude)

        return point

    @classmethod
    def from_xyz(cls, vector: Union[UnitVector, Tuple[float, float, float]]) -> 'GeoPoint':
        """
        Converts a point in earth-centered cartesian space into a GeoPoint. The vector
        does not need to be exactly unit length; numerical drift is clamped so that the
        latitude is always valid.

        Args:
            vector:
                The (x, y, z) vector

        Returns:
            GeoPoint
        """
        x, y, z = vector
        xy = math.hypot(x, y)
        latitude = math.atan2(z, xy)
        if xy < POLE_EPSILON * max(1., abs(z)):
            # On the polar axis
            return cls(90. if z > 0 else -90., 0.)

        longitude = math.atan2(y, x)
        return cls.from_radians(latitude, longitude)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
