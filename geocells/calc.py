""" Spherical calculations shared by the cube and icosahedron projections """

__all__ = [
    'arc_latitude_range', 'azimuth_radians', 'constrain_longitude', 'destination_radians',
    'great_circle_distance_meters', 'great_circle_distance_radians', 'positive_angle',
]

import math
from typing import Tuple

import numpy as np

from geocells._const import EARTH_RADIUS_METERS, EPSILON
from geocells.coordinates import GeoPoint

_TWO_PI = 2. * math.pi


def positive_angle(radians: float) -> float:
    """
    Normalizes an angle into the range [0, 2pi)

    Args:
        radians:
            An angle, in radians

    Returns:
        (float) the equivalent positive angle
    """
    tmp = radians + _TWO_PI if radians < 0. else radians
    if radians >= _TWO_PI:
        tmp -= _TWO_PI

    return tmp


def constrain_longitude(radians: float) -> float:
    """Wraps a longitude in radians into [-pi, pi]"""
    while radians > math.pi:
        radians -= _TWO_PI
    while radians < -math.pi:
        radians += _TWO_PI

    return radians


def great_circle_distance_radians(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Calculate the central angle between two points, using the haversine formula

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the angle, in radians
    """
    lat1, lon1 = point1.radians
    lat2, lon2 = point2.radians

    d_lat, d_lon = lat2 - lat1, lon2 - lon1
    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
        math.sin(d_lon / 2) ** 2
    )
    var1 = min(1., var1)
    return 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def great_circle_distance_meters(point1: GeoPoint, point2: GeoPoint) -> float:
    """Calculate the distance in meters between two points on a spherical earth"""
    return EARTH_RADIUS_METERS * great_circle_distance_radians(point1, point2)


def azimuth_radians(point1: GeoPoint, point2: GeoPoint) -> float:
    """
    Calculate the azimuth from point1 to point2, clockwise from north.

    Args:
        point1:
            The start point

        point2:
            The finish point

    Returns:
        (float) the azimuth, in radians within [-pi, pi]
    """
    lat1, lon1 = point1.radians
    lat2, lon2 = point2.radians
    return math.atan2(
        math.cos(lat2) * math.sin(lon2 - lon1),
        math.cos(lat1) * math.sin(lat2)
        - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    )


def destination_radians(start: GeoPoint, azimuth: float, distance: float) -> GeoPoint:
    """
    Given a start location, a direction of travel (in radians clockwise from north) and an
    angular distance of travel, returns the finish location.

    Travel due north or south is handled without trigonometry on the longitude, and
    arriving at either pole yields the canonical pole point.

    Args:
        start:
            The starting location

        azimuth:
            The heading, in radians

        distance:
            The angular distance to travel, in radians

    Returns:
        GeoPoint
    """
    if distance < EPSILON:
        return start

    az = positive_angle(azimuth)
    lat1, lon1 = start.radians

    if az < EPSILON or abs(az - math.pi) < EPSILON:
        # Due north or south
        lat2 = lat1 + distance if az < EPSILON else lat1 - distance

        if abs(lat2 - math.pi / 2) < EPSILON:
            return GeoPoint(90., 0.)
        if abs(lat2 + math.pi / 2) < EPSILON:
            return GeoPoint(-90., 0.)

        return GeoPoint.from_radians(lat2, constrain_longitude(lon1))

    sinlat = math.sin(lat1) * math.cos(distance) + \
        math.cos(lat1) * math.sin(distance) * math.cos(az)
    sinlat = max(-1., min(1., sinlat))
    lat2 = math.asin(sinlat)

    if abs(lat2 - math.pi / 2) < EPSILON:
        return GeoPoint(90., 0.)
    if abs(lat2 + math.pi / 2) < EPSILON:
        return GeoPoint(-90., 0.)

    cos_lat2 = math.cos(lat2)
    sinlon = max(-1., min(1., math.sin(az) * math.sin(distance) / cos_lat2))
    coslon = max(
        -1.,
        min(1., (math.cos(distance) - math.sin(lat1) * math.sin(lat2)) / math.cos(lat1) / cos_lat2)
    )
    lon2 = constrain_longitude(lon1 + math.atan2(sinlon, coslon))
    return GeoPoint.from_radians(lat2, lon2)


def arc_latitude_range(start: GeoPoint, end: GeoPoint) -> Tuple[float, float]:
    """
    Calculate the latitude extremes along the shorter great circle arc between two points.
    Arcs running east-west bulge poleward, so these can exceed the endpoints' latitudes.

    Args:
        start:
            One end of the arc

        end:
            The other end of the arc

    Returns:
        The (minimum, maximum) latitude, in degrees
    """
    lo = min(start.latitude, end.latitude)
    hi = max(start.latitude, end.latitude)

    a, b = np.array(start.xyz), np.array(end.xyz)
    normal = np.cross(a, b)
    length = np.linalg.norm(normal)
    if length < EPSILON:
        return lo, hi

    normal = normal / length
    horizontal = math.hypot(normal[0], normal[1])
    if horizontal < EPSILON:
        # Along the equator
        return lo, hi

    # The northernmost point of the great circle
    peak = np.array([
        -normal[0] * normal[2],
        -normal[1] * normal[2],
        1. - normal[2] ** 2
    ]) / horizontal

    for extreme in (peak, -peak):
        if np.dot(np.cross(a, extreme), normal) >= 0. \
                and np.dot(np.cross(extreme, b), normal) >= 0.:
            lat = math.degrees(math.asin(max(-1., min(1., float(extreme[2])))))
            lo, hi = min(lo, lat), max(hi, lat)

    return lo, hi
