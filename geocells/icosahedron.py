"""
Gnomonic projection of the sphere onto the faces of the H3 icosahedron.

A point is projected onto the plane of the face whose centre is nearest, in hex units
of a given resolution: the face centre is the origin, and the x axis is the face's
Class II i axis (rotated for Class III resolutions).
"""

__all__ = [
    'RES0_U_GNOMONIC', 'closest_face', 'geo_to_hex2d', 'hex2d_to_geo',
]

import math
from typing import Tuple

import numpy as np

from geocells._const import EPSILON
from geocells._h3_tables import FACE_AXES_AZ_RADS_CII, FACE_CENTER_GEO, FACE_CENTER_POINT
from geocells.calc import azimuth_radians, destination_radians, positive_angle
from geocells.coordinates import GeoPoint, UnitVector
from geocells.hexgrid import Vec2d, is_class_iii

# Scaling factors between the gnomonic plane and resolution 0 hex units
RES0_U_GNOMONIC = 0.38196601125010500003
INV_RES0_U_GNOMONIC = 2.61803398874989588842

M_SQRT7 = 2.6457513110645905905016157536392604257102
M_RSQRT7 = 0.37796447300922722721451653623418006081576

# Rotation between the Class II and Class III grid axes
M_AP7_ROT_RADS = 0.333473172251832115336090755351601070065900389

_FACE_CENTERS = np.array(FACE_CENTER_POINT)
_FACE_CENTER_POINTS = tuple(
    GeoPoint.from_radians(lat, lon) for lat, lon in FACE_CENTER_GEO
)


def closest_face(vector: UnitVector) -> Tuple[int, float]:
    """
    Finds the icosahedron face whose centre is nearest a point on the unit sphere.

    Args:
        vector:
            The point, as a unit vector

    Returns:
        The face, and the squared euclidean distance to its centre
    """
    sq_distances = ((_FACE_CENTERS - np.asarray(vector)) ** 2).sum(axis=1)
    face = int(np.argmin(sq_distances))
    return face, float(sq_distances[face])


def geo_to_hex2d(point: GeoPoint, resolution: int) -> Tuple[int, Vec2d]:
    """
    Projects a point onto the plane of its nearest icosahedron face

    Args:
        point:
            The GeoPoint

        resolution:
            The H3 resolution whose hex units the result is expressed in

    Returns:
        The face, and the projected point
    """
    face, sqd = closest_face(point.xyz)

    # The angular distance from the face centre
    r = math.acos(max(-1., min(1., 1. - sqd / 2.)))
    if r < EPSILON:
        return face, Vec2d(0., 0.)

    # The angle from the face's i axis, counter-clockwise
    theta = positive_angle(
        FACE_AXES_AZ_RADS_CII[face][0]
        - positive_angle(azimuth_radians(_FACE_CENTER_POINTS[face], point))
    )
    if is_class_iii(resolution):
        theta = positive_angle(theta - M_AP7_ROT_RADS)

    r = math.tan(r) * INV_RES0_U_GNOMONIC
    for _ in range(resolution):
        r *= M_SQRT7

    return face, Vec2d(r * math.cos(theta), r * math.sin(theta))


def hex2d_to_geo(vec: Vec2d, face: int, resolution: int, substrate: bool = False) -> GeoPoint:
    """
    Inverts the gnomonic projection of a point on a face's plane.

    Args:
        vec:
            The point on the face plane

        face:
            The icosahedron face

        resolution:
            The H3 resolution whose hex units vec is expressed in

        substrate: (bool)
            (Default False) Whether vec is in the units of the aperture 3 substrate
            grid used for cell vertices, rather than cell centres

    Returns:
        GeoPoint
    """
    r = vec.magnitude
    if r < EPSILON:
        return _FACE_CENTER_POINTS[face]

    theta = math.atan2(vec.y, vec.x)

    for _ in range(resolution):
        r *= M_RSQRT7

    if substrate:
        r /= 3.
        if is_class_iii(resolution):
            r *= M_RSQRT7

    r = math.atan(r * RES0_U_GNOMONIC)

    # Substrate grids are already Class II aligned
    if not substrate and is_class_iii(resolution):
        theta = positive_angle(theta + M_AP7_ROT_RADS)

    theta = positive_angle(FACE_AXES_AZ_RADS_CII[face][0] - theta)
    return destination_radians(_FACE_CENTER_POINTS[face], theta, r)
