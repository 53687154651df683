from pytest import approx

from geocells import BoundingBox, GeoPoint


def assert_geopoints_equal(p1: GeoPoint, p2: GeoPoint, abs_tol=1e-7):
    """
    Asserts that two points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeoPoint
        p2: The second GeoPoint
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(p1.latitude, p1.longitude)
        print(p2.latitude, p2.longitude)
        raise e


def assert_bounds_contain(box: BoundingBox, point: GeoPoint):
    """
    Helper asserting that a box contains a point, printing both on failure.
    """
    try:
        assert box.contains(point)
    except AssertionError as e:
        print(box)
        print(point)
        raise e
