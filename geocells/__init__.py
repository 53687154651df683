from geocells._version import __version__  # noqa: F401
from geocells.utils.logging import LOGGER
from geocells.coordinates import GeoPoint, UnitVector
from geocells.structures import BoundingBox
from geocells.exceptions import (
    GeoCellError, InvalidCoordinate, InvalidPrecision, MalformedToken, PentagonDigitViolation
)
from geocells.s2 import S2Cell, decode_s2, decode_s2_bounds, encode_s2
from geocells.h3 import H3Cell, decode_h3, decode_h3_bounds, encode_h3, h3_boundary
from geocells.covering import Covering, H3Coverer, S2Coverer, cover_bounding_box

__all__ = [
    'BoundingBox',
    'Covering',
    'GeoCellError',
    'GeoPoint',
    'H3Cell',
    'H3Coverer',
    'InvalidCoordinate',
    'InvalidPrecision',
    'MalformedToken',
    'PentagonDigitViolation',
    'S2Cell',
    'S2Coverer',
    'UnitVector',
    'cover_bounding_box',
    'decode_h3',
    'decode_h3_bounds',
    'decode_s2',
    'decode_s2_bounds',
    'encode_h3',
    'encode_s2',
    'h3_boundary',
    'LOGGER',
]
