"""
Exceptions raised by geocells.

All of them derive from ValueError: every failure in this package is a rejection of
bad input, never a transient condition worth retrying.
"""

__all__ = [
    'GeoCellError', 'InvalidCoordinate', 'InvalidPrecision', 'MalformedToken',
    'PentagonDigitViolation',
]


class GeoCellError(ValueError):
    """Base class for all geocells errors"""


class InvalidCoordinate(GeoCellError):
    """A latitude or longitude fell outside of its valid range"""


class InvalidPrecision(GeoCellError):
    """An S2 level or H3 resolution fell outside of its valid range"""


class MalformedToken(GeoCellError):
    """A token or index string could not be structurally decoded"""


class PentagonDigitViolation(MalformedToken):
    """
    A digit path selected the sub-sequence deleted from a pentagon.

    Encoding never produces such a path; seeing one while decoding means the index
    is corrupted or was produced by foreign code.
    """
