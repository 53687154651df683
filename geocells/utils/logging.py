"""Logging utility for geocells"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geocells')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning on the package logger, unless it has been logged before"""
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
