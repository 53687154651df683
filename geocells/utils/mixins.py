"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set, Tuple


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives each instance a logger named after its module and class, e.g.
    "geocells.covering.S2Coverer", so that it inherits the package logger's handler.

    Args:
        logstr: (str)
            (Optional) A suffix appended to the class name, for telling apart
            differently configured instances

    """
    logger: logging.Logger

    # Shared by every subclass; keyed on logger name so that two classes
    # can each warn once about the same thing
    WARNED_ONCE: Set[Tuple[str, str]] = set()

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = _class.__qualname__
        if logstr:
            name += f'.{logstr}'

        if _class.__module__ != 'builtins':
            name = f'{_class.__module__}.{name}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message and logger"""
        key = (self.logger.name, msg)
        if key in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        LoggingMixin.WARNED_ONCE.add(key)
