"""
Exposes the version of geocells
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# Read by setup.py; keep in sync with released tags
_SOURCE_VERSION = 'v0.1.0'

try:
    __version__ = version("geocells")
except PackageNotFoundError:
    __version__ = _SOURCE_VERSION.lstrip('v')

__all__ = ["__version__"]
