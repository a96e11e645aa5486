"""Display mode resolution, matching and switching."""

from .manager import DisplayManager
from .matcher import find_mode_index, matches
from .models import DisplayMode, ModeCatalog, ResolvedRequest
from .resolver import resolve
from .cli import main

__all__ = [
    'DisplayManager',
    'DisplayMode',
    'ModeCatalog',
    'ResolvedRequest',
    'find_mode_index',
    'matches',
    'resolve',
    'main',
]
