"""Personal Music Library

An interactive, in-memory catalog of songs kept in alphabetical order.
"""

__version__ = "0.1.0"

from .domain.catalog import SongCatalog
from .domain.entities import SongView
from .domain.result import DuplicateNameError, SongNotFoundError

__all__ = [
    "SongCatalog",
    "SongView",
    "DuplicateNameError",
    "SongNotFoundError",
]
