"""
Domain Layer - Music Library

The sorted song catalog, its entities and the Result types used to report
the outcome of catalog operations.
"""

from .entities import Song, SongView
from .catalog import SongCatalog

# Result pattern for error handling
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    DomainError,
    ValidationError,
    NotFoundError,
    SongNotFoundError,
    DuplicateError,
    DuplicateNameError,
)

__all__ = [
    # Entities
    "Song",
    "SongView",
    "SongCatalog",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    # Errors
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "SongNotFoundError",
    "DuplicateError",
    "DuplicateNameError",
]
