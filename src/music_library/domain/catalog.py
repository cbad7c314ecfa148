"""Sorted song catalog.

The catalog keeps its songs in a list ordered by song name. Python compares
strings by code point, so the ordering is total and case-sensitive ("Zebra"
sorts before "apple"). For any name that can be encoded as UTF-8 this is also
the order of the encoded bytes. The command line decodes undecodable input
bytes as U+FFFD, so names typed at the shell always qualify.
"""

from bisect import bisect_left
from operator import attrgetter
from typing import Iterator, List, Optional
import logging

from .entities import Song, SongView
from .result import (
    DuplicateNameError,
    Result,
    SongNotFoundError,
    ValidationError,
    failure,
    success,
)

logger = logging.getLogger(__name__)

_by_name = attrgetter("name")


def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise ValidationError(f"Song name must be str, got {type(name).__name__}")


class SongCatalog:
    """
    In-memory catalog of songs sorted by name.

    Song names are unique. Rejected operations return a Failure and leave the
    catalog untouched.
    """

    def __init__(self) -> None:
        self._songs: List[Song] = []
        # Bumped on every mutation so open listings can detect it.
        self._version = 0

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._locate(name) is not None

    def __iter__(self) -> Iterator[SongView]:
        return self.list_all()

    def __repr__(self) -> str:
        return f"SongCatalog(size={len(self._songs)})"

    @property
    def is_empty(self) -> bool:
        return not self._songs

    def _insertion_point(self, name: str) -> int:
        """Index of the first song whose name is not less than ``name``."""
        return bisect_left(self._songs, name, key=_by_name)

    def _locate(self, name: str) -> Optional[int]:
        index = self._insertion_point(name)
        if index < len(self._songs) and self._songs[index].name == name:
            return index
        return None

    def insert(self, name: str, artist: str, genre: str) -> Result[SongView, DuplicateNameError]:
        """Add a song, keeping the catalog sorted.

        Returns:
            Success with a view of the new song, or Failure(DuplicateNameError)
            if a song with the same name already exists.

        Raises:
            ValidationError: If any field is not a non-empty string.
        """
        song = Song(name=name, artist=artist, genre=genre)
        index = self._insertion_point(name)
        if index < len(self._songs) and self._songs[index].name == name:
            logger.debug("Rejected duplicate song name %r", name)
            return failure(DuplicateNameError(name))

        self._songs.insert(index, song)
        self._version += 1
        logger.debug("Inserted %r at position %d", name, index)
        return success(song.view())

    def find(self, name: str) -> Optional[SongView]:
        """Return a view of the song called ``name``, or None."""
        _check_name(name)
        index = self._locate(name)
        if index is None:
            return None
        return self._songs[index].view()

    def delete(self, name: str) -> Result[SongView, SongNotFoundError]:
        """Remove the song called ``name``.

        Returns:
            Success with a view of the removed song, or
            Failure(SongNotFoundError) if there is no such song.
        """
        _check_name(name)
        index = self._locate(name)
        if index is None:
            logger.debug("Delete of unknown song %r", name)
            return failure(SongNotFoundError(name))

        removed = self._songs.pop(index)
        self._version += 1
        logger.debug("Deleted %r", name)
        return success(removed.view())

    def list_all(self) -> Iterator[SongView]:
        """Iterate over views of every song in ascending name order.

        The listing is bound to the catalog as it was when list_all() was
        called; advancing it after the catalog has been modified raises
        RuntimeError.
        """
        return self._listing(self._version)

    def _listing(self, version: int) -> Iterator[SongView]:
        index = 0
        while True:
            if self._version != version:
                raise RuntimeError("SongCatalog changed during iteration")
            if index >= len(self._songs):
                return
            yield self._songs[index].view()
            index += 1

    def teardown(self) -> int:
        """Release every song and leave the catalog empty.

        Returns:
            The number of songs released.
        """
        released = len(self._songs)
        if released:
            self._songs.clear()
            self._version += 1
        logger.debug("Catalog torn down, %d songs released", released)
        return released
