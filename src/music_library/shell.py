"""Interactive command loop for the music library.

The shell reads commands and song fields from the terminal, drives a
SongCatalog and turns the catalog's results into the messages users see.
"""

from typing import Callable, Optional
import logging

from rich.console import Console

from .domain.catalog import SongCatalog
from .domain.entities import SongView
from .domain.result import DuplicateNameError, SongNotFoundError
from .models.config import LibraryConfig

logger = logging.getLogger(__name__)

BANNER = (
    "Personal Music Library.\n\n"
    "Commands are I (insert), D (delete), S (search by song name),\n"
    "P (print), Q (quit)."
)

MSG_DUPLICATE = "A song with the name '{}' is already in the music library.\nNo new song entered."
MSG_FOUND = "The song name '{}' was found in the music library."
MSG_NOT_FOUND = "The song name '{}' was not found in the music library."
MSG_DELETED = "Deleting a song with name '{}' from the music library."
MSG_EMPTY = "The music library is empty."
MSG_TITLE = "My Personal Music Library: "
MSG_INVALID = "Invalid command."

PROMPT_COMMAND = "Command"
PROMPT_DELETE = "Enter the name of the song to be deleted"
PROMPT_SEARCH = "Enter the name of the song to search for"
SONG_FIELDS = ("Song name", "Artist", "Genre")


class LibraryShell:
    """Terminal front end for a SongCatalog.

    Commands are single letters (I, D, S, P, Q); only the first character of
    a response counts and case is ignored.
    """

    def __init__(
        self,
        catalog: Optional[SongCatalog] = None,
        config: Optional[LibraryConfig] = None,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
    ):
        self.catalog = catalog if catalog is not None else SongCatalog()
        self.config = config or LibraryConfig.default()
        self.console = console or Console(highlight=False)
        self._reader = reader or self.console.input
        self._handlers = {
            'I': self.do_insert,
            'D': self.do_delete,
            'S': self.do_search,
            'P': self.do_print,
        }

    def _say(self, text: str = "", style: Optional[str] = None) -> None:
        # Song names are user text; rich must print them verbatim.
        self.console.print(
            text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def _read(self, prompt: str) -> str:
        text = self._reader(f"{prompt} --> ")
        return text.rstrip("\r\n")[:self.config.max_field_length]

    def _read_field(self, label: str) -> str:
        while True:
            value = self._read(label)
            if value:
                return value
            self._say(f"{label} cannot be empty.")

    def _show_song(self, song: SongView) -> None:
        self._say()
        for line in song.get_display_lines():
            self._say(line)

    def run(self) -> None:
        """Process commands until Q or end of input, then tear the catalog down.

        The catalog is released on every exit path, including errors raised
        while reading input.
        """
        if self.config.show_banner:
            self._say(BANNER)

        try:
            try:
                while self.step():
                    pass
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, quitting")

            if self.config.teardown_report:
                for song in self.catalog.list_all():
                    self._say()
                    self._say(MSG_DELETED.format(song.name))
        finally:
            released = self.catalog.teardown()
            logger.info("Released %d songs", released)

        if self.config.teardown_report:
            self.do_print()

    def step(self) -> bool:
        """Read and execute one command. Returns False once the user quits."""
        self._say()
        response = self._read(PROMPT_COMMAND)
        command = response[:1].upper()

        if command == 'Q':
            return False

        handler = self._handlers.get(command)
        if handler is None:
            self._say()
            self._say(MSG_INVALID)
        else:
            handler()
        return True

    def do_insert(self) -> None:
        name, artist, genre = (self._read_field(label) for label in SONG_FIELDS)
        self.catalog.insert(name, artist, genre).match(
            failure=self._report_duplicate,
        )

    def _report_duplicate(self, error: DuplicateNameError) -> None:
        self._say()
        self._say(MSG_DUPLICATE.format(error.name))

    def do_delete(self) -> None:
        self._say()
        name = self._read(PROMPT_DELETE)
        result = self.catalog.delete(name)
        self._say()
        if result.is_success():
            self._say(MSG_DELETED.format(name))
        else:
            error: SongNotFoundError = result.error()
            self._say(MSG_NOT_FOUND.format(error.name))

    def do_search(self) -> None:
        self._say()
        name = self._read(PROMPT_SEARCH)
        song = self.catalog.find(name)
        self._say()
        if song is None:
            self._say(MSG_NOT_FOUND.format(name))
            return
        self._say(MSG_FOUND.format(name))
        self._show_song(song)

    def do_print(self) -> None:
        self._say()
        if self.catalog.is_empty:
            self._say(MSG_EMPTY)
            return
        self._say(MSG_TITLE, style="bold")
        for song in self.catalog.list_all():
            self._show_song(song)
