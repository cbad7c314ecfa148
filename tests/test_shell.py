"""Tests for the interactive shell."""

import io

import pytest
from rich.console import Console

from music_library.domain.catalog import SongCatalog
from music_library.models.config import LibraryConfig
from music_library.shell import BANNER, LibraryShell


class ScriptedSession:
    """Feeds scripted lines to a shell and captures what it prints."""

    def __init__(self, lines, catalog=None, **config):
        self.output = io.StringIO()
        self.prompts = []
        self._lines = iter(lines)
        console = Console(file=self.output, width=200, highlight=False)
        self.shell = LibraryShell(
            catalog=catalog,
            config=LibraryConfig(**config),
            console=console,
            reader=self._read,
        )

    def _read(self, prompt):
        self.prompts.append(prompt)
        try:
            line = next(self._lines)
        except StopIteration:
            raise EOFError from None
        if isinstance(line, Exception):
            raise line
        return line

    @property
    def text(self):
        return self.output.getvalue()


@pytest.fixture
def catalog():
    return SongCatalog()


class TestCommands:
    """Test individual commands."""

    def test_insert_and_print(self, catalog):
        session = ScriptedSession(
            ["I", "Yesterday", "Beatles", "Rock", "i", "Imagine", "Lennon", "Rock", "P"],
            catalog=catalog,
        )
        for _ in range(3):
            assert session.shell.step() is True

        assert [song.name for song in catalog] == ["Imagine", "Yesterday"]
        assert "\nMy Personal Music Library:" in session.text
        assert session.text.endswith(
            "\nImagine\nLennon\nRock\n"
            "\nYesterday\nBeatles\nRock\n"
        )

    def test_insert_prompts(self):
        session = ScriptedSession(["I", "Yesterday", "Beatles", "Rock"])
        session.shell.step()

        assert session.prompts == [
            "Command --> ", "Song name --> ", "Artist --> ", "Genre --> ",
        ]

    def test_duplicate_insert(self, catalog):
        catalog.insert("Imagine", "Lennon", "Rock")
        session = ScriptedSession(["I", "Imagine", "Other", "Pop"], catalog=catalog)
        session.shell.step()

        assert (
            "A song with the name 'Imagine' is already in the music library.\n"
            "No new song entered.\n"
        ) in session.text
        assert catalog.find("Imagine").artist == "Lennon"

    def test_empty_field_reprompts(self, catalog):
        session = ScriptedSession(["I", "", "Yesterday", "Beatles", "", "Rock"], catalog=catalog)
        session.shell.step()

        assert "Song name cannot be empty." in session.text
        assert "Genre cannot be empty." in session.text
        assert catalog.find("Yesterday").genre == "Rock"

    def test_search_found(self, catalog):
        catalog.insert("Yesterday", "Beatles", "Rock")
        session = ScriptedSession(["s", "Yesterday"], catalog=catalog)
        session.shell.step()

        assert session.prompts[-1] == "Enter the name of the song to search for --> "
        assert session.text.endswith(
            "\nThe song name 'Yesterday' was found in the music library.\n"
            "\nYesterday\nBeatles\nRock\n"
        )

    def test_search_not_found(self):
        session = ScriptedSession(["S", "Anything"])
        session.shell.step()

        assert session.text.endswith(
            "\nThe song name 'Anything' was not found in the music library.\n"
        )

    def test_delete(self, catalog):
        for name in ("A", "M", "Z"):
            catalog.insert(name, "artist", "genre")
        session = ScriptedSession(["D", "M", "d", "M"], catalog=catalog)
        session.shell.step()
        session.shell.step()

        assert "Deleting a song with name 'M' from the music library." in session.text
        assert session.text.endswith("The song name 'M' was not found in the music library.\n")
        assert [song.name for song in catalog] == ["A", "Z"]

    def test_print_empty(self):
        session = ScriptedSession(["P"])
        session.shell.step()

        assert session.text.endswith("\nThe music library is empty.\n")

    @pytest.mark.parametrize("response", ["x", "", "7", " I"])
    def test_invalid_command(self, response, catalog):
        session = ScriptedSession([response], catalog=catalog)

        assert session.shell.step() is True
        assert session.text.endswith("\nInvalid command.\n")
        assert catalog.is_empty

    def test_only_first_character_counts(self, catalog):
        session = ScriptedSession(["insert", "Yesterday", "Beatles", "Rock"], catalog=catalog)
        session.shell.step()

        assert "Yesterday" in catalog

    @pytest.mark.parametrize("response", ["Q", "q", "quit"])
    def test_quit(self, response):
        session = ScriptedSession([response])
        assert session.shell.step() is False

    def test_song_names_are_not_markup(self, catalog):
        session = ScriptedSession(["I", "[bold]Loud[/bold]", "Band", "Rock", "P"], catalog=catalog)
        session.shell.step()
        session.shell.step()

        assert "\n[bold]Loud[/bold]\nBand\nRock\n" in session.text

    def test_song_names_keep_emoji_codes(self, catalog):
        session = ScriptedSession(["I", ":fire:", "Band", "Rock", "S", ":fire:"], catalog=catalog)
        session.shell.step()
        session.shell.step()

        assert "The song name ':fire:' was found in the music library." in session.text


class TestRun:
    """Test the whole command loop."""

    def test_session_prints_banner_and_tears_down(self, catalog):
        session = ScriptedSession(
            ["I", "Yesterday", "Beatles", "Rock", "I", "Imagine", "Lennon", "Rock", "Q"],
            catalog=catalog,
        )
        session.shell.run()

        assert session.text.startswith(BANNER + "\n")
        assert session.text.endswith(
            "\nDeleting a song with name 'Imagine' from the music library.\n"
            "\nDeleting a song with name 'Yesterday' from the music library.\n"
            "\nThe music library is empty.\n"
        )
        assert catalog.is_empty

    def test_end_of_input_quits(self, catalog):
        session = ScriptedSession(["I", "Yesterday", "Beatles", "Rock"], catalog=catalog)
        session.shell.run()

        assert catalog.is_empty
        assert session.text.endswith(
            "\nDeleting a song with name 'Yesterday' from the music library.\n"
            "\nThe music library is empty.\n"
        )

    def test_end_of_input_prints_single_blank_line(self):
        session = ScriptedSession([], show_banner=False)
        session.shell.run()

        assert session.text == "\n\nThe music library is empty.\n"

    def test_catalog_released_when_reading_fails(self, catalog):
        session = ScriptedSession(
            ["I", "Yesterday", "Beatles", "Rock",
             UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")],
            catalog=catalog,
        )

        with pytest.raises(UnicodeDecodeError):
            session.shell.run()
        assert catalog.is_empty

    def test_report_disabled_skips_deletion_lines(self, catalog):
        session = ScriptedSession(
            ["I", "Yesterday", "Beatles", "Rock", "Q"],
            catalog=catalog,
            teardown_report=False,
        )
        session.shell.run()

        assert "Deleting" not in session.text
        assert catalog.is_empty

    def test_without_banner_or_report(self):
        session = ScriptedSession(["Q"], show_banner=False, teardown_report=False)
        session.shell.run()

        assert session.text == "\n"

    def test_long_input_is_truncated(self, catalog):
        session = ScriptedSession(
            ["I", "A" * 10, "Artist", "Genre", "Q"],
            catalog=catalog,
            max_field_length=4,
            teardown_report=False,
        )
        session.shell.step()

        assert "AAAA" in catalog
