"""Song entities owned by the catalog."""

from dataclasses import dataclass

from .result import ValidationError


def _require_text(field_name: str, value: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be str, got {type(value).__name__}")
    if not value:
        raise ValidationError(f"{field_name} cannot be empty")
    return value


@dataclass(slots=True)
class Song:
    """
    A song stored in the catalog.

    Instances live only inside a SongCatalog; callers see them through
    SongView snapshots.
    """

    name: str
    artist: str
    genre: str

    def __post_init__(self) -> None:
        _require_text("Song name", self.name)
        _require_text("Artist", self.artist)
        _require_text("Genre", self.genre)

    def view(self) -> "SongView":
        """Take a read-only snapshot of this song."""
        return SongView(name=self.name, artist=self.artist, genre=self.genre)


@dataclass(frozen=True, slots=True)
class SongView:
    """Read-only projection of a song returned by catalog queries."""

    name: str
    artist: str
    genre: str

    def get_display_lines(self) -> tuple:
        """The song's fields in display order."""
        return (self.name, self.artist, self.genre)
