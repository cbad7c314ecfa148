"""Custom exceptions for the music library application."""


class MusicLibraryError(Exception):
    """Base exception for music library errors."""
    pass


class ConfigurationError(MusicLibraryError):
    """Raised when there's an error in configuration."""
    pass
