"""Configuration model for the music library shell."""

from pathlib import Path
from dataclasses import asdict, dataclass, fields
import json

from ..exceptions import ConfigurationError

# Size of the line buffer the library has always read input into.
DEFAULT_MAX_FIELD_LENGTH = 1024


@dataclass
class LibraryConfig:
    """Settings for the interactive shell."""
    max_field_length: int = DEFAULT_MAX_FIELD_LENGTH
    show_banner: bool = True
    teardown_report: bool = True  # print the emptied library on quit

    def __post_init__(self) -> None:
        if isinstance(self.max_field_length, bool) or not isinstance(self.max_field_length, int):
            raise ConfigurationError(
                f"max_field_length must be an integer, got {self.max_field_length!r}"
            )
        if self.max_field_length < 1:
            raise ConfigurationError("max_field_length must be positive")
        for name in ("show_banner", "teardown_report"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")

    @classmethod
    def default(cls) -> "LibraryConfig":
        return cls()


def _dict_to_config(data) -> LibraryConfig:
    """Build a LibraryConfig from a decoded JSON object."""
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a JSON object")

    known = {f.name for f in fields(LibraryConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return LibraryConfig(**data)


def load_config(config_path: Path) -> LibraryConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    return _dict_to_config(config_data)


def save_config(config: LibraryConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)
