"""Allow ``python -m music_library``."""

from .cli import main

main()
