"""Command line interface for the music library."""

import io
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .exceptions import MusicLibraryError
from .models.config import LibraryConfig, load_config
from .shell import LibraryShell

console = Console(highlight=False)


def _decode_input_leniently() -> None:
    # Bytes that are not valid UTF-8 are read as U+FFFD instead of aborting.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")


def _configure_logging(verbose: bool) -> None:
    # Logs go to stderr so they never interleave with the shell's output.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(__version__)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--max-length',
    type=click.IntRange(min=1),
    help='Maximum number of characters read per input line'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
def main(config: Optional[Path], max_length: Optional[int], verbose: bool):
    """Keep a personal music library sorted by song name."""
    _configure_logging(verbose)

    try:
        cfg = load_config(config) if config else LibraryConfig.default()
        if max_length is not None:
            cfg.max_field_length = max_length
    except MusicLibraryError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        sys.exit(1)

    _decode_input_leniently()
    LibraryShell(config=cfg, console=console).run()


if __name__ == '__main__':
    main()
