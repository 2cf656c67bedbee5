"""Command-line front door for mini-ls.

Interprets argv, resolves the target directory, and runs the listing
pipeline: walk, extract metadata, sort, render, write. Fatal errors end the
run with a one-line diagnostic and exit status 1.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .arguments import USAGE, FileSink, HelpRequested, ListingConfig, StdoutSink, parse_arguments
from .config import load_preferences
from .errors import ListingError
from .listing_model import extract_all, walk_directory
from .log import setup_logger
from .paths import resolve_target_directory
from .render import render_listing, write_listing
from .sorting import sort_entries

PROGRAM_NAME = "mini-ls"


def _stream_is_terminal(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _terminal_columns() -> int:
    """Resolve current terminal width, defaulting to 80 columns."""
    return max(1, shutil.get_terminal_size((80, 24)).columns)


def run_listing(config: ListingConfig, working_directory: Path, stdout: TextIO | None = None) -> None:
    """Run the listing pipeline for ``config`` relative to ``working_directory``.

    Relative ``-F`` paths are anchored to ``working_directory`` as well. The
    listing text is rendered completely before the sink is opened.
    """
    root = resolve_target_directory(config.target_directory, working_directory)
    walked = walk_directory(root, config.show_hidden, config.recursive)
    entries = extract_all(walked, config.extended_attributes)
    ordered = sort_entries(entries, config.sort_key, config.reverse)

    sink = config.output_sink
    if isinstance(sink, FileSink) and not sink.path.is_absolute():
        sink = FileSink(working_directory / sink.path)

    stream = sys.stdout if stdout is None else stdout
    interactive = isinstance(sink, StdoutSink) and _stream_is_terminal(stream)
    preferences = load_preferences()
    text = render_listing(
        ordered,
        config.extended_attributes,
        preferences,
        color=interactive and preferences.color,
        max_cols=_terminal_columns() if interactive else None,
    )
    write_listing(text, sink, stream)


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and list a directory.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    setup_logger()
    if argv is None:
        argv = sys.argv[1:]
    if default_path is None:
        default_path = Path.cwd()

    try:
        config = parse_arguments(argv)
    except HelpRequested:
        sys.stdout.write(USAGE)
        return
    except ListingError as exc:
        raise SystemExit(f"{PROGRAM_NAME}: {exc}") from None

    try:
        run_listing(config, default_path)
    except ListingError as exc:
        raise SystemExit(f"{PROGRAM_NAME}: {exc}") from None


if __name__ == "__main__":
    main()
