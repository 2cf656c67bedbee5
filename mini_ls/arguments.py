"""Command-line interpretation into a normalized ``ListingConfig``.

Flags are read by a small explicit state machine instead of argparse so that
``-F out.txt`` and the glued ``-Fout.txt`` travel through one code path.
Each token is classified once; a pending ``-F`` consumes the next token.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .errors import MissingFlagValueError, UnexpectedArgumentError, UnknownFlagError

OUTPUT_FLAG = "-F"
HELP_FLAGS = frozenset({"-h", "--help"})
END_OF_FLAGS = "--"

USAGE = """\
usage: mini-ls [flags] [directory]

List the contents of a directory (default: the current directory).

flags:
  -F PATH   write the listing to PATH instead of stdout (also -FPATH)
  -l        show extended attributes (permissions, size, times)
  -A        include entries whose name starts with '.'
  -R        list subdirectories recursively, showing full paths
  -S        sort by size, smallest first (-Sr: largest first)
  -t        sort by modification time, oldest first (-tr: newest first)
  -h        show this help and exit
"""


class SortKey(enum.Enum):
    NAME = "name"
    SIZE = "size"
    MODIFIED_TIME = "modified_time"


@dataclass(frozen=True)
class StdoutSink:
    """Listing goes to standard output."""


@dataclass(frozen=True)
class FileSink:
    """Listing goes to ``path``, created or truncated."""

    path: Path


OutputSink = StdoutSink | FileSink


@dataclass(frozen=True)
class ListingConfig:
    """Everything one invocation needs, independent of the raw argv spelling.

    ``target_directory`` is the positional argument as typed; ``None`` means
    the current directory and is filled in by the path resolver.
    """

    target_directory: str | None = None
    output_sink: OutputSink = field(default_factory=StdoutSink)
    show_hidden: bool = False
    extended_attributes: bool = False
    recursive: bool = False
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False


class HelpRequested(Exception):
    """Raised when ``-h``/``--help`` is seen; the caller prints ``USAGE``."""


_BOOLEAN_FLAGS: dict[str, str] = {
    "-l": "extended_attributes",
    "-A": "show_hidden",
    "-R": "recursive",
}

# flag -> (sort key, reverse)
_SORT_FLAGS: dict[str, tuple[SortKey, bool]] = {
    "-S": (SortKey.SIZE, False),
    "-Sr": (SortKey.SIZE, True),
    "-t": (SortKey.MODIFIED_TIME, False),
    "-tr": (SortKey.MODIFIED_TIME, True),
}


class _ParserState(enum.Enum):
    EXPECT_TOKEN = "expect_token"
    EXPECT_OUTPUT_PATH = "expect_output_path"
    POSITIONAL_ONLY = "positional_only"


def parse_arguments(argv: Sequence[str]) -> ListingConfig:
    """Interpret ``argv`` (without the program name) as a ``ListingConfig``.

    Raises ``UnknownFlagError`` for flags outside the table,
    ``UnexpectedArgumentError`` for a second positional argument,
    ``MissingFlagValueError`` when ``-F`` ends the argument list, and
    ``HelpRequested`` for ``-h``/``--help``.
    """
    state = _ParserState.EXPECT_TOKEN
    values: dict[str, object] = {}
    target: str | None = None

    for token in argv:
        if state is _ParserState.EXPECT_OUTPUT_PATH:
            values["output_sink"] = FileSink(Path(token))
            state = _ParserState.EXPECT_TOKEN
            continue

        is_flag = state is _ParserState.EXPECT_TOKEN and token.startswith("-") and token != "-"
        if not is_flag:
            if target is not None:
                raise UnexpectedArgumentError(token)
            target = token
            continue

        if token == END_OF_FLAGS:
            state = _ParserState.POSITIONAL_ONLY
        elif token in HELP_FLAGS:
            raise HelpRequested()
        elif token == OUTPUT_FLAG:
            state = _ParserState.EXPECT_OUTPUT_PATH
        elif token.startswith(OUTPUT_FLAG):
            values["output_sink"] = FileSink(Path(token[len(OUTPUT_FLAG) :]))
        elif token in _BOOLEAN_FLAGS:
            values[_BOOLEAN_FLAGS[token]] = True
        elif token in _SORT_FLAGS:
            values["sort_key"], values["reverse"] = _SORT_FLAGS[token]
        else:
            raise UnknownFlagError(token)

    if state is _ParserState.EXPECT_OUTPUT_PATH:
        raise MissingFlagValueError(OUTPUT_FLAG)

    return ListingConfig(target_directory=target, **values)


__all__ = [
    "SortKey",
    "StdoutSink",
    "FileSink",
    "OutputSink",
    "ListingConfig",
    "HelpRequested",
    "USAGE",
    "parse_arguments",
]
