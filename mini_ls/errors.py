"""Error kinds raised by the listing pipeline.

Fatal errors propagate to ``mini_ls.cli`` and end the run with exit status 1.
Subtree and metadata read failures are constructed, logged, and recovered.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for every error the listing pipeline reports to the user."""


class ArgumentError(ListingError):
    """Command line could not be interpreted."""


class UnknownFlagError(ArgumentError):
    def __init__(self, token: str) -> None:
        super().__init__(f"unknown flag: {token}")
        self.token = token


class UnexpectedArgumentError(ArgumentError):
    def __init__(self, token: str) -> None:
        super().__init__(f"unexpected argument: {token}")
        self.token = token


class MissingFlagValueError(ArgumentError):
    def __init__(self, flag: str) -> None:
        super().__init__(f"flag {flag} requires a value")
        self.flag = flag


class TargetError(ListingError):
    """Directory argument does not name a listable directory."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TargetNotFoundError(TargetError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"{path}: not found", path)


class TargetNotADirectoryError(TargetError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"{path}: not a directory", path)


class ListingIOError(ListingError):
    """Wraps an ``OSError`` hit while reading the tree or writing output.

    ``cause`` keeps the original exception; callers also chain it with
    ``raise ... from cause`` so ``__cause__`` matches.
    """

    action = "cannot access"

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{self.action} {path}: {reason}")
        self.path = path
        self.cause = cause


class TargetUnreadableError(ListingIOError):
    action = "cannot access"


class RootUnreadableError(ListingIOError):
    action = "cannot read directory"


class SubtreeUnreadableError(ListingIOError):
    action = "skipping unreadable directory"


class MetadataUnreadableError(ListingIOError):
    action = "cannot read metadata for"


class SinkUnwritableError(ListingIOError):
    action = "cannot write listing to"


__all__ = [
    "ListingError",
    "ArgumentError",
    "UnknownFlagError",
    "UnexpectedArgumentError",
    "MissingFlagValueError",
    "TargetError",
    "TargetNotFoundError",
    "TargetNotADirectoryError",
    "ListingIOError",
    "TargetUnreadableError",
    "RootUnreadableError",
    "SubtreeUnreadableError",
    "MetadataUnreadableError",
    "SinkUnwritableError",
]
