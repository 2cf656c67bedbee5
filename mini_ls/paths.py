"""Resolve the directory a listing runs against."""

from __future__ import annotations

import errno
import stat
from pathlib import Path

from .errors import TargetNotADirectoryError, TargetNotFoundError, TargetUnreadableError

_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def resolve_target_directory(argument: str | None, working_directory: Path) -> Path:
    """Return the listing root for ``argument``.

    ``None`` selects ``working_directory`` itself. Relative arguments are
    joined onto ``working_directory``; absolute ones replace it. The path is
    not ``resolve()``-d so recursive output keeps the spelling the user gave.

    A missing path raises ``TargetNotFoundError``; any other lookup failure
    (name too long, unsearchable parent) raises ``TargetUnreadableError``.
    """
    if argument is None:
        return working_directory

    target = working_directory / Path(argument)
    try:
        result = target.stat()
    except OSError as exc:
        if exc.errno in _MISSING_ERRNOS:
            raise TargetNotFoundError(Path(argument)) from exc
        raise TargetUnreadableError(Path(argument), exc) from exc
    if not stat.S_ISDIR(result.st_mode):
        raise TargetNotADirectoryError(Path(argument))
    return target


__all__ = ["resolve_target_directory"]
