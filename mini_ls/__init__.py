"""Public package surface for mini-ls, a directory lister.

Exports ``main`` so the listing pipeline can be driven with an explicit
argv and working directory, as the console script does with ``sys.argv``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Import ``mini_ls.cli`` on first call; plain ``import mini_ls`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
