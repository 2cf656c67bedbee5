"""Display-width measurement and column shaping for listing rows.

Padding and clipping count terminal cells, not code points, so names with
wide or combining characters still line up in the extended view.
"""

from __future__ import annotations

import unicodedata

from pygments.console import ansiformat

DIRECTORY_STYLE = "*blue*"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters (which include most emoji icons) consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_display(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_display(text: str, width: int) -> str:
    """Left-align ``text`` in a ``width``-column cell, clipping when too long."""
    clipped = clip_display(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def style_directory_name(text: str) -> str:
    """Wrap a directory name in bold blue SGR codes."""
    return ansiformat(DIRECTORY_STYLE, text)


__all__ = [
    "char_display_width",
    "display_width",
    "clip_display",
    "pad_display",
    "style_directory_name",
]
