"""Write a fully rendered listing to its destination."""

from __future__ import annotations

import sys
from typing import TextIO

from ..arguments import FileSink, OutputSink
from ..errors import SinkUnwritableError


def encode_for_stream(text: str, encoding: str) -> bytes:
    """Encode ``text`` so undecodable filename bytes come back out unchanged.

    Names read from the filesystem carry undecodable bytes as surrogate
    escapes. Encodings that cannot represent the rest of the text (icons on
    an ASCII terminal) fall back to backslash escapes.
    """
    try:
        return text.encode(encoding, "surrogateescape")
    except UnicodeEncodeError:
        return text.encode(encoding, "backslashreplace")


def write_listing(text: str, sink: OutputSink, stdout: TextIO | None = None) -> None:
    """Write ``text`` to ``sink``.

    ``FileSink`` paths are created or truncated and written as UTF-8 so
    icons survive regardless of locale; undecodable name bytes are written
    back verbatim. Any ``OSError`` while opening or writing becomes
    ``SinkUnwritableError``. Standard output is written through its binary
    buffer when it has one.
    """
    if isinstance(sink, FileSink):
        try:
            with sink.path.open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
                handle.write(text)
        except OSError as exc:
            raise SinkUnwritableError(sink.path, exc) from exc
        return

    stream = sys.stdout if stdout is None else stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        stream.flush()
        return
    stream.flush()
    buffer.write(encode_for_stream(text, stream.encoding or "utf-8"))
    buffer.flush()


__all__ = ["encode_for_stream", "write_listing"]
