"""
Reopenable text sources.

The reader makes three independent passes over a report (header, metadata,
records), so its input must be able to hand out a fresh stream positioned at
the start on request. ``TextSource`` names that capability.
"""

from __future__ import annotations

import gzip
import io
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class TextSource(Protocol):
    """Anything that can open a new text stream at the start of its content."""

    def open(self) -> TextIO:
        """Return a fresh text stream positioned at the first line."""
        ...


class PathSource:
    """
    Source backed by a file path, reopened for every pass.

    Files ending in '.gz' are decompressed transparently.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def _is_gzipped(self) -> bool:
        """Check if file is gzip compressed."""
        return self.path.suffix == ".gz"

    def open(self) -> TextIO:
        if self._is_gzipped():
            return gzip.open(self.path, "rt", encoding=self.encoding)
        return self.path.open("r", encoding=self.encoding)

    def __repr__(self) -> str:
        return f"PathSource({str(self.path)!r})"


class TextBufferSource:
    """Source backed by in-memory text."""

    def __init__(self, text: str | bytes, encoding: str = "utf-8") -> None:
        if isinstance(text, bytes):
            text = text.decode(encoding)
        self.text = text

    def open(self) -> TextIO:
        return io.StringIO(self.text)

    def __repr__(self) -> str:
        return f"TextBufferSource(<{len(self.text)} chars>)"


class SeekableStreamSource:
    """
    Source backed by an already-open seekable text stream.

    Every ``open()`` rewinds the shared stream to offset 0 and returns it
    wrapped so that closing a pass does not close the caller's stream. The
    passes run one after another, never interleaved.
    """

    def __init__(self, stream: TextIO) -> None:
        if not stream.seekable():
            msg = "SeekableStreamSource requires a seekable stream"
            raise ValueError(msg)
        self.stream = stream

    def open(self) -> TextIO:
        self.stream.seek(0)
        return _NonClosingStream(self.stream)

    def __repr__(self) -> str:
        return f"SeekableStreamSource({self.stream!r})"


class _NonClosingStream(io.TextIOBase):
    """Line-iterating view of a stream whose close() leaves the stream open."""

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self._stream = stream

    def readline(self, size: int = -1) -> str:  # type: ignore[override]
        return self._stream.readline(size)

    def read(self, size: int | None = -1) -> str:
        return self._stream.read(-1 if size is None else size)

    def readable(self) -> bool:
        return True


def as_source(value: TextSource | Path | str) -> TextSource:
    """
    Coerce a path or source into a TextSource.

    Strings are treated as file paths; use TextBufferSource for in-memory text.
    """
    if isinstance(value, (str, Path)):
        return PathSource(value)
    return value
