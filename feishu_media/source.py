"""Byte sources for uploads: a file on disk or an in-memory buffer."""

from __future__ import annotations

import io
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union


@dataclass(frozen=True)
class PathSource:
    """A local file, read lazily when the upload starts.

    Attributes:
        path: Location of the file.
    """

    path: Path

    # Used in size error messages for file uploads
    label = "File"

    def size(self) -> int:
        """Return the file size from stat, without reading content."""
        return self.path.stat().st_size

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        """Open the file for reading; the handle is closed on exit, including errors."""
        with self.path.open("rb") as f:
            yield f

    def head(self, length: int) -> bytes:
        with self.path.open("rb") as f:
            return f.read(length)


@dataclass(frozen=True)
class BytesSource:
    """An in-memory buffer.

    Attributes:
        data: Buffer content.
    """

    data: bytes

    label = "Buffer"

    def size(self) -> int:
        return len(self.data)

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        stream = io.BytesIO(self.data)
        try:
            yield stream
        finally:
            stream.close()

    def head(self, length: int) -> bytes:
        return self.data[:length]


MediaSource = Union[PathSource, BytesSource]

SourceLike = Union[MediaSource, bytes, bytearray, memoryview, str, "os.PathLike[str]"]


def as_source(value: SourceLike) -> MediaSource:
    """Coerce a caller-supplied value to a MediaSource.

    Buffers become BytesSource; strings and path-like objects become
    PathSource. Existing MediaSource values are returned unchanged.

    Raises:
        TypeError: If the value is neither a buffer nor a path.
    """
    if isinstance(value, (PathSource, BytesSource)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesSource(bytes(value))
    if isinstance(value, (str, os.PathLike)):
        return PathSource(Path(value))
    raise TypeError(
        f"Unsupported media source type '{type(value).__name__}'. "
        f"Expected bytes or a file path."
    )
