from __future__ import annotations

"""Byte sinks the serialized document is written to.

A sink only needs ``write(bytes)``; ``close()`` is called by whoever opened
it. The file-backed sinks are context managers.
"""

import gzip
import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union

__all__ = [
    "OutputStream",
    "BytesOutputStream",
    "FileOutputStream",
    "GzipOutputStream",
]

logger = logging.getLogger(__name__)


class OutputStream(Protocol):
    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...


class _BaseOutputStream:
    def __init__(self, fh: BinaryIO) -> None:
        self._fh: Optional[BinaryIO] = fh
        self.bytes_written = 0

    @property
    def closed(self) -> bool:
        return self._fh is None

    def write(self, data: bytes) -> None:
        if self._fh is None:
            raise ValueError("write to closed output stream")
        self._fh.write(data)
        self.bytes_written += len(data)

    def close(self) -> None:
        if self._fh is not None:
            fh, self._fh = self._fh, None
            fh.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class BytesOutputStream(_BaseOutputStream):
    """In-memory sink; the collected bytes stay readable after ``close``."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        super().__init__(self._buffer)
        self._value = b""

    def getvalue(self) -> bytes:
        if self._fh is not None:
            return self._buffer.getvalue()
        return self._value

    def close(self) -> None:
        if self._fh is not None:
            self._value = self._buffer.getvalue()
        super().close()


class FileOutputStream(_BaseOutputStream):
    """Plain binary file sink."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(open(self.path, "wb"))

    def close(self) -> None:
        if not self.closed:
            logger.debug("I/O: closed %s bytes=%d", self.path, self.bytes_written)
        super().close()


class GzipOutputStream(FileOutputStream):
    """Gzip-compressed file sink, the on-disk form of ``.xoj`` files."""

    def __init__(self, path: Union[str, Path], compresslevel: int = 9) -> None:
        self.path = Path(path)
        _BaseOutputStream.__init__(self, gzip.open(self.path, "wb", compresslevel=compresslevel))
