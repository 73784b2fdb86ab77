from __future__ import annotations

"""Exception classes raised by the save pipeline.

Malformed domain values never raise: they are logged and replaced by a safe
default. Only output problems surface as exceptions.
"""

from typing import Optional


class XojWriterError(Exception):
    """Base exception for all xoj_writer errors."""


class SaveError(XojWriterError):
    """Raised when a document cannot be written.

    Wraps the underlying sink failure (if any) so callers can report the
    target path together with the original cause.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            return f"[{self.path}] {super().__str__()}"
        return super().__str__()
