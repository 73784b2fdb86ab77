from __future__ import annotations

"""High-level save service.

Entry-point for any front-end (GUI, CLI, autosave job) that needs to write a
document to disk as a ``.xoj`` file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from xoj_writer.core.exceptions import SaveError
from xoj_writer.core.models import Document
from xoj_writer.core.save_handler import SaveHandler
from xoj_writer.core.streams import FileOutputStream, GzipOutputStream

logger = logging.getLogger(__name__)

__all__ = ["SaveService"]


class SaveService:
    """Business-logic façade around :class:`SaveHandler`."""

    def __init__(self, handler: Optional[SaveHandler] = None) -> None:
        self.handler = handler if handler is not None else SaveHandler()

    def save(self, document: Document, path: Union[str, Path],
             compress: Optional[bool] = None) -> Path:
        """Write *document* to *path*.

        Args:
            document: Document snapshot to save.
            path: Destination file.
            compress: Gzip the output; defaults to the ``compress`` setting.

        Returns:
            The destination path.

        Raises:
            SaveError: If the document cannot be serialized or the destination
                cannot be written.
        """
        path = Path(path)
        if compress is None:
            compress = self.handler.settings.compress

        self.handler.prepare_save(document)
        # Serialize before touching the destination so a failure leaves no partial file
        try:
            data = self.handler.to_bytes()
        except SaveError as e:
            logger.error("Save FAIL: cannot serialize document path=%s: %s", path, e)
            raise SaveError(str(e), path=str(path), cause=e.cause) from e

        try:
            stream_cls = GzipOutputStream if compress else FileOutputStream
            with stream_cls(path) as out:
                out.write(data)
        except OSError as e:
            logger.error("I/O FAIL: save document path=%s", path, exc_info=True)
            raise SaveError(f"Could not write document: {e}", path=str(path), cause=e) from e

        logger.info("Document saved to %s (pages=%d, compressed=%s)",
                    path, len(document.pages), compress)
        return path

    def to_bytes(self, document: Document) -> bytes:
        """Return the uncompressed XML for *document*."""
        self.handler.prepare_save(document)
        return self.handler.to_bytes()
