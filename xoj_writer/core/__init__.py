from __future__ import annotations

"""Core save pipeline: document model, XML node tree, encoders and sinks.

Free of GUI code so it can be reused from tests, scripts or any host
application.
"""

from .exceptions import SaveError, XojWriterError
from .save_handler import SaveHandler, SaveSettings

__all__ = [
    "SaveHandler",
    "SaveSettings",
    "SaveError",
    "XojWriterError",
]
