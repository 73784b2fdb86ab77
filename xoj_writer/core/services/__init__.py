"""Service layer for xoj_writer."""

from .save_service import SaveService

__all__ = ["SaveService"]
