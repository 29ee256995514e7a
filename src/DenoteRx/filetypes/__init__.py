"""File type lookup used by the `file-type` field."""

from __future__ import annotations

from DenoteRx.filetypes.registry import DEFAULT_FILE_TYPES, FileTypeRegistry

__all__ = ["DEFAULT_FILE_TYPES", "FileTypeRegistry"]
