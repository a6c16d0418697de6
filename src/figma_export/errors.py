"""Errors raised while resolving colors."""
from __future__ import annotations


class ExportError(Exception):
    """Base error for figma_export."""


class ConfigurationError(ExportError):
    """Invalid or missing export parameters."""


class NoUsableStylesError(ExportError):
    """A file has no usable color styles after filtering."""

    def __init__(self, file_id: str) -> None:
        super().__init__(f"No usable color styles found in file {file_id!r}")
        self.file_id = file_id
