"""Color style resolution."""
from __future__ import annotations

from figma_export.colors.correlate import correlate
from figma_export.colors.loader import ColorsLoader
from figma_export.colors.policy import is_usable
from figma_export.colors.sources import (
    DocumentClient,
    load_file_colors,
    load_from_appearance_files,
    load_from_single_file,
)
from figma_export.colors.variants import filter_colors, select

__all__ = [
    "ColorsLoader",
    "DocumentClient",
    "correlate",
    "filter_colors",
    "is_usable",
    "load_file_colors",
    "load_from_appearance_files",
    "load_from_single_file",
    "select",
]
