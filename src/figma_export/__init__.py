"""Figma color export: light, dark and high contrast palettes from Figma styles."""
from __future__ import annotations

__version__ = "0.1.0"

from figma_export.colors import ColorsLoader
from figma_export.errors import ConfigurationError, ExportError, NoUsableStylesError
from figma_export.filter import AssetsFilter
from figma_export.model import AppearanceSet, Color, Platform
from figma_export.params import ColorsParams, FigmaParams, Params, load_params

__all__ = [
    "AppearanceSet",
    "AssetsFilter",
    "Color",
    "ColorsLoader",
    "ColorsParams",
    "ConfigurationError",
    "ExportError",
    "FigmaParams",
    "NoUsableStylesError",
    "Params",
    "Platform",
    "__version__",
    "load_params",
]
