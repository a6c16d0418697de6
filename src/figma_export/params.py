"""Export parameters and their JSON config file."""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from figma_export.errors import ConfigurationError

DEFAULT_LIGHT_HC_PREFIX = "lightHC_"
DEFAULT_LIGHT_HC_SUFFIX = "_lightHC"
DEFAULT_DARK_HC_PREFIX = "darkHC_"
DEFAULT_DARK_HC_SUFFIX = "_darkHC"


@dataclass(frozen=True)
class FigmaParams:
    """Figma files holding the colors of each appearance."""

    light_file_id: str
    dark_file_id: str | None = None
    light_high_contrast_file_id: str | None = None
    dark_high_contrast_file_id: str | None = None
    timeout: float = 30.0


@dataclass(frozen=True)
class ColorsParams:
    """Naming convention used when all appearances live in one file.

    Unset high contrast prefixes and suffixes fall back to ``lightHC_`` /
    ``_lightHC`` and ``darkHC_`` / ``_darkHC``.
    """

    use_single_file: bool = False
    light_mode_prefix: str | None = None
    light_mode_suffix: str | None = None
    dark_mode_prefix: str | None = None
    dark_mode_suffix: str | None = None
    light_hc_mode_prefix: str | None = None
    light_hc_mode_suffix: str | None = None
    dark_hc_mode_prefix: str | None = None
    dark_hc_mode_suffix: str | None = None


@dataclass(frozen=True)
class Params:
    figma: FigmaParams
    colors: ColorsParams | None = None


def _build(cls: type, data: Any, section: str) -> Any:
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section {section!r} must be an object")
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown keys in {section!r}: {', '.join(unknown)}")
    try:
        return cls(**data)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid {section!r} section: {exc}") from exc


def params_from_dict(data: dict[str, Any]) -> Params:
    """Build :class:`Params` from the decoded config document.

    Layout: ``{"figma": {...}, "common": {"colors": {...}}}``. Other top-level
    sections (platform output settings) are ignored.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Config root must be an object")
    if "figma" not in data:
        raise ConfigurationError("Config has no 'figma' section")

    figma = _build(FigmaParams, data["figma"], "figma")
    if not figma.light_file_id:
        raise ConfigurationError("figma.light_file_id is required")

    common = data.get("common") or {}
    if not isinstance(common, dict):
        raise ConfigurationError("Section 'common' must be an object")
    colors_data = common.get("colors")
    colors = _build(ColorsParams, colors_data, "common.colors") if colors_data is not None else None

    return Params(figma=figma, colors=colors)


def load_params(path: str | Path) -> Params:
    """Read and validate a JSON config file."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc
    return params_from_dict(data)
