"""Splitting one color list into appearances by name prefix and suffix."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from figma_export.model import Color


def _matches(name: str, prefix: str | None, suffix: str | None) -> bool:
    if prefix is not None and not name.startswith(prefix):
        return False
    if suffix is not None and not name.endswith(suffix):
        return False
    return True


def strip_name(name: str, prefix: str | None, suffix: str | None) -> str:
    """Drop ``len(prefix)`` leading and ``len(suffix)`` trailing characters.

    Names shorter than prefix and suffix together become ``""``.
    """
    start = len(prefix or "")
    end = len(name) - len(suffix or "")
    if end <= start:
        return ""
    return name[start:end]


def select(
    names: Iterable[str],
    prefix: str | None = None,
    suffix: str | None = None,
) -> list[tuple[int, str]]:
    """Return ``(index, stripped name)`` for every name matching prefix and suffix.

    With neither prefix nor suffix every name matches unchanged.
    """
    return [
        (index, strip_name(name, prefix, suffix))
        for index, name in enumerate(names)
        if _matches(name, prefix, suffix)
    ]


def filter_colors(
    colors: list[Color],
    prefix: str | None = None,
    suffix: str | None = None,
) -> list[Color]:
    """Colors whose name matches, renamed to the stripped name."""
    return [
        dataclasses.replace(colors[index], name=name)
        for index, name in select((c.name for c in colors), prefix, suffix)
    ]
