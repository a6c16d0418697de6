"""Tests for the style usage policy."""
from __future__ import annotations

import pytest

from figma_api.models import Style, StyleType
from figma_export.colors.policy import is_usable


def _style(style_type: StyleType = StyleType.FILL, description: str = "") -> Style:
    return Style(node_id="1:1", name="brand", style_type=style_type, description=description)


def test_fill_with_empty_description_is_usable() -> None:
    assert is_usable(_style()) is True


@pytest.mark.parametrize("style_type", [StyleType.TEXT, StyleType.EFFECT, StyleType.GRID, StyleType.UNKNOWN])
def test_non_fill_is_never_usable(style_type: StyleType) -> None:
    assert is_usable(_style(style_type)) is False
    assert is_usable(_style(style_type, "ios")) is False


@pytest.mark.parametrize("description", ["none", "ios none", "nonexistent", "android,none"])
def test_description_containing_none_is_excluded(description: str) -> None:
    assert is_usable(_style(description=description)) is False


@pytest.mark.parametrize("description", ["ios", "android", "None", "NONE", "primary brand color"])
def test_other_descriptions_are_usable(description: str) -> None:
    assert is_usable(_style(description=description)) is True
