"""Tests for AssetsFilter."""
from __future__ import annotations

import pytest

from figma_export.filter import AssetsFilter


@pytest.mark.parametrize(
    "expr,name,expected",
    [
        ("brand", "brand", True),
        ("brand", "brand2", False),
        ("brand/*", "brand/primary", True),
        ("brand/*", "text/primary", False),
        ("bg?", "bg1", True),
        ("bg?", "bg12", False),
        ("*", "anything", True),
        ("Brand", "brand", False),
    ],
)
def test_single_pattern(expr: str, name: str, expected: bool) -> None:
    assert AssetsFilter(expr).match(name) is expected


def test_comma_separated_patterns() -> None:
    f = AssetsFilter("brand/*, text/primary")
    assert f.patterns == ("brand/*", "text/primary")
    assert f.match("brand/x")
    assert f.match("text/primary")
    assert not f.match("text/secondary")


def test_empty_filter_matches_nothing() -> None:
    assert AssetsFilter("").match("brand") is False
    assert AssetsFilter(" , ").match("brand") is False
