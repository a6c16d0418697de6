"""Tests for name based appearance splitting."""
from __future__ import annotations

import pytest

from figma_export.colors.variants import filter_colors, select, strip_name
from figma_export.model import Color, Platform


class TestSelect:
    def test_no_prefix_or_suffix_matches_everything(self) -> None:
        assert select(["a", "b"]) == [(0, "a"), (1, "b")]

    def test_prefix_only(self) -> None:
        assert select(["light_bg", "dark_bg", "light_fg"], prefix="light_") == [(0, "bg"), (2, "fg")]

    def test_suffix_only(self) -> None:
        assert select(["bg_dark", "bg_light"], suffix="_dark") == [(0, "bg")]

    def test_prefix_and_suffix_both_required(self) -> None:
        names = ["lightHC_bg_lightHC", "lightHC_bg", "bg_lightHC"]
        assert select(names, prefix="lightHC_", suffix="_lightHC") == [(0, "bg")]

    @pytest.mark.parametrize(
        "prefix,core,suffix",
        [("light_", "brand", None), (None, "brand", "-dark"), ("p/", "a/b", "/s"), ("", "x", "")],
    )
    def test_round_trip(self, prefix: str | None, core: str, suffix: str | None) -> None:
        name = (prefix or "") + core + (suffix or "")
        assert select([name], prefix, suffix) == [(0, core)]

    def test_overlapping_prefix_and_suffix_clamp_to_empty(self) -> None:
        # "ab" starts with "ab" and ends with "b", but is shorter than both together
        assert select(["ab"], prefix="ab", suffix="b") == [(0, "")]

    def test_empty_input(self) -> None:
        assert select([], prefix="x") == []


class TestStripName:
    def test_strips_lengths(self) -> None:
        assert strip_name("light_brand_x", "light_", "_x") == "brand"

    def test_shorter_than_both(self) -> None:
        assert strip_name("abc", "abcd", "efg") == ""


class TestFilterColors:
    def test_renames_only(self) -> None:
        colors = [
            Color(name="dark_brand", red=0.1, green=0.2, blue=0.3, alpha=0.4, platform=Platform.IOS),
            Color(name="light_brand", red=1.0, green=1.0, blue=1.0),
        ]
        result = filter_colors(colors, prefix="dark_")
        assert result == [Color(name="brand", red=0.1, green=0.2, blue=0.3, alpha=0.4, platform=Platform.IOS)]
        # input untouched
        assert colors[0].name == "dark_brand"

    def test_disjoint_partitions(self) -> None:
        names = ["light_a", "dark_a", "light_b", "dark_b", "accent"]
        colors = [Color(name=n, red=0, green=0, blue=0) for n in names]

        light = select(names, prefix="light_")
        dark = select(names, prefix="dark_")

        light_idx = {i for i, _ in light}
        dark_idx = {i for i, _ in dark}
        assert light_idx.isdisjoint(dark_idx)
        assert {names[i] for i in light_idx | dark_idx} <= set(names)
        assert [c.name for c in filter_colors(colors, prefix="light_")] == ["a", "b"]
