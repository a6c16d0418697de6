"""Joining styles with their nodes."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from figma_api.models import Node, Style
from figma_export.model import Color, Platform


def style_to_color(style: Style, nodes: Mapping[str, Node]) -> Color | None:
    """Resolve the first fill of the style's node, or None if it has no solid fill."""
    node = nodes.get(style.node_id)
    if node is None or not node.fills:
        return None
    fill = node.fills[0].as_solid()
    if fill is None or fill.color is None:
        return None

    # opacity replaces the color's own alpha
    alpha = fill.opacity if fill.opacity is not None else fill.color.a
    return Color(
        name=style.name,
        red=fill.color.r,
        green=fill.color.g,
        blue=fill.color.b,
        alpha=alpha,
        platform=Platform.from_description(style.description),
    )


def correlate(styles: Iterable[Style], nodes: Mapping[str, Node]) -> list[Color]:
    """Colors for *styles* in order, skipping styles without a solid fill node."""
    colors: list[Color] = []
    for style in styles:
        color = style_to_color(style, nodes)
        if color is not None:
            colors.append(color)
    return colors
