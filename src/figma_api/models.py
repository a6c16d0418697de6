"""Figma REST response models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from figma_api.errors import ResponseFormatError


class StyleType(StrEnum):
    """Kind of a published style."""

    FILL = "FILL"
    TEXT = "TEXT"
    EFFECT = "EFFECT"
    GRID = "GRID"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> StyleType:
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class PaintType(StrEnum):
    """Paint discriminator of a fill entry."""

    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    EMOJI = "EMOJI"
    VIDEO = "VIDEO"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> PaintType:
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class RGBA:
    """Color with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class Paint:
    """A single fill entry of a node."""

    type: PaintType
    color: RGBA | None = None
    opacity: float | None = None

    def as_solid(self) -> Paint | None:
        """Return self when this is a flat color fill, else None."""
        if self.type is PaintType.SOLID and self.color is not None:
            return self
        return None


@dataclass(frozen=True)
class Style:
    """A published style record from ``/v1/files/:key/styles``."""

    node_id: str
    name: str
    style_type: StyleType
    description: str = ""


@dataclass(frozen=True)
class Node:
    """The document part of a ``/v1/files/:key/nodes`` entry."""

    id: str
    name: str = ""
    fills: tuple[Paint, ...] = field(default_factory=tuple)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_rgba(data: dict[str, Any]) -> RGBA:
    return RGBA(
        r=float(data.get("r", 0.0)),
        g=float(data.get("g", 0.0)),
        b=float(data.get("b", 0.0)),
        a=float(data.get("a", 1.0)),
    )


def parse_paint(data: dict[str, Any]) -> Paint:
    color = data.get("color")
    opacity = data.get("opacity")
    return Paint(
        type=PaintType.parse(data.get("type")),
        color=_parse_rgba(color) if isinstance(color, dict) else None,
        opacity=float(opacity) if opacity is not None else None,
    )


def parse_style(data: dict[str, Any]) -> Style:
    try:
        node_id = data["node_id"]
        name = data["name"]
    except KeyError as exc:
        raise ResponseFormatError(f"Style entry without {exc.args[0]!r}") from exc
    return Style(
        node_id=node_id,
        name=name,
        style_type=StyleType.parse(data.get("style_type")),
        description=data.get("description") or "",
    )


def parse_styles_response(body: dict[str, Any]) -> list[Style]:
    """Extract styles from a styles endpoint body (``meta.styles``)."""
    meta = body.get("meta")
    if not isinstance(meta, dict) or not isinstance(meta.get("styles"), list):
        raise ResponseFormatError("Styles response has no meta.styles list")
    return [parse_style(entry) for entry in meta["styles"]]


def parse_node(node_id: str, data: dict[str, Any]) -> Node:
    document = data.get("document")
    if not isinstance(document, dict):
        raise ResponseFormatError(f"Node {node_id!r} has no document")
    fills = tuple(
        parse_paint(fill) for fill in document.get("fills") or () if isinstance(fill, dict)
    )
    return Node(id=document.get("id", node_id), name=document.get("name", ""), fills=fills)


def parse_nodes_response(body: dict[str, Any]) -> dict[str, Node]:
    """Extract a node lookup from a nodes endpoint body.

    Ids the API answers with ``null`` (deleted nodes) are left out.
    """
    nodes = body.get("nodes")
    if not isinstance(nodes, dict):
        raise ResponseFormatError("Nodes response has no nodes object")
    return {
        node_id: parse_node(node_id, data)
        for node_id, data in nodes.items()
        if data is not None
    }
