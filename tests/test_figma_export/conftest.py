from __future__ import annotations

import threading
from collections.abc import Sequence

import pytest

from figma_api.errors import NotFoundError
from figma_api.models import RGBA, Node, Paint, PaintType, Style, StyleType


class FakeDocumentClient:
    """In-memory DocumentClient keyed by file id."""

    def __init__(self) -> None:
        self.styles: dict[str, list[Style]] = {}
        self.nodes: dict[str, dict[str, Node]] = {}
        self.node_requests: list[tuple[str, tuple[str, ...]]] = []
        self._lock = threading.Lock()

    def add_file(self, file_id: str, styles: list[Style], nodes: list[Node]) -> None:
        self.styles[file_id] = styles
        self.nodes[file_id] = {n.id: n for n in nodes}

    def fetch_styles(self, file_id: str) -> list[Style]:
        if file_id not in self.styles:
            raise NotFoundError(f"File {file_id} not found", status_code=404)
        return list(self.styles[file_id])

    def fetch_nodes(self, file_id: str, node_ids: Sequence[str]) -> dict[str, Node]:
        with self._lock:
            self.node_requests.append((file_id, tuple(node_ids)))
        lookup = self.nodes[file_id]
        return {i: lookup[i] for i in node_ids if i in lookup}


def make_style(
    name: str,
    node_id: str | None = None,
    style_type: StyleType = StyleType.FILL,
    description: str = "",
) -> Style:
    return Style(node_id=node_id or f"node-{name}", name=name, style_type=style_type, description=description)


def make_solid_node(
    node_id: str,
    r: float = 0.0,
    g: float = 0.0,
    b: float = 0.0,
    a: float = 1.0,
    opacity: float | None = None,
) -> Node:
    return Node(id=node_id, fills=(Paint(type=PaintType.SOLID, color=RGBA(r, g, b, a), opacity=opacity),))


def make_file(names: list[str]) -> tuple[list[Style], list[Node]]:
    """Fill styles with one black solid node each."""
    styles = [make_style(name) for name in names]
    return styles, [make_solid_node(s.node_id) for s in styles]


@pytest.fixture
def client() -> FakeDocumentClient:
    return FakeDocumentClient()


@pytest.fixture
def style_factory():
    return make_style


@pytest.fixture
def node_factory():
    return make_solid_node


@pytest.fixture
def file_factory():
    return make_file
