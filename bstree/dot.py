"""Render binary trees as Graphviz dot source."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

from bstree.bst import BstNode
from bstree.tree import Node

AnyNode = Union[Node, BstNode]


def dot_source(root: AnyNode) -> str:
    """Return an undirected dot graph with one edge line per parent-child link."""
    return "graph tree{\n" + "".join(_edges(root)) + "}"


def write_dotfile(root: AnyNode, output_path: Union[str, Path]) -> None:
    """Write the dot graph of ``root`` to ``output_path``."""
    Path(output_path).write_text(dot_source(root), encoding="utf-8")


def _label(node: AnyNode) -> int:
    return node.key if isinstance(node, BstNode) else node.value


def _edges(node: AnyNode) -> Iterator[str]:
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{_label(node)}--{_label(child)};\n"
    for child in children:
        yield from _edges(child)