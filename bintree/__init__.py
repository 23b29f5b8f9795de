"""Immutable binary trees with heap-order construction and text rendering."""

from .graph_export import build_networkx_graph
from .operations import (
    build,
    depth,
    fold,
    is_complete,
    map_values,
    preorder,
    size,
)
from .rendering import ASCII_STYLE, BOX_STYLE, RenderStyle, render
from .tree import EMPTY, Empty, Node, Tree, is_empty

__version__ = "0.1.0"

__all__ = [
    "ASCII_STYLE",
    "BOX_STYLE",
    "EMPTY",
    "Empty",
    "Node",
    "RenderStyle",
    "Tree",
    "build",
    "build_networkx_graph",
    "depth",
    "fold",
    "is_complete",
    "is_empty",
    "map_values",
    "preorder",
    "render",
    "size",
]
