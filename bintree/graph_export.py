"""NetworkX export for binary trees.

``build_networkx_graph`` converts a tree into an ``nx.DiGraph`` so it can be
handed to ``networkx.draw`` or any other graph tooling. Nodes are keyed by
their 1-based heap position: the root is ``1`` and the children of position
``i`` are ``2 * i`` (left) and ``2 * i + 1`` (right). For trees produced by
:func:`bintree.build` the key of each node is therefore its position in the
input sequence.

NetworkX is imported lazily so the rest of the package works without it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Tuple, TypeAlias, TypeVar

from .tree import Node, Tree

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

__all__ = ["build_networkx_graph"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_networkx_graph(tree: Tree[T]) -> NxDiGraph:
    """Convert *tree* to a NetworkX ``DiGraph``.

    Every node carries a ``value`` attribute and every edge a ``side``
    attribute of ``"left"`` or ``"right"``. An empty tree yields an empty
    graph.
    """

    try:
        import networkx as nx  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - exercised via tests when missing
        raise ModuleNotFoundError(
            "NetworkX is required for graph export. Install it via 'pip install networkx'."
        ) from exc

    graph = nx.DiGraph()
    stack: List[Tuple[Tree[T], int]] = [(tree, 1)]
    while stack:
        current, position = stack.pop()
        if not isinstance(current, Node):
            continue
        graph.add_node(position, value=current.value)
        if position > 1:
            graph.add_edge(
                position // 2,
                position,
                side="left" if position % 2 == 0 else "right",
            )
        stack.append((current.right, 2 * position + 1))
        stack.append((current.left, 2 * position))

    logger.debug(
        "Exported tree with %d nodes and %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
