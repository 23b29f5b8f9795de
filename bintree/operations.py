"""Read-only operations over :mod:`bintree.tree` values.

The public API covers the following capabilities:

* ``build`` – shapes a flat sequence into a complete binary tree using 1-based
  heap indexing (position ``i`` has children at ``2i`` and ``2i + 1``).
* ``preorder`` – root, left, right traversal into a fresh list.
* ``depth`` and ``size`` – level count and node count.
* ``fold`` – generic bottom-up reduction that the other helpers build on.
* ``map_values`` – shape-preserving transformation of every stored value.
* ``is_complete`` – reports whether a tree has the minimum depth possible for
  its node count.

Every traversal uses an explicit stack, so a heavily skewed tree costs heap
memory proportional to its depth instead of interpreter stack frames.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Tuple, TypeVar

from .tree import EMPTY, Empty, Node, Tree

__all__ = [
    "build",
    "depth",
    "fold",
    "is_complete",
    "map_values",
    "preorder",
    "size",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def build(values: Iterable[T]) -> Tree[T]:
    """Build a complete binary tree from *values* in heap order.

    The element at 1-based position ``i`` becomes the node whose left child is
    built from position ``2 * i`` and right child from ``2 * i + 1``. Positions
    past the end of the sequence are ``Empty``. Nodes are assembled from the
    last position back to the root so every child exists before its parent.

    >>> preorder(build([10, 20, 30, 40]))
    [10, 20, 40, 30]
    """

    items = list(values)
    count = len(items)
    logger.debug("Building tree from %d values", count)

    # built[i] holds the subtree rooted at 1-based position i.
    built: List[Tree[T]] = [EMPTY] * (count + 2)

    def subtree(position: int) -> Tree[T]:
        return built[position] if position <= count else EMPTY

    for position in range(count, 0, -1):
        built[position] = Node(
            items[position - 1],
            subtree(2 * position),
            subtree(2 * position + 1),
        )
    return built[1]


def fold(
    tree: Tree[T],
    empty: R,
    combine: Callable[[T, R, R], R],
) -> R:
    """Reduce *tree* bottom-up.

    ``Empty`` contributes *empty*; each node contributes
    ``combine(value, left_result, right_result)``. Children are always
    combined before their parent and the left child before the right one.
    """

    results: List[R] = []
    stack: List[Tuple[Tree[T], bool]] = [(tree, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Empty):
            results.append(empty)
        elif expanded:
            right = results.pop()
            left = results.pop()
            results.append(combine(current.value, left, right))
        else:
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
    return results.pop()


def preorder(tree: Tree[T]) -> List[T]:
    """Return the values of *tree* in root, left, right order."""

    values: List[T] = []
    stack: List[Tree[T]] = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, Node):
            values.append(current.value)
            stack.append(current.right)
            stack.append(current.left)
    return values


def depth(tree: Tree[T]) -> int:
    """Return the number of levels in *tree*; ``Empty`` has depth 0."""

    return fold(tree, 0, lambda _value, left, right: 1 + max(left, right))


def size(tree: Tree[T]) -> int:
    """Return the number of nodes in *tree*."""

    return fold(tree, 0, lambda _value, left, right: 1 + left + right)


def map_values(func: Callable[[T], U], tree: Tree[T]) -> Tree[U]:
    """Return a new tree of the same shape with *func* applied to each value.

    *func* is called once per node in postorder (left subtree, right subtree,
    then the node itself). The input tree is left untouched.
    """

    def combine(value: T, left: Tree[U], right: Tree[U]) -> Tree[U]:
        return Node(func(value), left, right)

    return fold(tree, EMPTY, combine)


def is_complete(tree: Tree[T]) -> bool:
    """Return ``True`` when *tree* is as shallow as its node count allows.

    A binary tree with ``n`` nodes needs at least ``ceil(log2(n + 1))`` levels,
    which equals ``n.bit_length()``. Trees produced by :func:`build` always
    satisfy this.
    """

    return depth(tree) == size(tree).bit_length()
