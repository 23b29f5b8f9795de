"""Immutable binary tree value type.

A tree is either :class:`Empty` or a :class:`Node` holding a value and two
child trees. Both variants are frozen dataclasses, so a tree never changes
after construction; operations that transform a tree build a new one.

Only :class:`Node` exposes ``value``, ``left`` and ``right``. Callers tell the
variants apart with ``isinstance`` instead of probing nullable fields::

    if isinstance(tree, Node):
        print(tree.value)

Equality and hashing on :class:`Node` walk the structure with an explicit
stack, which keeps comparisons of very deep (skewed) trees clear of the
interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Generic, Iterator, TypeVar, Union

__all__ = [
    "EMPTY",
    "Empty",
    "Node",
    "Tree",
    "is_empty",
]

T = TypeVar("T")

# Marker emitted for empty child slots while flattening a tree's shape.
_HOLE = object()


@dataclass(frozen=True, slots=True)
class Empty:
    """The empty tree. Carries no data; all instances are equal."""

    def __repr__(self) -> str:
        return "Empty"


EMPTY = Empty()


@dataclass(frozen=True, slots=True, eq=False)
class Node(Generic[T]):
    """A non-empty tree: a value plus its left and right subtrees."""

    value: T
    left: Tree[T] = EMPTY
    right: Tree[T] = EMPTY

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, (Empty, Node)):
                raise TypeError(
                    f"Node.{side} must be Empty or Node, got {type(child).__name__}"
                )

    @property
    def is_leaf(self) -> bool:
        """Return ``True`` when both children are empty."""

        return isinstance(self.left, Empty) and isinstance(self.right, Empty)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        missing = object()
        pairs = zip_longest(_shape(self), _shape(other), fillvalue=missing)
        return all(
            mine is theirs
            or (mine is not _HOLE and theirs is not _HOLE and mine == theirs)
            for mine, theirs in pairs
        )

    def __hash__(self) -> int:
        return hash(tuple(_shape(self)))


Tree = Union[Empty, Node[T]]


def is_empty(tree: Tree[T]) -> bool:
    """Return ``True`` when *tree* is the empty tree."""

    return isinstance(tree, Empty)


def _shape(tree: Tree[T]) -> Iterator[object]:
    """Yield values in preorder with :data:`_HOLE` for every empty slot.

    Two trees are equal exactly when these sequences match element-wise.
    """

    stack: list[Tree[T]] = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, Empty):
            yield _HOLE
            continue
        yield current.value
        stack.append(current.right)
        stack.append(current.left)
