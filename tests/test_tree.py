from __future__ import annotations

import pytest

from bintree.tree import EMPTY, Empty, Node, is_empty


def test_empty_instances_are_equal() -> None:
    assert Empty() == EMPTY
    assert is_empty(EMPTY)
    assert repr(EMPTY) == "Empty"


def test_node_exposes_value_and_children() -> None:
    node = Node(10, EMPTY, EMPTY)
    assert node.value == 10
    assert node.left == EMPTY
    assert node.right == EMPTY
    assert node.is_leaf
    assert not is_empty(node)


def test_node_children_default_to_empty() -> None:
    assert Node(42) == Node(42, EMPTY, EMPTY)


def test_empty_has_no_node_fields() -> None:
    with pytest.raises(AttributeError):
        EMPTY.value  # type: ignore[attr-defined]


def test_node_is_immutable() -> None:
    node = Node(1)
    with pytest.raises(AttributeError):
        node.value = 2  # type: ignore[misc]


@pytest.mark.parametrize("child", [None, 3, [Node(1)], "leaf"])
def test_node_rejects_non_tree_children(child: object) -> None:
    with pytest.raises(TypeError):
        Node(1, child)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Node(1, EMPTY, child)  # type: ignore[arg-type]


def test_structural_equality_is_deep() -> None:
    left = Node(1, Node(2, Node(4)), Node(3))
    right = Node(1, Node(2, Node(4)), Node(3))
    assert left == right
    assert hash(left) == hash(right)


@pytest.mark.parametrize(
    "other",
    [
        Node(1, Node(2, Node(5)), Node(3)),
        Node(1, Node(2, EMPTY, Node(4)), Node(3)),
        Node(1, Node(2, Node(4)), EMPTY),
        Node(1, Node(2, Node(4)), Node(3, Node(6))),
        EMPTY,
    ],
)
def test_structural_inequality(other: object) -> None:
    tree = Node(1, Node(2, Node(4)), Node(3))
    assert tree != other
    assert other != tree


def test_left_and_right_children_are_distinguished() -> None:
    assert Node(1, Node(2), EMPTY) != Node(1, EMPTY, Node(2))


def test_node_compares_unequal_to_plain_values() -> None:
    assert Node(1) != 1
    assert Node(None) != EMPTY


def test_equality_on_deeply_skewed_trees() -> None:
    first = EMPTY
    second = EMPTY
    for value in range(50_000):
        first = Node(value, first)
        second = Node(value, second)
    assert first == second
    assert hash(first) == hash(second)
