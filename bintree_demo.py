"""Command line demonstration for the ``bintree`` package.

Running the module walks through a fixed set of example trees (hand-built
trees, trees built from integer lists, trees holding other value types) and
prints each rendering alongside its preorder traversal, depth and element
count. A short properties table compares every example's depth with the
minimum depth possible for its size.

``--interactive`` then opens a prompt that reads comma-separated integers,
builds a tree from them and prints the result; ``--values`` skips the demos
and renders a single tree instead.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from bintree import (
    ASCII_STYLE,
    BOX_STYLE,
    EMPTY,
    Node,
    RenderStyle,
    Tree,
    build,
    depth,
    is_complete,
    preorder,
    render,
    size,
)

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


class TreeInputError(ValueError):
    """Raised when user supplied text is not a comma separated integer list."""


@dataclass(frozen=True)
class DemoCase:
    """Container describing a named list of values to build a tree from."""

    name: str
    values: Sequence[object]

    def build(self) -> Tree[object]:
        """Materialise the tree associated with this demo case."""

        return build(self.values)


def parse_values(text: str) -> List[int]:
    """Parse ``"1, 2, 3"`` into ``[1, 2, 3]``.

    Blank input yields an empty list. Any token that is not an integer,
    including an empty token between two commas, raises ``TreeInputError``.
    """

    if not text.strip():
        return []
    values: List[int] = []
    for token in text.split(","):
        token = token.strip()
        try:
            values.append(int(token))
        except ValueError as exc:
            raise TreeInputError(f"Not an integer: {token!r}") from exc
    return values


def _join(values: Sequence[object]) -> str:
    return ", ".join(str(value) for value in values)


def format_statistics(tree: Tree[object], values: Sequence[object]) -> List[str]:
    """Return the statistics block printed after an interactive build."""

    return [
        "Tree Statistics:",
        f"  • Original input: {_join(values)}",
        f"  • Preorder traversal: {_join(preorder(tree))}",
        f"  • Number of elements: {size(tree)}",
        f"  • Tree depth: {depth(tree)}",
        f"  • Is complete binary tree: {is_complete(tree)}",
    ]


def _format_tree(tree: Tree[object], style: RenderStyle) -> List[str]:
    rendered = render(tree, style)
    return rendered.splitlines() if rendered else ["<empty>"]


def _format_summary(tree: Tree[object]) -> List[str]:
    return [
        f"  Elements: {size(tree)}",
        f"  Depth: {depth(tree)}",
        f"  Preorder: {preorder(tree)}",
    ]


def _iter_build_cases() -> Iterator[DemoCase]:
    """Yield the integer lists used by the build demonstration."""

    yield DemoCase(name="Numbers 1-7", values=[1, 2, 3, 4, 5, 6, 7])
    yield DemoCase(name="Powers of 2", values=[1, 2, 4, 8, 16])
    yield DemoCase(name="Fibonacci", values=[1, 1, 2, 3, 5, 8, 13])
    yield DemoCase(name="Random numbers", values=[42, 17, 99, 3, 88])


def _iter_typed_cases() -> Iterator[DemoCase]:
    """Yield cases showing trees over non-integer payloads."""

    yield DemoCase(
        name="String tree", values=["root", "left", "right", "deep", "leaf"]
    )
    yield DemoCase(name="Character tree", values=list("ABCDE"))
    yield DemoCase(name="Negative numbers", values=[-10, -5, 0, 5, 10])


def _iter_property_cases() -> Iterator[DemoCase]:
    """Yield the cases summarised in the properties table."""

    yield DemoCase(name="Balanced", values=[1, 2, 3, 4, 5, 6, 7])
    yield DemoCase(name="Small", values=[10, 20])
    yield DemoCase(name="Single", values=[100])
    yield DemoCase(name="Large", values=list(range(1, 16)))


def basic_demo_lines(style: RenderStyle = BOX_STYLE) -> List[str]:
    """Return the output for hand-built trees."""

    complex_tree = Node(
        1,
        Node(2, Node(4), Node(5)),
        Node(3, Node(6), Node(7)),
    )
    lines = ["Demo 1: Basic Tree Operations", "-" * 40]
    lines.append("Empty tree:")
    lines.extend(_format_summary(EMPTY))
    lines.append("")
    lines.append("Single node tree (value: 42):")
    lines.extend(_format_summary(Node(42)))
    lines.append("")
    lines.append("Complex tree:")
    lines.extend(_format_tree(complex_tree, style))
    lines.extend(_format_summary(complex_tree))
    lines.append("")
    return lines


def build_demo_lines(style: RenderStyle = BOX_STYLE) -> List[str]:
    """Return the output for trees built from integer lists."""

    lines = ["Demo 2: Building Trees from Lists", "-" * 40]
    for case in _iter_build_cases():
        tree = case.build()
        lines.append(f"{case.name}: {_join(case.values)}")
        lines.append("Generated tree:")
        lines.extend(_format_tree(tree, style))
        lines.append(f"  Preorder traversal: {preorder(tree)}")
        lines.append(f"  Tree depth: {depth(tree)}")
        lines.append(f"  Number of elements: {size(tree)}")
        lines.append("")
    return lines


def typed_demo_lines(style: RenderStyle = BOX_STYLE) -> List[str]:
    """Return the output for trees holding strings, characters and negatives."""

    lines = ["Demo 3: Different Data Types", "-" * 40]
    for case in _iter_typed_cases():
        tree = case.build()
        lines.append(f"{case.name} from: {_join(case.values)}")
        lines.extend(_format_tree(tree, style))
        lines.append(f"  Preorder: {preorder(tree)}")
        lines.append("")
    return lines


def properties_demo_lines() -> List[str]:
    """Return the depth-versus-minimum-depth table."""

    lines = ["Tree Properties Analysis:", "-" * 40]
    for case in _iter_property_cases():
        tree = case.build()
        elements = size(tree)
        lines.append(
            f"{case.name:>10}: {elements:2d} elements, depth {depth(tree):2d}"
            f" (min possible: {elements.bit_length():2d})"
        )
    lines.append("")
    return lines


def interactive_loop(
    read: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
    style: RenderStyle = BOX_STYLE,
) -> int:
    """Prompt for integer lists until ``quit`` or end of input.

    Returns the number of trees that were built.
    """

    if read is None:
        read = input

    write("Enter comma-separated integers to build a tree (or 'quit' to exit):")
    write("Example: 1,2,3,4,5")
    write("")

    built = 0
    while True:
        try:
            line = read("Enter numbers: ")
        except EOFError:
            line = None
        if line is None or line.strip().lower() == QUIT_COMMAND:
            write("Goodbye!")
            return built

        try:
            numbers = parse_values(line)
        except TreeInputError as exc:
            logger.warning("Rejected input %r: %s", line, exc)
            write("Invalid input. Please enter comma-separated integers.")
            write("")
            continue

        if not numbers:
            write("Please enter at least one number.")
            write("")
            continue

        tree = build(numbers)
        built += 1
        write("")
        write("Generated tree:")
        for rendered in _format_tree(tree, style):
            write(rendered)
        write("")
        for stat in format_statistics(tree, numbers):
            write(stat)
        write("")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Binary tree demonstration")
    parser.add_argument(
        "--values",
        default=None,
        help="Comma separated integers to build a single tree from (skips the demos)",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for integer lists after the demonstrations",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw connectors with ASCII characters instead of box-drawing glyphs",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Execute the demonstration flow and return a process exit code."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    style = ASCII_STYLE if args.ascii else BOX_STYLE

    if args.values is not None:
        try:
            numbers = parse_values(args.values)
        except TreeInputError as exc:
            logger.error("Failed to parse --values: %s", exc)
            return 2
        tree = build(numbers)
        for line in _format_tree(tree, style):
            print(line)
        for line in format_statistics(tree, numbers):
            print(line)
        return 0

    print("=" * 60)
    print("Binary Tree Demo")
    print("=" * 60)
    print()
    for line in (
        basic_demo_lines(style)
        + build_demo_lines(style)
        + typed_demo_lines(style)
        + properties_demo_lines()
    ):
        print(line)

    if args.interactive:
        interactive_loop(style=style)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
