"""Text rendering of binary trees with branch connectors.

``render`` draws one value per line. Children are listed beneath their parent,
each behind a connector that shows whether more siblings follow::

    1
    ├── 2
    │   ├── 4
    │   └── 5
    └── 3

A node with a single child draws that child behind the terminal connector.
The connector glyphs come from a :class:`RenderStyle`; ``BOX_STYLE`` is the
default and ``ASCII_STYLE`` suits terminals without box-drawing characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, TypeVar

from .tree import Empty, Node, Tree

__all__ = ["ASCII_STYLE", "BOX_STYLE", "RenderStyle", "render"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RenderStyle:
    """Connector pieces used by :func:`render`.

    Attributes:
        branch:   Drawn before a child that has a later sibling.
        last:     Drawn before the final child of a node.
        vertical: Indentation under a ``branch`` child, continuing the bar.
        blank:    Indentation under a ``last`` child.
    """

    branch: str = "├── "
    last: str = "└── "
    vertical: str = "│   "
    blank: str = "    "

    def __post_init__(self) -> None:
        for name in ("branch", "last", "vertical", "blank"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"RenderStyle.{name} must be a string")
        if len(self.vertical) != len(self.blank):
            msg = (
                "RenderStyle.vertical and RenderStyle.blank must have the same width,"
                f" got {len(self.vertical)} and {len(self.blank)}"
            )
            raise ValueError(msg)


BOX_STYLE = RenderStyle()
ASCII_STYLE = RenderStyle(branch="|-- ", last="`-- ", vertical="|   ", blank="    ")


def render(tree: Tree[T], style: RenderStyle = BOX_STYLE) -> str:
    """Render *tree* as multi-line text.

    An empty tree renders as ``""``; a leaf renders as ``str(value)``. Lines are
    joined with ``\\n`` and carry no trailing newline.
    """

    if isinstance(tree, Empty):
        return ""

    lines: List[str] = []
    # (node, text before the node's value, indentation for its children)
    stack: List[Tuple[Node[T], str, str]] = [(tree, "", "")]
    while stack:
        node, lead, indent = stack.pop()
        lines.append(f"{lead}{node.value}")
        left, right = node.left, node.right
        if isinstance(left, Node) and isinstance(right, Node):
            stack.append((right, indent + style.last, indent + style.blank))
            stack.append((left, indent + style.branch, indent + style.vertical))
        elif isinstance(left, Node):
            stack.append((left, indent + style.last, indent + style.blank))
        elif isinstance(right, Node):
            stack.append((right, indent + style.last, indent + style.blank))
    return "\n".join(lines)
