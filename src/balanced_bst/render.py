"""Text rendering of a tree for debugging.

The tree is drawn sideways: the right subtree above its parent and the left
subtree below, so reading the keys top to bottom gives descending order.
The exact format carries no compatibility guarantee.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .node import BinaryTreeNode
from .types import K

EMPTY = "<empty>"


def render(root: Optional[BinaryTreeNode[K]]) -> str:
    if root is None:
        return EMPTY

    lines: List[str] = []
    # (node, prefix, is_left, emit): emit=True writes the node's own line,
    # otherwise the node is expanded into right subtree, line, left subtree
    stack: List[Tuple[BinaryTreeNode[K], str, bool, bool]] = [(root, "", True, False)]
    while stack:
        node, prefix, is_left, emit = stack.pop()
        if emit:
            lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
            continue
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + ("│   " if is_left else "    "), False, False))
    return "\n".join(lines)
