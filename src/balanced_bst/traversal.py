"""Lazy traversals over a subtree.

Each function returns a fresh generator, so a traversal can be restarted
by calling it again. None of them modify the tree.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional, Tuple

from .node import BinaryTreeNode
from .types import K, TraversalOrder


def iter_level_order(root: Optional[BinaryTreeNode[K]]) -> Iterator[BinaryTreeNode[K]]:
    """Breadth-first: the root, then each level left to right."""
    if root is None:
        return

    queue: deque[BinaryTreeNode[K]] = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def iter_inorder(node: Optional[BinaryTreeNode[K]]) -> Iterator[BinaryTreeNode[K]]:
    """Left, node, right. Keys come out in ascending order."""
    stack: List[BinaryTreeNode[K]] = []
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node
            node = node.right


def iter_preorder(node: Optional[BinaryTreeNode[K]]) -> Iterator[BinaryTreeNode[K]]:
    """Node, left, right."""
    if node is None:
        return

    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        # right first so the left subtree is popped next
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def iter_postorder(node: Optional[BinaryTreeNode[K]]) -> Iterator[BinaryTreeNode[K]]:
    """Left, right, node."""
    if node is None:
        return

    # a node is yielded on its second pop, after both subtrees
    stack: List[Tuple[BinaryTreeNode[K], bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            yield current
            continue
        stack.append((current, True))
        if current.right is not None:
            stack.append((current.right, False))
        if current.left is not None:
            stack.append((current.left, False))


_ITERATORS = {
    TraversalOrder.LEVEL: iter_level_order,
    TraversalOrder.IN: iter_inorder,
    TraversalOrder.PRE: iter_preorder,
    TraversalOrder.POST: iter_postorder,
}


def iter_nodes(
    root: Optional[BinaryTreeNode[K]], order: TraversalOrder = TraversalOrder.IN
) -> Iterator[BinaryTreeNode[K]]:
    return _ITERATORS[order](root)
