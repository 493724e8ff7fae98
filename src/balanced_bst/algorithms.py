"""
Algorithms over binary search tree nodes.

Every function takes a subtree root (possibly None) and works on that
subtree only, so they can be scoped to any part of a tree. Functions that
change the shape return the new subtree root, which the caller must store
back into the parent slot (or the tree's root).

Insert and delete never rebalance, so a subtree can degenerate into a chain
as long as the number of keys. Everything that walks such a subtree loops
with an explicit stack instead of recursing per level. Only build recurses,
and its depth is logarithmic.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .node import BinaryTreeNode
from .traversal import iter_postorder, iter_preorder
from .types import K


def build(
    keys: Optional[Sequence[K]], start: int = 0, end: Optional[int] = None
) -> Optional[BinaryTreeNode[K]]:
    """
    Builds a height-balanced subtree from keys[start..end] (inclusive).
    The keys must already be sorted ascending and unique; they are not checked here.
    The middle key becomes the subtree root, the lower half builds the left
    subtree and the upper half the right subtree.
    Time Complexity: O(n), each key is visited once
    Space Complexity: O(logn) for recursion stack space
    """
    if not keys:
        return None
    if end is None:
        end = len(keys) - 1
    if start > end:
        return None

    # floor division biases ties towards the lower half
    mid = (start + end) // 2
    node = BinaryTreeNode(keys[mid])
    node.left = build(keys, start, mid - 1)
    node.right = build(keys, mid + 1, end)
    return node


def insert(node: Optional[BinaryTreeNode[K]], key: K) -> BinaryTreeNode[K]:
    """
    Attaches key as a new leaf below node and returns the subtree root.
    Greater keys go right, everything else goes left. No duplicate check
    and no rebalancing happen here.
    Time Complexity: O(h), where h is the height of the subtree
    """
    leaf = BinaryTreeNode(key)
    if node is None:
        return leaf

    current = node
    while True:
        if key > current.key:
            if current.right is None:
                current.right = leaf
                return node
            current = current.right
        else:
            if current.left is None:
                current.left = leaf
                return node
            current = current.left


def delete(node: Optional[BinaryTreeNode[K]], key: K) -> Optional[BinaryTreeNode[K]]:
    """
    Removes key from the subtree and returns the new subtree root.
    A node with two children takes the key of its inorder successor, which
    is then spliced out of the right subtree. Absent keys leave the subtree unchanged.
    Time Complexity: O(h), where h is the height of the subtree
    """
    parent: Optional[BinaryTreeNode[K]] = None
    current = node
    while current is not None and key != current.key:
        parent = current
        current = current.left if key < current.key else current.right

    if current is None:
        return node

    if current.left is not None and current.right is not None:
        # the successor has no left child, so its right child takes its slot
        successor_parent = current
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        current.key = successor.key
        if successor_parent is current:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return node

    # leaf or single child: splice the child into this slot
    child = current.left if current.left is not None else current.right
    if parent is None:
        return child
    if parent.left is current:
        parent.left = child
    else:
        parent.right = child
    return node


def min_node(node: Optional[BinaryTreeNode[K]]) -> Optional[BinaryTreeNode[K]]:
    """Returns the leftmost node of the subtree, or None if it is empty."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def max_node(node: Optional[BinaryTreeNode[K]]) -> Optional[BinaryTreeNode[K]]:
    """Returns the rightmost node of the subtree, or None if it is empty."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def find_node(node: Optional[BinaryTreeNode[K]], key: K) -> Optional[BinaryTreeNode[K]]:
    """
    Binary search for key, returning the node that holds it or None.
    Time Complexity: Avg. O(logn), O(n) worst case for a degenerate tree
    """
    while node is not None:
        if key == node.key:
            return node
        node = node.left if key < node.key else node.right
    return None


def contains(node: Optional[BinaryTreeNode[K]], key: K) -> bool:
    return find_node(node, key) is not None


def height(node: Optional[BinaryTreeNode[K]]) -> int:
    """
    Returns the number of edges on the longest path from node down to a leaf.
    An empty subtree has height -1, so a leaf has height 0.
    Time Complexity: O(n) since every node below is visited, one level at a time
    """
    edges = -1
    level: List[BinaryTreeNode[K]] = [] if node is None else [node]
    while level:
        edges += 1
        level = [child for n in level for child in (n.left, n.right) if child is not None]
    return edges


def depth(node: Optional[BinaryTreeNode[K]], key: K) -> int:
    """
    Returns the number of edges from node down to the node holding key,
    or -1 if the key is not in the subtree.
    Time Complexity: O(h), only the path dictated by the ordering is searched
    """
    edges = 0
    while node is not None:
        if key == node.key:
            return edges
        node = node.left if key < node.key else node.right
        edges += 1
    return -1


def is_balanced(node: Optional[BinaryTreeNode[K]]) -> bool:
    """
    Checks that at every node the heights of the left and right subtrees
    differ by at most 1. An empty subtree is balanced.
    Time Complexity: O(n), heights are computed bottom-up in a single postorder pass
    """
    # postorder guarantees both children are measured before their parent
    heights: Dict[int, int] = {}
    for n in iter_postorder(node):
        left = -1 if n.left is None else heights.pop(id(n.left))
        right = -1 if n.right is None else heights.pop(id(n.right))
        if abs(left - right) > 1:
            return False
        heights[id(n)] = max(left, right) + 1
    return True


def count(node: Optional[BinaryTreeNode[K]]) -> int:
    return sum(1 for _ in iter_preorder(node))


def is_ordered(node: Optional[BinaryTreeNode[K]]) -> bool:
    """Checks the strict ordering invariant: left keys < node key < right keys."""
    if node is None:
        return True

    # each entry carries the open interval its keys must fall in
    stack: List[Tuple[BinaryTreeNode[K], Optional[K], Optional[K]]] = [(node, None, None)]
    while stack:
        n, low, high = stack.pop()
        if low is not None and not n.key > low:
            return False
        if high is not None and not n.key < high:
            return False
        if n.left is not None:
            stack.append((n.left, low, n.key))
        if n.right is not None:
            stack.append((n.right, n.key, high))
    return True
