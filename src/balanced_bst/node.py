from __future__ import annotations

from typing import Generic, Optional

from .types import K


class BinaryTreeNode(Generic[K]):
    """A node in a binary search tree.

    Each node exclusively owns its children; there are no parent links.
    """

    __slots__ = ("key", "left", "right")

    def __init__(
        self,
        key: K,
        left: Optional[BinaryTreeNode[K]] = None,
        right: Optional[BinaryTreeNode[K]] = None,
    ) -> None:
        self.key: K = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.key!r})"
