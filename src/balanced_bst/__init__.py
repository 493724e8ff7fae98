"""Balanced BST - a binary search tree rebuilt into minimal height on demand."""

from .config import TreeConfig
from .errors import BSTError, DuplicateKeyError, InvariantError, UnsortedInputError
from .node import BinaryTreeNode
from .render import render
from .traversal import (
    iter_inorder,
    iter_level_order,
    iter_nodes,
    iter_postorder,
    iter_preorder,
)
from .tree import BinarySearchTree
from .types import Comparable, TraversalOrder
from .utils import sorted_unique

__all__ = [
    "TreeConfig",
    "BSTError",
    "DuplicateKeyError",
    "InvariantError",
    "UnsortedInputError",
    "BinaryTreeNode",
    "BinarySearchTree",
    "Comparable",
    "TraversalOrder",
    "iter_inorder",
    "iter_level_order",
    "iter_nodes",
    "iter_postorder",
    "iter_preorder",
    "render",
    "sorted_unique",
]
