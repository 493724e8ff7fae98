"""Binary search tree handle owning the root node.

The tree is height-balanced right after construction and after rebalance().
insert() and delete() do not rebalance; call rebalance() to restore balance
after a sequence of mutations.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, Sequence

from . import algorithms
from .config import TreeConfig
from .errors import DuplicateKeyError, InvariantError, UnsortedInputError
from .node import BinaryTreeNode
from .render import render
from .traversal import iter_nodes
from .types import K, TraversalOrder, Visitor
from .utils import sorted_unique

logger = logging.getLogger(__name__)

# Default for height(): distinguishes "whole tree" from an explicit empty subtree
_ROOT = object()


class BinarySearchTree(Generic[K]):
    """Binary search tree over unique, totally ordered keys.

    Args:
        keys: Keys sorted ascending without duplicates, or None for an empty tree
        config: Tree configuration, defaults to TreeConfig()

    Invariants:
        - Every key in a node's left subtree is smaller than the node's key,
          every key in its right subtree is larger
        - Keys are unique
        - size always equals the number of nodes
    """

    __slots__ = ("_root", "_size", "config")

    def __init__(
        self, keys: Optional[Sequence[K]] = None, config: Optional[TreeConfig] = None
    ) -> None:
        self.config = config or TreeConfig()
        self._root: Optional[BinaryTreeNode[K]] = None
        self._size = 0
        self._load(keys)

    @classmethod
    def from_iterable(
        cls, values: Optional[Iterable[K]], config: Optional[TreeConfig] = None
    ) -> BinarySearchTree[K]:
        """Builds a balanced tree from any collection, dropping duplicates."""
        return cls(sorted_unique(values), config=config)

    def _load(self, keys: Optional[Sequence[K]]) -> None:
        if self.config.validate_input and keys:
            for i in range(1, len(keys)):
                if not keys[i - 1] < keys[i]:
                    raise UnsortedInputError(i, keys[i - 1], keys[i])

        self._root = algorithms.build(keys)
        self._size = len(keys) if keys else 0
        logger.debug(f"Built tree with {self._size} keys")

    @property
    def root(self) -> Optional[BinaryTreeNode[K]]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # -------------------------------
    # Mutation
    # -------------------------------
    def insert(self, key: K) -> bool:
        """
        Inserts key as a new leaf. Returns True if a node was added.
        A key that is already present is ignored (returns False) or raises
        DuplicateKeyError, depending on config.on_duplicate.
        The tree is not rebalanced.
        Time Complexity: O(h), h being the current height
        """
        if algorithms.contains(self._root, key):
            if self.config.on_duplicate == "raise":
                raise DuplicateKeyError(key)
            logger.warning(f"Ignoring duplicate key {key!r}")
            return False

        self._root = algorithms.insert(self._root, key)
        self._size += 1
        return True

    def delete(self, key: K) -> bool:
        """
        Deletes key from the tree. Returns True if it was present.
        Deleting an absent key is a no-op. The tree is not rebalanced.
        Time Complexity: O(h), h being the current height
        """
        if not algorithms.contains(self._root, key):
            logger.debug(f"Delete of absent key {key!r} ignored")
            return False

        self._root = algorithms.delete(self._root, key)
        self._size -= 1
        return True

    def rebalance(self) -> None:
        """
        Rebuilds the tree into minimal height from its inorder key sequence.
        Time Complexity: O(n)
        Space Complexity: O(n) for the intermediate key list
        """
        keys = self.inorder_keys()
        before = self.height()
        self._root = algorithms.build(keys)
        logger.info(f"Rebalanced {len(keys)} keys, height {before} -> {self.height()}")

    # -------------------------------
    # Search
    # -------------------------------
    def find(self, key: K) -> bool:
        """
        Returns True if key is stored in the tree.
        Time Complexity: Avg. O(logn), O(n) worst case for an unbalanced tree
        """
        return algorithms.contains(self._root, key)

    def __contains__(self, key: object) -> bool:
        return self.find(key)  # type: ignore[arg-type]

    def get_node(self, key: K) -> Optional[BinaryTreeNode[K]]:
        return algorithms.find_node(self._root, key)

    def min(self) -> Optional[K]:
        node = algorithms.min_node(self._root)
        return None if node is None else node.key

    def max(self) -> Optional[K]:
        node = algorithms.max_node(self._root)
        return None if node is None else node.key

    # -------------------------------
    # Traversals
    # -------------------------------
    def nodes(self, order: TraversalOrder = TraversalOrder.IN) -> Iterator[BinaryTreeNode[K]]:
        """Returns a lazy iterator over the nodes in the given order."""
        return iter_nodes(self._root, order)

    def _visit(self, order: TraversalOrder, visit: Visitor) -> None:
        for node in iter_nodes(self._root, order):
            visit(node)

    def _keys(self, order: TraversalOrder) -> List[K]:
        return [node.key for node in iter_nodes(self._root, order)]

    def level_order(self, visit: Visitor) -> None:
        self._visit(TraversalOrder.LEVEL, visit)

    def inorder(self, visit: Visitor) -> None:
        self._visit(TraversalOrder.IN, visit)

    def preorder(self, visit: Visitor) -> None:
        self._visit(TraversalOrder.PRE, visit)

    def postorder(self, visit: Visitor) -> None:
        self._visit(TraversalOrder.POST, visit)

    def level_order_keys(self) -> List[K]:
        return self._keys(TraversalOrder.LEVEL)

    def inorder_keys(self) -> List[K]:
        return self._keys(TraversalOrder.IN)

    def preorder_keys(self) -> List[K]:
        return self._keys(TraversalOrder.PRE)

    def postorder_keys(self) -> List[K]:
        return self._keys(TraversalOrder.POST)

    def to_list(self) -> List[K]:
        """Return all keys of the tree in ascending order."""
        return self.inorder_keys()

    def __iter__(self) -> Iterator[K]:
        for node in iter_nodes(self._root, TraversalOrder.IN):
            yield node.key

    # -------------------------------
    # Shape
    # -------------------------------
    def height(self, node: Optional[BinaryTreeNode[K]] = _ROOT) -> int:  # type: ignore[assignment]
        """
        Returns the height (in edges) of node, or of the whole tree if omitted.
        NOTE: an empty tree reports config.empty_height (0 by default), while
        an empty subtree, including an explicit None, has height -1.
        Time Complexity: O(n) for the nodes below
        """
        if node is _ROOT:
            if self._root is None:
                return self.config.empty_height
            node = self._root
        return algorithms.height(node)

    def depth(self, key: K) -> int:
        """Returns the number of edges from the root to key, or -1 if absent."""
        return algorithms.depth(self._root, key)

    def is_balanced(self) -> bool:
        return algorithms.is_balanced(self._root)

    def validate(self) -> None:
        """Raises InvariantError if the ordering or size bookkeeping is broken."""
        if not algorithms.is_ordered(self._root):
            raise InvariantError("BST ordering violated")
        actual = algorithms.count(self._root)
        if actual != self._size:
            raise InvariantError(f"Size mismatch: tracked {self._size}, found {actual}")

    # -------------------------------
    # Display
    # -------------------------------
    def pretty_print(self) -> str:
        return render(self._root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_list()})"
