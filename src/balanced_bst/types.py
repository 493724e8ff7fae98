"""Common type definitions for the balanced BST.

Defines the key protocol and the aliases shared across modules.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar

if TYPE_CHECKING:
    from .node import BinaryTreeNode


# Keys only need ordering comparisons; equality comes from object
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __ge__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=Comparable)

Visitor = Callable[["BinaryTreeNode[Any]"], None]


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""

    LEVEL = "level"
    IN = "in"
    PRE = "pre"
    POST = "post"
