"""Exception hierarchy for the balanced BST.

Lookups and deletions of absent keys never raise; these are reserved for
precondition violations.
"""

from __future__ import annotations


class BSTError(Exception):
    """Base exception for all tree errors."""
    pass


class DuplicateKeyError(BSTError):
    """Raised when inserting a key that is already stored (strict policy)."""

    def __init__(self, key: object):
        super().__init__(f"Key already present: {key!r}")
        self.key = key


class UnsortedInputError(BSTError):
    """Raised when a tree is built from keys that are not strictly ascending."""

    def __init__(self, index: int, previous: object, current: object):
        super().__init__(
            f"Keys must be sorted and unique: {previous!r} at index {index - 1} "
            f"is not less than {current!r} at index {index}"
        )
        self.index = index


class InvariantError(BSTError):
    """Raised when the BST ordering invariant does not hold."""
    pass
