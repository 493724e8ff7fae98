"""Configuration for the balanced BST."""

from __future__ import annotations

from dataclasses import dataclass

DUPLICATE_POLICIES = ("ignore", "raise")


@dataclass
class TreeConfig:
    """Tunable behaviour of a BinarySearchTree.

    Attributes:
        on_duplicate: What insert does with a key that is already stored.
            "ignore" leaves the tree untouched and returns False,
            "raise" raises DuplicateKeyError.
        validate_input: Check that construction input is strictly ascending
        empty_height: Height reported for a tree with no root. Kept at 0 for
            compatibility even though an empty subtree has height -1.
    """

    on_duplicate: str = "ignore"
    validate_input: bool = True
    empty_height: int = 0

    def __post_init__(self) -> None:
        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {self.on_duplicate!r}"
            )
