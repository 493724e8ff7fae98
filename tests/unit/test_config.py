"""Unit tests for configuration, errors and the input helper."""

import pytest

from balanced_bst import (
    BSTError,
    DuplicateKeyError,
    InvariantError,
    TreeConfig,
    UnsortedInputError,
    sorted_unique,
)


def test_default_config():
    config = TreeConfig()
    assert config.on_duplicate == "ignore"
    assert config.validate_input is True
    assert config.empty_height == 0


def test_config_rejects_unknown_duplicate_policy():
    with pytest.raises(ValueError, match="on_duplicate"):
        TreeConfig(on_duplicate="allow")


@pytest.mark.parametrize("error", [DuplicateKeyError, UnsortedInputError, InvariantError])
def test_error_hierarchy(error):
    assert issubclass(error, BSTError)


def test_duplicate_key_error_carries_key():
    err = DuplicateKeyError(42)
    assert err.key == 42
    assert "42" in str(err)


def test_unsorted_input_error_message():
    err = UnsortedInputError(3, 9, 4)
    assert err.index == 3
    assert "9" in str(err) and "4" in str(err)


@pytest.mark.parametrize(
    "data, expected",
    [
        ([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324], [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]),
        (["b", "a", "b", "c"], ["a", "b", "c"]),
        ((3, 3, 3), [3]),
        ([], []),
        (None, []),
        ([[2, 1], [1, 2], [2, 1]], [[1, 2], [2, 1]]),
    ],
)
def test_sorted_unique(data, expected):
    assert sorted_unique(data) == expected
