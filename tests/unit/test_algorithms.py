"""Unit tests for the node-level tree algorithms."""

import pytest

from balanced_bst import algorithms
from balanced_bst.node import BinaryTreeNode


def chain(*keys):
    """Build a degenerate tree by plain BST insertion."""
    root = None
    for key in keys:
        root = algorithms.insert(root, key)
    return root


@pytest.mark.parametrize("keys", [None, []])
def test_build_empty_input(keys):
    assert algorithms.build(keys) is None


def test_build_invalid_range_yields_none():
    assert algorithms.build([1, 2, 3], 2, 1) is None


def test_build_picks_lower_middle():
    # (0 + 3) // 2 == 1, so the lower of the two middle keys wins
    root = algorithms.build([1, 2, 3, 4])
    assert root.key == 2
    assert root.left.key == 1
    assert root.right.key == 3
    assert root.right.right.key == 4


def test_build_sub_range():
    root = algorithms.build([10, 20, 30, 40, 50], 1, 3)
    assert root.key == 30
    assert root.left.key == 20
    assert root.right.key == 40
    assert algorithms.count(root) == 3


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, 0),
        (2, 1),
        (3, 1),
        (4, 2),
        (7, 2),
        (8, 3),
        (15, 3),
        (16, 4),
    ],
)
def test_build_minimal_height(n, expected):
    assert algorithms.height(algorithms.build(list(range(n)))) == expected


def test_insert_into_empty():
    root = algorithms.insert(None, 5)
    assert root.key == 5
    assert root.is_leaf()


def test_insert_greater_goes_right_equal_goes_left():
    root = BinaryTreeNode(5)
    algorithms.insert(root, 7)
    algorithms.insert(root, 5)
    assert root.right.key == 7
    assert root.left.key == 5


def test_delete_leaf():
    root = chain(5, 3, 8)
    root = algorithms.delete(root, 3)
    assert root.left is None
    assert root.right.key == 8


def test_delete_one_child_splices_child():
    root = chain(5, 3, 2)
    root = algorithms.delete(root, 3)
    assert root.left.key == 2
    assert root.left.is_leaf()


def test_delete_two_children_uses_inorder_successor():
    root = chain(50, 30, 70, 60, 80, 65)
    root = algorithms.delete(root, 50)
    assert root.key == 60
    # successor's right child moved up into its place
    assert root.right.left.key == 65
    assert algorithms.is_ordered(root)


def test_delete_root_leaf_empties_subtree():
    assert algorithms.delete(BinaryTreeNode(1), 1) is None


def test_delete_absent_key_returns_same_subtree():
    root = chain(5, 3, 8)
    assert algorithms.delete(root, 42) is root
    assert algorithms.count(root) == 3
    assert algorithms.delete(None, 42) is None


def test_delete_scoped_to_subtree():
    root = chain(50, 30, 70, 20, 40)
    root.left = algorithms.delete(root.left, 30)
    assert root.left.key == 40
    assert not algorithms.contains(root, 30)
    # keys outside the subtree are not reachable from it
    assert algorithms.delete(root.left, 70) is root.left
    assert algorithms.contains(root, 70)


def test_min_max_node():
    root = algorithms.build([1, 2, 3, 4, 5])
    assert algorithms.min_node(root).key == 1
    assert algorithms.max_node(root).key == 5
    assert algorithms.min_node(None) is None
    assert algorithms.max_node(None) is None


def test_find_node_and_contains():
    root = algorithms.build([1, 2, 3, 4, 5])
    assert algorithms.find_node(root, 4).key == 4
    assert algorithms.find_node(root, 6) is None
    assert algorithms.contains(root, 1)
    assert not algorithms.contains(None, 1)


def test_height_conventions():
    assert algorithms.height(None) == -1
    assert algorithms.height(BinaryTreeNode(1)) == 0
    assert algorithms.height(chain(1, 2, 3, 4)) == 3


def test_depth():
    root = chain(4, 2, 6, 1)
    assert algorithms.depth(root, 4) == 0
    assert algorithms.depth(root, 6) == 1
    assert algorithms.depth(root, 1) == 2
    assert algorithms.depth(root, 5) == -1
    assert algorithms.depth(None, 5) == -1


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([], True),
        ([1], True),
        ([2, 1], True),
        ([2, 1, 3], True),
        ([1, 2, 3], False),
        ([3, 2, 1], False),
        ([4, 3, 5, 2, 6, 1, 7], False),
        ([4, 2, 6, 1, 3, 5, 7], True),
    ],
)
def test_is_balanced(keys, expected):
    assert algorithms.is_balanced(chain(*keys)) is expected


def test_is_balanced_checks_every_node():
    # root heights differ by 0, but both children are unbalanced chains
    root = BinaryTreeNode(
        10,
        left=chain(5, 4, 3),
        right=chain(15, 16, 17),
    )
    assert abs(algorithms.height(root.left) - algorithms.height(root.right)) == 0
    assert not algorithms.is_balanced(root)


def test_is_ordered_detects_violation():
    root = BinaryTreeNode(10, left=BinaryTreeNode(5, right=BinaryTreeNode(12)))
    assert not algorithms.is_ordered(root)
    assert algorithms.is_ordered(chain(10, 5, 7, 15))
    assert algorithms.is_ordered(None)


def test_is_ordered_rejects_duplicates():
    assert not algorithms.is_ordered(chain(5, 5))


def test_deep_left_chain_without_recursion():
    root = None
    for key in range(3000, 0, -1):
        root = algorithms.insert(root, key)

    assert algorithms.height(root) == 2999
    assert algorithms.depth(root, 1) == 2999
    assert algorithms.find_node(root, 1).is_leaf()
    assert algorithms.count(root) == 3000
    assert algorithms.is_ordered(root)
    assert not algorithms.is_balanced(root)

    root = algorithms.delete(root, 3000)
    assert root.key == 2999
    assert algorithms.count(root) == 2999


def test_delete_two_children_successor_is_right_child():
    root = chain(5, 3, 8, 9)
    root = algorithms.delete(root, 5)
    assert root.key == 8
    assert root.right.key == 9
    assert root.left.key == 3
