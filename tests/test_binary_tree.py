import pytest

from algobox.binary_tree import (
    TreeNode,
    build_tree,
    inorder,
    is_same_tree,
    sum_of_longest_root_to_leaf_path,
)


def test_empty_and_null_root():
    assert build_tree("") is None
    assert build_tree("N 1 2") is None
    assert inorder(None) == []


def test_level_order_build():
    root = build_tree("1 2 3")
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert inorder(root) == [2, 1, 3]


def test_gaps_build_right_chain():
    root = build_tree("1 N 2 N 3")
    assert root.left is None
    assert inorder(root) == [1, 2, 3]


def test_missing_trailing_tokens():
    root = build_tree("1 2")
    assert root.right is None
    assert inorder(root) == [2, 1]


def test_bad_token_raises():
    with pytest.raises(ValueError):
        build_tree("1 x 3")


def test_longest_path_worked_example():
    root = build_tree("4 2 5 7 1 2 3 N N 6 N")
    assert sum_of_longest_root_to_leaf_path(root) == 13


def test_longest_path_single_node_and_empty():
    assert sum_of_longest_root_to_leaf_path(build_tree("7")) == 7
    assert sum_of_longest_root_to_leaf_path(None) == 0


def test_longest_path_chain_sums_every_node():
    values = [1, 2, 3, 4]
    root = build_tree("1 2 N 3 N 4")
    assert sum_of_longest_root_to_leaf_path(root) == sum(values)


def test_longest_path_tie_takes_larger_sum():
    root = build_tree("1 2 3")
    assert sum_of_longest_root_to_leaf_path(root) == 1 + max(2, 3)


def test_same_tree():
    text = "5 3 8 1 N 7 9"
    assert is_same_tree(build_tree(text), build_tree(text))
    assert is_same_tree(None, None)


def test_different_trees():
    assert not is_same_tree(build_tree("1 2"), build_tree("1 N 2"))
    assert not is_same_tree(build_tree("1 2 3"), build_tree("1 2 4"))
    assert not is_same_tree(TreeNode(1), None)