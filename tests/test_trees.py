from collections import deque

import pytest

from algodrills.trees import (
    TreeNode,
    find_target,
    leaf_similar,
    leaves,
    max_depth,
    search_bst,
)


def build(level_order):
    """Build a tree from a level-order list where None marks a gap."""
    if not level_order or level_order[0] is None:
        return None
    items = iter(level_order)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def chain(size):
    root = None
    for value in range(size):
        root = TreeNode(value, left=root)
    return root


def insert_all(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            side = "left" if value < node.val else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(value))
                break
            node = child
    return root


def test_max_depth_example():
    assert max_depth(build([3, 9, 20, None, None, 15, 7])) == 3


def test_max_depth_empty_and_single():
    assert max_depth(None) == 0
    assert max_depth(TreeNode(1)) == 1


@pytest.mark.parametrize("size", [1, 2, 5, 20])
def test_max_depth_chain(size):
    assert max_depth(chain(size)) == size


BST = [5, 3, 6, 2, 4, None, 7]


@pytest.mark.parametrize("k, expected", [(9, True), (28, False), (13, True), (4, False)])
def test_find_target(k, expected):
    assert find_target(build(BST), k) is expected


def test_find_target_does_not_pair_node_with_itself():
    assert find_target(TreeNode(2), 4) is False
    assert find_target(None, 0) is False


def test_find_target_repeated_calls_agree():
    tree = build(BST)
    assert find_target(tree, 28) is False
    assert find_target(tree, 28) is False
    assert find_target(tree, 9) is True


@pytest.mark.parametrize("value", [1, 2, 3, 4, 7])
def test_search_bst_found(value):
    tree = build([4, 2, 7, 1, 3])
    node = search_bst(tree, value)
    assert node is not None and node.val == value


def test_search_bst_returns_subtree():
    node = search_bst(build([4, 2, 7, 1, 3]), 2)
    assert [node.left.val, node.right.val] == [1, 3]


@pytest.mark.parametrize("value", [5, 0, 100])
def test_search_bst_missing(value):
    assert search_bst(build([4, 2, 7, 1, 3]), value) is None


def test_leaves_example():
    tree = build([3, 5, 1, 6, 2, 9, 8, None, None, 7, 4])
    assert list(leaves(tree)) == [6, 7, 4, 9, 8]


def test_leaves_of_bst_are_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 10, 45, 65]
    result = list(leaves(insert_all(values)))
    assert result == sorted(result)
    assert set(result) <= set(values)


def test_leaves_empty_and_single():
    assert list(leaves(None)) == []
    assert list(leaves(TreeNode(8))) == [8]


def test_leaf_similar_example():
    first = build([3, 5, 1, 6, 2, 9, 8, None, None, 7, 4])
    second = build([3, 5, 1, 6, 7, 4, 2, None, None, None, None, None, None, 9, 8])
    assert leaf_similar(first, second) is True


def test_leaf_similar_different():
    assert leaf_similar(build([1, 2, 3]), build([1, 3, 2])) is False


def test_leaf_similar_is_reflexive_and_handles_empty():
    tree = build([3, 5, 1, 6, 2, 9, 8])
    assert leaf_similar(tree, tree) is True
    assert leaf_similar(None, None) is True
    assert leaf_similar(tree, None) is False