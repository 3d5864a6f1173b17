"""Binary tree drills: depth, BST search, pair sums and leaf sequences."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def find_target(root: TreeNode | None, k: int) -> bool:
    """Tell whether two distinct nodes of the tree sum to ``k``."""
    seen: set[int] = set()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if k - node.val in seen:
            return True
        seen.add(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return False


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node of a binary search tree holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def leaves(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of the tree's leaves from left to right."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_similar(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Tell whether two trees have the same leaf value sequence."""
    return list(leaves(root1)) == list(leaves(root2))