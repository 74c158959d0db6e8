"""Plain binary trees: level-order parsing, traversal and comparison."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(text: str) -> Optional[TreeNode]:
    """Build a tree from space-separated level-order values, ``N`` marking a gap."""
    tokens = text.split()
    if not tokens or tokens[0] == "N":
        return None
    root = TreeNode(int(tokens[0]))
    pending = deque([root])
    values = iter(tokens[1:])
    while pending:
        node = pending.popleft()
        left = next(values, None)
        if left is None:
            break
        if left != "N":
            node.left = TreeNode(int(left))
            pending.append(node.left)
        right = next(values, None)
        if right is None:
            break
        if right != "N":
            node.right = TreeNode(int(right))
            pending.append(node.right)
    return root


def inorder(root: Optional[TreeNode]) -> List[int]:
    """Values in left, node, right order."""
    result: List[int] = []
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def _longest(node: Optional[TreeNode]) -> Tuple[int, int]:
    if node is None:
        return 0, 0
    depth, total = max(_longest(node.left), _longest(node.right))
    return depth + 1, total + node.data


def sum_of_longest_root_to_leaf_path(root: Optional[TreeNode]) -> int:
    """Sum along the longest root-to-leaf path; the largest sum breaks ties.

    An empty tree gives 0.
    """
    return _longest(root)[1]


def is_same_tree(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True if both trees have the same shape and values."""
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.data != b.data:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True