"""AVL tree of unique keys."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple


class _AVLNode:
    __slots__ = ("key", "left", "right", "height")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: Optional[_AVLNode] = None
        self.right: Optional[_AVLNode] = None
        self.height = 1


def _height(node: Optional[_AVLNode]) -> int:
    return 0 if node is None else node.height


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_AVLNode]) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_AVLNode], key: Any) -> Tuple[_AVLNode, bool]:
    if node is None:
        return _AVLNode(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node), added
    if balance < -1 and key > node.right.key:
        return _rotate_left(node), added
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


class AVLTree:
    """Height-balanced binary search tree; inserting a present key does nothing."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1
        return added

    def preorder(self) -> List[Any]:
        """Keys in root, left, right order."""
        result: List[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size