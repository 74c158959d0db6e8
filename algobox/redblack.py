"""Red-black tree with a shared sentinel leaf."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional, Tuple


class Color(Enum):
    """Node colour; the values match the printed 0/1 of the classic layout."""

    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("value", "color", "parent", "left", "right")

    def __init__(self, value: Any, color: Color, parent: "_Node", left: "_Node", right: "_Node") -> None:
        self.value = value
        self.color = color
        self.parent = parent
        self.left = left
        self.right = right


class RedBlackTree:
    """Self-balancing binary search tree that keeps duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        nil = _Node(None, Color.BLACK, None, None, None)  # type: ignore[arg-type]
        nil.parent = nil.left = nil.right = nil
        self._nil = nil
        self._root = nil
        self._size = 0
        for value in values:
            self.insert(value)

    # rotations -----------------------------------------------------------

    def _rotate_left(self, node: _Node) -> None:
        child = node.right
        node.right = child.left
        if child.left is not self._nil:
            child.left.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.left = node
        node.parent = child

    def _rotate_right(self, node: _Node) -> None:
        child = node.left
        node.left = child.right
        if child.right is not self._nil:
            child.right.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.right = node
        node.parent = child

    # insertion -----------------------------------------------------------

    def insert(self, value: Any) -> None:
        """Add ``value``; equal values go to the right of existing ones."""
        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            current = current.left if value < current.value else current.right
        node = _Node(value, Color.RED, parent, self._nil, self._nil)
        if parent is self._nil:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_fixup(node)

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.color is Color.RED:
            grand = node.parent.parent
            if node.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    # deletion ------------------------------------------------------------

    def _find(self, value: Any) -> _Node:
        node = self._root
        while node is not self._nil:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return self._nil

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return False if it is absent."""
        node = self._find(value)
        if node is self._nil:
            return False
        self._delete_node(node)
        self._size -= 1
        return True

    def _delete_node(self, node: _Node) -> None:
        moved = node
        original_color = moved.color
        if node.left is self._nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is self._nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._minimum(node.right)
            original_color = moved.color
            child = moved.right
            if moved.parent is node:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color
        if original_color is Color.BLACK:
            self._delete_fixup(child)

    def _delete_fixup(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_left(node.parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_right(node.parent)
                    sibling = node.parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(node.parent)
                    node = self._root
        node.color = Color.BLACK

    # inspection ----------------------------------------------------------

    def _walk(self) -> Iterator[_Node]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def inorder(self) -> List[Tuple[Any, Color]]:
        """Values with their colours, in ascending order."""
        return [(node.value, node.color) for node in self._walk()]

    def root_entry(self) -> Optional[Tuple[Any, Color]]:
        """The root's value and colour, or None for an empty tree."""
        if self._root is self._nil:
            return None
        return self._root.value, self._root.color

    def _check_invariants(self) -> int:
        """Return the black height; raise ValueError if a rule is broken."""

        def check(node: _Node) -> int:
            if node is self._nil:
                return 1
            for child in (node.left, node.right):
                if child is not self._nil and child.parent is not node:
                    raise ValueError("broken parent link")
            if node.left is not self._nil and node.left.value > node.value:
                raise ValueError("order violated on the left")
            if node.right is not self._nil and node.right.value < node.value:
                raise ValueError("order violated on the right")
            if node.color is Color.RED and Color.RED in (node.left.color, node.right.color):
                raise ValueError("red node with a red child")
            left, right = check(node.left), check(node.right)
            if left != right:
                raise ValueError("unequal black heights")
            return left + (node.color is Color.BLACK)

        if self._root.color is not Color.BLACK:
            raise ValueError("root is not black")
        return check(self._root)

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not self._nil

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._walk())

    def __len__(self) -> int:
        return self._size