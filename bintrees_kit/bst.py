"""Binary search trees of distinct integers."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Iterator, Optional

from .nodes import Node
from .traversal import inorder


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the in-order values of tree strictly increase; False for None."""
    if tree is None:
        return False
    return all(a < b for a, b in pairwise(inorder(tree)))


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: Optional[Node], value: int) -> Optional[Node]:
    """Remove value from the subtree and return the subtree's new root."""
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        return child
    else:
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert value and return its new node, or None if it is already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        parent = self.root
        while parent.value != value:
            if value < parent.value:
                if parent.left is None:
                    parent.left = Node(value, parent)
                    return parent.left
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = Node(value, parent)
                    return parent.right
                parent = parent.right
        return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def remove(self, value: int) -> Optional[Node]:
        """Remove value if present and return the new root.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        self.root = _remove(self.root, value)
        return self.root