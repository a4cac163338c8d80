"""Self-balancing AVL trees."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .bst import BinarySearchTree, is_bst
from .measure import balance
from .nodes import Node
from .rotate import rotate_left, rotate_right


def _balanced_levels(tree: Optional[Node]) -> Optional[int]:
    """Return the number of levels if every node is balanced, else None."""
    if tree is None:
        return 0
    left = _balanced_levels(tree.left)
    if left is None:
        return None
    right = _balanced_levels(tree.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if tree is a balanced binary search tree; False for None."""
    if tree is None:
        return False
    return _balanced_levels(tree) is not None and is_bst(tree)


def _insert(
    tree: Optional[Node], parent: Optional[Node], value: int
) -> tuple[Node, Optional[Node]]:
    """Insert value below tree; return the subtree's new root and the new node."""
    if tree is None:
        node = Node(value, parent)
        return node, node
    if value < tree.value:
        tree.left, new = _insert(tree.left, tree, value)
    elif value > tree.value:
        tree.right, new = _insert(tree.right, tree, value)
    else:
        return tree, None

    factor = balance(tree)
    if factor > 1:
        if value < tree.left.value:
            tree = rotate_right(tree)
        elif value > tree.left.value:
            tree.left = rotate_left(tree.left)
            tree = rotate_right(tree)
    elif factor < -1:
        if value > tree.right.value:
            tree = rotate_left(tree)
        elif value < tree.right.value:
            tree.right = rotate_right(tree.right)
            tree = rotate_left(tree)
    return tree, new


def _rebalance(tree: Optional[Node]) -> Optional[Node]:
    """Rebalance bottom-up with single rotations and return the new root."""
    if tree is None:
        return None
    tree.left = _rebalance(tree.left)
    tree.right = _rebalance(tree.right)
    factor = balance(tree)
    if factor > 1:
        return rotate_right(tree)
    if factor < -1:
        return rotate_left(tree)
    return tree


class AVLTree(BinarySearchTree):
    """A binary search tree kept balanced by rotations."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build the tree by inserting values in order, keeping it balanced."""
        super().__init__(())
        self.root = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Optional[Node]:
        """Insert value and return its new node, or None if it is already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        self.root, new = _insert(self.root, None, value)
        return new

    def remove(self, value: int) -> Optional[Node]:
        """Remove value if present, rebalance, and return the new root."""
        super().remove(value)
        self.root = _rebalance(self.root)
        return self.root


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted values by taking each range's middle."""

    def build(start: int, end: int, parent: Optional[Node]) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = Node(values[mid], parent)
        node.left = build(start, mid - 1, node)
        node.right = build(mid + 1, end, node)
        return node

    return build(0, len(values) - 1, None)