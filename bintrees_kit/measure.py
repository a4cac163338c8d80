"""Measurements and shape checks of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .nodes import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.is_leaf() else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children."""
    if tree is None:
        return False
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return tree.is_leaf()


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    both_or_neither = (tree.left is None) == (tree.right is None)
    if height(tree.left) != height(tree.right) or not both_or_neither:
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, except possibly the last from the left."""
    if tree is None:
        return False
    queue: deque[Optional[Node]] = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        if node is None:
            gap_seen = True
            continue
        if gap_seen:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True