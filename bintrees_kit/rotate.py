"""Single left and right rotations of a binary tree.

The rotated subtree's new root takes over the old root's parent link; the
caller is responsible for re-attaching it to that parent's child slot.
"""

from __future__ import annotations

from typing import Optional

from .nodes import Node


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate left around tree and return the new subtree root."""
    if tree is None or tree.right is None:
        return tree
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate right around tree and return the new subtree root."""
    if tree is None or tree.left is None:
        return tree
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot