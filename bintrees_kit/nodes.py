"""Binary tree nodes with parent links, and queries about their relatives."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer and links to parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            self.left.parent = node
            node.left = self.left
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            self.right.parent = node
            node.right = self.right
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in self.ancestors())


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if there is none."""
    if first is None or second is None:
        return None

    first_depth = first.depth()
    second_depth = second.depth()

    while first_depth > second_depth:
        first = first.parent
        first_depth -= 1
    while second_depth > first_depth:
        second = second.parent
        second_depth -= 1

    while first is not second:
        first = first.parent
        second = second.parent
    return first