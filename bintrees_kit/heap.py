"""Max binary heaps stored as linked, complete binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from .measure import is_complete, size
from .nodes import Node
from .traversal import levelorder


def _parent_dominates(tree: Optional[Node]) -> bool:
    """Return True if every child is strictly smaller than its parent and
    no node has a right child without a left one."""
    if tree is None:
        return True
    if tree.right is not None and tree.left is None:
        return False
    for child in (tree.left, tree.right):
        if child is not None and child.value >= tree.value:
            return False
    return _parent_dominates(tree.left) and _parent_dominates(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if tree is a valid max heap; False for None."""
    if tree is None:
        return False
    return _parent_dominates(tree) and is_complete(tree)


def _level_nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes of tree level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def _swap_values(first: Node, second: Node) -> None:
    first.value, second.value = second.value, first.value


def _sift_up(node: Node) -> Node:
    """Move node's value up while its parent's is not greater; return where it ends."""
    while node.parent is not None and node.parent.value <= node.value:
        _swap_values(node, node.parent)
        node = node.parent
    return node


def _sift_down(node: Node) -> None:
    """Move node's value down while a child holds a greater one."""
    while True:
        largest = node
        for child in (node.left, node.right):
            if child is not None and child.value > largest.value:
                largest = child
        if largest is node:
            return
        _swap_values(node, largest)
        node = largest


class MaxHeap:
    """A max heap whose root always holds the greatest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[int]:
        return levelorder(self.root)

    def insert(self, value: int) -> Node:
        """Insert value and return the node that holds it after sifting up."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        nodes = list(_level_nodes(self.root))
        parent = nodes[(len(nodes) + 1) // 2 - 1]
        node = Node(value, parent)
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
        return _sift_up(node)

    def extract(self) -> int:
        """Remove and return the greatest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        value = self.root.value
        last = deque(_level_nodes(self.root), maxlen=1)[0]
        _swap_values(self.root, last)
        parent = last.parent
        if parent is None:
            self.root = None
        elif parent.left is last:
            parent.left = None
        else:
            parent.right = None
        last.parent = None
        if self.root is not None:
            _sift_down(self.root)
        return value

    def to_sorted_list(self) -> list[int]:
        """Drain the heap and return its values in descending order."""
        result = []
        while self.root is not None:
            result.append(self.extract())
        return result