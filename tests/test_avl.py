import pytest

from bintrees_kit.avl import AVLTree, is_avl, sorted_array_to_avl
from bintrees_kit.nodes import Node
from bintrees_kit.traversal import inorder, preorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _links_ok(node):
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _links_ok(child):
                return False
    return True


def _basic_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root)
    root.left.left = Node(10, root.left)
    return root


def test_is_avl_cases():
    root = _basic_tree()
    assert is_avl(root) is True
    assert is_avl(root.left) is True
    root.right.left = Node(97, root.right)
    assert is_avl(root) is False

    root = _basic_tree()
    root.right.right.right = Node(430, root.right.right)
    assert is_avl(root) is False
    root.right.right.right.left = Node(420, root.right.right.right)
    assert is_avl(root) is False


def test_is_avl_none():
    assert is_avl(None) is False


def test_insert_sequence():
    tree = AVLTree()
    for value in [98, 402, 12, 46, 128, 256, 512, 50]:
        node = tree.insert(value)
        assert node.value == value
        assert is_avl(tree.root)
        assert _links_ok(tree.root)
    assert list(preorder(tree.root)) == [98, 46, 12, 50, 256, 128, 402, 512]
    assert tree.root.parent is None


def test_insert_duplicate_returns_none():
    tree = AVLTree([3, 1, 2])
    assert tree.insert(2) is None
    assert list(preorder(tree.root)) == [2, 1, 3]


def test_array_to_avl():
    tree = AVLTree(ARRAY)
    assert list(preorder(tree.root)) == [
        47, 21, 2, 1, 20, 32, 22, 34, 84, 68, 62, 79, 91, 87, 98, 95,
    ]
    assert is_avl(tree.root)
    assert _links_ok(tree.root)


def test_remove_sequence():
    tree = AVLTree(ARRAY)
    steps = [
        (47, [62, 21, 2, 1, 20, 32, 22, 34, 84, 68, 79, 91, 87, 98, 95]),
        (79, [62, 21, 2, 1, 20, 32, 22, 34, 91, 84, 68, 87, 98, 95]),
        (32, [62, 21, 2, 1, 20, 34, 22, 91, 84, 68, 87, 98, 95]),
        (34, [62, 21, 2, 1, 20, 22, 91, 84, 68, 87, 98, 95]),
        (22, [62, 2, 1, 21, 20, 91, 84, 68, 87, 98, 95]),
    ]
    for value, expected in steps:
        root = tree.remove(value)
        assert root is tree.root
        assert list(preorder(tree.root)) == expected
        assert _links_ok(tree.root)
        assert tree.root.parent is None
    assert is_avl(tree.root)


def test_remove_last_value_empties_tree():
    tree = AVLTree([7])
    assert tree.remove(7) is None
    assert tree.root is None


def test_sorted_array_to_avl():
    values = [1, 2, 20, 21, 22, 32, 34, 47, 62, 68, 79, 84, 87, 91, 95, 98]
    root = sorted_array_to_avl(values)
    assert list(preorder(root)) == [
        47, 21, 2, 1, 20, 32, 22, 34, 84, 68, 62, 79, 91, 87, 95, 98,
    ]
    assert list(inorder(root)) == values
    assert is_avl(root)
    assert _links_ok(root)


@pytest.mark.parametrize("count", [1, 2, 3, 7, 10])
def test_sorted_array_to_avl_is_balanced(count):
    values = list(range(count))
    root = sorted_array_to_avl(values)
    assert is_avl(root)
    assert list(inorder(root)) == values


def test_sorted_array_to_avl_empty():
    assert sorted_array_to_avl([]) is None