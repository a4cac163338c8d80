import pytest

from bintrees_kit.bst import BinarySearchTree, is_bst
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


def test_is_bst_cases():
    root = _basic_tree()
    assert is_bst(root) is True
    assert is_bst(root.left) is True
    root.right.left = Node(97, root.right)
    assert is_bst(root) is False


def test_is_bst_none_and_duplicates():
    assert is_bst(None) is False
    root = Node(5)
    root.left = Node(5, root)
    assert is_bst(root) is False


def test_insert_sequence():
    tree = BinarySearchTree()
    for value in [98, 402, 12, 46, 128, 256, 512, 1]:
        node = tree.insert(value)
        assert node.value == value
    assert tree.insert(128) is None
    assert list(preorder(tree.root)) == [98, 12, 1, 46, 402, 128, 256, 512]
    assert _links_ok(tree.root)


def test_array_to_bst():
    tree = BinarySearchTree(ARRAY)
    assert list(preorder(tree.root)) == [
        79, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 84, 91, 98, 95,
    ]
    assert list(tree) == sorted(ARRAY)
    assert len(tree) == 16


def test_empty_tree():
    tree = BinarySearchTree([])
    assert tree.root is None
    assert tree.search(3) is None


def test_search():
    tree = BinarySearchTree(ARRAY)
    node = tree.search(32)
    assert node.value == 32
    assert list(preorder(node)) == [32, 22, 34]
    assert tree.search(512) is None
    assert 91 in tree
    assert 90 not in tree


def test_remove_sequence():
    tree = BinarySearchTree(ARRAY)
    root = tree.remove(79)
    assert root is tree.root
    assert list(preorder(tree.root)) == [
        84, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 91, 98, 95,
    ]
    tree.remove(21)
    assert list(preorder(tree.root)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 68, 62, 87, 91, 98, 95,
    ]
    tree.remove(68)
    assert list(preorder(tree.root)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 62, 87, 91, 98, 95,
    ]
    assert tree.search(62).parent.value == 47
    assert _links_ok(tree.root)
    assert is_bst(tree.root)


def test_remove_missing_value_keeps_tree():
    tree = BinarySearchTree([5, 3, 8])
    tree.remove(7)
    assert list(preorder(tree.root)) == [5, 3, 8]


@pytest.mark.parametrize("values", [[1], [1, 2], [2, 1]])
def test_remove_root_with_at_most_one_child(values):
    tree = BinarySearchTree(values)
    tree.remove(values[0])
    assert list(inorder(tree.root)) == sorted(values[1:])
    if tree.root is not None:
        assert tree.root.parent is None