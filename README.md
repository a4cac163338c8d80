# bintrees-kit

This library provides binary tree structures built from linked nodes. Each node
knows its parent. The library covers plain binary trees, binary search trees, AVL
trees and max heaps. It also has traversals, measurements and an ASCII renderer.
It needs only the standard library and runs on Python 3.10 or later.

## Installation

```
pip install bintrees-kit
```

## Building trees by hand

`bintrees_kit.nodes.Node` holds an integer `value`. It also holds links to its
`parent`, `left` and `right`.

```python
from bintrees_kit.nodes import Node, ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

print(left.sibling().value)               # 402
print(left.right.uncle().value)           # 402
print(left.right.depth())                 # 2
print(ancestor(left.right, right).value)  # 98
print(root.is_root(), right.is_leaf())    # True True
```

- `insert_left` and `insert_right` return the new node. If a child was already in that slot, it moves down one level and becomes the new node's child on the same side.
- `sibling` and `uncle` return `None` when there is no such node.
- `ancestors()` yields the parent, then the grandparent, and so on up to the root.
- `ancestor(first, second)` returns the lowest common ancestor of two nodes. It returns `None` if either argument is `None` or the nodes share no ancestor.

## Traversal

```python
from bintrees_kit.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
list(levelorder(root))   # level by level, left to right
```

Each function is a generator that yields node values. Given `None`, each one
yields nothing.

## Measurement and shape checks

```python
from bintrees_kit.measure import (
    height, size, leaves, internal_nodes, balance,
    is_full, is_perfect, is_complete,
)
```

- `height(tree)` counts edges on the longest downward path. A single node and `None` both give 0.
- `size(tree)` counts all nodes.
- `leaves(tree)` counts nodes that have no children.
- `internal_nodes(tree)` counts nodes that have at least one child.
- `balance(tree)` is the height of the left subtree minus the height of the right subtree.
- `is_full`, `is_perfect` and `is_complete` return `False` for `None`.

## Rotations

```python
from bintrees_kit.rotate import rotate_left, rotate_right

root = rotate_left(root)   # returns the new subtree root
```

The new subtree root takes over the old root's `parent` link. The caller must
re-attach it to the child slot of that parent. If the needed child is missing,
the tree is returned unchanged.

## Printing

```python
from bintrees_kit.printing import render, print_tree

print(render(root))   # the drawing as a string
print_tree(root)      # writes the drawing to standard output
```

- Each node is drawn as its value padded to three digits in brackets, such as `(098)`.
- Each level of the tree takes one line of text.
- Branches are marked with dots and dashes.
- `print_tree` also takes a `file` argument.
- For `None`, `render` returns an empty string and `print_tree` writes nothing.

## Search trees and heaps

```python
from bintrees_kit.bst import BinarySearchTree, is_bst
from bintrees_kit.avl import AVLTree, is_avl, sorted_array_to_avl
from bintrees_kit.heap import MaxHeap, is_heap

values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]

bst = BinarySearchTree(values)
bst.search(32)      # the node holding 32, or None
bst.remove(79)      # returns the new root
32 in bst, len(bst), list(bst)   # list(bst) is in order

avl = AVLTree(values)
avl.insert(50)
avl.remove(47)

balanced = sorted_array_to_avl(sorted(values))   # root Node, or None if empty

heap = MaxHeap(values)
heap.extract()          # 98
heap.to_sorted_list()   # remaining values, largest first; empties the heap
```

`BinarySearchTree`:

- Duplicates are ignored. `insert` returns the new node, or `None` if the value is already present.
- If a removed node has two children, it takes the value of its in-order successor.

`AVLTree` is a subclass of `BinarySearchTree`. It rotates to keep itself
balanced after inserts and removals.

`MaxHeap`:

- It is stored as a linked, complete binary tree.
- `insert` returns the node where the value ends up.
- `extract` raises `IndexError` when the heap is empty.
- `len`, truth testing and iteration are supported. Iteration yields values level by level.

`is_bst`, `is_avl` and `is_heap` check any tree built from `Node` objects. Each
returns `False` for `None`.

## What this package does not do

This is a library only. It has no command-line program. Trees live in memory
and are not saved or loaded.

## Running the tests

```
pip install "bintrees-kit[test]"
pytest
```