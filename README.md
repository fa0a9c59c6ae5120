# treekit

This package provides integer binary trees and the classic structures built on
them: binary search trees, AVL trees and max binary heaps. It also includes
traversals, measurements, rotations and a compact ASCII renderer.

## Installation

```
pip install .
```

## Building trees by hand

```python
from treekit.node import Node
from treekit.printer import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)

print_tree(root)
```

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Each `Node` has the attributes `value`, `parent`, `left` and `right`.
`Node(value, parent)` records the parent but does not link the new node into
it. `insert_left` and `insert_right` create a child and return it. If the slot
already holds a child, that child moves down beneath the new node.

A node also offers these methods:

- `is_leaf()`
- `is_root()`
- `sibling()`
- `uncle()`
- `detach()`, which cuts the node and its subtree away from its parent and returns the node.

## Traversals

```python
from treekit.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 128, 402]
list(inorder(root))     # [12, 54, 98, 128, 402]
list(postorder(root))   # [54, 12, 402, 128, 98]
list(levelorder(root))  # [98, 12, 128, 54, 402]
```

Each traversal is a generator of node values. An empty tree (`None`) yields
nothing.

## Measurements

`treekit.metrics` provides these functions:

- `height(tree)`: the number of edges on the longest downward path. A single node and `None` both give 0.
- `depth(node)`: the number of edges up to the root.
- `size(tree)`, `leaves(tree)` and `internal_nodes(tree)`: node counts.
- `balance(tree)`: the height of the left subtree minus the height of the right subtree.
- `is_full(tree)`, `is_perfect(tree)` and `is_complete(tree)`: shape checks. Each returns `False` for `None`.
- `lowest_common_ancestor(first, second)`: the deepest shared ancestor. It returns `None` if the nodes belong to different trees.

## Rotations

`treekit.rotation.rotate_left(tree)` and `rotate_right(tree)` rotate a subtree
and return its new root. The new root is relinked into the old root's parent.
Each raises `ValueError` if the node lacks the child needed to rotate.

## Binary search trees

```python
from treekit.bst import BinarySearchTree, is_bst

tree = BinarySearchTree([79, 47, 68, 87, 84, 91, 21, 32])
tree.insert(5)        # returns the new Node
32 in tree            # True
tree.search(32)       # the Node holding 32, or None
tree.remove(79)
len(tree)             # 8
is_bst(tree.root)     # True
```

The constructor skips duplicate values. `insert` raises `ValueError` for a
value that is already present. `remove` does nothing for an absent value.
When the removed node has two children, it takes the value of its in-order
successor. The tree's root node is available as `tree.root`.

`is_bst(node)` checks any tree for strictly ordered values. It returns `False`
for `None`.

## AVL trees

```python
from treekit.avl import AVLTree, is_avl, sorted_to_avl

avl = AVLTree([79, 47, 68, 87, 84, 91, 21, 32])
avl.insert(50)
avl.remove(47)
avl.search(68)
is_avl(avl.root)      # True

balanced = sorted_to_avl([1, 2, 20, 21, 22, 32, 34, 47])
is_avl(balanced)      # True
```

`AVLTree` is a `BinarySearchTree` that rebalances with rotations after every
insertion and removal.

`sorted_to_avl(values)` builds a tree from an ascending sequence and returns
its root node. It returns `None` for an empty sequence.

## Max binary heaps

```python
from treekit.heap import MaxHeap, is_heap

heap = MaxHeap([79, 47, 68, 87, 84, 91, 21, 32])
heap.insert(100)
heap.extract()        # 100
is_heap(heap.root)    # True
heap.drain_sorted()   # [91, 87, 84, 79, 68, 47, 32, 21]
len(heap)             # 0
```

The heap is kept as a complete linked binary tree. `extract` raises
`IndexError` on an empty heap. `drain_sorted()` empties the heap and returns
its values in descending order.

## Rendering

`treekit.printer.render(tree)` returns the drawing as a string, one line per
level. Each value is printed as `(%03d)`. An empty tree renders as an empty
string.

`print_tree(tree, file)` writes the drawing to a text stream. It writes to
standard output by default.

## What this package does not do

treekit is a library only. It has no command-line program. Its trees hold
plain integers, and nothing is stored or loaded from disk.

## Running the tests

```
pip install ".[test]"
pytest
```