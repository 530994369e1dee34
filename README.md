# arbortree

Binary trees made of linked nodes, with the operations that go with them:
building and rotating nodes, traversals, shape metrics, binary search
trees, AVL trees and max binary heaps. Pure Python, no dependencies.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Nodes (`arbortree.node`)

Each `Node` holds an integer `value` and links to its `parent`, `left`
and `right`. Creating a node with a parent does not attach it to that
parent; `insert_left` and `insert_right` do.

```python
from arbortree.node import Node, common_ancestor, delete_tree

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

left.is_leaf()          # False
root.is_root()          # True
left.sibling() is right # True
common_ancestor(left, right) is root  # True
```

- Inserting on a side that is already taken pushes the old child down one
  level, beneath the new node.
- `uncle()` returns the sibling of the node's parent, or `None`.
- `rotate_left()` and `rotate_right()` rotate the subtree at the node and
  return its new root, updating the link from the old parent. They raise
  `ValueError` when the needed child is missing.
- `common_ancestor(first, second)` returns the lowest node that is an
  ancestor of both (a node counts as its own ancestor), or `None`.
- `delete_tree(tree)` detaches a subtree from its parent and clears every
  link inside it.

## Traversals (`arbortree.traversal`)

`preorder`, `inorder`, `postorder` and `levelorder` are generators that
yield node values.

```python
from arbortree.traversal import preorder, levelorder

list(preorder(root))    # [98, 12, 54, 402]
list(levelorder(root))  # [98, 12, 402, 54]
```

## Metrics (`arbortree.metrics`)

```python
from arbortree.metrics import height, size, leaves

height(root)            # 2
size(root)              # 4
leaves(root)            # 2
```

Also available: `depth(node)` (edges up to the root), `internal_nodes`
(nodes with at least one child), `balance` (left height minus right
height), and the predicates `is_full`, `is_perfect` and `is_complete`,
which return `False` for an empty tree.

## Binary search trees (`arbortree.bst`)

```python
from arbortree.bst import BinarySearchTree, is_bst

tree = BinarySearchTree([98, 402, 12, 46, 128, 256])
tree.search(46)   # the node holding 46, or None
46 in tree        # True
list(tree)        # values in ascending order
tree.remove(98)
is_bst(tree.root) # True
```

Repeated values passed to the constructor are skipped. `insert` returns
the new node and raises `ValueError` if the value is already present;
`remove` raises `ValueError` if it is absent. A node with two children
takes the value of its in-order successor, which is removed instead.

## AVL trees (`arbortree.avl`)

`AVLTree` is a `BinarySearchTree` that rebalances by rotation after every
insertion and removal.

```python
from arbortree.avl import AVLTree, is_avl

tree = AVLTree([98, 402, 12, 46, 128, 256])
is_avl(tree.root)  # True
tree.remove(128)

balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
```

Unlike `BinarySearchTree.remove`, `AVLTree.remove` silently ignores a
value that is not in the tree. `from_sorted` expects values already in
ascending order and builds the tree around their middle.

## Max binary heaps (`arbortree.heap`)

`MaxHeap` keeps a complete binary tree with the largest value at `root`.

```python
from arbortree.heap import MaxHeap, is_heap

heap = MaxHeap([79, 47, 68, 87, 84, 91, 21, 32])
len(heap)               # 8
heap.extract()          # 91
is_heap(heap.root)      # True
heap.to_sorted_list()   # remaining values, largest first; empties the heap
```

`extract` raises `IndexError` on an empty heap.

## What it does not do

There is no command-line program and no way to draw a tree as text; the
trees live in memory only and are not saved or loaded.