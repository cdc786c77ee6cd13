# treealgos

A small library of classic binary tree algorithms. It works on plain `Node` objects and
has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Building a tree

`treealgos.node` provides:

- `Node(data, left=None, right=None)`: a tree node holding an integer. `node.is_leaf`
  is true when it has no children. Nodes compare by identity.
- `build_tree(values)`: builds a tree from a level-order list of values, where `None`
  marks a missing child. Only existing nodes get children, so a `None` does not reserve
  slots below it. An empty list (or a leading `None`) gives `None`. A `ValueError` is
  raised when values are left over that have no parent to hang from.

```python
from treealgos.node import build_tree

root = build_tree([1, 2, 3, 4, 5, None, 6])
```

## Traversals

`treealgos.traversals`:

- `preorder(root)`, `inorder(root)`, `postorder(root)`: depth-first orders as lists.
- `all_traversals(root)`: inorder, postorder and preorder from a single stack pass,
  returned as a `Traversals` named tuple with fields `inorder`, `postorder`, `preorder`.
- `inorder_iterative(root)`: inorder with an explicit stack.
- `postorder_two_stacks(root)`: postorder built from two stacks.
- `level_order(root)`: a list of levels, each a list of values read left to right.
- `zigzag_level_order(root)`: levels read alternately left to right and right to left,
  starting left to right.

An empty tree (`None`) gives empty results.

## Properties

`treealgos.properties`:

- `count_nodes(root)`: the number of nodes.
- `max_depth(root)`, `max_depth_bfs(root)`: the number of levels, found recursively or
  by a breadth-first sweep.
- `is_balanced(root)`: every node's subtree heights differ by at most one.
- `diameter(root)`: the longest path between two nodes, counted in edges.
- `max_path_sum(root)`: the largest sum along any non-empty path; raises `ValueError`
  for an empty tree.
- `is_same_tree(p, q)`: same shape and same values.
- `is_symmetric(root)`: the tree mirrors itself around the root.
- `lowest_common_ancestor(root, p, q)`: `p` and `q` are nodes compared by identity. If
  only one of them is in the tree, that node is returned; if neither is, `None`.

## Views

`treealgos.views`:

- `right_side_view(root)`: the last value of each level, top to bottom.
- `top_view(root)`: the first node a breadth-first sweep reaches at each horizontal
  distance, ordered from left to right.
- `boundary_traversal(root)`: the root, the left edge, the leaves, then the right edge
  from bottom to top.
- `binary_tree_paths(root)`: every root-to-leaf path as a string such as `"1->2->5"`.
- `flatten(root)`: rewires the tree in place into a right-leaning chain in preorder and
  returns `None`.

## Example

```python
from treealgos.node import build_tree
from treealgos.traversals import level_order
from treealgos.views import binary_tree_paths

root = build_tree([1, 2, 3, 4, 5])
print(level_order(root))        # [[1], [2, 3], [4, 5]]
print(binary_tree_paths(root))  # ['1->2->4', '1->2->5', '1->3']
```

## What it does not do

This is a library only: it has no command-line tool and prints nothing. Trees are held
in memory as `Node` objects; there is no reading or writing of trees to files.

## Running the tests

```
pip install -e ".[test]"
pytest
```