"""Structural properties of binary trees: size, depth, balance, paths, shape."""

from __future__ import annotations

from collections import deque
from typing import Optional, Tuple

from treealgos.node import Node


def count_nodes(root: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def max_depth(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path, found recursively."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_depth_bfs(root: Optional[Node]) -> int:
    """Number of levels in the tree, found by a breadth-first sweep."""
    if root is None:
        return 0
    queue: deque[Node] = deque([root])
    levels = 0
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels += 1
    return levels


def _balanced_height(node: Optional[Node]) -> Optional[int]:
    """Height of the subtree, or ``None`` as soon as an imbalance is found."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """True when every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def _height_and_diameter(node: Optional[Node]) -> Tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_best = _height_and_diameter(node.left)
    right_height, right_best = _height_and_diameter(node.right)
    best = max(left_best, right_best, left_height + right_height)
    return 1 + max(left_height, right_height), best


def diameter(root: Optional[Node]) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def _path_sums(node: Optional[Node]) -> Tuple[int, Optional[int]]:
    """Best downward gain from ``node`` and best complete path inside it."""
    if node is None:
        return 0, None
    left_gain, left_best = _path_sums(node.left)
    right_gain, right_best = _path_sums(node.right)
    left_gain = max(0, left_gain)
    right_gain = max(0, right_gain)
    through = node.data + left_gain + right_gain
    best = max(b for b in (left_best, right_best, through) if b is not None)
    return node.data + max(left_gain, right_gain), best


def max_path_sum(root: Optional[Node]) -> int:
    """Largest sum of values along any non-empty path in the tree.

    Raises ``ValueError`` for an empty tree, which has no path.
    """
    if root is None:
        raise ValueError("an empty tree has no path")
    best = _path_sums(root)[1]
    assert best is not None
    return best


def is_same_tree(p: Optional[Node], q: Optional[Node]) -> bool:
    """True when both trees have the same shape and the same values."""
    if p is None or q is None:
        return p is q
    return (
        p.data == q.data
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrors(left: Optional[Node], right: Optional[Node]) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.data == right.data
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: Optional[Node]) -> bool:
    """True when the tree is a mirror image of itself around the root."""
    return root is None or _mirrors(root.left, root.right)


def lowest_common_ancestor(
    root: Optional[Node], p: Optional[Node], q: Optional[Node]
) -> Optional[Node]:
    """Deepest node having both ``p`` and ``q`` as descendants (or itself).

    Nodes are matched by identity. If only one of them is in the tree, that
    node is returned; if neither is, ``None``.
    """
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root