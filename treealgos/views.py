"""Views of a binary tree: side, top, boundary, root-to-leaf paths, flattening."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional

from treealgos.node import Node


def right_side_view(root: Optional[Node]) -> List[int]:
    """The last value of each level, as seen from the right, top to bottom."""
    ans: List[int] = []
    if root is None:
        return ans
    queue: deque[Node] = deque([root])
    while queue:
        size = len(queue)
        for position in range(size):
            node = queue.popleft()
            if position == size - 1:
                ans.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return ans


def top_view(root: Optional[Node]) -> List[int]:
    """Values visible from above, ordered by horizontal distance left to right.

    For each horizontal distance the node reached first by a breadth-first
    sweep is the one that is seen.
    """
    if root is None:
        return []
    seen: Dict[int, int] = {}
    queue: deque[tuple[Node, int]] = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        seen.setdefault(distance, node.data)
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]


def _left_edge(root: Node) -> Iterator[int]:
    current = root.left
    while current is not None:
        if not current.is_leaf:
            yield current.data
        current = current.left if current.left is not None else current.right


def _right_edge(root: Node) -> Iterator[int]:
    current = root.right
    while current is not None:
        if not current.is_leaf:
            yield current.data
        current = current.right if current.right is not None else current.left


def _leaves(node: Node) -> Iterator[int]:
    if node.is_leaf:
        yield node.data
        return
    if node.left is not None:
        yield from _leaves(node.left)
    if node.right is not None:
        yield from _leaves(node.right)


def boundary_traversal(root: Optional[Node]) -> List[int]:
    """Anticlockwise boundary: root, left edge, leaves, then right edge upwards."""
    if root is None:
        return []
    result: List[int] = [] if root.is_leaf else [root.data]
    result.extend(_left_edge(root))
    result.extend(_leaves(root))
    result.extend(reversed(list(_right_edge(root))))
    return result


def _paths(node: Node, prefix: str) -> Iterator[str]:
    if node.is_leaf:
        yield prefix
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _paths(child, f"{prefix}->{child.data}")


def binary_tree_paths(root: Optional[Node]) -> List[str]:
    """Every root-to-leaf path, written as values joined by ``->``."""
    if root is None:
        return []
    return list(_paths(root, str(root.data)))


def flatten(root: Optional[Node]) -> None:
    """Rearrange the tree in place into a right-leaning chain in preorder.

    Every left pointer becomes ``None``; right pointers link the nodes in
    the order a preorder traversal visits them.
    """
    if root is None:
        return
    order: List[Node] = []
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    following: Optional[Node] = None
    for node in reversed(order):
        node.left = None
        node.right = following
        following = node