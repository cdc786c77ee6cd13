"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, NamedTuple, Optional

from treealgos.node import Node


class Traversals(NamedTuple):
    """The three depth-first orders of one tree, gathered in a single pass."""

    inorder: List[int]
    postorder: List[int]
    preorder: List[int]


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.data


def preorder(root: Optional[Node]) -> List[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> List[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> List[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def all_traversals(root: Optional[Node]) -> Traversals:
    """Compute inorder, postorder and preorder with one explicit stack.

    Each node is visited up to three times; the visit count decides which
    order it is recorded in.
    """
    result = Traversals([], [], [])
    if root is None:
        return result

    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, visit = stack.pop()
        if visit == 1:
            result.preorder.append(node.data)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif visit == 2:
            result.inorder.append(node.data)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            result.postorder.append(node.data)
    return result


def inorder_iterative(root: Optional[Node]) -> List[int]:
    """Inorder traversal using an explicit stack instead of recursion."""
    ans: List[int] = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            ans.append(node.data)
            node = node.right
    return ans


def postorder_two_stacks(root: Optional[Node]) -> List[int]:
    """Postorder traversal built from two stacks."""
    if root is None:
        return []
    pending = [root]
    output: list[Node] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(output)]


def _levels(root: Optional[Node]) -> Iterator[List[int]]:
    if root is None:
        return
    queue: deque[Node] = deque([root])
    while queue:
        level: List[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            level.append(node.data)
        yield level


def level_order(root: Optional[Node]) -> List[List[int]]:
    """Values grouped by depth, each level read left to right."""
    return list(_levels(root))


def zigzag_level_order(root: Optional[Node]) -> List[List[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left.

    The first level is read left to right.
    """
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]