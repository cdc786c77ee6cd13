"""Binary tree node and a helper for building trees from level-order lists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def build_tree(values: Iterable[Optional[int]]) -> Optional[Node]:
    """Build a tree from a level-order list where ``None`` marks a missing child.

    Children are assigned only to nodes that exist, so holes do not reserve
    slots for their own children. Returns ``None`` for an empty tree.
    Raises ``ValueError`` if values remain after every node has been given
    its children.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        if any(v is not None for v in items):
            raise ValueError("values given below an empty root")
        return None

    root = Node(first)
    parents: deque[Node] = deque([root])
    pending_left = True
    for value in items:
        if not parents:
            raise ValueError("value has no parent in the tree")
        parent = parents[0]
        child = None if value is None else Node(value)
        if pending_left:
            parent.left = child
        else:
            parent.right = child
            parents.popleft()
        if child is not None:
            parents.append(child)
        pending_left = not pending_left
    return root