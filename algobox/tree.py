"""Binary tree node type and conversion to and from level-order lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing child.

    Missing children take no slot for their own children. An empty list
    gives ``None``.
    """
    items = list(values)
    if not items:
        return None
    if items[0] is None:
        raise ValueError("root value cannot be None")

    root = TreeNode(items[0])
    parents: deque[TreeNode] = deque([root])
    is_left = True
    for value in items[1:]:
        if not parents:
            raise ValueError("more values than the tree has places for")
        parent = parents[0]
        if value is not None:
            child = TreeNode(value)
            if is_left:
                parent.left = child
            else:
                parent.right = child
            parents.append(child)
        if not is_left:
            parents.popleft()
        is_left = not is_left
    return root


def tree_to_list(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Serialise a tree to its level-order list, without trailing ``None``."""
    if root is None:
        return []
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result