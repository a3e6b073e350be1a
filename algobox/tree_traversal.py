"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from algobox.tree import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    """Yield the values of each level, top to bottom, left to right."""
    if root is None:
        return
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        if cur is not None:
            stack.append(cur)
            cur = cur.left
            continue
        node = stack.pop()
        result.append(node.val)
        cur = node.right
    return result


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the root down."""
    return list(_levels(root))


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the deepest level up."""
    return list(reversed(list(_levels(root))))


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Levels alternating left-to-right and right-to-left, starting left-to-right."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The rightmost value of each level."""
    return [level[-1] for level in _levels(root)]


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """The mean value of each level."""
    return [sum(level) / len(level) for level in _levels(root)]


def largest_values(root: Optional[TreeNode]) -> list[int]:
    """The largest value of each level."""
    return [max(level) for level in _levels(root)]