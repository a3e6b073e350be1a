"""Measurements and transformations of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from algobox.tree import TreeNode

# Returned by ``max_path_sum`` for an empty tree.
EMPTY_PATH_SUM = -(2**31)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree.

    Where the leftmost and rightmost spines have equal length the subtree is
    perfect and its size follows directly from that length.
    """
    if root is None:
        return 0
    left, right = root.left, root.right
    left_depth = right_depth = 0
    while left is not None:
        left = left.left
        left_depth += 1
    while right is not None:
        right = right.right
        right_depth += 1
    if left_depth == right_depth:
        return (2 << left_depth) - 1
    return count_nodes(root.left) + count_nodes(root.right) + 1


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    longest = 1

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        longest = max(longest, left + right + 1)
        return max(left, right) + 1

    depth(root)
    return longest - 1


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any non-empty path in the tree.

    An empty tree gives ``EMPTY_PATH_SUM``.
    """
    best = EMPTY_PATH_SUM

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node having both ``p`` and ``q`` as descendants (by identity)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return root


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Every root-to-leaf path as ``"a->b->c"``, leftmost leaf first."""
    if root is None:
        return []
    result: list[str] = []
    stack: list[tuple[TreeNode, str]] = [(root, str(root.val))]
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            result.append(path)
        if node.right is not None:
            stack.append((node.right, f"{path}->{node.right.val}"))
        if node.left is not None:
            stack.append((node.left, f"{path}->{node.left.val}"))
    return result


def find_bottom_left_value(root: Optional[TreeNode]) -> int:
    """The leftmost value on the deepest level."""
    if root is None:
        raise ValueError("tree is empty")
    result = root.val
    queue: deque[TreeNode] = deque([root])
    while queue:
        result = queue[0].val
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return result