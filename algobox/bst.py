"""Binary search tree operations and tree construction from sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from algobox.tree import TreeNode
from algobox.tree_traversal import inorder_traversal


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf and return the root.

    A value already present in the tree is not inserted again.
    """
    if root is None:
        return TreeNode(val)
    cur: Optional[TreeNode] = root
    parent = root
    while cur is not None:
        parent = cur
        cur = cur.right if val > cur.val else cur.left
    if val > parent.val:
        parent.right = TreeNode(val)
    elif val < parent.val:
        parent.left = TreeNode(val)
    return root


def _detach(target: TreeNode) -> Optional[TreeNode]:
    """Return the subtree that replaces ``target`` once it is removed."""
    if target.right is None:
        return target.left
    cur = target.right
    while cur.left is not None:
        cur = cur.left
    cur.left = target.left
    return target.right


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the node holding ``key`` and return the new root.

    The removed node's left subtree is hung under the smallest node of its
    right subtree. A missing key leaves the tree unchanged.
    """
    if root is None:
        return None
    cur: Optional[TreeNode] = root
    parent: Optional[TreeNode] = None
    while cur is not None and cur.val != key:
        parent = cur
        cur = cur.left if cur.val > key else cur.right
    if cur is None:
        return root
    if parent is None:
        return _detach(cur)
    if parent.left is cur:
        parent.left = _detach(cur)
    else:
        parent.right = _detach(cur)
    return root


def convert_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each value by the sum of all values not smaller than it, in place."""
    running = 0
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        if cur is not None:
            stack.append(cur)
            cur = cur.right
            continue
        node = stack.pop()
        running += node.val
        node.val = running
        cur = node.left
    return root


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending ``nums``.

    The middle element (upper middle for even lengths) becomes the root.
    """
    if not nums:
        return None
    middle = len(nums) // 2
    return TreeNode(
        nums[middle],
        sorted_array_to_bst(nums[:middle]),
        sorted_array_to_bst(nums[middle + 1 :]),
    )


def find_mode(root: Optional[TreeNode]) -> list[int]:
    """The most frequent values of a search tree, in ascending order."""
    if root is None:
        raise ValueError("tree is empty")
    result: list[int] = []
    count = max_count = 0
    previous: Optional[int] = None
    for value in inorder_traversal(root):
        count = count + 1 if value == previous else 1
        if count == max_count:
            result.append(value)
        elif count > max_count:
            max_count = count
            result = [value]
        previous = value
    return result


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node whose value lies between those of ``p`` and ``q``."""
    cur = root
    while cur is not None:
        if cur.val > p.val and cur.val > q.val:
            cur = cur.left
        elif cur.val < p.val and cur.val < q.val:
            cur = cur.right
        else:
            return cur
    return None


def tree_to_doubly_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink a search tree in place into a sorted circular doubly linked list.

    ``left`` points to the predecessor and ``right`` to the successor; the
    smallest node is returned.
    """
    if root is None:
        return None
    head: Optional[TreeNode] = None
    previous: Optional[TreeNode] = None
    stack: list[TreeNode] = []
    cur: Optional[TreeNode] = root
    while cur is not None or stack:
        if cur is not None:
            stack.append(cur)
            cur = cur.left
            continue
        node = stack.pop()
        if head is None:
            head = node
        if previous is not None:
            previous.right = node
            node.left = previous
        previous = node
        cur = node.right
    assert head is not None and previous is not None
    head.left = previous
    previous.right = head
    return head


def circular_values(head: Optional[TreeNode]) -> list[int]:
    """Values of a circular list, following ``right`` links once round."""
    if head is None:
        return []
    values = [head.val]
    cur = head.right
    while cur is not None and cur is not head:
        values.append(cur.val)
        cur = cur.right
    return values


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder listings."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals differ in length")
    if not postorder:
        return None
    value = postorder[-1]
    root = TreeNode(value)
    if len(postorder) == 1:
        return root
    try:
        split = list(inorder).index(value)
    except ValueError:
        raise ValueError(f"value {value} missing from inorder traversal") from None
    root.left = build_tree_from_inorder_postorder(inorder[:split], postorder[:split])
    root.right = build_tree_from_inorder_postorder(
        inorder[split + 1 :], postorder[split:-1]
    )
    return root


def construct_maximum_binary_tree(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build the maximum tree of non-negative ``nums``.

    The largest value (its first occurrence) is the root, with the trees of
    the parts to its left and right as children.
    """
    if not nums:
        return None
    if any(value < 0 for value in nums):
        raise ValueError("values must be non-negative")
    index = max(range(len(nums)), key=lambda position: (nums[position], -position))
    root = TreeNode(nums[index])
    if len(nums) == 1:
        return root
    root.left = construct_maximum_binary_tree(nums[:index])
    root.right = construct_maximum_binary_tree(nums[index + 1 :])
    return root