import pytest

from algobox.bst import (
    build_tree_from_inorder_postorder,
    circular_values,
    construct_maximum_binary_tree,
    convert_bst,
    delete_node,
    find_mode,
    insert_into_bst,
    lowest_common_ancestor_bst,
    sorted_array_to_bst,
    tree_to_doubly_list,
)
from algobox.tree import TreeNode, build_tree, tree_to_list
from algobox.tree_traversal import inorder_traversal, postorder_traversal


def _find(root, value):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.val == value:
            return node
        stack.extend([node.left, node.right])
    raise LookupError(value)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_insert_into_bst_example():
    root = insert_into_bst(build_tree([4, 2, 7, 1, 3]), 5)
    assert tree_to_list(root) == [4, 2, 7, 1, 3, 5]


@pytest.mark.parametrize("value", [25, 5, 100, -7])
def test_insert_keeps_order(value):
    values = [40, 20, 60, 10, 30, 50, 70]
    root = insert_into_bst(build_tree(values), value)
    assert inorder_traversal(root) == sorted(values + [value])


def test_insert_into_empty_tree():
    root = insert_into_bst(None, 5)
    assert tree_to_list(root) == [5]


def test_insert_existing_value_is_ignored():
    root = insert_into_bst(build_tree([4, 2, 7]), 2)
    assert inorder_traversal(root) == [2, 4, 7]


def test_delete_node_example():
    root = delete_node(build_tree([5, 3, 6, 2, 4, None, 7]), 3)
    assert tree_to_list(root) == [5, 4, 6, 2, None, None, 7]


def test_delete_missing_key_leaves_tree():
    values = [5, 3, 6, 2, 4, None, 7]
    root = delete_node(build_tree(values), 0)
    assert tree_to_list(root) == values


def test_delete_from_empty_tree():
    assert delete_node(None, 0) is None


@pytest.mark.parametrize("key", [5, 3, 6, 2, 4, 7])
def test_delete_keeps_order(key):
    root = delete_node(build_tree([5, 3, 6, 2, 4, None, 7]), key)
    expected = [v for v in [2, 3, 4, 5, 6, 7] if v != key]
    assert inorder_traversal(root) == expected


def test_convert_bst_small():
    root = convert_bst(build_tree([0, None, 1]))
    assert tree_to_list(root) == [1, None, 1]


def test_convert_bst_example():
    root = convert_bst(
        build_tree([4, 1, 6, 0, 2, 5, 7, None, None, None, 3, None, None, None, 8])
    )
    assert tree_to_list(root) == [
        30, 36, 21, 36, 35, 26, 15, None, None, None, 33, None, None, None, 8
    ]


def test_convert_bst_empty():
    assert convert_bst(None) is None


def test_convert_bst_largest_unchanged_and_smallest_is_total():
    values = [4, 1, 6, 0, 2, 5, 7]
    root = convert_bst(build_tree(values))
    result = inorder_traversal(root)
    assert result[-1] == max(values)
    assert result[0] == sum(values)
    assert result == sorted(result, reverse=True)


def test_sorted_array_to_bst_example():
    root = sorted_array_to_bst([-10, -3, 0, 5, 9])
    assert tree_to_list(root) == [0, -3, 9, -10, None, 5]


@pytest.mark.parametrize("nums", [[1, 3], list(range(15)), list(range(-4, 9))])
def test_sorted_array_to_bst_round_trip_and_balance(nums):
    root = sorted_array_to_bst(nums)
    assert inorder_traversal(root) == nums
    assert abs(_height(root.left) - _height(root.right)) <= 1


def test_sorted_array_to_bst_empty():
    assert sorted_array_to_bst([]) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, None, 2, 2], [2]),
        ([0], [0]),
        ([1, None, 2], [1, 2]),
    ],
)
def test_find_mode(values, expected):
    assert find_mode(build_tree(values)) == expected


def test_find_mode_empty_raises():
    with pytest.raises(ValueError):
        find_mode(None)


@pytest.mark.parametrize("p_val, q_val, expected", [(2, 8, 6), (2, 4, 2), (3, 5, 4)])
def test_lowest_common_ancestor_bst(p_val, q_val, expected):
    root = build_tree([6, 2, 8, 0, 4, 7, 9, None, None, 3, 5])
    node = lowest_common_ancestor_bst(root, _find(root, p_val), _find(root, q_val))
    assert node is _find(root, expected)


def test_lowest_common_ancestor_bst_root_is_ancestor():
    root = build_tree([2, 1])
    assert lowest_common_ancestor_bst(root, root, root.left) is root


def test_tree_to_doubly_list_forward():
    head = tree_to_doubly_list(build_tree([4, 2, 5, 1, 3]))
    assert circular_values(head) == [1, 2, 3, 4, 5]


def test_tree_to_doubly_list_links_backwards():
    head = tree_to_doubly_list(build_tree([4, 2, 5, 1, 3]))
    backwards = [head.val]
    cur = head.left
    while cur is not head:
        backwards.append(cur.val)
        cur = cur.left
    assert backwards == [1, 5, 4, 3, 2]


def test_tree_to_doubly_list_single_node_is_self_linked():
    node = TreeNode(7)
    head = tree_to_doubly_list(node)
    assert head.left is head and head.right is head


def test_tree_to_doubly_list_empty():
    assert tree_to_doubly_list(None) is None
    assert circular_values(None) == []


def test_build_tree_from_traversals_example():
    root = build_tree_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert tree_to_list(root) == [3, 9, 20, None, None, 15, 7]


def test_build_tree_from_traversals_single():
    assert tree_to_list(build_tree_from_inorder_postorder([-1], [-1])) == [-1]


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5, 6, 7],
        [5, 3, 8, None, 4, 7, None, None, None, 6],
        [1, None, 2, None, 3],
    ],
)
def test_build_tree_from_traversals_round_trip(values):
    original = build_tree(values)
    inorder = inorder_traversal(original)
    postorder = postorder_traversal(original)
    rebuilt = build_tree_from_inorder_postorder(inorder, postorder)
    assert tree_to_list(rebuilt) == values


def test_build_tree_from_traversals_mismatch_raises():
    with pytest.raises(ValueError):
        build_tree_from_inorder_postorder([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree_from_inorder_postorder([1, 2], [3, 4])


def test_construct_maximum_binary_tree_example():
    root = construct_maximum_binary_tree([3, 2, 1, 6, 0, 5])
    assert tree_to_list(root) == [6, 3, 5, None, 2, 0, None, None, 1]


def test_construct_maximum_binary_tree_descending_is_right_chain():
    root = construct_maximum_binary_tree([3, 2, 1])
    assert tree_to_list(root) == [3, None, 2, None, 1]


def test_construct_maximum_binary_tree_preserves_order():
    nums = [4, 9, 1, 7, 7, 3, 0, 8]
    root = construct_maximum_binary_tree(nums)
    assert inorder_traversal(root) == nums
    assert root.val == max(nums)


def test_construct_maximum_binary_tree_rejects_negative():
    with pytest.raises(ValueError):
        construct_maximum_binary_tree([1, -2])


def test_construct_maximum_binary_tree_empty():
    assert construct_maximum_binary_tree([]) is None