# algobox

A library of classic algorithms and data structures in plain Python, with no
runtime dependencies.

## Installation

    pip install algobox

## What is inside

- `algobox.tree`: `TreeNode`, `build_tree`, which builds a tree from a
  level-order list with `None` for missing children, and `tree_to_list`,
  which turns a tree back into such a list.
- `algobox.tree_traversal`: `inorder_traversal`, `preorder_traversal`,
  `postorder_traversal`, `level_order`, `level_order_bottom`,
  `zigzag_level_order`, `right_side_view`, `average_of_levels` and
  `largest_values`.
- `algobox.tree_properties`: `max_depth`, `count_nodes` (for complete
  trees), `diameter_of_binary_tree`, `max_path_sum`,
  `lowest_common_ancestor`, `invert_tree`, `binary_tree_paths` and
  `find_bottom_left_value`.
- `algobox.bst`: `insert_into_bst`, `delete_node`, `convert_bst`
  (greater-sum tree), `sorted_array_to_bst`, `find_mode`,
  `lowest_common_ancestor_bst`, `tree_to_doubly_list` with
  `circular_values`, `build_tree_from_inorder_postorder` and
  `construct_maximum_binary_tree`.
- `algobox.linked_list`: `ListNode`, `build_list`, `list_values`,
  `add_two_numbers`, `get_intersection_node`, `has_cycle`, `detect_cycle`
  and `merge_in_between`.
- `algobox.caches`: `LRUCache` with `get` and `put`.
- `algobox.containers`: `IntQueue`, `IntStack` and `RandomizedSet`.
  Popping or peeking at an empty queue or stack raises `IndexError`.
- `algobox.backtracking`: `combination_sum`, `combination_sum3`, `combine`,
  `letter_case_permutation` and `letter_combinations`.
- `algobox.parsing`: `add_binary`, `compare_version`, `decode_string` and
  `eval_rpn`.
- `algobox.arrays`: `three_sum`, `four_sum`, `four_sum_count`,
  `binary_search`, `find_kth_largest`, `intersection`,
  `first_missing_positive`, `find_repeat_document`, `majority_element`,
  `merge_intervals`, `get_max_matrix`, `last_stone_weight`,
  `maximum_product` and `find_content_children`.
- `algobox.dp`: stock trading (`max_profit`, `max_profit_unlimited`,
  `max_profit_two_transactions`, `max_profit_k_transactions`,
  `max_profit_with_cooldown`), `climb_stairs`, `fib`, `integer_break`,
  `rob`, `rob_circular`, `longest_common_subsequence`, `length_of_lis`,
  `max_sub_array`, `last_stone_weight_ii` and `longest_palindrome`.
- `algobox.windows`: `find_max_consecutive_ones`,
  `find_max_consecutive_ones_with_flip`, `longest_ones` and `find_lhs`.

## Example

```python
from algobox.tree import build_tree
from algobox.tree_traversal import level_order
from algobox.caches import LRUCache
from algobox.dp import max_profit

root = build_tree([3, 9, 20, None, None, 15, 7])
print(level_order(root))          # [[3], [9, 20], [15, 7]]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
print(cache.get(1))               # 1

print(max_profit([7, 1, 5, 3, 6, 4]))  # 5
```

## What it does not do

This is a library only: it has no command-line tool. It has no module of
general string puzzles; the text routines it offers are those in
`algobox.parsing`.

## Running the tests

    pip install -e ".[test]"
    pytest