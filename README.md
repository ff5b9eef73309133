# dailyalgos

A library of well-known algorithms and small data structures, grouped by
theme. Every routine is a plain function (or a small class) working on
ordinary Python lists, strings and dicts. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `dailyalgos.arrays` – `merge_sorted`, `remove_duplicates`,
  `remove_duplicates_allow_twice`, `majority_element`, `max_profit_unlimited`,
  `rotate`, `min_jumps`, `can_jump`, `min_candies`, `can_complete_circuit`,
  `two_sum_sorted`, `three_sum`, `longest_consecutive`,
  `max_circular_subarray_sum`, `single_number`
- `dailyalgos.matrix` – `rotate_image`, `set_zeroes`, `maximal_square`,
  `min_path_sum`
- `dailyalgos.strings` – `find_index`, `is_isomorphic`, `group_anagrams`,
  `longest_palindrome`
- `dailyalgos.intervals` – `insert_interval`, `min_arrow_shots`
- `dailyalgos.numbers` – `digit_square_sum`, `is_happy`, `trailing_zeroes`,
  `tribonacci`
- `dailyalgos.linked_list` – `ListNode`, `build_list`, `list_values`,
  `has_cycle`, `merge_two_lists`, `merge_k_lists`
- `dailyalgos.trees` – `TreeNode`, `build_level_order`, `has_path_sum`,
  `build_tree`, `max_depth`, `max_path_sum`, `right_side_view`,
  `kth_smallest`, `good_nodes`
- `dailyalgos.structures` – `MinStack`, `LRUCache`, `Trie`, `MedianFinder`
- `dailyalgos.graphs` – `find_order`, `snakes_and_ladders`, `nearest_exit`,
  `oranges_rotting`, `can_visit_all_rooms`, `find_circle_num`,
  `calc_equation`, `min_reorder`, `ladder_length`, `word_exists`
- `dailyalgos.dynamic` – `max_profit_two_transactions`, `rob`,
  `coin_change`, `length_of_lis`
- `dailyalgos.search` – `min_eating_speed`, `successful_pairs`, `total_cost`

## Examples

```python
from dailyalgos.arrays import three_sum, rotate
from dailyalgos.structures import LRUCache
from dailyalgos.trees import build_level_order, max_depth
from dailyalgos.dynamic import coin_change

three_sum([-1, 0, 1, 2, -1, -4])   # [[-1, -1, 2], [-1, 0, 1]]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)                    # nums is now [5, 6, 7, 1, 2, 3, 4]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                       # 1
cache.put(3, 3)                    # evicts key 2
cache.get(2)                       # None

root = build_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)                    # 3

coin_change([1, 2, 5], 11)         # 3
coin_change([2], 3)                # None
```

## Conventions

- Functions that work in place, such as `rotate`, `merge_sorted`,
  `rotate_image` and `set_zeroes`, change the list they are given and also
  return it. `remove_duplicates` and `remove_duplicates_allow_twice` compact
  the list in place and return the length of the kept prefix.
- Where an answer may not exist, the function returns `None`:
  `can_complete_circuit`, `coin_change`, `snakes_and_ladders`,
  `nearest_exit`, `oranges_rotting`, and each unanswerable query of
  `calc_equation`. `find_order` returns `[]` when the courses cannot all be
  taken, and `ladder_length` returns `0` when no chain exists.
- Inputs that leave no answer at all raise `ValueError` (for example
  `two_sum_sorted` with no matching pair, `min_jumps` when the end cannot be
  reached, or `max_path_sum` on an empty tree). `MinStack.pop`, `top` and
  `get_min` raise `IndexError` on an empty stack, and
  `MedianFinder.find_median` raises `ValueError` before any number is added.
- `LRUCache.get` returns `None` for a missing key; keys may be any hashable
  value.

## What it does not do

The package is a library only: it has no command-line program, and it reads
no input files. Call its functions from your own code.