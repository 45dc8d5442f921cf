# algobox

A library of classic algorithms and data structures in plain Python, using
only the standard library. It runs on Python 3.10 and later.

## Installation

From a checkout of the project:

```
pip install .
```

The `test` extra (`pip install ".[test]"`) adds pytest for running the tests
in `tests/`.

## Modules

| Module | Contents |
| --- | --- |
| `algobox.linked_list` | `ListNode`, `build_list`, `list_values`, `detect_cycle`, `get_intersection_node`, `reverse_list`, `merge_two_lists`, `merge_k_lists`, `swap_pairs`, `reverse_between` |
| `algobox.binary_tree` | `TreeNode`, `from_level_order`, `build_tree`, `preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `max_depth`, `is_balanced`, `is_symmetric`, `path_sum`, `diameter_of_binary_tree`, `average_of_levels`, `trim_bst`, `recover_tree`, `del_nodes` |
| `algobox.dynamic` | `is_match`, `longest_common_subsequence`, `min_distance`, `max_profit`, `max_profit_k_transactions`, `max_profit_with_cooldown`, `rob`, `maximal_square`, `num_squares`, `length_of_lis`, `longest_valid_parentheses`, `coin_change`, `number_of_arithmetic_slices`, `can_partition`, `find_max_form`, `min_path_sum`, `count_substrings`, `min_steps`, `climb_stairs`, `num_decodings`, `word_break` |
| `algobox.word_ladder` | `ladder_length`, `find_ladders` |
| `algobox.grids` | `shortest_bridge`, `update_matrix`, `update_matrix_bfs`, `pacific_atlantic`, `find_circle_num`, `max_area_of_island`, `exist`, and the constant `UNREACHABLE` |
| `algobox.backtracking` | `solve_sudoku`, `permute`, `solve_n_queens`, `combine` |
| `algobox.graphs` | `Graph` (`add_edge`, `neighbors`, `dfs_order`, `dfs_stack_order`), `UnionFind` (`find`, `link`, `is_union`), `find_itinerary`, `find_order`, `is_bipartite`, `find_redundant_connection` |
| `algobox.containers` | `TwoStackQueue` (`push`, `pop`, `peek`, `is_empty`), `longest_consecutive`, `max_points`, `max_sliding_window` |
| `algobox.greedy` | `candy`, `erase_overlap_intervals`, `find_content_children`, `can_place_flowers`, `check_possibility`, `partition_labels`, `max_chunks_to_sorted`, `find_min_arrow_shots` |
| `algobox.searching` | `search_range`, `my_sqrt`, `search_rotated` |
| `algobox.prefix_sums` | `NumMatrix` (`sum_region`), `subarray_sum` |
| `algobox.sorting` | `find_kth_largest`, `top_k_frequent`, `reconstruct_queue` |
| `algobox.trie` | `Trie` (`insert`, `search`, `starts_with`) |
| `algobox.two_pointers` | `two_sum_sorted`, `search_matrix`, `min_window`, `merge_sorted` |
| `algobox.calculator` | `calculate` |

## Examples

```python
from algobox.dynamic import min_distance, coin_change
from algobox.binary_tree import from_level_order, inorder_traversal
from algobox.linked_list import build_list, reverse_list, list_values
from algobox.trie import Trie
from algobox.calculator import calculate

min_distance("horse", "ros")          # 3
coin_change([1, 2, 5], 11)            # 3

root = from_level_order([1, None, 2, 3])
inorder_traversal(root)               # [1, 3, 2]

list_values(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]

trie = Trie()
trie.insert("apple")
trie.search("app")                    # False
trie.starts_with("app")               # True

calculate("3+2*2")                    # 7
```

```python
from algobox.graphs import Graph, find_order

g = Graph(3)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 1)
g.dfs_order()                         # [0, 1, 2]

find_order(2, [[1, 0]])               # [0, 1]
```

## Behaviour worth knowing

- Functions that work in place change what they are given: `solve_sudoku`
  fills the board, `recover_tree` swaps two node values, `merge_sorted`
  writes into `nums1`, and the linked-list operations other than
  `merge_k_lists` relink the existing nodes. `shortest_bridge` works on a
  copy and leaves its grid alone.
- Bad input raises rather than returning a sentinel: for example
  `solve_sudoku` raises `ValueError` for a board that is not 9x9 or has no
  solution, `find_kth_largest` raises `ValueError` for `k` out of range,
  `TwoStackQueue.pop` and `peek` raise `IndexError` on an empty queue,
  `NumMatrix.sum_region` raises `IndexError` for a rectangle outside the
  matrix, and `calculate` raises `ValueError` for unexpected characters and
  `ZeroDivisionError` for division by zero.
- Some results signal "none found" by value: `coin_change` returns `-1`,
  `search_range` returns `[-1, -1]`, `find_order` and `two_sum_sorted`
  return `[]`, `ladder_length` returns `0`, and `find_itinerary` returns
  `["JFK"]` alone when no route uses every ticket.
- `update_matrix` reports cells that no zero can reach as `UNREACHABLE`
  (100000); `update_matrix_bfs` reports them as `0`.
- `Graph.neighbors` lists the newest edge first, and both depth-first
  orderings follow that order.

## What it does not do

algobox is a library only. It has no command-line program; every routine is
called from Python code.