# algokit

Classic algorithms in plain Python, with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `MaxHeap` / `heap_sort`, `merge`, `merge_sort`, `hoare_partition`, `lomuto_partition`, `randomized_partition`, `median_of_three_partition`, `quicksort`, `hybrid_sort`, `random_int_list` |
| `algokit.selection` | `randomized_select`, median-of-medians `select`, `partition_around`, `min_max`, `weighted_median` |
| `algokit.knapsack` | 0/1 knapsack: `knapsack_table`, `knapsack_traceback`, `knapsack_jump`, `fractional_bound` |
| `algokit.chain_dp` | `Matrix`, `matrix_chain_order`, `matrix_chain_recursive`, `matrix_chain_memoized`, `min_weight_triangulation`, `optimal_bst`, `min_cut_cost` |
| `algokit.subset_sum` | `subset_sum_backtrack`, `subset_sum_memo`, `subset_sum_dp`, `subset_sum_dp_optimized` |
| `algokit.lcs` | longest common subsequence: `lcs_length`, `lcs_sequence` |
| `algokit.circuit` | maximum non-crossing subset of nets: `mnset`, `mnset_traceback`, `max_noncrossing_set` |
| `algokit.flowshop` | two-machine flow-shop scheduling by Johnson's rule: `flowshop` |
| `algokit.image_compress` | optimal pixel segmentation: `length_in_bits`, `compress`, `compress_traceback`, `segments` |
| `algokit.polygon_game` | `PolygonGame` with `max_value()` |
| `algokit.geometry` | `Point`, `distance` |
| `algokit.activity` | `sort_by_finish`, `greedy_activity_selector`, `recursive_activity_selector` |
| `algokit.dtree` | greedy marking of nodes on a weighted tree: `DTree`, `read_tree`, `main` |
| `algokit.shortest_path` | `dijkstra` on an adjacency matrix |
| `algokit.hanoi` | `Move`, `hanoi_recursive`, `hanoi_iterative`, `hanoi_parity` |
| `algokit.combinatorics` | `integer_partition`, `permutations`, `distinct_permutations`, `n_queens` |
| `algokit.prefix` | `evaluate_prefix` |
| `algokit.problems` | `ListNode`, `add_two_numbers`, `length_of_longest_substring`, `find_median_sorted_arrays`, `longest_palindrome` |
| `algokit.dates` | `day_of_week`, `dow` (Sakamoto's method, 0 = Sunday) |
| `algokit.kmp` | `prefix_function`, `find_concat`, `find_kmp` |

A few conventions:

- Functions in `algokit.sorting` and `algokit.selection` that take `lo` and
  `hi` work on the inclusive range `items[lo..hi]` and change the list in
  place; `heap_sort` returns a new list instead.
- Selection functions take a 1-based `rank` and raise `IndexError` when it
  is out of range.
- Dynamic-programming tables returned by `algokit.chain_dp`,
  `algokit.circuit` and `algokit.image_compress` are indexed from 1, as
  the recurrences are written.
- Invalid input (mismatched lengths, negative weights, a month outside
  1..12 and so on) raises `ValueError`.

## Installation

```
pip install .
```

## Examples

```python
from algokit.combinatorics import integer_partition, n_queens
from algokit.dates import day_of_week
from algokit.kmp import find_kmp
from algokit.prefix import evaluate_prefix
from algokit.problems import length_of_longest_substring
from algokit.hanoi import hanoi_recursive

integer_partition(6)                           # 11
n_queens(8)                                    # 92
day_of_week(2025, 4, 17)                       # 4 (Thursday)
find_kmp("hello", "ll")                        # 2
evaluate_prefix("* + 12 * / 48 2 - 26 9 50")   # 21000
length_of_longest_substring("pwwkew")          # 3
str(hanoi_recursive(1)[0])                     # 'Move disk 1 from A to C'
```

## Command line

`algokit-dtree` reads a tree description from the file named as its
argument, or from standard input when no file is given: first the node
count `n` and the tolerance `d`, then for each node its child count `k`
followed by `k` pairs `child weight`. Node 0 is the root. It prints the
number of nodes the greedy pass marks, or an error message and exit
status 1 when the input is malformed.

```
algokit-dtree tree.txt
algokit-dtree < tree.txt
```

## What this package does not do

- `algokit.geometry` has only `Point` and `distance`; there is no
  closest-pair search.
- `algokit.knapsack.fractional_bound` computes the upper bound used when
  branching and bounding, but there is no complete branch-and-bound
  knapsack solver.
- Apart from `algokit-dtree`, the algorithms are library functions only and
  have no command-line front end.

## Running the tests

```
pip install ".[test]"
pytest
```