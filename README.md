# dsakit

A small library of classic algorithms and data structures, written in plain
Python with no runtime dependencies. Everything is exposed as functions and
classes to call from your own code.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.range_trees`

Point-update, range-query segment trees. Ranges are inclusive on both ends and
positions are zero-based. A range that lies wholly outside the sequence gives
the tree's identity value (for minimum trees, `INT_MAX`, which is `2**31 - 1`).

- `SegmentTree(leaves, combine, identity)`: the generic tree the others are
  built on, with `query(left, right)`, `update(pos, leaf)` and `len()`
- `MinSegmentTree`, `SumSegmentTree`: range minimum and range sum
- `MinCountSegmentTree`: range minimum together with how many times it occurs,
  as a `(minimum, count)` pair
- `PrefixSumSegmentTree`: largest prefix sum of a range (never below zero,
  since the empty prefix counts)
- `DistinctCharSegmentTree`: number of distinct lowercase letters in a range;
  other characters raise `ValueError`
- `BracketSegmentTree`: length of the longest correct bracket subsequence
  (any character other than `(` counts as a closing bracket); it has no updates
- `HotelSegmentTree` with `max()` and `allocate(rooms)`, and
  `assign_hotels(capacities, groups)`: give each group the first hotel with
  enough free rooms

```python
from dsakit.range_trees import MinSegmentTree, assign_hotels

tree = MinSegmentTree([5, 3, 8, 6])
tree.query(0, 2)       # 3
tree.update(1, 10)
tree.query(0, 2)       # 5

assign_hotels([3, 2, 4, 1, 5, 5, 2, 6], [4, 4, 7, 1, 1])
# [3, 5, 0, 1, 1]   (1-based hotel numbers, 0 when no hotel fits)
```

`HotelSegmentTree.allocate` raises `ValueError` when no hotel has room.

### `dsakit.digit_dp`

Counting over inclusive ranges of integers by digit dynamic programming:

- `count_no_adjacent_equal(low, high)`: numbers with no two equal neighbouring digits
- `count_classy(low, high)`: numbers with at most three non-zero digits
- `count_digit_sum_multiples(bound, divisor)`: numbers in `[1, bound]` whose
  digit sum is divisible by `divisor`, modulo 1 000 000 007; `bound` may be a
  decimal string of any length
- `segment_digit_sum(low, high, k)`: sum of the numbers made of at most `k`
  distinct digits, modulo 998 244 353 (leading zeros, padded to the length of
  the bound, count as the digit 0)
- `digit_sum_range(low, high)`: total of the digits of every number in the
  range, reduced to an unsigned 64-bit value

### `dsakit.graphs`

Graphs given as a node count and a list of edges with 1-based node labels.
Trees are rooted at node 1; edges that do not form a tree, or a directed graph
with a cycle, raise `ValueError`.

- `longest_path_dag(node_count, edges)`: edges on the longest path
- `count_tree_colourings(node_count, edges)`: black/white colourings with no
  two adjacent black nodes, modulo 1 000 000 007
- `count_pairs_at_distance(node_count, k, edges)`: unordered pairs exactly `k` edges apart
- `tree_diameter(node_count, edges)`: edges on the longest path
- `tree_distance_sums(node_count, edges)`: for each node, the sum of its distances to all others

```python
from dsakit.graphs import tree_diameter

tree_diameter(5, [(1, 2), (1, 3), (3, 4), (3, 5)])   # 3
```

### `dsakit.binary_tree`

A `TreeNode` type (compared by identity), `build_tree` from a level-order list
with `None` for gaps, traversals (`preorder`, `inorder`, `level_order`,
`vertical_traversal`, `right_side_view`), reconstruction from traversal pairs
(`build_from_preorder_inorder`, `build_from_inorder_postorder`), and checks and
measures: `is_same_tree`, `is_symmetric`, `is_balanced`, `max_depth`,
`diameter`, `max_path_sum`, `count_complete_nodes` and
`lowest_common_ancestor`.

```python
from dsakit.binary_tree import build_tree, level_order

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)   # [[3], [9, 20], [15, 7]]
```

### `dsakit.linked_list`

A `ListNode` type with `from_iterable` and `to_list`, plus `has_cycle`,
`detect_cycle`, `reverse_list`, `reverse_between`, `sort_list`,
`middle_node`, `delete_middle`, `delete_node`, `odd_even_list`,
`is_palindrome` (which leaves the list as it found it) and `add_two_numbers`
for digit lists stored least significant digit first. Functions that rearrange
a list work in place and return the head.

### `dsakit.dynamic`

Interval and sequence dynamic programming: `ship_within_days`,
`max_sum_after_partitioning`, `parse_bool_expr`, `min_palindrome_cuts`,
`count_squares`, `min_cost_cut_stick`, `max_coins` and
`longest_unique_substring`.

```python
from dsakit.dynamic import parse_bool_expr

parse_bool_expr("|(f,&(t,t))")   # True
```

### `dsakit.stacks`

Monotonic-stack techniques: `trap`, `largest_rectangle`, `maximal_rectangle`,
`next_greater_element`, `next_greater_circular`, `asteroid_collision`,
`remove_k_digits`, `sum_subarray_mins` (modulo 1 000 000 007),
`sum_subarray_ranges` and the `StockSpanner` class.

```python
from dsakit.stacks import StockSpanner, trap

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6

spanner = StockSpanner()
[spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]
# [1, 1, 1, 2, 1, 4, 6]
```

## What it does not do

The package is a library only. It has no command-line program: nothing reads
problem input from standard input or prints answers; call the functions with
your own data instead.