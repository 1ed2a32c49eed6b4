# puzzlekit

A small collection of classic algorithms, written as plain functions over
ordinary Python values. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Modules

### `puzzlekit.trees`

`TreeNode` is a dataclass with `val`, `left` and `right`.
`build_tree(values)` builds a tree from a level-order listing where `None` marks
a missing child; an empty listing, or one starting with `None`, gives `None`.

- `inorder_traversal(root)`, `preorder_traversal(root)`, `postorder_traversal(root)`
- `level_order(root)`: one list of values for each level, top to bottom
- `zigzag_level_order(root)`: the same, alternating left-to-right and right-to-left
- `right_side_view(root)`: the rightmost value of each level
- `vertical_traversal(root)`: values grouped by column (left to right), and within
  a column ordered by row, then by value
- `min_depth(root)`: the number of nodes on the shortest root-to-leaf path (0 for an empty tree)
- `has_path_sum(root, target_sum)`: whether some root-to-leaf path adds up to the target

```python
from puzzlekit.trees import build_tree, level_order, zigzag_level_order

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)         # [[3], [9, 20], [15, 7]]
zigzag_level_order(root)  # [[3], [20, 9], [15, 7]]
```

### `puzzlekit.linked_list`

`ListNode` is a singly linked list node with `val` and `next`. Iterating over a
node yields the values from that node to the end. `from_iterable(values)` builds
a list (`None` when there are no values), and `delete_duplicates(head)` returns a
new list of the values that occur exactly once, in sorted order.

```python
from puzzlekit.linked_list import from_iterable, delete_duplicates

list(delete_duplicates(from_iterable([1, 2, 3, 3, 4, 4, 5])))  # [1, 2, 5]
```

### `puzzlekit.sequences`

- `maximum_gap(nums)`: the largest difference between neighbours once sorted; 0 for fewer than two values
- `lucky_numbers(matrix)`: values that are the minimum of their row and the maximum
  of their column; raises `ValueError` for an empty matrix
- `can_break(s1, s2)`: whether some permutation of one string is at least the other
  at every position; raises `ValueError` if the lengths differ
- `count_hill_valley(nums)`: the number of hills and valleys, a run of equal values counting once
- `longest_max_and_subarray(nums)`: the length of the longest run of the maximum
  value; raises `ValueError` for an empty sequence
- `max_unique_sum(nums)`: the sum of the distinct positive values, or the largest
  value when none is positive (0 for an empty sequence)

### `puzzlekit.recurrences`

- `climb_stairs(n)`: the number of ways to climb `n` steps by ones and twos (0 for `n == 0`)
- `fibonacci(n)`: the `n`-th Fibonacci number, with `fibonacci(0) == 0`
- `n_choose_r(n, r)` and `pascal_triangle(num_rows)`
- `is_happy(n)`: whether repeatedly summing squared digits reaches 1

`climb_stairs` and `fibonacci` raise `ValueError` for negative `n`.

## What it does not do

puzzlekit is a library only: it has no command-line tool, and it reads and
writes no files.

## Running the tests

```
pip install .[test]
pytest
```