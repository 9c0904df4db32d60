# algokit

A small collection of classic algorithms and data structures in plain Python,
with no runtime dependencies. Everything is a library call: functions take
ordinary Python values and return new ones.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.sorting`: `heap_sort`, `merge_sort`, `quick_sort`,
  `randomized_quick_sort` (takes an optional `random.Random`), `selection_sort`,
  `exchange_sort`, `bubble_sort`, `insertion_sort`, `counting_sort`
  (non-negative integers), `bucket_sort` (values in `[0, 1)`) and `wave_sort`.
  Each returns a new list and leaves its input alone.
- `algokit.searching`: `binary_search` and `linear_search`, returning an index
  or `None`.
- `algokit.sequences`: `max_window_sum`, `two_sum_pairs`, `three_sum`,
  `combination_sum`, `left_rotate`, `frequencies`, `array_sum`, `can_satisfy`
  and `edit_distance` (Levenshtein distance).
- `algokit.measures`: `population_std`, `euclidean_distance`,
  `matrix_multiply`.
- `algokit.numtheory`: `is_armstrong`, `is_prime`, `prime_factors`,
  `decimal_to_binary`, `binary_to_decimal`, `is_woodall`, `reverse_number`,
  `power`, `divide` (quotient truncated toward zero, with remainder).
- `algokit.puzzles`: `min_stair_steps` and `min_power_terms`.
- `algokit.patterns`: text patterns returned as strings, one
  newline-terminated line per row: `pascal_triangle`, `pyramid`,
  `full_triangle`, `inverted_triangle`, `right_arrow`, `left_arrow`,
  `spaced_triangle`, `spaced_inverted_triangle`, `spaced_right_arrow`,
  `spaced_left_arrow`, `palindrome_pyramid`, `zigzag`, `number_triangle`.
- `algokit.graphs`: `floyd_warshall`, `format_distances`, `dijkstra` (a zero
  weight means no edge), the constant `INF` for unreachable pairs, and a
  directed `Graph` with `add_edge` and `topological_sort`.
- `algokit.linkedlist`: `Node`, `LinkedList` (`append`, `prepend`, `delete`,
  `reverse`, `reverse_recursive`, `reverse_in_groups`, `move_last_to_front`,
  iteration, `in`, `len`, and `str` as `1->2->NULL`) and `merge_sorted`,
  which splices two ascending lists and leaves both inputs empty.
- `algokit.expression`: `ExprNode`, `is_operator`, `postfix_to_tree`, `infix`
  and `evaluate` for integer expression trees.
- `algokit.threaded`: `ThreadedBST`, a threaded binary search tree with
  `insert`, `search`, `delete`, `clear`, `in`, `len` and ascending iteration.
- `algokit.tutorials`: `Tutorial`, `VideoTutorial` and `TextTutorial`
  dataclasses. `VideoTutorial.describe()` gives title, rating and length;
  `Tutorial` and `TextTutorial` describe themselves as an empty string.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.sequences import three_sum, edit_distance
from algokit.graphs import Graph

merge_sort([5, 4, 3, 2, 1])          # [1, 2, 3, 4, 5]
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]
edit_distance("food", "money")       # 4

g = Graph(6)
for u, v in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(u, v)
g.topological_sort()                 # [5, 4, 2, 3, 1, 0]
```

```python
from algokit.threaded import ThreadedBST

tree = ThreadedBST()
for key in (20, 10, 30):
    tree.insert(key)
10 in tree                           # True
list(tree)                           # [10, 20, 30]
```

## What it does not do

- There is no command-line program; nothing reads input from the terminal.
  Call the functions from Python.
- There is no general binary tree with level-order insertion, deletion or
  breadth-first traversal; the only tree of keys is `ThreadedBST`, which keeps
  them in search-tree order.