# algobox

A small library of classic algorithms and data structures for study and
everyday use. It is pure Python and has no runtime dependencies.

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

| Module                 | Contents |
|------------------------|----------|
| `algobox.sorting`      | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `merge_sorted` |
| `algobox.searching`    | `binary_search`, `search_rotated`, `find_pivot`, `find_peak`, `first_and_last`, `allocate_books`, `max_subarray_sum` |
| `algobox.numbers`      | `is_palindrome_number`, `primes_up_to`, `power`, `factorial`, `fibonacci`, `is_armstrong`, `is_perfect`, `is_prime`, `is_leap_year`, `grade`, `arithmetic_progression`, `divide`, `even_numbers`, `odd_numbers`, `multiples`, `exceeds_sum_of_others`, `first_capital` |
| `algobox.redblack`     | `RedBlackTree`, `Color` |
| `algobox.avl`          | `AVLTree` |
| `algobox.binary_tree`  | `TreeNode`, `build_tree`, `inorder`, `sum_of_longest_root_to_leaf_path`, `is_same_tree` |
| `algobox.linked_list`  | `ListNode`, `from_values`, `to_values`, `length`, `attach_tail`, `intersection_value` |
| `algobox.graphs`       | `dijkstra`, `topological_sort` |
| `algobox.matrix`       | `is_orthogonal`, `spiral_order`, `multiply`, `largest_histogram_area`, `max_rectangle_area`, `diagonal_score` |
| `algobox.patterns`     | `fixed_patterns` and star/digit patterns such as `star_pyramid`, `floyd_triangle`, `hollow_square`, `right_arrow`, `left_arrow` |

## Sorting and searching

The sort functions take any iterable and return a new sorted list; the input
is left alone. `merge_sorted` merges two already sorted sequences.

```python
from algobox.sorting import merge_sort, merge_sorted
from algobox.searching import binary_search, first_and_last, max_subarray_sum

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
merge_sorted([4, 6, 8], [2, 3, 12])   # [2, 3, 4, 6, 8, 12]
binary_search([3, 4, 5, 6, 7], 4)     # 1
binary_search([3, 4, 5], 10)          # None
first_and_last([1, 2, 2, 2, 3], 2)    # (1, 3)
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
```

Searches that find nothing return `None`. Functions with no sensible answer
raise `ValueError`, for example `find_peak([])`, `find_pivot([])`, or
`allocate_books` with fewer books than students. `max_subarray_sum` allows an
empty run, so an all-negative input gives `0`.

## Numbers

```python
from algobox.numbers import primes_up_to, is_armstrong, grade, fibonacci

primes_up_to(20)       # [2, 3, 5, 7, 11, 13, 17, 19]
is_armstrong(153)      # True; the power defaults to the digit count
fibonacci(6)           # [0, 1, 1, 2, 3, 5]
grade(75)              # "A"
```

`grade` raises `ValueError` for marks outside 0..100, `power` for a negative
exponent and `is_perfect` for a number below 1. `first_capital` returns the
first character in `A`..`Z`, or `None`.

## Trees and linked lists

`RedBlackTree` keeps duplicate values. `delete` removes one occurrence and
returns `False` if the value is absent. `inorder()` gives `(value, Color)`
pairs and `root_entry()` the root's pair, or `None` for an empty tree.
Iterating a tree yields its values in ascending order.

`AVLTree` holds unique keys: `insert` returns `False` for a key already
present.

```python
from algobox.redblack import RedBlackTree
from algobox.avl import AVLTree

rb = RedBlackTree([9, 7, 11, 6, 15])
rb.delete(9)                      # True
list(rb)                          # [6, 7, 11, 15]

avl = AVLTree([10, 20, 30, 40, 50, 25])
avl.preorder()                    # [30, 20, 10, 25, 40, 50]
avl.height()                      # 3
```

`build_tree` reads space-separated level-order values with `N` marking a
missing child:

```python
from algobox.binary_tree import build_tree, inorder, sum_of_longest_root_to_leaf_path

root = build_tree("4 2 5 7 1 2 3 N N 6 N")
inorder(root)                              # [7, 2, 1, 6, 4, 2, 5, 3]
sum_of_longest_root_to_leaf_path(root)     # 13
```

`algobox.linked_list` builds singly linked lists from values, joins one list's
tail onto a 1-based position of another with `attach_tail`, and finds the
value of the first shared node with `intersection_value` (or `None`).

## Graphs and matrices

`dijkstra` takes an adjacency matrix in which `0` means "no edge" and returns
the distance to every vertex, `None` for vertices that cannot be reached.
`topological_sort` takes adjacency lists for vertices `0..n-1`; it does not
detect cycles.

```python
from algobox.graphs import dijkstra, topological_sort
from algobox.matrix import spiral_order, multiply, max_rectangle_area

dijkstra([[0, 4], [4, 0]], 0)          # [0, 4]
topological_sort([[1], [2], []])       # [0, 1, 2]
spiral_order([[1, 2], [3, 4]])         # [1, 2, 4, 3]
multiply([[1, 2]], [[3], [4]])         # [[11]]
max_rectangle_area([[0, 1, 1], [1, 1, 1]])  # 4
```

`multiply` raises `ValueError` when the shapes do not fit, and the matrix
functions raise `ValueError` for ragged rows or, where a square is needed, a
non-square matrix.

## Patterns

Each pattern function returns its lines as a list of strings;
`fixed_patterns()` returns a dict of ten fixed patterns keyed
`"Question 1"` to `"Question 10"`.

```python
from algobox.patterns import star_pyramid

print("\n".join(star_pyramid(3)))
#   *
#  * *
# * * *
```

## What it does not do

algobox is a library only. It has no command-line program and reads no
input: every function takes its data as arguments and returns a result
instead of printing it.