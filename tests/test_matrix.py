from fractions import Fraction

import pytest

from algobox.matrix import (
    diagonal_score,
    is_orthogonal,
    largest_histogram_area,
    max_rectangle_area,
    multiply,
    spiral_order,
)


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _transpose(matrix):
    return [list(column) for column in zip(*matrix)]


ROTATION = [
    [Fraction(3, 5), Fraction(-4, 5), 0],
    [Fraction(4, 5), Fraction(3, 5), 0],
    [0, 0, 1],
]


def test_identity_is_orthogonal():
    assert is_orthogonal(_identity(3)) is True


def test_rotation_is_orthogonal_and_so_is_its_transpose():
    assert is_orthogonal(ROTATION) is True
    assert is_orthogonal(_transpose(ROTATION)) is True


def test_rotation_times_transpose_is_identity():
    assert multiply(ROTATION, _transpose(ROTATION)) == _identity(3)


def test_scaled_identity_is_not_orthogonal():
    assert is_orthogonal([[2, 0, 0], [0, 2, 0], [0, 0, 2]]) is False


def test_orthogonal_rejects_non_square():
    with pytest.raises(ValueError):
        is_orthogonal([[1, 0, 0], [0, 1, 0]])


def test_spiral_square():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_single_row_and_column():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


@pytest.mark.parametrize("rows,cols", [(3, 4), (4, 3), (2, 5), (5, 5), (1, 1)])
def test_spiral_visits_every_item_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_multiply_by_identity():
    matrix = [[1, 2, 3], [4, 5, 6]]
    assert multiply(matrix, _identity(3)) == matrix
    assert multiply(_identity(2), matrix) == matrix


def test_multiply_shape_and_transpose_rule():
    a = [[1, 2], [3, 4], [5, 6]]
    b = [[7, 8, 9, 10], [11, 12, 13, 14]]
    product = multiply(a, b)
    assert len(product) == len(a)
    assert all(len(row) == len(b[0]) for row in product)
    assert _transpose(product) == multiply(_transpose(b), _transpose(a))


def test_multiply_is_associative():
    a = [[1, 2], [3, 4]]
    b = [[0, 1], [1, 0]]
    c = [[2, 5], [7, 1]]
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2, 3]], [[1, 2], [3, 4]])


def test_histogram_classic_example():
    assert largest_histogram_area([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_bounds():
    heights = [4, 2, 0, 3, 2, 5]
    area = largest_histogram_area(heights)
    assert area >= max(heights)
    assert area <= max(heights) * len(heights)


def test_histogram_uniform_bars_cover_everything():
    heights = [3] * 4
    assert largest_histogram_area(heights) == sum(heights)


def test_histogram_empty():
    assert largest_histogram_area([]) == 0


def test_max_rectangle_all_ones():
    grid = [[1] * 4 for _ in range(3)]
    assert max_rectangle_area(grid) == sum(map(sum, grid))


def test_max_rectangle_all_zeros():
    assert max_rectangle_area([[0, 0], [0, 0]]) == 0


def test_max_rectangle_does_not_modify_grid():
    grid = [[0, 1, 1, 0], [1, 1, 1, 1], [1, 1, 1, 1], [1, 1, 0, 0]]
    snapshot = [row[:] for row in grid]
    area = max_rectangle_area(grid)
    assert grid == snapshot
    assert area == max_rectangle_area(_transpose(grid))
    assert area >= max(largest_histogram_area(row) for row in grid)


def test_diagonal_score_matching_diagonal():
    assert diagonal_score(5, [[5, 9, 9], [9, 5, 9], [9, 9, 5]]) == 0


def test_diagonal_score_transpose_invariant():
    grid = [[1, 2, 3], [4, 0, 6], [7, 8, 2]]
    assert diagonal_score(1, grid) == diagonal_score(1, _transpose(grid))


def test_diagonal_score_takes_larger_triangle():
    upper_only = [[0, 2, 3], [0, 0, 4], [0, 0, 0]]
    lower_only = _transpose(upper_only)
    score = diagonal_score(1, upper_only)
    assert score == diagonal_score(1, lower_only)
    assert score == sum(map(sum, upper_only))


def test_diagonal_score_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_score(1, [[1, 2], [3, 4], [5, 6]])