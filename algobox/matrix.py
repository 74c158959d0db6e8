"""Matrix checks, products, traversals and rectangle problems."""

from __future__ import annotations

from itertools import chain
from typing import Any, List, Sequence


def _square(matrix: Sequence[Sequence[Any]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _width(matrix: Sequence[Sequence[Any]]) -> int:
    width = len(matrix[0]) if matrix else 0
    if any(len(row) != width for row in matrix):
        raise ValueError("rows must all have the same length")
    return width


def is_orthogonal(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix times its transpose is exactly the identity."""
    _square(matrix)
    return all(
        sum(a * b for a, b in zip(row_i, row_j)) == (1 if i == j else 0)
        for i, row_i in enumerate(matrix)
        for j, row_j in enumerate(matrix)
    )


def spiral_order(matrix: Sequence[Sequence[Any]]) -> List[Any]:
    """Items read clockwise from the top-left corner, spiralling inward."""
    _width(matrix)
    result: List[Any] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, (len(matrix[0]) - 1) if matrix else -1
    while top <= bottom and left <= right:
        result.extend(matrix[top][col] for col in range(left, right + 1))
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def multiply(first: Sequence[Sequence[Any]], second: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Matrix product; the columns of ``first`` must match the rows of ``second``."""
    inner = _width(first)
    _width(second)
    if first and inner != len(second):
        raise ValueError("matrices cannot be multiplied")
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle that fits under a histogram of non-negative bars."""
    heights = list(heights)
    best = 0
    stack: List[int] = []
    for index, height in enumerate(chain(heights, [0])):
        while stack and heights[stack[-1]] >= height:
            top = stack.pop()
            width = index if not stack else index - stack[-1] - 1
            best = max(best, heights[top] * width)
        stack.append(index)
    return best


def max_rectangle_area(grid: Sequence[Sequence[int]]) -> int:
    """Largest all-nonzero rectangle in a 0/1 grid; the grid is not changed."""
    width = _width(grid)
    heights = [0] * width
    best = 0
    for row in grid:
        heights = [height + value if value else 0 for height, value in zip(heights, row)]
        best = max(best, largest_histogram_area(heights))
    return best


def diagonal_score(target: int, grid: Sequence[Sequence[int]]) -> int:
    """0 if every main-diagonal entry equals ``target``.

    Otherwise the larger of the sums strictly below and strictly above
    the main diagonal.
    """
    size = _square(grid)
    if all(grid[i][i] == target for i in range(size)):
        return 0
    lower = sum(grid[i][j] for i in range(size) for j in range(i))
    upper = sum(grid[i][j] for i in range(size) for j in range(i + 1, size))
    return max(lower, upper)