"""Problems answered over two-dimensional integer matrices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum of both diagonals of a square matrix, counting the centre once."""
    last = len(mat) - 1
    return sum(
        value
        for i, row in enumerate(mat)
        for j, value in enumerate(row)
        if i == j or i + j == last
    )


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """The largest running total of any customer's accounts, never below 0."""
    return max(
        (total for row in accounts for total in accumulate(row)),
        default=0,
    )


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, left, bottom, right = 0, 0, rows - 1, cols - 1
    while top <= bottom and left <= right:
        yield from ((top, col) for col in range(left, right + 1))
        top += 1
        yield from ((row, right) for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            yield from ((bottom, col) for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            yield from ((row, left) for row in range(bottom, top - 1, -1))
            left += 1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values of the matrix read clockwise from the top left corner."""
    if not matrix:
        return []
    return [matrix[row][col] for row, col in _spiral_cells(len(matrix), len(matrix[0]))]


def generate_matrix(n: int) -> list[list[int]]:
    """An n x n matrix holding 1 to n*n laid out clockwise from the top left."""
    if n <= 0:
        return []
    matrix = [[0] * n for _ in range(n)]
    for value, (row, col) in enumerate(_spiral_cells(n, n), start=1):
        matrix[row][col] = value
    return matrix