"""Integer matrix multiplication, comparison and printing."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def matmul(a: Matrix, b: Matrix) -> list[list[int]]:
    """Product of the matrices ``a`` and ``b``."""
    _, cols_a = _shape(a)
    rows_b, cols_b = _shape(b)
    if cols_a != rows_b:
        raise ValueError(f"cannot multiply: {cols_a} columns by {rows_b} rows")
    columns = [list(column) for column in zip(*b)] if rows_b else [[] for _ in range(cols_b)]
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def mateq(a: Matrix, b: Matrix) -> bool:
    """True when both matrices have the same shape and the same elements."""
    if _shape(a) != _shape(b):
        return False
    return all(list(row_a) == list(row_b) for row_a, row_b in zip(a, b))


def format_matrix(matrix: Matrix) -> str:
    """Render each row as space-terminated values, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)