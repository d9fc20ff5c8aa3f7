"""Exercises on rectangular integer matrices."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _rows(matrix: Matrix) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows differ in length")
    return rows


def rotate_clockwise(matrix: Matrix) -> list[list[int]]:
    """Return a square matrix rotated 90 degrees clockwise."""
    rows = _rows(matrix)
    if rows and len(rows) != len(rows[0]):
        raise ValueError("only square matrices can be rotated")
    return [list(column) for column in zip(*reversed(rows))]


def set_zeroes(matrix: Matrix) -> list[list[int]]:
    """Return a copy where every row and column holding a zero is zeroed."""
    rows = _rows(matrix)
    zero_rows = {i for i, row in enumerate(rows) if 0 in row}
    zero_cols = {j for row in rows for j, value in enumerate(row) if value == 0}
    return [
        [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]
        for i, row in enumerate(rows)
    ]


def spiral_order(matrix: Matrix) -> list[int]:
    """Values of the matrix read clockwise from the top-left, spiralling inward."""
    rows = _rows(matrix)
    result: list[int] = []
    if not rows or not rows[0]:
        return result
    top, bottom = 0, len(rows) - 1
    left, right = 0, len(rows[0]) - 1
    while top <= bottom and left <= right:
        result.extend(rows[top][left:right + 1])
        top += 1
        result.extend(row[right] for row in rows[top:bottom + 1])
        right -= 1
        if top <= bottom:
            result.extend(reversed(rows[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(row[left] for row in reversed(rows[top:bottom + 1]))
            left += 1
    return result