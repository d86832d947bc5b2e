"""Single-threaded matrix addition C = A + B with different traversal orders."""

from __future__ import annotations

from collections.abc import Iterator

from .matrix import Matrix

BLOCK_SIZE = 32


def _size(a: Matrix, b: Matrix, c: Matrix) -> int:
    if not (a.n == b.n == c.n):
        raise ValueError("matrices must have the same size")
    return a.n


def _add_cells(a: Matrix, b: Matrix, c: Matrix, cells: Iterator[tuple[int, int]]) -> None:
    for i, j in cells:
        c[i][j] = a[i][j] + b[i][j]


def add_row_major(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add row by row."""
    _size(a, b, c)
    for row_a, row_b, row_c in zip(a.rows(), b.rows(), c.rows()):
        row_c[:] = [x + y for x, y in zip(row_a, row_b)]


def add_column_major(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add column by column."""
    n = _size(a, b, c)
    for j in range(n):
        for row_a, row_b, row_c in zip(a.rows(), b.rows(), c.rows()):
            row_c[j] = row_a[j] + row_b[j]


def add_blocked(a: Matrix, b: Matrix, c: Matrix, block_size: int = BLOCK_SIZE) -> None:
    """Add in square tiles of block_size, row-major inside each tile."""
    n = _size(a, b, c)
    if block_size <= 0:
        raise ValueError("block size must be positive")
    for x in range(0, n, block_size):
        for y in range(0, n, block_size):
            cols = slice(y, min(y + block_size, n))
            for i in range(x, min(x + block_size, n)):
                c[i][cols] = [p + q for p, q in zip(a[i][cols], b[i][cols])]


def _anti_diagonals(n: int) -> Iterator[tuple[int, int]]:
    for d in range(2 * n - 1):
        i_start, i_end = (d, 0) if d < n else (n - 1, d - (n - 1))
        for i in range(i_start, i_end - 1, -1):
            yield i, d - i


def add_diagonal(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add along anti-diagonals, each walked from bottom-left to top-right."""
    _add_cells(a, b, c, _anti_diagonals(_size(a, b, c)))


def _zigzag(n: int) -> Iterator[tuple[int, int]]:
    for d in range(2 * n - 1):
        if d % 2 == 0:
            r = min(d, n - 1)
            c = d - r
            while r >= 0 and c < n:
                yield r, c
                r -= 1
                c += 1
        else:
            c = min(d, n - 1)
            r = d - c
            while c >= 0 and r < n:
                yield r, c
                r += 1
                c -= 1


def add_zigzag(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add along anti-diagonals, alternating direction on each one."""
    _add_cells(a, b, c, _zigzag(_size(a, b, c)))