"""Single-threaded matrix multiplication with different loop orders.

``mul_ijk`` and ``mul_transpose`` overwrite C with A x B. ``mul_ikj``,
``mul_kij`` and ``mul_blocked`` add A x B to what C already holds, so C
should start zeroed for a plain product.
"""

from __future__ import annotations

from .matrix import Matrix

BLOCK_SIZE = 32


def _size(a: Matrix, b: Matrix, c: Matrix) -> int:
    if not (a.n == b.n == c.n):
        raise ValueError("matrices must have the same size")
    return a.n


def mul_ijk(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Set C = A x B, one dot product per cell, k innermost."""
    n = _size(a, b, c)
    b_rows = list(b.rows())
    for row_a, row_c in zip(a.rows(), c.rows()):
        row_c[:] = [
            sum(x * b_row[j] for x, b_row in zip(row_a, b_rows)) for j in range(n)
        ]


def mul_ikj(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add A x B to C, scaling rows of B by A[i][k], j innermost."""
    _size(a, b, c)
    b_rows = list(b.rows())
    for row_a, row_c in zip(a.rows(), c.rows()):
        for a_ik, row_b in zip(row_a, b_rows):
            row_c[:] = [cv + a_ik * bv for cv, bv in zip(row_c, row_b)]


def mul_kij(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Add A x B to C with k outermost, then i, then j."""
    _size(a, b, c)
    a_rows = list(a.rows())
    c_rows = list(c.rows())
    for k, row_b in enumerate(b.rows()):
        for row_a, row_c in zip(a_rows, c_rows):
            a_ik = row_a[k]
            row_c[:] = [cv + a_ik * bv for cv, bv in zip(row_c, row_b)]


def mul_blocked(a: Matrix, b: Matrix, c: Matrix, block_size: int = BLOCK_SIZE) -> None:
    """Add A x B to C, tiling i, j and k into blocks of block_size."""
    n = _size(a, b, c)
    if block_size <= 0:
        raise ValueError("block size must be positive")
    for ii in range(0, n, block_size):
        i_max = min(ii + block_size, n)
        for jj in range(0, n, block_size):
            j_max = min(jj + block_size, n)
            for kk in range(0, n, block_size):
                ks = range(kk, min(kk + block_size, n))
                for i in range(ii, i_max):
                    row_a = a[i]
                    row_c = c[i]
                    for j in range(jj, j_max):
                        row_c[j] = sum((row_a[k] * b[k][j] for k in ks), row_c[j])


def mul_transpose(a: Matrix, b: Matrix, c: Matrix) -> None:
    """Set C = A x B by first transposing B so both operands are read by row."""
    _size(a, b, c)
    bt_rows = list(b.transposed().rows())
    for row_a, row_c in zip(a.rows(), c.rows()):
        row_c[:] = [sum(x * y for x, y in zip(row_a, col)) for col in bt_rows]