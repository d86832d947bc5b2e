"""Row-range multiplication kernels, each safe to run on its own worker thread.

Each kernel writes only the rows of C it owns, so disjoint ranges (or
distinct thread ids for the cyclic kernel) can run concurrently.
"""

from __future__ import annotations

from .matrix import Matrix

BLOCK_SIZE = 32


def _size(a: Matrix, b: Matrix, c: Matrix) -> int:
    if not (a.n == b.n == c.n):
        raise ValueError("matrices must have the same size")
    return a.n


def _check_range(start: int, end: int, limit: int) -> None:
    if not 0 <= start <= end <= limit:
        raise ValueError(f"range [{start}, {end}) is outside [0, {limit})")


def _check_block(block_size: int) -> None:
    if block_size <= 0:
        raise ValueError("block size must be positive")


def mul_rows_blocked(
    a: Matrix,
    b: Matrix,
    c: Matrix,
    start_row: int,
    end_row: int,
    block_size: int = BLOCK_SIZE,
) -> None:
    """Add (A x B) to rows [start_row, end_row) of C, tiled into blocks."""
    n = _size(a, b, c)
    _check_range(start_row, end_row, n)
    _check_block(block_size)
    for ii in range(start_row, end_row, block_size):
        i_max = min(ii + block_size, end_row)
        for jj in range(0, n, block_size):
            j_max = min(jj + block_size, n)
            for kk in range(0, n, block_size):
                ks = range(kk, min(kk + block_size, n))
                for i in range(ii, i_max):
                    row_a = a[i]
                    row_c = c[i]
                    for j in range(jj, j_max):
                        row_c[j] = sum((row_a[k] * b[k][j] for k in ks), row_c[j])


def mul_rows_cyclic(
    a: Matrix, b: Matrix, c: Matrix, thread_id: int, num_threads: int
) -> None:
    """Set rows thread_id, thread_id + num_threads, ... of C to those of A x B."""
    n = _size(a, b, c)
    if num_threads <= 0:
        raise ValueError("thread count must be positive")
    if not 0 <= thread_id < num_threads:
        raise ValueError(f"thread id {thread_id} is outside [0, {num_threads})")
    b_rows = list(b.rows())
    for i in range(thread_id, n, num_threads):
        row_a = a[i]
        c[i][:] = [
            sum(x * b_row[j] for x, b_row in zip(row_a, b_rows)) for j in range(n)
        ]


def mul_rows_ikj(
    a: Matrix, b: Matrix, c: Matrix, start_row: int, end_row: int
) -> None:
    """Add (A x B) to rows [start_row, end_row) of C in i-k-j order."""
    n = _size(a, b, c)
    _check_range(start_row, end_row, n)
    b_rows = list(b.rows())
    for i in range(start_row, end_row):
        row_c = c[i]
        for a_ik, row_b in zip(a[i], b_rows):
            row_c[:] = [cv + a_ik * bv for cv, bv in zip(row_c, row_b)]


def mul_rows_kij(
    a: Matrix,
    b: Matrix,
    c: Matrix,
    start_row: int,
    end_row: int,
    block_size: int = BLOCK_SIZE,
) -> None:
    """Add (A x B) to rows [start_row, end_row) of C, k split into blocks outermost."""
    n = _size(a, b, c)
    _check_range(start_row, end_row, n)
    _check_block(block_size)
    for kk in range(0, n, block_size):
        k_end = min(kk + block_size, n)
        for i in range(start_row, end_row):
            row_a = a[i]
            row_c = c[i]
            for k in range(kk, k_end):
                a_ik = row_a[k]
                row_c[:] = [cv + a_ik * bv for cv, bv in zip(row_c, b[k])]


def mul_rows_transposed(
    a: Matrix, b: Matrix, c: Matrix, start_row: int, end_row: int
) -> None:
    """Set rows [start_row, end_row) of C to those of A x B^T.

    B is read by rows, so passing the transpose of a matrix M yields A x M.
    """
    n = _size(a, b, c)
    _check_range(start_row, end_row, n)
    b_rows = list(b.rows())
    for i in range(start_row, end_row):
        row_a = a[i]
        c[i][:] = [sum(x * y for x, y in zip(row_a, row_b)) for row_b in b_rows]