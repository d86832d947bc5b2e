"""CSV result files: one row per (matrix size, thread count) measurement."""

from __future__ import annotations

import os

HEADER = "matrix_size,threads,time_seconds\n"


def format_row(matrix_size: int, threads: int, time_sec: float) -> str:
    """Format one result line, time to six decimal places."""
    return f"{int(matrix_size)},{int(threads)},{time_sec:.6f}\n"


def write_header(path: str | os.PathLike) -> None:
    """Create or truncate the file at path and write the column header."""
    with open(path, "w", encoding="ascii") as fp:
        fp.write(HEADER)


def append_result(
    path: str | os.PathLike, matrix_size: int, threads: int, time_sec: float
) -> None:
    """Append one result line to the file at path."""
    with open(path, "a", encoding="ascii") as fp:
        fp.write(format_row(matrix_size, threads, time_sec))