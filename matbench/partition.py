"""Splitting matrix work into row ranges, blocks and worker threads."""

from __future__ import annotations

import os
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .matrix import Matrix

MIN_BLOCK = 128
MAX_BLOCK = 480
DEFAULT_CORES = 4


@dataclass(frozen=True)
class Task:
    """A rectangular block: rows [r0, r1) and columns [c0, c1)."""

    r0: int
    r1: int
    c0: int
    c1: int


def create_block_tasks(n: int, block_size: int) -> list[Task]:
    """Tile an n x n matrix into blocks of at most block_size per side."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    return [
        Task(i, min(i + block_size, n), j, min(j + block_size, n))
        for i in range(0, n, block_size)
        for j in range(0, n, block_size)
    ]


def get_num_cores() -> int:
    """Number of CPUs, or 4 when it cannot be determined."""
    return os.cpu_count() or DEFAULT_CORES


def _integer_cube_root(value: int) -> int:
    root = round(value ** (1.0 / 3.0))
    while root > 0 and root**3 > value:
        root -= 1
    while (root + 1) ** 3 <= value:
        root += 1
    return root


def compute_block_size(n: int) -> int:
    """Pick a block size for n, clamped to [128, 480]."""
    blocks_per_dim = get_num_cores()
    if n >= 1024:
        blocks_per_dim = max(1, _integer_cube_root(blocks_per_dim))
    block = n // blocks_per_dim
    return min(max(block, MIN_BLOCK), MAX_BLOCK)


def row_ranges(n: int, threads: int) -> list[tuple[int, int]]:
    """Split rows [0, n) into contiguous ranges; the last one takes the remainder."""
    if threads <= 0:
        raise ValueError("thread count must be positive")
    per_thread = n // threads
    return [
        (t * per_thread, n if t == threads - 1 else (t + 1) * per_thread)
        for t in range(threads)
    ]


RowKernel = Callable[[Matrix, Matrix, Matrix, int, int], None]


def run_partitioned(kernel: RowKernel, a: Matrix, b: Matrix, c: Matrix, threads: int) -> None:
    """Run kernel(a, b, c, start, end) on one thread per row range."""
    ranges = row_ranges(a.n, threads)
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(kernel, a, b, c, start, end) for start, end in ranges]
        for future in futures:
            future.result()


def run_cyclic(kernel: RowKernel, a: Matrix, b: Matrix, c: Matrix, threads: int) -> None:
    """Run kernel(a, b, c, thread_id, threads) on each of `threads` threads."""
    if threads <= 0:
        raise ValueError("thread count must be positive")
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(kernel, a, b, c, tid, threads) for tid in range(threads)]
        for future in futures:
            future.result()