# matbench

matbench is a small library for studying how the order in which a program
walks through memory affects dense matrix work. It provides square-matrix
addition and multiplication kernels that differ only in loop order or in how
the rows are split between threads, together with a timer, thread helpers and
a CSV writer for recording results.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Matrices

`matbench.matrix.Matrix` is an N x N matrix of floats held as a list of row
lists.

- `Matrix.zeros(n)` – all cells 0.0
- `Matrix.deterministic(n)` – cell (i, j) holds `(i * n + j) % 100`
- `m[i]` returns the live row list, `m[i, j]` a single cell; `m[i, j] = x`
  sets one
- `m.transposed()` returns a new, transposed matrix
- `m.rows()` iterates over the live rows; `m.n` is the size

A negative size raises `ValueError`, as does building a non-square matrix.

## Kernels

Every kernel writes its result into the output matrix `c` it is given and
raises `ValueError` if the three matrices differ in size.

Addition, single thread (`matbench.addition`):

- `add_row_major` – row by row
- `add_column_major` – column by column
- `add_blocked(a, b, c, block_size=32)` – square tiles of `block_size`
- `add_diagonal` – anti-diagonal by anti-diagonal
- `add_zigzag` – anti-diagonals walked in alternating directions

Multiplication, single thread (`matbench.multiplication`):

- `mul_ijk` and `mul_transpose` overwrite `c` with A x B
- `mul_ikj`, `mul_kij` and `mul_blocked(a, b, c, block_size=32)` add A x B
  to what `c` already holds, so start from `Matrix.zeros(n)` for a plain
  product

Multiplication over a share of the rows, for use from worker threads
(`matbench.parallel_multiplication`). Each kernel writes only the rows of `c`
it owns:

- `mul_rows_blocked(a, b, c, start_row, end_row, block_size=32)`,
  `mul_rows_ikj(a, b, c, start_row, end_row)` and
  `mul_rows_kij(a, b, c, start_row, end_row, block_size=32)` add A x B to
  rows `[start_row, end_row)` of `c`
- `mul_rows_transposed(a, b, c, start_row, end_row)` sets those rows to
  A x Bᵀ, so pass the transpose of a matrix M to get A x M
- `mul_rows_cyclic(a, b, c, thread_id, num_threads)` sets rows `thread_id`,
  `thread_id + num_threads`, … of `c` to those of A x B

A row range outside the matrix, a block size below 1 or a thread id outside
`[0, num_threads)` raises `ValueError`.

## Splitting work

`matbench.partition` holds the helpers for dividing work:

- `row_ranges(n, threads)` – contiguous bands of rows; the last band takes
  the leftover rows
- `run_partitioned(kernel, a, b, c, threads)` – calls
  `kernel(a, b, c, start, end)` on one thread per band and waits for all
- `run_cyclic(kernel, a, b, c, threads)` – calls
  `kernel(a, b, c, thread_id, threads)` on each thread and waits for all
- `create_block_tasks(n, block_size)` – cuts an n x n matrix into `Task`
  tiles with rows `[r0, r1)` and columns `[c0, c1)`
- `compute_block_size(n)` – a tile size derived from the core count,
  clamped to 128–480
- `get_num_cores()` – the CPU count, or 4 when it is unknown

## Timing and results

`matbench.timing.Timer` measures seconds on a monotonic clock, either with
`start()` / `stop()` or as a context manager that leaves the result in
`elapsed`. `stop()` without `start()` raises `RuntimeError`.

`matbench.report` writes result files in the form

```
matrix_size,threads,time_seconds
```

`write_header(path)` creates or truncates the file with that header,
`append_result(path, matrix_size, threads, time_sec)` adds one line with the
time to six decimal places, and `format_row` returns such a line as a string.

## Example

```python
from matbench.matrix import Matrix
from matbench.addition import add_row_major
from matbench.multiplication import mul_ikj
from matbench.parallel_multiplication import mul_rows_cyclic, mul_rows_ikj
from matbench.partition import run_cyclic, run_partitioned
from matbench.report import append_result, write_header
from matbench.timing import Timer

a = Matrix.deterministic(64)
b = Matrix.deterministic(64)
c = Matrix.zeros(64)

with Timer() as timer:
    add_row_major(a, b, c)

write_header("row_major.csv")
append_result("row_major.csv", 64, 1, timer.elapsed)

product = Matrix.zeros(64)
mul_ikj(a, b, product)

threaded = Matrix.zeros(64)
run_partitioned(mul_rows_ikj, a, b, threaded, 4)

cyclic = Matrix.zeros(64)
run_cyclic(mul_rows_cyclic, a, b, cyclic, 4)
```

## What it does not do

matbench is a library only. It has no command that runs a set of experiments
across sizes and thread counts and writes the CSV files for you; you combine
the kernels, `Timer` and `matbench.report` yourself as above. It also has no
row-band addition kernels for threads: addition is provided in its
single-threaded forms only.

The kernels are plain Python, so large matrices take a long time.