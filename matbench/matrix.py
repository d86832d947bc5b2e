"""Square matrices of floats stored as lists of rows."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Matrix:
    """An N x N matrix whose rows are mutable lists of floats."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[Iterable[float]]) -> None:
        rows = [[float(value) for value in row] for row in data]
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("matrix must be square")
        self._data = rows

    @classmethod
    def zeros(cls, n: int) -> Matrix:
        """Return an n x n matrix filled with 0.0."""
        _check_size(n)
        return cls([0.0] * n for _ in range(n))

    @classmethod
    def deterministic(cls, n: int) -> Matrix:
        """Return an n x n matrix whose cell (i, j) holds (i * n + j) % 100."""
        _check_size(n)
        return cls(((i * n + j) % 100 for j in range(n)) for i in range(n))

    @property
    def n(self) -> int:
        """The number of rows (and columns)."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        """Return a live row for an int index, or a cell for an (i, j) pair."""
        if isinstance(index, tuple):
            i, j = index
            return self._data[i][j]
        return self._data[index]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"

    def transposed(self) -> Matrix:
        """Return a new matrix that is the transpose of this one."""
        return Matrix(zip(*self._data))

    def rows(self) -> Iterator[list[float]]:
        """Iterate over the live row lists."""
        return iter(self._data)


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")