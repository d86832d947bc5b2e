import functools

import pytest

from matbench.addition import (
    add_blocked,
    add_column_major,
    add_diagonal,
    add_row_major,
    add_zigzag,
)
from matbench.matrix import Matrix

KERNELS = [
    add_row_major,
    add_column_major,
    add_blocked,
    functools.partial(add_blocked, block_size=3),
    add_diagonal,
    add_zigzag,
]


def _filled(n, value):
    return Matrix([value] * n for _ in range(n))


def test_small_worked_example():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[10, 20], [30, 40]])
    c = Matrix.zeros(2)
    add_row_major(a, b, c)
    assert c == Matrix([[11, 22], [33, 44]])


@pytest.mark.parametrize("kernel", KERNELS)
@pytest.mark.parametrize("n", [0, 1, 2, 5, 33, 40])
def test_kernels_agree_and_write_every_cell(kernel, n):
    a = Matrix.deterministic(n)
    b = Matrix.deterministic(n).transposed()
    expected = Matrix.zeros(n)
    add_row_major(a, b, expected)
    c = _filled(n, -1.0)
    kernel(a, b, c)
    assert c == expected


@pytest.mark.parametrize("kernel", KERNELS)
def test_adding_zero_is_identity(kernel):
    a = Matrix.deterministic(9)
    c = Matrix.zeros(9)
    kernel(a, Matrix.zeros(9), c)
    assert c == a


@pytest.mark.parametrize("kernel", KERNELS)
def test_addition_commutes(kernel):
    a = Matrix.deterministic(7)
    b = a.transposed()
    ab, ba = Matrix.zeros(7), Matrix.zeros(7)
    kernel(a, b, ab)
    kernel(b, a, ba)
    assert ab == ba


def test_inputs_untouched():
    a = Matrix.deterministic(6)
    b = Matrix.deterministic(6)
    add_zigzag(a, b, Matrix.zeros(6))
    assert a == Matrix.deterministic(6)
    assert b == Matrix.deterministic(6)


@pytest.mark.parametrize("kernel", KERNELS)
def test_size_mismatch_rejected(kernel):
    with pytest.raises(ValueError):
        kernel(Matrix.zeros(3), Matrix.zeros(4), Matrix.zeros(3))


def test_blocked_rejects_bad_block_size():
    m = Matrix.zeros(4)
    with pytest.raises(ValueError):
        add_blocked(m, m, m, 0)