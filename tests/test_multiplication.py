import pytest

from matbench.matrix import Matrix
from matbench.multiplication import (
    mul_blocked,
    mul_ijk,
    mul_ikj,
    mul_kij,
    mul_transpose,
)


def identity(n):
    return Matrix([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


def product(a, b):
    c = Matrix.zeros(a.n)
    mul_ijk(a, b, c)
    return c


def other(n):
    return Matrix.deterministic(n).transposed()


def test_ijk_identity_on_right():
    a = Matrix.deterministic(6)
    assert product(a, identity(6)) == a


def test_ijk_identity_on_left():
    a = Matrix.deterministic(6)
    assert product(identity(6), a) == a


def test_ijk_zero_matrix():
    a = Matrix.deterministic(5)
    assert product(a, Matrix.zeros(5)) == Matrix.zeros(5)


def test_ijk_transpose_identity():
    a = Matrix.deterministic(7)
    b = other(7)
    left = product(a, b).transposed()
    right = product(b.transposed(), a.transposed())
    assert left == right


def test_ijk_overwrites_previous_contents():
    a = Matrix.deterministic(4)
    b = other(4)
    c = Matrix([[1000.0] * 4 for _ in range(4)])
    mul_ijk(a, b, c)
    assert c == product(a, b)


def test_small_worked_example():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert product(a, b) == Matrix([[19, 22], [43, 50]])


@pytest.mark.parametrize("kernel", [mul_ikj, mul_kij, mul_transpose])
@pytest.mark.parametrize("n", [0, 1, 3, 8])
def test_kernels_agree_with_ijk(kernel, n):
    a = Matrix.deterministic(n)
    b = other(n)
    c = Matrix.zeros(n)
    kernel(a, b, c)
    assert c == product(a, b)


@pytest.mark.parametrize("block_size", [1, 2, 3, 5, 32])
def test_blocked_agrees_with_ijk(block_size):
    a = Matrix.deterministic(7)
    b = other(7)
    c = Matrix.zeros(7)
    mul_blocked(a, b, c, block_size)
    assert c == product(a, b)


def test_blocked_default_block_size():
    a = Matrix.deterministic(5)
    b = other(5)
    c = Matrix.zeros(5)
    mul_blocked(a, b, c)
    assert c == product(a, b)


@pytest.mark.parametrize(
    "kernel",
    [mul_ikj, mul_kij, lambda a, b, c: mul_blocked(a, b, c, 2)],
)
def test_accumulating_kernels_add_to_c(kernel):
    a = Matrix.deterministic(5)
    b = other(5)
    c = Matrix.zeros(5)
    kernel(a, b, c)
    kernel(a, b, c)
    single = product(a, b)
    assert c == Matrix([[2 * v for v in row] for row in single.rows()])


def test_transpose_leaves_b_unchanged():
    a = Matrix.deterministic(4)
    b = other(4)
    before = Matrix(b.rows())
    mul_transpose(a, b, Matrix.zeros(4))
    assert b == before


@pytest.mark.parametrize("kernel", [mul_ijk, mul_ikj, mul_kij, mul_blocked, mul_transpose])
def test_size_mismatch_raises(kernel):
    with pytest.raises(ValueError):
        kernel(Matrix.zeros(3), Matrix.zeros(4), Matrix.zeros(3))


@pytest.mark.parametrize("block_size", [0, -2])
def test_blocked_rejects_bad_block_size(block_size):
    with pytest.raises(ValueError):
        mul_blocked(Matrix.zeros(2), Matrix.zeros(2), Matrix.zeros(2), block_size)