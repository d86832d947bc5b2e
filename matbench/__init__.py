"""Kernels, thread helpers, timing and CSV output for matrix loop-order benchmarks."""

__version__ = "0.1.0"

__all__ = [
    "addition",
    "matrix",
    "multiplication",
    "parallel_multiplication",
    "partition",
    "report",
    "timing",
]