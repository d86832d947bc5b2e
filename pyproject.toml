[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matbench"
version = "0.1.0"
description = "Kernels and helpers for timing memory access orders in dense matrix addition and multiplication"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "matrix",
    "multiplication",
    "addition",
    "cache",
    "loop order",
    "threads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matbench"]

[tool.pytest.ini_options]
addopts = "-ra"
