"""Benchmark functions evaluated on randomly rotated coordinates."""

from __future__ import annotations

import functools
import math
import random
from collections.abc import Callable, Sequence

from dstructs.lowdim import benchmark

Matrix = list[list[float]]

_NOISY = {7, 25}


def _identity(n: int) -> Matrix:
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def _plane_rotation(n: int, i: int, j: int, rng: random.Random) -> Matrix:
    turn = _identity(n)
    alpha = (rng.random() - 0.5) * math.pi * 0.5
    turn[i][i] = turn[j][j] = math.cos(alpha)
    turn[i][j] = math.sin(alpha)
    turn[j][i] = -math.sin(alpha)
    return turn


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def random_rotation(n: int, rng: random.Random | None = None) -> Matrix:
    """Return an ``n`` by ``n`` rotation built from random plane rotations.

    Planes (0, i) for every i > 0 are rotated first, then planes (i, n-1) for
    0 < i < n-1, each by an angle drawn uniformly from [-pi/4, pi/4].
    """
    if n <= 0:
        raise ValueError("dimension must be positive")
    rng = rng or random.Random()
    result = _identity(n)
    planes = [(0, i) for i in range(1, n)] + [(i, n - 1) for i in range(1, n - 1)]
    for i, j in planes:
        result = _multiply(result, _plane_rotation(n, i, j, rng))
    return result


def rotate(matrix: Sequence[Sequence[float]], x: Sequence[float]) -> list[float]:
    """Return ``matrix`` applied to the column vector ``x``."""
    if any(len(row) != len(x) for row in matrix) or len(matrix) != len(x):
        raise ValueError("matrix and point dimensions do not match")
    return [sum(m * v for m, v in zip(row, x)) for row in matrix]


class RotatedFunction:
    """A function of ``x`` evaluated at ``matrix`` times ``x``."""

    def __init__(self, base: Callable[[Sequence[float]], float],
                 matrix: Sequence[Sequence[float]]) -> None:
        self.base = base
        self.matrix = [list(row) for row in matrix]

    def __call__(self, x: Sequence[float]) -> float:
        return self.base(rotate(self.matrix, x))


def rotated_benchmark(number: int, n: int,
                      rng: random.Random | None = None) -> RotatedFunction:
    """Return rotated benchmark ``number`` (101 to 122) in ``n`` dimensions.

    The rotation is drawn from ``rng``; the noisy function 107 also draws its
    noise from it.
    """
    if not 101 <= number <= 122:
        raise ValueError(f"no rotated benchmark numbered {number}")
    rng = rng or random.Random()
    base_number = number - 100
    base = benchmark(base_number)
    if base_number in _NOISY:
        base = functools.partial(base, rng=rng)
    return RotatedFunction(base, random_rotation(n, rng))