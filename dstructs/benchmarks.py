"""Unconstrained benchmark functions of any dimension, to be minimised."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from itertools import accumulate, pairwise

_DEFAULT_RNG = random.Random()


def _require_values(x: Sequence[float]) -> None:
    if not x:
        raise ValueError("the point must have at least one coordinate")


def sphere(x: Sequence[float]) -> float:
    """Sum of squares."""
    return sum(v * v for v in x)


def schwefel_2_22(x: Sequence[float]) -> float:
    """Sum of absolute values plus their product."""
    return sum(abs(v) for v in x) + math.prod(abs(v) for v in x)


def schwefel_1_2(x: Sequence[float]) -> float:
    """Sum of the squares of the prefix sums."""
    return sum(s * s for s in accumulate(x))


def schwefel_2_21(x: Sequence[float]) -> float:
    """Largest absolute coordinate (0 for an empty point)."""
    return max((abs(v) for v in x), default=0.0)


def rosenbrock(x: Sequence[float]) -> float:
    """Generalised Rosenbrock valley."""
    return sum(100 * (b - a * a) ** 2 + (a - 1) ** 2 for a, b in pairwise(x))


def step(x: Sequence[float]) -> float:
    """Sum of squares of each coordinate plus one half, truncated toward zero."""
    return float(sum(int(v + 0.5) ** 2 for v in x))


def quartic_noise(x: Sequence[float], rng: random.Random | None = None) -> float:
    """Weighted sum of fourth powers plus uniform noise in [0, 1)."""
    rng = rng or _DEFAULT_RNG
    total = sum((i + 1) * v ** 4 for i, v in enumerate(x))
    return total + rng.random()


def schwefel_2_26(x: Sequence[float]) -> float:
    """Negated sum of ``x * sin(sqrt(|x|))``."""
    return -sum(v * math.sin(math.sqrt(abs(v))) for v in x)


def rastrigin(x: Sequence[float]) -> float:
    """Rastrigin's function."""
    return sum(v * v - 10 * math.cos(2 * math.pi * v) + 10 for v in x)


def ackley(x: Sequence[float]) -> float:
    """Ackley's function."""
    _require_values(x)
    n = len(x)
    squares = sum(v * v for v in x)
    cosines = sum(math.cos(2 * math.pi * v) for v in x)
    return -20 * math.exp(-0.2 * math.sqrt(squares / n)) - math.exp(cosines / n) + 20 + math.e


def griewank(x: Sequence[float]) -> float:
    """Griewank's function."""
    squares = sum(v * v for v in x)
    product = math.prod(math.cos(v / math.sqrt(i + 1)) for i, v in enumerate(x))
    return squares / 4000.0 - product + 1


def penalty_u(x: float, a: float, k: float, m: float) -> float:
    """Penalty that is zero on [-a, a] and ``k * (|x| - a) ** m`` outside it."""
    if x > a:
        return k * (x - a) ** m
    if x >= -a:
        return 0.0
    return k * (-x - a) ** m


def _y(v: float) -> float:
    return 1 + (v + 1) / 4.0


def penalized_1(x: Sequence[float]) -> float:
    """First generalised penalised function."""
    _require_values(x)
    n = len(x)
    penalty = sum(penalty_u(v, 10, 100, 4) for v in x)
    middle = sum(
        (_y(a) - 1) ** 2 * (1 + 10 * math.sin(math.pi * _y(b)) ** 2)
        for a, b in pairwise(x)
    )
    body = 10 * math.sin(math.pi * _y(x[0])) ** 2 + middle + (_y(x[-1]) - 1) ** 2
    return math.pi / n * body + penalty


def penalized_2(x: Sequence[float]) -> float:
    """Second generalised penalised function."""
    _require_values(x)
    middle = sum(
        (a - 1) ** 2 * (1 + math.sin(3 * math.pi * b) ** 2) for a, b in pairwise(x)
    )
    last = x[-1]
    body = (
        math.sin(3 * math.pi * x[0]) ** 2
        + middle
        + (last - 1) ** 2 * (1 + math.sin(2 * math.pi * last) ** 2)
    )
    return 0.1 * body + sum(penalty_u(v, 5, 100, 4) for v in x)