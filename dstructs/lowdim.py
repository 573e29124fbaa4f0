"""Low-dimensional and special benchmark functions, and lookup by number."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence

from dstructs import benchmarks

_DEFAULT_RNG = random.Random()

_FOXHOLES = (
    tuple([-32, -16, 0, 16, 32] * 5),
    tuple(v for v in (-32, -16, 0, 16, 32) for _ in range(5)),
)

_KOWALIK_A = (0.1957, 0.1947, 0.1735, 0.1600, 0.0844, 0.0627,
              0.0456, 0.0342, 0.0323, 0.0235, 0.0246)
_KOWALIK_B = (4, 2, 1, 0.5, 0.25, 1.0 / 6.0, 0.125, 0.1, 1.0 / 12.0, 1.0 / 14.0, 0.0625)

_SHEKEL_A = (
    (4, 4, 4, 4),
    (1, 1, 1, 1),
    (8, 8, 8, 8),
    (6, 6, 6, 6),
    (3, 7, 3, 7),
    (2, 9, 2, 9),
    (5, 5, 3, 3),
    (8, 1, 8, 1),
    (6, 2, 6, 2),
    (7, 3.6, 7, 3.6),
)
_SHEKEL_C = (0.1, 0.2, 0.2, 0.4, 0.4, 0.6, 0.3, 0.7, 0.5, 0.5)


def _require_dims(x: Sequence[float], dims: int) -> None:
    if len(x) < dims:
        raise ValueError(f"the point needs at least {dims} coordinates, got {len(x)}")


def shekel_foxholes(x: Sequence[float]) -> float:
    """Shekel's foxholes (2 dimensions)."""
    _require_dims(x, 2)
    total = sum(
        1.0 / (j + 1 + sum((x[i] - _FOXHOLES[i][j]) ** 6 for i in range(2)))
        for j in range(25)
    )
    return 1.0 / (total + 1.0 / 500)


def kowalik(x: Sequence[float]) -> float:
    """Kowalik's function (4 dimensions)."""
    _require_dims(x, 4)
    return sum(
        (a - x[0] * (b * b + b * x[1]) / (b * b + b * x[2] + x[3])) ** 2
        for a, b in zip(_KOWALIK_A, _KOWALIK_B)
    )


def six_hump_camel(x: Sequence[float]) -> float:
    """Six-hump camel-back function (2 dimensions)."""
    _require_dims(x, 2)
    a, b = x[0], x[1]
    return 4 * a * a - 2.1 * a ** 4 + a ** 6 / 3.0 + a * b - 4 * b * b + 4 * b ** 4


def branin(x: Sequence[float]) -> float:
    """Branin's function (2 dimensions)."""
    _require_dims(x, 2)
    a, b = x[0], x[1]
    pi = math.pi
    return ((b - 5.1 / (4 * pi * pi) * a * a + 5 / pi * a - 6) ** 2
            + 10 * (1 - 1 / (8 * pi)) * math.cos(a) + 10)


def _shekel(x: Sequence[float], m: int) -> float:
    _require_dims(x, 4)
    return -sum(
        1.0 / (sum((x[k] - row[k]) ** 2 for k in range(4)) + c)
        for row, c in zip(_SHEKEL_A[:m], _SHEKEL_C[:m])
    )


def shekel_5(x: Sequence[float]) -> float:
    """Shekel's function with 5 maxima (4 dimensions)."""
    return _shekel(x, 5)


def shekel_7(x: Sequence[float]) -> float:
    """Shekel's function with 7 maxima (4 dimensions)."""
    return _shekel(x, 7)


def shekel_10(x: Sequence[float]) -> float:
    """Shekel's function with 10 maxima (4 dimensions)."""
    return _shekel(x, 10)


def michalewicz_like(x: Sequence[float]) -> float:
    """Negated sum of ``sin(x_i) * sin(i * x_i**2 / pi) ** 20``, indices from 0."""
    return -sum(math.sin(v) * math.sin(i * v * v / math.pi) ** 20 for i, v in enumerate(x))


def styblinski_tang_mean(x: Sequence[float]) -> float:
    """Mean of ``x**4 - 16 x**2 + 5 x`` over the coordinates."""
    if not x:
        raise ValueError("the point must have at least one coordinate")
    return sum(v ** 4 - 16 * v * v + 5 * v for v in x) / len(x)


def shubert(x: Sequence[float]) -> float:
    """Shubert's function (2 dimensions)."""
    _require_dims(x, 2)

    def part(v: float) -> float:
        return sum(i * math.cos((i + 1) * v + i) for i in range(1, 6))

    return part(x[0]) * part(x[1])


def wood(x: Sequence[float]) -> float:
    """Wood's function (4 dimensions)."""
    _require_dims(x, 4)
    a, b, c, d = x[0], x[1], x[2], x[3]
    return (100 * (b - a * a) ** 2 + (1 - a) ** 2 + 90 * (d - c * c) ** 2
            + (1 - c) ** 2 + 10.1 * ((b - 1) ** 2 + (d - 1) ** 2)
            + 19.8 * (b - 1) * (d - 1))


def fletcher_powell(x: Sequence[float], rng: random.Random | None = None) -> float:
    """Fletcher-Powell function with a target and coefficients drawn from ``rng``.

    A fresh target in [-pi, pi] and fresh integer coefficients in [-100, 100]
    are drawn on every call.
    """
    rng = rng or _DEFAULT_RNG
    n = len(x)
    target = [(rng.random() * 2.0 - 1) * math.pi for _ in range(n)]
    total = 0.0
    for _ in range(n):
        at_target = 0.0
        at_x = 0.0
        for alpha, v in zip(target, x):
            r1 = rng.randint(-100, 100)
            r2 = rng.randint(-100, 100)
            at_target += r1 * math.sin(alpha) + r2 * math.cos(alpha)
            at_x += r1 * math.sin(v) + r2 * math.cos(v)
        total += (at_target - at_x) ** 2
    return total


_BENCHMARKS: dict[int, Callable[..., float]] = {
    1: benchmarks.sphere,
    2: benchmarks.schwefel_2_22,
    3: benchmarks.schwefel_1_2,
    4: benchmarks.schwefel_2_21,
    5: benchmarks.rosenbrock,
    6: benchmarks.step,
    7: benchmarks.quartic_noise,
    8: benchmarks.schwefel_2_26,
    9: benchmarks.rastrigin,
    10: benchmarks.ackley,
    11: benchmarks.griewank,
    12: benchmarks.penalized_1,
    13: benchmarks.penalized_2,
    14: shekel_foxholes,
    15: kowalik,
    16: six_hump_camel,
    17: branin,
    18: shekel_5,
    19: shekel_7,
    20: shekel_10,
    21: michalewicz_like,
    22: styblinski_tang_mean,
    23: shubert,
    24: wood,
    25: fletcher_powell,
}


def benchmark(number: int) -> Callable[..., float]:
    """Return unconstrained benchmark function ``number`` (1 to 25).

    Functions 7 and 25 take an optional ``rng`` as their second argument.
    """
    try:
        return _BENCHMARKS[number]
    except KeyError:
        raise ValueError(f"no benchmark function numbered {number}") from None