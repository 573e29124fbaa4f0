"""Constrained benchmark problems: objective functions and their penalty terms.

Each ``caseN`` is an objective to be minimised. Each ``caseN_penalty`` returns
zero for a feasible point and a positive, scaled sum of constraint violations
otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

_CASE6_CENTRES = (1, 3, 5, 7, 9)


def _require_dims(x: Sequence[float], dims: int) -> None:
    if len(x) < dims:
        raise ValueError(f"the point needs at least {dims} coordinates, got {len(x)}")


def case1(x: Sequence[float]) -> float:
    """Test case 1 objective (13 variables)."""
    _require_dims(x, 13)
    head = x[:4]
    return sum(head) - sum(v * v for v in head) - sum(x[4:13])


def case1_penalty(x: Sequence[float]) -> float:
    """Penalty for the linear constraints of test case 1, scaled by 30."""
    _require_dims(x, 13)
    upper = (
        2 * x[0] + 2 * x[1] + x[9] + x[10],
        2 * x[0] + 2 * x[2] + x[9] + x[11],
        2 * x[1] + 2 * x[2] + x[10] + x[11],
    )
    at_most_zero = (
        -8 * x[0] + x[9],
        -8 * x[1] + x[10],
        -8 * x[2] + x[11],
        -2 * x[3] - x[4] + x[9],
        -2 * x[5] - x[6] + x[10],
        -2 * x[7] - x[8] + x[11],
    )
    total = sum(t - 10 for t in upper if t > 10) + sum(t for t in at_most_zero if t > 0)
    return total * 30 if total > 0 else total


def _shortfall(values: Sequence[float]) -> float:
    """Sum of the amounts by which values fall below zero."""
    return sum(-t for t in values if t < 0)


def case2(x: Sequence[float]) -> float:
    """Test case 2 objective (8 variables): sum of the first three."""
    _require_dims(x, 8)
    return x[0] + x[1] + x[2]


def case2_penalty(x: Sequence[float]) -> float:
    """Penalty for the constraints of test case 2, scaled by 50000."""
    _require_dims(x, 8)
    total = _shortfall((
        1 - 0.0025 * (x[3] + x[5]),
        1 - 0.0025 * (x[4] + x[6] - x[3]),
        1 - 0.01 * (x[7] - x[4]),
        x[0] * x[5] - 833.33252 * x[3] - 100 * x[0] + 83333.333,
        x[1] * x[6] - 1250 * x[4] - x[1] * x[3] + 1250 * x[3],
        x[2] * x[7] - 1250000 - x[2] * x[4] + 2500 * x[4],
    ))
    return total * 50000 if total > 0 else total


def case3(x: Sequence[float]) -> float:
    """Test case 3 objective (7 variables)."""
    _require_dims(x, 7)
    return ((x[0] - 10) ** 2 + 5 * (x[1] - 12) ** 2 + x[2] ** 4 + 3 * (x[3] - 11) ** 2
            + 10 * x[4] ** 6 + 7 * x[5] ** 2 + x[6] ** 4
            - 4 * x[5] * x[6] - 10 * x[5] - 8 * x[6])


def case3_penalty(x: Sequence[float]) -> float:
    """Penalty for the constraints of test case 3, scaled by 1.5."""
    _require_dims(x, 7)
    total = _shortfall((
        127 - 2 * x[0] ** 2 - 3 * x[1] ** 4 - x[2] - 4 * x[3] ** 2 - 5 * x[4],
        282 - 7 * x[0] - 3 * x[1] - 10 * x[2] ** 2 - x[3] + x[4],
        196 - 23 * x[0] - x[1] ** 2 - 6 * x[5] ** 2 + 8 * x[6],
        -4 * x[0] ** 2 - x[1] ** 2 + 3 * x[0] * x[1] - 2 * x[2] ** 2 - 5 * x[5] + 11 * x[6],
    ))
    return total * 1.5 if total != 0 else total


def case5(x: Sequence[float]) -> float:
    """Test case 5 objective (10 variables)."""
    _require_dims(x, 10)
    return (x[0] * x[0] + x[1] * x[1] + x[0] * x[1] - 14 * x[0] - 16 * x[1]
            + (x[2] - 10) ** 2 + 4 * (x[3] - 5) ** 2 + (x[4] - 3) ** 2
            + 2 * (x[5] - 1) ** 2 + 5 * x[6] * x[6] + 7 * (x[7] - 11) ** 2
            + 2 * (x[8] - 10) ** 2 + (x[9] - 7) ** 2 + 45)


def case5_penalty(x: Sequence[float]) -> float:
    """Penalty for the constraints of test case 5, scaled by 10."""
    _require_dims(x, 10)
    total = _shortfall((
        105 - 4 * x[0] - 5 * x[1] + 3 * x[6] - 9 * x[7],
        -10 * x[0] + 8 * x[1] + 17 * x[6] - 2 * x[7],
        8 * x[0] - 2 * x[1] - 5 * x[8] + 2 * x[9] + 12,
        -3 * (x[0] - 2) ** 2 - 4 * (x[1] - 3) ** 2 - 2 * x[2] ** 2 + 7 * x[3] + 120,
        -5 * x[0] * x[0] - 8 * x[1] - (x[2] - 6) ** 2 + 2 * x[3] + 40,
        -x[0] * x[0] - 2 * (x[1] - 2) ** 2 + 2 * x[0] * x[1] - 14 * x[4] + 6 * x[5],
        -0.5 * (x[0] - 8) ** 2 - 2 * (x[1] - 4) ** 2 - 3 * x[4] * x[4] + x[5] + 30,
        3 * x[0] - 6 * x[1] - 12 * (x[8] - 8) ** 2 + 7 * x[9],
    ))
    return total * 10 if total != 0 else total


def case6(x: Sequence[float]) -> float:
    """Test case 6 objective (3 variables)."""
    _require_dims(x, 3)
    return (100 - (x[0] - 5) ** 2 - (x[1] - 5) ** 2 - (x[2] - 5) ** 2) / 100


def case6_penalty(x: Sequence[float]) -> float:
    """Sum of squared distances to the lattice centres farther than 0.5, times 10."""
    _require_dims(x, 3)
    total = 0.0
    for p, q, r in product(_CASE6_CENTRES, repeat=3):
        t = (x[0] - p) ** 2 + (x[1] - q) ** 2 + (x[2] - r) ** 2
        if t > 0.25:
            total += t
    return total * 10