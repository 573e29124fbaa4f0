import random

import pytest

from dstructs import constrained

CASE1_OPTIMUM = [1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 3, 3, 1]
CASE5_OPTIMUM = [2.171996, 2.363683, 8.773926, 5.095984, 0.9906548,
                 1.430574, 1.321644, 9.828726, 8.280092, 8.375927]


def test_case1_known_optimum_is_feasible():
    assert constrained.case1(CASE1_OPTIMUM) == -15
    assert constrained.case1_penalty(CASE1_OPTIMUM) == 0


def test_case1_penalty_scales_linearly_with_violation():
    base = [0.0] * 13
    small = list(base)
    small[9] = 1.0  # -8*x0 + x9 > 0
    large = list(base)
    large[9] = 2.0
    p_small = constrained.case1_penalty(small)
    p_large = constrained.case1_penalty(large)
    assert p_small > 0
    assert p_large == pytest.approx(2 * p_small)


def test_case2_depends_only_on_first_three():
    rng = random.Random(3)
    x = [rng.uniform(0, 10) for _ in range(8)]
    y = [x[2], x[0], x[1]] + [rng.uniform(0, 10) for _ in range(5)]
    assert constrained.case2(x) == pytest.approx(constrained.case2(y))


def test_case2_penalty_positive_at_origin_and_never_negative():
    assert constrained.case2_penalty([0.0] * 8) > 0
    rng = random.Random(5)
    for _ in range(50):
        x = [rng.uniform(0, 1000) for _ in range(8)]
        assert constrained.case2_penalty(x) >= 0


def test_case3_penalty_zero_at_origin_and_objective_matches_feasible_direction():
    assert constrained.case3_penalty([0.0] * 7) == 0
    far = [100.0] * 7
    assert constrained.case3_penalty(far) > 0


def test_case5_known_optimum():
    assert constrained.case5(CASE5_OPTIMUM) == pytest.approx(24.306, abs=1e-2)
    assert constrained.case5_penalty(CASE5_OPTIMUM) < 1e-3


def test_case5_penalty_never_negative():
    rng = random.Random(11)
    for _ in range(50):
        x = [rng.uniform(-10, 10) for _ in range(10)]
        assert constrained.case5_penalty(x) >= 0


def test_case6_maximum_at_centre():
    centre = constrained.case6([5, 5, 5])
    rng = random.Random(2)
    for _ in range(50):
        x = [rng.uniform(0, 10) for _ in range(3)]
        assert constrained.case6(x) <= centre


def test_case6_penalty_symmetric_in_coordinates():
    a = constrained.case6_penalty([1.5, 4.0, 7.2])
    b = constrained.case6_penalty([7.2, 1.5, 4.0])
    assert a > 0
    assert a == pytest.approx(b)


@pytest.mark.parametrize(
    "func, dims",
    [
        (constrained.case1, 13),
        (constrained.case1_penalty, 13),
        (constrained.case2, 8),
        (constrained.case2_penalty, 8),
        (constrained.case3, 7),
        (constrained.case3_penalty, 7),
        (constrained.case5, 10),
        (constrained.case5_penalty, 10),
        (constrained.case6, 3),
        (constrained.case6_penalty, 3),
    ],
)
def test_too_few_coordinates_rejected(func, dims):
    with pytest.raises(ValueError):
        func([0.0] * (dims - 1))