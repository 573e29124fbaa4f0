import random

import pytest

from dstructs.benchmarks import (
    ackley,
    griewank,
    penalized_1,
    penalized_2,
    penalty_u,
    quartic_noise,
    rastrigin,
    rosenbrock,
    schwefel_1_2,
    schwefel_2_21,
    schwefel_2_22,
    schwefel_2_26,
    sphere,
    step,
)

POINT = [1.5, -2.25, 0.75, 3.0]


@pytest.mark.parametrize(
    "func", [sphere, schwefel_2_22, schwefel_1_2, schwefel_2_21, step, rastrigin, ackley, griewank]
)
def test_minimum_at_origin(func):
    assert func([0.0] * 5) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize(
    "func", [sphere, schwefel_2_22, schwefel_1_2, schwefel_2_21, rastrigin, ackley, griewank]
)
def test_positive_away_from_origin(func):
    assert func(POINT) > 0


@pytest.mark.parametrize(
    "func", [sphere, schwefel_2_22, schwefel_2_21, rastrigin, ackley, step]
)
def test_permutation_invariant(func):
    assert func(POINT) == pytest.approx(func(list(reversed(POINT))))


@pytest.mark.parametrize("func", [sphere, schwefel_2_22, schwefel_1_2, schwefel_2_21, rastrigin, ackley, griewank])
def test_symmetric_under_negation(func):
    assert func(POINT) == pytest.approx(func([-v for v in POINT]))


def test_schwefel_1_2_single_coordinate_matches_sphere():
    assert schwefel_1_2([2.5]) == pytest.approx(sphere([2.5]))


def test_schwefel_2_21_picks_largest_magnitude():
    assert schwefel_2_21(POINT) == 3.0
    assert schwefel_2_21([]) == 0.0


def test_rosenbrock_minimum_at_ones():
    assert rosenbrock([1.0] * 6) == 0.0
    assert rosenbrock([0.0, 0.0]) > 0


def test_step_flat_near_origin():
    assert step([0.4, -0.4, 0.1]) == 0.0
    assert step([0.6]) > 0


def test_quartic_noise_bounds_and_reproducible():
    value = quartic_noise([0.0] * 3, random.Random(7))
    assert 0.0 <= value < 1.0
    assert quartic_noise(POINT, random.Random(3)) == quartic_noise(POINT, random.Random(3))


def test_quartic_noise_grows_with_distance():
    assert quartic_noise([2.0, 2.0], random.Random(1)) > quartic_noise([0.0, 0.0], random.Random(1))


def test_schwefel_2_26_sign():
    assert schwefel_2_26([0.0, 0.0]) == 0.0
    assert schwefel_2_26([420.9687]) < 0


def test_penalty_u_zero_inside_and_symmetric():
    assert penalty_u(3.0, 5, 100, 4) == 0.0
    assert penalty_u(-5.0, 5, 100, 4) == 0.0
    assert penalty_u(7.0, 5, 100, 4) == penalty_u(-7.0, 5, 100, 4)
    assert penalty_u(7.0, 5, 100, 4) > penalty_u(6.0, 5, 100, 4) > 0


def test_penalized_minima():
    assert penalized_1([-1.0] * 4) == pytest.approx(0.0, abs=1e-12)
    assert penalized_2([1.0] * 4) == pytest.approx(0.0, abs=1e-12)
    assert penalized_1([20.0] * 4) > penalized_1([-1.0] * 4)


@pytest.mark.parametrize("func", [ackley, penalized_1, penalized_2])
def test_empty_point_rejected(func):
    with pytest.raises(ValueError):
        func([])