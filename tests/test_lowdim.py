import random

import pytest

from dstructs import benchmarks
from dstructs.lowdim import (
    benchmark,
    branin,
    fletcher_powell,
    kowalik,
    michalewicz_like,
    shekel_5,
    shekel_7,
    shekel_10,
    shekel_foxholes,
    shubert,
    six_hump_camel,
    styblinski_tang_mean,
    wood,
)


def test_foxholes_best_known():
    assert shekel_foxholes([-32.0, -32.0]) == pytest.approx(0.998, abs=1e-3)


def test_kowalik_best_known():
    point = [0.192833, 0.190836, 0.123117, 0.135766]
    assert kowalik(point) == pytest.approx(0.0003074862, abs=1e-7)


def test_six_hump_camel_best_known_and_symmetry():
    point = [0.08984201, -0.71265640]
    assert six_hump_camel(point) == pytest.approx(-1.0316285, abs=1e-6)
    assert six_hump_camel([-point[0], -point[1]]) == pytest.approx(six_hump_camel(point))


def test_branin_best_known():
    import math
    assert branin([math.pi, 2.275]) == pytest.approx(0.397887, abs=1e-5)


@pytest.mark.parametrize(
    "func, best",
    [(shekel_5, -10.1532), (shekel_7, -10.40294), (shekel_10, -10.53641)],
)
def test_shekel_best_known(func, best):
    assert func([4.0, 4.0, 4.0, 4.0]) == pytest.approx(best, abs=1e-2)
    assert func([0.0, 0.0, 0.0, 0.0]) > best


def test_shekel_more_terms_go_lower():
    point = [5.0, 5.0, 3.0, 3.0]
    assert shekel_10(point) <= shekel_7(point) <= shekel_5(point) < 0


def test_michalewicz_like_zero_at_origin():
    assert michalewicz_like([0.0] * 10) == 0.0


def test_styblinski_tang_mean_best_known():
    assert styblinski_tang_mean([-2.903534] * 7) == pytest.approx(-78.33236, abs=1e-4)
    with pytest.raises(ValueError):
        styblinski_tang_mean([])


def test_shubert_symmetric_in_arguments():
    assert shubert([0.3, -1.2]) == pytest.approx(shubert([-1.2, 0.3]))


def test_wood_minimum_at_ones():
    assert wood([1.0, 1.0, 1.0, 1.0]) == pytest.approx(0.0, abs=1e-12)
    assert wood([0.0, 0.0, 0.0, 0.0]) > 0


def test_fletcher_powell_reproducible_and_nonnegative():
    point = [0.5, -1.0, 2.0]
    first = fletcher_powell(point, random.Random(11))
    assert first == fletcher_powell(point, random.Random(11))
    assert first >= 0


@pytest.mark.parametrize("func", [shekel_foxholes, kowalik, six_hump_camel, branin, shekel_5, wood, shubert])
def test_too_few_coordinates(func):
    with pytest.raises(ValueError):
        func([1.0])


def test_benchmark_lookup():
    assert benchmark(1) is benchmarks.sphere
    assert benchmark(13) is benchmarks.penalized_2
    assert benchmark(16) is six_hump_camel
    assert benchmark(25) is fletcher_powell


@pytest.mark.parametrize("number", [0, 26, -1])
def test_benchmark_unknown(number):
    with pytest.raises(ValueError):
        benchmark(number)