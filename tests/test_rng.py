import math

import pytest

from bikescen.rng import DEFAULT_SEED, RandomNumbers


def test_first_value_from_seed_one_is_multiplier():
    assert RandomNumbers(1).next_rand() == 16807


def test_park_miller_ten_thousandth_value():
    rng = RandomNumbers(1)
    value = 0
    for _ in range(10000):
        value = rng.next_rand()
    assert value == 1043618065


def test_zero_seed_behaves_like_one():
    a = RandomNumbers(0)
    b = RandomNumbers(1)
    assert [a.next_rand() for _ in range(5)] == [b.next_rand() for _ in range(5)]


def test_default_seed():
    a = RandomNumbers()
    b = RandomNumbers(DEFAULT_SEED)
    assert [a.rand01() for _ in range(5)] == [b.rand01() for _ in range(5)]


def test_reseeding_restarts_sequence():
    rng = RandomNumbers(42)
    first = [rng.next_rand() for _ in range(10)]
    rng.seed(42)
    assert [rng.next_rand() for _ in range(10)] == first


def test_next_rand_stays_in_range():
    rng = RandomNumbers(123)
    for _ in range(2000):
        assert 1 <= rng.next_rand() <= 2147483646


def test_rand01_in_unit_interval():
    rng = RandomNumbers(7)
    values = [rng.rand01() for _ in range(2000)]
    assert all(0.0 < v <= 1.0 for v in values)
    assert 0.45 < sum(values) / len(values) < 0.55


def test_rand_int_within_bounds():
    rng = RandomNumbers(99)
    values = [rng.rand_int(3, 10) for _ in range(2000)]
    assert min(values) == 3
    assert max(values) == 9


def test_rand_int_equal_bounds_consumes_nothing():
    rng = RandomNumbers(5)
    assert rng.rand_int(4, 4) == 4
    assert rng.next_rand() == RandomNumbers(5).next_rand()


def test_rand_int_different_than_avoids_value():
    rng = RandomNumbers(13)
    values = {rng.rand_int_different_than(0, 10, 3) for _ in range(2000)}
    assert values == set(range(10)) - {3}


def test_rand_int_different_than_equal_bounds():
    assert RandomNumbers(3).rand_int_different_than(2, 2, 2) == 2


def test_rand_normal_moments():
    rng = RandomNumbers(11)
    values = [rng.rand_normal(5.0, 2.0) for _ in range(20000)]
    mean = sum(values) / len(values)
    var = sum((v - mean) ** 2 for v in values) / len(values)
    assert mean == pytest.approx(5.0, abs=0.1)
    assert math.sqrt(var) == pytest.approx(2.0, abs=0.1)


@pytest.mark.parametrize("alpha", [1.5, 3.0, 7.0])
def test_rand_gamma_mean(alpha):
    rng = RandomNumbers(17)
    values = [rng.rand_gamma(alpha) for _ in range(20000)]
    assert all(v > 0 for v in values)
    assert sum(values) / len(values) == pytest.approx(alpha, rel=0.05)


def test_rand_gamma_small_shape_positive():
    rng = RandomNumbers(23)
    assert all(rng.rand_gamma(0.5) > 0 for _ in range(1000))


def test_rand_beta_marsaglia_tsang_mean():
    rng = RandomNumbers(31)
    values = [rng.rand_beta_marsaglia_tsang(2.0, 5.0) for _ in range(20000)]
    assert all(0.0 < v < 1.0 for v in values)
    assert sum(values) / len(values) == pytest.approx(2.0 / 7.0, abs=0.01)


def test_rand_beta_johnk_accepts_sum_at_most_one():
    rng = RandomNumbers(41)
    values = [rng.rand_beta_johnk(0.5, 0.5) for _ in range(2000)]
    assert all(0.0 < v <= 1.0 for v in values)


def test_rand_beta_dispatches_to_johnk_for_small_shapes():
    a = RandomNumbers(8)
    b = RandomNumbers(8)
    assert [a.rand_beta(0.7, 0.4) for _ in range(20)] == [
        b.rand_beta_johnk(0.7, 0.4) for _ in range(20)
    ]


def test_rand_beta_dispatches_to_gamma_ratio_otherwise():
    a = RandomNumbers(8)
    b = RandomNumbers(8)
    assert [a.rand_beta(0.7, 2.5) for _ in range(20)] == [
        b.rand_beta_marsaglia_tsang(0.7, 2.5) for _ in range(20)
    ]