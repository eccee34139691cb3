import pytest

from ymbase.mt19937 import DEFAULT_SEED, Mt19937


def _take(gen, n):
    return [gen.eval() for _ in range(n)]


def test_default_first_output():
    assert Mt19937().eval() == 3499211612


def test_default_ten_thousandth_output():
    gen = Mt19937()
    for _ in range(9999):
        gen.eval()
    assert gen.eval() == 4123659995


def test_minus_one_means_default_seed():
    assert _take(Mt19937(-1), 20) == _take(Mt19937(), 20)


def test_explicit_default_seed_matches_default():
    assert _take(Mt19937(DEFAULT_SEED), 20) == _take(Mt19937(), 20)


def test_same_seed_same_sequence():
    first_gen = Mt19937(42)
    second_gen = Mt19937(42)
    first = _take(first_gen, 700)
    second = _take(second_gen, 700)
    assert first == second
    assert first != _take(Mt19937(), 700)
    assert len(set(first)) > 650


def test_different_seeds_differ():
    assert _take(Mt19937(1), 10) != _take(Mt19937(2), 10)


def test_reseed_restarts_sequence():
    gen = Mt19937(7)
    first = _take(gen, 50)
    gen.seed(7)
    assert _take(gen, 50) == first


def test_seed_method_default_argument():
    gen = Mt19937(123)
    gen.seed()
    assert _take(gen, 5) == _take(Mt19937(), 5)


def test_outputs_are_32_bit():
    gen = Mt19937(99)
    values = _take(gen, 1500)
    assert all(0 <= v <= 0xFFFFFFFF for v in values)
    assert len(set(values)) > 1400


def test_negative_seed_wraps_modulo_2_32():
    gen = Mt19937(5)
    gen.seed(-5 + 2**32)
    assert _take(Mt19937(-5), 10) == _take(gen, 10)


def test_non_integer_seed_rejected():
    with pytest.raises(TypeError):
        Mt19937("1")


def test_out_of_range_seed_rejected():
    with pytest.raises(OverflowError):
        Mt19937(2**31)