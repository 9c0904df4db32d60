from math import prod

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.numtheory import (
    binary_to_decimal,
    decimal_to_binary,
    divide,
    is_armstrong,
    is_prime,
    is_woodall,
    power,
    prime_factors,
    reverse_number,
)


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n)


@pytest.mark.parametrize("n", [10, 154, 999, -153])
def test_not_armstrong_numbers(n):
    assert not is_armstrong(n)


@pytest.mark.parametrize("n", [2, 3, 5, 97, 7919])
def test_primes(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 91, 7917])
def test_non_primes(n):
    assert not is_prime(n)


@given(st.integers(min_value=1, max_value=100_000))
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(factor) for factor in factors)


@given(st.integers(min_value=2, max_value=20_000))
def test_prime_has_only_itself_as_factor(n):
    assert is_prime(n) == (prime_factors(n) == [n])


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


@pytest.mark.parametrize("n", [0, -12])
def test_prime_factors_rejects_non_positive(n):
    with pytest.raises(ValueError):
        prime_factors(n)


def test_decimal_to_binary_value():
    assert decimal_to_binary(10) == 1010


@given(st.integers(min_value=0, max_value=10**6))
def test_decimal_to_binary_matches_format(n):
    assert str(decimal_to_binary(n)) == format(n, "b")


@given(st.integers(min_value=-(10**6), max_value=10**6))
def test_binary_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


def test_binary_to_decimal_rejects_other_digits():
    with pytest.raises(ValueError):
        binary_to_decimal(1021)


@pytest.mark.parametrize("n", [1, 7, 23, 63, 159, 383])
def test_woodall_numbers(n):
    assert is_woodall(n)


@pytest.mark.parametrize("n", [0, 2, 8, 22, 64, 384])
def test_not_woodall_numbers(n):
    assert not is_woodall(n)


def test_reverse_drops_trailing_zeros():
    assert reverse_number(1200) == 21


@given(st.integers(min_value=-(10**9), max_value=10**9).filter(lambda n: n % 10 != 0))
def test_reverse_twice_is_identity(n):
    assert reverse_number(reverse_number(n)) == n


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=30))
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_divide_truncates_toward_zero():
    assert divide(-7, 2) == (-3, -1)


@given(
    st.integers(min_value=-(10**6), max_value=10**6),
    st.integers(min_value=-1000, max_value=1000).filter(bool),
)
def test_divide_invariants(dividend, divisor):
    quotient, remainder = divide(dividend, divisor)
    assert quotient * divisor + remainder == dividend
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder < 0) == (dividend < 0)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)