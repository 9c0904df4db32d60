"""Integer properties and conversions: Armstrong, prime, Woodall numbers and friends."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "is_armstrong",
    "is_prime",
    "prime_factors",
    "decimal_to_binary",
    "binary_to_decimal",
    "is_woodall",
    "reverse_number",
    "power",
    "divide",
]


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its decimal digits.

    Negative numbers are never Armstrong numbers.
    """
    if n < 0:
        return False
    return n == sum(int(digit) ** 3 for digit in str(n))


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def _primes_up_to(limit: int) -> list[int]:
    """Return the primes not above ``limit`` by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    marks = bytearray([1]) * (limit + 1)
    marks[0] = marks[1] = 0
    for candidate in range(2, isqrt(limit) + 1):
        if marks[candidate]:
            marks[candidate * candidate :: candidate] = bytearray(
                len(range(candidate * candidate, limit + 1, candidate))
            )
    return [number for number, flag in enumerate(marks) if flag]


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition.

    One has no prime factors. Raises ValueError for ``n`` below one.
    """
    if n < 1:
        raise ValueError(f"prime factorisation needs a positive integer, got {n}")
    factors: list[int] = []
    remaining = n
    for prime in _primes_up_to(isqrt(n)):
        while remaining % prime == 0:
            factors.append(prime)
            remaining //= prime
    if remaining > 1:
        factors.append(remaining)
    return factors


def decimal_to_binary(n: int) -> int:
    """Return the integer whose decimal digits spell ``n`` in binary."""
    sign = -1 if n < 0 else 1
    return sign * int(format(abs(n), "b"))


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number.

    Raises ValueError when a digit other than 0 or 1 appears.
    """
    sign = -1 if n < 0 else 1
    digits = str(abs(n))
    if set(digits) - {"0", "1"}:
        raise ValueError(f"{n} is not made of binary digits")
    return sign * int(digits, 2)


def is_woodall(n: int) -> bool:
    """Tell whether ``n`` has the form i * 2**i - 1 for some i >= 1."""
    i = 1
    while (woodall := i * 2**i - 1) <= n:
        if woodall == n:
            return True
        i += 1
    return False


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative integer ``exponent``.

    Raises ValueError for a negative exponent.
    """
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    return base**exponent


def divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Return quotient and remainder, the quotient truncated toward zero.

    The remainder takes the sign of the dividend. Raises ZeroDivisionError for a
    zero divisor.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor