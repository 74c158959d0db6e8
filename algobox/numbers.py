"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional


def is_palindrome_number(number: int) -> bool:
    """True if the decimal digits of ``number`` read the same reversed."""
    digits = str(abs(number))
    return digits == digits[::-1]


def primes_up_to(limit: int) -> List[int]:
    """All primes from 2 to ``limit`` inclusive, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    composite = [False] * (limit + 1)
    for i in range(2, math.isqrt(limit) + 1):
        if not composite[i]:
            for j in range(i * i, limit + 1, i):
                composite[j] = True
    return [i for i in range(2, limit + 1) if not composite[i]]


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def factorial(n: int) -> int:
    """Product of 1..n; 1 for n below 1."""
    return math.prod(range(1, n + 1))


def fibonacci(count: int) -> List[int]:
    """The first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: List[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def is_armstrong(number: int, digits: Optional[int] = None) -> bool:
    """True if the sum of each digit raised to ``digits`` equals ``number``.

    ``digits`` defaults to the number of decimal digits of ``number``.
    """
    if number < 0:
        raise ValueError("number must be non-negative")
    text = str(number)
    if digits is None:
        digits = len(text)
    return sum(int(d) ** digits for d in text) == number


def is_perfect(number: int) -> bool:
    """True if ``number`` equals the sum of its proper divisors."""
    if number < 1:
        raise ValueError("number must be positive")
    return sum(i for i in range(1, number) if number % i == 0) == number


def is_prime(number: int) -> bool:
    """True if ``number`` is prime, by trial division up to its square root."""
    if number < 2:
        return False
    return all(number % i for i in range(2, math.isqrt(number) + 1))


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def grade(marks: int) -> str:
    """Letter grade for marks out of 100."""
    bands = ((91, 100, "A+"), (71, 90, "A"), (51, 70, "B"), (34, 50, "C"), (0, 33, "D"))
    for low, high, letter in bands:
        if low <= marks <= high:
            return letter
    raise ValueError(f"invalid marks: {marks}")


def arithmetic_progression(count: int, first: int = 5, difference: int = 2) -> List[int]:
    """The first ``count`` terms of an arithmetic progression."""
    return [first + i * difference for i in range(count)]


def divide(dividend: float, divisor: float) -> float:
    """Floating-point quotient."""
    return dividend / divisor


def even_numbers(limit: int = 10) -> List[int]:
    """Even numbers from 1 to ``limit`` inclusive."""
    return [i for i in range(1, limit + 1) if i % 2 == 0]


def odd_numbers(limit: int = 10) -> List[int]:
    """Odd numbers from 1 to ``limit`` inclusive."""
    return [i for i in range(1, limit + 1) if i % 2 != 0]


def multiples(base: int = 2, count: int = 10) -> List[int]:
    """The first ``count`` multiples of ``base``: base*1 .. base*count."""
    return [base * i for i in range(1, count + 1)]


def exceeds_sum_of_others(a: int, b: int, c: int) -> bool:
    """True if the largest of three values exceeds the sum of the other two."""
    low, mid, high = sorted((a, b, c))
    return high > low + mid


def first_capital(chars: Iterable[str]) -> Optional[str]:
    """The first character in the range 'A'..'Z', or None if there is none."""
    return next((ch for ch in chars if "A" <= ch <= "Z"), None)