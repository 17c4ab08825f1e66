"""Integer puzzles: digit arithmetic, divisors, sequences and bounded reversals."""

from __future__ import annotations

import math

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _digits(n: int) -> list[int]:
    """Decimal digits of a positive integer, most significant first; none otherwise."""
    return [int(digit) for digit in str(n)] if n > 0 else []


def _base_digits(n: int, base: int) -> list[int]:
    digits: list[int] = []
    while n:
        n, remainder = divmod(n, base)
        digits.append(remainder)
    return digits


def tribonacci(n: int) -> int:
    """The n-th Tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n < 0:
        raise ValueError("tribonacci needs a non-negative index")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def digit_product(n: int) -> int:
    """Product of the decimal digits of ``n``; 1 when ``n`` is not positive."""
    return math.prod(_digits(n))


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``; 0 when ``n`` is not positive."""
    return sum(_digits(n))


def subtract_product_and_sum(n: int) -> int:
    """Product of the digits of ``n`` minus their sum."""
    return digit_product(n) - digit_sum(n)


def number_of_steps(num: int) -> int:
    """Steps to reach zero by halving even values and decrementing odd ones."""
    if num < 0:
        raise ValueError("number_of_steps needs a non-negative number")
    steps = 0
    while num:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def count_operations(num1: int, num2: int) -> int:
    """Subtractions of the smaller from the larger until either value is zero."""
    if num1 < 0 or num2 < 0:
        raise ValueError("count_operations needs non-negative numbers")
    steps = 0
    while num1 and num2:
        if num1 >= num2:
            quotient, num1 = divmod(num1, num2)
        else:
            quotient, num2 = divmod(num2, num1)
        steps += quotient
    return steps


def is_strictly_palindromic(n: int) -> bool:
    """True when ``n`` reads as a palindrome in every base from 2 to n - 3."""
    if n <= 5:
        return False
    for base in range(2, n - 2):
        digits = _base_digits(n, base)
        if digits != digits[::-1]:
            return False
    return True


def smallest_even_multiple(n: int) -> int:
    """The smallest positive number divisible by both 2 and ``n``."""
    if n <= 0:
        raise ValueError("smallest_even_multiple needs a positive number")
    return n if n % 2 == 0 else 2 * n


def pivot_integer(n: int) -> int:
    """The x with 1 + ... + x == x + ... + n, or -1 when there is none."""
    if n < 1:
        return -1
    total = n * (n + 1) // 2
    root = math.isqrt(total)
    return root if root * root == total else -1


def count_digits(num: int) -> int:
    """How many digits of ``num`` divide ``num``, counting repeats."""
    digits = _digits(abs(num))
    if 0 in digits:
        raise ValueError("count_digits needs a number without zero digits")
    return sum(1 for digit in digits if num % digit == 0)


def sum_of_multiples(n: int) -> int:
    """Sum of the numbers up to ``n`` divisible by 3, 5 or 7."""
    return sum(i for i in range(3, n + 1) if i % 3 == 0 or i % 5 == 0 or i % 7 == 0)


def concatenate(n: int) -> int:
    """The number written as ``n``, ``2n`` and ``3n`` one after another."""
    if n < 0:
        raise ValueError("concatenate needs a non-negative number")
    return int(f"{n}{2 * n}{3 * n}")


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    return sum(i if i % m else -i for i in range(1, n + 1))


def sum_of_the_digits_of_harshad_number(x: int) -> int:
    """The digit sum of ``x`` when it divides ``x``, otherwise -1."""
    if x <= 0:
        raise ValueError("a Harshad number must be positive")
    total = digit_sum(x)
    return total if x % total == 0 else -1


def get_sum(a: int, b: int) -> int:
    """The sum of two integers."""
    return a + b


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n``."""
    if n == 0:
        return 1.0
    if n == 1:
        return float(x)
    return x * float(x) ** (n - 1)


def reverse_integer(x: int) -> int:
    """Digits of ``x`` reversed keeping its sign; 0 when the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if reversed_value >= INT_MAX or reversed_value <= INT_MIN:
        return 0
    return reversed_value


def reverse_digits(n: int) -> int:
    """Digits of a positive ``n`` reversed; 0 when ``n`` is not positive."""
    return int(str(n)[::-1]) if n > 0 else 0


def is_prime(n: int) -> bool:
    """True for primes, False for composites; numbers below 2 are neither."""
    if n < 2:
        raise ValueError(f"{n} is neither prime nor composite")
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def factors(n: int) -> list[int]:
    """The positive divisors of ``n`` in ascending order."""
    if n <= 0:
        return []
    small = [i for i in range(1, math.isqrt(n) + 1) if n % i == 0]
    large = [n // i for i in reversed(small) if i * i != n]
    return small + large


def kth_factor(n: int, k: int) -> int:
    """The k-th smallest divisor of ``n`` (1-based), or -1 when there are fewer."""
    if k < 1:
        raise ValueError("k must be at least 1")
    divisors = factors(n)
    return divisors[k - 1] if k <= len(divisors) else -1