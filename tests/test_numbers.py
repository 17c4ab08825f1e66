import pytest

from algokit.numbers import (
    INT_MAX,
    concatenate,
    count_digits,
    count_operations,
    difference_of_sums,
    digit_product,
    digit_sum,
    factors,
    get_sum,
    is_prime,
    is_strictly_palindromic,
    kth_factor,
    my_pow,
    number_of_steps,
    pivot_integer,
    reverse_digits,
    reverse_integer,
    smallest_even_multiple,
    subtract_product_and_sum,
    sum_of_multiples,
    sum_of_the_digits_of_harshad_number,
    tribonacci,
)


def test_tribonacci_worked_example():
    assert tribonacci(36) == 1132436852


def test_tribonacci_start_and_recurrence():
    assert [tribonacci(i) for i in range(3)] == [0, 1, 1]
    for n in range(3, 30):
        assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def test_tribonacci_negative():
    with pytest.raises(ValueError):
        tribonacci(-1)


def test_digit_functions_relation():
    for n in (4421, 234, 99, 7):
        assert subtract_product_and_sum(n) == digit_product(n) - digit_sum(n)


def test_digit_sum_ignores_trailing_zeros():
    assert digit_sum(4421 * 100) == digit_sum(4421)
    assert digit_product(4421 * 10) == 0


def test_digit_functions_non_positive():
    assert digit_product(0) == 1
    assert digit_sum(0) == 0


def test_number_of_steps_powers_of_two():
    for k in range(10):
        assert number_of_steps(2**k) == k + 1
    assert number_of_steps(0) == 0


def test_number_of_steps_negative():
    with pytest.raises(ValueError):
        number_of_steps(-3)


def test_count_operations():
    assert count_operations(10, 10) == 1
    assert count_operations(5, 0) == 0
    assert count_operations(2, 3) == count_operations(3, 2)
    assert count_operations(12, 4) == 3


def test_count_operations_negative():
    with pytest.raises(ValueError):
        count_operations(-1, 2)


@pytest.mark.parametrize("n", [4, 5, 6, 9, 17, 50])
def test_is_strictly_palindromic_always_false(n):
    assert is_strictly_palindromic(n) is False


@pytest.mark.parametrize("n", [1, 2, 5, 6, 11])
def test_smallest_even_multiple(n):
    result = smallest_even_multiple(n)
    assert result % 2 == 0 and result % n == 0
    assert result <= 2 * n


def test_smallest_even_multiple_invalid():
    with pytest.raises(ValueError):
        smallest_even_multiple(0)


def test_pivot_integer():
    assert pivot_integer(8) == 6
    assert pivot_integer(1) == 1
    assert pivot_integer(4) == -1
    for n in range(1, 60):
        x = pivot_integer(n)
        if x != -1:
            assert sum(range(1, x + 1)) == sum(range(x, n + 1))


def test_count_digits():
    assert count_digits(7) == 1
    assert count_digits(1111) == len("1111")
    assert count_digits(1248) == len("1248")


def test_count_digits_zero_digit():
    with pytest.raises(ValueError):
        count_digits(10)


def test_sum_of_multiples():
    assert sum_of_multiples(2) == 0
    for n in range(3, 40):
        step = sum_of_multiples(n) - sum_of_multiples(n - 1)
        divisible = n % 3 == 0 or n % 5 == 0 or n % 7 == 0
        assert step == (n if divisible else 0)


def test_concatenate():
    assert concatenate(192) == 192384576
    assert concatenate(0) == 0
    with pytest.raises(ValueError):
        concatenate(-1)


def test_difference_of_sums():
    assert difference_of_sums(10, 11) == 10 * 11 // 2
    assert difference_of_sums(10, 1) == -(10 * 11 // 2)
    with pytest.raises(ZeroDivisionError):
        difference_of_sums(5, 0)


def test_harshad():
    assert sum_of_the_digits_of_harshad_number(18) == 9
    assert sum_of_the_digits_of_harshad_number(23) == -1
    with pytest.raises(ValueError):
        sum_of_the_digits_of_harshad_number(0)


def test_get_sum():
    assert get_sum(-999, 0) == -999
    assert get_sum(3, 4) == get_sum(4, 3)


def test_my_pow():
    assert my_pow(1.0, -2147483648) == 1.0
    assert my_pow(2.5, 0) == 1.0
    assert my_pow(2.5, 1) == 2.5
    for n in (2, 5, 10):
        assert my_pow(2.0, n) * my_pow(2.0, -n) == pytest.approx(1.0)


def test_reverse_integer_round_trip_and_sign():
    for x in (123, 4567, 1):
        assert reverse_integer(reverse_integer(x)) == x
    assert reverse_integer(-123) == -reverse_integer(123)
    assert reverse_integer(0) == 0


def test_reverse_integer_overflow():
    assert reverse_integer(INT_MAX) == 0
    assert reverse_integer(-INT_MAX) == 0


def test_reverse_digits():
    assert reverse_digits(0) == 0
    assert reverse_digits(-5) == 0
    assert reverse_digits(reverse_digits(479)) == 479
    assert reverse_digits(121) == 121


def test_is_prime():
    for p in (2, 3, 5, 7, 11, 13, 97):
        assert is_prime(p) is True
    for a in range(2, 8):
        for b in range(2, 8):
            assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [0, 1, -4])
def test_is_prime_neither(n):
    with pytest.raises(ValueError):
        is_prime(n)


@pytest.mark.parametrize("n", [1, 7, 12, 36, 100])
def test_factors_invariants(n):
    divisors = factors(n)
    assert divisors == sorted(divisors)
    assert divisors[0] == 1 and divisors[-1] == n
    assert all(n % d == 0 for d in divisors)
    assert len(set(divisors)) == len(divisors)


def test_kth_factor():
    assert kth_factor(7, 2) == 7
    assert kth_factor(7, 3) == -1
    for k in range(1, len(factors(36)) + 1):
        assert kth_factor(36, k) == factors(36)[k - 1]
    with pytest.raises(ValueError):
        kth_factor(7, 0)