"""
Тесты для Sequences — factorial, power, fibonacci

Проверяемые свойства:
1. Известные значения (0!, 5!, 10!, 20!, 2^10, F(10), ...)
2. Совпадение с math.factorial / pow / итеративным Фибоначчи
3. Граничные случаи: n = 0, exponent = 0, base = 0
4. base не изменяется при power
5. Валидация аргументов
"""

import math

import pytest

from src.core.math import BigDecimal, factorial, fibonacci, power, sub


def _fib_reference(n: int) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


# =============================================================================
# ТЕСТЫ: Factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial."""

    def test_known_values(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_factorial_20(self):
        """20! — 19 цифр, без ведущего нуля."""
        result = factorial(20)
        assert str(result) == "2432902008176640000"
        assert result.digits[-1] != 0

    def test_matches_math_factorial(self):
        for n in (25, 52, 100, 257):
            assert int(factorial(n)) == math.factorial(n)

    def test_returns_big_decimal(self):
        assert isinstance(factorial(3), BigDecimal)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="non-negative"):
            factorial(-1)
        with pytest.raises(TypeError):
            factorial(5.0)
        with pytest.raises(TypeError):
            factorial(True)


# =============================================================================
# ТЕСТЫ: Power
# =============================================================================


class TestPower:
    """Тесты power (возведение в квадрат)."""

    def test_known_values(self):
        assert power(2, 10) == 1024
        assert power(3, 5) == 243
        assert power(10, 3) == 1000

    def test_large_power_of_two(self):
        assert str(power(2, 100)) == "1267650600228229401496703205376"

    def test_zero_exponent_yields_one(self):
        for base in (0, 1, 2, 987654321):
            assert power(base, 0) == 1
        assert power(BigDecimal("123456789012345678901234567890"), 0) == 1

    def test_zero_base(self):
        assert power(0, 1) == 0
        assert power(0, 17).digits == (0,)

    def test_matches_builtin_pow(self):
        for base in (2, 7, 13, 99, 12345):
            for exponent in (1, 2, 3, 8, 31, 64, 100):
                assert int(power(base, exponent)) == base**exponent

    def test_big_decimal_base_not_mutated(self):
        base = BigDecimal(12)
        result = power(base, 5)
        assert result == 248832
        assert base == 12

    def test_power_difference(self):
        """2^5 - 2^3 = 32 - 8 = 24."""
        assert sub(power(2, 5), power(2, 3)) == 24

    def test_power_difference_equal_exponents(self):
        assert sub(power(2, 64), power(2, 64)).digits == (0,)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            power(2, -1)
        with pytest.raises(TypeError):
            power(2, 2.0)
        with pytest.raises(ValueError):
            power(-2, 3)
        with pytest.raises(TypeError):
            power("2", 3)


# =============================================================================
# ТЕСТЫ: Fibonacci
# =============================================================================


class TestFibonacci:
    """Тесты fibonacci (скользящая пара)."""

    def test_known_values(self):
        assert fibonacci(0) == 0
        assert fibonacci(1) == 1
        assert fibonacci(2) == 1
        assert fibonacci(3) == 2
        assert fibonacci(10) == 55

    def test_fibonacci_100(self):
        assert str(fibonacci(100)) == "354224848179261915075"

    def test_matches_reference_both_parities(self):
        for n in range(0, 120):
            assert int(fibonacci(n)) == _fib_reference(n)

    def test_recurrence(self):
        for n in (50, 51, 300):
            assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            fibonacci(-3)
        with pytest.raises(TypeError):
            fibonacci("10")
