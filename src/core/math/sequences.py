"""
Sequences — производные алгоритмы над BigDecimal

- factorial(n): n! последовательным умножением
- power(base, exponent): возведение в степень через возведение в квадрат
- fibonacci(n): n-е число Фибоначчи через скользящую пару

Все алгоритмы выражены только через add_assign / mul_assign и работают
с локальными значениями: переданный base не изменяется.
"""

from typing import Union

from src.core.math.big_decimal import BigDecimal, add_assign, mul_assign
from src.core.math.numerical_safeguards import validate_non_negative_int


def factorial(n: int) -> BigDecimal:
    """
    Факториал n! = n * (n-1) * ... * 1, factorial(0) = 1.

    Args:
        n: Неотрицательное целое

    Returns:
        n! как BigDecimal

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0

    Examples:
        >>> str(factorial(5))
        '120'
        >>> str(factorial(0))
        '1'
    """
    validate_non_negative_int(n, "n")

    result = BigDecimal.from_unsigned_integer(1)
    while n:
        mul_assign(result, BigDecimal.from_unsigned_integer(n))
        n -= 1
    return result


def power(base: Union[BigDecimal, int], exponent: int) -> BigDecimal:
    """
    Возведение в степень через возведение в квадрат.

    Пока exponent > 0: если младший бит равен 1, result *= base_power;
    base_power *= base_power; exponent >>= 1.

    Args:
        base: BigDecimal (не изменяется) или неотрицательный int
        exponent: Неотрицательный показатель степени

    Returns:
        base ** exponent; при exponent == 0 всегда 1 (включая 0 ** 0)

    Raises:
        TypeError: Если exponent не int или base неподдерживаемого типа
        ValueError: Если exponent < 0 или base отрицательный int

    Examples:
        >>> str(power(2, 10))
        '1024'
        >>> str(power(BigDecimal(7), 0))
        '1'
    """
    validate_non_negative_int(exponent, "exponent")

    if isinstance(base, BigDecimal):
        base_power = base.copy()
    else:
        base_power = BigDecimal.from_unsigned_integer(base)

    result = BigDecimal.from_unsigned_integer(1)
    while exponent > 0:
        if exponent & 1:
            mul_assign(result, base_power)
        exponent >>= 1
        # Последний квадрат не нужен
        if exponent:
            mul_assign(base_power, base_power)
    return result


def fibonacci(n: int) -> BigDecimal:
    """
    n-е число Фибоначчи: F(0) = 0, F(1) = 1.

    Пара (a, b) = (F(k), F(k+1)) сдвигается на две позиции за итерацию:
    a += b; b += a. Итог выбирается по чётности остатка счётчика.

    Args:
        n: Неотрицательное целое

    Returns:
        F(n) как BigDecimal

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0

    Examples:
        >>> str(fibonacci(10))
        '55'
    """
    validate_non_negative_int(n, "n")

    pair = (BigDecimal.from_unsigned_integer(0), BigDecimal.from_unsigned_integer(1))
    remaining = n
    while remaining > 1:
        add_assign(pair[0], pair[1])
        add_assign(pair[1], pair[0])
        remaining -= 2
    return pair[remaining]
