"""
Numerical Safeguards — проверки входов для десятичной арифметики

Модуль содержит общие проверки, которые используются BigDecimal и
производными алгоритмами (factorial, power, fibonacci):
- Проверка строк, состоящих только из десятичных цифр
- Проверка неотрицательных целых аргументов (счётчики, показатели степени)
- Константы десятичного представления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как целое число
2. Строка цифр не может быть пустой
3. Все проверки детерминированы и не изменяют входные данные
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления для хранения цифр
DECIMAL_BASE: Final[int] = 10

# Максимальное значение одной цифры
MAX_DIGIT: Final[int] = DECIMAL_BASE - 1

# Допустимые символы строкового представления
DIGIT_CHARS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class InvalidDigitInput(ValueError):
    """
    Строка для BigDecimal содержит не-цифру или пуста.

    Вызывающий код обязан передавать только символы '0'..'9'.
    """

    pass


# =============================================================================
# ПРОВЕРКИ СТРОК
# =============================================================================


def is_digit_string(value: str) -> bool:
    """
    Проверка, что строка непуста и состоит только из '0'..'9'.

    str.isdigit() не подходит: он принимает '²' и цифры других алфавитов.

    Examples:
        >>> is_digit_string("0042")
        True
        >>> is_digit_string("")
        False
        >>> is_digit_string("12a")
        False
        >>> is_digit_string("٣")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return all(ch in DIGIT_CHARS for ch in value)


def validate_digit_string(value: str, name: str = "value") -> None:
    """
    Валидация строки десятичных цифр.

    Args:
        value: Проверяемая строка
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidDigitInput: Если строка пуста или содержит не-цифру
    """
    if not isinstance(value, str):
        raise InvalidDigitInput(f"{name} must be a str, got {type(value).__name__}")

    if not value:
        raise InvalidDigitInput(f"{name} must contain at least one digit")

    for position, ch in enumerate(value):
        if ch not in DIGIT_CHARS:
            raise InvalidDigitInput(
                f"{name} must contain only decimal digits, "
                f"got {ch!r} at position {position}"
            )


# =============================================================================
# ПРОВЕРКИ ЦЕЛЫХ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение неотрицательное целое (не bool).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
