"""
BigDecimal — неотрицательное целое произвольной длины

Значение хранится как список десятичных цифр, младшая цифра первой:
    1204 -> [4, 0, 2, 1]

Операции:
- Конструирование из неотрицательного int и из строки цифр
- Обратная конверсия в строку цифр
- Сложение с переносом (add_assign / add)
- Вычитание с заёмом (sub_assign / sub)
- Умножение в столбик (mul_assign / mul)
- Сравнение (compare и операторы сравнения)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список цифр никогда не пуст, ноль хранится как [0]
2. Старшая цифра ненулевая, кроме самого нуля [0]
3. Каждая цифра в [0, 9], знак не хранится
4. Правый операнд никогда не изменяется, в том числе при x op= x

In-place операции (add_assign, sub_assign, mul_assign) изменяют левый операнд
и восстанавливают инвариант 2. Функции add, sub, mul копируют левый операнд и
делегируют in-place версии.
"""

import sys
from typing import Final, Union

from src.core.math.numerical_safeguards import (
    DECIMAL_BASE,
    validate_digit_string,
    validate_non_negative_int,
)

# Модуль, по которому Python хэширует int: hash(n) == n % _HASH_MODULUS при n >= 0
_HASH_MODULUS: Final[int] = sys.hash_info.modulus

# =============================================================================
# EXCEPTIONS
# =============================================================================


class SubtractionUnderflow(ArithmeticError):
    """
    Вычитание дало бы отрицательный результат: left < right.

    Левый операнд при этом не изменяется.
    """

    pass


# =============================================================================
# ВНУТРЕННИЕ ПРЕОБРАЗОВАНИЯ ЦИФР
# =============================================================================


def _digits_from_int(number: int) -> list[int]:
    validate_non_negative_int(number, "number")

    digits = []
    while True:
        number, digit = divmod(number, DECIMAL_BASE)
        digits.append(digit)
        if number == 0:
            return digits


def _digits_from_str(text: str) -> list[int]:
    validate_digit_string(text, "text")

    # Ведущие нули отбрасываются: "007" -> [7], "000" -> [0]
    significant = text.lstrip("0") or "0"
    return [ord(ch) - ord("0") for ch in reversed(significant)]


def _trim(digits: list[int]) -> None:
    """Удаление незначащих старших нулей, оставляет минимум одну цифру."""
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()


# =============================================================================
# BIGDECIMAL
# =============================================================================


class BigDecimal:
    """
    Неотрицательное целое произвольной точности в десятичном представлении.

    Конструктор принимает int, строку цифр или другой BigDecimal (копируется).
    Неявных преобразований нет: int продвигается только арифметическими
    операторами и явным BigDecimal(...).

    Examples:
        >>> str(BigDecimal(1204))
        '1204'
        >>> BigDecimal("007").digits
        (7,)
        >>> str(BigDecimal(99) + 1)
        '100'
    """

    __slots__ = ("_digits",)

    def __init__(self, value: Union[int, str, "BigDecimal"] = 0):
        if isinstance(value, BigDecimal):
            self._digits = list(value._digits)
        elif isinstance(value, str):
            self._digits = _digits_from_str(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._digits = _digits_from_int(value)
        else:
            raise TypeError(
                f"BigDecimal expects int, str or BigDecimal, got {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Конструирование и конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_unsigned_integer(cls, number: int) -> "BigDecimal":
        """
        Разложение неотрицательного int на цифры повторным делением на 10.

        Всегда даёт хотя бы одну цифру: 0 -> [0].

        Raises:
            TypeError: Если number не int (или bool)
            ValueError: Если number < 0
        """
        instance = cls.__new__(cls)
        instance._digits = _digits_from_int(number)
        return instance

    @classmethod
    def from_digit_string(cls, text: str) -> "BigDecimal":
        """
        Конструирование из строки десятичных цифр (старшая цифра первой).

        Ведущие нули нормализуются: "007" -> 7, "0" и "000" -> 0.

        Raises:
            InvalidDigitInput: Если строка пуста или содержит не-цифру
        """
        instance = cls.__new__(cls)
        instance._digits = _digits_from_str(text)
        return instance

    def to_digit_string(self) -> str:
        """Строка цифр, старшая цифра первой."""
        return "".join(chr(ord("0") + d) for d in reversed(self._digits))

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры (младшая первой), только для чтения."""
        return tuple(self._digits)

    def copy(self) -> "BigDecimal":
        return BigDecimal(self)

    def is_zero(self) -> bool:
        return self._digits == [0]

    def __str__(self) -> str:
        return self.to_digit_string()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.to_digit_string()}')"

    def __len__(self) -> int:
        return len(self._digits)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        # Схема Горнера: int(str) ограничен sys.get_int_max_str_digits()
        value = 0
        for digit in reversed(self._digits):
            value = value * DECIMAL_BASE + digit
        return value

    def __hash__(self) -> int:
        """
        Хэш, равный hash(int(self)), за O(len(digits)).

        Для неотрицательного n hash(n) == n % sys.hash_info.modulus, поэтому
        остаток считается схемой Горнера по модулю без построения int.

        ВНИМАНИЕ: +=, -= и *= изменяют значение на месте. BigDecimal,
        изменённый после помещения в set или использования как ключ dict,
        в нём больше не найдётся.
        """
        remainder = 0
        for digit in reversed(self._digits):
            remainder = (remainder * DECIMAL_BASE + digit) % _HASH_MODULUS
        return remainder

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self._digits == rhs._digits

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return compare(self, rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return compare(self, rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return compare(self, rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return compare(self, rhs) >= 0

    # -------------------------------------------------------------------------
    # Арифметические операторы
    # -------------------------------------------------------------------------

    def __add__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other):
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return add_assign(lhs, self)

    def __iadd__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return add_assign(self, rhs)

    def __sub__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return sub(self, rhs)

    def __rsub__(self, other):
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return sub_assign(lhs, self)

    def __isub__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return sub_assign(self, rhs)

    def __mul__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return mul(self, rhs)

    def __rmul__(self, other):
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return mul_assign(lhs, self)

    def __imul__(self, other):
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return mul_assign(self, rhs)


def _coerce(value: object):
    """
    Продвижение неотрицательного int до BigDecimal для операторов.

    Отрицательные int, bool и прочие типы дают NotImplemented: == вернёт
    False, а арифметика и <, > поднимут TypeError.
    """
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return BigDecimal.from_unsigned_integer(value)
    return NotImplemented


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(left: BigDecimal, right: BigDecimal) -> int:
    """
    Сравнение двух нормализованных значений.

    Сначала по количеству цифр, затем поразрядно от старшей цифры.

    Returns:
        -1 если left < right
         0 если left == right
        +1 если left > right

    Examples:
        >>> compare(BigDecimal(99), BigDecimal(100))
        -1
        >>> compare(BigDecimal(512), BigDecimal(502))
        1
    """
    ld, rd = left._digits, right._digits

    if len(ld) != len(rd):
        return -1 if len(ld) < len(rd) else 1

    for a, b in zip(reversed(ld), reversed(rd)):
        if a != b:
            return -1 if a < b else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_assign(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """
    Сложение в столбик с переносом: left += right.

    Позиции обходятся, пока остаются цифры right или есть перенос.
    Длина результата max(len(left), len(right)) или на одну больше.

    Args:
        left: Изменяемый операнд
        right: Прибавляемое значение (не изменяется)

    Returns:
        left (для цепочек)
    """
    ld = left._digits
    # x += x: снимок, иначе рост ld сдвигает границу цикла
    rd = list(right._digits) if right is left else right._digits

    if len(ld) < len(rd):
        ld.extend([0] * (len(rd) - len(ld)))

    carry = 0
    i = 0
    while i < len(rd) or carry:
        if i == len(ld):
            ld.append(carry)
            break
        total = ld[i] + (rd[i] if i < len(rd) else 0) + carry
        carry, ld[i] = divmod(total, DECIMAL_BASE)
        i += 1

    return left


def add(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """Сумма без изменения операндов."""
    return add_assign(left.copy(), right)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_assign(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """
    Вычитание в столбик с заёмом: left -= right.

    Если цифра вычитаемого с учётом заёма больше цифры уменьшаемого,
    занимаем 1 у следующего разряда и добавляем 10. После цикла старшие
    нули отбрасываются (до [0] для нулевого результата).

    Args:
        left: Уменьшаемое (изменяется)
        right: Вычитаемое (не изменяется)

    Returns:
        left (для цепочек)

    Raises:
        SubtractionUnderflow: Если left < right (left не изменяется)
    """
    if compare(left, right) < 0:
        raise SubtractionUnderflow(
            f"Subtraction underflow: {left.to_digit_string()} - "
            f"{right.to_digit_string()} would be negative"
        )

    if right is left:
        left._digits = [0]
        return left

    ld, rd = left._digits, right._digits

    borrow = 0
    i = 0
    while i < len(rd) or borrow:
        diff = ld[i] - (rd[i] if i < len(rd) else 0) - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        ld[i] = diff
        i += 1

    _trim(ld)
    return left


def sub(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """
    Разность без изменения операндов.

    Raises:
        SubtractionUnderflow: Если left < right
    """
    return sub_assign(left.copy(), right)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_assign(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """
    Умножение в столбик: left *= right.

    Буфер результата длиной len(left) + len(right) заполняется нулями;
    для каждой цифры right[i] и каждой цифры left[j] (и далее, пока есть
    перенос) накапливается result[i + j] += left[j] * right[i] + carry.

    Сложность O(len(left) * len(right)).

    Args:
        left: Изменяемый операнд
        right: Множитель (не изменяется)

    Returns:
        left (для цепочек)
    """
    ld, rd = left._digits, right._digits
    result = [0] * (len(ld) + len(rd))

    for i, multiplier in enumerate(rd):
        if multiplier == 0:
            continue
        carry = 0
        j = 0
        while j < len(ld) or carry:
            current = result[i + j] + (ld[j] * multiplier if j < len(ld) else 0) + carry
            carry, result[i + j] = divmod(current, DECIMAL_BASE)
            j += 1

    _trim(result)
    left._digits = result
    return left


def mul(left: BigDecimal, right: BigDecimal) -> BigDecimal:
    """Произведение без изменения операндов."""
    return mul_assign(left.copy(), right)
