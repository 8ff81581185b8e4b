"""
Core math modules

Десятичная арифметика произвольной точности и производные алгоритмы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    DECIMAL_BASE,
    DIGIT_CHARS,
    MAX_DIGIT,
    # Exceptions
    InvalidDigitInput,
    # Validation
    is_digit_string,
    validate_digit_string,
    validate_non_negative_int,
)

# BigDecimal
from src.core.math.big_decimal import (
    BigDecimal,
    SubtractionUnderflow,
    add,
    add_assign,
    compare,
    mul,
    mul_assign,
    sub,
    sub_assign,
)

# Sequences
from src.core.math.sequences import (
    factorial,
    fibonacci,
    power,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DECIMAL_BASE",
    "DIGIT_CHARS",
    "MAX_DIGIT",
    # Numerical Safeguards — Exceptions
    "InvalidDigitInput",
    # Numerical Safeguards — Validation
    "is_digit_string",
    "validate_digit_string",
    "validate_non_negative_int",
    # BigDecimal — Types
    "BigDecimal",
    # BigDecimal — Exceptions
    "SubtractionUnderflow",
    # BigDecimal — Functions
    "add",
    "add_assign",
    "compare",
    "mul",
    "mul_assign",
    "sub",
    "sub_assign",
    # Sequences
    "factorial",
    "fibonacci",
    "power",
]
