"""
Jobs — Модели вычислительных заданий и их результатов

Immutable Pydantic модели для пяти вычислений над BigDecimal:
- factorial:        n!
- power_of_two:     2^n
- power_sum:        2^a + 2^b
- power_difference: 2^a - 2^b (требуется a >= b)
- fibonacci:        F(n)

Задания разбираются из dict/JSON через discriminated union по полю kind.

Модели и JSON Schema (contracts/schema/computation_job.json,
contracts/schema/computation_result.json) отвергают одни и те же payload:
лишние поля запрещены (extra="forbid" / additionalProperties: false),
целые строгие (10.0, True, "10" не принимаются ни моделью, ни схемой).
Порядок a >= b для power_difference проверяет только модель.
"""

from enum import Enum
from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from src.core.math.big_decimal import BigDecimal

# Сообщение при нарушении порядка аргументов power_difference
POWER_DIFFERENCE_ORDER_MESSAGE: Final[str] = (
    "The first number should be greater or equal than the second number!"
)

# Каноническая строка цифр результата: без ведущих нулей
CANONICAL_DIGITS_PATTERN: Final[str] = "^(0|[1-9][0-9]*)$"


# =============================================================================
# ENUMS
# =============================================================================


class JobKind(str, Enum):
    """Тип вычислительного задания"""

    FACTORIAL = "factorial"
    POWER_OF_TWO = "power_of_two"
    POWER_SUM = "power_sum"
    POWER_DIFFERENCE = "power_difference"
    FIBONACCI = "fibonacci"


# =============================================================================
# JOB MODELS
# =============================================================================


class FactorialJob(BaseModel):
    """Задание: n!"""

    kind: Literal["factorial"] = "factorial"
    n: int = Field(..., ge=0, strict=True, description="Аргумент факториала")

    model_config = {"frozen": True, "extra": "forbid"}


class PowerOfTwoJob(BaseModel):
    """Задание: 2^n"""

    kind: Literal["power_of_two"] = "power_of_two"
    n: int = Field(..., ge=0, strict=True, description="Показатель степени")

    model_config = {"frozen": True, "extra": "forbid"}


class PowerSumJob(BaseModel):
    """Задание: 2^a + 2^b"""

    kind: Literal["power_sum"] = "power_sum"
    a: int = Field(..., ge=0, strict=True, description="Показатель первого слагаемого")
    b: int = Field(..., ge=0, strict=True, description="Показатель второго слагаемого")

    model_config = {"frozen": True, "extra": "forbid"}


class PowerDifferenceJob(BaseModel):
    """
    Задание: 2^a - 2^b.

    Результат неотрицателен только при a >= b, поэтому порядок проверяется
    на этапе валидации, до вычитания.
    """

    kind: Literal["power_difference"] = "power_difference"
    a: int = Field(..., ge=0, strict=True, description="Показатель уменьшаемого")
    b: int = Field(..., ge=0, strict=True, description="Показатель вычитаемого")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("b")
    @classmethod
    def validate_order(cls, v: int, info) -> int:
        """Проверка, что a >= b"""
        if "a" in info.data and info.data["a"] < v:
            raise ValueError(POWER_DIFFERENCE_ORDER_MESSAGE)
        return v


class FibonacciJob(BaseModel):
    """Задание: F(n), F(0) = 0, F(1) = 1"""

    kind: Literal["fibonacci"] = "fibonacci"
    n: int = Field(..., ge=0, strict=True, description="Номер числа Фибоначчи")

    model_config = {"frozen": True, "extra": "forbid"}


ComputationJob = Annotated[
    Union[FactorialJob, PowerOfTwoJob, PowerSumJob, PowerDifferenceJob, FibonacciJob],
    Field(discriminator="kind"),
]

_JOB_ADAPTER: TypeAdapter = TypeAdapter(ComputationJob)


def parse_job(data: Any) -> BaseModel:
    """
    Разбор задания из dict (или JSON-строки) по полю kind.

    Args:
        data: dict с полем kind и аргументами, либо JSON-строка

    Returns:
        Экземпляр одной из моделей заданий

    Raises:
        pydantic.ValidationError: Если kind неизвестен или аргументы невалидны
    """
    if isinstance(data, (str, bytes)):
        return _JOB_ADAPTER.validate_json(data)
    return _JOB_ADAPTER.validate_python(data)


# =============================================================================
# RESULT MODEL
# =============================================================================


class JobResult(BaseModel):
    """
    Результат вычислительного задания.

    Immutable модель (frozen=True). value — каноническая строка цифр
    (старшая цифра первой, без ведущих нулей).
    """

    kind: JobKind = Field(..., description="Тип выполненного задания")
    value: str = Field(
        ..., pattern=CANONICAL_DIGITS_PATTERN, description="Результат в десятичной записи"
    )
    digit_count: int = Field(..., ge=1, strict=True, description="Количество цифр результата")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("digit_count")
    @classmethod
    def validate_digit_count(cls, v: int, info) -> int:
        """Проверка, что digit_count == len(value)"""
        if "value" in info.data and len(info.data["value"]) != v:
            raise ValueError(
                f"digit_count {v} does not match value length {len(info.data['value'])}"
            )
        return v

    @classmethod
    def from_big_decimal(cls, kind: JobKind, value: BigDecimal) -> "JobResult":
        """Построение результата из BigDecimal."""
        text = value.to_digit_string()
        return cls(kind=kind, value=text, digit_count=len(text))

    def to_big_decimal(self) -> BigDecimal:
        return BigDecimal.from_digit_string(self.value)
