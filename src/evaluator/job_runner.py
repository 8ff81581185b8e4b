"""Job Runner — выполнение вычислительных заданий над BigDecimal.

- Проверка аргументов задания против JobLimits
- Диспетчеризация по типу задания (factorial/power/fibonacci)
- Формирование JobResult с канонической строкой цифр
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel

from src.core.contracts import validate_computation_job
from src.core.domain.jobs import (
    FactorialJob,
    FibonacciJob,
    JobKind,
    JobResult,
    PowerDifferenceJob,
    PowerOfTwoJob,
    PowerSumJob,
    parse_job,
)
from src.core.math.big_decimal import BigDecimal, add_assign, sub_assign
from src.core.math.sequences import factorial, fibonacci, power

logger = logging.getLogger(__name__)


class JobLimitExceeded(ValueError):
    """Аргумент задания превышает лимит JobLimits."""

    pass


@dataclass(frozen=True)
class JobLimits:
    """Верхние границы аргументов заданий.

    Умножение в столбик квадратично по числу цифр, поэтому лимиты
    ограничивают время одного задания:
    - max_factorial_n: n для factorial
    - max_exponent: показатели степени для power_of_two/power_sum/power_difference
    - max_fibonacci_n: n для fibonacci
    """
    max_factorial_n: int = 2000
    max_exponent: int = 20000
    max_fibonacci_n: int = 20000


class JobRunner:
    """Выполнение заданий с проверкой лимитов.

    Examples:
        >>> runner = JobRunner()
        >>> runner.evaluate(PowerDifferenceJob(a=5, b=3)).value
        '24'
    """

    def __init__(self, limits: Optional[JobLimits] = None):
        """
        Args:
            limits: лимиты аргументов (default JobLimits())
        """
        self.limits = limits or JobLimits()

    def evaluate(self, job: BaseModel) -> JobResult:
        """Выполнение одного задания.

        Args:
            job: экземпляр модели задания (FactorialJob, PowerSumJob, ...)

        Returns:
            JobResult с результатом в десятичной записи

        Raises:
            JobLimitExceeded: если аргумент превышает лимит
            TypeError: если job не является моделью задания
        """
        self._check_limits(job)

        kind, value = self._compute(job)
        result = JobResult.from_big_decimal(kind, value)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Evaluated %s job %s: %d digits",
                kind.value,
                job.model_dump(exclude={"kind"}),
                result.digit_count,
            )
        return result

    def evaluate_payload(self, data: Any) -> JobResult:
        """Проверка контракта, разбор задания из dict/JSON и выполнение.

        Raises:
            jsonschema.ValidationError: если payload нарушает computation_job
            pydantic.ValidationError: если нарушен порядок a >= b
        """
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        validate_computation_job(data)
        return self.evaluate(parse_job(data))

    def evaluate_many(self, jobs: Iterable[BaseModel]) -> List[JobResult]:
        """Выполнение заданий по порядку; первая ошибка прерывает пакет."""
        return [self.evaluate(job) for job in jobs]

    def _compute(self, job: BaseModel) -> tuple[JobKind, BigDecimal]:
        if isinstance(job, FactorialJob):
            return JobKind.FACTORIAL, factorial(job.n)

        if isinstance(job, PowerOfTwoJob):
            return JobKind.POWER_OF_TWO, power(2, job.n)

        if isinstance(job, PowerSumJob):
            return JobKind.POWER_SUM, add_assign(power(2, job.a), power(2, job.b))

        if isinstance(job, PowerDifferenceJob):
            # a >= b гарантирован моделью, SubtractionUnderflow невозможен
            return JobKind.POWER_DIFFERENCE, sub_assign(power(2, job.a), power(2, job.b))

        if isinstance(job, FibonacciJob):
            return JobKind.FIBONACCI, fibonacci(job.n)

        raise TypeError(f"Unsupported job type: {type(job).__name__}")

    def _check_limits(self, job: BaseModel) -> None:
        if isinstance(job, FactorialJob):
            checks = [("n", job.n, self.limits.max_factorial_n)]
        elif isinstance(job, PowerOfTwoJob):
            checks = [("n", job.n, self.limits.max_exponent)]
        elif isinstance(job, (PowerSumJob, PowerDifferenceJob)):
            checks = [
                ("a", job.a, self.limits.max_exponent),
                ("b", job.b, self.limits.max_exponent),
            ]
        elif isinstance(job, FibonacciJob):
            checks = [("n", job.n, self.limits.max_fibonacci_n)]
        else:
            return

        for name, value, limit in checks:
            if value > limit:
                logger.warning(
                    "Rejected %s job: %s=%d exceeds limit %d", job.kind, name, value, limit
                )
                raise JobLimitExceeded(
                    f"{job.kind} argument {name}={value} exceeds limit {limit}"
                )


def evaluate_job(job: BaseModel, limits: Optional[JobLimits] = None) -> JobResult:
    """Выполнение одного задания с лимитами по умолчанию."""
    return JobRunner(limits).evaluate(job)
