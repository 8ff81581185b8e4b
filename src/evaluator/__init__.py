"""Evaluator — выполнение вычислительных заданий над BigDecimal.

- JobRunner с проверкой лимитов аргументов
- Конфигурация лимитов (JobLimits)
"""

from .job_runner import (
    JobLimitExceeded,
    JobLimits,
    JobRunner,
    evaluate_job,
)

__all__ = [
    "JobRunner",
    "JobLimits",
    "JobLimitExceeded",
    "evaluate_job",
]
