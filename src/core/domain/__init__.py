"""
Domain models and value objects.

Contains computation jobs and their results.
"""

from src.core.domain.jobs import (
    CANONICAL_DIGITS_PATTERN,
    POWER_DIFFERENCE_ORDER_MESSAGE,
    ComputationJob,
    FactorialJob,
    FibonacciJob,
    JobKind,
    JobResult,
    PowerDifferenceJob,
    PowerOfTwoJob,
    PowerSumJob,
    parse_job,
)

__all__ = [
    # Jobs — Constants
    "CANONICAL_DIGITS_PATTERN",
    "POWER_DIFFERENCE_ORDER_MESSAGE",
    # Jobs — Types
    "JobKind",
    "ComputationJob",
    "FactorialJob",
    "PowerOfTwoJob",
    "PowerSumJob",
    "PowerDifferenceJob",
    "FibonacciJob",
    # Jobs — Results
    "JobResult",
    # Jobs — Functions
    "parse_job",
]
