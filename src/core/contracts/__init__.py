"""
Contract Validation Module

Модуль для валидации JSON контрактов заданий и результатов.
"""

from .validators import (
    ComputationJobValidator,
    ComputationResultValidator,
    ContractValidator,
    SchemaLoader,
    StrictIntegerValidator,
    validate_computation_job,
    validate_computation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "StrictIntegerValidator",
    "ContractValidator",
    "ComputationJobValidator",
    "ComputationResultValidator",
    # Functions
    "validate_computation_job",
    "validate_computation_result",
]
