"""
JSON Schema Contract Validators

Валидация payload заданий и результатов против JSON Schema контрактов
(Draft 2020-12) из contracts/schema/:
- computation_job.json    (запрос на вычисление)
- computation_result.json (результат вычисления)

Тип "integer" сужен до int Python (без bool и без целых float вроде 10.0),
чтобы вердикт схемы совпадал с моделями из src.core.domain.jobs, где
целые поля объявлены strict.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.validators import extend

# Корень проекта: 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR: Path = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


def _is_strict_integer(checker, instance) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema файлов с кэшем и meta-validation."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения (например, 'computation_job').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            StrictIntegerValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор payload против одной схемы из contracts/schema/."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = StrictIntegerValidator(_SCHEMA_LOADER.load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)


class ComputationJobValidator(ContractValidator):
    def __init__(self):
        super().__init__("computation_job")


class ComputationResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("computation_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_computation_job(data: Dict[str, Any]) -> None:
    """
    Валидация computation_job payload.

    Схема не проверяет порядок a >= b для power_difference: это делает
    модель PowerDifferenceJob.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ComputationJobValidator().validate(data)


def validate_computation_result(data: Dict[str, Any]) -> None:
    """
    Валидация computation_result payload.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ComputationResultValidator().validate(data)
