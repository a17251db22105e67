"""
Scenario contract validators

Документы арифметических сценариев проверяются по JSON Schema
(draft 2020-12) из каталога schema/ до загрузки в Pydantic модель.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и кэш схем из одного каталога."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема <schema_name>.json, проверенная мета-схемой draft 2020-12.

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Файл не является JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validator одной схемы из общего загрузчика."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises: ValidationError на первом нарушении схемы."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения в виде "путь: сообщение", упорядоченные по пути.

        Корень документа обозначается "$".
        """
        messages = []
        for error in self.iter_errors(data):
            path = "/".join(str(part) for part in error.absolute_path) or "$"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)


class ScenarioValidator(ContractValidator):
    """Validator для arithmetic_scenario.json."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("arithmetic_scenario", loader)


def validate_scenario(data: Dict[str, Any]) -> None:
    """
    Проверка документа сценария.

    Raises:
        ValidationError: Документ нарушает arithmetic_scenario.json
    """
    ScenarioValidator().validate(data)
