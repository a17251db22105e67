"""
Arithmetic Scenarios — прогон литеральных сценариев через публичный API

Сценарий: выбрать представление числа, построить его из первого операнда,
применить операцию к каждому следующему операнду и сравнить напечатанный
результат с ожидаемой строкой.

Документы сценариев проходят JSON Schema валидацию (arithmetic_scenario.json)
и затем загружаются в immutable Pydantic модель ArithmeticScenario.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator

from radixnum.core.contracts import ScenarioValidator
from radixnum.core.domain.word_types import NativeWord
from radixnum.core.math.digit_word import DigitWord
from radixnum.core.math.operations import (
    add_in_place,
    multiply_in_place,
    render,
    scalar_multiply_in_place,
)
from radixnum.core.math.word_sequence import WordSequence

logger = logging.getLogger(__name__)

REFERENCE_SCENARIOS_PATH = Path(__file__).parent / "reference_scenarios.json"


# =============================================================================
# ENUMS
# =============================================================================


class Representation(str, Enum):
    """Представление числа в сценарии"""

    DIGIT_WORD = "digit_word"
    WORD_SEQUENCE = "word_sequence"


class ElementKind(str, Enum):
    """Тип слова в WordSequence"""

    NATIVE = "native"
    DIGIT_WORD = "digit_word"


class Operation(str, Enum):
    """Операция, применяемая к каждому следующему операнду"""

    ADD = "add"
    SCALAR_MULTIPLY = "scalar_multiply"
    MULTIPLY = "multiply"


# =============================================================================
# MODELS
# =============================================================================


class ArithmeticScenario(BaseModel):
    """
    Арифметический сценарий.

    Immutable модель (frozen=True), совместимая с arithmetic_scenario.json.
    """

    name: str = Field(..., min_length=1, description="Имя сценария")
    description: Optional[str] = Field(None, description="Пояснение")
    representation: Representation = Field(..., description="DigitWord или WordSequence")
    word_bits: int = Field(..., description="Ширина машинного слова")
    base: int = Field(..., ge=2, le=36, description="Основание цифр и печати")
    element: Optional[ElementKind] = Field(None, description="Тип слова WordSequence")
    operation: Operation = Field(..., description="Операция над операндами")
    operands: List[int] = Field(..., min_length=2, description="Первый операнд и аргументы")
    expected: str = Field(..., min_length=1, description="Ожидаемая строка")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_element(self) -> "ArithmeticScenario":
        if self.representation == Representation.WORD_SEQUENCE:
            if self.element is None:
                raise ValueError("word_sequence scenarios need an element kind")
            if self.operation == Operation.MULTIPLY:
                raise ValueError("multiply is defined for digit words only")
        elif self.element is not None:
            raise ValueError("element applies to word_sequence scenarios only")
        return self

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "ArithmeticScenario":
        """
        Загрузка сценария из JSON документа.

        Raises:
            jsonschema.ValidationError: Если документ нарушает схему
        """
        validator = ScenarioValidator()
        problems = validator.error_messages(data)
        if problems:
            logger.warning(
                "Scenario document %s rejected: %s", data.get("name", "?"), "; ".join(problems)
            )
        validator.validate(data)
        return cls.model_validate(data)

    def number_type(self) -> type:
        """Класс числа, на котором выполняется сценарий."""
        word = NativeWord(bits=self.word_bits)
        if self.representation == Representation.DIGIT_WORD:
            return DigitWord.of(word, self.base)

        if self.element == ElementKind.NATIVE:
            return WordSequence.of(word)
        return WordSequence.of(DigitWord.of(word, self.base))


@dataclass(frozen=True)
class ScenarioResult:
    """Результат прогона сценария."""

    name: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


# =============================================================================
# RUNNER
# =============================================================================


def run_scenario(scenario: ArithmeticScenario) -> ScenarioResult:
    """
    Выполнение сценария.

    Args:
        scenario: Загруженный сценарий

    Returns:
        ScenarioResult с напечатанным значением
    """
    number_type = scenario.number_type()
    value = number_type(scenario.operands[0])

    for operand in scenario.operands[1:]:
        if scenario.operation == Operation.ADD:
            add_in_place(value, number_type(operand))
        elif scenario.operation == Operation.SCALAR_MULTIPLY:
            scalar_multiply_in_place(value, operand)
        else:
            multiply_in_place(value, number_type(operand))

    actual = render(value, scenario.base)
    logger.debug(
        "Scenario %s: %s %s %s -> %s",
        scenario.name,
        number_type.__name__,
        scenario.operation.value,
        scenario.operands,
        actual,
    )

    result = ScenarioResult(name=scenario.name, expected=scenario.expected, actual=actual)
    if not result.passed:
        logger.warning(
            "Scenario %s failed: expected %s, got %s", scenario.name, scenario.expected, actual
        )
    return result


def run_scenarios(scenarios: Iterable[ArithmeticScenario]) -> List[ScenarioResult]:
    return [run_scenario(scenario) for scenario in scenarios]


def load_scenarios(path: Path) -> List[ArithmeticScenario]:
    """
    Загрузка набора сценариев из JSON файла вида {"scenarios": [...]}.

    Raises:
        FileNotFoundError: Если файла нет
        jsonschema.ValidationError: Если сценарий нарушает схему
    """
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)

    return [ArithmeticScenario.from_document(item) for item in document["scenarios"]]


def load_reference_scenarios() -> List[ArithmeticScenario]:
    """Встроенные эталонные сценарии."""
    return load_scenarios(REFERENCE_SCENARIOS_PATH)
