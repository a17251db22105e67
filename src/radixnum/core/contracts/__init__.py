"""
Contract Validation Module

Валидация JSON контрактов арифметических сценариев radixnum.
"""

from .validators import (
    ContractValidator,
    ScenarioValidator,
    SchemaLoader,
    validate_scenario,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ScenarioValidator",
    # Functions
    "validate_scenario",
]
