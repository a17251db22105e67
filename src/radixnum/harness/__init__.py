"""
Scenario harness.

Runs literal arithmetic scenarios (operands, operation, expected string)
against the public value API.
"""

from radixnum.harness.scenarios import (
    ArithmeticScenario,
    ElementKind,
    Operation,
    Representation,
    ScenarioResult,
    load_reference_scenarios,
    load_scenarios,
    run_scenario,
    run_scenarios,
)

__all__ = [
    # Enums
    "ElementKind",
    "Operation",
    "Representation",
    # Models
    "ArithmeticScenario",
    "ScenarioResult",
    # Functions
    "load_reference_scenarios",
    "load_scenarios",
    "run_scenario",
    "run_scenarios",
]
