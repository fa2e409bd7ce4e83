"""Application services."""

from .scenarios import (
    ScenarioKind,
    ScenarioOffsets,
    compare_scenarios,
    derive_scenario_inputs,
    simulate_scenarios,
)
from .simulation import SimulationEngine, simulate

__all__ = [
    "SimulationEngine",
    "simulate",
    "ScenarioKind",
    "ScenarioOffsets",
    "derive_scenario_inputs",
    "simulate_scenarios",
    "compare_scenarios",
]
