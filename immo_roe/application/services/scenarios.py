"""Base / optimistic / pessimistic scenario runs.

Variants are derived from the base inputs by fixed offsets on the
market and financing assumptions, then simulated concurrently. Runs
share no state, so each worker gets its own inputs and engine.
"""

from __future__ import annotations

import concurrent.futures
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import pandas as pd

from immo_roe.core.exceptions import InvalidParameterError, SimulationError
from immo_roe.core.logging import get_logger
from immo_roe.core.settings import get_settings
from immo_roe.domain.models.inputs import SimulationInputs
from immo_roe.domain.models.results import SimulationResult

from .simulation import simulate

log = get_logger(__name__)


class ScenarioKind(str, Enum):
    BASE = "base"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


@dataclass(frozen=True)
class ScenarioOffsets:
    """Absolute shifts (decimal) applied for the optimistic case.

    The pessimistic case applies the same shifts with opposite sign.
    """

    rent_growth: float = 0.005
    vacancy_rate: float = 0.02
    land_growth_rate: float = 0.005
    construction_cost_growth: float = 0.005
    interest_rate: float = 0.005


def derive_scenario_inputs(
    base: SimulationInputs,
    kind: ScenarioKind | str,
    offsets: ScenarioOffsets = ScenarioOffsets(),
) -> SimulationInputs:
    """Inputs for a scenario variant.

    Better case: higher growth, lower vacancy and rates. Vacancy and
    interest rates are floored at 0.
    """
    try:
        kind = ScenarioKind(kind)
    except ValueError:
        raise InvalidParameterError("kind", kind, "expected base, optimistic or pessimistic") from None

    if kind is ScenarioKind.BASE:
        return base.model_copy()

    sign = 1.0 if kind is ScenarioKind.OPTIMISTIC else -1.0
    return base.model_copy(update={
        "rent_growth": base.rent_growth + sign * offsets.rent_growth,
        "vacancy_rate": max(0.0, base.vacancy_rate - sign * offsets.vacancy_rate),
        "land_growth_rate": base.land_growth_rate + sign * offsets.land_growth_rate,
        "construction_cost_growth": base.construction_cost_growth + sign * offsets.construction_cost_growth,
        "interest_rate1": max(0.0, base.interest_rate1 - sign * offsets.interest_rate),
        "interest_rate2": max(0.0, base.interest_rate2 - sign * offsets.interest_rate),
    })


def simulate_scenarios(
    base: SimulationInputs,
    kinds: Iterable[ScenarioKind | str] = tuple(ScenarioKind),
    offsets: ScenarioOffsets = ScenarioOffsets(),
    max_workers: Optional[int] = None,
) -> dict[ScenarioKind, SimulationResult]:
    """Simulate several scenario variants in parallel.

    Args:
        base: Base case inputs
        kinds: Scenarios to run (default: all three)
        offsets: Shifts used to derive the variants
        max_workers: Thread count (default: settings.scenario_workers)

    Returns:
        Dict kind -> result, in the order of `kinds`
    """
    inputs: dict[ScenarioKind, SimulationInputs] = {}
    for k in kinds:
        variant = derive_scenario_inputs(base, k, offsets)
        inputs[ScenarioKind(k)] = variant
    n_workers = max_workers or get_settings().scenario_workers

    log.debug("scenario_runs_started", scenarios=[k.value for k in inputs], workers=n_workers)

    results: dict[ScenarioKind, SimulationResult] = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers=n_workers) as executor:
        future_to_kind = {executor.submit(simulate, inp): k for k, inp in inputs.items()}
        for future in concurrent.futures.as_completed(future_to_kind):
            kind = future_to_kind[future]
            try:
                results[kind] = future.result()
            except Exception as e:
                log.error("scenario_run_failed", scenario=kind.value, error=str(e))
                raise SimulationError(f"Scenario '{kind.value}' failed: {e}") from e

    return {k: results[k] for k in inputs}


def compare_scenarios(results: dict[ScenarioKind, SimulationResult]) -> pd.DataFrame:
    """Headline KPIs per scenario, one row each."""
    rows = []
    for kind, res in results.items():
        k = res.kpis
        rows.append({
            "Szenario": ScenarioKind(kind).value,
            "Gewinn gesamt": k.total_profit,
            "EK-Rendite gesamt": k.roe_total,
            "EK-Rendite p.a.": k.roe_annualized,
            "Equity Multiple": k.equity_multiple,
            "Immobilienwert Ende": k.property_value_end,
            "Restschuld Ende": k.remaining_debt_end,
            "Alternative Endwert": k.alt_end_value,
            "Vorteil ggü. Alternative": k.profit_vs_alternative,
        })
    return pd.DataFrame(rows).set_index("Szenario")
