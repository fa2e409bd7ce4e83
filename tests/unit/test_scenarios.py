"""Unit tests for the scenario service."""

import pytest

from immo_roe.application.services import scenarios
from immo_roe.application.services.scenarios import (
    ScenarioKind,
    ScenarioOffsets,
    compare_scenarios,
    derive_scenario_inputs,
    simulate_scenarios,
)
from immo_roe.core.exceptions import InvalidParameterError, SimulationError
from immo_roe.domain.models import SimulationInputs


@pytest.fixture
def form_inputs():
    return SimulationInputs.with_form_defaults(
        start_year=2025,
        building_value=250_000,
        land_value=90_000,
        fitting_up=10_000,
        equity=90_000,
        monthly_rent=1_400,
        annual_maintenance=2_500,
    )


class TestDeriveScenarioInputs:

    def test_base_unchanged(self, form_inputs):
        assert derive_scenario_inputs(form_inputs, ScenarioKind.BASE) == form_inputs

    def test_optimistic_offsets(self, form_inputs):
        opt = derive_scenario_inputs(form_inputs, "optimistic")
        assert opt.rent_growth == pytest.approx(0.015)
        assert opt.vacancy_rate == pytest.approx(0.03)
        assert opt.land_growth_rate == pytest.approx(0.01)
        assert opt.construction_cost_growth == pytest.approx(0.02)
        assert opt.interest_rate1 == pytest.approx(0.03)
        assert opt.interest_rate2 == pytest.approx(0.035)

    def test_pessimistic_offsets(self, form_inputs):
        pes = derive_scenario_inputs(form_inputs, ScenarioKind.PESSIMISTIC)
        assert pes.rent_growth == pytest.approx(0.005)
        assert pes.vacancy_rate == pytest.approx(0.07)
        assert pes.interest_rate1 == pytest.approx(0.04)

    def test_floors_at_zero(self):
        base = SimulationInputs(vacancy_rate=0.01, interest_rate1=0.002)
        opt = derive_scenario_inputs(base, ScenarioKind.OPTIMISTIC)
        assert opt.vacancy_rate == 0.0
        assert opt.interest_rate1 == 0.0

    def test_custom_offsets(self, form_inputs):
        offsets = ScenarioOffsets(rent_growth=0.01, vacancy_rate=0.0, land_growth_rate=0.0,
                                  construction_cost_growth=0.0, interest_rate=0.0)
        opt = derive_scenario_inputs(form_inputs, ScenarioKind.OPTIMISTIC, offsets)
        assert opt.rent_growth == pytest.approx(0.02)
        assert opt.interest_rate1 == form_inputs.interest_rate1

    def test_base_inputs_not_mutated(self, form_inputs):
        derive_scenario_inputs(form_inputs, ScenarioKind.PESSIMISTIC)
        assert form_inputs.rent_growth == 0.01

    def test_unknown_kind(self, form_inputs):
        with pytest.raises(InvalidParameterError):
            derive_scenario_inputs(form_inputs, "catastrophic")


class TestSimulateScenarios:

    def test_all_scenarios_in_order(self, form_inputs):
        results = simulate_scenarios(form_inputs, max_workers=3)
        assert list(results) == [ScenarioKind.BASE, ScenarioKind.OPTIMISTIC, ScenarioKind.PESSIMISTIC]

    def test_profit_ordering(self, form_inputs):
        results = simulate_scenarios(form_inputs)
        profit = {k: r.kpis.total_profit for k, r in results.items()}
        assert profit[ScenarioKind.OPTIMISTIC] > profit[ScenarioKind.BASE] > profit[ScenarioKind.PESSIMISTIC]

    def test_matches_sequential_runs(self, form_inputs):
        from immo_roe.application.services.simulation import simulate

        results = simulate_scenarios(form_inputs, max_workers=2)
        for kind, result in results.items():
            assert result == simulate(derive_scenario_inputs(form_inputs, kind))

    def test_subset(self, form_inputs):
        results = simulate_scenarios(form_inputs, kinds=["pessimistic"])
        assert list(results) == [ScenarioKind.PESSIMISTIC]

    def test_worker_failure_raises_simulation_error(self, form_inputs, monkeypatch):
        def boom(inputs):
            raise ZeroDivisionError("boom")

        monkeypatch.setattr(scenarios, "simulate", boom)
        with pytest.raises(SimulationError, match="failed"):
            simulate_scenarios(form_inputs, kinds=[ScenarioKind.BASE])


class TestCompareScenarios:

    def test_one_row_per_scenario(self, form_inputs):
        df = compare_scenarios(simulate_scenarios(form_inputs))
        assert list(df.index) == ["base", "optimistic", "pessimistic"]
        assert df.loc["optimistic", "Gewinn gesamt"] > df.loc["pessimistic", "Gewinn gesamt"]
        assert "EK-Rendite p.a." in df.columns
