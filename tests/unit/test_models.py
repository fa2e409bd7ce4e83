"""Unit tests for immo_roe.domain.models."""

import json

import pytest
from pydantic import ValidationError

from immo_roe.application.services.simulation import simulate
from immo_roe.core.constants import FORM_DEFAULTS
from immo_roe.domain.calculator.depreciation import AfaModel
from immo_roe.domain.models import SaleMode, SimulationInputs


class TestSimulationInputs:
    """Tests for the SimulationInputs pydantic model."""

    def test_form_keys(self, golden_inputs):
        assert golden_inputs.building_value == 200_000
        assert golden_inputs.gr_est_rate == 0.05
        assert golden_inputs.makler_rate == 0.03
        assert golden_inputs.grundbuch_rate == 0.005
        assert golden_inputs.loan_term_years1 == 30
        assert golden_inputs.interest_rate1 == 0.035
        assert golden_inputs.investment_horizon_years == 30

    def test_snake_case_names(self):
        inputs = SimulationInputs(gr_est_rate=0.06, loan_term_years2=10)
        assert inputs.gr_est_rate == 0.06
        assert inputs.loan_term_years2 == 10

    def test_defaults(self):
        inputs = SimulationInputs()
        assert inputs.building_value == 0.0
        assert inputs.afa_model is AfaModel.LINEAR_2
        assert inputs.sale_mode is SaleMode.HOLD
        assert inputs.sale_year is None
        assert inputs.start_year is None

    def test_null_values_use_defaults(self):
        inputs = SimulationInputs.model_validate({"monthlyRent": None, "afaModel": None, "saleMode": None})
        assert inputs.monthly_rent == 0.0
        assert inputs.afa_model is AfaModel.LINEAR_2
        assert inputs.sale_mode is SaleMode.HOLD

    def test_unknown_afa_model(self):
        inputs = SimulationInputs.model_validate({"afaModel": "Sonder-AfA"})
        assert inputs.afa_model is AfaModel.FALLBACK_2

    def test_sale_mode_case_insensitive(self):
        inputs = SimulationInputs.model_validate({"saleMode": "SELL", "saleYear": 12})
        assert inputs.sale_mode is SaleMode.SELL
        assert inputs.sells

    def test_sell_without_year_does_not_sell(self):
        assert not SimulationInputs(sale_mode="sell").sells

    def test_invalid_sale_mode_rejected(self):
        with pytest.raises(ValidationError):
            SimulationInputs(sale_mode="rent-out")

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            SimulationInputs.model_validate({"buildingValue": "a lot"})

    def test_extra_fields_ignored(self):
        inputs = SimulationInputs.model_validate({"plz": "10115", "monthlyRent": 900})
        assert inputs.monthly_rent == 900
        assert not hasattr(inputs, "plz")

    @pytest.mark.parametrize("horizon, expected", [(0, 1), (-4, 1), (1, 1), (25.9, 25)])
    def test_horizon_floor(self, horizon, expected):
        assert SimulationInputs(investment_horizon_years=horizon).horizon_years == expected

    def test_side_cost_rate(self, golden_inputs):
        assert golden_inputs.side_cost_rate == pytest.approx(0.1)

    def test_frozen(self, golden_inputs):
        with pytest.raises(ValidationError):
            golden_inputs.equity = 1


class TestFormDefaults:
    """Pre-filled form values."""

    def test_defaults_applied(self):
        inputs = SimulationInputs.with_form_defaults()
        assert inputs.gr_est_rate == FORM_DEFAULTS["gr_est_rate"]
        assert inputs.interest_rate2 == 0.04
        assert inputs.fix_rate_years1 == 20
        assert inputs.building_lifetime_years == 50
        assert inputs.horizon_years == 30

    def test_overrides(self):
        inputs = SimulationInputs.with_form_defaults(monthly_rent=950, saleMode="sell", saleYear=12)
        assert inputs.monthly_rent == 950
        assert inputs.sale_mode is SaleMode.SELL
        assert inputs.sale_year == 12
        assert inputs.vacancy_rate == 0.05


class TestSimulationResult:
    """Export helpers of SimulationResult."""

    def test_to_frame(self, golden_inputs):
        df = simulate(golden_inputs).to_frame()
        assert len(df) == 30
        assert df.iloc[0]["Jahr"] == 1
        assert df.iloc[0]["Bruttomiete"] == pytest.approx(14_400)
        assert "Eigenkapitalposition" in df.columns

    def test_to_dict_is_json_serialisable(self, sale_inputs):
        payload = simulate(sale_inputs).to_dict()
        text = json.dumps(payload)
        assert set(payload) == {"years", "kpis", "meta"}
        assert len(payload["years"]) == 15
        assert payload["kpis"]["sale_year"] == 5
        assert "total_investment" in text

    def test_records_are_immutable(self, golden_inputs):
        record = simulate(golden_inputs).years[0]
        with pytest.raises(AttributeError):
            record.net_rent = 0
