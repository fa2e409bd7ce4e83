"""Simulation input model.

All rates are decimal fractions and all amounts are in one currency
unit. Field names are snake_case; the camelCase keys of the input form
(``buildingValue``, ``grEStRate``, ...) are accepted as aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from immo_roe.core.constants import FORM_DEFAULTS
from immo_roe.domain.calculator.depreciation import AfaModel


class SaleMode(str, Enum):
    """Exit strategy."""

    HOLD = "hold"
    SELL = "sell"


class SimulationInputs(BaseModel):
    """Inputs for one property simulation run.

    The model does not reject meaningless numbers (negative rates, a sale
    year outside the horizon); callers validate ranges themselves.
    """

    start_year: Optional[int] = Field(default=None, description="Calendar year of simulation year 1")

    # Acquisition
    building_value: float = Field(default=0.0, description="Building share of purchase price in €")
    land_value: float = Field(default=0.0, description="Land share of purchase price in €")
    gr_est_rate: float = Field(default=0.0, alias="grEStRate", description="Real estate transfer tax rate")
    makler_rate: float = Field(default=0.0, description="Broker fee rate")
    grundbuch_rate: float = Field(default=0.0, description="Land registry fee rate")
    notary_rate: float = Field(default=0.0, description="Notary fee rate")
    company_cost: float = Field(default=0.0, description="Fixed company/admin cost in €")
    fitting_up: float = Field(default=0.0, description="Fit-up cost in €")
    initial_repairs: float = Field(default=0.0, description="Initial repairs in € (expensed in year 1)")

    # Value dynamics
    building_loss_rate: float = Field(default=0.0, description="Annual physical loss of building value")
    land_growth_rate: float = Field(default=0.0, description="Annual land value growth")
    construction_cost_growth: float = Field(default=0.0, description="Annual construction cost growth")

    # Operating
    annual_maintenance: float = Field(default=0.0, description="Year-1 maintenance in €")
    maintenance_growth: float = Field(default=0.0, description="Annual maintenance growth")

    # Income
    sqm: float = Field(default=0.0, description="Living area in m² (informational)")
    monthly_rent: float = Field(default=0.0, description="Year-1 monthly cold rent in €")
    vacancy_rate: float = Field(default=0.0, description="Share of rent lost to vacancy")
    rent_growth: float = Field(default=0.0, description="Annual rent growth")

    # Tax
    income_tax_rate: float = Field(default=0.0, description="Marginal income tax rate")

    # Financing
    equity: float = Field(default=0.0, description="Own capital in €")
    loan_term_years1: float = Field(default=0.0, description="Loan 1 amortization term in years")
    fix_rate_years1: float = Field(default=0.0, description="Loan 1 fixed-rate period (informational)")
    interest_rate1: float = Field(default=0.0, description="Loan 1 annual interest rate")
    discount_rate: float = Field(default=0.0, description="Disagio as share of loan 1 face amount")
    loan_term_years2: float = Field(default=0.0, description="Follow-up loan term in years")
    interest_rate2: float = Field(default=0.0, description="Follow-up loan annual interest rate")

    # Exit
    selling_cost_rate: float = Field(default=0.0, description="Selling costs as share of sale price")
    sale_mode: SaleMode = Field(default=SaleMode.HOLD, description="hold or sell")
    sale_year: Optional[int] = Field(default=None, description="Simulation year of the sale")

    # Horizon
    investment_horizon_years: float = Field(default=0.0, description="Years to simulate (min 1)")

    # Alternative investment
    alt_return_before_tax: float = Field(default=0.0, description="Benchmark return before tax")
    alt_tax_rate: float = Field(default=0.0, description="Tax rate on benchmark return")

    # Depreciation
    afa_model: AfaModel = Field(default=AfaModel.LINEAR_2, description="AfA policy")
    building_lifetime_years: float = Field(default=0.0, description="Lifetime for 1/remaining-life AfA")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_missing(cls, data: Any) -> Any:
        # null/undefined form values fall back to field defaults
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("afa_model", mode="before")
    @classmethod
    def _coerce_afa_model(cls, value: Any) -> AfaModel:
        return AfaModel(value)

    @field_validator("sale_mode", mode="before")
    @classmethod
    def _coerce_sale_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def horizon_years(self) -> int:
        """Simulated years, floored to 1."""
        return max(1, int(self.investment_horizon_years))

    @property
    def side_cost_rate(self) -> float:
        """Sum of the four transaction cost rates."""
        return self.gr_est_rate + self.makler_rate + self.grundbuch_rate + self.notary_rate

    @property
    def sells(self) -> bool:
        """True if a sale is configured (it may still never fire)."""
        return self.sale_mode == SaleMode.SELL and self.sale_year is not None

    @classmethod
    def with_form_defaults(cls, **overrides: Any) -> SimulationInputs:
        """Build inputs from the input form's pre-filled defaults.

        Keyword arguments (snake_case or camelCase) override the defaults.
        """
        return cls.model_validate({**FORM_DEFAULTS, **overrides})
