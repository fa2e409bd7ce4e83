"""Acquisition cost model.

Purchase price, transaction side costs, financing need, the loan face
amount grossed up for disagio, and the depreciation / capital-gains bases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from immo_roe.core.constants import PAYOUT_EPSILON
from immo_roe.domain.models.results import AcquisitionMeta

if TYPE_CHECKING:
    from immo_roe.domain.models.inputs import SimulationInputs


def gross_up_loan(financing_need: float, discount_rate: float) -> float:
    """Loan face amount whose payout after disagio covers the need.

    A payout factor of (almost) zero leaves the need unchanged.
    """
    payout_factor = 1.0 - discount_rate
    if abs(payout_factor) < PAYOUT_EPSILON:
        return financing_need
    return financing_need / payout_factor


def calculate_acquisition(inputs: SimulationInputs) -> AcquisitionMeta:
    """Derive the acquisition constants for a run.

    financing_need may be negative when equity exceeds the investment;
    it is not clamped.
    """
    purchase_price = inputs.building_value + inputs.land_value

    side_cost_rate = inputs.side_cost_rate
    side_costs_variable = purchase_price * side_cost_rate
    side_costs_total = side_costs_variable + inputs.company_cost

    total_investment = (
        purchase_price
        + inputs.fitting_up
        + inputs.initial_repairs
        + side_costs_total
    )
    financing_need = total_investment - inputs.equity

    loan_amount = gross_up_loan(financing_need, inputs.discount_rate)
    disagio = loan_amount - financing_need

    # Side costs attributable to the building are depreciable
    building_share = inputs.building_value / purchase_price if purchase_price else 0.0
    building_side_costs = side_costs_variable * building_share

    return AcquisitionMeta(
        purchase_price=purchase_price,
        side_cost_rate=side_cost_rate,
        side_costs_variable=side_costs_variable,
        side_costs_total=side_costs_total,
        total_investment=total_investment,
        financing_need=financing_need,
        loan_amount=loan_amount,
        disagio=disagio,
        afa_basis=inputs.building_value + inputs.fitting_up + building_side_costs,
        purchase_cost_basis=purchase_price + inputs.fitting_up + building_side_costs,
        horizon_years=inputs.horizon_years,
        fix_rate_years1=inputs.fix_rate_years1,
    )
