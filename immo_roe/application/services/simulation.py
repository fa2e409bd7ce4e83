"""Property return-on-equity simulation.

Year-by-year ledger for a single purchase: rent, maintenance, AfA,
financing, income tax, value roll-forward and an optional sale, reduced
to KPIs at the end. A run is a pure function of its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Mapping, Optional, Union

from immo_roe.core.constants import DISAGIO_EPSILON, MONTHS_PER_YEAR, SPECULATION_PERIOD_YEARS
from immo_roe.core.logging import get_logger
from immo_roe.domain.calculator.acquisition import calculate_acquisition
from immo_roe.domain.calculator.amortization import LoanSchedule, LoanState
from immo_roe.domain.calculator.depreciation import afa_rate
from immo_roe.domain.calculator.kpis import calculate_kpis
from immo_roe.domain.models.inputs import SaleMode, SimulationInputs
from immo_roe.domain.models.results import SimulationResult, YearRecord

log = get_logger(__name__)


@dataclass(frozen=True)
class RunningState:
    """Accumulators carried from one year to the next."""

    loan: LoanState
    cumulative_cf: float
    land_value: float
    building_value: float
    sale_year: Optional[int] = None
    capital_gains_tax: float = 0.0

    @property
    def sold(self) -> bool:
        return self.sale_year is not None


@dataclass(frozen=True)
class SaleOutcome:
    """Liquidation figures of the sale year."""

    gross: float
    capital_gain: float
    capital_gains_tax: float
    debt_repaid: float

    @property
    def net(self) -> float:
        return self.gross - self.debt_repaid - self.capital_gains_tax


def calculate_sale(
    property_value: float,
    selling_cost_rate: float,
    purchase_cost_basis: float,
    income_tax_rate: float,
    sale_year: int,
    remaining_debt: float,
) -> SaleOutcome:
    """Liquidate the property in `sale_year`.

    Gains are taxed at the income tax rate only inside the speculation
    period. Proceeds are assumed to cover the remaining debt.
    """
    gross = property_value * (1.0 - selling_cost_rate)
    gain = gross - purchase_cost_basis
    if sale_year <= SPECULATION_PERIOD_YEARS and gain > 0:
        cgt = gain * income_tax_rate
    else:
        cgt = 0.0
    return SaleOutcome(gross=gross, capital_gain=gain, capital_gains_tax=cgt, debt_repaid=remaining_debt)


class SimulationEngine:
    """Simulation of one input set.

    Build one engine per run; `run()` folds `step()` over the horizon.
    """

    def __init__(self, inputs: SimulationInputs):
        self.inputs = inputs
        self.meta = calculate_acquisition(inputs)
        self.schedule = LoanSchedule(
            loan_amount=self.meta.loan_amount,
            rate1=inputs.interest_rate1,
            term1=inputs.loan_term_years1,
            rate2=inputs.interest_rate2,
            term2=inputs.loan_term_years2,
        )
        self.start_year = inputs.start_year if inputs.start_year is not None else date.today().year

    def initial_state(self) -> RunningState:
        return RunningState(
            loan=self.schedule.initial_state(),
            cumulative_cf=0.0,
            land_value=self.inputs.land_value,
            building_value=self.inputs.building_value + self.inputs.fitting_up,
        )

    def _operating(self, year: int) -> tuple[float, float, float, float]:
        """Gross rent, net rent, maintenance and AfA for `year` (costs negative)."""
        p = self.inputs
        gross_rent = p.monthly_rent * MONTHS_PER_YEAR * (1.0 + p.rent_growth) ** (year - 1)
        net_rent = gross_rent * (1.0 - p.vacancy_rate)

        if year == 1:
            maintenance = -(p.annual_maintenance + p.initial_repairs)
        else:
            maintenance = -p.annual_maintenance * (1.0 + p.maintenance_growth) ** (year - 1)

        depreciation = -self.meta.afa_basis * afa_rate(p.afa_model, year, p.building_lifetime_years)
        return gross_rent, net_rent, maintenance, depreciation

    def _sale_due(self, state: RunningState, year: int) -> bool:
        return self.inputs.sells and not state.sold and year == self.inputs.sale_year

    def step(self, state: RunningState, year: int) -> tuple[YearRecord, RunningState]:
        """Compute `year` from the previous year's state.

        Returns:
            Tuple of (YearRecord, next RunningState)
        """
        p = self.inputs
        gross_rent, net_rent, maintenance, depreciation = self._operating(year)

        loan_year, loan = self.schedule.step(state.loan, year)
        interest = -loan_year.interest
        principal = -loan_year.principal

        taxable = net_rent + maintenance + interest + depreciation
        if year == 1 and abs(self.meta.disagio) > DISAGIO_EPSILON:
            taxable -= self.meta.disagio
        tax_cash = -p.income_tax_rate * taxable

        cash_before_tax = net_rent + maintenance + interest + principal
        cash_after_tax = cash_before_tax + tax_cash

        land_value = state.land_value * (1.0 + p.land_growth_rate)
        building_value = state.building_value * (
            1.0 - p.building_loss_rate + p.construction_cost_growth
        )
        property_value = land_value + building_value

        sale_year, cgt, sale_net = state.sale_year, state.capital_gains_tax, 0.0
        if self._sale_due(state, year):
            sale = calculate_sale(
                property_value,
                p.selling_cost_rate,
                self.meta.purchase_cost_basis,
                p.income_tax_rate,
                year,
                loan.remaining_debt,
            )
            loan = loan.settle()
            sale_year, cgt, sale_net = year, sale.capital_gains_tax, sale.net
            cash_after_tax += sale_net
            log.info("sale_executed", year=year, gross=round(sale.gross, 2),
                     capital_gain=round(sale.capital_gain, 2), capital_gains_tax=round(cgt, 2),
                     debt_repaid=round(sale.debt_repaid, 2))

        if loan.phase is not state.loan.phase:
            log.debug("loan_phase_changed", year=year, phase=loan.phase.value,
                      remaining_debt=round(state.loan.remaining_debt, 2))

        if sale_year is not None:
            property_value = 0.0

        cumulative_cf = state.cumulative_cf + cash_after_tax
        wealth = cumulative_cf + loan.cumulative_principal

        record = YearRecord(
            year=year,
            calendar_year=self.start_year + year - 1,
            remaining_debt=loan.remaining_debt,
            interest_paid=loan_year.interest,
            principal_paid=loan_year.principal,
            gross_rent=gross_rent,
            net_rent=net_rent,
            maintenance=maintenance,
            depreciation=depreciation,
            taxable_result=taxable,
            tax_cash=tax_cash,
            cash_before_tax=cash_before_tax,
            cash_after_tax=cash_after_tax,
            cumulative_cash_flow=cumulative_cf,
            property_value=property_value,
            wealth_from_cf_and_loan=wealth,
            equity_position=property_value + wealth - self.meta.total_investment,
            sale_net_proceeds=sale_net,
        )
        next_state = replace(
            state,
            loan=loan,
            cumulative_cf=cumulative_cf,
            land_value=land_value,
            building_value=building_value,
            sale_year=sale_year,
            capital_gains_tax=cgt,
        )
        return record, next_state

    def run(self) -> SimulationResult:
        """Simulate every year of the horizon and aggregate KPIs."""
        p = self.inputs
        horizon = p.horizon_years
        log.debug("simulation_started", horizon=horizon, sells=p.sells,
                  afa_model=p.afa_model.value, loan_amount=round(self.meta.loan_amount, 2))

        if p.sale_mode == SaleMode.SELL and (p.sale_year is None or not 1 <= p.sale_year <= horizon):
            log.warning("sale_year_outside_horizon", sale_year=p.sale_year, horizon=horizon)

        state = self.initial_state()
        records = []
        annuity2 = 0.0
        for year in range(1, horizon + 1):
            record, state = self.step(state, year)
            records.append(record)
            if state.loan.annuity2 is not None:
                annuity2 = state.loan.annuity2

        kpis = calculate_kpis(
            records,
            equity=p.equity,
            alt_return_before_tax=p.alt_return_before_tax,
            alt_tax_rate=p.alt_tax_rate,
            sale_year=state.sale_year,
            capital_gains_tax=state.capital_gains_tax,
        )
        meta = replace(
            self.meta,
            annuity1=self.schedule.annuity1,
            annuity2=annuity2,
            start_year=self.start_year,
        )

        log.info("simulation_completed", years=horizon, total_profit=round(kpis.total_profit, 2),
                 roe_total=round(kpis.roe_total, 4), sold=kpis.sold)
        return SimulationResult(years=tuple(records), kpis=kpis, meta=meta)


def simulate(inputs: Union[SimulationInputs, Mapping[str, Any]]) -> SimulationResult:
    """Run one simulation.

    Args:
        inputs: SimulationInputs or a raw mapping (snake_case or form keys)

    Returns:
        SimulationResult with year ledger, KPIs and acquisition meta
    """
    if not isinstance(inputs, SimulationInputs):
        inputs = SimulationInputs.model_validate(inputs)
    return SimulationEngine(inputs).run()
