"""Simulation result records.

Immutable outputs of a run: one YearRecord per simulated year, the
derived acquisition constants and the KPI summary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

import pandas as pd


@dataclass(frozen=True)
class YearRecord:
    """Single year of the simulation ledger.

    Cash outflows (maintenance, depreciation, interest, principal) are
    negative; tax_cash is positive for a tax saving.
    """

    year: int
    calendar_year: int
    remaining_debt: float
    interest_paid: float
    principal_paid: float
    gross_rent: float
    net_rent: float
    maintenance: float
    depreciation: float
    taxable_result: float
    tax_cash: float
    cash_before_tax: float
    cash_after_tax: float
    cumulative_cash_flow: float
    property_value: float
    wealth_from_cf_and_loan: float
    equity_position: float
    sale_net_proceeds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "Jahr": self.year,
            "Kalenderjahr": self.calendar_year,
            "Restschuld": self.remaining_debt,
            "Zinsen": self.interest_paid,
            "Tilgung": self.principal_paid,
            "Bruttomiete": self.gross_rent,
            "Nettomiete": self.net_rent,
            "Instandhaltung": self.maintenance,
            "AfA": self.depreciation,
            "Steuerliches Ergebnis": self.taxable_result,
            "Steuereffekt": self.tax_cash,
            "Cashflow vor Steuern": self.cash_before_tax,
            "Cashflow nach Steuern": self.cash_after_tax,
            "Kumulierter Cashflow": self.cumulative_cash_flow,
            "Immobilienwert": self.property_value,
            "Vermögen aus CF und Tilgung": self.wealth_from_cf_and_loan,
            "Eigenkapitalposition": self.equity_position,
            "Verkaufserlös netto": self.sale_net_proceeds,
        }


@dataclass(frozen=True)
class AcquisitionMeta:
    """Derived acquisition and financing constants."""

    purchase_price: float
    side_cost_rate: float
    side_costs_variable: float
    side_costs_total: float
    total_investment: float
    financing_need: float
    loan_amount: float
    disagio: float
    afa_basis: float
    purchase_cost_basis: float
    annuity1: float = 0.0
    annuity2: float = 0.0
    start_year: int = 0
    horizon_years: int = 1
    fix_rate_years1: float = 0.0


@dataclass(frozen=True)
class KpiSummary:
    """Return metrics reduced from the year ledger."""

    years_used: int
    total_profit: float
    roe_total: float
    roe_annualized: float
    equity_multiple: float
    property_value_end: float
    remaining_debt_end: float
    alt_after_tax_return: float
    alt_end_value: float
    alt_profit: float
    profit_vs_alternative: float
    sold: bool = False
    sale_year: Optional[int] = None
    sale_net_proceeds: float = 0.0
    capital_gains_tax: float = 0.0


@dataclass(frozen=True)
class SimulationResult:
    """Full output of one simulation run."""

    years: tuple[YearRecord, ...]
    kpis: KpiSummary
    meta: AcquisitionMeta

    def to_frame(self) -> pd.DataFrame:
        """Year ledger as a DataFrame, one row per year."""
        return pd.DataFrame([r.to_dict() for r in self.years])

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable representation."""
        return {
            "years": [asdict(r) for r in self.years],
            "kpis": asdict(self.kpis),
            "meta": asdict(self.meta),
        }
