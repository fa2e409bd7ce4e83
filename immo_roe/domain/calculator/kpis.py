"""KPI aggregation.

Reduces the year ledger to return-on-equity metrics and compares them
with a simple compounding alternative investment over the same period.
"""

from __future__ import annotations

from typing import Optional, Sequence

from immo_roe.domain.models.results import KpiSummary, YearRecord


def alternative_investment(
    equity: float,
    return_before_tax: float,
    tax_rate: float,
    years: int,
) -> tuple[float, float, float]:
    """Compound equity at the after-tax benchmark return.

    Returns:
        Tuple of (after-tax return, end value, profit)
    """
    after_tax = return_before_tax * (1.0 - tax_rate)
    end_value = equity * (1.0 + after_tax) ** years
    return after_tax, end_value, end_value - equity


def annualize(roe_total: float, years: int) -> float:
    """Geometric annual return for a total return over `years`.

    A total loss of equity or worse (1 + roe <= 0) annualizes to -100%.
    """
    if years <= 0:
        return 0.0
    base = 1.0 + roe_total
    if base <= 0:
        return -1.0
    return base ** (1.0 / years) - 1.0


def calculate_kpis(
    years: Sequence[YearRecord],
    *,
    equity: float,
    alt_return_before_tax: float,
    alt_tax_rate: float,
    sale_year: Optional[int] = None,
    capital_gains_tax: float = 0.0,
) -> KpiSummary:
    """Aggregate the ledger into a KpiSummary.

    Args:
        years: Year records in order (at least one)
        equity: Own capital invested
        alt_return_before_tax: Benchmark return before tax
        alt_tax_rate: Benchmark tax rate
        sale_year: Year the sale fired, None for hold
        capital_gains_tax: Tax paid on the sale

    Returns:
        KpiSummary with zero-guarded ratios for equity == 0
    """
    final = years[-1]
    horizon = len(years)
    sold = sale_year is not None
    years_used = min(sale_year, horizon) if sold else horizon

    total_profit = final.equity_position
    if equity:
        roe_total = total_profit / equity
        roe_annualized = annualize(roe_total, years_used)
        equity_multiple = (equity + total_profit) / equity
    else:
        roe_total = roe_annualized = equity_multiple = 0.0

    alt_after_tax, alt_end_value, alt_profit = alternative_investment(
        equity, alt_return_before_tax, alt_tax_rate, years_used
    )

    sale_net = sum(r.sale_net_proceeds for r in years) if sold else 0.0

    return KpiSummary(
        years_used=years_used,
        total_profit=total_profit,
        roe_total=roe_total,
        roe_annualized=roe_annualized,
        equity_multiple=equity_multiple,
        property_value_end=final.property_value,
        remaining_debt_end=final.remaining_debt,
        alt_after_tax_return=alt_after_tax,
        alt_end_value=alt_end_value,
        alt_profit=alt_profit,
        profit_vs_alternative=total_profit - alt_profit,
        sold=sold,
        sale_year=sale_year,
        sale_net_proceeds=sale_net,
        capital_gains_tax=capital_gains_tax,
    )
