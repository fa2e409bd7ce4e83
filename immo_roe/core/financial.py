"""Financial calculation functions.

Annual annuity maths for the loan scheduler.
"""

from __future__ import annotations

import numpy_financial as npf

from .constants import RATE_EPSILON


def calculate_annuity(
    principal: float,
    annual_rate: float,
    term_years: float,
) -> float:
    """Calculate the fixed annual payment (interest + principal).

    Args:
        principal: Amount to amortize in €
        annual_rate: Annual interest rate as decimal (e.g., 0.035)
        term_years: Amortization term in years

    Returns:
        Annual payment in €. Straight-line (principal / term) for a
        near-zero rate, 0 when the term is not positive.
    """
    if term_years <= 0:
        return 0.0

    if abs(annual_rate) < RATE_EPSILON:
        return principal / term_years

    return float(-npf.pmt(annual_rate, term_years, principal))


def split_payment(
    remaining_debt: float,
    annual_rate: float,
    payment: float,
) -> tuple[float, float]:
    """Split one annual payment into (interest, principal).

    Principal is capped at the remaining debt so the balance never
    goes below zero.
    """
    interest = remaining_debt * annual_rate
    principal = min(payment - interest, remaining_debt)
    return interest, principal
