"""Two-phase annuity loan scheduler.

Loan 1 amortizes the grossed-up loan amount at a fixed annuity. When its
term ends with debt left, an optional follow-up loan refinances the
residual balance at a new annuity fixed on entry. Phases only move
forward: LOAN1 -> LOAN2 -> REPAID.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
from enum import Enum
from typing import Optional

from immo_roe.core.constants import DEBT_EPSILON
from immo_roe.core.financial import calculate_annuity, split_payment


class LoanPhase(str, Enum):
    """Active financing phase of a run."""

    LOAN1 = "loan1"
    LOAN2 = "loan2"
    # No further payments: debt repaid or all terms exhausted
    REPAID = "repaid"


@dataclass(frozen=True)
class LoanState:
    """Loan part of the running state carried from year to year."""

    phase: LoanPhase
    remaining_debt: float
    cumulative_principal: float = 0.0
    annuity2: Optional[float] = None

    def settle(self) -> LoanState:
        """Debt repaid in full outside the schedule (sale)."""
        return replace(self, phase=LoanPhase.REPAID, remaining_debt=0.0)


@dataclass(frozen=True)
class LoanYear:
    """Payments of one year; all amounts positive."""

    phase: LoanPhase
    interest: float
    principal: float
    payment: float


@dataclass(frozen=True)
class LoanSchedule:
    """Fixed terms of the two loan phases."""

    loan_amount: float
    rate1: float
    term1: float
    rate2: float = 0.0
    term2: float = 0.0

    @cached_property
    def annuity1(self) -> float:
        return calculate_annuity(self.loan_amount, self.rate1, self.term1)

    def initial_state(self) -> LoanState:
        return LoanState(phase=LoanPhase.LOAN1, remaining_debt=self.loan_amount)

    def next_phase(self, state: LoanState, year: int) -> LoanPhase:
        """Phase governing `year`, given the state left by the previous year."""
        if state.phase is LoanPhase.REPAID or state.remaining_debt <= DEBT_EPSILON:
            return LoanPhase.REPAID
        if state.phase is LoanPhase.LOAN1 and year <= self.term1:
            return LoanPhase.LOAN1
        if self.term2 > 0 and year <= self.term1 + self.term2:
            return LoanPhase.LOAN2
        return LoanPhase.REPAID

    def step(self, state: LoanState, year: int) -> tuple[LoanYear, LoanState]:
        """Advance the loan by one year.

        Returns:
            Tuple of (payments for `year`, state after the payments)
        """
        phase = self.next_phase(state, year)

        if phase is LoanPhase.REPAID:
            return LoanYear(phase, 0.0, 0.0, 0.0), replace(state, phase=phase)

        annuity2 = state.annuity2
        if phase is LoanPhase.LOAN1:
            rate, payment = self.rate1, self.annuity1
        else:
            if annuity2 is None:
                # Refinance the residual balance once, on entry
                annuity2 = calculate_annuity(state.remaining_debt, self.rate2, self.term2)
            rate, payment = self.rate2, annuity2

        interest, principal = split_payment(state.remaining_debt, rate, payment)
        new_state = LoanState(
            phase=phase,
            remaining_debt=state.remaining_debt - principal,
            cumulative_principal=state.cumulative_principal + principal,
            annuity2=annuity2,
        )
        return LoanYear(phase, interest, principal, payment), new_state
