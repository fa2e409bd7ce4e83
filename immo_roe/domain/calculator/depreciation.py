"""AfA (Absetzung für Abnutzung) depreciation policies.

Each policy maps (year, building lifetime) to the share of the
depreciation basis written off in that year.
"""

from __future__ import annotations

from enum import Enum

# Degressive phase length for the "Degressive 5%+..." models
DEGRESSIVE_YEARS = 6
DEGRESSIVE_RATE = 0.05


class AfaModel(str, Enum):
    """Named depreciation policy."""

    LINEAR_2 = "Linear 2%"
    LINEAR_3 = "Linear 3%"
    DEGRESSIVE_5_LINEAR_2 = "Degressive 5%+Linear 2%"
    DEGRESSIVE_5_LINEAR_3 = "Degressive 5%+Linear 3%"
    LINEAR_LIFETIME = "Linear 1/remaining-life"
    # Unrecognised model names: 2% every year, no end
    FALLBACK_2 = "Fallback 2%"

    @classmethod
    def _missing_(cls, value: object) -> "AfaModel":
        return cls.FALLBACK_2

    def rate(self, year: int, lifetime_years: float = 0) -> float:
        """Depreciation rate for a 1-based simulation year."""
        return _RATE_FUNCTIONS[self](year, lifetime_years)


def _linear(rate: float, last_year: int):
    def fn(year: int, lifetime_years: float) -> float:
        return rate if 1 <= year <= last_year else 0.0
    return fn


def _degressive_then(linear_rate: float):
    def fn(year: int, lifetime_years: float) -> float:
        return DEGRESSIVE_RATE if year <= DEGRESSIVE_YEARS else linear_rate
    return fn


def _remaining_life(year: int, lifetime_years: float) -> float:
    if lifetime_years <= 0:
        return 0.0
    return 1.0 / lifetime_years if 1 <= year <= lifetime_years else 0.0


def _flat_2(year: int, lifetime_years: float) -> float:
    return 0.02


_RATE_FUNCTIONS = {
    AfaModel.LINEAR_2: _linear(0.02, 50),
    AfaModel.LINEAR_3: _linear(0.03, 33),
    AfaModel.DEGRESSIVE_5_LINEAR_2: _degressive_then(0.02),
    AfaModel.DEGRESSIVE_5_LINEAR_3: _degressive_then(0.03),
    AfaModel.LINEAR_LIFETIME: _remaining_life,
    AfaModel.FALLBACK_2: _flat_2,
}


def afa_rate(model: AfaModel | str, year: int, lifetime_years: float = 0) -> float:
    """Depreciation rate for a model given by enum or display name.

    Args:
        model: AfaModel member or its display string
        year: Simulation year (1-based)
        lifetime_years: Building lifetime, used by LINEAR_LIFETIME only

    Returns:
        Rate as decimal (e.g., 0.02)
    """
    return AfaModel(model).rate(year, lifetime_years)
