"""Numeric constants shared by the calculators.

Thresholds below which a value is treated as zero, and fixed parameters
of the simplified German rental-property tax model.
"""

# Rates with |r| below this are amortized straight-line
RATE_EPSILON = 1e-9

# Payout factor guard (1 - discount rate)
PAYOUT_EPSILON = 1e-9

# A loan balance at or below this is considered repaid
DEBT_EPSILON = 1e-6

# Disagio smaller than this is not booked as an expense
DISAGIO_EPSILON = 1e-6

# Capital gains on a sale up to this year are taxed (Spekulationsfrist)
SPECULATION_PERIOD_YEARS = 10

MONTHS_PER_YEAR = 12

# Values the original input form pre-fills (decimal rates)
FORM_DEFAULTS: dict[str, float | int | str] = {
    "gr_est_rate": 0.05,
    "makler_rate": 0.03,
    "grundbuch_rate": 0.005,
    "notary_rate": 0.015,
    "building_loss_rate": 0.01,
    "land_growth_rate": 0.005,
    "construction_cost_growth": 0.015,
    "maintenance_growth": 0.0125,
    "vacancy_rate": 0.05,
    "rent_growth": 0.01,
    "income_tax_rate": 0.30,
    "loan_term_years1": 30,
    "fix_rate_years1": 20,
    "interest_rate1": 0.035,
    "discount_rate": 0.0,
    "loan_term_years2": 10,
    "interest_rate2": 0.04,
    "selling_cost_rate": 0.03,
    "investment_horizon_years": 30,
    "alt_return_before_tax": 0.06,
    "alt_tax_rate": 0.26,
    "afa_model": "Linear 2%",
    "building_lifetime_years": 50,
}
