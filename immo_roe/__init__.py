"""immo_roe - Real Estate Return-on-Equity Simulator

Year-by-year cash-flow projection and return metrics for a single
property purchase (financing, AfA depreciation, tax, optional sale).

Modules:
    - core: Exceptions, logging, settings and loan maths
    - domain: Input/result models and pure calculators
    - application: Simulation engine and scenario service
"""

__version__ = "1.2.0"

from immo_roe.application.services.simulation import simulate

__all__ = ["simulate", "__version__"]
