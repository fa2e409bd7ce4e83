"""Data models for immo_roe."""

from .inputs import SaleMode, SimulationInputs
from .results import AcquisitionMeta, KpiSummary, SimulationResult, YearRecord

__all__ = [
    "SaleMode",
    "SimulationInputs",
    "AcquisitionMeta",
    "KpiSummary",
    "SimulationResult",
    "YearRecord",
]
